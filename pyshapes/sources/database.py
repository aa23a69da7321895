from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Union

from pyshapes.classes.shapes import Line, Polygon, ShapeBase
from pyshapes.misc.config import ShapeConfig
from pyshapes.sources.mission_data import MissionData

Shape = Union[Polygon, Line]


class ShapeDatabase:
    """
    Registry of named shapes for one mission.

    Usage:
        db = ShapeDatabase.from_mission(MissionData.from_json("mission.json"))
        sam_area = db.find_shape("SAM Area")
        if sam_area is not None:
            spawn = sam_area.get_random_point()
    """

    def __init__(self, config: Optional[ShapeConfig] = None):
        self.config = config or ShapeConfig()
        self.logger = self.config.make_logger("ShapeDatabase")
        self._shapes: Dict[str, Shape] = {}

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, name: str) -> bool:
        return name in self._shapes

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes.values())

    def add(self, shape: ShapeBase) -> Shape:
        if not shape.name:
            raise ValueError("Only named shapes can be registered")
        if shape.name in self._shapes:
            self.logger.warning(f"Replacing shape '{shape.name}'")
        self._shapes[shape.name] = shape
        return shape

    def remove(self, name: str) -> Optional[Shape]:
        return self._shapes.pop(name, None)

    def find_shape(self, name: str) -> Optional[Shape]:
        shape = self._shapes.get(name)
        if shape is None:
            self.logger.debug(f"Shape '{name}' not found")
        return shape

    def names(self) -> List[str]:
        return list(self._shapes)

    @classmethod
    def from_mission(cls, mission: Union[MissionData, Dict[str, Any]],
                     config: Optional[ShapeConfig] = None) -> "ShapeDatabase":
        """
        Register every drawing and polygonal zone of a mission.

        Closed lines and free-form polygons become Polygons, open lines
        become Lines, and zones with at least three vertices become
        Polygons. A zone sharing a drawing's name replaces it.
        """
        db = cls(config)
        data = mission if isinstance(mission, MissionData) else MissionData(mission)

        for obj in data.drawing_objects():
            if not obj.name or not obj.points or obj.name in db:
                continue
            if obj.is_closed_shape:
                shape = Polygon.find_on_map(obj.name, data, match="exact", config=db.config)
            elif obj.is_line:
                shape = Line.new(*obj.absolute_points(), name=obj.name, config=db.config)
            else:
                continue
            if shape is not None:
                db.add(shape)

        for zone in data.zones():
            if len(zone.vertices) >= 3:
                db.add(Polygon.new(*zone.vertices, name=zone.name, config=db.config))

        db.logger.info(f"Registered {len(db)} shapes")
        return db
