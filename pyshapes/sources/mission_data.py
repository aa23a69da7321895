"""
Read map drawings and trigger zones out of a parsed mission table.

The mission is accepted as the dictionary the mission file deserialises
to; only two branches of it are read:

    mission['drawings']['layers'][*]['objects'][*]
    mission['triggers']['zones'][*]

Lua-style tables arrive either as lists or as dicts keyed by 1-based
integers (or their string form once dumped to JSON). Both are accepted and
walked in key order.
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from pyshapes.misc.logger import create_logger
from pyshapes.misc.math_utils import Point2D, to_point2d


def _ordered_values(table: Union[List[Any], Dict[Any, Any], None]) -> List[Any]:
    """Return the values of a Lua-style array table in index order."""
    if table is None:
        return []
    if isinstance(table, dict):
        def sort_key(key):
            try:
                return (0, int(key))
            except (TypeError, ValueError):
                return (1, str(key))
        return [table[k] for k in sorted(table, key=sort_key)]
    return list(table)


@dataclass
class DrawingObject:
    """One object of a map drawing layer."""
    name: str
    primitive_type: Optional[str] = None  # e.g. "Line", "Polygon", "Icon"
    closed: bool = False
    polygon_mode: Optional[str] = None    # e.g. "free", "rect", "circle"
    map_x: float = 0.0
    map_y: float = 0.0
    points: List[Point2D] = field(default_factory=list)  # offsets from (map_x, map_y)
    layer: Optional[str] = None

    @property
    def is_closed_shape(self) -> bool:
        """Closed line or free-form polygon, i.e. something a Polygon can be built from."""
        return (self.primitive_type == "Line" and self.closed) or self.polygon_mode == "free"

    @property
    def is_line(self) -> bool:
        return self.primitive_type == "Line"

    def absolute_points(self) -> List[Point2D]:
        """Local points shifted by the object's map origin."""
        return [Point2D(self.map_x + p.x, self.map_y + p.y) for p in self.points]

    @classmethod
    def from_dict(cls, data: Dict[str, Any], layer: Optional[str] = None) -> "DrawingObject":
        try:
            points = [to_point2d(p) for p in _ordered_values(data.get("points"))]
        except TypeError as e:
            raise ValueError(f"Drawing object '{data.get('name')}' has malformed points: {e}") from e
        return cls(
            name=str(data.get("name", "")),
            primitive_type=data.get("primitiveType"),
            closed=bool(data.get("closed", False)),
            polygon_mode=data.get("polygonMode"),
            map_x=float(data.get("mapX", 0.0)),
            map_y=float(data.get("mapY", 0.0)),
            points=points,
            layer=layer,
        )


@dataclass
class Zone:
    """Trigger zone. Circular zones carry no vertices."""
    name: str
    vertices: List[Point2D] = field(default_factory=list)
    x: Optional[float] = None
    y: Optional[float] = None
    radius: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Zone":
        # The mission editor writes the misspelled key; accept both.
        raw = data.get("verticies", data.get("vertices"))
        try:
            vertices = [to_point2d(p) for p in _ordered_values(raw)]
        except TypeError as e:
            raise ValueError(f"Zone '{data.get('name')}' has malformed vertices: {e}") from e
        return cls(
            name=str(data.get("name", "")),
            vertices=vertices,
            x=data.get("x"),
            y=data.get("y"),
            radius=data.get("radius"),
        )


class MissionData:
    """
    Drawing and zone source backed by a mission table.

    Example:
        >>> data = MissionData.from_json("mission.json")
        >>> [obj.name for obj in data.drawing_objects()]
        ['SAM Area', 'Ingress']
    """

    def __init__(self, mission: Dict[str, Any], verbose: bool = False):
        self.mission = mission or {}
        self.logger = create_logger(verbose=verbose, name="MissionData")
        self._objects = self._load_drawing_objects()
        self._zones = self._load_zones()
        self.logger.info(f"Loaded {len(self._objects)} drawing objects and {len(self._zones)} zones")

    @classmethod
    def from_json(cls, path: Union[str, Path], verbose: bool = False) -> "MissionData":
        with open(path, "r", encoding="utf-8") as f:
            mission = json.load(f)
        # Full env dumps wrap the table in a "mission" key
        if "mission" in mission and "drawings" not in mission:
            mission = mission["mission"]
        return cls(mission, verbose=verbose)

    def _load_drawing_objects(self) -> List[DrawingObject]:
        drawings = self.mission.get("drawings") or {}
        objects = []
        for layer in _ordered_values(drawings.get("layers")):
            layer_name = layer.get("name")
            for obj in _ordered_values(layer.get("objects")):
                objects.append(DrawingObject.from_dict(obj, layer=layer_name))
        return objects

    def _load_zones(self) -> List[Zone]:
        triggers = self.mission.get("triggers") or {}
        return [Zone.from_dict(z) for z in _ordered_values(triggers.get("zones"))]

    def drawing_objects(self) -> Iterator[DrawingObject]:
        return iter(self._objects)

    def zones(self) -> Iterator[Zone]:
        return iter(self._zones)

    def find_zone(self, name: str) -> Optional[Zone]:
        for zone in self._zones:
            if zone.name == name:
                return zone
        return None
