"""
Example: pick random spawn points inside mission editor drawings.

Loads a JSON dump of a mission table (or a small built-in demo), registers
every drawn shape, validates the polygons and scatters a few spawn points
inside each one. Saves a map of the triangulated shapes when matplotlib is
installed.
"""
import os
import sys

# Add pyshapes to path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pyshapes import (
    MissionData,
    Polygon,
    PolygonValidator,
    Randomizer,
    ShapeConfig,
    ShapeDatabase,
    save_shape_map,
)

DEMO_MISSION = {
    "drawings": {
        "layers": [
            {
                "name": "Red",
                "objects": [
                    {
                        "name": "SAM Area",
                        "primitiveType": "Line",
                        "closed": True,
                        "mapX": -281000.0,
                        "mapY": 647000.0,
                        "points": [
                            {"x": 0, "y": 0}, {"x": 4000, "y": 0}, {"x": 4000, "y": 1500},
                            {"x": 1500, "y": 1500}, {"x": 1500, "y": 4000}, {"x": 0, "y": 4000},
                        ],
                    },
                    {
                        "name": "Ingress",
                        "primitiveType": "Line",
                        "closed": False,
                        "mapX": -290000.0,
                        "mapY": 640000.0,
                        "points": [{"x": 0, "y": 0}, {"x": 5000, "y": 3000}, {"x": 9000, "y": 8000}],
                    },
                ],
            }
        ]
    },
    "triggers": {
        "zones": [
            {
                "name": "Convoy Box",
                "verticies": [
                    {"x": -270000, "y": 650000}, {"x": -268000, "y": 650000},
                    {"x": -268000, "y": 651000}, {"x": -270000, "y": 651000},
                ],
            }
        ]
    },
}


def main():
    mission_path = os.environ.get("MISSION_JSON")
    if mission_path:
        data = MissionData.from_json(mission_path, verbose=True)
    else:
        data = MissionData(DEMO_MISSION, verbose=True)

    config = ShapeConfig(verbose=True, seed=1234)
    db = ShapeDatabase.from_mission(data, config=config)

    print("=" * 60)
    print("SPAWN POINTS IN MISSION SHAPES")
    print("=" * 60)

    validator = PolygonValidator()
    rng = Randomizer(seed=config.seed)
    for name in db.names():
        polygon = Polygon.find(name, db)
        if polygon is None:
            continue

        result = validator.validate(polygon.get_points())
        print(f"\n{name}: {len(polygon)} points, {len(polygon.triangles)} triangles, "
              f"area {polygon.area:.0f} m^2 - {result.get_summary()}")
        if not polygon.triangles:
            continue
        for point in polygon.get_random_points(3, rng=rng):
            print(f"  spawn at x={point.x:.1f} y={point.y:.1f}")

    if save_shape_map is not None:
        out = save_shape_map(db, "mission_shapes.png", samples_per_polygon=300, rng=rng)
        print(f"\nMap saved to {out}")


if __name__ == "__main__":
    main()
