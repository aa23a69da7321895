import pytest

from pyshapes import MissionData, Polygon


@pytest.fixture
def unit_square():
    return Polygon.new((0, 0), (1, 0), (1, 1), (0, 1), name="Unit Square")


@pytest.fixture
def l_shape_points():
    # Counter-clockwise L with the reflex vertex at (1, 1)
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


@pytest.fixture
def mission_table():
    return {
        "drawings": {
            "layers": [
                {
                    "name": "Blue",
                    "objects": [
                        {
                            "name": "SAM Area",
                            "primitiveType": "Line",
                            "closed": True,
                            "mapX": 100.0,
                            "mapY": 200.0,
                            "points": {
                                "1": {"x": 0, "y": 0},
                                "2": {"x": 10, "y": 0},
                                "3": {"x": 10, "y": 10},
                                "4": {"x": 0, "y": 10},
                            },
                        },
                        {
                            "name": "Ingress Route",
                            "primitiveType": "Line",
                            "closed": False,
                            "mapX": 0,
                            "mapY": 0,
                            "points": [{"x": 0, "y": 0}, {"x": 3, "y": 4}, {"x": 6, "y": 8}],
                        },
                    ],
                },
                {
                    "name": "Red",
                    "objects": [
                        {
                            "name": "Free Shape",
                            "primitiveType": "Polygon",
                            "polygonMode": "free",
                            "mapX": -5,
                            "mapY": -5,
                            "points": [{"x": 0, "y": 0}, {"x": 4, "y": 0}, {"x": 0, "y": 4}],
                        },
                        {
                            "name": "Target Icon",
                            "primitiveType": "Icon",
                            "mapX": 1,
                            "mapY": 1,
                        },
                    ],
                },
            ]
        },
        "triggers": {
            "zones": [
                {
                    "name": "Quad Zone",
                    "type": 2,
                    "verticies": [
                        {"x": 0, "y": 0},
                        {"x": 5, "y": 0},
                        {"x": 5, "y": 5},
                        {"x": 0, "y": 5},
                    ],
                },
                {"name": "Circle Zone", "type": 0, "x": 10, "y": 10, "radius": 500},
            ]
        },
    }


@pytest.fixture
def mission_data(mission_table):
    return MissionData(mission_table)
