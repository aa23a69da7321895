import pyshapes.classes.shapes as shapes_module
from pyshapes import PolygonValidator, PointValidator, ValidationSeverity, validate_data


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_simple_polygon_passes():
    result = PolygonValidator().validate(SQUARE)
    assert result.is_valid
    assert result.issues == []
    assert result.get_summary() == "✓ Validation passed"


def test_too_few_points():
    result = PolygonValidator().validate([(0, 0), (1, 1)])
    assert not result.is_valid
    assert result.has_errors
    assert result.get_codes() == ["POLY_TOO_FEW_POINTS"]


def test_self_intersecting_bow_tie():
    bow_tie = [(0, 0), (2, 2), (2, 0), (0, 2)]
    result = PolygonValidator().validate(bow_tie)
    assert result.is_valid
    assert "POLY_SELF_INTERSECTING" in result.get_codes()
    assert result.has_warnings

    strict = PolygonValidator(strict=True).validate(bow_tie)
    assert not strict.is_valid
    assert strict.errors_count == 1 and strict.warnings_count == 0


def test_clockwise_is_informational():
    result = PolygonValidator().validate(list(reversed(SQUARE)))
    assert result.is_valid
    info = result.get_issues_by_severity(ValidationSeverity.INFO)
    assert [issue.code for issue in info] == ["POLY_CLOCKWISE"]


def test_consecutive_duplicates():
    result = PolygonValidator().validate([(0, 0), (1, 0), (1, 0), (1, 1), (0, 1)])
    assert result.get_codes() == ["POLY_DUPLICATE_POINTS"]
    assert result.issues[0].value == [1]


def test_malformed_point_is_critical():
    result = PolygonValidator().validate([(0, 0), "nope", (1, 1)])
    assert not result.is_valid
    assert result.has_critical
    assert result.issues[0].field == "points[1]"
    assert result.issues[0].code == "POINT_MALFORMED"


def test_non_finite_point():
    result = PointValidator().validate((float("nan"), 1.0))
    assert result.get_codes() == ["POINT_NOT_FINITE"]
    assert not result.is_valid


def test_incomplete_triangulation_is_reported(monkeypatch):
    monkeypatch.setattr(shapes_module, "point_in_triangle", lambda point, triangle: True)
    result = PolygonValidator().validate(SQUARE)
    assert "POLY_INCOMPLETE_TRIANGULATION" in result.get_codes()


def test_validate_data_prints_report(capsys):
    result = validate_data([(0, 0), (1, 1)], PolygonValidator())
    out = capsys.readouterr().out
    assert not result.is_valid
    assert "Validation failed: 1 errors" in out
    assert "ERROR [points]" in out
