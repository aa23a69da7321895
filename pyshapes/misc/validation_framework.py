"""
Validation framework for pyshapes library.

Checks mission drawing data before it is turned into shapes, reporting
problems as a ValidationResult instead of raising. Shape construction
itself never validates; run a validator first when the input is untrusted.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from dataclasses import dataclass
from enum import Enum
import math

from pyshapes.classes.shapes import triangulate
from pyshapes.misc.math_utils import polygon_signed_area, segments_intersect, to_point2d


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass
class ValidationIssue:
    """Represents a single validation issue."""
    severity: ValidationSeverity
    message: str
    field: Optional[str] = None
    value: Optional[Any] = None
    suggestion: Optional[str] = None
    code: Optional[str] = None


@dataclass
class ValidationResult:
    """Comprehensive validation result."""
    is_valid: bool
    issues: List[ValidationIssue]
    warnings_count: int
    errors_count: int
    critical_count: int

    @property
    def has_warnings(self) -> bool:
        return self.warnings_count > 0

    @property
    def has_errors(self) -> bool:
        return self.errors_count > 0

    @property
    def has_critical(self) -> bool:
        return self.critical_count > 0

    def get_issues_by_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        """Get all issues of a specific severity."""
        return [issue for issue in self.issues if issue.severity == severity]

    def get_codes(self) -> List[str]:
        return [issue.code for issue in self.issues if issue.code]

    def get_summary(self) -> str:
        """Get a summary of validation results."""
        if self.is_valid:
            return "✓ Validation passed"

        parts = []
        if self.critical_count > 0:
            parts.append(f"{self.critical_count} critical")
        if self.errors_count > 0:
            parts.append(f"{self.errors_count} errors")
        if self.warnings_count > 0:
            parts.append(f"{self.warnings_count} warnings")

        return f"✗ Validation failed: {', '.join(parts)}"


class BaseValidator(ABC):
    """Abstract base class for all validators."""

    def __init__(self, strict: bool = False):
        """
        Initialize validator.

        Args:
            strict: If True, warnings are treated as errors
        """
        self.strict = strict
        self.issues: List[ValidationIssue] = []

    def add_issue(
        self,
        severity: ValidationSeverity,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        suggestion: Optional[str] = None,
        code: Optional[str] = None
    ):
        """Add a validation issue."""
        issue = ValidationIssue(severity, message, field, value, suggestion, code)
        self.issues.append(issue)

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data and return comprehensive result.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with all issues found
        """
        self.issues.clear()
        self._validate_impl(data)
        return self._build_result()

    @abstractmethod
    def _validate_impl(self, data: Any):
        """Implement specific validation logic."""
        pass

    def _build_result(self) -> ValidationResult:
        """Build the final validation result."""
        warnings = sum(1 for issue in self.issues if issue.severity == ValidationSeverity.WARNING)
        errors = sum(1 for issue in self.issues if issue.severity == ValidationSeverity.ERROR)
        critical = sum(1 for issue in self.issues if issue.severity == ValidationSeverity.CRITICAL)

        # In strict mode, warnings become errors
        if self.strict:
            errors += warnings
            warnings = 0

        is_valid = errors == 0 and critical == 0

        return ValidationResult(
            is_valid=is_valid,
            issues=self.issues.copy(),
            warnings_count=warnings,
            errors_count=errors,
            critical_count=critical
        )


class PointValidator(BaseValidator):
    """Validator for a single 2D map point."""

    def _validate_impl(self, data: Any):
        try:
            x, y = to_point2d(data)
        except (TypeError, ValueError):
            self.add_issue(
                ValidationSeverity.CRITICAL,
                f"Point must be an (x, y) pair or a mapping with x/y, got {data!r}",
                field="point",
                value=data,
                suggestion="Use (x, y) or {'x': ..., 'y': ...}",
                code="POINT_MALFORMED"
            )
            return

        for coord, name in ((x, 'x'), (y, 'y')):
            if not math.isfinite(coord):
                self.add_issue(
                    ValidationSeverity.ERROR,
                    f"Coordinate {name} must be finite, got {coord}",
                    field=f"point.{name}",
                    value=coord,
                    code="POINT_NOT_FINITE"
                )


class PolygonValidator(BaseValidator):
    """
    Validator for polygon rings.

    Flags input the ear-clipping triangulation can't handle cleanly:
    too few points, repeated consecutive points, crossing edges, and rings
    that don't decompose into n - 2 triangles.
    """

    def _validate_impl(self, data: Any):
        data = list(data)
        point_validator = PointValidator()
        points = []
        for i, raw in enumerate(data):
            result = point_validator.validate(raw)
            for issue in result.issues:
                issue.field = f"points[{i}]"
                self.issues.append(issue)
            if result.is_valid:
                points.append(to_point2d(raw))
        if len(points) != len(data):
            return

        n = len(points)
        if n < 3:
            self.add_issue(
                ValidationSeverity.ERROR,
                f"Polygon needs at least 3 points, got {n}",
                field="points",
                value=n,
                suggestion="Close the drawing with at least three vertices",
                code="POLY_TOO_FEW_POINTS"
            )
            return

        duplicates = [i for i in range(n) if points[i] == points[(i + 1) % n]]
        if duplicates:
            self.add_issue(
                ValidationSeverity.WARNING,
                f"Consecutive duplicate points at indices {duplicates}",
                field="points",
                value=duplicates,
                suggestion="Remove repeated vertices",
                code="POLY_DUPLICATE_POINTS"
            )

        crossings = self._find_crossing_edges(points)
        if crossings:
            self.add_issue(
                ValidationSeverity.WARNING,
                f"Polygon edges cross each other: {crossings[:5]}",
                field="points",
                value=crossings,
                suggestion="Redraw the shape without self-intersections",
                code="POLY_SELF_INTERSECTING"
            )

        if polygon_signed_area(points) < 0:
            self.add_issue(
                ValidationSeverity.INFO,
                "Polygon is wound clockwise",
                field="points",
                code="POLY_CLOCKWISE"
            )

        triangles = triangulate(points)
        if len(triangles) < n - 2:
            self.add_issue(
                ValidationSeverity.WARNING,
                f"Triangulation produced {len(triangles)} of {n - 2} triangles",
                field="points",
                value=len(triangles),
                suggestion="Random points will only be drawn from the triangulated part",
                code="POLY_INCOMPLETE_TRIANGULATION"
            )

    @staticmethod
    def _find_crossing_edges(points) -> List[tuple]:
        n = len(points)
        edges = [(points[i], points[(i + 1) % n]) for i in range(n)]
        crossings = []
        for i in range(n):
            for j in range(i + 2, n):
                # First and last edges share a vertex
                if i == 0 and j == n - 1:
                    continue
                if segments_intersect(edges[i][0], edges[i][1], edges[j][0], edges[j][1]):
                    crossings.append((i, j))
        return crossings


def validate_data(data: Any, validator: BaseValidator, print_results: bool = True) -> ValidationResult:
    """
    Convenience function to validate data and optionally print results.

    Args:
        data: Data to validate
        validator: Validator to use
        print_results: Whether to print validation results

    Returns:
        ValidationResult
    """
    result = validator.validate(data)

    if print_results:
        print(result.get_summary())

        if result.issues:
            print("\nValidation Issues:")
            for issue in result.issues:
                icon = {
                    ValidationSeverity.INFO: "ℹ",
                    ValidationSeverity.WARNING: "⚠",
                    ValidationSeverity.ERROR: "✗",
                    ValidationSeverity.CRITICAL: "🔥"
                }.get(issue.severity, "?")

                field_info = f" [{issue.field}]" if issue.field else ""
                print(f"  {icon} {issue.severity.value.upper()}{field_info}: {issue.message}")

                if issue.suggestion:
                    print(f"    💡 Suggestion: {issue.suggestion}")

    return result
