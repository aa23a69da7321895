"""
Centralized logging utility for pyshapes library.

Every shape, lookup and the shape database log through a PyshapesLogger:
- INFO and DEBUG lines go to stdout and only when verbose
- warnings and errors go to stderr and are always shown
- point lists resolved by lookups are traced at DEBUG level, shortened so
  a large drawing doesn't flood the console
"""

import sys
from enum import Enum
from typing import Any, Optional


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class PyshapesLogger:
    """
    Centralized logger for pyshapes library.

    Usage:
        logger = PyshapesLogger(verbose=True, name="Polygon")
        logger.info("Polygon 'SAM Area' built with 6 points")
        logger.warning("Triangulation stopped early")
        logger.points("Resolved 'SAM Area'", [(0, 0), (1, 0), (1, 1)])
    """

    def __init__(self, verbose: bool = True, name: Optional[str] = None, min_level: LogLevel = LogLevel.INFO):
        """
        Initialize logger.

        Args:
            verbose: If False, suppresses INFO and DEBUG messages
            name: Component name to include in log messages (e.g., "Polygon", "ShapeDatabase")
            min_level: Minimum log level to display (defaults to INFO)
        """
        self.verbose = verbose
        self.name = name
        self.min_level = min_level

    def _format_message(self, level: LogLevel, message: Any) -> str:
        """Format log message with prefix and level."""
        level_prefix = {
            LogLevel.DEBUG: "DEBUG",
            LogLevel.INFO: "",
            LogLevel.WARNING: "Warning",
            LogLevel.ERROR: "ERROR"
        }

        prefix_parts = ["[pyshapes]"]
        if self.name:
            prefix_parts.append(f"[{self.name}]")

        level_str = level_prefix[level]
        if level_str:
            prefix_parts.append(f"{level_str}:")

        if not isinstance(message, str):
            message = repr(message)

        prefix = " ".join(prefix_parts)
        return f"{prefix} {message}"

    def _should_log(self, level: LogLevel) -> bool:
        """Check if message should be logged based on level and verbose setting."""
        # Always log warnings and errors
        if level in (LogLevel.WARNING, LogLevel.ERROR):
            return True

        if not self.verbose:
            return False

        return level.value >= self.min_level.value

    def debug(self, message: Any):
        """Log debug message (only if verbose=True and min_level is DEBUG)."""
        if self._should_log(LogLevel.DEBUG):
            print(self._format_message(LogLevel.DEBUG, message))

    def info(self, message: Any):
        """Log info message (only if verbose=True)."""
        if self._should_log(LogLevel.INFO):
            print(self._format_message(LogLevel.INFO, message))

    def warning(self, message: Any):
        """Log warning message (always shown)."""
        if self._should_log(LogLevel.WARNING):
            print(self._format_message(LogLevel.WARNING, message), file=sys.stderr)

    def error(self, message: Any):
        """Log error message (always shown)."""
        if self._should_log(LogLevel.ERROR):
            print(self._format_message(LogLevel.ERROR, message), file=sys.stderr)

    def points(self, label: str, points, limit: int = 6):
        """
        Trace a resolved point list at DEBUG level.

        Only the first `limit` points are printed, followed by how many
        were left out.

        Args:
            label: What the points belong to (e.g. "Resolved 'SAM Area'")
            points: Sequence of (x, y) points
            limit: Maximum number of points to print
        """
        if not self._should_log(LogLevel.DEBUG):
            return
        shown = ", ".join(f"({p[0]:g}, {p[1]:g})" for p in points[:limit])
        if len(points) > limit:
            shown += f", ... +{len(points) - limit} more"
        self.debug(f"{label}: {len(points)} points [{shown}]")

    def log(self, message: Any, level: LogLevel = LogLevel.INFO):
        """
        Generic log method.

        Args:
            message: Message to log
            level: Log level (defaults to INFO)
        """
        if level == LogLevel.DEBUG:
            self.debug(message)
        elif level == LogLevel.INFO:
            self.info(message)
        elif level == LogLevel.WARNING:
            self.warning(message)
        elif level == LogLevel.ERROR:
            self.error(message)


def create_logger(verbose: bool = True, name: Optional[str] = None,
                  min_level: LogLevel = LogLevel.INFO) -> PyshapesLogger:
    """
    Factory function to create a logger instance.

    Args:
        verbose: If False, suppresses INFO and DEBUG messages
        name: Component name (e.g., "Polygon", "MissionData")
        min_level: Minimum level shown when verbose (use LogLevel.DEBUG for traces)

    Returns:
        Configured PyshapesLogger instance
    """
    return PyshapesLogger(verbose=verbose, name=name, min_level=min_level)
