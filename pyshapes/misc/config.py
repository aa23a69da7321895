from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from pyshapes.classes.coordinates import CoordinateProjector
from pyshapes.misc.logger import LogLevel, PyshapesLogger, create_logger
from pyshapes.misc.randomizer import Randomizer


@dataclass
class ShapeConfig:
    """
    Settings shared by shape lookups and the shape database.

    Passed explicitly to the constructors instead of living in module
    globals, so two mission files can be handled side by side with
    different settings.
    """
    # Logging
    verbose: bool = False
    trace: bool = False  # also print DEBUG payloads (resolved points, lookups)

    # Drawing lookups: "exact" name equality or "substring" containment
    match: Literal["exact", "substring"] = "exact"

    # Projection of map points into world coordinates
    default_height: float = 0.0
    height_fn: Optional[Callable] = None

    # Random sampling
    seed: Optional[int] = None

    def __post_init__(self):
        if self.match not in ("exact", "substring"):
            raise ValueError(f"match must be 'exact' or 'substring', got {self.match!r}")

    def make_logger(self, name: str) -> PyshapesLogger:
        min_level = LogLevel.DEBUG if self.trace else LogLevel.INFO
        return create_logger(verbose=self.verbose or self.trace, name=name, min_level=min_level)

    def make_projector(self) -> CoordinateProjector:
        return CoordinateProjector(height_fn=self.height_fn, default_height=self.default_height)

    def make_randomizer(self) -> Randomizer:
        return Randomizer(self.seed)
