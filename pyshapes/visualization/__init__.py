"""
Visualization module for pyshapes.

2D visualization (matplotlib):
- Install with: pip install pyshapes[viz]
- Provides: ShapeMap2DVisualizer, save_shape_map
"""

import importlib.util

# Check for matplotlib (2D visualization)
MATPLOTLIB_AVAILABLE = importlib.util.find_spec("matplotlib") is not None

__all__ = []

if MATPLOTLIB_AVAILABLE:
    from .map2d import ShapeMap2DVisualizer, save_shape_map
    __all__.extend(['ShapeMap2DVisualizer', 'save_shape_map'])

# Create helpful error messages for missing dependencies
if not MATPLOTLIB_AVAILABLE:
    def _raise_matplotlib_error(*args, **kwargs):
        raise ImportError(
            "2D visualization features require matplotlib. "
            "Install with: pip install pyshapes[viz]"
        )

    class ShapeMap2DVisualizer:
        def __init__(self, *args, **kwargs):
            _raise_matplotlib_error()

    def save_shape_map(*args, **kwargs):
        _raise_matplotlib_error()
