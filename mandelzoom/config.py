"""
Startup configuration for the Mandelbrot viewer.

All tunable constants live here. ViewerConfig bundles them for a single
run; its defaults reproduce the classic 800x600 overview centered on
(-0.5, 0).
"""

import math
from dataclasses import dataclass

from .colormaps import COLORMAPS


# Window size in pixels
WIDTH = 800
HEIGHT = 600

# Iteration cap for the escape-time test
MAX_ITER = 256

# Adaptive iteration cap (used only when adaptive_iterations is on)
ADAPTIVE_BASE_ITER = 100
ADAPTIVE_ITER_PER_ZOOM = 20
ADAPTIVE_MAX_ITER = 500

# Each click multiplies or divides the zoom by this
ZOOM_FACTOR = 2.0

# Height of the visible window in the complex plane at zoom 1
BASE_RANGE = 3.5

# Home view
DEFAULT_CENTER_REAL = -0.5
DEFAULT_CENTER_IMAG = 0.0
DEFAULT_ZOOM = 1.0

# Zoom range where base_range / zoom and every pixel offset stay finite floats
MIN_ZOOM = 1e-300
MAX_ZOOM = 1e300

DEFAULT_COLORMAP = 'spectrum'


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass(frozen=True)
class ViewerConfig:
    """
    Settings for one viewer session.

    Attributes:
        width, height: Raster size in pixels
        max_iter: Iteration cap (ignored when adaptive_iterations is on)
        zoom_factor: Multiplier applied per zoom-in / zoom-out click
        base_range: Visible imaginary span at zoom 1
        center_real, center_imag, zoom: Home view, restored by reset
        adaptive_iterations: Raise the iteration cap as the zoom grows
        colormap: Palette name from colormaps.COLORMAPS
    """

    width: int = WIDTH
    height: int = HEIGHT
    max_iter: int = MAX_ITER
    zoom_factor: float = ZOOM_FACTOR
    base_range: float = BASE_RANGE
    center_real: float = DEFAULT_CENTER_REAL
    center_imag: float = DEFAULT_CENTER_IMAG
    zoom: float = DEFAULT_ZOOM
    adaptive_iterations: bool = False
    colormap: str = DEFAULT_COLORMAP

    def __post_init__(self):
        for name in ('width', 'height', 'max_iter'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if not (math.isfinite(self.base_range) and self.base_range > 0):
            raise ConfigError(f"base_range must be finite and positive, got {self.base_range!r}")
        if not MIN_ZOOM <= self.zoom <= MAX_ZOOM:
            raise ConfigError(f"zoom must be between {MIN_ZOOM:g} and {MAX_ZOOM:g}, got {self.zoom!r}")
        if not self.zoom_factor > 1:
            raise ConfigError(f"zoom_factor must be greater than 1, got {self.zoom_factor!r}")

        if self.colormap not in COLORMAPS:
            raise ConfigError(
                f"unknown colormap {self.colormap!r}, "
                f"choose from {', '.join(COLORMAPS)}"
            )

    @property
    def home(self):
        """(center_real, center_imag, zoom) restored on reset."""
        return (self.center_real, self.center_imag, self.zoom)

    def iterations_for(self, zoom):
        """
        Iteration cap to use at the given zoom level.

        Fixed at max_iter unless adaptive_iterations is set, in which case
        deeper zooms get more iterations, capped at ADAPTIVE_MAX_ITER.
        """
        if not self.adaptive_iterations:
            return self.max_iter
        return int(min(ADAPTIVE_BASE_ITER + zoom * ADAPTIVE_ITER_PER_ZOOM, ADAPTIVE_MAX_ITER))
