"""
View state: where the viewer is looking in the complex plane.

A ViewState is a center point and a zoom factor. It is created once at
startup, owned by the application, and mutated in place as the user clicks
around. It remembers the values it was created with so reset() can go back
to them.
"""

from dataclasses import dataclass, field

from .compute import pixel_to_complex
from .config import (
    BASE_RANGE,
    DEFAULT_CENTER_IMAG,
    DEFAULT_CENTER_REAL,
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
    ZOOM_FACTOR,
)


@dataclass
class ViewState:
    """
    Current center and zoom of the view.

    Attributes:
        center_real, center_imag: Complex-plane point at the middle of the window
        zoom: Magnification in [MIN_ZOOM, MAX_ZOOM] (1.0 shows the whole set)
    """

    center_real: float = DEFAULT_CENTER_REAL
    center_imag: float = DEFAULT_CENTER_IMAG
    zoom: float = DEFAULT_ZOOM
    _home: tuple = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not MIN_ZOOM <= self.zoom <= MAX_ZOOM:
            raise ValueError(f"zoom must be between {MIN_ZOOM:g} and {MAX_ZOOM:g}, got {self.zoom!r}")
        self._home = (self.center_real, self.center_imag, self.zoom)

    @classmethod
    def from_config(cls, config):
        return cls(config.center_real, config.center_imag, config.zoom)

    def screen_to_complex(self, x, y, width, height, base_range=BASE_RANGE):
        """
        Convert pixel (x, y) of a width x height window to a complex point.

        Returns:
            (real, imag) tuple of floats
        """
        real, imag = pixel_to_complex(
            x, y, width, height,
            self.center_real, self.center_imag, self.zoom, base_range
        )
        return float(real), float(imag)

    def bounds(self, width, height, base_range=BASE_RANGE):
        """Visible rectangle as (real_min, real_max, imag_min, imag_max)."""
        span = base_range / self.zoom
        half_w = span * (width / height) / 2
        half_h = span / 2
        return (
            self.center_real - half_w, self.center_real + half_w,
            self.center_imag - half_h, self.center_imag + half_h,
        )

    def recenter(self, real, imag):
        self.center_real = real
        self.center_imag = imag

    def zoom_in(self, factor=ZOOM_FACTOR):
        if not factor > 0:
            raise ValueError(f"zoom factor must be positive, got {factor!r}")
        self._set_zoom(self.zoom * factor)

    def zoom_out(self, factor=ZOOM_FACTOR):
        if not factor > 0:
            raise ValueError(f"zoom factor must be positive, got {factor!r}")
        self._set_zoom(self.zoom / factor)

    def _set_zoom(self, zoom):
        if not MIN_ZOOM <= zoom <= MAX_ZOOM:
            raise ValueError(f"zoom limit reached, {self.zoom!r} cannot go to {zoom!r}")
        self.zoom = zoom

    def reset(self):
        """Go back to the view this state was created with."""
        self.center_real, self.center_imag, self.zoom = self._home

    def snapshot(self):
        return (self.center_real, self.center_imag, self.zoom)
