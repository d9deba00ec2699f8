"""
Synchronous Mandelbrot frame renderer.

The FrameRenderer class handles:
- Evaluating every pixel of a view (escape-time counts, Numba kernel)
- Mapping counts to colors through the selected palette
- Caching palettes per iteration cap
- Guarding against re-entrant renders
"""

import threading
import time
from dataclasses import dataclass

import numpy as np
from loguru import logger

from .colormaps import get_palette
from .compute import apply_palette, compute_iterations, warmup_jit
from .config import ViewerConfig


class RenderInProgressError(RuntimeError):
    """Raised when a render is requested while another one is running."""


@dataclass(frozen=True)
class Frame:
    """
    Result of rendering one view.

    Attributes:
        pixels: (height, width, 4) float64 RGBA raster in [0, 1]
        iterations: (height, width) escape-time counts
        view: (center_real, center_imag, zoom) the frame was rendered for
        max_iter: Iteration cap used
        elapsed: Render wall time in seconds
    """

    pixels: np.ndarray
    iterations: np.ndarray
    view: tuple
    max_iter: int
    elapsed: float

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]


class FrameRenderer:
    """
    Renders full frames of the Mandelbrot set.

    Usage:
        renderer = FrameRenderer(ViewerConfig())
        frame = renderer.render(view)
        display(to_rgb8(frame.pixels))

    Every call computes a brand-new raster; nothing from a previous frame
    is reused or modified.

    Attributes:
        config: The ViewerConfig in effect
        colormap: Name of the palette in use
    """

    def __init__(self, config=None):
        self.config = config or ViewerConfig()
        self.colormap = self.config.colormap
        self._palettes = {}

        self._rendering = False
        self.lock = threading.Lock()

    @property
    def rendering(self):
        """True while a render is running."""
        with self.lock:
            return self._rendering

    def palette(self, max_iter):
        """Palette table for the given iteration cap (cached)."""
        table = self._palettes.get(max_iter)
        if table is None:
            table = get_palette(self.colormap, max_iter)
            self._palettes[max_iter] = table
        return table

    def warmup(self):
        """Compile the kernels on a tiny frame before the first real render."""
        start = time.perf_counter()
        warmup_jit()
        logger.debug(f"JIT warmup took {time.perf_counter() - start:.2f}s")

    def render(self, view):
        """
        Render the given view.

        Args:
            view: ViewState to render

        Returns:
            Frame with a fresh raster

        Raises:
            RenderInProgressError if called while another render is running
        """
        with self.lock:
            if self._rendering:
                raise RenderInProgressError("a render is already in progress")
            self._rendering = True

        try:
            return self._render(view)
        finally:
            with self.lock:
                self._rendering = False

    def _render(self, view):
        cfg = self.config
        max_iter = cfg.iterations_for(view.zoom)
        start = time.perf_counter()

        iterations = compute_iterations(
            float(view.center_real), float(view.center_imag), float(view.zoom),
            cfg.width, cfg.height, max_iter, float(cfg.base_range)
        )
        pixels = apply_palette(iterations, self.palette(max_iter))

        elapsed = time.perf_counter() - start
        logger.debug(
            f"Rendered {cfg.width}x{cfg.height} at zoom {view.zoom:g} "
            f"({max_iter} iterations) in {elapsed * 1000:.0f} ms"
        )
        return Frame(
            pixels=pixels,
            iterations=iterations,
            view=view.snapshot(),
            max_iter=max_iter,
            elapsed=elapsed,
        )
