"""
Mandelbrot Set Viewer Package

An interactive Mandelbrot set explorer using Pygame for display and
Numba for JIT-compiled computation.

Quick Start:
    from mandelzoom import run
    run()

Or from command line:
    mandelzoom
    python -m mandelzoom

Package Structure:
    - config.py: Constants and the ViewerConfig settings
    - view.py: ViewState (center, zoom) and the pixel to complex mapping
    - compute.py: JIT-compiled escape-time and color functions
    - colormaps.py: Palette definitions (spectrum, ramp, grayscale)
    - renderer.py: Synchronous frame rendering
    - app.py: Main application and event loop
    - cli.py: Command-line options and logging setup

Controls:
    - Left click: Zoom in 2x at the clicked point
    - Right click: Zoom out 2x at the clicked point
    - R: Reset to default view
    - ESC: Quit
"""

from .app import run, MandelbrotApp
from .colormaps import COLORMAPS, get_palette, list_colormap_names
from .compute import color_from_iter, escape_time, pixel_to_complex
from .config import ConfigError, ViewerConfig
from .renderer import Frame, FrameRenderer, RenderInProgressError
from .view import ViewState

__version__ = "1.0.0"
__all__ = [
    "run",
    "MandelbrotApp",
    "COLORMAPS",
    "get_palette",
    "list_colormap_names",
    "color_from_iter",
    "escape_time",
    "pixel_to_complex",
    "ConfigError",
    "ViewerConfig",
    "Frame",
    "FrameRenderer",
    "RenderInProgressError",
    "ViewState",
]
