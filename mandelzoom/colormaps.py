"""
Palette definitions for Mandelbrot visualization.

Each palette factory takes the iteration cap and returns a numpy array of
shape (max_iter + 1, 4) with RGBA values (float64 in [0, 1]). Row n is the
color of a pixel that escaped after n iterations; row max_iter is the color
of points in the set and is always opaque black.

To add a new palette:
1. Define a create_palette_xxx(max_iter) function that returns the table
2. Add it to the COLORMAPS dictionary at the bottom of this file
"""

import numpy as np

from .compute import spectrum_palette


# Gradient stops of the 'ramp' palette, dark blue to yellow
RAMP_STOPS = (
    '#000033',
    '#000055',
    '#0000BB',
    '#5500BB',
    '#BB00BB',
    '#FF0055',
    '#FF5500',
    '#FFBB00',
    '#FFFF00',
)


def hex_to_rgb(code):
    """'#RRGGBB' -> (r, g, b) floats in [0, 1]."""
    code = code.lstrip('#')
    return tuple(int(code[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def _with_black_interior(rgb):
    """Append an alpha channel and the black in-set row to an (N, 3) table."""
    table = np.zeros((rgb.shape[0] + 1, 4), dtype=np.float64)
    table[:-1, :3] = rgb
    table[:, 3] = 1.0
    return table


def create_palette_spectrum(max_iter):
    """
    Spectrum palette: one sweep of the hue wheel.

    Brightness ramps up over the first half of the iteration range, so
    quickly-escaping points fade into the dark background. This is the
    default look of the viewer.
    """
    return spectrum_palette(max_iter)


def create_palette_ramp(max_iter):
    """
    Ramp palette: deep blue -> purple -> red -> orange -> yellow.

    The stops are spread evenly over the escaped counts and linearly
    interpolated in RGB between them.
    """
    stops = np.array([hex_to_rgb(code) for code in RAMP_STOPS])
    positions = np.linspace(0.0, 1.0, len(stops))
    if max_iter > 1:
        t = np.arange(max_iter) / (max_iter - 1)
    else:
        t = np.zeros(1)
    rgb = np.column_stack([np.interp(t, positions, stops[:, ch]) for ch in range(3)])
    return _with_black_interior(rgb)


def create_palette_grayscale(max_iter):
    """Grayscale palette: black -> white. Good for seeing raw iteration structure."""
    t = np.arange(max_iter) / max_iter
    return _with_black_interior(np.repeat(t[:, None], 3, axis=1))


# Registry of all available palettes.
# Keys are the names accepted on the command line, values are factories.
COLORMAPS = {
    'spectrum': create_palette_spectrum,
    'ramp': create_palette_ramp,
    'grayscale': create_palette_grayscale,
}


def get_palette(name, max_iter):
    """
    Build a palette by name.

    Args:
        name: Key from COLORMAPS dictionary
        max_iter: Iteration cap the table is built for

    Returns:
        (max_iter + 1, 4) float64 RGBA table

    Raises:
        KeyError if name not found
    """
    return COLORMAPS[name](max_iter)


def list_colormap_names():
    """Get list of available palette names."""
    return list(COLORMAPS.keys())
