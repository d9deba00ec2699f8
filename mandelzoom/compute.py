"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains all the performance-critical functions, JIT-compiled
for speed:
- Pixel to complex-plane mapping (shared by the click handler and the kernel)
- Escape-time iteration for a single point and for a full frame
- HSV color mapping of iteration counts
- Palette application

None of these functions allocate anything but their return value, and all
of them are total: every input in their documented domain yields a result.
"""

import numpy as np
from numba import jit, prange


ESCAPE_RADIUS_SQ = 4.0  # |z|^2 bound for the escape test
SATURATION = 0.8        # Fixed saturation of the HSV palette


@jit(nopython=True, cache=True)
def pixel_to_complex(x, y, width, height, center_real, center_imag, zoom, base_range):
    """
    Map pixel (x, y) to a point of the complex plane.

    The visible window is base_range / zoom tall and is stretched by the
    aspect ratio horizontally, centered on (center_real, center_imag).
    Pixel (width / 2, height / 2) maps exactly to the center.

    Returns:
        (real, imag) tuple of floats
    """
    aspect = width / height
    span = base_range / zoom
    real = center_real + (x / width - 0.5) * span * aspect
    imag = center_imag + (y / height - 0.5) * span
    return real, imag


@jit(nopython=True, cache=True)
def escape_time(c_real, c_imag, max_iter):
    """
    Count iterations of z -> z^2 + c, starting from z = 0, until |z| > 2.

    Args:
        c_real, c_imag: The point c
        max_iter: Iteration cap

    Returns:
        Iteration count in [0, max_iter]. max_iter means the point never
        escaped and is presumed to be in the set.
    """
    zr = 0.0
    zi = 0.0
    n = 0
    while zr * zr + zi * zi <= ESCAPE_RADIUS_SQ and n < max_iter:
        temp = zr * zr - zi * zi + c_real
        zi = 2.0 * zr * zi + c_imag
        zr = temp
        n += 1
    return n


@jit(nopython=True, cache=True)
def hsv_to_rgb(hue, s, v):
    """Standard HSV to RGB conversion, hue in degrees [0, 360)."""
    c = v * s
    x = c * (1.0 - abs((hue / 60.0) % 2.0 - 1.0))
    m = v - c

    sector = int(hue / 60.0)
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


@jit(nopython=True, cache=True)
def color_from_iter(n, max_iter):
    """
    Map an iteration count to an opaque RGBA color in [0, 1].

    Points in the set (n == max_iter) are black. Escaped points sweep the
    hue wheel with n, ramping brightness up over the first half.
    """
    if n >= max_iter:
        return 0.0, 0.0, 0.0, 1.0

    t = n / max_iter
    hue = t * 360.0
    v = t * 2.0 if t < 0.5 else 1.0
    r, g, b = hsv_to_rgb(hue, SATURATION, v)
    return r, g, b, 1.0


@jit(nopython=True, cache=True)
def spectrum_palette(max_iter):
    """
    Tabulate color_from_iter for every possible count.

    Returns:
        (max_iter + 1, 4) float64 array; row n is the color of count n
    """
    table = np.empty((max_iter + 1, 4), dtype=np.float64)
    for n in range(max_iter + 1):
        r, g, b, a = color_from_iter(n, max_iter)
        table[n, 0] = r
        table[n, 1] = g
        table[n, 2] = b
        table[n, 3] = a
    return table


@jit(nopython=True, parallel=True, cache=True)
def compute_iterations(center_real, center_imag, zoom, width, height, max_iter, base_range):
    """
    Compute the escape-time count of every pixel of a frame.

    Rows are distributed over threads with prange; each row is written by
    exactly one thread, and the call returns only once every row is done.
    The result is identical to a serial double loop.

    Args:
        center_real, center_imag, zoom: View parameters
        width, height: Frame size in pixels
        max_iter: Iteration cap
        base_range: Visible imaginary span at zoom 1

    Returns:
        (height, width) int64 array of counts in [0, max_iter]
    """
    result = np.empty((height, width), dtype=np.int64)

    for py in prange(height):
        for px in range(width):
            c_real, c_imag = pixel_to_complex(
                px, py, width, height, center_real, center_imag, zoom, base_range
            )
            result[py, px] = escape_time(c_real, c_imag, max_iter)

    return result


def apply_palette(iterations, palette):
    """
    Look up the color of every count.

    Args:
        iterations: Integer array of counts in [0, len(palette) - 1]
        palette: (N, 4) RGBA lookup table

    Returns:
        New float64 array of shape iterations.shape + (4,)
    """
    return np.take(palette, iterations, axis=0)


def to_rgb8(pixels):
    """
    Convert an RGBA float raster in [0, 1] to RGB uint8 for display.

    Args:
        pixels: (height, width, 4) float array

    Returns:
        (height, width, 3) uint8 array
    """
    rgb = np.clip(pixels[..., :3], 0.0, 1.0) * 255.0
    return np.rint(rgb).astype(np.uint8)


def warmup_jit():
    """
    Warm up JIT compilation with a tiny frame.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on the first real render.
    """
    palette = spectrum_palette(10)
    data = compute_iterations(-0.5, 0.0, 1.0, 8, 6, 10, 3.5)
    apply_palette(data, palette)
    pixel_to_complex(0, 0, 8, 6, -0.5, 0.0, 1.0, 3.5)
