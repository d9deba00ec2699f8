"""Command-line entry point: mandelzoom [options]."""

import sys
from argparse import ArgumentParser

import pygame
from loguru import logger

from . import config as defaults
from .app import run
from .colormaps import list_colormap_names
from .config import ConfigError, ViewerConfig


LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def build_parser():
    parser = ArgumentParser(
        prog='mandelzoom',
        description='Interactive Mandelbrot set viewer. Left click zooms in, '
                    'right click zooms out, R resets, Esc quits.',
    )

    parser.add_argument('--width', type=int,
                        dest='width', help='window width in pixels',
                        metavar='WIDTH', default=defaults.WIDTH)

    parser.add_argument('--height', type=int,
                        dest='height', help='window height in pixels',
                        metavar='HEIGHT', default=defaults.HEIGHT)

    parser.add_argument('--max-iter', type=int,
                        dest='max_iter', help='maximum number of escape-time iterations per pixel',
                        metavar='MAX_ITER', default=defaults.MAX_ITER)

    parser.add_argument('--zoom-factor', type=float,
                        dest='zoom_factor', help='factor applied to the zoom on each click (> 1)',
                        metavar='ZOOM_FACTOR', default=defaults.ZOOM_FACTOR)

    parser.add_argument('--base-range', type=float,
                        dest='base_range', help='height of the visible window in the complex plane at zoom 1',
                        metavar='BASE_RANGE', default=defaults.BASE_RANGE)

    parser.add_argument('--center-real', type=float,
                        dest='center_real', help='real part of the starting center',
                        metavar='CENTER_REAL', default=defaults.DEFAULT_CENTER_REAL)

    parser.add_argument('--center-imag', type=float,
                        dest='center_imag', help='imaginary part of the starting center',
                        metavar='CENTER_IMAG', default=defaults.DEFAULT_CENTER_IMAG)

    parser.add_argument('--zoom', type=float,
                        dest='zoom', help='starting zoom (> 0)',
                        metavar='ZOOM', default=defaults.DEFAULT_ZOOM)

    parser.add_argument('--adaptive-iterations', action='store_true',
                        help='raise the iteration cap with the zoom level '
                             '(100 + 20 per zoom unit, at most 500); overrides --max-iter')

    parser.add_argument('--colormap', type=str, choices=list_colormap_names(),
                        default=defaults.DEFAULT_COLORMAP,
                        help='palette used to color escaped points')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log render timings and other debug output')

    return parser


def configure_logging(verbose=False):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)


def config_from_args(args):
    return ViewerConfig(
        width=args.width,
        height=args.height,
        max_iter=args.max_iter,
        zoom_factor=args.zoom_factor,
        base_range=args.base_range,
        center_real=args.center_real,
        center_imag=args.center_imag,
        zoom=args.zoom,
        adaptive_iterations=args.adaptive_iterations,
        colormap=args.colormap,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    logger.info(
        f"Starting {config.width}x{config.height} viewer at "
        f"({config.center_real}, {config.center_imag}), zoom {config.zoom}"
    )
    try:
        run(config)
    except pygame.error as e:
        logger.error(f"Display error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
