"""
Allow running the package directly: python -m mandelzoom
"""
import sys

from .cli import main

sys.exit(main())
