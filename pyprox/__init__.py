# coding: utf-8
""" pyProx: a catalog of proximable functions for first-order convex
optimization.
"""
from .info import __version__, _check_module_dependencies

_check_module_dependencies()

from .proximity import SqrNormL2, IndBox, IndBallLinf  # noqa: E402
from .quadratic import QuadraticIterative  # noqa: E402

__all__ = ['SqrNormL2', 'IndBox', 'IndBallLinf', 'QuadraticIterative',
           '__version__']
