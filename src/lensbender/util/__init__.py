""" Package of utility functions

    The :mod:`~.util` subpackage provides vector and rotation math,
    :mod:`~.misc_math`, and the color rules of the renderer,
    :mod:`~.colors`.
"""
