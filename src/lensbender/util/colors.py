#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Color values and color rules applied to traced rays

.. Created on Fri Sep 25 18:22:30 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np

from lensbender.coord_geometry_types import Color, Dir3d

BACKGROUND = (0.0, 0.0, 0.0)
""" color of a pixel whose rays leave the scene untouched """

HIT = (1.0, 0.0, 0.0)
""" color of a ray stopped by an opaque sphere """


def to_color(value) -> Color:
    """ return `value` as an rgb numpy array clipped to [0, 1] """
    return np.clip(np.asarray(value, dtype=float), 0.0, 1.0)


def direction_to_color(d: Dir3d) -> Color:
    """ map a unit direction onto the rgb cube, (d + 1)/2 """
    return to_color(0.5*(np.asarray(d, dtype=float) + 1.0))


def average_colors(colors) -> Color:
    """ return the component-wise mean of a sequence of colors """
    return np.mean(np.asarray(colors, dtype=float), axis=0)
