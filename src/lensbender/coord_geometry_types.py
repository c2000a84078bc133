#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for vectors, matrices and colors

These type hints document the numpy arrays passed between modules.

Vec3d is used for coordinates
Dir3d is used for vector directions, unit length
Mat3d is a 3 x 3 matrix
Color is an rgb triple with components in [0, 1]

.. codeauthor: Michael J. Hayford
"""
import numpy.typing as npt

Vec3d = npt.NDArray
Dir3d = npt.NDArray
Mat3d = npt.NDArray
Color = npt.NDArray
