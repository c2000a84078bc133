#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" miscellaneous functions for working with numpy vectors and rotations

.. Created on Wed May 23 15:27:06 2018

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from numpy.linalg import norm
import transforms3d as t3d


def normalize(v):
    """ return normalized version of input vector v """
    length = norm(v)
    if length == 0.0:
        return v
    else:
        return v/length


def radial_distance(pt) -> float:
    """ return the distance of pt from the local z axis """
    return float(np.hypot(pt[0], pt[1]))


def euler2rot3d(euler):
    """ convert a vector of euler angles (deg) to a rotation matrix.

    The angles are right-handed rotations about the static x, y and z axes,
    applied in that order.
    """
    rot_mat = t3d.euler.euler2mat(*np.deg2rad(euler))
    return rot_mat


def perpendicular_basis(v):
    """ return two unit vectors that complete an orthonormal frame with v

    The helper axis is the coordinate axis least aligned with `v`, so the
    basis is well conditioned for any direction.
    """
    v = normalize(np.asarray(v, dtype=float))
    helper = np.zeros(3)
    helper[np.argmin(np.abs(v))] = 1.0
    u = normalize(np.cross(v, helper))
    w = np.cross(v, u)
    return u, w
