#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Module for the sag of lens surface profiles

    The surface sag is the axial departure of a surface from the plane
    tangent to its vertex, as a function of the radial distance from the
    axis. Surfaces are specified by a signed radius of curvature, `roc`; a
    positive `roc` places the center of curvature behind the vertex along
    the local +Z axis and a `roc` of zero is a flat surface.

    Past the edge of the surface sphere (or where the conic discriminant is
    no longer positive) the sag falls back to the paraxial value r²/2R,
    which joins the exact branch continuously.

.. Created on Tue Aug  7 08:31:41 2018

.. codeauthor: Michael J. Hayford
"""
import logging
from math import sqrt

import numpy as np

logger = logging.getLogger(__name__)


def sag(roc: float, r: float, cc: float = 0.0, coefs=()) -> float:
    """ return the sag of a surface at radial distance r

    Args:
        roc: signed radius of curvature, 0 for a flat surface
        r: radial distance from the surface axis
        cc: conic constant, 0 for a sphere
        coefs: even aspheric coefficients, A4, A6, A8, ...

    Returns:
        float: the signed sag, positive for `roc` > 0
    """
    r2 = r*r
    z = 0.0
    if roc != 0.0:
        R = abs(roc)
        disc = 1.0 - (1.0 + cc)*r2/(R*R)
        if disc <= 0.0:
            logger.debug(f"paraxial sag fallback: roc={roc}, r={r}")
            z = r2/(2.0*R)
        else:
            z = r2/(2.0*R*(1.0 + sqrt(disc)))
        if roc < 0.0:
            z = -z

    r_pow = r2
    for a in coefs:
        r_pow *= r2
        z += a*r_pow
    return z


def sag_array(roc: float, r, cc: float = 0.0, coefs=()):
    """ vectorized :func:`sag` over an array of radial distances """
    r = np.asarray(r, dtype=float)
    return np.array([sag(roc, ri, cc, coefs) for ri in r.ravel()]).reshape(
        r.shape)


class EvenPolynomial:
    """ Even polynomial asphere on a conic base, a sphere by default.

    Attributes:
        roc: signed radius of curvature
        cc: conic constant
        coefs: list of even aspheric coefficients, A4, A6, ...
    """
    def __init__(self, roc=0.0, cc=0.0, coefs=None):
        self.roc = roc
        self.cc = cc
        self.coefs = list(coefs) if coefs is not None else []

    def __repr__(self):
        return (f"{type(self).__name__}(roc={self.roc}, cc={self.cc}, "
                f"coefs={self.coefs})")

    def listobj_str(self):
        o_str = f"{type(self).__name__}: roc={self.roc}  cc={self.cc}\n"
        for i, a in enumerate(self.coefs, start=2):
            o_str += f"A{2*i}: {a:.6g}\n"
        return o_str

    def is_flat(self):
        return self.roc == 0.0 and not any(self.coefs)

    def sag(self, r):
        return sag(self.roc, r, self.cc, self.coefs)

    def profile(self, sd, vertex_z=0.0, steps=6):
        """ return a 2d polyline of the surface cross section

        Args:
            sd: semi-diameter of the profile
            vertex_z: axial position of the surface vertex
            steps: number of points from the axis to the edge

        Returns:
            list of [z, y] points running from -sd to +sd
        """
        prf = []
        if self.is_flat():
            return [[vertex_z, -sd], [vertex_z, sd]]
        for y in np.linspace(-sd, sd, 2*steps + 1):
            prf.append([vertex_z + self.sag(abs(y)), y])
        return prf


class Spherical(EvenPolynomial):
    """ Spherical surface profile parameterized by radius of curvature. """
    def __init__(self, roc=0.0):
        super().__init__(roc=roc)

    def __repr__(self):
        return f"{type(self).__name__}(roc={self.roc})"


def create_profile(roc, cc=0.0, coefs=None):
    """ return the simplest profile class that describes the surface """
    if cc == 0.0 and not coefs:
        return Spherical(roc)
    return EvenPolynomial(roc, cc, coefs)
