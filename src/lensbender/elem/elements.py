#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Module for the objects of the optical scene, spheres and lenses

    Scene objects are immutable values; an edit replaces the object, see
    :meth:`~.SceneModel.replace` and :func:`attr.evolve`.

    A :class:`Lens` is described in its own frame: the lens axis is the
    local Z axis, the front vertex lies at -thickness/2 and the back vertex
    at +thickness/2. The frame is placed by `center` + `decenter` and
    oriented by `rotation` + `tilt`, euler angles in degrees.

.. Created on Sun Jan 28 16:27:01 2018

.. codeauthor: Michael J. Hayford
"""
import logging

import attr
import numpy as np

from lensbender.coord_geometry_types import Vec3d, Mat3d
from lensbender.elem.profiles import create_profile
from lensbender.optical.medium import decode_glass, refractive_index
from lensbender.util.misc_math import euler2rot3d

logger = logging.getLogger(__name__)


def _triple(v):
    t = tuple(float(x) for x in v)
    if len(t) != 3:
        raise ValueError(f"expected 3 components, got {v}")
    return t


def _coefs(v):
    return tuple(float(a) for a in v) if v is not None else ()


def _positive(instance, attribute, value):
    if not value > 0.0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@attr.s(frozen=True)
class Sphere:
    """ Opaque sphere; any ray striking it reports the hit color. """
    center = attr.ib(converter=_triple)
    radius = attr.ib(converter=float, validator=_positive)
    name = attr.ib(default='', eq=False)

    def listobj_str(self):
        return (f"Sphere {self.name}: center={self.center}  "
                f"radius={self.radius}\n")


@attr.s(frozen=True)
class Lens:
    """ Singlet lens bounded by two spherical surfaces and a clear aperture.

    Attributes:
        center: lens center, midway between the vertices
        aperture_radius: clear aperture radius, positive
        thickness: vertex to vertex thickness, positive
        front_roc: radius of curvature of the front surface, 0 if flat
        back_roc: radius of curvature of the back surface, 0 if flat
        glass: :class:`~.GlassDispersion`, catalog name or coefficients
        rotation: euler angles of the lens frame, degrees
        decenter: offset added to the center
        tilt: euler angles added to the rotation, degrees
        front_cc, back_cc: conic constants of the surface profiles
        front_coefs, back_coefs: even aspheric coefficients, A4, A6, ...
    """
    center = attr.ib(converter=_triple)
    aperture_radius = attr.ib(converter=float, validator=_positive)
    thickness = attr.ib(converter=float, validator=_positive)
    front_roc = attr.ib(converter=float)
    back_roc = attr.ib(converter=float)
    glass = attr.ib(default='N-BK7', converter=decode_glass)
    rotation = attr.ib(default=(0., 0., 0.), converter=_triple)
    decenter = attr.ib(default=(0., 0., 0.), converter=_triple)
    tilt = attr.ib(default=(0., 0., 0.), converter=_triple)
    front_cc = attr.ib(default=0.0, converter=float)
    back_cc = attr.ib(default=0.0, converter=float)
    front_coefs = attr.ib(default=(), converter=_coefs)
    back_coefs = attr.ib(default=(), converter=_coefs)
    name = attr.ib(default='', eq=False)

    @property
    def position(self) -> Vec3d:
        """ world position of the lens frame origin """
        return np.array(self.center) + np.array(self.decenter)

    @property
    def rotation_matrix(self) -> Mat3d:
        """ rotation from the lens frame to world coordinates """
        return euler2rot3d(np.array(self.rotation) + np.array(self.tilt))

    @property
    def axis(self):
        return self.rotation_matrix.dot(np.array([0., 0., 1.]))

    @property
    def front_vertex(self) -> Vec3d:
        return self.position - 0.5*self.thickness*self.axis

    @property
    def back_vertex(self) -> Vec3d:
        return self.position + 0.5*self.thickness*self.axis

    @property
    def front_profile(self):
        return create_profile(self.front_roc, self.front_cc,
                              self.front_coefs)

    @property
    def back_profile(self):
        return create_profile(self.back_roc, self.back_cc, self.back_coefs)

    def edge_sags(self):
        """ returns the sag of the front and back surfaces at the aperture """
        return (self.front_profile.sag(self.aperture_radius),
                self.back_profile.sag(self.aperture_radius))

    def edge_thickness(self) -> float:
        """ axial thickness of the lens at the clear aperture """
        front_sag, back_sag = self.edge_sags()
        return self.thickness - front_sag + back_sag

    def lens_type(self) -> str:
        """ classify the lens by the shape of its two surfaces """
        def shape(roc, convex_sign):
            if roc == 0.0:
                return 'plano'
            return 'convex' if roc*convex_sign > 0.0 else 'concave'

        shapes = {shape(self.front_roc, 1.0), shape(self.back_roc, -1.0)}
        if shapes == {'plano'}:
            return 'window'
        if len(shapes) == 1:
            return 'bi' + shapes.pop()
        if 'plano' in shapes:
            shapes.discard('plano')
            return 'plano-' + shapes.pop()
        return 'meniscus'

    def focal_length(self, wvl: float) -> float:
        """ thick lens effective focal length in air at wvl (nm)

        Returns:
            float: the focal length, inf for an afocal lens
        """
        n = refractive_index(wvl, self.glass)
        c1 = 1.0/self.front_roc if self.front_roc != 0.0 else 0.0
        c2 = 1.0/self.back_roc if self.back_roc != 0.0 else 0.0
        power = (n - 1.0)*(c1 - c2 + (n - 1.0)*self.thickness*c1*c2/n)
        return 1.0/power if power != 0.0 else float('inf')

    def listobj_str(self):
        o_str = f"Lens {self.name}: {self.lens_type()}\n"
        o_str += (f"center={self.center}  aperture={self.aperture_radius}  "
                  f"thickness={self.thickness}\n")
        o_str += f"front roc={self.front_roc}  back roc={self.back_roc}\n"
        o_str += f"glass: {self.glass.name or 'user'}\n"
        if any(self.rotation) or any(self.tilt):
            o_str += f"rotation={self.rotation}  tilt={self.tilt}\n"
        if any(self.decenter):
            o_str += f"decenter={self.decenter}\n"
        return o_str


def check_geometry(lens: Lens) -> bool:
    """ returns True if the lens surfaces don't cross inside the aperture """
    ok = lens.edge_thickness() > 0.0
    for roc in (lens.front_roc, lens.back_roc):
        if roc != 0.0 and lens.aperture_radius > abs(roc):
            ok = False
    if not ok:
        logger.warning(f"lens {lens.name or ''} aperture "
                       f"{lens.aperture_radius} exceeds its surfaces: "
                       f"roc={lens.front_roc}, {lens.back_roc}, "
                       f"edge thickness={lens.edge_thickness():.4g}")
    return ok
