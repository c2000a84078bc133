#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Base level ray/object intersection and refraction

    Spheres are intersected directly. A lens is intersected in its own
    frame, where its body is the intersection of the solids bounded by the
    two surfaces:

        - a convex surface bounds the inside of its sphere
        - a concave surface bounds the outside of its sphere, on the lens
          side of the plane through the center of curvature
        - a flat surface bounds a half space

    Each solid contributes parameter spans along the ray. The first span of
    their intersection that starts ahead of the ray on a lens surface within
    the clear aperture gives the entry. The refracted ray then leaves
    through the other surface.

.. Created on Tue Sep  8 11:28:03 2026

.. codeauthor: Michael J. Hayford
"""
import logging
from math import sqrt, inf

import attr
import numpy as np

import lensbender.optical.model_constants as mc
from lensbender.coord_geometry_types import Vec3d, Dir3d
from lensbender.optical.medium import GlassDispersion, refractive_index
from lensbender.util.misc_math import normalize, radial_distance
from .traceerror import (TraceMissedSurfaceError, TraceTIRError,
                         TraceRayBlockedError)

logger = logging.getLogger(__name__)

NO_HIT = -inf
""" root value reported when a ray misses a sphere """


@attr.s
class Hit:
    """ Result of an intersection query.

    For a lens hit, `surface` is the surface the ray enters through and
    `exit_surface` the surface it leaves through. When the ray starts
    inside the glass, `inside` is True and the hit data describe the exit.
    """
    found = attr.ib(default=False)
    t = attr.ib(default=inf)
    position = attr.ib(default=None, eq=False)
    normal = attr.ib(default=None, eq=False)
    object_index = attr.ib(default=-1)
    is_lens_body = attr.ib(default=False)
    surface = attr.ib(default=None)
    exit_surface = attr.ib(default=None)
    inside = attr.ib(default=False)


def intersect_sphere(p: Vec3d, d: Dir3d, center: Vec3d,
                     radius: float) -> tuple[float, float]:
    """ returns the near and far ray parameters of a sphere intersection

    Both roots are :data:`NO_HIT` when the ray misses the sphere.
    """
    oc = p - center
    a = np.dot(d, d)
    b = np.dot(d, oc)
    c = np.dot(oc, oc) - radius*radius
    disc = b*b - a*c
    if disc < 0.0:
        return NO_HIT, NO_HIT
    sqrt_disc = sqrt(disc)
    return (-b - sqrt_disc)/a, (-b + sqrt_disc)/a


def refract(incident: Dir3d, normal: Dir3d, eta: float) -> Dir3d|None:
    """ vector form of Snell's law

    Args:
        incident: unit direction of the incoming ray
        normal: unit surface normal, either orientation
        eta: ratio of the incident to the transmitted refractive index

    Returns:
        the unit transmitted direction, or None at total internal reflection
    """
    cos_i = np.dot(normal, incident)
    if cos_i > 0.0:
        normal = -normal
        cos_i = -cos_i
    k = 1.0 - eta*eta*(1.0 - cos_i*cos_i)
    if k < 0.0:
        return None
    return normalize(eta*incident - (eta*cos_i + sqrt(k))*normal)


def bend(d_in, normal, n_in, n_out):
    """ refract incoming direction, d_in, about normal """
    d_out = refract(d_in, normal, n_in/n_out)
    if d_out is None:
        raise TraceTIRError(d_in, normal, n_in, n_out)
    return d_out


def is_convex(srf, roc):
    """ True if the lens body lies inside the sphere of surface srf """
    return roc > 0.0 if srf == mc.Front else roc < 0.0


def other_surface(srf):
    return mc.Back if srf == mc.Front else mc.Front


def lens_surfaces(rec):
    """ returns the (vertex z, roc) of the front and back lens surfaces """
    half_t = 0.5*rec['thickness']
    return {mc.Front: (-half_t, rec['front_roc']),
            mc.Back: (half_t, rec['back_roc'])}


def surface_normal(pt, srf, z_vertex, roc):
    """ outward normal of the lens body at pt, in the lens frame """
    if roc == 0.0:
        return np.array([0., 0., -1. if srf == mc.Front else 1.])
    center = np.array([0., 0., z_vertex + roc])
    n = (pt - center)/abs(roc)
    return n if is_convex(srf, roc) else -n


def _halfspace(p, d, z0, keep_above, src):
    if d[2] == 0.0:
        inside = p[2] >= z0 if keep_above else p[2] <= z0
        return [(-inf, None, inf, None)] if inside else []
    t = (z0 - p[2])/d[2]
    if (d[2] > 0.0) == keep_above:
        return [(t, src, inf, None)]
    return [(-inf, None, t, src)]


def _clip_spans(spans_a, spans_b):
    """ intersect two lists of (t0, src0, t1, src1) spans

    On equal bounds the bound of `spans_a` is kept.
    """
    clipped = []
    for a0, sa0, a1, sa1 in spans_a:
        for b0, sb0, b1, sb1 in spans_b:
            t0, s0 = (a0, sa0) if a0 >= b0 else (b0, sb0)
            t1, s1 = (a1, sa1) if a1 <= b1 else (b1, sb1)
            if t0 < t1:
                clipped.append((t0, s0, t1, s1))
    return sorted(clipped, key=lambda span: span[0])


def _surface_spans(p, d, srf, z_vertex, roc):
    """ spans of the ray inside the solid bounded by surface srf """
    # the front surface bounds the body toward +z, the back toward -z
    keep_above = srf == mc.Front
    if roc == 0.0:
        return _halfspace(p, d, z_vertex, keep_above, srf)

    center = np.array([0., 0., z_vertex + roc])
    t_near, t_far = intersect_sphere(p, d, center, abs(roc))
    if is_convex(srf, roc):
        if t_far == NO_HIT:
            return []
        return [(t_near, srf, t_far, srf)]

    if t_far == NO_HIT:
        outside = [(-inf, None, inf, None)]
    else:
        outside = [(-inf, None, t_near, srf), (t_far, srf, inf, None)]
    return _clip_spans(outside,
                       _halfspace(p, d, center[2], keep_above, None))


def intersect_sphere_rec(p, d, rec, index=-1, eps=1.0e-6) -> Hit:
    """ intersect a ray with an encoded sphere record """
    center = rec['position']
    radius = rec['radius']
    t_near, t_far = intersect_sphere(p, d, center, radius)
    if t_far <= eps:
        return Hit()
    t = t_near if t_near > eps else t_far
    inc_pt = p + t*d
    return Hit(True, t, inc_pt, (inc_pt - center)/radius, index, False)


def intersect_lens(p, d, rec, index=-1, eps=1.0e-6) -> Hit:
    """ intersect a ray with an encoded lens record

    Spans whose entry lies on a center plane rather than a lens surface, or
    outside the clear aperture, are passed over for the next span ahead.

    Returns:
        a :class:`Hit` at the entry into the lens body, not found if the ray
        never enters it through a surface within the clear aperture
    """
    rot, pos = rec['rotation'], rec['position']
    p_l = rot.T.dot(p - pos)
    d_l = rot.T.dot(d)
    surfs = lens_surfaces(rec)
    spans = _clip_spans(_surface_spans(p_l, d_l, mc.Front, *surfs[mc.Front]),
                        _surface_spans(p_l, d_l, mc.Back, *surfs[mc.Back]))

    ap = rec['aperture_radius']
    for t0, s0, t1, s1 in spans:
        if t1 <= eps:
            continue
        if t0 > eps:
            if s0 is None:
                continue
            inc_pt_l = p_l + t0*d_l
            if radial_distance(inc_pt_l) > ap:
                continue
            nrml = rot.dot(surface_normal(inc_pt_l, s0, *surfs[s0]))
            return Hit(True, t0, p + t0*d, nrml, index, True,
                       surface=s0, exit_surface=other_surface(s0))

        # the ray starts inside the glass
        if radial_distance(p_l) > ap:
            continue
        exit_pt_l = p_l + t1*d_l
        nrml = (rot.dot(surface_normal(exit_pt_l, s1, *surfs[s1]))
                if s1 is not None else None)
        return Hit(True, t1, p + t1*d, nrml, index, True,
                   surface=s1, exit_surface=s1, inside=True)
    return Hit()


def closest_hit(records, p, d, eps=1.0e-6, exclude=()) -> Hit:
    """ returns the nearest hit of the ray among the encoded records

    Args:
        records: encoded scene records
        p: ray origin
        d: unit ray direction
        eps: minimum ray parameter accepted as a hit
        exclude: indices of records to skip

    The lowest positive ray parameter wins; on an exact tie the earlier
    record is kept.
    """
    closest = Hit()
    for i, rec in enumerate(records):
        if i in exclude:
            continue
        kind = rec['kind']
        if kind == mc.SphereKind:
            hit = intersect_sphere_rec(p, d, rec, index=i, eps=eps)
        elif kind == mc.LensKind:
            hit = intersect_lens(p, d, rec, index=i, eps=eps)
        else:
            raise ValueError(f"unknown record kind {kind} at index {i}")
        if hit.found and hit.t < closest.t:
            closest = hit
    return closest


def exit_distance(p, d, srf, z_vertex, roc, eps=1.0e-6):
    """ distance from p, inside the lens body, to surface srf """
    if roc == 0.0:
        if d[2] == 0.0:
            raise TraceMissedSurfaceError(srf=srf)
        t = (z_vertex - p[2])/d[2]
    else:
        center = np.array([0., 0., z_vertex + roc])
        t_near, t_far = intersect_sphere(p, d, center, abs(roc))
        if t_far == NO_HIT:
            raise TraceMissedSurfaceError(srf=srf)
        t = t_far if is_convex(srf, roc) else t_near
    if t <= eps:
        raise TraceMissedSurfaceError(srf=srf)
    return t


def transmit_lens(rec, hit: Hit, d: Dir3d, wvl: float, eps=1.0e-6):
    """ refract a ray through the lens it hit

    The refracted ray is carried from the entry surface to the other
    surface of the lens; only that exit point is checked against the clear
    aperture.

    Args:
        rec: the encoded lens record
        hit: the lens :class:`Hit` of the ray
        d: unit direction of the incoming ray
        wvl: wavelength of the ray (nm)
        eps: offset of the exiting ray origin along its direction

    Returns:
        (int_seg, out_pt, out_dir, out_nrml) where int_seg is the segment
        [inc_pt, int_dir, int_dst, normal] inside the glass, or None if the
        ray started inside; out_pt is the exit point offset by eps.

    Raises:
        InvalidDispersionError: the glass has no index at wvl
        TraceTIRError: total internal reflection at either surface
        TraceMissedSurfaceError: the internal ray misses the exit surface
        TraceRayBlockedError: the ray leaves through the lens rim
    """
    n = refractive_index(wvl, GlassDispersion.from_array(rec['dispersion']))
    rot, pos = rec['rotation'], rec['position']
    surfs = lens_surfaces(rec)
    d_l = rot.T.dot(d)
    int_seg = None
    try:
        if hit.inside:
            exit_srf = hit.exit_surface
            int_dir_l = d_l
            exit_pt_l = rot.T.dot(hit.position - pos)
        else:
            exit_srf = other_surface(hit.surface)
            inc_pt_l = rot.T.dot(hit.position - pos)
            nrml_l = rot.T.dot(hit.normal)
            int_dir_l = bend(d_l, nrml_l, 1.0, n)
            try:
                int_dst = exit_distance(inc_pt_l, int_dir_l, exit_srf,
                                        *surfs[exit_srf], eps=eps)
            except TraceMissedSurfaceError as ray_miss:
                ray_miss.obj = hit.object_index
                raise ray_miss
            exit_pt_l = inc_pt_l + int_dst*int_dir_l
            int_seg = [hit.position, rot.dot(int_dir_l), int_dst, hit.normal]

        if (exit_srf is None or
                radial_distance(exit_pt_l) > rec['aperture_radius']):
            raise TraceRayBlockedError(hit.object_index,
                                       pos + rot.dot(exit_pt_l))

        exit_nrml_l = surface_normal(exit_pt_l, exit_srf, *surfs[exit_srf])
        out_dir_l = bend(int_dir_l, exit_nrml_l, n, 1.0)

    except TraceTIRError as ray_tir:
        ray_tir.obj = hit.object_index
        ray_tir.int_pt = hit.position
        raise ray_tir

    out_dir = rot.dot(out_dir_l)
    out_pt = pos + rot.dot(exit_pt_l) + eps*out_dir
    return int_seg, out_pt, out_dir, rot.dot(exit_nrml_l)
