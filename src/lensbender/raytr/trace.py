#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Tracing of single rays through the encoded scene

    A ray is traced to its nearest hit. A sphere stops the ray; a lens is
    traversed and the search resumes from the exit point, skipping the
    lenses already traversed. The ray is returned as a list of
    [inc_pt, after_dir, after_dst, normal] segments.

.. Created on Fri Sep 11 21:06:58 2026

.. codeauthor: Michael J. Hayford
"""
import logging
from math import inf

import numpy as np
import pandas as pd

import lensbender.optical.model_constants as mc
from lensbender.util.misc_math import normalize
from . import RayResult, RayPkg, RaySeg
from .raytrace import closest_hit, transmit_lens
from .traceerror import TraceError, TraceRayBlockedError

logger = logging.getLogger(__name__)


def ray_df(ray):
    """ return a |DataFrame| containing ray data """
    r = pd.DataFrame(ray, columns=['inc_pt', 'after_dir',
                                   'after_dst', 'normal'])
    r.index.names = ['seg']
    return r


def list_ray(ray_obj, start=0):
    """ pretty print a ray

    The input ray_obj can be either the return from trace_ray(), i.e.
    a (ray_pkg, ray_err) tuple or a ray_pkg, or a `ray` alone.
    """
    ray_err = None
    if isinstance(ray_obj, RayResult):
        ray_obj, ray_err = ray_obj
    ray = ray_obj.ray if isinstance(ray_obj, RayPkg) else ray_obj

    colHeader = "            X            Y            Z           L" \
                "            M            N               Len"
    print(colHeader)

    colFormats = "{:3d}: {:12.5f} {:12.5f} {:12.5g} {:12.6f} {:12.6f} " \
                 "{:12.6f} {:12.5g}"

    for i, r in enumerate(ray[start:], start=start):
        print(colFormats.format(i,
                                r[mc.p][0], r[mc.p][1], r[mc.p][2],
                                r[mc.d][0], r[mc.d][1], r[mc.d][2],
                                r[mc.dst]))
    if ray_err is not None:
        print(f"ray failure: {type(ray_err).__name__}")


def trace_raw(records, pt0, dir0, wvl, eps=1.0e-6, max_elements=4):
    """ fundamental raytrace function

    Args:
        records: encoded scene records
        pt0: starting point of the ray
        dir0: starting direction of the ray
        wvl: wavelength of the ray (nm)
        eps: minimum distance accepted between successive hits
        max_elements: maximum number of lenses a ray may traverse

    Returns:
        (ray, stop, elements, wvl)

        - ray is a list of [inc_pt, after_dir, after_dst, normal]
        - stop is the index of the sphere that stopped the ray, or None
        - elements is a tuple of the indices of the lenses traversed
        - wvl is the wavelength (nm) of the ray

    Raises:
        TraceError: the ray was absorbed; the partial ray is attached as
            `ray_pkg`
    """
    ray = []
    elements = []
    before_pt = np.asarray(pt0, dtype=float)
    before_dir = normalize(np.asarray(dir0, dtype=float))
    before_normal = None
    try:
        while True:
            hit = closest_hit(records, before_pt, before_dir, eps=eps,
                              exclude=elements)
            if not hit.found:
                ray.append([before_pt, before_dir, inf, before_normal])
                return ray, None, tuple(elements), wvl

            ray.append([before_pt, before_dir, hit.t, before_normal])
            if not hit.is_lens_body:
                ray.append([hit.position, before_dir, 0.0, hit.normal])
                return ray, hit.object_index, tuple(elements), wvl

            if len(elements) >= max_elements:
                raise TraceRayBlockedError(hit.object_index, hit.position)

            rec = records[hit.object_index]
            int_seg, after_pt, after_dir, after_normal = transmit_lens(
                rec, hit, before_dir, wvl, eps=eps)
            if int_seg is not None:
                ray.append(int_seg)
            elements.append(hit.object_index)

            before_pt = after_pt
            before_dir = after_dir
            before_normal = after_normal

    except TraceError as ray_error:
        ray_error.ray_pkg = ray, None, tuple(elements), wvl
        raise ray_error


def trace_ray(records, pt0, dir0, wvl, **kwargs) -> RayResult:
    """ Trace a single ray, absorbing ray failures into the result.

    Ray failures (TIR, invalid dispersion, missed exit surface, blocking by
    a lens rim) are returned as the `err` of the :class:`~.RayResult`, with
    the ray data up to the failure as the `pkg`.

    Args:
        records: encoded scene records
        pt0: starting point of the ray
        dir0: starting direction of the ray
        wvl: wavelength of the ray (nm)
        eps: minimum distance accepted between successive hits
        max_elements: maximum number of lenses a ray may traverse

    Returns:
        RayResult: ray_pkg, trace_error | None
    """
    try:
        ray, stop, elements, wvl = trace_raw(records, pt0, dir0, wvl,
                                             **kwargs)
    except TraceError as rayerr:
        ray, stop, elements, wvl = rayerr.ray_pkg
        rayerr.ray_pkg = RayPkg([RaySeg(*rs) for rs in ray], stop,
                                elements, wvl)
        logger.debug(f"ray failure at {wvl} nm: {type(rayerr).__name__}")
        return RayResult(rayerr.ray_pkg, rayerr)

    ray_pkg = RayPkg([RaySeg(*rs) for rs in ray], stop, elements, wvl)
    return RayResult(ray_pkg, None)
