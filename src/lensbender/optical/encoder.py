#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Encoding of scene objects into fixed layout records

    :func:`encode` flattens an ordered list of :class:`~.Sphere` and
    :class:`~.Lens` objects into a read-only numpy structured array with one
    record per object, in input order. The ray tracer dispatches on the
    `kind` field and reads only the fields of that kind; unused fields are
    zero.

    Record fields:

        - kind: :data:`~.model_constants.SphereKind` or
          :data:`~.model_constants.LensKind`
        - position: sphere center, or lens frame origin (center + decenter)
        - radius: sphere radius
        - aperture_radius: lens clear aperture radius
        - thickness, front_roc, back_roc: lens geometry
        - dispersion: Sellmeier B1, B2, B3, C1, C2, C3 of the lens glass
        - rotation: rotation from the lens frame to world coordinates

.. Created on Wed Sep  2 10:15:44 2026

.. codeauthor: Michael J. Hayford
"""
import logging

import numpy as np

import lensbender.optical.model_constants as mc
from lensbender.elem.elements import Sphere, Lens, check_geometry

logger = logging.getLogger(__name__)

RECORD_DTYPE = np.dtype([
    ('kind', np.uint8),
    ('position', np.float64, (3,)),
    ('radius', np.float64),
    ('aperture_radius', np.float64),
    ('thickness', np.float64),
    ('front_roc', np.float64),
    ('back_roc', np.float64),
    ('dispersion', np.float64, (6,)),
    ('rotation', np.float64, (3, 3)),
    ])


def encode_sphere(rec, sphere: Sphere):
    rec['kind'] = mc.SphereKind
    rec['position'] = sphere.center
    rec['radius'] = sphere.radius
    rec['rotation'] = np.identity(3)


def encode_lens(rec, lens: Lens):
    check_geometry(lens)
    rec['kind'] = mc.LensKind
    rec['position'] = lens.position
    rec['aperture_radius'] = lens.aperture_radius
    rec['thickness'] = lens.thickness
    rec['front_roc'] = lens.front_roc
    rec['back_roc'] = lens.back_roc
    rec['dispersion'] = lens.glass.as_array()
    rec['rotation'] = lens.rotation_matrix


def encode(objects) -> np.ndarray:
    """ returns a read-only record array describing `objects`

    Args:
        objects: ordered sequence of :class:`~.Sphere` and :class:`~.Lens`

    Returns:
        numpy structured array of :data:`RECORD_DTYPE`, one record per
        object in input order; empty for an empty scene

    Raises:
        TypeError: for an object that is neither a sphere nor a lens
    """
    objects = list(objects)
    records = np.zeros(len(objects), dtype=RECORD_DTYPE)
    for i, obj in enumerate(objects):
        if isinstance(obj, Sphere):
            encode_sphere(records[i], obj)
        elif isinstance(obj, Lens):
            encode_lens(records[i], obj)
        else:
            raise TypeError(f"cannot encode scene object {obj!r}")
    records.flags.writeable = False
    return records


def list_records(records):
    """ pretty print the encoded records """
    colHeader = ("      kind            X            Y            Z"
                 "      radius/ap     thick    front roc     back roc")
    print(colHeader)
    colFormats = ("{:3d}: {:6s} {:12.5g} {:12.5g} {:12.5g} {:12.5g} "
                  "{:9.5g} {:12.5g} {:12.5g}")
    for i, rec in enumerate(records):
        kind = rec['kind']
        size = rec['radius'] if kind == mc.SphereKind else \
            rec['aperture_radius']
        pos = rec['position']
        print(colFormats.format(i, mc.kind_names[kind], pos[0], pos[1],
                                pos[2], size, rec['thickness'],
                                rec['front_roc'], rec['back_roc']))
