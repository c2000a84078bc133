#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2020 Michael J. Hayford
""" Deterministic ray bundles and the color of a pixel

    Every pixel traces a bundle of rays around its center direction. Two
    bundle patterns are available, both free of any random source so that
    repeated scans give identical images:

        - 'fan': the chief ray plus rings of rays at fractions of the
          spread angle, alternate rings staggered by half a step
        - 'r2': points of the R2 quasi-random sequence mapped onto the unit
          disk, scaled to the spread angle

.. Created on Tue Mar 24 21:14:31 2020

.. codeauthor: Michael J. Hayford
"""
import math
import numpy as np

from lensbender.coord_geometry_types import Color, Dir3d
from lensbender.optical.renderspec import RenderSpec
from lensbender.util.colors import direction_to_color, average_colors
from lensbender.util.misc_math import normalize, perpendicular_basis
from .trace import trace_ray


# generalized golden ratio, the root of x**(d+1) = x + 1
# phi(1) = 1.61803398874989484820458683436563
# phi(2) = 1.32471795724474602596090885447809
def phi(d):
    x = 2.0000
    for i in range(10):
        x = pow(1+x, 1/(d+1))
    return x


def R_2_quasi_random_generator(n):
    """A 2d sequence based on a R**2 quasi-random sequence

    See `The Unreasonable Effectiveness of Quasirandom Sequences
    <http://extremelearning.com.au/unreasonable-effectiveness-of-quasirandom-sequences/ >`
    """
    d = 2
    g = phi(d)
    alpha = np.array([pow(1/g, j+1) % 1 for j in range(d)])
    seed = 0.5
    for i in range(n):
        yield (seed + alpha*(i+1)) % 1


def concentric_sample_disk(u, offset=True):
    """Map a 2d unit square sample to the unit disk."""
    if offset:
        uOffset = 2*u - np.array([1, 1])
    else:
        uOffset = u

    if uOffset[0] == 0 and uOffset[1] == 0:
        return np.array([0., 0.])

    if abs(uOffset[0]) > abs(uOffset[1]):
        r = uOffset[0]
        theta = np.pi/4 * (uOffset[1]/uOffset[0])
    else:
        r = uOffset[1]
        theta = np.pi/2 - np.pi/4 * (uOffset[0]/uOffset[1])

    return r*np.array([math.cos(theta), math.sin(theta)])


def fan_directions(center_dir, num_rings=2, rays_per_ring=6, spread=0.25):
    """ returns the directions of a ring fan around center_dir

    Args:
        center_dir: direction of the chief ray
        num_rings: number of rings around the chief ray
        rays_per_ring: number of rays in each ring
        spread: angle of the outermost ring from the chief ray, deg

    Returns:
        array of 1 + num_rings*rays_per_ring unit directions, chief ray first
    """
    center = normalize(np.asarray(center_dir, dtype=float))
    u, v = perpendicular_basis(center)
    dirs = [center]
    for i in range(1, num_rings+1):
        theta = math.radians(spread)*i/num_rings
        stagger = 0.5 if i % 2 == 0 else 0.0
        for j in range(rays_per_ring):
            az = 2*math.pi*(j + stagger)/rays_per_ring
            dirs.append(math.cos(theta)*center +
                        math.sin(theta)*(math.cos(az)*u + math.sin(az)*v))
    return np.array(dirs)


def disk_directions(center_dir, num_samples=13, spread=0.25):
    """ returns R2 quasi-random directions within spread (deg) of center_dir
    """
    center = normalize(np.asarray(center_dir, dtype=float))
    u, v = perpendicular_basis(center)
    tan_spread = math.tan(math.radians(spread))
    dirs = [center]
    for xy in R_2_quasi_random_generator(num_samples - 1):
        x, y = tan_spread*concentric_sample_disk(xy)
        dirs.append(normalize(center + x*u + y*v))
    return np.array(dirs)


def bundle_directions(center_dir: Dir3d, spec: RenderSpec):
    """ returns the ray bundle directions selected by `spec.pattern` """
    if spec.pattern == 'r2':
        return disk_directions(center_dir, spec.num_samples, spec.spread)
    return fan_directions(center_dir, spec.num_rings, spec.rays_per_ring,
                          spec.spread)


def ray_color(ray_result, spec: RenderSpec) -> Color:
    """ returns the color of a traced ray

    A failed ray or a ray that met nothing is background; a ray stopped by a
    sphere, directly or through lenses, takes the hit color; a ray leaving
    the scene after crossing a lens maps its exit direction to a color.
    """
    ray_pkg, ray_err = ray_result
    if ray_err is not None:
        return np.array(spec.background_color)
    if ray_pkg.stop is not None:
        return np.array(spec.hit_color)
    if ray_pkg.elements:
        return direction_to_color(ray_pkg.ray[-1].d)
    return np.array(spec.background_color)


def sample_pixel(origin, center_dir, records, spec=None) -> Color:
    """ returns the averaged color of the ray bundle of one pixel

    Args:
        origin: world position of the pixel
        center_dir: direction the pixel looks along
        records: encoded scene records
        spec: :class:`~.RenderSpec`, defaults are used if None
    """
    if spec is None:
        spec = RenderSpec()
    if len(records) == 0:
        return np.array(spec.background_color)

    wvls = spec.wavelengths
    colors = []
    for i, d in enumerate(bundle_directions(center_dir, spec)):
        ray_result = trace_ray(records, origin, d, wvls[i % len(wvls)],
                               eps=spec.eps, max_elements=spec.max_elements)
        colors.append(ray_color(ray_result, spec))
    return average_colors(colors)
