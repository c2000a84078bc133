#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Settings controlling how the sensor samples the scene

.. Created on Sat Sep 19 14:37:12 2026

.. codeauthor: Michael J. Hayford
"""
import attr
from opticalglass.spectral_lines import get_wavelength

from lensbender.util.colors import BACKGROUND, HIT, to_color


def _wavelengths(wvls):
    """ resolve spectral line labels, e.g. 'd', to wavelengths in nm """
    if isinstance(wvls, (str, int, float)):
        wvls = [wvls]
    wvls = tuple(float(get_wavelength(w)) for w in wvls)
    if len(wvls) == 0:
        raise ValueError("at least one sample wavelength is required")
    return wvls


def _color(value):
    return tuple(to_color(value))


def _positive_int(instance, attribute, value):
    if value < 1:
        raise ValueError(f"{attribute.name} must be at least 1, got {value}")


@attr.s
class RenderSpec:
    """ Sampling, color and execution settings for a sensor scan.

    Attributes:
        wavelengths: sample wavelengths in nm, or spectral line labels,
                     assigned cyclically to the rays of a pixel bundle
        num_rings: number of rings of the 'fan' bundle around the chief ray
        rays_per_ring: number of rays in each ring of the 'fan' bundle
        spread: half angle of the ray bundle, in degrees
        pattern: 'fan' for rings of rays, 'r2' for a quasi-random disk
        num_samples: number of rays of the 'r2' bundle
        eps: minimum ray parameter accepted as a hit, also the offset of
             rays leaving a lens
        background_color: color of rays that leave the scene or fail
        hit_color: color of rays stopped by a sphere
        max_elements: maximum number of lenses a ray may traverse
        workers: number of threads scanning sensor rows
    """
    wavelengths = attr.ib(default=('F', 'd', 'C'), converter=_wavelengths)
    num_rings = attr.ib(default=2, converter=int)
    rays_per_ring = attr.ib(default=6, converter=int,
                            validator=_positive_int)
    spread = attr.ib(default=0.25, converter=float)
    pattern = attr.ib(default='fan',
                      validator=attr.validators.in_(('fan', 'r2')))
    num_samples = attr.ib(default=13, converter=int, validator=_positive_int)
    eps = attr.ib(default=1.0e-6, converter=float)
    background_color = attr.ib(default=BACKGROUND, converter=_color)
    hit_color = attr.ib(default=HIT, converter=_color)
    max_elements = attr.ib(default=4, converter=int)
    workers = attr.ib(default=1, converter=int, validator=_positive_int)

    def listobj_str(self):
        o_str = "wavelengths: " + \
            ", ".join(f"{w:.4f}" for w in self.wavelengths) + " nm\n"
        if self.pattern == 'fan':
            o_str += (f"fan: rings={self.num_rings}  "
                      f"rays/ring={self.rays_per_ring}  "
                      f"spread={self.spread} deg\n")
        else:
            o_str += (f"r2: samples={self.num_samples}  "
                      f"spread={self.spread} deg\n")
        o_str += (f"eps={self.eps}  max_elements={self.max_elements}  "
                  f"workers={self.workers}\n")
        o_str += (f"background={self.background_color}  "
                  f"hit={self.hit_color}\n")
        return o_str
