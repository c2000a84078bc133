#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2017 Michael J. Hayford
""" Module for Sellmeier dispersion and the glasses used by lenses

    Glasses are described by the six coefficients of the three term
    Sellmeier formula, with wavelengths in micrometers:

        n² = 1 + Σ Bᵢλ²/(λ² − Cᵢ)

    Catalog glasses are taken from the Schott and Ohara catalogs of
    :mod:`opticalglass`, which list the same six coefficients;
    :func:`decode_glass` accepts a glass name, a coefficient sequence or a
    :class:`GlassDispersion`.

.. Created on Fri Sep 15 17:06:17 2017

.. codeauthor: Michael J. Hayford
"""
import difflib
import logging
from math import sqrt, isclose

import attr
import numpy as np
from opticalglass import glassfactory as gfact
from opticalglass import glasserror
from opticalglass.spectral_lines import get_wavelength

from lensbender.raytr.traceerror import InvalidDispersionError

logger = logging.getLogger(__name__)


@attr.s(frozen=True)
class GlassDispersion:
    """ Sellmeier coefficients of a glass, C terms in µm². """
    B1 = attr.ib(converter=float)
    B2 = attr.ib(converter=float)
    B3 = attr.ib(converter=float)
    C1 = attr.ib(converter=float)
    C2 = attr.ib(converter=float)
    C3 = attr.ib(converter=float)
    name = attr.ib(default='', eq=False)
    catalog = attr.ib(default='', eq=False)

    @classmethod
    def from_array(cls, coefs, name='', catalog=''):
        return cls(*coefs, name=name, catalog=catalog)

    def as_array(self):
        return np.array([self.B1, self.B2, self.B3,
                         self.C1, self.C2, self.C3])

    def rindex(self, wv_nm):
        """ returns the refractive index at wv_nm """
        return refractive_index(wv_nm, self)

    def listobj_str(self):
        o_str = f"{self.name or 'glass'} ({self.catalog or 'user'})\n"
        o_str += f"B: {self.B1:.9g} {self.B2:.9g} {self.B3:.9g}\n"
        o_str += f"C: {self.C1:.9g} {self.C2:.9g} {self.C3:.9g}\n"
        o_str += (f"nd={self.rindex(get_wavelength('d')):.5f}  "
                  f"vd={abbe_number(self):.2f}\n")
        return o_str


def refractive_index(wvl_nm: float, glass: GlassDispersion) -> float:
    """ returns the refractive index of `glass` at wvl_nm

    Args:
        wvl_nm: the wavelength in nm for the refractive index query
        glass: the :class:`GlassDispersion` of the medium

    Returns:
        float: the refractive index at wvl_nm

    Raises:
        InvalidDispersionError: at a pole of the formula, for a negative n²
            or for a non-positive wavelength
    """
    if wvl_nm <= 0.0:
        raise InvalidDispersionError(wvl_nm, glass)
    lam2 = (wvl_nm/1000.0)**2
    n2 = 1.0
    for b, c in ((glass.B1, glass.C1), (glass.B2, glass.C2),
                 (glass.B3, glass.C3)):
        if isclose(lam2, c, rel_tol=1e-12, abs_tol=1e-15):
            raise InvalidDispersionError(wvl_nm, glass)
        n2 += b*lam2/(lam2 - c)
    if n2 < 0.0:
        raise InvalidDispersionError(wvl_nm, glass, n2)
    return sqrt(n2)


def abbe_number(glass: GlassDispersion) -> float:
    """ returns the V-number of `glass` from the d, F and C lines """
    nd = refractive_index(get_wavelength('d'), glass)
    nF = refractive_index(get_wavelength('F'), glass)
    nC = refractive_index(get_wavelength('C'), glass)
    return (nd - 1.0)/(nF - nC)


def glass_code(glass: GlassDispersion) -> str:
    """ returns the six digit nnn.vvv glass code of `glass` """
    n = refractive_index(get_wavelength('d'), glass)
    v = abbe_number(glass)
    return f'{round(1000*(n - 1)):3d}.{round(10*v):3d}'


SELLMEIER_CATALOGS = ['Schott', 'Ohara']
""" opticalglass catalogs whose dispersion coefficients are Sellmeier terms """

FUSED_SILICA = GlassDispersion(0.6961663, 0.4079426, 0.8974794,
                               0.0684043**2, 0.1162414**2, 9.896161**2,
                               name='Fused Silica', catalog='Malitson')
""" Malitson's fused silica, for use as an explicit lens glass """

CAF2 = GlassDispersion(0.5675888, 0.4710914, 3.8484723,
                       0.050263605**2, 0.1003909**2, 34.649040**2,
                       name='CaF2', catalog='Malitson')
""" Malitson's calcium fluoride, for use as an explicit lens glass """


class GlassNotFoundError(glasserror.GlassNotFoundError, KeyError):
    """ Exception raised when a glass name isn't in the Sellmeier catalogs

    Close matches from the searched catalogs are listed in `matches`.
    """
    def __init__(self, catalog, name, matches=None):
        super().__init__(catalog, name)
        self.matches = matches if matches is not None else []


def close_matches(name, catalogs):
    """ returns the glass names in `catalogs` that resemble `name` """
    possibilities = []
    for cat_name in catalogs:
        try:
            glass_cat = gfact.get_glass_catalog(cat_name)
        except glasserror.GlassCatalogNotFoundError:
            continue
        possibilities += [gn for gn_decode, gn, gc in glass_cat.glass_list]
    return difflib.get_close_matches(name, possibilities)


def find_glass(name: str, catalog=None) -> GlassDispersion:
    """ returns the Sellmeier coefficients of the catalog glass `name`

    Args:
        name: the glass name, e.g. 'N-BK7' or 'S-BSL7'
        catalog: a catalog name or list of names, defaults to
            :data:`SELLMEIER_CATALOGS`

    Raises:
        GlassNotFoundError: if no catalog has the glass
        ValueError: if a catalog doesn't use the Sellmeier formula
    """
    if catalog is None:
        catalogs = SELLMEIER_CATALOGS
    else:
        catalogs = [catalog] if isinstance(catalog, str) else list(catalog)
    for cat_name in catalogs:
        if cat_name not in SELLMEIER_CATALOGS:
            raise ValueError(f"catalog {cat_name} has no Sellmeier "
                             f"coefficients")
    try:
        mat = gfact.create_glass(name, catalogs)
    except glasserror.GlassNotFoundError as gerr:
        matches = close_matches(name, catalogs)
        logger.info(f"glass {gerr.name} not found in {gerr.catalog}; "
                    f"close matches: {matches}")
        raise GlassNotFoundError(gerr.catalog, name, matches) from gerr
    logger.debug(f"glass {name} resolved to {mat.name()}, "
                 f"{mat.catalog_name()}")
    return GlassDispersion.from_array(mat.coefs[:6], name=mat.name(),
                                      catalog=mat.catalog_name())


def decode_glass(glass) -> GlassDispersion:
    """ Input utility for parsing various forms of glass input.

    The **glass** can have several forms:

        - a :class:`GlassDispersion`, returned as is
        - a glass name: str -> lookup via :func:`find_glass`
        - 'glass_name, catalog_name' as one string
        - a sequence of the six Sellmeier coefficients, B1, B2, B3, C1, C2, C3
    """
    if isinstance(glass, GlassDispersion):
        return glass
    if isinstance(glass, str):
        if ',' in glass:
            name, cat = glass.split(',')
            return find_glass(name.strip(), cat.strip())
        return find_glass(glass)
    coefs = list(glass)
    if len(coefs) != 6:
        raise ValueError(f"expected 6 Sellmeier coefficients, got {coefs}")
    return GlassDispersion.from_array(coefs)
