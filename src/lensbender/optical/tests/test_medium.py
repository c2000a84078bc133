#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Sep 15 17:06:17 2017

@author: Mike
"""


import unittest
from pytest import approx
import numpy.testing as npt

from opticalglass import glasserror

from lensbender.optical.medium import (GlassDispersion, GlassNotFoundError,
                                       FUSED_SILICA, CAF2, refractive_index,
                                       abbe_number, glass_code, find_glass,
                                       decode_glass)
from lensbender.raytr.traceerror import InvalidDispersionError, TraceError


class SellmeierTestCase(unittest.TestCase):
    def setUp(self):
        self.bk7 = GlassDispersion(1.03961212, 0.231792344, 1.01046945,
                                   0.00600069867, 0.0200179144, 103.560653)

    def test_bk7_index(self):
        assert refractive_index(587.5618, self.bk7) == approx(1.5168,
                                                              abs=1e-4)
        assert refractive_index(486.1327, self.bk7) == approx(1.5224,
                                                              abs=1e-4)
        assert refractive_index(656.2725, self.bk7) == approx(1.5143,
                                                              abs=1e-4)

    def test_normal_dispersion(self):
        n_blue = refractive_index(450.0, self.bk7)
        n_red = refractive_index(700.0, self.bk7)
        assert n_blue > n_red > 1.0

    def test_abbe_number(self):
        assert abbe_number(self.bk7) == approx(64.17, abs=0.05)
        assert glass_code(self.bk7) == '517.642'

    def test_pole(self):
        glass = GlassDispersion(1.0, 0.2, 1.0, 0.25, 0.02, 100.0)
        with self.assertRaises(InvalidDispersionError) as cm:
            refractive_index(500.0, glass)
        assert cm.exception.wvl == 500.0
        assert isinstance(cm.exception, TraceError)

    def test_negative_index_squared(self):
        glass = GlassDispersion(-5.0, 0.0, 0.0, 0.01, 0.02, 100.0)
        with self.assertRaises(InvalidDispersionError) as cm:
            refractive_index(500.0, glass)
        assert cm.exception.n2 < 0.0

    def test_non_positive_wavelength(self):
        with self.assertRaises(InvalidDispersionError):
            refractive_index(0.0, self.bk7)

    def test_coefficient_array(self):
        coefs = self.bk7.as_array()
        npt.assert_allclose(coefs[:3],
                            [1.03961212, 0.231792344, 1.01046945])
        assert GlassDispersion.from_array(coefs) == self.bk7


class GlassCatalogTestCase(unittest.TestCase):
    def setUp(self):
        self.bk7_coefs = [1.03961212, 0.231792344, 1.01046945,
                          0.00600069867, 0.0200179144, 103.560653]

    def test_catalog_bk7(self):
        bk7 = find_glass('N-BK7')
        assert bk7.name == 'N-BK7'
        assert bk7.catalog == 'Schott'
        npt.assert_allclose(bk7.as_array(), self.bk7_coefs)
        assert find_glass('N-BK7', 'Schott') == bk7

    def test_catalog_glasses(self):
        for name, cat in (('N-SF6', 'Schott'), ('N-LAK9', 'Schott'),
                          ('S-BSL7', 'Ohara')):
            glass = find_glass(name)
            assert glass.catalog == cat, name
            n = glass.rindex(587.5618)
            assert 1.4 < n < 1.9, name

    def test_malitson_glasses(self):
        assert FUSED_SILICA.catalog == 'Malitson'
        assert FUSED_SILICA.rindex(587.5618) == approx(1.4585, abs=1e-4)
        assert CAF2.rindex(587.5618) == approx(1.4338, abs=2e-4)

    def test_not_found(self):
        with self.assertRaises(GlassNotFoundError) as cm:
            find_glass('N-BK77')
        assert 'N-BK7' in cm.exception.matches
        assert cm.exception.name == 'N-BK77'
        with self.assertRaises(glasserror.GlassNotFoundError):
            find_glass('unobtainium')
        with self.assertRaises(KeyError):
            find_glass('unobtainium')

    def test_non_sellmeier_catalog(self):
        with self.assertRaises(ValueError):
            find_glass('H-K9L', 'CDGM')

    def test_decode_glass(self):
        bk7 = find_glass('N-BK7')
        assert decode_glass(bk7) is bk7
        assert decode_glass('N-BK7') == bk7
        assert decode_glass('N-BK7, Schott') == bk7
        assert decode_glass(list(bk7.as_array())) == bk7
        assert decode_glass(FUSED_SILICA) is FUSED_SILICA
        with self.assertRaises(ValueError):
            decode_glass([1.0, 2.0])

    def test_listobj_str(self):
        o_str = find_glass('N-SF11').listobj_str()
        assert 'N-SF11 (Schott)' in o_str
        assert 'nd=1.78' in o_str


if __name__ == '__main__':
    unittest.main(verbosity=3)
