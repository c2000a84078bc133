#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Oct 18 10:59:29 2017

@author: Mike
"""


import unittest
from pytest import approx
from lensbender.elem.profiles import (sag, sag_array, Spherical,
                                      EvenPolynomial, create_profile)
import numpy as np
import numpy.testing as npt
from math import sqrt


class SagTestCase(unittest.TestCase):
    def test_flat_identity(self):
        for r in (0.0, 1.0, 7.5, 100.0):
            assert sag(0.0, r) == 0.0

    def test_exact_branch(self):
        r2 = 100.0
        R = 35.0
        truth = r2/(2*R*(1 + sqrt(1 - r2/(R*R))))
        assert sag(35.0, 10.0) == approx(truth, rel=1e-14)
        assert sag(-35.0, 10.0) == approx(-truth, rel=1e-14)

    def test_paraxial_fallback(self):
        assert sag(10.0, 12.0) == approx(144.0/20.0)
        assert sag(-10.0, 12.0) == approx(-144.0/20.0)

    def test_continuity_at_edge(self):
        R = 20.0
        below = sag(R, R*(1 - 1e-9))
        at = sag(R, R)
        assert below == approx(at, rel=1e-4)
        assert at == approx(R/2)

    def test_monotonic(self):
        R = 25.0
        r = np.linspace(0.0, R*0.999, 200)
        z = sag_array(R, r)
        assert np.all(np.diff(z) >= 0.0)
        assert z[0] == 0.0

    def test_conic_and_aspheric(self):
        # a paraboloid never leaves the exact branch
        assert sag(10.0, 30.0, cc=-1.0) == approx(900.0/40.0)
        assert sag(0.0, 2.0, coefs=[1e-3]) == approx(1e-3*16.0)
        assert sag(10.0, 2.0, coefs=[1e-3, 1e-5]) == approx(
            sag(10.0, 2.0) + 1e-3*16.0 + 1e-5*64.0)

    def test_sag_array_shape(self):
        r = np.array([[0.0, 1.0], [2.0, 3.0]])
        z = sag_array(15.0, r)
        assert z.shape == (2, 2)
        npt.assert_allclose(z[1, 1], sag(15.0, 3.0))


class ProfileTestCase(unittest.TestCase):
    def test_create_profile(self):
        assert isinstance(create_profile(10.0), Spherical)
        prf = create_profile(10.0, cc=-0.5)
        assert isinstance(prf, EvenPolynomial)
        assert prf.sag(3.0) == approx(sag(10.0, 3.0, cc=-0.5))

    def test_flat_profile(self):
        prf = Spherical(0.0)
        assert prf.is_flat()
        assert prf.profile(5.0, vertex_z=2.0) == [[2.0, -5.0], [2.0, 5.0]]

    def test_curved_profile(self):
        prf = Spherical(-40.0)
        pts = np.array(prf.profile(10.0, vertex_z=5.0, steps=4))
        assert pts.shape == (9, 2)
        npt.assert_allclose(pts[4], [5.0, 0.0])
        npt.assert_allclose(pts[0], [5.0 + sag(-40.0, 10.0), -10.0])
        npt.assert_allclose(pts[0, 0], pts[-1, 0])

    def test_listobj_str(self):
        prf = EvenPolynomial(roc=50.0, coefs=[1e-4])
        o_str = prf.listobj_str()
        assert 'roc=50.0' in o_str
        assert 'A4' in o_str


if __name__ == '__main__':
    unittest.main(verbosity=3)
