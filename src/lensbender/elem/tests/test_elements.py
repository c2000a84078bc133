#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Jan 28 16:27:01 2018

@author: Mike
"""


import unittest
from pytest import approx
import attr
import numpy as np
import numpy.testing as npt

from lensbender.elem.elements import Sphere, Lens, check_geometry
from lensbender.elem.profiles import sag
from lensbender.optical.medium import find_glass


class SphereTestCase(unittest.TestCase):
    def test_create(self):
        s = Sphere([0, 0, -500], 50)
        assert s.center == (0.0, 0.0, -500.0)
        assert s.radius == 50.0

    def test_invalid_radius(self):
        with self.assertRaises(ValueError):
            Sphere((0, 0, 0), 0.0)
        with self.assertRaises(ValueError):
            Sphere((0, 0, 0), -1.0)

    def test_immutable(self):
        s = Sphere((0, 0, 0), 1.0)
        with self.assertRaises(attr.exceptions.FrozenInstanceError):
            s.radius = 2.0
        s2 = attr.evolve(s, radius=2.0)
        assert s2.radius == 2.0 and s.radius == 1.0


class LensTestCase(unittest.TestCase):
    def setUp(self):
        self.lens = Lens((0, 0, 0), aperture_radius=15.0, thickness=10.0,
                         front_roc=35.0, back_roc=-35.0, glass='N-BK7')

    def test_glass_decoding(self):
        assert self.lens.glass == find_glass('N-BK7')
        lens = attr.evolve(self.lens, glass=find_glass('F2').as_array())
        assert lens.glass == find_glass('F2')

    def test_invalid_geometry(self):
        with self.assertRaises(ValueError):
            Lens((0, 0, 0), 0.0, 10.0, 35.0, -35.0)
        with self.assertRaises(ValueError):
            Lens((0, 0, 0), 10.0, 0.0, 35.0, -35.0)

    def test_vertex_separation(self):
        npt.assert_allclose(self.lens.front_vertex, [0., 0., -5.])
        npt.assert_allclose(self.lens.back_vertex, [0., 0., 5.])

    def test_rotated_vertices(self):
        lens = attr.evolve(self.lens, rotation=(0., 90., 0.),
                           decenter=(1., 0., 0.))
        sep = lens.back_vertex - lens.front_vertex
        assert np.linalg.norm(sep) == approx(lens.thickness)
        npt.assert_allclose(lens.position, [1., 0., 0.])
        npt.assert_allclose(lens.axis, [1., 0., 0.], atol=1e-12)

    def test_tilt_adds_to_rotation(self):
        lens = attr.evolve(self.lens, rotation=(0., 30., 0.),
                           tilt=(0., 15., 0.))
        ref = attr.evolve(self.lens, rotation=(0., 45., 0.))
        npt.assert_allclose(lens.rotation_matrix, ref.rotation_matrix)

    def test_edge_thickness(self):
        truth = 10.0 - 2*sag(35.0, 15.0)
        assert self.lens.edge_thickness() == approx(truth)
        assert check_geometry(self.lens)

    def test_bad_aperture_geometry(self):
        lens = attr.evolve(self.lens, aperture_radius=40.0)
        assert not check_geometry(lens)

    def test_lens_type(self):
        def lt(front, back):
            return attr.evolve(self.lens, front_roc=front,
                               back_roc=back).lens_type()
        assert lt(35.0, -35.0) == 'biconvex'
        assert lt(-35.0, 35.0) == 'biconcave'
        assert lt(35.0, 0.0) == 'plano-convex'
        assert lt(0.0, 35.0) == 'plano-concave'
        assert lt(20.0, 50.0) == 'meniscus'
        assert lt(0.0, 0.0) == 'window'

    def test_focal_length(self):
        n = self.lens.glass.rindex(587.5618)
        c = 1/35.0
        power = (n - 1)*(2*c - (n - 1)*10.0*c*c/n)
        assert self.lens.focal_length(587.5618) == approx(1/power)
        window = attr.evolve(self.lens, front_roc=0.0, back_roc=0.0)
        assert window.focal_length(587.5618) == float('inf')

    def test_listobj_str(self):
        o_str = self.lens.listobj_str()
        assert 'biconvex' in o_str
        assert 'N-BK7' in o_str


if __name__ == '__main__':
    unittest.main(verbosity=3)
