#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Constants used by the scene records and the ray tracer

.. Created on Wed Sep 26 11:16:30 2018

.. codeauthor: Michael J. Hayford
"""

# encoded object kinds
SphereKind, LensKind = range(2)
kind_names = ('sphere', 'lens')

# lens surfaces
Front, Back = range(2)

# ray segment fields
p, d, dst, nrml = range(4)
