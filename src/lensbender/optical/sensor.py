#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" The sensor that samples the scene, its pose and its motion

    The sensor is a rectangle in its local x-y plane, x to the right and y
    up, looking along its local -Z axis. Pixel rows run from the top of the
    sensor down. The sensor is placed in the scene by a :class:`Pose`.

    A :class:`SensorMotion` animates the sensor; the pose at any time is a
    pure function of the time and the static motion description.

.. Created on Mon Sep 14 20:41:07 2026

.. codeauthor: Michael J. Hayford
"""
import logging
from math import sin, pi, ceil

import attr
import numpy as np

from lensbender.coord_geometry_types import Vec3d, Dir3d, Mat3d
from lensbender.util.misc_math import euler2rot3d
from lensbender.raytr.traceerror import InvalidSensorError

logger = logging.getLogger(__name__)


def _triple(v):
    t = tuple(float(x) for x in v)
    if len(t) != 3:
        raise ValueError(f"expected 3 components, got {v}")
    return t


@attr.s(frozen=True)
class Pose:
    """ Position and orientation (euler angles, deg) at a time. """
    position = attr.ib(default=(0., 0., 0.), converter=_triple)
    euler = attr.ib(default=(0., 0., 0.), converter=_triple)
    time = attr.ib(default=0.0, converter=float)

    @property
    def rotation_matrix(self) -> Mat3d:
        """ rotation from the sensor frame to world coordinates """
        return euler2rot3d(self.euler)

    def transform(self, pts) -> Vec3d:
        """ transform sensor frame points to world coordinates """
        return np.asarray(pts, dtype=float).dot(self.rotation_matrix.T) + \
            np.array(self.position)


@attr.s(frozen=True)
class SensorDescriptor:
    """ Pixel grid, physical extent and pose of the sensor.

    Attributes:
        pixel_width: number of pixel columns
        pixel_height: number of pixel rows
        physical_width: width of the sensor in scene units
        physical_height: height of the sensor in scene units
        pose: :class:`Pose` of the sensor
        binning: number of pixels along each axis combined in one sample
    """
    pixel_width = attr.ib()
    pixel_height = attr.ib()
    physical_width = attr.ib()
    physical_height = attr.ib()
    pose = attr.ib(default=attr.Factory(Pose))
    binning = attr.ib(default=1)

    def validate(self):
        """ raise :class:`~.InvalidSensorError` for a malformed sensor """
        for name in ('pixel_width', 'pixel_height', 'binning'):
            value = getattr(self, name)
            if not isinstance(value, (int, np.integer)) or value < 1:
                raise InvalidSensorError(
                    f"{name} must be a positive integer, got {value!r}")
        for name in ('physical_width', 'physical_height'):
            value = getattr(self, name)
            if not value > 0.0:
                raise InvalidSensorError(
                    f"{name} must be positive, got {value!r}")

    @property
    def shape(self):
        """ (rows, cols) of the sampled image """
        return (ceil(self.pixel_height/self.binning),
                ceil(self.pixel_width/self.binning))

    @property
    def forward(self) -> Dir3d:
        """ world direction the sensor looks along """
        return self.pose.rotation_matrix.dot(np.array([0., 0., -1.]))

    def _bin_centers(self, num_pixels, extent):
        starts = np.arange(0, num_pixels, self.binning)
        ends = np.minimum(starts + self.binning, num_pixels)
        return 0.5*(starts + ends)/num_pixels*extent - 0.5*extent

    def sample_points_local(self):
        """ bin centers in the sensor frame, shape (rows, cols, 3) """
        x = self._bin_centers(self.pixel_width, self.physical_width)
        y = -self._bin_centers(self.pixel_height, self.physical_height)
        xx, yy = np.meshgrid(x, y)
        return np.stack([xx, yy, np.zeros_like(xx)], axis=-1)

    def sample_points(self):
        """ bin centers in world coordinates, shape (rows, cols, 3) """
        return self.pose.transform(self.sample_points_local())

    def listobj_str(self):
        o_str = (f"sensor: {self.pixel_width}x{self.pixel_height} pixels  "
                 f"{self.physical_width}x{self.physical_height}  "
                 f"binning={self.binning}\n")
        o_str += (f"position={self.pose.position}  "
                  f"euler={self.pose.euler}  t={self.pose.time}\n")
        return o_str


@attr.s(frozen=True)
class SensorMotion:
    """ Sinusoidal oscillation of the sensor about a base pose.

    Attributes:
        base: :class:`Pose` at the center of the oscillation
        amplitude: peak position offset
        angular_amplitude: peak euler angle offset, deg
        frequency: oscillations per unit time
        phase: phase offset, radians
    """
    base = attr.ib(default=attr.Factory(Pose))
    amplitude = attr.ib(default=(0., 0., 0.), converter=_triple)
    angular_amplitude = attr.ib(default=(0., 0., 0.), converter=_triple)
    frequency = attr.ib(default=1.0, converter=float)
    phase = attr.ib(default=0.0, converter=float)

    def pose_at(self, t: float) -> Pose:
        """ returns the pose of the sensor at time t """
        s = sin(2.0*pi*self.frequency*t + self.phase)
        position = np.array(self.base.position) + s*np.array(self.amplitude)
        euler = np.array(self.base.euler) + s*np.array(self.angular_amplitude)
        return Pose(position, euler, t)

    def advance(self, elapsed: float, previous: Pose) -> Pose:
        """ returns the pose `elapsed` time after the `previous` pose """
        return self.pose_at(previous.time + elapsed)
