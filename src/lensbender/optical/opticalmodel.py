#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Top level model classes

.. Created on Wed Mar 14 11:08:28 2018

.. codeauthor: Michael J. Hayford
"""
import logging

import attr

from lensbender.optical.renderspec import RenderSpec
from lensbender.optical.scene import SceneModel
from lensbender.optical.sensor import SensorDescriptor
from lensbender.raytr.scan import scan

logger = logging.getLogger(__name__)


class OpticalModel:
    """ Top level container for the scene, the sensor and render settings.

    The OpticalModel serves as a top level container of model properties.
    Key aspects are the scene of spheres and lenses, the sensor that views
    it and the settings for the scan.

    The sensor pose is derived on demand from the frame clock, `time`, and
    the static sensor and motion description; no computed pose is stored.

    Attributes:
        scene: instance of :class:`~.SceneModel`
        sensor: :class:`~.SensorDescriptor` at rest
        motion: :class:`~.SensorMotion` or None for a static sensor
        render_spec: instance of :class:`~.RenderSpec`
        time: elapsed time of the frame clock
    """
    def __init__(self, sensor: SensorDescriptor, objects=None, motion=None,
                 render_spec=None):
        self.scene = SceneModel(objects)
        self.sensor = sensor
        self.motion = motion
        self.render_spec = (render_spec if render_spec is not None
                            else RenderSpec())
        self.time = 0.0

    def __str__(self):
        return (f"{type(self).__name__}: {len(self.scene)} objects, "
                f"t={self.time}")

    def listobj_str(self):
        o_str = self.scene.listobj_str()
        o_str += self.current_sensor().listobj_str()
        o_str += self.render_spec.listobj_str()
        return o_str

    def tick(self, elapsed: float):
        """ advance the frame clock by `elapsed` """
        self.time += elapsed
        return self.time

    def current_sensor(self) -> SensorDescriptor:
        """ returns the sensor posed for the current frame time """
        if self.motion is None:
            return self.sensor
        return attr.evolve(self.sensor,
                           pose=self.motion.pose_at(self.time))

    def render(self, cancel=None):
        """ scan the current scene with the sensor at the current time """
        logger.debug(f"render at t={self.time}, "
                     f"scene revision {self.scene.revision}")
        return scan(self.current_sensor(), self.scene, self.render_spec,
                    cancel=cancel)
