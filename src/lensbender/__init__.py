# -*- coding: utf-8 -*-
""" The **lensbender** optical sandbox ray tracing package

    A scene of opaque spheres and refracting lenses is rendered by tracing
    bundles of rays from every pixel of a sensor. The package is organized
    in the following subpackages:

        - :mod:`~.elem`: scene objects, spheres and lenses, and the surface
          sag profiles of lens surfaces
        - :mod:`~.optical`: glass dispersion, the scene encoder and model,
          the sensor and its motion, render settings and the
          :class:`~.OpticalModel` container
        - :mod:`~.raytr`: ray/object intersection, refraction, ray tracing,
          pixel sampling and the sensor scan

        - :mod:`opticalglass`: this package supplies the Fraunhofer spectral
          line wavelengths used for sampling and glass characterization

    The :mod:`~.util` subpackage provides vector math and color helpers.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. Classes may implement the `listobj_str`
    method that returns a string containing a formatted description of the
    object, e.g. :meth:`.Lens.listobj_str` and :meth:`.RenderSpec.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
