""" Package for ray tracing the optical scene

    The :mod:`~.raytr` subpackage provides core classes and functions
    for rendering the scene. These include:

        - Base level ray/object intersection and refraction,
          :mod:`~.raytrace`
        - Tracing of a ray through lenses to a sphere or out of the scene,
          :mod:`~.trace`
        - Deterministic ray bundles and per-pixel color, :mod:`~.sampler`
        - The sensor scan driver, :mod:`~.scan`
        - Exception classes for reporting ray trace errors, :mod:`~.traceerror`
"""

from collections import namedtuple

RayResult = namedtuple('RayResult', ['pkg', 'err'])
RayResult.__doc__ = "A RayPkg and either a TraceError or None"
RayResult.pkg.__doc__ = "a RayPkg"
RayResult.err.__doc__ = "a TraceError or None, if success"

RayPkg = namedtuple('RayPkg', ['ray', 'stop', 'elements', 'wvl'])
RayPkg.__doc__ = "Ray segments and the objects the ray met, plus wavelength"
RayPkg.ray.__doc__ = "list of RaySegs"
RayPkg.stop.__doc__ = "index of the sphere that stopped the ray, or None"
RayPkg.elements.__doc__ = "tuple of indices of the lenses traversed"
RayPkg.wvl.__doc__ = "wavelength (in nm) that the ray was traced in"

RaySeg = namedtuple('RaySeg', ['p', 'd', 'dst', 'nrml'])
RaySeg.__doc__ = "ray intersection and transfer data"
RaySeg.p.__doc__ = "the point of incidence"
RaySeg.d.__doc__ = "ray direction cosine following the interface"
RaySeg.dst.__doc__ = "geometric distance to next point of incidence"
RaySeg.nrml.__doc__ = "surface normal vector at the point of incidence"
