""" Package for the objects of the optical scene

    The :mod:`~.elem` subpackage provides the scene objects and their
    geometry:

        - Spheres and lenses, :mod:`~.elements`
        - Surface sag profiles of lens surfaces, :mod:`~.profiles`
"""
