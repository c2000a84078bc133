""" Package for the optical scene model

    The :mod:`~.optical` subpackage provides the model side of the renderer:

        - Sellmeier glass dispersion and the glass catalog, :mod:`~.medium`
        - Encoding of scene objects into fixed layout records,
          :mod:`~.encoder`
        - The mutable, revision counted scene, :mod:`~.scene`
        - The sensor, its pose and motion, :mod:`~.sensor`
        - Render settings, :mod:`~.renderspec`
        - Constants for record kinds and ray segments,
          :mod:`~.model_constants`

    The overall model is managed by the :class:`~.OpticalModel` class
"""
