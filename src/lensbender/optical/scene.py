#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" The ordered list of scene objects, with revision counted snapshots

    The authoring side edits a :class:`SceneModel`; every edit bumps the
    revision. The render side asks for a :meth:`~SceneModel.snapshot`, the
    read-only record array of the current revision, re-encoded wholesale
    whenever the scene changed since the last snapshot.

.. Created on Thu Sep  3 16:50:29 2026

.. codeauthor: Michael J. Hayford
"""
import logging

from lensbender.optical.encoder import encode

logger = logging.getLogger(__name__)


class SceneModel:
    """ Ordered container of :class:`~.Sphere` and :class:`~.Lens` objects.

    Attributes:
        revision: count of edits applied to the scene
    """
    def __init__(self, objects=None):
        self._objects = list(objects) if objects is not None else []
        self.revision = 0
        self._snapshot = None
        self._snapshot_revision = None

    def __len__(self):
        return len(self._objects)

    def __iter__(self):
        return iter(self._objects)

    def __getitem__(self, index):
        return self._objects[index]

    def __repr__(self):
        return f"{type(self).__name__}({self._objects!r})"

    def _update(self):
        self.revision += 1

    def add(self, obj):
        """ append `obj` to the scene and return its index """
        self._objects.append(obj)
        self._update()
        return len(self._objects) - 1

    def insert(self, index, obj):
        self._objects.insert(index, obj)
        self._update()

    def replace(self, index, obj):
        """ replace the object at `index`, returning the old object """
        old = self._objects[index]
        self._objects[index] = obj
        self._update()
        return old

    def remove(self, index):
        """ remove and return the object at `index` """
        obj = self._objects.pop(index)
        self._update()
        return obj

    def clear(self):
        self._objects.clear()
        self._update()

    def is_stale(self):
        """ True if the scene changed since the last snapshot """
        return self._snapshot_revision != self.revision

    def snapshot(self):
        """ returns the read-only record array of the current revision """
        if self.is_stale():
            logger.debug(f"encoding scene revision {self.revision}: "
                         f"{len(self._objects)} objects")
            self._snapshot = encode(self._objects)
            self._snapshot_revision = self.revision
        return self._snapshot

    def listobj_str(self):
        o_str = f"scene revision {self.revision}\n"
        for i, obj in enumerate(self._objects):
            o_str += f"{i}: " + obj.listobj_str()
        return o_str
