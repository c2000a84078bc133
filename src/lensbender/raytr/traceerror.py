#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Support for ray trace and scan exception handling

    Failures of a single ray are :class:`TraceError` subclasses; the tracer
    attaches the partial ray as `ray_pkg` and the pixel sampler absorbs
    them into the background color. Failures that abort a whole sensor scan
    are :class:`ScanError` subclasses and reach the caller.

.. Created on Wed Oct 24 15:22:40 2018

.. codeauthor: Michael J. Hayford
"""


class TraceError(Exception):
    """ Exception raised when ray tracing a scene """
    ray_pkg = None


class InvalidDispersionError(TraceError):
    """ Exception raised when the dispersion formula has no real index """
    def __init__(self, wvl, glass=None, n2=None):
        super().__init__(f"no refractive index at {wvl} nm (n²={n2})")
        self.wvl = wvl
        self.glass = glass
        self.n2 = n2


class TraceMissedSurfaceError(TraceError):
    """ Exception raised when ray misses the exit surface of a lens """
    def __init__(self, obj=None, srf=None, prev_seg=None):
        self.obj = obj
        self.srf = srf
        self.prev_seg = prev_seg


class TraceTIRError(TraceError):
    """ Exception raised when ray TIRs at a lens surface """
    def __init__(self, inc_dir, normal, prev_indx, follow_indx):
        self.obj = None
        self.int_pt = None
        self.inc_dir = inc_dir
        self.normal = normal
        self.prev_indx = prev_indx
        self.follow_indx = follow_indx


class TraceRayBlockedError(TraceError):
    """ Exception raised when ray is blocked by the rim of a lens """
    def __init__(self, obj, int_pt):
        self.obj = obj
        self.int_pt = int_pt


class ScanError(Exception):
    """ Exception raised when a sensor scan cannot be completed """


class InvalidSensorError(ScanError, ValueError):
    """ Exception raised for a malformed sensor descriptor """


class ScanCancelledError(ScanError):
    """ Exception raised when a scan is cancelled before completion """
    def __init__(self, rows_done=0):
        super().__init__(rows_done)
        self.rows_done = rows_done

    def __str__(self):
        return f"scan cancelled after {self.rows_done} completed rows"
