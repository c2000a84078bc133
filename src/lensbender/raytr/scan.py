#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Scan of the sensor, producing one color per sample bin

    The scene is encoded once per scan; the read-only records are shared by
    every pixel. Rows are independent and may be computed by a pool of
    threads. A scan may be cancelled between pixels with a
    :class:`threading.Event`.

.. Created on Thu Sep 24 09:03:52 2026

.. codeauthor: Michael J. Hayford
"""
import logging
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from lensbender.optical.encoder import encode
from lensbender.optical.renderspec import RenderSpec
from lensbender.optical.scene import SceneModel
from .sampler import sample_pixel
from .traceerror import ScanCancelledError

logger = logging.getLogger(__name__)


def scene_records(scene):
    """ returns the record array for a scene, model or object list """
    if isinstance(scene, SceneModel):
        return scene.snapshot()
    if isinstance(scene, np.ndarray):
        return scene
    return encode(scene)


def scan_row(points, center_dir, records, spec, cancel=None):
    """ returns the colors of one row of sample points, shape (cols, 3) """
    colors = np.empty((points.shape[0], 3))
    for col, pt in enumerate(points):
        if cancel is not None and cancel.is_set():
            raise ScanCancelledError()
        colors[col] = sample_pixel(pt, center_dir, records, spec)
    return colors


def scan(sensor, scene, spec=None, cancel=None):
    """ Render the scene as seen by the sensor.

    Args:
        sensor: :class:`~.SensorDescriptor` with its current pose
        scene: :class:`~.SceneModel`, encoded records or a list of objects
        spec: :class:`~.RenderSpec`, defaults are used if None
        cancel: optional :class:`threading.Event`; when set the scan stops

    Returns:
        image array of shape (rows, cols, 3), row-major, row 0 at the top

    Raises:
        InvalidSensorError: the sensor descriptor is malformed
        ScanCancelledError: `cancel` was set before the scan completed; its
            `rows_done` counts the rows finished before the cancellation
    """
    sensor.validate()
    if spec is None:
        spec = RenderSpec()
    records = scene_records(scene)
    points = sensor.sample_points()
    center_dir = sensor.forward
    rows, cols = points.shape[:2]

    start = time.perf_counter()
    image = np.empty((rows, cols, 3))
    rows_done = 0
    try:
        if spec.workers > 1:
            with ThreadPoolExecutor(max_workers=spec.workers) as executor:
                futures = [executor.submit(scan_row, points[row], center_dir,
                                           records, spec, cancel)
                           for row in range(rows)]
            # the pool has shut down, every row is finished or failed
            rows_done = sum(1 for future in futures
                            if future.exception() is None)
            for row, future in enumerate(futures):
                image[row] = future.result()
        else:
            for row in range(rows):
                image[row] = scan_row(points[row], center_dir, records, spec,
                                      cancel)
                rows_done += 1
    except ScanCancelledError as cancelled:
        cancelled.rows_done = rows_done
        logger.info(f"scan cancelled, {rows_done} of {rows} rows completed")
        raise cancelled

    logger.info(f"scanned {rows}x{cols} bins, {len(records)} objects "
                f"in {time.perf_counter() - start:.3f}s")
    return image
