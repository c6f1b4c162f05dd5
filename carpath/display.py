"""Geometry for visualising planner output: paths, search trees, vehicle boxes, ellipses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from carpath.geometry import Quaternion, Vec2, Vec3, Vec4, yaw_to_quaternion

__all__ = [
    "VehicleBox",
    "ellipse_points",
    "tree_line_points",
    "path_poses",
    "vehicle_boxes",
]

_ELLIPSE_STEP = 0.1


@dataclass(frozen=True)
class VehicleBox:
    """A flat rectangle drawn at one pose of a path.

    ``clears_previous`` is set on the first box of a batch so that a viewer
    drops the boxes of an earlier path before drawing these.
    """

    marker_id: int
    position: Vec3
    orientation: Quaternion
    width: float
    length: float
    height: float = 0.01
    color: tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.1)
    clears_previous: bool = False


def ellipse_points(center: Vec2, c_best: float, dist: float, theta: float) -> list[Vec2]:
    """Sample the informed-sampling ellipse around ``center``.

    ``c_best`` is the current best path cost and ``dist`` the straight-line
    distance between the foci; ``theta`` is the heading of the focal axis.
    Points are taken every 0.1 rad from 0 up to just past a full turn.
    """
    if c_best < dist:
        raise ValueError("c_best must not be smaller than dist")

    a = math.sqrt(c_best * c_best - dist * dist) * 0.5
    b = c_best * 0.5
    angle = math.pi / 2.0 - theta
    cos_r = math.cos(-angle)
    sin_r = math.sin(-angle)
    cx, cy = center

    points: list[Vec2] = []
    t = 0.0
    while t <= 2.0 * math.pi + _ELLIPSE_STEP:
        px = a * math.cos(t)
        py = b * math.sin(t)
        points.append((cos_r * px - sin_r * py + cx, sin_r * px + cos_r * py + cy))
        t += _ELLIPSE_STEP
    return points


def tree_line_points(tree: Iterable[Vec4]) -> list[Vec3]:
    """Flatten search-tree edges ``(x0, y0, x1, y1)`` into line-list endpoints."""
    points: list[Vec3] = []
    for x0, y0, x1, y1 in tree:
        points.append((float(x0), float(y0), 0.0))
        points.append((float(x1), float(y1), 0.0))
    return points


def path_poses(path: Iterable[Vec3]) -> list[tuple[Vec3, Quaternion]]:
    """Turn ``(x, y, yaw)`` states into ground-plane positions and orientations."""
    return [
        ((float(x), float(y), 0.0), yaw_to_quaternion(yaw))
        for x, y, yaw in path
    ]


def vehicle_boxes(
    path: Sequence[Vec3],
    width: float,
    length: float,
    interval: int = 5,
) -> list[VehicleBox]:
    """Place a vehicle outline at every ``interval``-th pose of ``path``."""
    if interval <= 0:
        raise ValueError("interval must be positive")

    boxes: list[VehicleBox] = []
    for i in range(0, len(path), interval):
        x, y, yaw = path[i]
        boxes.append(VehicleBox(
            marker_id=i // interval,
            position=(float(x), float(y), 0.0),
            orientation=yaw_to_quaternion(yaw),
            width=width,
            length=length,
            clears_previous=(i == 0),
        ))
    return boxes