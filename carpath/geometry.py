"""Planar pose helpers: angle wrapping and yaw/quaternion conversion."""

from __future__ import annotations

import math

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]
Vec2i = tuple[int, int]
Vec3i = tuple[int, int, int]
Quaternion = tuple[float, float, float, float]

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Vec2i",
    "Vec3i",
    "Quaternion",
    "mod2pi",
    "yaw_to_quaternion",
    "quaternion_to_yaw",
]


def mod2pi(x: float) -> float:
    """Wrap an angle into the range [-pi, pi]."""
    v = math.fmod(x, 2.0 * math.pi)
    if v < -math.pi:
        v += 2.0 * math.pi
    elif v > math.pi:
        v -= 2.0 * math.pi
    return v


def yaw_to_quaternion(yaw: float) -> Quaternion:
    """Return the (x, y, z, w) quaternion for a rotation of ``yaw`` about the z axis."""
    half = 0.5 * yaw
    return (0.0, 0.0, math.sin(half), math.cos(half))


def quaternion_to_yaw(x: float, y: float, z: float, w: float) -> float:
    """Extract the yaw angle from an (x, y, z, w) quaternion."""
    siny_cosp = 2.0 * (w * z + x * y)
    cosy_cosp = 1.0 - 2.0 * (y * y + z * z)
    return math.atan2(siny_cosp, cosy_cosp)