"""Closed-form Reeds-Shepp word solutions in the normalised frame.

Each ``lp_*`` function takes a goal ``(x, y, phi)`` that has been moved into
the start frame and scaled by the turning radius. It returns the segment
lengths ``(t, u, v)`` of its word, or ``None`` when the word cannot reach
the goal.
"""

from __future__ import annotations

import math
from typing import Optional

from carpath.geometry import mod2pi

__all__ = [
    "Segments",
    "polar",
    "tau_omega",
    "lp_sp_lp",
    "lp_sp_rp",
    "lp_rm_l",
    "lp_rup_lum_rm",
    "lp_rum_lum_rp",
    "lp_rm_sm_lm",
    "lp_rm_sm_rm",
    "lp_rm_s_lm_rp",
]

Segments = tuple[float, float, float]

_HALF_PI = 0.5 * math.pi


def polar(x: float, y: float) -> tuple[float, float]:
    """Return the polar coordinates ``(r, theta)`` of ``(x, y)``."""
    return math.hypot(x, y), math.atan2(y, x)


def tau_omega(u: float, v: float, xi: float, eta: float, phi: float) -> tuple[float, float]:
    """Return ``(tau, omega)``, the outer arc lengths of a four-arc word."""
    delta = mod2pi(u - v)
    a = math.sin(u) - math.sin(delta)
    b = math.cos(u) - math.cos(delta) - 1.0
    t1 = math.atan2(eta * a - xi * b, xi * a + eta * b)
    t2 = 2.0 * (math.cos(delta) - math.cos(v) - math.cos(u)) + 3.0
    tau = mod2pi(t1 + math.pi) if t2 < 0.0 else mod2pi(t1)
    omega = mod2pi(tau - u + v - phi)
    return tau, omega


def lp_sp_lp(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left-forward, straight-forward, left-forward (formula 8.1)."""
    u, t = polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if t < 0.0:
        return None
    v = mod2pi(phi - t)
    if v < 0.0:
        return None
    return t, u, v


def lp_sp_rp(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left-forward, straight-forward, right-forward (formula 8.2)."""
    r, t1 = polar(x + math.sin(phi), y - 1.0 - math.cos(phi))
    r_squared = r * r
    if r_squared < 4.0:
        return None
    u = math.sqrt(r_squared - 4.0)
    theta = math.atan2(2.0, u)
    t = mod2pi(t1 + theta)
    v = mod2pi(t - phi)
    return t, u, v


def lp_rm_l(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left, reversed right, left (formulas 8.3 and 8.4)."""
    xi = x - math.sin(phi)
    eta = y - 1.0 + math.cos(phi)
    u1, theta = polar(xi, eta)
    if u1 > 4.0:
        return None
    u = -2.0 * math.asin(0.25 * u1)
    t = mod2pi(theta + 0.5 * u + math.pi)
    v = mod2pi(phi - t + u)
    return t, u, v


def lp_rup_lum_rm(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left, right, reversed left, reversed right (formula 8.7)."""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = 0.25 * (2.0 + math.hypot(xi, eta))
    if rho > 1.0:
        return None
    u = math.acos(rho)
    t, v = tau_omega(u, -u, xi, eta, phi)
    return t, u, v


def lp_rum_lum_rp(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left, reversed right, reversed left, right (formula 8.8)."""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = (20.0 - xi * xi - eta * eta) / 16.0
    if not 0.0 <= rho <= 1.0:
        return None
    u = -math.acos(rho)
    if u < -_HALF_PI:
        return None
    t, v = tau_omega(u, u, xi, eta, phi)
    return t, u, v


def lp_rm_sm_lm(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left, quarter reversed right, reversed straight, reversed left (formula 8.9)."""
    xi = x - math.sin(phi)
    eta = y - 1.0 + math.cos(phi)
    rho, theta = polar(xi, eta)
    if rho < 2.0:
        return None
    r = math.sqrt(rho * rho - 4.0)
    u = 2.0 - r
    t = mod2pi(theta + math.atan2(r, -2.0))
    v = mod2pi(phi - _HALF_PI - t)
    return t, u, v


def lp_rm_sm_rm(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left, quarter reversed right, reversed straight, reversed right (formula 8.10)."""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, theta = polar(-eta, xi)
    if rho < 2.0:
        return None
    t = theta
    u = 2.0 - rho
    v = mod2pi(t + _HALF_PI - phi)
    return t, u, v


def lp_rm_s_lm_rp(x: float, y: float, phi: float) -> Optional[Segments]:
    """Left, quarter reversed right, straight, quarter reversed left, right (formula 8.11)."""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, _ = polar(xi, eta)
    if rho < 2.0:
        return None
    u = 4.0 - math.sqrt(rho * rho - 4.0)
    if u > 0.0:
        return None
    t = mod2pi(math.atan2((4.0 - u) * xi - 2.0 * eta, -2.0 * xi + (u - 4.0) * eta))
    v = mod2pi(t - phi)
    return t, u, v