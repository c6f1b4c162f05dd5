"""Gradient-descent smoothing of a searched path.

The cost combines a curvature bound, a clearance term that pushes points
away from the nearest obstacle, and a smoothness term over five
neighbouring points. Only interior points (index 2 to N-3) are moved.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from carpath.geometry import Vec2, Vec3

__all__ = ["TrajectoryOptimizer"]


def _add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def _sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def _scale(a: Vec2, k: float) -> Vec2:
    return (a[0] * k, a[1] * k)


def _dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _norm(a: Vec2) -> float:
    return math.hypot(a[0], a[1])


def _normalized(a: Vec2) -> Vec2:
    n = _norm(a)
    if n == 0.0:
        return a
    return (a[0] / n, a[1] / n)


def _orthogonal_complement(a: Vec2, b: Vec2) -> Vec2:
    bn = _normalized(b)
    return _sub(a, _scale(bn, _dot(a, bn)))


def _delta_phi(x0: Vec2, x1: Vec2, x2: Vec2) -> float:
    d0 = _sub(x1, x0)
    d1 = _sub(x2, x1)
    ratio = _dot(d0, d1) / (_norm(d0) * _norm(d1))
    return math.acos(min(1.0, max(-1.0, ratio)))


def _smooth_term(x_2: Vec2, x_1: Vec2, x: Vec2, x1: Vec2, x2: Vec2) -> Vec2:
    return tuple(
        2.0 * (a - 4.0 * b + 6.0 * c - 4.0 * d + e)
        for a, b, c, d, e in zip(x_2, x_1, x, x1, x2)
    )  # type: ignore[return-value]


@dataclass
class TrajectoryOptimizer:
    """Weights and limits for the path smoother."""

    alpha: float = 0.1
    w_o: float = 0.05
    w_k: float = 0.01
    w_s: float = 0.2
    k_max: float = 0.01
    d_max: float = 3.0
    max_iterations: int = 100

    def _obstacle_term(self, x: Vec2, obstacle: Vec2) -> Vec2:
        offset = _sub(x, obstacle)
        distance = _norm(offset)
        if distance <= self.d_max:
            return _scale(_normalized(offset), 2.0 * (distance - self.d_max))
        return (0.0, 0.0)

    def _curvature_term(self, x_1: Vec2, x: Vec2, x1: Vec2) -> Vec2:
        d_j = _sub(x, x_1)
        d_j1 = _sub(x1, x)
        n_j = _norm(d_j)
        n_j1 = _norm(d_j1)
        if not (n_j > 0.0 and n_j1 > 0.0):
            return (0.0, 0.0)

        dphi = _delta_phi(x_1, x, x1)
        if dphi / n_j <= self.k_max:
            return (0.0, 0.0)

        temp_1 = 1.0 / n_j
        denom = math.sqrt(max(0.0, 1.0 - math.cos(dphi) ** 2))
        temp_2 = -1.0 / denom if denom != 0.0 else -math.inf
        temp_4 = dphi / n_j / n_j

        neg_d_j1 = _scale(d_j1, -1.0)
        p1 = _scale(_orthogonal_complement(d_j, neg_d_j1), 1.0 / n_j1 / n_j)
        p2 = _scale(_orthogonal_complement(neg_d_j1, d_j), 1.0 / n_j1 / n_j)
        temp_3 = _scale(_add(p1, p2), -1.0)

        factor = 2.0 * (dphi / n_j - self.k_max)
        unit = _normalized(d_j)
        tt = temp_1 * temp_2
        j_prev = _scale(_add(_scale(p2, tt), _scale(unit, temp_4)), factor)
        j_curr = _scale(_sub(_scale(temp_3, tt), _scale(unit, temp_4)), factor)
        j_next = _scale(_scale(p1, tt), factor)

        grad = _add(_add(_scale(j_prev, 0.25), _scale(j_curr, 0.5)), _scale(j_next, 0.25))
        if math.isnan(grad[0]) or math.isnan(grad[1]):
            return (0.0, 0.0)
        return grad

    def optimize(
        self,
        check_collision: Callable[[float, float, float], bool],
        nearest_obstacle: Callable[[float, float], Vec2],
        path: Sequence[Vec3],
    ) -> list[Vec3]:
        """Smooth ``path`` and return poses with headings along the new path.

        ``nearest_obstacle(x, y)`` gives the closest obstacle point.
        ``check_collision`` is accepted for interface compatibility and is
        not consulted. The result has one pose fewer than ``path``: each
        heading points to the following point.
        """
        points: list[Vec2] = [(float(p[0]), float(p[1])) for p in path]
        n = len(points)
        step = self.alpha * (self.w_k + self.w_s + self.w_o)

        for _ in range(self.max_iterations):
            gradients: dict[int, Vec2] = {}
            for j in range(2, n - 2):
                x_2, x_1, x, x1, x2 = points[j - 2:j + 3]
                grad = _scale(self._curvature_term(x_1, x, x1), self.w_k)
                grad = _add(grad, _scale(self._obstacle_term(x, tuple(nearest_obstacle(x[0], x[1]))), self.w_o))
                grad = _add(grad, _scale(_smooth_term(x_2, x_1, x, x1, x2), self.w_s))
                gradients[j] = grad
            for j, grad in gradients.items():
                points[j] = _sub(points[j], _scale(grad, step))

        return [
            (a[0], a[1], math.atan2(b[1] - a[1], b[0] - a[0]))
            for a, b in zip(points, points[1:])
        ]