"""Shortest Reeds-Shepp paths for a car that drives forwards and backwards."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Sequence

from carpath.geometry import Vec3
from carpath.rs_formulas import (
    Segments,
    lp_rm_l,
    lp_rm_s_lm_rp,
    lp_rm_sm_lm,
    lp_rm_sm_rm,
    lp_rum_lum_rp,
    lp_rup_lum_rm,
    lp_sp_lp,
    lp_sp_rp,
)

__all__ = ["SegmentType", "PATH_TYPES", "RSPathData", "RSPath"]

_HALF_PI = 0.5 * math.pi


class SegmentType(IntEnum):
    """Kind of motion making up one segment of a path."""

    N = 0
    L = 1
    S = 2
    R = 3


_N, _L, _S, _R = SegmentType.N, SegmentType.L, SegmentType.S, SegmentType.R

PATH_TYPES: tuple[tuple[SegmentType, ...], ...] = (
    (_L, _R, _L, _N, _N),
    (_R, _L, _R, _N, _N),
    (_L, _R, _L, _R, _N),
    (_R, _L, _R, _L, _N),
    (_L, _R, _S, _L, _N),
    (_R, _L, _S, _R, _N),
    (_L, _S, _R, _L, _N),
    (_R, _S, _L, _R, _N),
    (_L, _R, _S, _R, _N),
    (_R, _L, _S, _L, _N),
    (_R, _S, _R, _L, _N),
    (_L, _S, _L, _R, _N),
    (_L, _S, _R, _N, _N),
    (_R, _S, _L, _N, _N),
    (_L, _S, _L, _N, _N),
    (_R, _S, _R, _N, _N),
    (_L, _R, _S, _L, _R),
    (_R, _L, _S, _R, _L),
)


@dataclass(frozen=True)
class RSPathData:
    """A path word: five segment types with their signed normalised lengths.

    A negative length means the segment is driven backwards.
    """

    types: tuple[SegmentType, ...] = PATH_TYPES[0]
    lengths: tuple[float, ...] = (sys.float_info.max, 0.0, 0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        lengths = tuple(float(value) for value in self.lengths)
        if len(lengths) > 5:
            raise ValueError("a path has at most five segments")
        object.__setattr__(self, "lengths", lengths + (0.0,) * (5 - len(lengths)))
        object.__setattr__(self, "types", tuple(SegmentType(t) for t in self.types))

    def length(self) -> float:
        """Total unsigned length of all segments."""
        return sum(abs(value) for value in self.lengths)


_Solver = Callable[[float, float, float], Optional[Segments]]
_Builder = Callable[[float, float, float], Sequence[float]]
_Candidate = tuple[_Solver, tuple[float, float, float], int, _Builder]


def _sum_abs(seg: Segments) -> float:
    t, u, v = seg
    return abs(t) + abs(u) + abs(v)


def _sum_abs_double_middle(seg: Segments) -> float:
    t, u, v = seg
    return abs(t) + 2.0 * abs(u) + abs(v)


def _pick(
    path: RSPathData,
    best: float,
    candidates: Sequence[_Candidate],
    cost: Callable[[Segments], float] = _sum_abs,
) -> RSPathData:
    for solver, args, word, build in candidates:
        seg = solver(*args)
        if seg is None:
            continue
        total = cost(seg)
        if best > total:
            path = RSPathData(PATH_TYPES[word], tuple(build(*seg)))
            best = total
    return path


def _same(t: float, u: float, v: float) -> Sequence[float]:
    return (t, u, v)


def _neg(t: float, u: float, v: float) -> Sequence[float]:
    return (-t, -u, -v)


def _rev(t: float, u: float, v: float) -> Sequence[float]:
    return (v, u, t)


def _rev_neg(t: float, u: float, v: float) -> Sequence[float]:
    return (-v, -u, -t)


def _csc(x: float, y: float, phi: float, path: RSPathData) -> RSPathData:
    return _pick(path, path.length(), [
        (lp_sp_lp, (x, y, phi), 14, _same),
        (lp_sp_lp, (-x, y, -phi), 14, _neg),
        (lp_sp_lp, (x, -y, -phi), 15, _same),
        (lp_sp_lp, (-x, -y, phi), 15, _neg),
        (lp_sp_rp, (x, y, phi), 12, _same),
        (lp_sp_rp, (-x, y, -phi), 12, _neg),
        (lp_sp_rp, (x, -y, -phi), 13, _same),
        (lp_sp_rp, (-x, -y, phi), 13, _neg),
    ])


def _backwards_frame(x: float, y: float, phi: float) -> tuple[float, float]:
    xb = x * math.cos(phi) + y * math.sin(phi)
    yb = x * math.sin(phi) - y * math.cos(phi)
    return xb, yb


def _ccc(x: float, y: float, phi: float, path: RSPathData) -> RSPathData:
    xb, yb = _backwards_frame(x, y, phi)
    return _pick(path, path.length(), [
        (lp_rm_l, (x, y, phi), 0, _same),
        (lp_rm_l, (-x, y, -phi), 0, _neg),
        (lp_rm_l, (x, -y, -phi), 1, _same),
        (lp_rm_l, (-x, -y, phi), 1, _neg),
        (lp_rm_l, (xb, yb, phi), 0, _rev),
        (lp_rm_l, (-xb, yb, -phi), 0, _rev_neg),
        (lp_rm_l, (xb, -yb, -phi), 1, _rev),
        (lp_rm_l, (-xb, -yb, phi), 1, _rev_neg),
    ])


def _cccc(x: float, y: float, phi: float, path: RSPathData) -> RSPathData:
    def opposite(t: float, u: float, v: float) -> Sequence[float]:
        return (t, u, -u, v)

    def opposite_neg(t: float, u: float, v: float) -> Sequence[float]:
        return (-t, -u, u, -v)

    def equal(t: float, u: float, v: float) -> Sequence[float]:
        return (t, u, u, v)

    def equal_neg(t: float, u: float, v: float) -> Sequence[float]:
        return (-t, -u, -u, -v)

    return _pick(path, path.length(), [
        (lp_rup_lum_rm, (x, y, phi), 2, opposite),
        (lp_rup_lum_rm, (-x, y, -phi), 2, opposite_neg),
        (lp_rup_lum_rm, (x, -y, -phi), 3, opposite),
        (lp_rup_lum_rm, (-x, -y, phi), 3, opposite_neg),
        (lp_rum_lum_rp, (x, y, phi), 2, equal),
        (lp_rum_lum_rp, (-x, y, -phi), 2, equal_neg),
        (lp_rum_lum_rp, (x, -y, -phi), 3, equal),
        (lp_rum_lum_rp, (-x, -y, phi), 3, equal_neg),
    ], cost=_sum_abs_double_middle)


def _ccsc(x: float, y: float, phi: float, path: RSPathData) -> RSPathData:
    def front(t: float, u: float, v: float) -> Sequence[float]:
        return (t, -_HALF_PI, u, v)

    def front_neg(t: float, u: float, v: float) -> Sequence[float]:
        return (-t, _HALF_PI, -u, -v)

    def back(t: float, u: float, v: float) -> Sequence[float]:
        return (v, u, -_HALF_PI, t)

    def back_neg(t: float, u: float, v: float) -> Sequence[float]:
        return (-v, -u, _HALF_PI, -t)

    xb, yb = _backwards_frame(x, y, phi)
    return _pick(path, path.length() - _HALF_PI, [
        (lp_rm_sm_lm, (x, y, phi), 4, front),
        (lp_rm_sm_lm, (-x, y, -phi), 4, front_neg),
        (lp_rm_sm_lm, (x, -y, -phi), 5, front),
        (lp_rm_sm_lm, (-x, -y, phi), 5, front_neg),
        (lp_rm_sm_rm, (x, y, phi), 8, front),
        (lp_rm_sm_rm, (-x, y, -phi), 8, front_neg),
        (lp_rm_sm_rm, (x, -y, -phi), 9, front),
        (lp_rm_sm_rm, (-x, -y, phi), 9, front_neg),
        (lp_rm_sm_lm, (xb, yb, phi), 6, back),
        (lp_rm_sm_lm, (-xb, yb, -phi), 6, back_neg),
        (lp_rm_sm_lm, (xb, -yb, -phi), 7, back),
        (lp_rm_sm_lm, (-xb, -yb, phi), 7, back_neg),
        (lp_rm_sm_rm, (xb, yb, phi), 10, back),
        (lp_rm_sm_rm, (-xb, yb, -phi), 10, back_neg),
        (lp_rm_sm_rm, (xb, -yb, -phi), 11, back),
        (lp_rm_sm_rm, (-xb, -yb, phi), 11, back_neg),
    ])


def _ccscc(x: float, y: float, phi: float, path: RSPathData) -> RSPathData:
    def build(t: float, u: float, v: float) -> Sequence[float]:
        return (t, -_HALF_PI, u, -_HALF_PI, v)

    def build_neg(t: float, u: float, v: float) -> Sequence[float]:
        return (-t, _HALF_PI, -u, _HALF_PI, -v)

    return _pick(path, path.length() - math.pi, [
        (lp_rm_s_lm_rp, (x, y, phi), 16, build),
        (lp_rm_s_lm_rp, (-x, y, -phi), 16, build_neg),
        (lp_rm_s_lm_rp, (x, -y, -phi), 17, build),
        (lp_rm_s_lm_rp, (-x, -y, phi), 17, build_neg),
    ])


class RSPath:
    """Reeds-Shepp path generator for a given minimum turning radius."""

    def __init__(self, turning_radius: float = 1.0) -> None:
        self.turning_radius = float(turning_radius)

    def distance(self, x0: float, y0: float, yaw0: float,
                 x1: float, y1: float, yaw1: float) -> float:
        """Length of the shortest path between two poses."""
        return self.turning_radius * self.shortest_path(x0, y0, yaw0, x1, y1, yaw1).length()

    def shortest_path(self, x0: float, y0: float, yaw0: float,
                      x1: float, y1: float, yaw1: float) -> RSPathData:
        """Shortest path word between two world poses, in units of the turning radius."""
        dx = x1 - x0
        dy = y1 - y0
        c = math.cos(yaw0)
        s = math.sin(yaw0)
        x = c * dx + s * dy
        y = -s * dx + c * dy
        phi = yaw1 - yaw0
        return self.normalized_path(x / self.turning_radius, y / self.turning_radius, phi)

    def normalized_path(self, x: float, y: float, phi: float) -> RSPathData:
        """Shortest path word to ``(x, y, phi)`` from the origin facing along x, radius one."""
        path = RSPathData()
        for family in (_csc, _ccc, _cccc, _ccsc, _ccscc):
            path = family(x, y, phi, path)
        return path

    def sample(self, start_state: Vec3, goal_state: Vec3,
               step_size: float) -> tuple[list[Vec3], float]:
        """Discretise the shortest path between two poses.

        Returns the poses spaced about ``step_size`` apart, both ends included,
        and the length of the path.
        """
        if step_size <= 0.0:
            raise ValueError("step_size must be positive")

        sx, sy, syaw = start_state
        gx, gy, gyaw = goal_state
        rs_path = self.shortest_path(sx, sy, syaw, gx, gy, gyaw)
        total = rs_path.length()
        path_length = total * self.turning_radius
        count = int(path_length / step_size)

        poses: list[Vec3] = []
        for i in range(count + 1):
            seg = (i / count) * total if count else 0.0
            px, py, yaw = 0.0, 0.0, syaw
            for kind, segment in zip(rs_path.types, rs_path.lengths):
                if not seg > 0.0:
                    break
                if segment < 0.0:
                    v = max(-seg, segment)
                    seg += v
                else:
                    v = min(seg, segment)
                    seg -= v
                if kind is SegmentType.L:
                    px += math.sin(yaw + v) - math.sin(yaw)
                    py += -math.cos(yaw + v) + math.cos(yaw)
                    yaw += v
                elif kind is SegmentType.R:
                    px += -math.sin(yaw - v) + math.sin(yaw)
                    py += math.cos(yaw - v) - math.cos(yaw)
                    yaw -= v
                elif kind is SegmentType.S:
                    px += v * math.cos(yaw)
                    py += v * math.sin(yaw)
            poses.append((
                px * self.turning_radius + sx,
                py * self.turning_radius + sy,
                yaw,
            ))

        return poses, path_length