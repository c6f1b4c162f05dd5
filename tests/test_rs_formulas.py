import math

import pytest

from carpath.geometry import mod2pi
from carpath.rs_formulas import (
    lp_rm_l,
    lp_rm_s_lm_rp,
    lp_rm_sm_lm,
    lp_rm_sm_rm,
    lp_rum_lum_rp,
    lp_rup_lum_rm,
    lp_sp_lp,
    lp_sp_rp,
    polar,
    tau_omega,
)

HALF_PI = 0.5 * math.pi


def _drive(segments):
    """Integrate unit-radius motion primitives from the origin."""
    x = y = phi = 0.0
    for kind, length in segments:
        if kind == "L":
            x += math.sin(phi + length) - math.sin(phi)
            y += -math.cos(phi + length) + math.cos(phi)
            phi += length
        elif kind == "R":
            x += -math.sin(phi - length) + math.sin(phi)
            y += math.cos(phi - length) - math.cos(phi)
            phi -= length
        else:
            x += length * math.cos(phi)
            y += length * math.sin(phi)
    return x, y, phi


WORDS = {
    "lp_sp_lp": (lp_sp_lp, lambda t, u, v: [("L", t), ("S", u), ("L", v)]),
    "lp_sp_rp": (lp_sp_rp, lambda t, u, v: [("L", t), ("S", u), ("R", v)]),
    "lp_rm_l": (lp_rm_l, lambda t, u, v: [("L", t), ("R", u), ("L", v)]),
    "lp_rup_lum_rm": (
        lp_rup_lum_rm,
        lambda t, u, v: [("L", t), ("R", u), ("L", -u), ("R", v)],
    ),
    "lp_rum_lum_rp": (
        lp_rum_lum_rp,
        lambda t, u, v: [("L", t), ("R", u), ("L", u), ("R", v)],
    ),
    "lp_rm_sm_lm": (
        lp_rm_sm_lm,
        lambda t, u, v: [("L", t), ("R", -HALF_PI), ("S", u), ("L", v)],
    ),
    "lp_rm_sm_rm": (
        lp_rm_sm_rm,
        lambda t, u, v: [("L", t), ("R", -HALF_PI), ("S", u), ("R", v)],
    ),
    "lp_rm_s_lm_rp": (
        lp_rm_s_lm_rp,
        lambda t, u, v: [("L", t), ("R", -HALF_PI), ("S", u), ("L", -HALF_PI), ("R", v)],
    ),
}


@pytest.mark.parametrize(
    "name, lengths",
    [
        ("lp_sp_lp", (0.4, 2.0, 0.3)),
        ("lp_sp_rp", (0.5, 1.5, 0.6)),
        ("lp_rm_l", (0.5, -0.8, 0.4)),
        ("lp_rup_lum_rm", (0.3, 0.6, -0.4)),
        ("lp_rum_lum_rp", (0.4, -0.5, 0.3)),
        ("lp_rm_sm_lm", (0.5, -1.0, 0.2)),
        ("lp_rm_sm_rm", (0.3, -1.5, 0.5)),
        ("lp_rm_s_lm_rp", (0.2, -1.0, 0.3)),
    ],
)
def test_solution_reaches_goal(name, lengths):
    formula, word = WORDS[name]
    goal = _drive(word(*lengths))
    result = formula(*goal)
    assert result is not None
    end = _drive(word(*result))
    assert end[0] == pytest.approx(goal[0], abs=1e-9)
    assert end[1] == pytest.approx(goal[1], abs=1e-9)
    assert abs(mod2pi(end[2] - goal[2])) < 1e-9


def test_lp_sp_lp_straight_line():
    t, u, v = lp_sp_lp(5.0, 0.0, 0.0)
    assert t == pytest.approx(0.0)
    assert u == pytest.approx(5.0)
    assert v == pytest.approx(0.0)


def test_lp_sp_lp_results_non_negative():
    t, u, v = lp_sp_lp(3.0, 2.0, 1.0)
    assert t >= 0.0
    assert u >= 0.0
    assert v >= 0.0


@pytest.mark.parametrize(
    "formula, goal",
    [
        (lp_sp_lp, (0.0, -3.0, 0.0)),
        (lp_sp_rp, (0.5, 0.5, 0.0)),
        (lp_rm_l, (10.0, 0.0, 0.0)),
        (lp_rup_lum_rm, (10.0, 0.0, 0.0)),
        (lp_rum_lum_rp, (10.0, 0.0, 0.0)),
        (lp_rm_sm_lm, (0.0, 0.0, 0.0)),
        (lp_rm_sm_rm, (0.0, 1.0, 0.0)),
        (lp_rm_s_lm_rp, (0.0, 0.0, 0.0)),
    ],
)
def test_unreachable_goal_returns_none(formula, goal):
    assert formula(*goal) is None


def test_lp_rm_l_middle_arc_is_reversed():
    _, u, _ = lp_rm_l(1.0, 1.0, 0.5)
    assert -math.pi <= u <= 0.0


def test_lp_rup_lum_rm_middle_arc_range():
    _, u, _ = lp_rup_lum_rm(0.2, 0.1, 0.3)
    assert 0.0 <= u <= math.pi / 3 + 1e-12


def test_polar_of_3_4():
    r, theta = polar(3.0, 4.0)
    assert r == pytest.approx(5.0)
    assert theta == pytest.approx(math.atan2(4.0, 3.0))


def test_polar_negative_y_axis():
    r, theta = polar(0.0, -2.0)
    assert r == pytest.approx(2.0)
    assert theta == pytest.approx(-HALF_PI)


def test_polar_round_trip():
    r, theta = polar(-1.5, 0.7)
    assert r * math.cos(theta) == pytest.approx(-1.5)
    assert r * math.sin(theta) == pytest.approx(0.7)


def test_tau_omega_relation():
    u, v, xi, eta, phi = 0.5, -0.5, 1.2, -0.3, 0.8
    tau, omega = tau_omega(u, v, xi, eta, phi)
    assert -math.pi <= tau <= math.pi
    assert omega == pytest.approx(mod2pi(tau - u + v - phi))