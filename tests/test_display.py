import math

import pytest

from carpath.display import (
    VehicleBox,
    ellipse_points,
    path_poses,
    tree_line_points,
    vehicle_boxes,
)
from carpath.geometry import quaternion_to_yaw


def test_ellipse_degenerates_to_circle_when_foci_coincide():
    center = (3.0, -2.0)
    points = ellipse_points(center, 2.0, 0.0, 0.7)
    assert len(points) > 60
    for x, y in points:
        assert math.hypot(x - center[0], y - center[1]) == pytest.approx(1.0)


def test_ellipse_first_point_on_minor_axis_when_unrotated():
    points = ellipse_points((0.0, 0.0), 2.0, 0.0, math.pi / 2)
    assert points[0][0] == pytest.approx(1.0)
    assert points[0][1] == pytest.approx(0.0)


def test_ellipse_major_axis_follows_theta():
    along_y = ellipse_points((0.0, 0.0), 4.0, 3.0, math.pi / 2)
    assert max(abs(y) for _, y in along_y) > max(abs(x) for x, _ in along_y)

    along_x = ellipse_points((0.0, 0.0), 4.0, 3.0, 0.0)
    assert max(abs(x) for x, _ in along_x) > max(abs(y) for _, y in along_x)


def test_ellipse_closes_the_loop():
    points = ellipse_points((1.0, 1.0), 5.0, 2.0, 0.3)
    first, last = points[0], points[-1]
    assert math.hypot(first[0] - last[0], first[1] - last[1]) < 0.5


def test_ellipse_rejects_cost_below_distance():
    with pytest.raises(ValueError):
        ellipse_points((0.0, 0.0), 1.0, 2.0, 0.0)


def test_tree_line_points_splits_edges():
    tree = [(0.0, 1.0, 2.0, 3.0), (4.0, 5.0, 6.0, 7.0)]
    assert tree_line_points(tree) == [
        (0.0, 1.0, 0.0),
        (2.0, 3.0, 0.0),
        (4.0, 5.0, 0.0),
        (6.0, 7.0, 0.0),
    ]


def test_tree_line_points_empty():
    assert tree_line_points([]) == []


def test_path_poses_keep_position_and_yaw():
    path = [(1.0, 2.0, 0.5), (-3.0, 4.0, -2.0), (0.0, 0.0, math.pi / 2)]
    poses = path_poses(path)
    assert len(poses) == len(path)
    for (x, y, yaw), (position, quat) in zip(path, poses):
        assert position == (x, y, 0.0)
        assert quaternion_to_yaw(*quat) == pytest.approx(yaw)
        assert math.fsum(c * c for c in quat) == pytest.approx(1.0)


def test_vehicle_boxes_every_interval():
    path = [(float(i), float(2 * i), 0.1 * i) for i in range(12)]
    boxes = vehicle_boxes(path, 4.0, 2.0, 5)
    assert [b.marker_id for b in boxes] == [0, 1, 2]
    assert [b.position for b in boxes] == [
        (path[0][0], path[0][1], 0.0),
        (path[5][0], path[5][1], 0.0),
        (path[10][0], path[10][1], 0.0),
    ]
    assert [b.clears_previous for b in boxes] == [True, False, False]
    for box, idx in zip(boxes, (0, 5, 10)):
        assert quaternion_to_yaw(*box.orientation) == pytest.approx(path[idx][2])
        assert box.width == 4.0
        assert box.length == 2.0


def test_vehicle_boxes_default_interval():
    path = [(0.0, 0.0, 0.0)] * 6
    boxes = vehicle_boxes(path, 1.0, 1.0)
    assert len(boxes) == 2
    assert isinstance(boxes[0], VehicleBox) and boxes[1].marker_id == 1


def test_vehicle_boxes_empty_path():
    assert vehicle_boxes([], 1.0, 1.0, 3) == []


def test_vehicle_boxes_rejects_zero_interval():
    with pytest.raises(ValueError):
        vehicle_boxes([(0.0, 0.0, 0.0)], 1.0, 1.0, 0)