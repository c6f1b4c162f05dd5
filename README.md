# carpath

Geometry for planning the motion of car-like vehicles: shortest
Reeds-Shepp curves (paths that may drive both forwards and backwards),
a gradient-based trajectory smoother, and helpers for turning planned
paths into points and boxes you can draw.

Pure Python, no dependencies.

## Install

    pip install .

## Reeds-Shepp paths

```python
from carpath.rs_path import RSPath

rs = RSPath(turning_radius=2.0)

# Length of the shortest path between two poses (x, y, yaw).
length = rs.distance(0.0, 0.0, 0.0, 5.0, 3.0, 1.57)

# The path word: five segment types (SegmentType.L, S, R or N) and their
# signed lengths in units of the turning radius; negative means reversing.
data = rs.shortest_path(0.0, 0.0, 0.0, 5.0, 3.0, 1.57)
print(data.types, data.lengths, data.length())

# Poses sampled along the path about every 0.1 m (both ends included),
# together with the path length.
poses, length = rs.sample((0.0, 0.0, 0.0), (5.0, 3.0, 1.57), 0.1)
```

`RSPath.normalized_path(x, y, phi)` works on a goal already expressed in
the start's frame and scaled to a unit turning radius. `sample` raises
`ValueError` if `step_size` is not positive. The closed-form solutions of
the individual path families (`lp_sp_lp`, `lp_rm_l`, ...) are in
`carpath.rs_formulas`; each returns `(t, u, v)` or `None` when the family
cannot reach the goal.

## Smoothing a trajectory

```python
from carpath.trajectory_optimizer import TrajectoryOptimizer

optimizer = TrajectoryOptimizer()   # alpha, w_o, w_k, w_s, k_max, d_max, max_iterations
smoothed = optimizer.optimize(check_collision, nearest_obstacle, poses)
```

`nearest_obstacle(x, y)` returns the coordinates of the closest obstacle.
`check_collision` is accepted but not called. Only interior points are
moved, and the result has one pose fewer than the input: each heading
points towards the following point.

## Other helpers

- `carpath.geometry`: `mod2pi`, `yaw_to_quaternion`, `quaternion_to_yaw`.
- `carpath.state_node`: `StateNode`, `NodeStatus`, `Direction`, a node
  type for grid search over vehicle states.
- `carpath.pose_buffer`: `MessageBuffer`, a thread-safe buffer whose
  contents are moved out in one batch, in arrival order, with `drain_into`.
- `carpath.display`: `path_poses`, `tree_line_points`, `vehicle_boxes`
  (returning `VehicleBox` items) and `ellipse_points` for plotting.
- `carpath.timer`: `Timer`, a stopwatch in milliseconds; `report` prints
  the elapsed time for a named task.

## What it does not do

carpath holds the building blocks only. It has no hybrid A* search over
an occupancy grid, no map loading or collision checking, no command-line
program, and no messaging or viewer: the display helpers compute points
and boxes but do not draw or publish them.

## Tests

    pip install ".[test]"
    pytest