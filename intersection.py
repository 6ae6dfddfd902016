# intersection.py

import logging
from collections import namedtuple

import numba
import numpy as np

logger = logging.getLogger("circle_sim")

# One overlapping pair (i < j) and the two points where their boundaries cross.
Intersection = namedtuple('Intersection', ['i', 'j', 'first', 'second'])

# --- JIT-Compiled Geometry Functions ---
# Kept outside any class and limited to scalars and NumPy arrays, as required
# by Numba's nopython mode.

@numba.jit(nopython=True)
def _intersect_pair_jit(ax, ay, ra, bx, by, rb):
    """
    Law of cosines construction for a single pair of circles.

    The triangle has sides ra, rb and the center distance d. The angle at A's
    center is rotated either way from the A->B direction to reach the two
    boundary crossings, each at distance ra from A.

    Returns (found, x1, y1, x2, y2). found is False when the boundaries do not
    cross or the geometry is degenerate.
    """
    dx = bx - ax
    dy = by - ay
    distance = np.sqrt(dx * dx + dy * dy)

    # Touching boundaries count as intersecting.
    if distance > ra + rb:
        return False, 0.0, 0.0, 0.0, 0.0

    # Concentric centers or a zero radius: the cosine has a zero denominator.
    if distance == 0.0 or ra <= 0.0 or rb <= 0.0:
        return False, 0.0, 0.0, 0.0, 0.0

    # One circle strictly inside the other: the boundaries never meet.
    if distance < abs(ra - rb):
        return False, 0.0, 0.0, 0.0, 0.0

    cos_a = (ra * ra - rb * rb + distance * distance) / (2.0 * ra * distance)
    # Exact tangency can land a hair outside [-1, 1].
    cos_a = min(1.0, max(-1.0, cos_a))

    angle_of_rotation = np.arccos(cos_a)
    base_angle = np.arctan2(dy, dx)

    x1 = ax + np.cos(base_angle - angle_of_rotation) * ra
    y1 = ay + np.sin(base_angle - angle_of_rotation) * ra
    x2 = ax + np.cos(base_angle + angle_of_rotation) * ra
    y2 = ay + np.sin(base_angle + angle_of_rotation) * ra
    return True, x1, y1, x2, y2

@numba.jit(nopython=True)
def _find_intersections_jit(positions, radii, out_pairs, out_points):
    """
    Numba-accelerated all-pairs sweep. Every unordered pair (i, j) with i < j
    is tested exactly once, in lexicographic order.
    Writes hits into the preallocated out_pairs (M, 2) and out_points (M, 2, 2)
    arrays and returns the number of hits.
    """
    n = positions.shape[0]
    count = 0
    for i in range(n):
        for j in range(i + 1, n):
            found, x1, y1, x2, y2 = _intersect_pair_jit(
                positions[i, 0], positions[i, 1], radii[i],
                positions[j, 0], positions[j, 1], radii[j]
            )
            if found:
                out_pairs[count, 0] = i
                out_pairs[count, 1] = j
                out_points[count, 0, 0] = x1
                out_points[count, 0, 1] = y1
                out_points[count, 1, 0] = x2
                out_points[count, 1, 1] = y2
                count += 1
    return count


def intersect_pair(center_a, radius_a, center_b, radius_b):
    """
    Intersection points of two circle boundaries.

    - Inputs:
        - center_a, center_b: (x, y) of each center.
        - radius_a, radius_b (float): Radii.
    - Outputs: ((x1, y1), (x2, y2)) or None if the boundaries do not cross,
      the centers coincide, a radius is not positive, or one circle lies
      strictly inside the other. Tangent circles give two equal points.
    """
    found, x1, y1, x2, y2 = _intersect_pair_jit(
        float(center_a[0]), float(center_a[1]), float(radius_a),
        float(center_b[0]), float(center_b[1]), float(radius_b)
    )
    if not found:
        return None
    return (x1, y1), (x2, y2)


def find_intersections(positions, radii):
    """
    Finds every pair of circles whose boundaries cross.

    Data Contract:
    - Inputs:
        - positions: (N, 2) array-like of centers.
        - radii: (N,) array-like of radii.
    - Outputs: list of Intersection(i, j, first, second), i < j, ordered by (i, j).
      first is the point at base_angle - rotation, second at base_angle + rotation.
    """
    positions = np.ascontiguousarray(positions, dtype=np.float64).reshape(-1, 2)
    radii = np.ascontiguousarray(radii, dtype=np.float64).reshape(-1)
    if positions.shape[0] != radii.shape[0]:
        raise ValueError(
            f"positions and radii disagree on circle count: {positions.shape[0]} != {radii.shape[0]}"
        )

    n = positions.shape[0]
    max_pairs = n * (n - 1) // 2
    if max_pairs == 0:
        return []

    out_pairs = np.empty((max_pairs, 2), dtype=np.int64)
    out_points = np.empty((max_pairs, 2, 2), dtype=np.float64)
    count = _find_intersections_jit(positions, radii, out_pairs, out_points)

    return [
        Intersection(
            int(out_pairs[k, 0]),
            int(out_pairs[k, 1]),
            (float(out_points[k, 0, 0]), float(out_points[k, 0, 1])),
            (float(out_points[k, 1, 0]), float(out_points[k, 1, 1])),
        )
        for k in range(count)
    ]
