"""
Quasi-parallelograms - lattice scales that fill a sheared row-major block.

A set of lattice points is a quasi-parallelogram when, in some unimodular
coordinate system, reading it row by row gives full middle rows, a first
row that ends where full rows end, and a last row that starts where full
rows start.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chuk_mcp_ternary.lattice.basis import Point, pitch_class_lattice

# (coordinate held constant along a row, rows read in descending order)
TRAVERSALS: tuple[tuple[int, bool], ...] = (
    (1, False),
    (1, True),
    (0, False),
    (0, True),
)


@dataclass(frozen=True)
class QuasiParallelogram:
    """
    Shape of a quasi-parallelogram region.

    Middle rows hold `full_row_len` points; the first row is a suffix and
    the last row a prefix of a full row.
    """

    row_count: int
    full_row_len: int
    first_row_len: int
    last_row_len: int

    def __post_init__(self) -> None:
        for name in ("row_count", "full_row_len", "first_row_len", "last_row_len"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @property
    def size(self) -> int:
        """Number of points in the region."""
        if self.row_count == 1:
            return self.first_row_len
        return (
            self.first_row_len + self.last_row_len + (self.row_count - 2) * self.full_row_len
        )


def pairwise_differences(points: Sequence[Point]) -> list[Point]:
    """Distinct differences points[j] - points[i] for i < j, sorted."""
    differences = {
        (points[j][0] - points[i][0], points[j][1] - points[i][1])
        for i in range(len(points))
        for j in range(i + 1, len(points))
    }
    return sorted(differences)


def _change_basis(point: Point, v1: Point, v2: Point, det: int) -> Point:
    # Coordinates (a, b) with point == a * v1 + b * v2; det is +-1
    x, y = point
    return (
        det * (v2[1] * x - v2[0] * y),
        det * (v1[0] * y - v1[1] * x),
    )


def _read_rows(
    points: Sequence[Point], row_axis: int, descending: bool
) -> QuasiParallelogram | None:
    rows: dict[int, set[int]] = {}
    for point in points:
        rows.setdefault(point[row_axis], set()).add(point[1 - row_axis])
    if sum(len(row) for row in rows.values()) != len(points):
        return None

    keys = sorted(rows)
    row_count = len(keys)
    if keys[-1] - keys[0] + 1 != row_count:
        return None
    lo = min(min(row) for row in rows.values())
    hi = max(max(row) for row in rows.values())
    full_row_len = hi - lo + 1
    full_row = set(range(lo, hi + 1))

    for key in keys[1:-1]:
        if rows[key] != full_row:
            return None

    first, last = rows[keys[0]], rows[keys[-1]]
    if descending:
        last_ok = last == set(range(hi - len(last) + 1, hi + 1))
        first_ok = first == set(range(lo, lo + len(first)))
    else:
        last_ok = last == set(range(lo, lo + len(last)))
        first_ok = first == set(range(hi - len(first) + 1, hi + 1))
    if not (last_ok and first_ok):
        return None

    if row_count == 2:
        full_row_len = max(len(first), len(last))
    return QuasiParallelogram(row_count, full_row_len, len(first), len(last))


def classify_quasi_parallelogram(points: Sequence[Point]) -> QuasiParallelogram | None:
    """
    Find a coordinate system and traversal making the points a quasi-parallelogram.

    Every pair of pairwise differences forming a unimodular 2D basis is
    tried, each with four traversals (rows along either axis, read in
    either direction).

    Returns:
        The first shape found, or None
    """
    points = list(points)
    if not points:
        return None
    if len(points) == 1:
        return QuasiParallelogram(1, 1, 1, 1)

    differences = pairwise_differences(points)
    for index, v1 in enumerate(differences):
        for v2 in differences[index + 1 :]:
            det = v1[0] * v2[1] - v1[1] * v2[0]
            if abs(det) != 1:
                continue
            transformed = [_change_basis(point, v1, v2, det) for point in points]
            for row_axis, descending in TRAVERSALS:
                shape = _read_rows(transformed, row_axis, descending)
                if shape is not None:
                    return shape
    return None


def quasi_parallelogram_of(scale: Sequence[int]) -> QuasiParallelogram | None:
    """Quasi-parallelogram shape of a ternary scale's pitch-class lattice, if any."""
    points = pitch_class_lattice(scale)
    if points is None:
        return None
    return classify_quasi_parallelogram(points)
