"""
Tests for unimodular bases, the pitch-class lattice and quasi-parallelograms.
"""

import pytest
from conftest import BLACKDYE, DIASEM, DIASLEN_4SC, NOT_QUASI_PARALLELOGRAM, TWENTY_FIVE

from chuk_mcp_ternary.core import CountVector, det3, step_signature
from chuk_mcp_ternary.guide import GuideFrame
from chuk_mcp_ternary.lattice import (
    QuasiParallelogram,
    classify_quasi_parallelogram,
    get_unimodular_basis,
    pairwise_differences,
    pitch_class_lattice,
    quasi_parallelogram_of,
    unimodular_basis,
)


class TestUnimodularBasis:
    """Tests for finding a unimodular basis among guide frames."""

    def test_multiple_frame_basis(self) -> None:
        """A scale with only multiple frames still has a basis."""
        found = unimodular_basis(TWENTY_FIVE)
        assert found is not None
        (v, w), frame = found
        assert abs(det3([9, 6, 10], v, w)) == 1
        assert [3, 2, 3] in (v, w) or [2, 1, 2] in (v, w)

    def test_diasem(self) -> None:
        found = unimodular_basis(DIASEM)
        assert found is not None
        (v, w), frame = found
        assert abs(det3(step_signature(DIASEM), v, w)) == 1

    def test_generator_pair_of_simple_frame(self) -> None:
        frame = GuideFrame.simple(
            [CountVector.from_triple([1, 1, 0]), CountVector.from_triple([1, 0, 1])]
        )
        assert get_unimodular_basis([frame], [5, 2, 2]) == (([1, 1, 0], [1, 0, 1]), frame)

    def test_generator_and_offset_of_multiple_frame(self) -> None:
        frame = GuideFrame.multiple(
            [CountVector.from_triple([2, 1, 2])],
            [CountVector.ZERO, CountVector.from_triple([3, 2, 3])],
        )
        assert get_unimodular_basis([frame], [9, 6, 10]) == (([2, 1, 2], [3, 2, 3]), frame)

    def test_no_frames(self) -> None:
        assert get_unimodular_basis([], [5, 2, 2]) is None

    def test_not_ternary(self) -> None:
        assert unimodular_basis([]) is None
        assert unimodular_basis([0, 1, 3, 0]) is None


class TestPitchClassLattice:
    """Tests for projecting a scale onto the plane."""

    def test_diasem_with_given_basis(self) -> None:
        points = pitch_class_lattice(DIASEM, ([1, 1, 0], [1, 0, 1]))
        assert points == [
            (-2, -2),
            (1, 0),
            (-1, -2),
            (1, 1),
            (-1, -1),
            (2, 1),
            (0, -1),
            (2, 2),
            (0, 0),
        ]

    @pytest.mark.parametrize("scale", [DIASEM, BLACKDYE, DIASLEN_4SC, TWENTY_FIVE])
    def test_points_distinct_and_closed(self, scale: list[int]) -> None:
        """One distinct point per degree; the equave lands on the origin."""
        points = pitch_class_lattice(scale)
        assert points is not None
        assert len(points) == len(scale)
        assert len(set(points)) == len(scale)
        assert points[-1] == (0, 0)

    def test_rejects_non_unimodular_basis(self) -> None:
        assert pitch_class_lattice(DIASEM, ([1, 0, 0], [2, 0, 0])) is None

    def test_no_basis(self) -> None:
        assert pitch_class_lattice([0, 0, 0, 0]) is None


class TestQuasiParallelogram:
    """Tests for the quasi-parallelogram classifier."""

    def test_descriptor_validation(self) -> None:
        with pytest.raises(ValueError):
            QuasiParallelogram(0, 1, 1, 1)

    def test_size(self) -> None:
        assert QuasiParallelogram(1, 4, 4, 4).size == 4
        assert QuasiParallelogram(2, 3, 3, 2).size == 5
        assert QuasiParallelogram(3, 4, 2, 3).size == 9

    def test_pairwise_differences(self) -> None:
        assert pairwise_differences([(0, 0), (1, 0), (1, 1)]) == [(0, 1), (1, 0), (1, 1)]

    def test_empty(self) -> None:
        assert classify_quasi_parallelogram([]) is None

    def test_single_point(self) -> None:
        assert classify_quasi_parallelogram([(3, 4)]) == QuasiParallelogram(1, 1, 1, 1)

    def test_block_with_partial_row(self) -> None:
        points = [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1)]
        shape = classify_quasi_parallelogram(points)
        assert shape is not None
        assert shape.size == len(points)

    def test_no_unimodular_pair(self) -> None:
        assert classify_quasi_parallelogram([(0, 0), (2, 0)]) is None

    @pytest.mark.parametrize("scale", [DIASEM, BLACKDYE, DIASLEN_4SC])
    def test_named_scales(self, scale: list[int]) -> None:
        shape = quasi_parallelogram_of(scale)
        assert shape is not None
        assert shape.size == len(scale)

    def test_nonexample(self) -> None:
        assert quasi_parallelogram_of(NOT_QUASI_PARALLELOGRAM) is None
