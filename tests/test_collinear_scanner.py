"""
Tests for the per-anchor slope-sort scanner

Checks:
1. One group per maximal run, anchor included, points sorted
2. Runs closed by a slope change and by the end of the list
3. Degenerate inputs emit nothing
4. The input list is never mutated
5. Parallel scanning matches the serial scan
"""

import pytest

from detectors.collinear_scanner import scan_anchor, find_candidate_groups

from conftest import pts


DIAGONAL_WITH_NOISE = pts((0, 0), (1, 1), (2, 2), (3, 3), (4, 4), (0, 5), (5, 0))


class TestScanAnchor:
    """Tests for scan_anchor"""

    @pytest.mark.parametrize("arithmetic", ["rational", "float"])
    def test_anchor_on_line_emits_full_run(self, params, arithmetic) -> None:
        params["SLOPE_ARITHMETIC"] = arithmetic
        groups = scan_anchor(DIAGONAL_WITH_NOISE, 2, params)
        assert len(groups) == 1
        assert groups[0].as_tuples() == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]

    def test_anchor_off_line_emits_nothing(self, params) -> None:
        assert scan_anchor(DIAGONAL_WITH_NOISE, 5, params) == []
        assert scan_anchor(DIAGONAL_WITH_NOISE, 6, params) == []

    def test_long_run_is_not_split(self, params) -> None:
        """A run of 6 equal slopes yields one group of 7, not several"""
        points = pts(*[(i, 2 * i) for i in range(7)], (3, 0))
        groups = scan_anchor(points, 0, params)
        assert len(groups) == 1
        assert len(groups[0]) == 7

    def test_run_at_end_of_list(self, params) -> None:
        """Vertical slopes sort last; the run must close at the list end"""
        points = pts((0, 0), (1, 0), (2, 5), (0, 1), (0, 2), (0, 3))
        groups = scan_anchor(points, 0, params)
        assert len(groups) == 1
        assert groups[0].as_tuples() == [(0, 0), (0, 1), (0, 2), (0, 3)]

    def test_two_runs_from_one_anchor(self, params) -> None:
        points = pts((0, 0), (1, 0), (2, 0), (3, 0), (1, 1), (2, 2), (3, 3))
        groups = scan_anchor(points, 0, params)
        assert sorted(g.as_tuples() for g in groups) == [
            [(0, 0), (1, 0), (2, 0), (3, 0)],
            [(0, 0), (1, 1), (2, 2), (3, 3)],
        ]

    def test_run_of_two_is_ignored(self, params) -> None:
        points = pts((0, 0), (1, 1), (2, 2), (5, 0), (0, 7))
        assert scan_anchor(points, 0, params) == []

    @pytest.mark.parametrize("n", [0, 1, 2, 3])
    def test_too_few_points(self, params, n) -> None:
        points = pts(*[(i, i) for i in range(n)])
        for i in range(n):
            assert scan_anchor(points, i, params) == []

    def test_input_not_mutated(self, params) -> None:
        points = list(DIAGONAL_WITH_NOISE)
        before = list(points)
        for i in range(len(points)):
            scan_anchor(points, i, params)
        assert points == before


class TestFindCandidateGroups:
    """Tests for find_candidate_groups"""

    def test_every_anchor_on_line_reports_it(self, params) -> None:
        groups = find_candidate_groups(DIAGONAL_WITH_NOISE, params)
        assert len(groups) == 5
        assert all(g.as_tuples() == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)] for g in groups)

    def test_parallel_matches_serial(self, params, grid_points) -> None:
        serial = find_candidate_groups(grid_points, params)

        params["PARALLEL_WORKERS"] = 2
        params["PARALLEL_CHUNK_SIZE"] = 4
        parallel = find_candidate_groups(grid_points, params)

        assert [g.as_tuples() for g in parallel] == [g.as_tuples() for g in serial]
