"""Tests for drawing, segment-id rasterization, reports and saved outputs."""

import numpy as np

from config import COLOR_BACKGROUND, COLOR_POINT, COLOR_SEGMENT
from models.point import Point
from models.collinear_group import CollinearGroup
from utils.geometry import to_canvas
from visualization.draw_points import new_canvas, draw_points
from visualization.draw_segments import draw_segments, build_segment_id_map
from visualization.report import format_segment, build_report
from visualization.save_outputs import save_all_outputs

from conftest import pts


SIZE = 101

ROW = CollinearGroup(points=pts((0, 16384), (8192, 16384), (16384, 16384), (32768, 16384)))
COLUMN = CollinearGroup(points=pts((16384, 0), (16384, 4096), (16384, 8192), (16384, 32768)))


class TestDrawing:

    def test_new_canvas(self) -> None:
        canvas = new_canvas(SIZE)
        assert canvas.shape == (SIZE, SIZE, 3)
        assert canvas.dtype == np.uint8
        assert (canvas == COLOR_BACKGROUND).all()

    def test_draw_points(self) -> None:
        canvas = new_canvas(SIZE)
        p = Point(8192, 24576)
        draw_points(canvas, [p])
        px, py = to_canvas(p, canvas_size=SIZE)
        assert tuple(canvas[py, px]) == COLOR_POINT

    def test_draw_segments_first_to_last(self) -> None:
        canvas = new_canvas(SIZE)
        draw_segments(canvas, [ROW])
        x1, y = to_canvas(ROW.first, canvas_size=SIZE)
        x2, _ = to_canvas(ROW.last, canvas_size=SIZE)
        for x in (x1, (x1 + x2) // 2, x2):
            assert tuple(canvas[y, x]) == COLOR_SEGMENT
        assert tuple(canvas[y - 5, (x1 + x2) // 2]) == COLOR_BACKGROUND


class TestSegmentIdMap:

    def test_ids_and_overwrite(self) -> None:
        id_map = build_segment_id_map([ROW, COLUMN], SIZE)
        assert id_map.shape == (SIZE, SIZE)
        assert id_map.dtype == np.int32

        rx, ry = to_canvas(ROW.first, canvas_size=SIZE)
        cx, cy = to_canvas(COLUMN.first, canvas_size=SIZE)
        assert id_map[ry, rx] == 1
        assert id_map[cy, cx] == 2

        # the crossing pixel belongs to the later segment
        assert id_map[ry, cx] == 2
        assert (id_map == 0).sum() > 0

    def test_assigned_ids_are_used(self) -> None:
        seg = CollinearGroup(points=list(ROW.points), id=7)
        id_map = build_segment_id_map([seg], SIZE)
        assert set(np.unique(id_map)) == {0, 7}


class TestReport:

    def test_format_segment(self) -> None:
        seg = CollinearGroup(points=pts((0, 0), (1, 1), (2, 2), (3, 3)))
        assert format_segment(seg) == "(0, 0) -> (1, 1) -> (2, 2) -> (3, 3)"

    def test_build_report(self) -> None:
        text = build_report([ROW, COLUMN], elapsed_ms=12.4)
        lines = text.splitlines()
        assert lines[0] == str(ROW)
        assert lines[1] == str(COLUMN)
        assert lines[2] == "No. of line segments (minus any duplicates): 2"
        assert lines[3] == "Elapsed time: 12 ms"

    def test_build_report_empty_without_time(self) -> None:
        assert build_report([]) == "No. of line segments (minus any duplicates): 0\n"


class TestSaveAllOutputs:

    def test_writes_every_artifact(self, tmp_path) -> None:
        points = [p for seg in (ROW, COLUMN) for p in seg.points]
        save_all_outputs(str(tmp_path), "42", points, [ROW, COLUMN], elapsed_ms=3.0, size=SIZE)

        for suffix in ("points.png", "segments.png", "segmentmap.png", "segments.txt"):
            assert (tmp_path / f"42_{suffix}").is_file()

        report = (tmp_path / "42_segments.txt").read_text(encoding="utf-8")
        assert "No. of line segments (minus any duplicates): 2" in report
