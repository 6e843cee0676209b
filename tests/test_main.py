"""
Driver Tests
============

process_session on sessions recorded in screen space.
"""

import os

from models.point import Point, Segment
from models.session import Session
from subdivision.locator import BETWEEN
from main import process_session
from utils.session_io import load_session


SESSIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "sessions")


def screen_triangle():
    a, b, c = Point(200, 500), Point(600, 500), Point(400, 100)
    return Session(
        points=[a, b, c],
        segments=[Segment(a, b), Segment(b, c), Segment(c, a)],
        width=800,
        height=600,
        queries=[Point(400, 300)],
    )


class TestProcessSession:

    def test_triangle(self, tmp_path, capsys):
        results = process_session(screen_triangle(), "triangle", output_dir=str(tmp_path))

        assert len(results) == 1
        assert results[0].location == BETWEEN
        assert (tmp_path / "triangle_located.png").exists()
        assert "[OK] Finished triangle" in capsys.readouterr().out

    def test_several_queries_get_indexed_outputs(self, tmp_path):
        session = screen_triangle()
        session.queries = [Point(400, 300), Point(400, 450)]

        results = process_session(session, "tri", output_dir=str(tmp_path))

        assert len(results) == 2
        assert (tmp_path / "tri_0_result.json").exists()
        assert (tmp_path / "tri_1_result.json").exists()

    def test_too_few_points(self, tmp_path, capsys):
        session = Session(points=[Point(1, 1), Point(1, 1)])

        assert process_session(session, "lonely", output_dir=str(tmp_path)) == []
        assert "[WARN]" in capsys.readouterr().out

    def test_failing_geometry_is_reported(self, tmp_path, capsys):
        """Mirrored, this is a vertex whose only way up is beyond a wall."""
        r1, r2, v, u = Point(10, 0), Point(0, -4), Point(5, -5), Point(-20, -6)
        session = Session(points=[v, r1, r2, u], segments=[Segment(r1, r2)])

        results = process_session(session, "walled", output_dir=str(tmp_path))

        assert results == []
        assert "[ERROR] walled" in capsys.readouterr().out
        assert not list(tmp_path.iterdir())

    def test_zero_length_segment_is_reported(self, tmp_path, capsys):
        session = screen_triangle()
        c = session.points[2]
        session.segments.append(Segment(c, c))

        results = process_session(session, "pinched", output_dir=str(tmp_path))

        out = capsys.readouterr().out
        assert results == []
        assert "[ERROR] pinched" in out
        assert "[OK] Finished pinched" in out

    def test_segment_to_unknown_point_is_reported(self, tmp_path, capsys):
        session = screen_triangle()
        session.segments.append(Segment(session.points[0], Point(50, 50)))

        assert process_session(session, "stray", output_dir=str(tmp_path)) == []
        assert "[ERROR] stray" in capsys.readouterr().out

    def test_bundled_subdivision_session(self, tmp_path):
        session = load_session(os.path.join(SESSIONS_DIR, "subdivision.json"))

        results = process_session(session, "subdivision", output_dir=str(tmp_path))

        assert [r.location for r in results] == [BETWEEN, BETWEEN]
        assert len(results[0].chains) == 4
