"""Smoke test for graph drawing."""
import matplotlib

matplotlib.use("Agg")

from epidemictools.io.matrix import parse_matrix  # noqa: E402
from epidemictools.viz.draw import draw_graph  # noqa: E402


def test_draw_graph_saves_png(tmp_path):
    out = tmp_path / "best.png"
    fig = draw_graph(parse_matrix("011,100,010"), origin=0, save_path=str(out))
    assert out.exists()
    assert out.stat().st_size > 0
    assert fig is not None
