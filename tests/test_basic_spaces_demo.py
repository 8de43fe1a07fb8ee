"""
Smoke tests for the demo walkthrough.
"""

from pathlib import Path

from motion_geometry.src.demos.basic_spaces_demo import demo_cart_pole, demo_unit_square

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_unit_square_demo(capsys):
    space = demo_unit_square()
    out = capsys.readouterr().out
    assert "After enforce_bounds: [1. 0.]" in out
    assert space.live_states == 0


def test_cart_pole_demo(capsys):
    space, fig = demo_cart_pole(str(DEFAULT_CONFIG))
    out = capsys.readouterr().out
    assert "Index of 'theta': 2" in out
    assert "all within bounds: True" in out
    assert space.live_states == 0
    assert [trace.name for trace in fig.data] == ["Samples", "Trajectory"]
