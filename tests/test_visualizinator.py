import pytest

from pqueue.lib.visualizinator import Visualizinator


def test_disabled_by_default():
    visual = Visualizinator(labels=["size"])
    visual.add({"size": (1, 3)})
    assert visual.get("size") == []


def test_add_and_sum():
    visual = Visualizinator(labels=["size"], enable_visual=True)
    visual.add({"size": (1, 3)})
    visual.add({"size": (2, 4)})
    assert visual.get("size") == [(1, 3), (2, 4)]
    assert visual.sum("size") == 7
    assert visual.sum("size", axis="x") == 3


def test_window_mean():
    visual = Visualizinator(labels=["rate"], windowed_labels=["rate"],
                            window_size=2, enable_visual=True)
    for t, value in enumerate([1, 0, 0, 1], 1):
        visual.addWindow({"rate": value}, t)
    assert [y for _, y in visual.get("rate")] == pytest.approx(
        [1.0, 0.5, 0.0, 0.5])


def test_save_writes_figure(tmp_path):
    visual = Visualizinator(labels=["size", "capacity"], enable_visual=True)
    for t in range(10):
        visual.add({"size": (t, t), "capacity": (t, 16)})
    out = tmp_path / "plot.png"
    visual.save(str(out), title="test")
    assert out.exists()
