import io

from pqueue.lib.progress_bar import ProgressBar


def test_redraws_only_when_percent_changes():
    stream = io.StringIO()
    bar = ProgressBar(12, title="trace", stream=stream)
    bar.status = "size=3"

    bar.progress = 50
    bar.print()
    bar.print()
    assert stream.getvalue().count("\r") == 1
    assert " 50% size=3 | trace" in stream.getvalue()

    bar.progress = 100
    bar.print()
    bar.print_complete()
    out = stream.getvalue()
    assert out.count("\r") == 3
    assert "Complete!" in out
    assert out.endswith("\n")


def test_zero_max_counts_as_done():
    bar = ProgressBar(10, progress_max=0, stream=io.StringIO())
    assert bar.percent() == 100
