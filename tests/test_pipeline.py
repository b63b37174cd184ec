"""
Tests for pipeline orchestration.
"""

import orjson
import pytest

from steptracker.loader import FileOpenError, InsufficientDataError
from steptracker.models import TrackerConfig
from steptracker.pipeline import StepTracker, save_report


@pytest.fixture
def steps_file(tmp_path):
    """Steps file holding 1..30, one per line."""
    path = tmp_path / "steps.txt"
    path.write_text("\n".join(str(i) for i in range(1, 31)) + "\n", encoding="utf-8")
    return path


def test_run_one_to_thirty(steps_file, capsys):
    """Test the full pipeline on 1..30."""
    tracker = StepTracker(TrackerConfig(input_file=str(steps_file)))
    report = tracker.run()

    assert report.initial_stats.count == 30
    assert report.initial_stats.total == 465
    assert report.initial_stats.mean_display == "15.5"
    assert report.initial_stats.min_index == 0
    assert report.initial_stats.max_index == 29

    after_demo = list(range(1, 31)) + [80]
    after_demo[0] += 250
    after_demo[-1] += 250
    assert report.final_values == [v + 100 for v in after_demo]
    assert report.top_k == sorted(report.final_values, reverse=True)[:5]
    assert len(report.mutation_steps) == 8

    out = capsys.readouterr().out
    assert out.index("Raw step counts") < out.index("--- Stats ---")
    assert out.index("--- Stats ---") < out.index("After uniform shift")
    assert out.index("After uniform shift") < out.index("Top-5")
    assert "Done. Program completed successfully." in out


def test_top_k_does_not_reorder(steps_file):
    """Test that the final sequence keeps its order after the top-K report."""
    tracker = StepTracker(TrackerConfig(input_file=str(steps_file)))
    report = tracker.run()
    assert tracker.steps.to_list() == report.final_values
    assert report.final_values[0] == 351


def test_run_top_k_zero(steps_file, capsys):
    """Test that k == 0 produces no top-K report."""
    tracker = StepTracker(TrackerConfig(input_file=str(steps_file), top_k=0))
    report = tracker.run()
    assert report.top_k == []
    assert "Top-" not in capsys.readouterr().out


def test_run_missing_file(tmp_path, capsys):
    """Test that a missing file aborts before any report."""
    tracker = StepTracker(TrackerConfig(input_file=str(tmp_path / "nope.txt")))
    with pytest.raises(FileOpenError):
        tracker.run()
    out = capsys.readouterr().out
    assert "Raw step counts" not in out
    assert "--- Stats ---" not in out


def test_run_empty_file(tmp_path, capsys):
    """Test that an empty file aborts before stats and top-K."""
    path = tmp_path / "steps.txt"
    path.write_text("", encoding="utf-8")
    tracker = StepTracker(TrackerConfig(input_file=str(path)))
    with pytest.raises(InsufficientDataError):
        tracker.run()
    out = capsys.readouterr().out
    assert "--- Stats ---" not in out
    assert "Top-" not in out


def test_save_report(steps_file, tmp_path):
    """Test writing the JSON run report."""
    tracker = StepTracker(TrackerConfig(input_file=str(steps_file)))
    report = tracker.run()

    path = save_report(report, tmp_path / "runs" / "report.json")
    data = orjson.loads(path.read_bytes())
    assert data["run_id"] == report.run_id
    assert data["initial_stats"]["total"] == 465
    assert data["top_k"] == report.top_k
    assert data["config"]["min_days"] == 30


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
