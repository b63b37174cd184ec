"""
Tests for the scripted container mutations and uniform shift.
"""

import io

import pytest

from steptracker.models import TrackerConfig
from steptracker.mutations import (
    MUTATION_SCRIPT,
    adjust_edges,
    append_values,
    erase_sentinel,
    insert_sentinel,
    remove_last,
    run_mutation_script,
    swap_with_baseline,
    uniform_shift,
)
from steptracker.sequence import StepSequence


@pytest.fixture
def config():
    return TrackerConfig()


def test_script_on_one_to_thirty(config, capsys):
    """Test the full script on 1..30."""
    seq = StepSequence(range(1, 31))
    reports = run_mutation_script(seq, config)

    assert len(reports) == len(MUTATION_SCRIPT)
    assert all(r.applied for r in reports)
    expected = list(range(1, 31)) + [80]
    expected[0] += 250
    expected[-1] += 250
    assert seq.to_list() == expected
    assert seq.capacity == seq.size

    out = capsys.readouterr().out
    assert "[reserve] ok" in out
    assert "[shrink_to_fit] ok" in out
    assert "  5000" in out


def test_append_then_remove(config):
    """Test that step 3 undoes the second append of step 2."""
    seq = StepSequence([10, 20])
    append_values(seq, config)
    assert seq.to_list() == [10, 20, 70, 120]
    remove_last(seq, config)
    assert seq.to_list() == [10, 20, 70]


def test_append_to_empty_uses_seed(config):
    """Test the seed value for an empty sequence."""
    seq = StepSequence()
    append_values(seq, config)
    assert seq.to_list() == [5000, 5050]


def test_adjust_edges(config):
    """Test front/back increments."""
    seq = StepSequence([1, 2, 3])
    adjust_edges(seq, config)
    assert seq.to_list() == [251, 2, 253]


def test_adjust_edges_single_element(config):
    """Test that a single element receives both increments."""
    seq = StepSequence([1])
    adjust_edges(seq, config)
    assert seq.to_list() == [501]


def test_adjust_edges_skips_empty(config):
    """Test that an empty sequence is left alone."""
    seq = StepSequence()
    report = adjust_edges(seq, config)
    assert not report.applied
    assert len(seq) == 0


def test_insert_erase_symmetry(config):
    """Test that erasing the sentinel restores the pre-insert contents."""
    seq = StepSequence([3, 1, 4, 1, 5])
    before = seq.to_list()
    assert insert_sentinel(seq, config).applied
    assert seq[1] == 7777
    assert erase_sentinel(seq, config).applied
    assert seq.to_list() == before


def test_insert_sentinel_needs_two_elements(config):
    """Test that a one-element sequence skips the insert and erase."""
    seq = StepSequence([42])
    assert not insert_sentinel(seq, config).applied
    assert not erase_sentinel(seq, config).applied
    assert seq.to_list() == [42]


def test_erase_sentinel_only_when_present(config):
    """Test that erase leaves a non-sentinel index 1 untouched."""
    seq = StepSequence([1, 2, 3])
    assert not erase_sentinel(seq, config).applied
    assert seq.to_list() == [1, 2, 3]


def test_swap_with_baseline_restores(config, capsys):
    """Test that swap-and-swap-back restores the live sequence."""
    seq = StepSequence(range(100, 115))
    seq.reserve(40)
    before = seq.to_list()

    report = swap_with_baseline(seq, config)
    assert report.applied
    assert seq.to_list() == before
    assert seq.capacity == 40

    out = capsys.readouterr().out
    assert out.count("5000") == 10


def test_swap_with_baseline_skips_empty(config, capsys):
    """Test that an empty sequence skips the swap demo."""
    report = swap_with_baseline(StepSequence(), config)
    assert not report.applied
    assert capsys.readouterr().out == ""


def test_script_on_empty_sequence(config):
    """Test that preconditions keep the script from failing."""
    seq = StepSequence()
    reports = run_mutation_script(seq, config)
    applied = {r.step: r.applied for r in reports}
    assert applied["push_back"]
    assert not applied["insert_sentinel"]
    assert seq.to_list() == [5500]


def test_script_writes_to_given_stream(config, capsys):
    """Test that every step prints to the stream it is given."""
    stream = io.StringIO()
    run_mutation_script(StepSequence(range(1, 31)), config, file=stream)
    out = stream.getvalue()
    assert "[reserve] ok" in out
    assert "[swap_baseline] ok" in out
    assert "  5000" in out
    assert capsys.readouterr().out == ""


def test_uniform_shift():
    """Test that every element increases by delta."""
    seq = StepSequence(range(1, 31))
    uniform_shift(seq, 100)
    assert seq.to_list() == [v + 100 for v in range(1, 31)]


def test_uniform_shift_negative_and_empty():
    """Test negative deltas and the empty case."""
    seq = StepSequence([5, -5])
    uniform_shift(seq, -10)
    assert seq.to_list() == [-5, -15]

    empty = StepSequence()
    uniform_shift(empty, 100)
    assert len(empty) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
