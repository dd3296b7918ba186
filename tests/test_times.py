"""Tests for the times adapter."""

import logging

import pytest

import pyoiter as po
from tests._helpers import assert_sizes


def test_times_adapter() -> None:
    """Test that the fluent method and the constructor agree."""
    assert po.Iter(range(1, 3)).times(2).into(list) == po.Times(range(1, 3), 2).into(
        list
    )
    assert po.Iter([1, 2, 3]).times(2).into(list) == po.Times(
        iter([1, 2, 3]), 2
    ).into(list)


def test_times_iteration_n2() -> None:
    """Test element by element iteration, and that the end is terminal."""
    it = po.Iter(range(1, 3)).times(2)
    assert [it.next() for _ in range(6)] == [
        po.Some(1),
        po.Some(2),
        po.Some(1),
        po.Some(2),
        po.NONE,
        po.NONE,
    ]


def test_times_iteration_n3() -> None:
    """Test three full passes."""
    assert po.Iter(range(1, 3)).times(3).into(list) == [1, 2, 1, 2, 1, 2]


def test_times_size_n2() -> None:
    """Test that the length starts at len * n and decreases by one per pull."""
    assert_sizes(po.Iter(range(1, 3)).times(2), [4, 3, 2, 1, 0, 0])


def test_times_size_n3() -> None:
    """Test the length across three passes."""
    assert_sizes(po.Iter(range(1, 3)).times(3), [6, 5, 4, 3, 2, 1, 0, 0])


@pytest.mark.parametrize(
    ("skipped", "expected"),
    [(1, 3), (2, 2), (3, 1), (4, 0), (5, 0)],
)
def test_times_size_skip(skipped: int, expected: int) -> None:
    """Test that skipping a prefix subtracts from the length, saturating at zero."""
    it = po.Iter(range(1, 3)).times(2).skip(skipped)
    assert it.size_hint() == (expected, po.Some(expected))
    assert it.count() == expected


def test_times_isomorphism() -> None:
    """Test that n = 1 is a plain single pass, even when nested."""
    assert po.Iter(range(1, 10)).times(1).into(list) == list(range(1, 10))
    assert po.Iter(range(1, 10)).times(1).times(1).times(1).times(1).times(
        1
    ).into(list) == list(range(1, 10))


def test_times_n1_accepts_single_use_source() -> None:
    """Test that a single pass does not need a restartable source."""
    it = po.Times((x for x in range(3)), 1)
    assert it.into(list) == [0, 1, 2]


def test_times_pipelining() -> None:
    """Test composition with map and zip."""
    assert po.Iter(range(1, 3)).times(2).map(lambda x: x * 2).into(list) == [
        2,
        4,
        2,
        4,
    ]
    assert po.Iter(range(1, 3)).map(lambda x: x * 2).times(2).into(list) == [
        2,
        4,
        2,
        4,
    ]
    assert po.Iter(range(1, 3)).times(2).zip(po.Iter(range(1, 3)).times(2)).into(
        list
    ) == [(1, 1), (2, 2), (1, 1), (2, 2)]
    assert po.Iter(range(1, 3)).zip(range(1, 3)).times(2).into(list) == [
        (1, 1),
        (2, 2),
        (1, 1),
        (2, 2),
    ]


def test_times_empty_source() -> None:
    """Test that an empty pass ends the iterator for good."""
    it = po.Times([], 3)
    assert it.size_hint() == (0, po.Some(0))
    assert it.next() == po.NONE
    assert it.next() == po.NONE


def test_times_restarts_from_start_state() -> None:
    """Test that passes replay the source from where it stood at construction."""
    source = iter([1, 2, 3])
    next(source)
    assert po.Times(source, 2).into(list) == [2, 3, 2, 3]


def test_times_accepts_collections() -> None:
    """Test that re-iterable collections are restartable sources."""
    assert po.Times("ab", 2).into(list) == ["a", "b", "a", "b"]
    assert po.Times(po.Seq((1, 2)), 2).into(list) == [1, 2, 1, 2]
    assert po.Times(range(2), 2).len() == 4


def test_times_rejects_generators() -> None:
    """Test that single-use sources are rejected at construction."""
    with pytest.raises(po.NotRestartableError, match="generator"):
        po.Iter(x for x in range(3)).every(2).times(2)


def test_times_generator_collected_first() -> None:
    """Test the documented workaround for single-use sources."""
    seq = po.Iter(x for x in range(3)).collect()
    assert seq.iter().times(2).into(list) == [0, 1, 2, 0, 1, 2]


@pytest.mark.parametrize("n", [0, -3])
def test_times_rejects_non_positive_count(n: int) -> None:
    """Test that n < 1 is rejected at construction instead of underflowing."""
    with pytest.raises(ValueError, match="times"):
        po.Iter([1, 2]).times(n)


def test_times_nested() -> None:
    """Test that a times adapter can itself be replayed."""
    it = po.Iter([1, 2]).times(2).times(2)
    assert it.len() == 8
    assert it.into(list) == [1, 2, 1, 2, 1, 2, 1, 2]


def test_times_clone() -> None:
    """Test that a clone keeps its own position and remaining passes."""
    it = po.Iter([1, 2]).times(2)
    it.next()
    it.next()
    it.next()
    copy = it.clone()
    assert copy.into(list) == [2]
    assert it.into(list) == [2]


def test_times_logs_replays(caplog: pytest.LogCaptureFixture) -> None:
    """Test that each new pass is logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="pyoiter"):
        po.Iter([1]).times(3).count()
    assert len(caplog.records) == 2
    assert "1 left" in caplog.records[0].getMessage()
