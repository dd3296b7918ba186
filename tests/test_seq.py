"""Tests for Seq, configuration and reprs."""

from collections.abc import Iterator

import pytest

import pyoiter as po


@pytest.fixture
def max_items() -> Iterator[po.Config]:
    cfg = po.get_config()
    previous = cfg.max_items
    yield cfg
    cfg.max_items = previous


def test_seq_sequence_protocol() -> None:
    """Test len, indexing and repeated iteration."""
    seq = po.Seq.from_(1, 2, 3)
    assert len(seq) == 3
    assert seq[0] == 1
    assert seq[1:] == (2, 3)
    assert list(seq) == list(seq) == [1, 2, 3]
    assert 2 in seq


def test_seq_from_iterable() -> None:
    """Test creation from an iterable, and that tuples are kept as is."""
    data = (1, 2)
    assert po.Seq.from_(data).inner() is data
    assert po.Seq.from_(x for x in "ab").inner() == ("a", "b")


def test_collect() -> None:
    """Test collecting a pipeline into a Seq."""
    seq = po.Iter([1, 2]).repeat(2).collect()
    assert isinstance(seq, po.Seq)
    assert seq.inner() == (1, 1, 2, 2)


def test_seq_iter_is_exact_and_restartable() -> None:
    """Test that Seq.iter() gives an exact, cloneable iterator."""
    it = po.Seq((1, 2, 3)).iter()
    assert it.len() == 3
    assert it.times(2).into(list) == [1, 2, 3, 1, 2, 3]


def test_seq_repr(max_items: po.Config) -> None:
    """Test that the repr is truncated according to the configuration."""
    assert repr(po.Seq((1, 2, 3))) == "Seq(1, 2, 3)"
    assert repr(po.Seq(())) == "Seq()"
    max_items.max_items = 2
    assert repr(po.Seq((1, 2, 3))) == "Seq(1, 2, ...)"


def test_iterator_reprs_do_not_consume() -> None:
    """Test that adapter reprs describe the pipeline without consuming it."""
    it = po.Iter([1, 2]).every(2).repeat(3).times(2)
    assert repr(it) == "Times(Repeat(Every(Iter(list_iterator), n=2), n=3), n=2)"
    assert it.len() == 6
    assert repr(po.Iter([1]).skip(1)) == "Skip(Iter(list_iterator), n=1)"
    assert repr(po.Iter([1]).zip([2])) == "Zip(Iter(list_iterator), list_iterator)"


def test_into_and_inspect() -> None:
    """Test the Pipeable methods."""
    seen: list[int] = []
    total = (
        po.Iter([1, 2, 3])
        .repeat(2)
        .inspect(lambda it: seen.append(it.len()))
        .into(sum)
    )
    assert total == 12
    assert seen == [6]
