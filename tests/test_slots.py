"""Tests for slot usage in pyoiter classes."""

import pyoiter as po


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(po.Iter(()))
    assert _check_slots(po.Seq(()))
    assert _check_slots(po.Every((), 2))
    assert _check_slots(po.Repeat((), 2))
    assert _check_slots(po.Times((), 2))
    assert _check_slots(po.Iter(()).map(str))
    assert _check_slots(po.Iter(()).zip(()))
    assert _check_slots(po.Iter(()).skip(1))
    assert _check_slots(po.Some(42))
    assert _check_slots(po.NoneOption())
