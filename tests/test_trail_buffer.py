import pytest

from orbits.data_models import TrailBuffer


def test_push_keeps_insertion_order_until_full() -> None:
    buf = TrailBuffer(3)
    buf.push((1.0, 0.0))
    buf.push((2.0, 0.0))
    assert len(buf) == 2
    assert not buf.is_full()
    assert list(buf) == [(1.0, 0.0), (2.0, 0.0)]


def test_overflow_evicts_oldest() -> None:
    buf = TrailBuffer(3)
    for i in range(5):
        buf.push((float(i), 0.0))
    assert len(buf) == 3
    assert buf.is_full()
    assert buf.snapshot() == ((2.0, 0.0), (3.0, 0.0), (4.0, 0.0))


def test_length_never_exceeds_capacity() -> None:
    buf = TrailBuffer(4)
    for i in range(50):
        buf.push((float(i), float(-i)))
        assert len(buf) <= buf.capacity
    assert list(buf)[-1] == (49.0, -49.0)


def test_zero_capacity_records_nothing() -> None:
    buf = TrailBuffer(0)
    buf.push((1.0, 1.0))
    buf.push((2.0, 2.0))
    assert len(buf) == 0
    assert buf.snapshot() == ()


def test_clear_resets_buffer() -> None:
    buf = TrailBuffer(2)
    for i in range(3):
        buf.push((float(i), 0.0))
    buf.clear()
    assert len(buf) == 0
    buf.push((9.0, 9.0))
    assert list(buf) == [(9.0, 9.0)]


def test_negative_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        TrailBuffer(-1)


def test_pop_oldest_drains_in_order() -> None:
    buf = TrailBuffer(3)
    for i in range(4):
        buf.push((float(i), 0.0))
    assert buf.pop_oldest() == (1.0, 0.0)
    assert buf.pop_oldest() == (2.0, 0.0)
    buf.push((7.0, 0.0))
    assert list(buf) == [(3.0, 0.0), (7.0, 0.0)]
    assert buf.pop_oldest() == (3.0, 0.0)
    assert buf.pop_oldest() == (7.0, 0.0)
    assert buf.pop_oldest() is None
    assert len(buf) == 0
