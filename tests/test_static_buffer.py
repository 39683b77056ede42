import pytest

from dgmkit.static_buffer import StaticBuffer


def test_new_buffer_is_empty_with_capacity():
    buf = StaticBuffer(4, int)
    assert buf.is_empty()
    assert not buf.is_full()
    assert len(buf) == 0
    assert buf.capacity == 4
    assert list(buf) == []


def test_zero_capacity_is_full_and_empty():
    buf = StaticBuffer(0, int)
    assert buf.is_empty()
    assert buf.is_full()
    assert buf.grow() is False


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        StaticBuffer(-1, int)


def test_grow_until_full():
    buf = StaticBuffer(3, int)
    results = [buf.grow() for _ in range(4)]
    assert results == [True, True, True, False]
    assert buf.is_full()
    assert len(buf) == buf.capacity


def test_items_come_from_factory():
    buf = StaticBuffer(3, list)
    assert buf[0] == []
    assert buf[0] is not buf[1]


def test_default_factory_gives_none():
    buf = StaticBuffer(2)
    assert buf.grow_unchecked() is None


def test_grow_unchecked_returns_last_even_when_full():
    buf = StaticBuffer(2, int)
    buf[0] = 10
    buf[1] = 20
    assert buf.grow_unchecked() == 10
    assert buf.grow_unchecked() == 20
    assert buf.grow_unchecked() == 20
    assert len(buf) == 2


def test_indexing_reaches_whole_capacity_before_growth():
    buf = StaticBuffer(3, int)
    for position in range(buf.capacity):
        buf[position] = position * 2
    assert len(buf) == 0
    buf.grow()
    buf.grow()
    assert list(buf) == [0, 2]


def test_index_out_of_capacity_read_raises():
    buf = StaticBuffer(2, int)
    buf[1] = 7
    with pytest.raises(IndexError):
        buf[2]
    assert buf[1] == 7
    assert len(buf) == 0


def test_index_out_of_capacity_write_raises():
    buf = StaticBuffer(2, int)
    with pytest.raises(IndexError):
        buf[-1] = 5
    assert buf[0] == 0
    assert buf[1] == 0


def test_remove_swaps_with_last():
    buf = StaticBuffer(4, int)
    for value in "abcd":
        buf.grow_unchecked()
        buf[len(buf) - 1] = value
    buf.remove(1)
    assert list(buf) == ["a", "d", "c"]
    assert buf[3] == "b"
    assert buf.last() == "c"


def test_removed_item_returns_on_grow():
    buf = StaticBuffer(2, int)
    buf.grow()
    buf[0] = "kept"
    buf.remove(0)
    assert buf.is_empty()
    assert buf.grow_unchecked() == "kept"


def test_remove_unused_index_raises():
    buf = StaticBuffer(3, int)
    buf.grow()
    with pytest.raises(IndexError):
        buf.remove(1)
    assert len(buf) == 1


def test_last_of_empty_raises():
    buf = StaticBuffer(3, int)
    with pytest.raises(IndexError):
        buf.last()
    assert buf.is_empty()


def test_clone_is_independent():
    buf = StaticBuffer(3, list)
    buf.grow_unchecked().append(1)
    other = buf.clone()
    assert len(other) == len(buf)
    assert other.capacity == buf.capacity
    assert list(other) == list(buf)
    other[0].append(2)
    other.grow()
    assert buf[0] == [1]
    assert len(buf) == 1