import pytest

from dgmkit.objects import Circle, Rect
from dgmkit.spatial_index import SpatialBuffer, SpatialIndex


def make_index():
    return SpatialIndex(Rect((0.0, 0.0), (100.0, 100.0)), 10)


def test_candidates_found_for_overlapping_box():
    index = make_index()
    index.return_to_lookup(1, Rect((5.0, 5.0), (2.0, 2.0)))
    assert index.get_overlap_candidates(Rect((0.0, 0.0), (9.0, 9.0))) == [1]


def test_distant_box_finds_nothing():
    index = make_index()
    index.return_to_lookup(1, Rect((5.0, 5.0), (2.0, 2.0)))
    assert index.get_overlap_candidates(Rect((80.0, 80.0), (5.0, 5.0))) == []


def test_box_outside_bounds_finds_nothing():
    index = make_index()
    index.return_to_lookup(1, Rect((0.0, 0.0), (100.0, 100.0)))
    assert index.get_overlap_candidates(Rect((200.0, 200.0), (5.0, 5.0))) == []


def test_candidates_are_sorted_and_unique():
    index = make_index()
    big = Rect((0.0, 0.0), (50.0, 50.0))
    index.return_to_lookup(7, big)
    index.return_to_lookup(3, big)
    index.return_to_lookup(5, Rect((12.0, 12.0), (1.0, 1.0)))
    result = index.get_overlap_candidates(big)
    assert result == sorted(set(result))
    assert result == [3, 5, 7]


def test_remove_from_lookup():
    index = make_index()
    box = Rect((20.0, 20.0), (30.0, 30.0))
    index.return_to_lookup(1, box)
    index.return_to_lookup(2, box)
    index.remove_from_lookup(1, box)
    assert index.get_overlap_candidates(box) == [2]


def test_point_and_circle_boxes():
    index = make_index()
    index.return_to_lookup(4, (55.0, 55.0))
    index.return_to_lookup(8, Circle((55.0, 55.0), 3.0))
    assert index.get_overlap_candidates(Circle((56.0, 56.0), 1.0)) == [4, 8]
    index.remove_from_lookup(4, (55.0, 55.0))
    assert index.get_overlap_candidates((55.0, 55.0)) == [8]


def test_clear_empties_lookup():
    index = make_index()
    box = Rect((0.0, 0.0), (100.0, 100.0))
    index.return_to_lookup(1, box)
    index.clear()
    assert index.get_overlap_candidates(box) == []


def test_bounding_box_is_kept():
    index = make_index()
    assert index.bounding_box == Rect((0.0, 0.0), (100.0, 100.0))


def test_invalid_resolution_raises():
    with pytest.raises(ValueError):
        SpatialIndex(Rect((0.0, 0.0), (10.0, 10.0)), 0)


def test_buffer_insert_and_lookup():
    buffer = SpatialBuffer(Rect((0.0, 0.0), (100.0, 100.0)), 10)
    first = buffer.insert("a", Rect((5.0, 5.0), (1.0, 1.0)))
    second = buffer.insert("b", Rect((90.0, 90.0), (1.0, 1.0)))
    assert buffer[first] == "a"
    assert buffer[second] == "b"
    assert buffer.get_overlap_candidates(Rect((0.0, 0.0), (8.0, 8.0))) == [first]
    assert list(buffer) == [("a", first), ("b", second)]


def test_buffer_erase():
    buffer = SpatialBuffer(Rect((0.0, 0.0), (100.0, 100.0)), 10)
    box = Rect((5.0, 5.0), (1.0, 1.0))
    index = buffer.insert("a", box)
    buffer.erase_at_index(index, box)
    assert list(buffer) == []
    assert buffer.get_overlap_candidates(box) == []
    with pytest.raises(IndexError):
        buffer[index]


def test_buffer_reuses_erased_index():
    buffer = SpatialBuffer(Rect((0.0, 0.0), (100.0, 100.0)), 10)
    box = Rect((5.0, 5.0), (1.0, 1.0))
    index = buffer.insert("a", box)
    buffer.insert("b", box)
    buffer.erase_at_index(index, box)
    assert buffer.insert("c", box) == index
    assert buffer[index] == "c"