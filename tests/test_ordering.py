import pytest

from pathgraph.ordering import HeapFrontier, QueueEntry, by_distance, by_distance_then_id, from_comparator


def _drain(frontier):
    out = []
    while frontier:
        entry = frontier.pop()
        out.append((entry.distance, entry.vertex))
    return out


def test_smallest_distance_first():
    f = HeapFrontier()
    for d, v in [(5, "a"), (1, "b"), (3, "c")]:
        f.push(d, v)
    assert _drain(f) == [(1, "b"), (3, "c"), (5, "a")]


def test_default_ties_follow_insertion_order():
    f = HeapFrontier()
    for v in ["z", "y", "x"]:
        f.push(2, v)
    assert [v for _, v in _drain(f)] == ["z", "y", "x"]


def test_id_tie_break():
    f = HeapFrontier(by_distance_then_id)
    for v in ["z", "y", "x"]:
        f.push(2, v)
    f.push(1, "w")
    assert [v for _, v in _drain(f)] == ["w", "x", "y", "z"]


def test_comparator_key():
    def largest_id_first(a, b):
        if a.distance != b.distance:
            return a.distance - b.distance
        return (a.vertex < b.vertex) - (a.vertex > b.vertex)

    f = HeapFrontier(from_comparator(largest_id_first))
    for v in ["a", "c", "b"]:
        f.push(0, v)
    assert [v for _, v in _drain(f)] == ["c", "b", "a"]


def test_unorderable_vertices_do_not_break_default_key():
    f = HeapFrontier()
    f.push(1, ("x", 1))
    f.push(1, 7)
    assert len(f) == 2
    assert f.pop().vertex == ("x", 1)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        HeapFrontier().pop()


def test_by_distance_key():
    assert by_distance(QueueEntry(4, "a", 9)) == (4, 9)
