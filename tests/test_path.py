"""Tests for Path."""

from pathgraph import Edge, Path


def test_single_vertex_path():
    """A new path holds its start vertex and weighs nothing."""
    p = Path(4)
    assert p.vertices == (4,)
    assert p.weight == 0.0
    assert p.start_vertex == 4
    assert p.final_vertex == 4
    assert len(p) == 1


def test_add_vertex_in_place():
    """add_vertex appends the edge's end and its weight."""
    p = Path(0)
    p.add_vertex(Edge(0, 1, 1.5))
    p.add_vertex(Edge(1, 3, 2.0))

    assert p.vertices == (0, 1, 3)
    assert p.weight == 3.5
    assert list(p) == [0, 1, 3]


def test_extended_leaves_original_unchanged():
    """extended returns a new path."""
    p = Path(0)
    q = Path.extended(p, Edge(0, 2, 4.0))

    assert p.vertices == (0,)
    assert q.vertices == (0, 2)
    assert q.weight == 4.0


def test_equality_uses_final_vertex_and_length_only():
    """Different routes of equal length to the same vertex compare equal."""
    a = Path(0)
    a.add_vertex(Edge(0, 1, 1.0))
    a.add_vertex(Edge(1, 5, 1.0))

    b = Path(2)
    b.add_vertex(Edge(2, 3, 10.0))
    b.add_vertex(Edge(3, 5, 10.0))

    assert a == b
    assert hash(a) == hash(b)
    assert a.vertices != b.vertices


def test_inequality_on_length_or_final_vertex():
    """Paths of different length or end vertex are different."""
    short = Path.extended(Path(0), Edge(0, 5, 1.0))
    long = Path.extended(Path.extended(Path(0), Edge(0, 1, 1.0)), Edge(1, 5, 1.0))
    other_end = Path.extended(Path(0), Edge(0, 4, 1.0))

    assert short != long
    assert short != other_end
    assert Path(0) != 0


def test_extended_keeps_set_membership():
    """Building longer paths with extended leaves a stored path findable."""
    p = Path(0)
    seen = {p}
    q = Path.extended(p, Edge(0, 1, 1.0))

    assert p in seen
    assert q not in seen
    assert hash(p) == hash(Path(0))


def test_add_vertex_changes_hash():
    """add_vertex rehashes the path, so it must not be done inside a set."""
    p = Path(0)
    before = hash(p)
    p.add_vertex(Edge(0, 1, 1.0))

    assert hash(p) != before
    assert hash(p) == hash(Path.extended(Path(0), Edge(0, 1, 1.0)))


def test_repr():
    """repr shows the route and weight."""
    p = Path.extended(Path(0), Edge(0, 1, 2.0))
    assert repr(p) == "Path(0 -> 1, weight=2.0)"
