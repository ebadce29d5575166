import logging

import pytest

from regionquadtree import Point, QuadTree, Rectangle, set_debug

BOUNDS = (0.0, 0.0, 1000.0, 1000.0)


def test_contains_follows_points_kept_at_internal_nodes():
    qt = QuadTree(BOUNDS, capacity=1)
    qt.insert((900, 900))
    qt.insert((10, 10))

    # (900, 900) stayed at the root when it split
    assert qt.children == [Point(900.0, 900.0)]
    assert (900, 900) in qt
    assert (10, 10) in qt
    assert (10, 11) not in qt
    assert (5000, 5000) not in qt


def test_contains_rejects_malformed_points():
    qt = QuadTree(BOUNDS, capacity=1)
    with pytest.raises(ValueError):
        (1, 2, 3) in qt  # noqa: B015


def test_duplicate_points_are_all_kept():
    qt = QuadTree(BOUNDS, capacity=1)
    for _ in range(50):
        assert qt.insert((123.5, 456.5))
    assert len(qt) == 50
    assert len(qt.query((123, 456, 1, 1))) == 50
    assert qt.get_inner_max_depth() == 49


def test_len_counts_only_accepted_points():
    qt = QuadTree(BOUNDS, capacity=4)
    res = qt.insert_many([(1, 1), (1000, 1), (2, 2), (-3, 5)])
    assert res.count == 2
    assert res.rejected == [1, 3]
    assert not res.all_inserted
    assert len(qt) == 2


def test_negative_extent_bounds_behave_like_positive():
    flipped = QuadTree((100, 100, -100, -100), capacity=1)
    plain = QuadTree((0, 0, 100, 100), capacity=1)
    pts = [(0, 0), (99.5, 99.5), (50, 50), (100, 0), (25, 75)]
    assert [flipped.insert(p) for p in pts] == [plain.insert(p) for p in pts]
    assert sorted(p.as_tuple() for p in flipped) == sorted(p.as_tuple() for p in plain)


def test_walk_exposes_nodes_for_rendering():
    qt = QuadTree(BOUNDS, capacity=1)
    for pt in [(100, 100), (600, 600), (700, 100)]:
        qt.insert(pt)

    outlines = [node.bounds for node in qt.walk()]
    dots = [p for node in qt.walk() for p in node.children]
    assert outlines[0] == Rectangle(*BOUNDS)
    assert len(outlines) == 5
    assert len(dots) == 3
    assert qt.root.quads is qt.quads


def test_subdivide_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="regionquadtree")
    qt = QuadTree(BOUNDS, capacity=1)
    qt.insert((1, 1))
    qt.insert((2, 2))
    qt.clear()

    messages = [r.getMessage() for r in caplog.records]
    assert any("Subdivided node at depth 0" in m for m in messages)
    assert any("Cleared tree after 2 points" in m for m in messages)


def test_set_debug_toggles_level():
    logger = logging.getLogger("regionquadtree")
    set_debug(True)
    try:
        assert logger.level == logging.DEBUG
    finally:
        set_debug(False)
    assert logger.level == logging.NOTSET


def test_repr_mentions_point_count():
    qt = QuadTree(BOUNDS, capacity=4)
    qt.insert((1, 1))
    assert "points=1" in repr(qt)
    assert "leaf" in repr(qt.root)
