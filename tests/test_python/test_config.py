import dataclasses

import pytest

from regionquadtree import Point, QuadTree, QuadTreeConfig, Rectangle


def test_new_captures_child_capacity():
    config = QuadTreeConfig.new((0, 0, 800, 600), 4)
    assert config.bounds == Rectangle(0, 0, 800, 600)
    assert config.capacity == config.child_capacity == 4

    changed = config.with_capacity(0)
    assert changed.capacity == 0
    assert changed.child_capacity == 4


def test_with_methods_return_new_configs():
    config = QuadTreeConfig.new((0, 0, 10, 10), 2)
    other = config.with_bounds((0, 0, 20, 20)).with_max_depth(5).with_dtype("i32")

    assert config.bounds == Rectangle(0, 0, 10, 10)
    assert config.max_depth is None
    assert other.bounds == Rectangle(0, 0, 20, 20)
    assert other.max_depth == 5
    assert other.dtype == "i32"
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.capacity = 3  # type: ignore[misc]


def test_build_presplit_routing_root():
    qt = QuadTreeConfig.new((0, 0, 800, 600), 4).with_capacity(0).with_quads().build()

    assert isinstance(qt, QuadTree)
    assert qt.capacity == 0
    assert qt.child_capacity == 4
    assert [q.bounds for q in qt.quads] == list(Rectangle(0, 0, 800, 600).quadrants())

    assert qt.insert((100, 100))
    assert qt.children == []
    assert qt.quads[0].children == [Point(100.0, 100.0)]


def test_from_config_matches_build():
    config = QuadTreeConfig.new((0, 0, 64, 64), 1).with_max_depth(4).with_redistribute()
    qt = QuadTree.from_config(config)
    assert qt.max_depth == 4
    assert qt.insert((1, 1))
    assert qt.insert((40, 40))
    assert qt.children == []


def test_build_validates():
    with pytest.raises(ValueError):
        QuadTreeConfig.new((0, 0, 10, 10), 1).with_redistribute().build()
    with pytest.raises(TypeError):
        QuadTreeConfig.new((0, 0, 10, 10), 1).with_dtype("u8").build()
