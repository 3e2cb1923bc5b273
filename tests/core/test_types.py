"""Tests for core types: Pointing, EdgeDirection, TriCoord."""

import pytest

from tritiler.core import Pointing, EdgeDirection, TriCoord


class TestPointing:
    """Tests for Pointing enum."""

    def test_values(self):
        """Orientations serialize as 'up' and 'down'."""
        assert Pointing.UP.value == "up"
        assert Pointing.DOWN.value == "down"

    def test_not_a_boolean(self):
        """Orientation is a named variant, not a bool."""
        assert Pointing.UP != True  # noqa: E712
        assert Pointing("down") is Pointing.DOWN


class TestEdgeDirection:
    """Tests for EdgeDirection."""

    def test_indices(self):
        """Edge directions are usable as plain indices."""
        edges = ("a", "b", "c")
        assert edges[EdgeDirection.EDGE_0] == "a"
        assert edges[EdgeDirection.EDGE_1] == "b"
        assert edges[EdgeDirection.EDGE_2] == "c"

    def test_three_edges(self):
        assert len(EdgeDirection) == 3


class TestTriCoord:
    """Tests for TriCoord NamedTuple."""

    def test_create(self):
        coord = TriCoord(2, -1, Pointing.DOWN)
        assert coord.q == 2
        assert coord.r == -1
        assert coord.pointing is Pointing.DOWN
        assert not coord.is_up

    def test_equality_includes_pointing(self):
        """Up and down triangles in the same cell are distinct."""
        up = TriCoord(0, 0, Pointing.UP)
        down = TriCoord(0, 0, Pointing.DOWN)
        assert up != down
        assert up == TriCoord(0, 0, Pointing.UP)

    def test_hashable(self):
        """Coordinates can be used as dict keys."""
        d = {TriCoord(1, 2, Pointing.UP): "a", TriCoord(1, 2, Pointing.DOWN): "b"}
        assert d[TriCoord(1, 2, Pointing.UP)] == "a"
        assert len(d) == 2

    def test_immutable(self):
        coord = TriCoord(0, 0, Pointing.UP)
        with pytest.raises(AttributeError):
            coord.q = 5

    def test_str(self):
        assert str(TriCoord(3, 4, Pointing.UP)) == "(3, 4, up)"
