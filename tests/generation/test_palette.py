"""Tests for rotations and the edge-matching rule."""

import pytest

from tritiler.core import TileDefinition
from tritiler.generation import rotate, edges_compatible, build_palette, InvalidTileError, WFCSolver


class TestRotate:
    """Test rotation generation."""

    def test_three_variants(self, road_bend_tile):
        tiles = rotate(road_bend_tile)
        assert len(tiles) == 3
        assert tiles[0] is road_bend_tile

    def test_edge_triples(self):
        """[a, b, c] rotates to [c, a, b] and [b, c, a]."""
        base = TileDefinition(id="t", edges=("a", "b", "c"))
        assert [t.edges for t in rotate(base)] == [
            ("a", "b", "c"),
            ("c", "a", "b"),
            ("b", "c", "a"),
        ]

    def test_rotation_closure(self):
        """Stepping the 120 degree rotation three times returns to the base."""
        base = TileDefinition(id="t", edges=("a", "b", "c"))
        edges = base.edges
        for _ in range(3):
            e0, e1, e2 = edges
            edges = (e2, e0, e1)
        assert edges == base.edges

        variants = rotate(base)
        e0, e1, e2 = variants[1].edges
        assert (e2, e0, e1) == variants[2].edges

    def test_rotated_fields(self, road_bend_tile):
        _, r1, r2 = rotate(road_bend_tile)

        assert (r1.id, r1.rotation, r1.base_id) == ("road_bend_r1", 1, "road_bend")
        assert (r2.id, r2.rotation, r2.base_id) == ("road_bend_r2", 2, "road_bend")
        for variant in (r1, r2):
            assert variant.name == road_bend_tile.name
            assert variant.metadata == road_bend_tile.metadata

    def test_ids_deterministic(self, road_bend_tile):
        assert [t.id for t in rotate(road_bend_tile)] == [t.id for t in rotate(road_bend_tile)]

    def test_wrong_arity_unvalidated_tile(self):
        """Tiles built without validation are still checked."""
        bad = TileDefinition.model_construct(id="bad", name="", edges=("a", "b"), rotation=0, base_id=None, metadata={})
        with pytest.raises(InvalidTileError):
            rotate(bad)

    def test_solver_and_rotate_report_arity_alike(self):
        bad = TileDefinition.model_construct(id="bad", name="", edges=("a",), rotation=0, base_id=None, metadata={})
        with pytest.raises(InvalidTileError) as from_rotate:
            rotate(bad)
        with pytest.raises(InvalidTileError) as from_solver:
            WFCSolver([bad])
        assert str(from_rotate.value) == str(from_solver.value)
        assert "has 1 edges, expected 3" in str(from_solver.value)


class TestEdgesCompatible:
    """Test the edge-matching predicate."""

    def test_equal_labels(self):
        assert edges_compatible("road", "road")

    def test_different_labels(self):
        assert not edges_compatible("road", "grass")

    def test_symmetric(self):
        for a in ("road", "grass", "water"):
            for b in ("road", "grass", "water"):
                assert edges_compatible(a, b) == edges_compatible(b, a)

    def test_no_wildcard(self):
        assert not edges_compatible("*", "road")
        assert not edges_compatible("", "road")


class TestBuildPalette:
    """Test palette construction."""

    def test_size_and_order(self, grass_tile, road_bend_tile):
        palette = build_palette([road_bend_tile, grass_tile])
        assert [t.id for t in palette] == [
            "road_bend", "road_bend_r1", "road_bend_r2",
            "grass", "grass_r1", "grass_r2",
        ]

    def test_empty(self):
        assert build_palette([]) == []

    def test_ids_unique(self, palette):
        ids = [t.id for t in palette]
        assert len(ids) == len(set(ids))

    def test_duplicate_base_ids_rejected(self, grass_tile):
        with pytest.raises(InvalidTileError):
            build_palette([grass_tile, grass_tile])

    def test_deterministic(self, base_tiles):
        assert [t.id for t in build_palette(base_tiles)] == [t.id for t in build_palette(base_tiles)]

    def test_bundled_catalog_covers_every_triple(self, palette):
        """Grass/road tiles with rotations cover all 8 edge combinations."""
        triples = {t.edges for t in palette}
        for a in ("grass", "road"):
            for b in ("grass", "road"):
                for c in ("grass", "road"):
                    assert (a, b, c) in triples
