"""Tests for tile models."""

import pytest
from pydantic import ValidationError

from tritiler.core import Pointing, TriCoord, TileDefinition, PlacedTile


class TestTileDefinition:
    """Tests for TileDefinition."""

    def test_defaults(self):
        tile = TileDefinition(id="grass", edges=("grass", "grass", "grass"))
        assert tile.rotation == 0
        assert tile.base_id is None
        assert tile.metadata == {}
        assert tile.family == "grass"

    def test_list_edges_accepted(self):
        """Edges given as a list are stored as a tuple."""
        tile = TileDefinition(id="t", edges=["a", "b", "c"])
        assert tile.edges == ("a", "b", "c")

    @pytest.mark.parametrize("edges", [("a", "b"), ("a", "b", "c", "d"), ()])
    def test_wrong_edge_arity_rejected(self, edges):
        """A tile must have exactly three edges."""
        with pytest.raises(ValidationError):
            TileDefinition(id="bad", edges=edges)

    def test_rotation_range(self):
        with pytest.raises(ValidationError):
            TileDefinition(id="t", edges=("a", "b", "c"), rotation=3)

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            TileDefinition(id="", edges=("a", "b", "c"))

    def test_frozen(self):
        tile = TileDefinition(id="t", edges=("a", "b", "c"))
        with pytest.raises(ValidationError):
            tile.id = "other"

    def test_edge_lookup(self):
        tile = TileDefinition(id="t", edges=("a", "b", "c"))
        assert tile.edge(0) == "a"
        assert tile.edge(2) == "c"

    def test_with_rotation(self):
        """Rotated variants point back at their base tile."""
        tile = TileDefinition(id="bend", name="Bend", edges=("r", "r", "g"), metadata={"k": 1})
        rotated = tile.with_rotation(1, ("g", "r", "r"))

        assert rotated.id == "bend_r1"
        assert rotated.base_id == "bend"
        assert rotated.rotation == 1
        assert rotated.name == "Bend"
        assert rotated.metadata == {"k": 1}
        assert rotated.family == "bend"


class TestPlacedTile:
    """Tests for PlacedTile."""

    def test_create(self):
        tile = TileDefinition(id="t", edges=("a", "b", "c"))
        placed = PlacedTile(coord=TriCoord(1, 2, Pointing.DOWN), tile=tile)
        assert placed.coord == TriCoord(1, 2, Pointing.DOWN)
        assert placed.tile.id == "t"
