"""Tests for flattening Figma node trees."""

from figma_assets.schemas import Node
from figma_assets.services.node_collector import build_name_lookup, collect_nodes


class TestCollectNodes:
    """Test cases for collect_nodes."""

    def test_pre_order(self):
        """Test that the parent comes before its children."""
        tree = {"id": "1", "name": "A", "children": [{"id": "2", "name": "B"}]}
        nodes = collect_nodes(tree)
        assert nodes == [Node(id="1", name="A"), Node(id="2", name="B")]

    def test_deep_tree_order(self):
        """Test depth-first order across nested siblings."""
        tree = {
            "id": "1",
            "name": "Root",
            "children": [
                {"id": "2", "name": "Left", "children": [{"id": "3", "name": "Leaf"}]},
                {"id": "4", "name": "Right"},
            ],
        }
        assert [n.node_id for n in collect_nodes(tree)] == ["1", "2", "3", "4"]

    def test_missing_id_returns_empty(self):
        """Test that a node without an id yields nothing at top level."""
        assert collect_nodes({"name": "No id", "children": [{"id": "2", "name": "B"}]}) == []

    def test_missing_id_leaves_list_unchanged(self):
        """Test that a malformed node does not touch the accumulated list."""
        existing = [Node(id="9", name="Z")]
        result = collect_nodes({"name": "No id"}, existing)
        assert result is existing
        assert result == [Node(id="9", name="Z")]

    def test_none_node(self):
        """Test that an absent node is treated as an empty subtree."""
        assert collect_nodes(None) == []

    def test_malformed_children_skipped(self):
        """Test that bad child entries and non-list children are ignored."""
        tree = {
            "id": "1",
            "name": "A",
            "children": [None, "junk", {"name": "no id"}, {"id": "2", "name": "B", "children": "oops"}],
        }
        assert [n.node_id for n in collect_nodes(tree)] == ["1", "2"]

    def test_missing_name_kept_as_none(self):
        """Test that a node without a name is still collected."""
        nodes = collect_nodes({"id": "1"})
        assert nodes[0].name is None

    def test_accumulates_across_roots(self):
        """Test that several roots can share one list."""
        nodes = []
        collect_nodes({"id": "1", "name": "A"}, nodes)
        collect_nodes({"id": "2", "name": "B"}, nodes)
        assert [n.name for n in nodes] == ["A", "B"]


class TestBuildNameLookup:
    """Test cases for build_name_lookup."""

    def test_lookup(self):
        """Test that IDs map to names and the first occurrence wins."""
        nodes = [Node(id="1", name="A"), Node(id="2"), Node(id="1", name="Other")]
        assert build_name_lookup(nodes) == {"1": "A", "2": None}
