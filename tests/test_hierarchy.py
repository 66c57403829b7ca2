"""Tests for stack-based tree building."""

import pytest

from conftest import records
from outline_nav.exceptions import MalformedHeadingError
from outline_nav.parser.hierarchy import (
    ROOT,
    Node,
    TreeBuilder,
    build_outline,
    build_tree,
    flatten_outline,
    nest_outline,
)
from outline_nav.parser.markdown import scan_markdown_headings
from outline_nav.parser.rst import scan_rst_headings


class TestRoot:
    def test_sentinel_fields(self):
        assert ROOT.id == 0
        assert ROOT.line == -1
        assert ROOT.title == "root"
        assert ROOT.level == 0
        assert ROOT.parent_id == 0
        assert ROOT.is_root

    def test_nodes_are_frozen(self):
        node = Node(id=1, line=1, title="A", level=1)
        with pytest.raises(Exception):
            node.parent_id = 0


class TestBuildTree:
    def test_scenario_a(self):
        nodes = build_tree(records((1, "A", 1), (2, "B", 2), (2, "C", 3), (1, "D", 4)))
        assert [(n.id, n.title, n.parent_id) for n in nodes] == [
            (1, "A", 0),
            (2, "B", 1),
            (3, "C", 1),
            (4, "D", 0),
        ]

    def test_ids_start_at_one_in_scan_order(self, sample_markdown):
        nodes = build_tree(scan_markdown_headings(sample_markdown))
        assert [n.id for n in nodes] == list(range(1, len(nodes) + 1))

    def test_preserves_order_and_fields(self):
        input_records = records((1, "A", 3), (2, "B", 7))
        nodes = build_tree(input_records)
        assert [(n.title, n.level, n.line) for n in nodes] == [("A", 1, 3), ("B", 2, 7)]

    def test_empty_input(self):
        assert build_tree([]) == []

    def test_single_record(self):
        assert build_tree(records((1, "Only", 1))) == [Node(id=1, line=1, title="Only", level=1, parent_id=0)]

    def test_idempotent(self, sample_markdown):
        scanned = scan_markdown_headings(sample_markdown)
        assert build_tree(scanned) == build_tree(scanned)

    def test_accepts_generator(self):
        nodes = build_tree(r for r in records((1, "A", 1), (2, "B", 2)))
        assert [n.parent_id for n in nodes] == [0, 1]

    def test_parent_level_strictly_lower(self, sample_markdown):
        nodes = build_tree(scan_markdown_headings(sample_markdown))
        by_id = {n.id: n for n in nodes}
        by_id[ROOT.id] = ROOT
        for node in nodes:
            assert by_id[node.parent_id].level < node.level

    def test_parent_is_nearest_preceding_lower_level(self, sample_markdown):
        nodes = build_tree(scan_markdown_headings(sample_markdown))
        for index, node in enumerate(nodes):
            preceding = [p for p in nodes[:index] if p.level < node.level]
            expected = preceding[-1].id if preceding else ROOT.id
            assert node.parent_id == expected

    def test_rst_tree(self, sample_rst):
        nodes = build_tree(scan_rst_headings(sample_rst))
        parents = {n.title: n.parent_id for n in nodes}
        ids = {n.title: n.id for n in nodes}
        assert parents["User Guide"] == 0
        assert parents["Installation"] == ids["User Guide"]
        assert parents["Basic Setup"] == ids["Configuration"]
        assert parents["Nested Section"] == ids["Advanced Setup"]


class TestSkippedLevels:
    def test_skip_pushes_node_twice(self):
        builder = TreeBuilder()
        nodes = builder.build(records((1, "A", 1), (3, "B", 2)))
        # A is pushed once per level opened (1 -> 3), so it sits on the stack twice
        assert builder.trace[0] == (0, 1, 1)
        assert nodes[1].parent_id == nodes[0].id
        # The final pop against the virtual level-0 successor unwinds everything
        assert builder.trace[-1] == ()

    def test_rising_out_of_skipped_level(self):
        builder = TreeBuilder()
        nodes = builder.build(records((1, "A", 1), (3, "B", 2), (2, "C", 3), (1, "D", 4)))
        assert [n.parent_id for n in nodes] == [0, 1, 1, 0]
        assert builder.trace == [(0, 1, 1), (0, 1), (0,), ()]

    def test_first_heading_deeper_than_next(self):
        # Pops exhaust the stack; later nodes fall back to the root
        nodes = build_tree(records((3, "A", 1), (2, "B", 2), (3, "C", 3)))
        assert [n.parent_id for n in nodes] == [0, 0, 2]


class TestMalformedInput:
    def test_level_zero_rejected(self):
        with pytest.raises(MalformedHeadingError):
            build_tree(records((1, "A", 1), (0, "Bad", 2)))

    def test_negative_level_rejected(self):
        with pytest.raises(ValueError):
            build_tree(records((-1, "Bad", 1)))


class TestNesting:
    def test_nest_outline(self):
        outline = build_outline(records((1, "A", 1), (2, "B", 2), (2, "C", 3), (1, "D", 4)))
        tree = nest_outline(outline)
        assert [w.node.title for w in tree] == ["A", "D"]
        assert [w.node.title for w in tree[0].children] == ["B", "C"]

    def test_flatten_roundtrip(self, sample_markdown):
        outline = build_outline(scan_markdown_headings(sample_markdown))
        flat = flatten_outline(nest_outline(outline))
        assert [node for node, _ in flat] == list(outline)
        depths = {node.title: depth for node, depth in flat}
        assert depths["Getting Started"] == 0
        assert depths["GET /users"] == 3
