"""Build the heading tree from a flat, depth-tagged heading list."""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional

from ..exceptions import MalformedHeadingError
from .markdown import HeadingRecord

logger = logging.getLogger(__name__)

ROOT_ID = 0


@dataclass(frozen=True)
class Node:
    """A heading wired into the outline tree."""
    id: int
    line: int
    title: str
    level: int
    parent_id: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.id == ROOT_ID


# Self-referential parent; consumers treat the root as having no parent.
ROOT = Node(id=ROOT_ID, line=-1, title="root", level=0, parent_id=ROOT_ID)


@dataclass(frozen=True)
class Outline:
    """The nodes of one tree build, in scan order, plus the root sentinel."""
    nodes: tuple[Node, ...]
    root: Node = ROOT
    name: str = ""

    def all_nodes(self) -> tuple[Node, ...]:
        """Root first, then every heading node in scan order."""
        return (self.root,) + self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


class TreeBuilder:
    """
    Single-pass, stack-based parent assignment.

    The stack holds the chain of currently open ancestors. Each node is
    parented to the top of the stack, then compared with its successor:
    when the outline rises the stack is popped once per level, otherwise
    the node is pushed once per level opened. The last node is compared
    with a virtual level-0 successor, so the stack unwinds fully.

    A jump of more than one level downward (1 -> 3) pushes the same node
    several times; this keeps stack depth equal to heading level and is
    preserved as-is.

    Builders are short-lived: create one per build. ``trace`` records the
    stack (as node ids) after each step.
    """

    def __init__(self) -> None:
        self.stack: list[Node] = [ROOT]
        self.trace: list[tuple[int, ...]] = []

    def build(self, records: Iterable[HeadingRecord]) -> list[Node]:
        records = list(records)
        for record in records:
            if record.level < 1:
                raise MalformedHeadingError(
                    f"Heading {record.title!r} on line {record.line} has level {record.level}; expected >= 1"
                )

        nodes = [
            Node(id=node_id, line=record.line, title=record.title, level=record.level)
            for node_id, record in enumerate(records, start=1)
        ]
        successors = nodes[1:] + [ROOT]

        built: list[Node] = []
        for node, successor in zip(nodes, successors):
            built.append(self._step(node, successor))

        logger.debug("Built tree with %d nodes", len(built))
        return built

    def _step(self, node: Node, successor: Node) -> Node:
        parent = self.stack[-1] if self.stack else ROOT
        node = replace(node, parent_id=parent.id)

        diff = node.level - successor.level
        if diff > 0:
            for _ in range(diff):
                if self.stack:
                    self.stack.pop()
        else:
            self.stack.extend([node] * -diff)

        self.trace.append(tuple(n.id for n in self.stack))
        return node


def build_tree(records: Iterable[HeadingRecord]) -> list[Node]:
    """
    Assign ids and parents to heading records.

    Ids restart at 1 on every call. Input order is preserved and no
    record is dropped.
    """
    return TreeBuilder().build(records)


def build_outline(records: Iterable[HeadingRecord], name: str = "") -> Outline:
    """Build an Outline (nodes plus root) from heading records."""
    return Outline(nodes=tuple(build_tree(records)), name=name)


@dataclass
class OutlineNode:
    """A node in the nested outline tree."""
    node: Node
    children: list["OutlineNode"] = field(default_factory=list)


def nest_outline(outline: Outline) -> list[OutlineNode]:
    """
    Build a nested tree structure from the flat outline.

    Returns the top-level nodes (children of the root).
    """
    wrapped: dict[int, OutlineNode] = {node.id: OutlineNode(node=node) for node in outline}

    roots: list[OutlineNode] = []
    for node in outline:
        if node.parent_id in wrapped and node.parent_id != node.id:
            wrapped[node.parent_id].children.append(wrapped[node.id])
        else:
            roots.append(wrapped[node.id])

    return roots


def flatten_outline(nodes: list[OutlineNode], depth: int = 0) -> list[tuple[Node, int]]:
    """
    Flatten a nested outline back to a list with indent depth.

    Returns list of (node, indent_depth) tuples.
    """
    result: list[tuple[Node, int]] = []
    for wrapped in nodes:
        result.append((wrapped.node, depth))
        result.extend(flatten_outline(wrapped.children, depth + 1))
    return result
