"""Ancestor paths and breadcrumbs."""

from typing import Iterable

from ..parser.hierarchy import Node, Outline
from .query import parent_of

SEPARATOR = "/"


def get_path(outline: Outline, node: Node) -> list[Node]:
    """
    Proper ancestors of ``node``, root side first.

    Neither the root nor the node itself is included, so top-level
    headings (and the root) have an empty path.
    """
    ancestors: list[Node] = []
    current = parent_of(outline, node)
    while current is not None:
        ancestors.append(current)
        current = parent_of(outline, current)

    ancestors.reverse()
    # Drop the root
    return ancestors[1:]


def path_to_string(nodes: Iterable[Node]) -> str:
    """Join node titles into a breadcrumb."""
    return SEPARATOR.join(node.title for node in nodes)
