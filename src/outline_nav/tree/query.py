"""Predicate-based lookups over a built outline."""

from typing import Callable, Optional

from ..parser.hierarchy import Node, Outline

Predicate = Callable[[Node], bool]


def match_all(node: Node) -> bool:
    """Identity predicate: matches every node."""
    return True


def by_id(node_id: int) -> Predicate:
    return lambda node: node.id == node_id


def by_title(title: str) -> Predicate:
    return lambda node: node.title == title


def by_level(level: int) -> Predicate:
    return lambda node: node.level == level


def by_parent_id(parent_id: int) -> Predicate:
    return lambda node: node.parent_id == parent_id


def all_of(*predicates: Predicate) -> Predicate:
    """AND-combine predicates. With no arguments this is ``match_all``."""
    if not predicates:
        return match_all
    return lambda node: all(predicate(node) for predicate in predicates)


def query(
    outline: Outline,
    node_id: Optional[int] = None,
    title: Optional[str] = None,
    level: Optional[int] = None,
    parent_id: Optional[int] = None,
) -> list[Node]:
    """
    Return the nodes (root included) matching every supplied field.

    Omitted fields match everything. Order follows the outline: root
    first, then scan order.
    """
    predicates: list[Predicate] = []
    if node_id is not None:
        predicates.append(by_id(node_id))
    if title is not None:
        predicates.append(by_title(title))
    if level is not None:
        predicates.append(by_level(level))
    if parent_id is not None:
        predicates.append(by_parent_id(parent_id))

    predicate = all_of(*predicates)
    return [node for node in outline.all_nodes() if predicate(node)]


def find_by_id(outline: Outline, node_id: int) -> Optional[Node]:
    matches = query(outline, node_id=node_id)
    return matches[0] if matches else None


def children_of(outline: Outline, node: Optional[Node] = None) -> list[Node]:
    """Direct children of ``node``; the root's children when ``node`` is None."""
    parent = node if node is not None else outline.root
    # The root points at itself but is never its own child.
    return [child for child in query(outline, parent_id=parent.id) if child.id != outline.root.id]


def parent_of(outline: Outline, node: Node) -> Optional[Node]:
    """Parent of ``node``; None for the root or an unparented node."""
    if node.id == outline.root.id or node.parent_id is None:
        return None
    return find_by_id(outline, node.parent_id)


def is_branch(outline: Outline, node: Node) -> bool:
    return bool(children_of(outline, node))
