"""Tools to query individual outline entries."""

from typing import Optional

from ..parser.hierarchy import ROOT_ID
from ..tree.path import get_path, path_to_string
from ..tree.query import children_of, find_by_id, parent_of, query
from .get_outline import _resolve_outline, node_to_dict


async def get_children(source: str, node_id: int = ROOT_ID) -> dict:
    """
    Get the direct children of an entry.

    Args:
        source: Local path or http(s) URL of the document
        node_id: Entry id (0, the default, is the document root)

    Returns:
        Dict with the entry and its children
    """
    outline, err = await _resolve_outline(source)
    if err:
        return err

    node = find_by_id(outline, node_id)
    if node is None:
        return {"error": f"Entry not found: {node_id}"}

    return {
        "id": node.id,
        "title": node.title,
        "children": [node_to_dict(outline, child) for child in children_of(outline, node)],
    }


async def get_parent(source: str, node_id: int) -> dict:
    """
    Get the parent of an entry.

    Top-level entries have the root (id 0) as parent; the root itself
    has none and ``parent`` is null.
    """
    outline, err = await _resolve_outline(source)
    if err:
        return err

    node = find_by_id(outline, node_id)
    if node is None:
        return {"error": f"Entry not found: {node_id}"}

    parent = parent_of(outline, node)
    return {
        "id": node.id,
        "title": node.title,
        "parent": node_to_dict(outline, parent) if parent is not None else None,
    }


async def get_path_to(source: str, node_id: int) -> dict:
    """
    Get the ancestors of an entry, root side first.

    The root and the entry itself are excluded.
    """
    outline, err = await _resolve_outline(source)
    if err:
        return err

    node = find_by_id(outline, node_id)
    if node is None:
        return {"error": f"Entry not found: {node_id}"}

    ancestors = get_path(outline, node)
    return {
        "id": node.id,
        "title": node.title,
        "line": node.line,
        "breadcrumb": path_to_string(ancestors),
        "ancestors": [{"id": a.id, "title": a.title, "line": a.line} for a in ancestors],
    }


async def find_entries(
    source: str,
    node_id: Optional[int] = None,
    title: Optional[str] = None,
    level: Optional[int] = None,
    parent_id: Optional[int] = None,
) -> dict:
    """
    Find entries matching every supplied field (exact match).

    Omitted fields match everything. The root is never part of the result.
    """
    outline, err = await _resolve_outline(source)
    if err:
        return err

    matches = [
        node for node in query(outline, node_id=node_id, title=title, level=level, parent_id=parent_id)
        if not node.is_root
    ]
    return {
        "source": source,
        "result_count": len(matches),
        "results": [node_to_dict(outline, node) for node in matches],
    }
