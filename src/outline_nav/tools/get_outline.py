"""Tools to get the outline of a document."""

from typing import Optional

from ..exceptions import OutlineNavError
from ..loader import load_outline
from ..parser.hierarchy import Node, Outline, OutlineNode, nest_outline
from ..parser.markdown import slugify
from ..tree.path import get_path, path_to_string


async def _resolve_outline(source: str) -> tuple[Optional[Outline], Optional[dict]]:
    """Load the outline for a source and return (outline, error_dict)."""
    try:
        return await load_outline(source), None
    except OutlineNavError as e:
        return None, {"error": str(e)}


def node_to_dict(outline: Outline, node: Node) -> dict:
    """Flat entry for one node, with its breadcrumb."""
    return {
        "id": node.id,
        "title": node.title,
        "level": node.level,
        "line": node.line,
        "parent_id": node.parent_id,
        "anchor": slugify(node.title),
        "path": path_to_string(get_path(outline, node)),
    }


async def get_outline(
    source: str,
    max_level: Optional[int] = None,
) -> dict:
    """
    Get the flat heading outline of a document.

    Args:
        source: Local path or http(s) URL of the document
        max_level: Only include headings with level <= this value

    Returns:
        Dict with every heading in document order, parent ids and breadcrumbs
    """
    outline, err = await _resolve_outline(source)
    if err:
        return err

    entries = [
        node_to_dict(outline, node)
        for node in outline
        if max_level is None or node.level <= max_level
    ]

    return {
        "source": source,
        "name": outline.name,
        "entry_count": len(entries),
        "entries": entries,
    }


async def get_outline_tree(source: str) -> dict:
    """
    Get the outline as a nested tree structure.

    Args:
        source: Local path or http(s) URL of the document

    Returns:
        Dict with nested tree structure
    """
    outline, err = await _resolve_outline(source)
    if err:
        return err

    def to_dict(wrapped: OutlineNode) -> dict:
        return {
            "id": wrapped.node.id,
            "title": wrapped.node.title,
            "level": wrapped.node.level,
            "line": wrapped.node.line,
            "children": [to_dict(child) for child in wrapped.children],
        }

    return {
        "source": source,
        "name": outline.name,
        "tree": [to_dict(wrapped) for wrapped in nest_outline(outline)],
    }
