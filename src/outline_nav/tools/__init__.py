"""MCP tool implementations."""

from .get_outline import get_outline, get_outline_tree
from .entries import get_children, get_parent, get_path_to, find_entries

__all__ = ["get_outline", "get_outline_tree", "get_children", "get_parent", "get_path_to", "find_entries"]
