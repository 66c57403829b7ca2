"""Outline queries and ancestor paths."""

from .query import query, find_by_id, children_of, parent_of, is_branch
from .path import get_path, path_to_string

__all__ = [
    "query",
    "find_by_id",
    "children_of",
    "parent_of",
    "is_branch",
    "get_path",
    "path_to_string",
]
