"""Heading scanners and tree building."""

from .markdown import HeadingRecord, scan_markdown_headings, preprocess_mdx
from .rst import scan_rst_headings
from .hierarchy import Node, Outline, ROOT, build_tree, build_outline

__all__ = [
    "HeadingRecord",
    "scan_markdown_headings",
    "preprocess_mdx",
    "scan_rst_headings",
    "Node",
    "Outline",
    "ROOT",
    "build_tree",
    "build_outline",
]
