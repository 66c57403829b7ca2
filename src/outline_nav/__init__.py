"""Heading outline trees and interactive drill-down navigation."""

from .parser.hierarchy import Node, Outline, ROOT, build_tree, build_outline
from .navigation.controller import navigate

__all__ = ["Node", "Outline", "ROOT", "build_tree", "build_outline", "navigate"]
