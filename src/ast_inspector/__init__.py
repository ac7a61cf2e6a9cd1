"""Inspect tree-sitter syntax trees, query captures, and node relationships."""

__version__ = "0.1.0"
