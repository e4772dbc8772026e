"""Utilities for rendering article graphs in the CLI."""

from __future__ import annotations

from typing import List, Set

from wikinet.graph import WikipediaGraph
from wikinet.page import Page


def _label(page: Page) -> str:
    """Cached title if we have one, otherwise the name derived from the path."""
    return page.title or page.url.title


def render_tree(graph: WikipediaGraph, root: int = 0) -> str:
    """Render *graph* as an ASCII tree rooted at *root*.

    Each page is expanded under its first parent only; later references are
    shown as ``↺`` leaves so cycles terminate.
    """
    if len(graph) == 0:
        return "(empty graph)"

    lines: List[str] = []
    visited: Set[int] = set()

    def _render_node(index: int, prefix: str, is_last: bool, is_root: bool) -> None:
        page = graph.page(index)
        if is_root:
            lines.append(_label(page))
            child_prefix = ""
        else:
            connector = "└── " if is_last else "├── "
            if index in visited:
                lines.append(f"{prefix}{connector}↺ {_label(page)}")
                return
            lines.append(f"{prefix}{connector}{_label(page)}")
            child_prefix = prefix + ("    " if is_last else "│   ")
        visited.add(index)

        children = graph.neighbors(index)
        count = len(children)
        for i, child in enumerate(children):
            _render_node(child, child_prefix, i == count - 1, False)

    _render_node(root, "", True, True)
    return "\n".join(lines)


def render_list(graph: WikipediaGraph) -> str:
    """One line per page: index, path and label."""
    return "\n".join(
        f"  {i:>4}  {page.url.path}  {_label(page)!r}" for i, page in enumerate(graph)
    )
