"""An explicit, incrementally expanded graph of article pages."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

from wikinet.config import settings
from wikinet.errors import ParseError
from wikinet.page import Page
from wikinet.url import WikipediaUrl

logger = logging.getLogger(__name__)


@dataclass
class Edge:
    source: int
    target: int


class WikipediaGraph:
    """Directed graph whose nodes are :class:`Page` objects.

    Nodes are addressed by integer index and deduplicated by article path, so
    a link back to an already-known article becomes an edge to the existing
    node rather than a new node.
    """

    def __init__(self) -> None:
        self.pages: List[Page] = []
        self.edges: List[Edge] = []
        self._index: Dict[str, int] = {}
        self._adjacency: Dict[int, List[int]] = {}

    def __repr__(self) -> str:
        return f"WikipediaGraph(pages={len(self.pages)}, edges={len(self.edges)})"

    def __len__(self) -> int:
        return len(self.pages)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, WikipediaUrl) and url.canonical in self._index

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------
    def add_page(self, page: Page) -> int:
        """Add *page* and return its index.

        If a page with the same path is already present, its index is
        returned and *page* is discarded.
        """
        existing = self._index.get(page.url.canonical)
        if existing is not None:
            return existing
        index = len(self.pages)
        self.pages.append(page)
        self._index[page.url.canonical] = index
        self._adjacency[index] = []
        return index

    def index_of(self, url: WikipediaUrl) -> Optional[int]:
        return self._index.get(url.canonical)

    def page(self, index: int) -> Page:
        if not 0 <= index < len(self.pages):
            raise IndexError(f"No page at index {index}")
        return self.pages[index]

    def neighbors(self, index: int) -> List[int]:
        """Indices of the pages *index* links to, in discovery order."""
        self.page(index)
        return list(self._adjacency[index])

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------
    def add_edge(self, source: int, target: int) -> bool:
        """Add a directed edge. Returns ``False`` if it already existed."""
        self.page(source)
        self.page(target)
        if target in self._adjacency[source]:
            return False
        self._adjacency[source].append(target)
        self.edges.append(Edge(source=source, target=target))
        return True

    def expand_page(self, index: int) -> List[int]:
        """Fetch the connections of page *index* and link them in.

        The title is loaded on a best-effort basis (a page without a
        ``<title>`` is still expanded). The body is unloaded afterwards.

        Returns:
            Indices of the connected pages, in document order.

        Raises:
            IndexError: If *index* is not a node of this graph.
            NetworkError: If the page could not be fetched.
        """
        page = self.page(index)
        try:
            page.load_title()
        except ParseError as exc:
            logger.debug("Expanding untitled page: %s", exc)

        targets: List[int] = []
        for connection in page.get_connections():
            target = self.add_page(connection)
            self.add_edge(index, target)
            targets.append(target)
        page.unload_body()

        logger.debug("Expanded %s: %d connections", page.url.path, len(targets))
        return targets

    def to_edge_list(self) -> List[Tuple[str, str]]:
        """Edges as ``(source_path, target_path)`` pairs."""
        return [
            (self.pages[e.source].url.path, self.pages[e.target].url.path)
            for e in self.edges
        ]


def crawl(
    root: Page,
    depth: int = 1,
    max_pages: Optional[int] = None,
) -> WikipediaGraph:
    """Breadth-first expansion from *root*.

    Args:
        root: Starting page; becomes node ``0``.
        depth: Number of hops to follow. ``0`` adds only the root.
        max_pages: Maximum number of pages to expand (fetch). Defaults to
            ``settings.crawl_max_pages``.

    Returns:
        The populated :class:`WikipediaGraph`.
    """
    if max_pages is None:
        max_pages = settings.crawl_max_pages

    graph = WikipediaGraph()
    start = graph.add_page(root)
    queue = deque([(start, 0)])
    visited: Set[int] = {start}
    expanded = 0

    while queue and expanded < max_pages:
        index, level = queue.popleft()
        if level >= depth:
            continue

        expanded += 1
        for target in graph.expand_page(index):
            if target not in visited:
                visited.add(target)
                queue.append((target, level + 1))

    logger.debug(
        "Crawl finished: %d pages, %d edges, %d expanded",
        len(graph), len(graph.edges), expanded,
    )
    return graph
