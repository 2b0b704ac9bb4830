from typing import List
import logging

import networkx as nx

logger = logging.getLogger(__name__)

class JoinGraph:
    """
    Undirected graph over relation positions; an edge means the two
    relations share at least one column name.

    Vertices are dense integers starting at 0. Duplicate edges are kept, so
    a vertex may list the same neighbour more than once.
    """
    __slots__ = ("_graph",)

    def __init__(self) -> None:
        self._graph = nx.MultiGraph()

    def edge(self, a: int, b: int) -> None:
        """Add an undirected edge, growing the vertex range to max(a, b)."""
        top = max(a, b)
        if top >= self._graph.number_of_nodes():
            self._graph.add_nodes_from(range(self._graph.number_of_nodes(), top + 1))
        self._graph.add_edge(a, b)

    def neighbours(self, vertex: int) -> List[int]:
        """Neighbours of `vertex`, one entry per edge. Empty if out of range."""
        if vertex not in self._graph:
            return []
        return [nbr for _, nbr in self._graph.edges(vertex)]

    def num_vertices(self) -> int:
        return self._graph.number_of_nodes()

    def num_edges(self) -> int:
        return self._graph.number_of_edges()

    def components(self) -> List[List[int]]:
        """Connected components as sorted index lists, ordered by smallest member."""
        comps = [sorted(c) for c in nx.connected_components(self._graph)]
        comps.sort(key=lambda c: c[0])
        return comps

    def __repr__(self) -> str:
        return f"JoinGraph(vertices={self.num_vertices()}, edges={self.num_edges()})"
