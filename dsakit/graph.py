"""An undirected graph with traversals and a minimum spanning tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Hashable, Iterator

Edge = tuple[Hashable, Any, Hashable]


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree as (source, weight, target), in the order chosen."""

    edges: tuple[Edge, ...] = ()

    @property
    def cost(self) -> Any:
        """Return the total weight of the tree's edges."""
        return sum(weight for _, weight, _ in self.edges)

    def __str__(self) -> str:
        lines = [f"{source}---{weight}---{target}" for source, weight, target in self.edges]
        lines.append(f"Cost of MST = {self.cost}")
        return "\n".join(lines)


class Graph:
    """An undirected graph whose vertices keep the order they were added in.

    Each vertex lists its edges newest first; traversals follow that order.
    """

    def __init__(self) -> None:
        self._arcs: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_vertex(self, name: Hashable) -> None:
        """Add a vertex; ValueError if the name is already taken."""
        if name in self._arcs:
            raise ValueError(f"vertex {name!r} already exists")
        self._arcs[name] = []

    def add_edge(self, a: Hashable, b: Hashable, weight: Any = 1) -> None:
        """Join a and b with an edge of the given weight; KeyError if either is unknown."""
        for name in (a, b):
            if name not in self._arcs:
                raise KeyError(name)
        self._arcs[a].insert(0, (b, weight))
        self._arcs[b].insert(0, (a, weight))

    def adjacency(self) -> dict[Hashable, list[Hashable]]:
        """Return each vertex with its neighbours, newest edge first."""
        return {name: [other for other, _ in arcs] for name, arcs in self._arcs.items()}

    def _neighbours(self, name: Hashable) -> Iterator[Hashable]:
        return (other for other, _ in self._arcs[name])

    def breadth_first(self) -> list[Hashable]:
        """Return the vertices in breadth-first order.

        Each unvisited vertex, taken in insertion order, starts a new search.
        """
        order: list[Hashable] = []
        seen: set[Hashable] = set()
        for start in self._arcs:
            if start in seen:
                continue
            seen.add(start)
            queue = deque([start])
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for other in self._neighbours(vertex):
                    if other not in seen:
                        seen.add(other)
                        queue.append(other)
        return order

    def depth_first(self) -> list[Hashable]:
        """Return the vertices in depth-first order.

        Each unvisited vertex, taken in insertion order, starts a new search.
        """
        order: list[Hashable] = []
        seen: set[Hashable] = set()
        for start in self._arcs:
            if start in seen:
                continue
            seen.add(start)
            order.append(start)
            stack = [start]
            while stack:
                for other in self._neighbours(stack[-1]):
                    if other not in seen:
                        seen.add(other)
                        order.append(other)
                        stack.append(other)
                        break
                else:
                    stack.pop()
        return order

    def minimum_spanning_tree(self) -> SpanningTree:
        """Grow a minimum spanning tree from the first vertex (Prim's method).

        Only the part of the graph reachable from the first vertex is spanned.
        Among edges of equal weight the first one met wins.
        """
        if not self._arcs:
            return SpanningTree()
        in_tree = {next(iter(self._arcs))}
        edges: list[Edge] = []
        while True:
            candidates = (
                (source, weight, target)
                for source, arcs in self._arcs.items()
                if source in in_tree
                for target, weight in arcs
                if target not in in_tree
            )
            best = min(candidates, key=lambda edge: edge[1], default=None)
            if best is None:
                break
            in_tree.add(best[2])
            edges.append(best)
        return SpanningTree(tuple(edges))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.adjacency()!r})"