"""
Graph — adjacency-list graph keyed by arbitrary hashable ids.

Keys (grid coordinates, names, ...) are mapped to dense internal ids in
insertion order.  The graph kind decides which algorithms are available:
tree DP on TREE graphs, strongly connected components on DIRECTED ones.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Sequence
from enum import Enum
from typing import Any

import networkx as nx

from cplib.structures.union_find import UnionFind

logger = logging.getLogger(__name__)


class GraphKind(Enum):
    UNDIRECTED = "undirected"
    DIRECTED = "directed"
    TREE = "tree"
    DAG = "dag"


class Node:
    """A graph node with an optional weight."""

    __slots__ = ("weight",)

    def __init__(self, weight: Any = None) -> None:
        self.weight = weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.weight == other.weight

    def __hash__(self) -> int:
        return hash(self.weight)

    def __repr__(self) -> str:
        return f"Node(weight={self.weight!r})"


class Graph:
    """
    Attributes
    ----------
    kind : GraphKind
    coord_map : key → internal id
    reverse_map : internal id → key
    nodes : internal id → Node
    adj : internal id → [(to_id, edge_weight), ...]

    ``add_edge`` adds a single arc; undirected callers add both directions.
    """

    def __init__(self, kind: GraphKind = GraphKind.DIRECTED) -> None:
        self.kind = kind
        self.coord_map: dict[Hashable, int] = {}
        self.reverse_map: list[Hashable] = []
        self.nodes: list[Node] = []
        self.adj: list[list[tuple[int, Any]]] = []

    # ── Construction ───────────────────────────────────────────────

    def _get_or_create_id(self, key: Hashable) -> int:
        if key in self.coord_map:
            return self.coord_map[key]
        node_id = len(self.reverse_map)
        self.coord_map[key] = node_id
        self.reverse_map.append(key)
        self.nodes.append(Node())
        self.adj.append([])
        return node_id

    def add_edge(self, src: Hashable, dst: Hashable, weight: Any = None) -> None:
        """Add the arc ``src -> dst``, creating either node if needed."""
        src_id = self._get_or_create_id(src)
        dst_id = self._get_or_create_id(dst)
        self.adj[src_id].append((dst_id, weight))

    def add_weight_to_node(self, key: Hashable, weight: Any) -> None:
        self.nodes[self._get_or_create_id(key)].weight = weight

    def id_of(self, key: Hashable) -> int | None:
        """Internal id of *key*, or None if the key is unknown."""
        return self.coord_map.get(key)

    def __len__(self) -> int:
        return len(self.nodes)

    def _require_kind(self, kind: GraphKind, operation: str) -> None:
        if self.kind is not kind:
            raise TypeError(
                f"{operation} needs a {kind.value} graph, "
                f"not a {self.kind.value} graph."
            )

    # ── Tree DP ────────────────────────────────────────────────────

    def dp(
        self,
        start: Hashable,
        merge: Callable[[Any, Any], Any],
        add_node: Callable[[Any | None, Node, Any], Any],
    ) -> Any | None:
        """
        Tree DP from *start*.

        Each node folds its children's results with ``merge``; children
        that produce nothing are skipped, so ``merge`` never sees None.
        A non-root node reached over a weighted edge then returns
        ``add_node(folded_or_None, node, edge_weight)``; otherwise the
        folded result is passed up unchanged.  Nodes already on the
        current path are not re-entered.

        Returns None if *start* is not in the graph.
        """
        self._require_kind(GraphKind.TREE, "Tree DP")

        start_id = self.coord_map.get(start)
        if start_id is None:
            return None

        on_path: set[int] = set()

        def visit(current: int, edge_weight: Any) -> Any | None:
            if current in on_path:
                return None
            on_path.add(current)

            result = None
            for nxt, weight in self.adj[current]:
                sub = visit(nxt, weight)
                if sub is None:
                    continue
                result = sub if result is None else merge(result, sub)

            on_path.discard(current)
            if edge_weight is not None:
                return add_node(result, self.nodes[current], edge_weight)
            return result

        return visit(start_id, None)

    # ── Strongly connected components ──────────────────────────────

    def to_dsu(self) -> UnionFind:
        """
        Union-Find over internal ids where each set is one strongly
        connected component (Kosaraju's algorithm).
        """
        self._require_kind(GraphKind.DIRECTED, "SCC decomposition")

        dsu = UnionFind(len(self.nodes))
        components = 0
        for component in nx.kosaraju_strongly_connected_components(
            self._build_graph()
        ):
            members = sorted(component)
            for other in members[1:]:
                dsu.unite(members[0], other)
            components += 1

        logger.debug(
            "Found %d strongly connected components over %d nodes",
            components,
            len(self.nodes),
        )
        return dsu

    # ── Helper ─────────────────────────────────────────────────────

    def _build_graph(self) -> nx.DiGraph:
        """Build a NetworkX DiGraph over the internal ids."""
        g = nx.DiGraph()
        g.add_nodes_from(range(len(self.nodes)))
        g.add_edges_from(
            (src, dst) for src, arcs in enumerate(self.adj) for dst, _w in arcs
        )
        return g


def gen_grid_graph(
    grid: Sequence[Sequence[Any]],
    is_connectable: Callable[[Any], bool],
    kind: GraphKind = GraphKind.UNDIRECTED,
) -> Graph:
    """
    Grid → graph: one node per connectable cell, keyed ``(i, j)`` and
    weighted by the cell value, with unit-weight arcs to every connectable
    4-neighbour.
    """
    graph = Graph(kind)
    h = len(grid)
    w = len(grid[0]) if h else 0

    for i in range(h):
        for j in range(w):
            if not is_connectable(grid[i][j]):
                continue
            graph.add_weight_to_node((i, j), grid[i][j])
            for ni, nj in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
                if 0 <= ni < h and 0 <= nj < w and is_connectable(grid[ni][nj]):
                    graph.add_edge((i, j), (ni, nj), 1)
    return graph
