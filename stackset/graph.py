#!/usr/bin/env python3
"""
Cycle detection over directed graphs, using a StackSet for the recursion path.

The traversal is an iterative depth first search.  Each vertex is pushed on
the path when first reached and popped once all of its neighbours have been
explored, so an edge into a vertex that is on the path closes a cycle.
"""
import logging
from typing import List, Optional, Tuple, Iterable, Dict, Hashable

import networkx as nx
import numpy as np

from .core import StackSet

log = logging.getLogger('stackset.graph')

Edge = Tuple[int, int]


class GraphError(ValueError):
    pass


class Graph:
    __slots__ = 'vertices', 'edges'

    vertices: int
    edges: List[List[int]]

    def __init__(self, vertices: int, edges: List[List[int]]):
        if vertices < 0:
            raise GraphError(f'negative vertex count {vertices}')
        if len(edges) != vertices:
            raise GraphError(f'{len(edges)} adjacency lists for {vertices} vertices')
        for u, nbrs in enumerate(edges):
            for v in nbrs:
                self._check(u, v, vertices)
        self.vertices = vertices
        self.edges = edges

    @staticmethod
    def _check(u: int, v: int, vertices: int) -> None:
        if not (0 <= u < vertices and 0 <= v < vertices):
            raise GraphError(f'edge {u} -> {v} outside of {vertices} vertices')

    @staticmethod
    def empty(vertices: int) -> 'Graph':
        return Graph(vertices, [[] for _ in range(vertices)])

    @staticmethod
    def from_edges(vertices: int, pairs: Iterable[Edge]) -> 'Graph':
        g = Graph.empty(vertices)
        for u, v in pairs:
            g.add_edge(u, v)
        return g

    def add_edge(self, u: int, v: int) -> None:
        self._check(u, v, self.vertices)
        self.edges[u].append(v)

    def edge_list(self) -> List[Edge]:
        return [(u, v) for u, nbrs in enumerate(self.edges) for v in nbrs]

    def __repr__(self):
        return f'Graph(vertices={self.vertices}, edges={self.edges!r})'


class DFSNode:
    """a vertex on the recursion path and how far through its neighbours we are"""
    __slots__ = 'vertex', 'nbrs', 'i'

    def __init__(self, vertex: int, nbrs: List[int]):
        self.vertex = vertex
        self.nbrs = nbrs
        self.i = 0

    def next(self) -> Optional[int]:
        if self.i >= len(self.nbrs):
            return None
        v = self.nbrs[self.i]
        self.i += 1
        return v


def find_back_edge(g: Graph, path: Optional[StackSet[int]] = None) -> Optional[Edge]:
    """
    The first back edge found by depth first search from each unseen vertex
    in turn, or None if the graph is acyclic.

    path, if given, must be empty.  When a back edge u -> v is returned, path
    holds the recursion path with u on top and v somewhere below it.
    """
    if path is None:
        path = StackSet()
    elif not path.is_empty():
        raise GraphError(f'recursion path must start empty, has {len(path)} vertices')
    seen = [False] * g.vertices

    for root in range(g.vertices):
        if seen[root]:
            continue
        seen[root] = True
        path.push(root)
        stack = [DFSNode(root, g.edges[root])]
        while len(stack) > 0:
            n = stack[-1]
            v = n.next()
            if v is None:
                stack.pop()
                path.pop()
            elif v in path:
                log.debug('back edge %d -> %d', n.vertex, v)
                return n.vertex, v
            elif not seen[v]:
                seen[v] = True
                path.push(v)
                stack.append(DFSNode(v, g.edges[v]))
    return None


def has_cycle(g: Graph) -> bool:
    return find_back_edge(g) is not None


def find_cycle(g: Graph) -> Optional[List[int]]:
    """
    The vertices of one cycle in edge order, starting from the target of the
    back edge that closes it.
    """
    path: StackSet[int] = StackSet()
    e = find_back_edge(g, path)
    if e is None:
        return None
    return pop_cycle(path, e)


def pop_cycle(path: StackSet[int], back_edge: Edge) -> List[int]:
    """
    pop the recursion path left by find_back_edge down to the back edge's
    target, returning the popped vertices in edge order
    """
    _, v = back_edge
    cycle = [path.pop()]
    while cycle[-1] != v:
        cycle.append(path.pop())
    cycle.reverse()
    return cycle


def random_graph(vertices: int, p: float, seed: Optional[int] = None, acyclic: bool = False) -> Graph:
    """
    each possible edge u -> v is present with probability p, self loops
    included unless acyclic, where only u < v is drawn
    """
    generator = np.random.Generator(np.random.MT19937(np.random.SeedSequence(seed)))
    draws = generator.random((vertices, vertices)) < p
    if acyclic:
        draws = np.triu(draws, k=1)
    edges = [[int(v) for v in np.flatnonzero(row)] for row in draws]
    return Graph(vertices, edges)


def to_networkx(g: Graph) -> nx.DiGraph:
    dg = nx.DiGraph()
    dg.add_nodes_from(range(g.vertices))
    dg.add_edges_from(g.edge_list())
    return dg


def from_networkx(dg: nx.DiGraph) -> Graph:
    """nodes are numbered in the digraph's iteration order"""
    n2i: Dict[Hashable, int] = dict((n, i) for i, n in enumerate(dg.nodes))
    return Graph.from_edges(len(n2i), ((n2i[a], n2i[b]) for a, b in dg.edges))
