#!/usr/bin/env python3

import unittest

import networkx as nx

from stackset import StackSet, Graph, GraphError, find_back_edge, find_cycle, has_cycle, random_graph
from stackset.graph import to_networkx, from_networkx


def is_cycle_of(g: Graph, cycle):
    for a, b in zip(cycle, cycle[1:] + cycle[:1]):
        if b not in g.edges[a]:
            return False
    return True


class TestGraph(unittest.TestCase):

    def test_from_edges(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2)])
        self.assertEqual(g.edges, [[1], [2], []])
        self.assertEqual(g.edge_list(), [(0, 1), (1, 2)])

    def test_bad_edge(self):
        with self.assertRaises(GraphError):
            Graph.from_edges(2, [(0, 2)])
        with self.assertRaises(GraphError):
            Graph(2, [[1]])
        with self.assertRaises(GraphError):
            Graph(-1, [])

    def test_networkx_roundtrip(self):
        g = Graph.from_edges(4, [(0, 1), (1, 2), (3, 0)])
        dg = to_networkx(g)
        self.assertEqual(dg.number_of_nodes(), 4)
        self.assertEqual(sorted(dg.edges), [(0, 1), (1, 2), (3, 0)])

    def test_from_networkx_relabels(self):
        dg = nx.DiGraph([('a', 'b'), ('b', 'c'), ('c', 'a')])
        g = from_networkx(dg)
        self.assertEqual(g.vertices, 3)
        self.assertEqual(g.edge_list(), [(0, 1), (1, 2), (2, 0)])


class TestCycles(unittest.TestCase):

    def test_triangle(self):
        g = Graph(3, [[1], [2], [0]])
        self.assertTrue(has_cycle(g))

    def test_no_vertices(self):
        self.assertFalse(has_cycle(Graph(0, [])))
        self.assertIsNone(find_cycle(Graph(0, [])))

    def test_isolated_vertex(self):
        self.assertFalse(has_cycle(Graph.empty(1)))

    def test_self_loop(self):
        g = Graph(2, [[1], [1]])
        self.assertEqual(find_back_edge(g), (1, 1))
        self.assertEqual(find_cycle(g), [1])

    def test_diamond_is_acyclic(self):
        # 3 is reached twice but never while on the path
        g = Graph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])
        self.assertFalse(has_cycle(g))

    def test_cycle_not_reachable_from_zero(self):
        g = Graph.from_edges(4, [(0, 1), (2, 3), (3, 2)])
        self.assertTrue(has_cycle(g))
        self.assertEqual(sorted(find_cycle(g)), [2, 3])

    def test_find_cycle(self):
        g = Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 1), (3, 4)])
        cycle = find_cycle(g)
        self.assertEqual(cycle, [1, 2, 3])
        self.assertTrue(is_cycle_of(g, cycle))

    def test_path_left_by_back_edge(self):
        g = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 1)])
        path: StackSet[int] = StackSet()
        self.assertEqual(find_back_edge(g, path), (3, 1))
        self.assertEqual([path.pop() for _ in range(len(path))], [3, 2, 1, 0])

    def test_path_empty_when_acyclic(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2)])
        path: StackSet[int] = StackSet()
        self.assertIsNone(find_back_edge(g, path))
        self.assertTrue(path.is_empty())

    def test_path_must_start_empty(self):
        g = Graph.from_edges(2, [(0, 1)])
        path: StackSet[int] = StackSet()
        path.push(1)
        with self.assertRaises(GraphError):
            find_back_edge(g, path)
        self.assertEqual(len(path), 1)

    def test_long_chain(self):
        n = 5000
        g = Graph.from_edges(n, [(i, i + 1) for i in range(n - 1)])
        self.assertFalse(has_cycle(g))
        g.add_edge(n - 1, 0)
        self.assertTrue(has_cycle(g))
        self.assertEqual(len(find_cycle(g)), n)


class TestRandomGraphs(unittest.TestCase):

    def test_seeded(self):
        self.assertEqual(random_graph(20, .2, seed=3).edges, random_graph(20, .2, seed=3).edges)

    def test_acyclic(self):
        for seed in range(20):
            g = random_graph(30, .3, seed=seed, acyclic=True)
            for u, v in g.edge_list():
                self.assertLess(u, v)
            self.assertFalse(has_cycle(g))

    def test_against_networkx(self):
        for seed in range(60):
            g = random_graph(25, .06, seed=seed)
            expected = not nx.is_directed_acyclic_graph(to_networkx(g))
            self.assertEqual(has_cycle(g), expected, g)
            cycle = find_cycle(g)
            if expected:
                self.assertTrue(is_cycle_of(g, cycle), cycle)
            else:
                self.assertIsNone(cycle)


if __name__ == '__main__':
    unittest.main()
