"""
Balancer Tests
==============

After balancing, every internal vertex conserves flow and the corrections
land on the leftmost neighbour.
"""

from models.graph import DirectedWeightedGraph
from models.point import Point
from subdivision.balancer import balance, balance_down_up, balance_up_down
from subdivision.regularizer import regularize


def make_graph(points, weighted_edges):
    graph = DirectedWeightedGraph()
    for p in points:
        graph.add_vertex(p)
    for a, b, w in weighted_edges:
        graph.add_edge(a, b, w)
    return graph


def assert_balanced(graph):
    ordered = graph.sorted_vertices()
    for v in ordered[1:-1]:
        assert graph.in_weight(v) == graph.out_weight(v), v
    assert graph.out_weight(ordered[0]) == graph.in_weight(ordered[-1])


class TestBottomUp:

    def test_single_out_edge_absorbs_surplus(self):
        """In-weight 3, out-weight 1: the only out-edge grows to 3."""
        s, v, t = Point(0, 0), Point(0, 5), Point(0, 10)
        graph = make_graph([s, v, t], [(s, v, 3), (v, t, 1)])

        balance(graph, graph.sorted_vertices())

        assert graph.out_weight(v) == 3
        assert graph.edge_weight(v, t) == 3
        assert_balanced(graph)

    def test_surplus_goes_to_leftmost_out_edge(self):
        s, v, w, t = Point(0, 0), Point(0, 5), Point(-3, 8), Point(0, 10)
        graph = make_graph([s, v, w, t], [(s, v, 3), (v, t, 1), (v, w, 1), (w, t, 1)])

        balance_down_up(graph, graph.sorted_vertices())

        assert graph.edge_weight(v, w) == 2
        assert graph.edge_weight(v, t) == 1
        assert graph.edge_weight(w, t) == 2
        assert_balanced(graph)

    def test_balanced_vertices_untouched(self, triangle):
        a, b, c = triangle[0]
        graph = make_graph([a, b, c], [(a, b, 1), (b, c, 1), (a, c, 1)])

        balance(graph, graph.sorted_vertices())

        assert sorted(e.weight for e in graph.edges()) == [1, 1, 1]


class TestTopDown:

    def test_deficit_goes_to_leftmost_in_edge(self):
        s, l, v, t = Point(0, 0), Point(-4, 2), Point(0, 5), Point(0, 10)
        graph = make_graph([s, l, v, t], [(s, v, 1), (s, l, 1), (l, v, 1), (v, t, 3)])

        balance_up_down(graph, graph.sorted_vertices())

        assert graph.edge_weight(l, v) == 2
        assert graph.edge_weight(s, v) == 1
        assert graph.edge_weight(s, l) == 2
        assert_balanced(graph)
        assert graph.out_weight(s) == 3


class TestFlowConservation:

    def test_subdivision_sample(self, subdivision, subdivision_graph):
        s, _, _ = subdivision
        graph = subdivision_graph
        ordered = graph.sorted_vertices()

        regularize(graph, ordered)
        balance(graph, ordered)

        assert_balanced(graph)
        assert graph.edge_weight(s[3], s[5]) == 2
        assert graph.edge_weight(s[5], s[6]) == 3
        assert graph.edge_weight(s[0], s[1]) == 2
        assert graph.edge_weight(s[0], s[2]) == 2
        assert graph.out_weight(s[0]) == 4

    def test_extremes_are_not_adjusted(self):
        """Only internal vertices are balanced; min/max keep their edges."""
        s, t = Point(0, 0), Point(1, 1)
        graph = make_graph([s, t], [(s, t, 2)])

        balance(graph, graph.sorted_vertices())

        assert graph.edge_weight(s, t) == 2
