from __future__ import annotations

import logging

import pytest

from station_centrality.centrality import EigenvectorCentrality
from station_centrality.graph import StationGraph


def test_scenario_maximum_is_exactly_one(scenario_graph, by_label):
    scores = by_label(scenario_graph, EigenvectorCentrality(max_iter=50, tol=0.005).calculate(scenario_graph))
    assert max(scores.values()) == 1.0
    assert scores["A"] == 1.0
    assert all(0.0 <= s <= 1.0 for s in scores.values())


def test_converges_to_degree_share_on_non_bipartite_graph(scenario_graph, by_label):
    scores = by_label(scenario_graph, EigenvectorCentrality(max_iter=1000, tol=1e-12).calculate(scenario_graph))
    # at the fixed point scores are proportional to degree
    assert scores["C"] == pytest.approx(0.75, abs=1e-9)
    assert scores["B"] == pytest.approx(0.5, abs=1e-9)
    assert scores["D"] == pytest.approx(0.25, abs=1e-9)


def test_sweeps_are_synchronous(path_graph):
    # a-b-c is bipartite, so the sweeps oscillate
    one = EigenvectorCentrality(max_iter=1, tol=1e-9).calculate(path_graph)
    assert one == {0: 0.25, 1: 1.0, 2: 0.25}

    two = EigenvectorCentrality(max_iter=2, tol=1e-9).calculate(path_graph)
    assert two == {0: 1.0, 1: 1.0, 2: 1.0}


def test_exhausting_iterations_is_logged(path_graph, caplog):
    with caplog.at_level(logging.WARNING):
        EigenvectorCentrality(max_iter=3, tol=1e-9).calculate(path_graph)
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_early_stop_when_change_below_tolerance(caplog):
    graph = StationGraph.from_edges([("a", "b")])
    with caplog.at_level(logging.INFO):
        scores = EigenvectorCentrality(max_iter=50, tol=0.005).calculate(graph)
    assert scores == {0: 1.0, 1: 1.0}
    assert any("1回" in r.getMessage() for r in caplog.records)


def test_isolated_node_scores_zero():
    graph = StationGraph()
    for label in "abc":
        graph.add_node(label)
    graph.add_edge(0, 1)
    scores = EigenvectorCentrality(max_iter=10, tol=1e-6).calculate(graph)
    assert scores == {0: 1.0, 1: 1.0, 2: 0.0}


def test_graph_without_edges_yields_zeros(caplog):
    graph = StationGraph()
    graph.add_node("a")
    graph.add_node("b")
    with caplog.at_level(logging.WARNING):
        scores = EigenvectorCentrality().calculate(graph)
    assert scores == {0: 0.0, 1: 0.0}
    assert caplog.records


def test_empty_graph():
    assert EigenvectorCentrality().calculate(StationGraph()) == {}


def test_repeated_runs_are_identical(scenario_graph):
    calculator = EigenvectorCentrality(max_iter=50, tol=0.005)
    assert calculator.calculate(scenario_graph) == calculator.calculate(scenario_graph)


@pytest.mark.parametrize("kwargs", [{"max_iter": 0}, {"tol": 0}, {"tol": -1.0}])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        EigenvectorCentrality(**kwargs)
