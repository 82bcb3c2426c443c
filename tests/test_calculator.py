from __future__ import annotations

import logging

import pytest

from station_centrality.centrality import CentralityCalculator, load_config
from station_centrality.graph import StationGraph


def test_defaults_without_config_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        calculator = CentralityCalculator(config_path=str(tmp_path / "missing.yaml"))
    assert calculator.eigenvector.max_iter == 100
    assert calculator.eigenvector.tol == 1.0e-6
    assert calculator.betweenness.predecessors_only is False
    assert caplog.records


def test_config_file_is_applied(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "centrality:\n"
        "  eigenvector:\n"
        "    max_iter: 50\n"
        "    tol: 0.005\n"
        "  betweenness:\n"
        "    predecessors_only: true\n",
        encoding="utf-8",
    )
    calculator = CentralityCalculator(config_path=str(path))
    assert calculator.eigenvector.max_iter == 50
    assert calculator.eigenvector.tol == 0.005
    assert calculator.betweenness.predecessors_only is True


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == {}


def test_calculate_all(scenario_graph):
    results = CentralityCalculator(config={}).calculate_all(scenario_graph)
    assert set(results) == {"degree", "eigenvector", "betweenness"}
    for scores in results.values():
        assert set(scores) == set(scenario_graph.nodes())
    assert max(results["degree"].values()) == 0.8
    assert max(results["eigenvector"].values()) == 1.0
    assert max(results["betweenness"].values()) == pytest.approx(0.5319148936170213)


def test_single_metric_helpers(scenario_graph):
    calculator = CentralityCalculator(config={})
    assert calculator.calculate_degree(scenario_graph) == calculator.degree.calculate(scenario_graph)
    assert calculator.calculate_eigenvector(scenario_graph) == calculator.eigenvector.calculate(scenario_graph)
    assert calculator.calculate_betweenness(scenario_graph) == calculator.betweenness.calculate(scenario_graph)


def test_failed_metric_does_not_stop_the_others(caplog):
    graph = StationGraph()
    graph.add_node("only")
    with caplog.at_level(logging.ERROR):
        results = CentralityCalculator(config={}).calculate_all(graph)
    assert results["degree"] == {}
    assert results["eigenvector"] == {0: 0.0}
    assert results["betweenness"] == {0: 0.0}
    assert any(r.levelno == logging.ERROR for r in caplog.records)
