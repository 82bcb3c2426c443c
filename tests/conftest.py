"""Shared fixtures for the centrality test suite."""
from __future__ import annotations

import pytest

from station_centrality.graph import StationGraph


SCENARIO_EDGES = [
    ("A", "B", 5.0),
    ("B", "C", 1.0),
    ("C", "A", 6.0),
    ("D", "A", 8.0),
    ("E", "C", 10.0),
    ("F", "A", 7.0),
]


@pytest.fixture
def scenario_edges() -> list:
    return list(SCENARIO_EDGES)


@pytest.fixture
def scenario_graph() -> StationGraph:
    """Six stations: a triangle A-B-C with leaves D, F on A and E on C."""
    return StationGraph.from_edges(SCENARIO_EDGES)


@pytest.fixture
def path_graph() -> StationGraph:
    return StationGraph.from_edges([("a", "b"), ("b", "c")])


@pytest.fixture
def scenario_lines() -> list[str]:
    return [f"{s},{t},x,{w}" for s, t, w in SCENARIO_EDGES]


@pytest.fixture
def by_label():
    """Re-key a score mapping by node label."""
    def _by_label(graph: StationGraph, scores: dict) -> dict:
        return {graph.label(node): score for node, score in scores.items()}
    return _by_label
