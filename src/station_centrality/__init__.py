"""
ステーション間移動データの中心性分析パッケージ
"""

from .analysis import ResultRanker
from .centrality import (
    BetweennessCentrality,
    CentralityCalculator,
    DegenerateGraphError,
    DegreeCentrality,
    EigenvectorCentrality,
)
from .graph import EdgeRecord, GraphBuilder, StationGraph

__version__ = '0.1.0'

__all__ = [
    'BetweennessCentrality',
    'CentralityCalculator',
    'DegenerateGraphError',
    'DegreeCentrality',
    'EigenvectorCentrality',
    'EdgeRecord',
    'GraphBuilder',
    'ResultRanker',
    'StationGraph'
]
