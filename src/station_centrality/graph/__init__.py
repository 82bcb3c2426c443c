"""
グラフ構築モジュール
"""

from .model import StationGraph
from .builder import EdgeRecord, GraphBuilder

__all__ = ['StationGraph', 'EdgeRecord', 'GraphBuilder']
