"""
分析・レポートモジュール
"""

from .ranker import ResultRanker

__all__ = ['ResultRanker']
