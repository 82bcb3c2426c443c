"""
中心性計算モジュール
"""

from .betweenness import BetweennessCentrality
from .degree import DegreeCentrality
from .eigenvector import EigenvectorCentrality
from .calculator import CentralityCalculator, load_config
from .exceptions import DegenerateGraphError

__all__ = [
    'BetweennessCentrality',
    'DegreeCentrality',
    'EigenvectorCentrality',
    'CentralityCalculator',
    'DegenerateGraphError',
    'load_config'
]
