"""
中心性計算を統合管理するクラス
"""

import yaml
import os
from typing import Dict, Optional
import logging

from ..graph.model import StationGraph
from .betweenness import BetweennessCentrality
from .degree import DegreeCentrality
from .eigenvector import EigenvectorCentrality

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(__file__)))),
    'config',
    'config.yaml'
)


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    設定ファイルを読み込む

    読み込めない場合は警告を出して空の設定を返す。

    Args:
        config_path: 設定ファイルのパス（Noneの場合はデフォルトパスを使用）

    Returns:
        設定の辞書
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
        return config or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"設定ファイルの読み込みに失敗しました: {e}。デフォルト設定を使用します。")
        return {}


class CentralityCalculator:
    """複数の中心性指標を計算・管理するクラス"""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict] = None):
        """
        初期化

        Args:
            config_path: 設定ファイルのパス
            config: 設定の辞書（指定された場合はファイルを読み込まない）
        """
        if config is None:
            config = load_config(config_path)

        self.config = config.get('centrality') or {}
        self._initialize_calculators()

    def _initialize_calculators(self):
        """各中心性計算クラスを初期化"""
        betweenness_config = self.config.get('betweenness') or {}
        eigenvector_config = self.config.get('eigenvector') or {}

        self.degree = DegreeCentrality()

        self.eigenvector = EigenvectorCentrality(
            max_iter=eigenvector_config.get('max_iter', 100),
            tol=eigenvector_config.get('tol', 1.0e-6)
        )

        self.betweenness = BetweennessCentrality(
            predecessors_only=betweenness_config.get('predecessors_only', False)
        )

    def calculate_all(self, graph: StationGraph) -> Dict[str, Dict]:
        """
        すべての中心性指標を計算

        いずれかの指標が失敗しても残りの指標は計算する。失敗した指標は空の辞書になる。

        Args:
            graph: StationGraphオブジェクト

        Returns:
            中心性指標名をキー、中心性スコア辞書を値とする辞書
        """
        results = {}

        try:
            results['degree'] = self.degree.calculate(graph)
        except Exception as e:
            logger.error(f"次数中心性の計算に失敗しました: {e}")
            results['degree'] = {}

        try:
            results['eigenvector'] = self.eigenvector.calculate(graph)
        except Exception as e:
            logger.error(f"固有ベクトル中心性の計算に失敗しました: {e}")
            results['eigenvector'] = {}

        try:
            results['betweenness'] = self.betweenness.calculate(graph)
        except Exception as e:
            logger.error(f"媒介中心性の計算に失敗しました: {e}")
            results['betweenness'] = {}

        return results

    def calculate_degree(self, graph: StationGraph) -> Dict:
        """次数中心性のみを計算"""
        return self.degree.calculate(graph)

    def calculate_eigenvector(self, graph: StationGraph) -> Dict:
        """固有ベクトル中心性のみを計算"""
        return self.eigenvector.calculate(graph)

    def calculate_betweenness(self, graph: StationGraph) -> Dict:
        """媒介中心性のみを計算"""
        return self.betweenness.calculate(graph)
