"""
次数中心性 (Degree Centrality) 計算モジュール
"""

import numpy as np
from typing import Dict
import logging

from ..graph.model import StationGraph
from .exceptions import DegenerateGraphError

logger = logging.getLogger(__name__)


class DegreeCentrality:
    """次数中心性を計算するクラス"""

    def calculate(self, graph: StationGraph) -> Dict[int, float]:
        """
        次数中心性を計算

        各ノードの接続エッジ数を (ノード数 - 1) で割った値。
        並行エッジは本数分、自己ループは1本として数える。

        Args:
            graph: StationGraphオブジェクト

        Returns:
            ノードIDをキー、中心性スコアを値とする辞書
        """
        num_nodes = graph.number_of_nodes()
        if num_nodes < 2:
            raise DegenerateGraphError(
                f"次数中心性には2つ以上のノードが必要です（ノード数: {num_nodes}）"
            )

        try:
            logger.info(f"次数中心性の計算を開始します（ノード数: {num_nodes}, エッジ数: {graph.number_of_edges()}）")

            scale = num_nodes - 1.0
            centrality = {node: graph.degree(node) / scale for node in graph.nodes()}

            values = list(centrality.values())
            logger.info(f"次数中心性の計算が完了しました（ノード数: {len(centrality)}）")
            logger.info(f"  平均: {np.mean(values):.6f}, 最大: {np.max(values):.6f}, 最小: {np.min(values):.6f}")

            return centrality

        except Exception as e:
            logger.error(f"次数中心性の計算中にエラーが発生しました: {e}")
            logger.error(f"グラフ情報: ノード数={graph.number_of_nodes()}, エッジ数={graph.number_of_edges()}")
            raise
