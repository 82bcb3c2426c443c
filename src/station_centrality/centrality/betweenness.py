"""
媒介中心性 (Betweenness Centrality) 計算モジュール
"""

from collections import deque
import numpy as np
from typing import Dict, List, Tuple
import logging

from ..graph.model import StationGraph

logger = logging.getLogger(__name__)


class BetweennessCentrality:
    """媒介中心性を計算するクラス（Brandes法、ホップ数ベース）

    全ノードの合計が1になるように正規化する。
    """

    def __init__(self, predecessors_only: bool = False):
        """
        初期化

        Args:
            predecessors_only: Trueの場合、依存度を最短経路上の先行ノードにのみ
                伝播する（古典的なBrandes法）。Falseの場合は全接続エッジに伝播する
        """
        self.predecessors_only = predecessors_only

    def calculate(self, graph: StationGraph) -> Dict[int, float]:
        """
        媒介中心性を計算

        Args:
            graph: StationGraphオブジェクト

        Returns:
            ノードIDをキー、中心性スコアを値とする辞書
        """
        try:
            num_nodes = graph.number_of_nodes()
            num_edges = graph.number_of_edges()

            logger.info(f"媒介中心性の計算を開始します（ノード数: {num_nodes}, エッジ数: {num_edges}）")

            # 自己ループは最短経路に寄与しない
            adjacency = [
                [u for u, _ in graph.incident_edges(v) if u != v]
                for v in graph.nodes()
            ]

            totals = np.zeros(num_nodes, dtype=float)
            for source in graph.nodes():
                totals += self._single_source(adjacency, source)

            total = float(np.sum(totals))
            if total == 0:
                logger.warning("媒介中心性の合計が0のため正規化できません。全ノードのスコアを0とします")
                return {node: 0.0 for node in graph.nodes()}

            scaling_factor = 1.0 / total
            centrality = {node: float(totals[node] * scaling_factor) for node in graph.nodes()}

            values = list(centrality.values())
            logger.info(f"媒介中心性の計算が完了しました（ノード数: {len(centrality)}）")
            logger.info(f"  平均: {np.mean(values):.6f}, 最大: {np.max(values):.6f}, 最小: {np.min(values):.6f}")

            return centrality

        except Exception as e:
            logger.error(f"媒介中心性の計算中にエラーが発生しました: {e}")
            logger.error(f"グラフ情報: ノード数={graph.number_of_nodes()}, エッジ数={graph.number_of_edges()}")
            raise

    def _single_source(self, adjacency: List[List[int]], source: int) -> np.ndarray:
        """1つの始点ノードからの寄与を計算"""
        stack, distance, sigma = self._shortest_paths(adjacency, source)

        delta = np.zeros(len(adjacency), dtype=float)
        contribution = np.zeros(len(adjacency), dtype=float)

        while stack:
            v = stack.pop()
            if self.predecessors_only:
                for w in adjacency[v]:
                    if distance[w] == distance[v] - 1:
                        delta[w] += (sigma[w] / sigma[v]) * (1.0 + delta[v])
                if v != source:
                    contribution[v] += delta[v]
            else:
                for w in adjacency[v]:
                    c = (sigma[v] / sigma[w]) * (1.0 + delta[v])
                    delta[w] += c
                    if v != source:
                        contribution[v] += c

        return contribution

    @staticmethod
    def _shortest_paths(adjacency: List[List[int]], source: int) -> Tuple[List[int], List[int], List[int]]:
        """
        幅優先探索で最短経路数を数える

        Returns:
            (訪問順のスタック, 始点からのホップ数, 最短経路数)。未到達ノードの距離は-1
        """
        num_nodes = len(adjacency)
        distance = [-1] * num_nodes
        sigma = [0] * num_nodes
        distance[source] = 0
        sigma[source] = 1

        stack = []
        queue = deque([source])
        while queue:
            v = queue.popleft()
            stack.append(v)
            for w in adjacency[v]:
                if distance[w] < 0:
                    queue.append(w)
                    distance[w] = distance[v] + 1
                if distance[w] == distance[v] + 1:
                    sigma[w] += sigma[v]

        return stack, distance, sigma
