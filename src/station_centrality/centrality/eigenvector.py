"""
固有ベクトル中心性 (Eigenvector Centrality) 計算モジュール
"""

import numpy as np
from typing import Dict
import logging

from ..graph.model import StationGraph

logger = logging.getLogger(__name__)


class EigenvectorCentrality:
    """固有ベクトル中心性を計算するクラス

    隣接ノードのスコアをその次数で割って足し合わせる反復計算を行い、
    最後に最大値で割って 0〜1 に正規化する（L2正規化ではない）。
    """

    def __init__(self, max_iter: int = 100, tol: float = 1.0e-6, initial: float = 0.5):
        """
        初期化

        Args:
            max_iter: 最大反復回数
            tol: 収束判定の許容誤差（反復間の最大変化量）
            initial: 全ノードの初期スコア
        """
        if max_iter < 1:
            raise ValueError(f"max_iterは1以上である必要があります: {max_iter}")
        if tol <= 0:
            raise ValueError(f"tolは正の値である必要があります: {tol}")
        self.max_iter = max_iter
        self.tol = tol
        self.initial = initial

    def calculate(self, graph: StationGraph) -> Dict[int, float]:
        """
        固有ベクトル中心性を計算

        Args:
            graph: StationGraphオブジェクト

        Returns:
            ノードIDをキー、中心性スコアを値とする辞書
        """
        try:
            num_nodes = graph.number_of_nodes()
            logger.info(f"固有ベクトル中心性の計算を開始します（ノード数: {num_nodes}, エッジ数: {graph.number_of_edges()}）")

            if num_nodes == 0:
                return {}

            neighbors = [[u for u, _ in graph.incident_edges(v)] for v in graph.nodes()]
            degrees = np.array([len(nbrs) for nbrs in neighbors], dtype=float)

            scores = np.full(num_nodes, self.initial, dtype=float)
            converged = False
            for iteration in range(self.max_iter):
                # 次数0のノードの寄与は0
                share = np.divide(scores, degrees, out=np.zeros(num_nodes), where=degrees > 0)
                new_scores = np.array([sum(share[u] for u in nbrs) for nbrs in neighbors], dtype=float)
                max_diff = np.max(np.abs(new_scores - scores))
                scores = new_scores
                if max_diff < self.tol:
                    converged = True
                    logger.info(f"{iteration + 1}回の反復で収束しました（最大変化量: {max_diff:.6g}）")
                    break

            if not converged:
                logger.warning(f"{self.max_iter}回の反復で収束しませんでした（最大変化量: {max_diff:.6g}）")

            max_score = np.max(scores)
            if max_score <= 0:
                logger.warning("最大スコアが0のため正規化できません。全ノードのスコアを0とします")
                return {node: 0.0 for node in graph.nodes()}

            centrality = {node: float(scores[node] / max_score) for node in graph.nodes()}

            values = list(centrality.values())
            logger.info(f"固有ベクトル中心性の計算が完了しました（ノード数: {len(centrality)}）")
            logger.info(f"  平均: {np.mean(values):.6f}, 最大: {np.max(values):.6f}, 最小: {np.min(values):.6f}")

            return centrality

        except Exception as e:
            logger.error(f"固有ベクトル中心性の計算中にエラーが発生しました: {e}")
            logger.error(f"グラフ情報: ノード数={graph.number_of_nodes()}, エッジ数={graph.number_of_edges()}")
            raise
