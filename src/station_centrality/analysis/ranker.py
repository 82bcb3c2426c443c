"""
中心性スコアのランキングモジュール
"""

import pandas as pd
from typing import Dict, List, Optional, Tuple
import logging

from ..graph.model import StationGraph

logger = logging.getLogger(__name__)


class ResultRanker:
    """中心性スコアを降順に並べてレポート用に整形するクラス"""

    def __init__(self, graph: Optional[StationGraph] = None):
        """
        初期化

        Args:
            graph: ラベル参照用のStationGraphオブジェクト（省略可）
        """
        self.graph = graph

    @staticmethod
    def rank(scores: Dict[int, float], top_n: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        スコアの降順に並べる

        同点のノードは辞書の順序を保つ。

        Args:
            scores: ノードIDをキー、スコアを値とする辞書
            top_n: 返す件数（Noneの場合は全件）

        Returns:
            (ノードID, スコア) のリスト
        """
        ranked = sorted(scores.items(), key=lambda x: x[1], reverse=True)
        if top_n is not None:
            ranked = ranked[:top_n]
        return ranked

    @classmethod
    def top(cls, scores: Dict[int, float]) -> Optional[Tuple[int, float]]:
        """最もスコアの高い (ノードID, スコア) を返す"""
        ranked = cls.rank(scores, top_n=1)
        return ranked[0] if ranked else None

    def _label(self, node: int) -> Optional[str]:
        if self.graph is None:
            return None
        return self.graph.label(node)

    def to_frame(self, centrality_scores: Dict[str, Dict], sort_by: Optional[str] = None,
                 top_n: Optional[int] = None) -> pd.DataFrame:
        """
        中心性スコアを1ノード1行のDataFrameにまとめる

        Args:
            centrality_scores: 中心性指標名をキー、スコア辞書を値とする辞書
            sort_by: 並べ替えに使う指標名（Noneの場合は最初の指標）
            top_n: 返す行数

        Returns:
            node, label, 各指標の列を持つDataFrame
        """
        metrics = [name for name, scores in centrality_scores.items() if scores]
        if not metrics:
            return pd.DataFrame(columns=['node', 'label'])

        if sort_by is None:
            sort_by = metrics[0]
        if sort_by not in metrics:
            raise KeyError(f"中心性タイプ '{sort_by}' が見つかりません")

        nodes = [node for node, _ in self.rank(centrality_scores[sort_by])]
        rows = []
        for node in nodes:
            row = {'node': node, 'label': self._label(node)}
            for name in metrics:
                row[name] = centrality_scores[name].get(node, 0.0)
            rows.append(row)

        df = pd.DataFrame(rows)
        if top_n is not None:
            df = df.head(top_n)
        return df.reset_index(drop=True)

    def summarize(self, centrality_scores: Dict[str, Dict]) -> pd.DataFrame:
        """
        各指標で最もスコアの高いノードをまとめる

        Args:
            centrality_scores: 中心性指標名をキー、スコア辞書を値とする辞書

        Returns:
            metric, node, label, score の列を持つDataFrame
        """
        rows = []
        for name, scores in centrality_scores.items():
            best = self.top(scores)
            if best is None:
                logger.warning(f"中心性タイプ '{name}' のスコアがありません")
                continue
            node, score = best
            rows.append({'metric': name, 'node': node, 'label': self._label(node), 'score': score})

        return pd.DataFrame(rows, columns=['metric', 'node', 'label', 'score'])
