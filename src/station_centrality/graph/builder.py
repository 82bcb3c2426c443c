"""
移動記録のテキストファイルからグラフを構築するモジュール
"""

from typing import Iterable, List, NamedTuple, Optional
import logging

from .model import StationGraph

logger = logging.getLogger(__name__)


class EdgeRecord(NamedTuple):
    """1行分の移動記録"""
    source: str
    target: str
    distance: float


class GraphBuilder:
    """移動記録からStationGraphを構築するクラス"""

    def __init__(self, delimiter: str = ',', distance_field: int = 3):
        """
        初期化

        Args:
            delimiter: フィールドの区切り文字
            distance_field: 距離フィールドの位置（0始まり）
        """
        if distance_field < 2:
            raise ValueError(f"distance_fieldは2以上である必要があります: {distance_field}")
        self.delimiter = delimiter
        self.distance_field = distance_field

    def parse_line(self, line: str) -> Optional[EdgeRecord]:
        """
        1行を移動記録に変換

        Args:
            line: 入力行（`出発,到着,<無視>,距離` 形式）

        Returns:
            EdgeRecord。解析できない行の場合はNone
        """
        parts = line.rstrip('\r\n').split(self.delimiter)
        if len(parts) <= self.distance_field:
            logger.warning(f"フィールド数が不足しています: {line!r}")
            return None

        try:
            distance = float(parts[self.distance_field])
        except ValueError:
            logger.warning(f"距離の値が不正です: {parts[self.distance_field]!r}")
            return None
        if distance < 0:
            logger.warning(f"距離が負の値です: {distance}")
            return None

        return EdgeRecord(parts[0], parts[1], distance)

    def read_records(self, path: str) -> List[EdgeRecord]:
        """
        ファイルから移動記録を読み込む

        行は辞書順にソートしてから解析するため、ノードIDの順序は
        ファイル上の順序ではなくソート後の順序に従う。

        Args:
            path: 入力ファイルのパス

        Returns:
            EdgeRecordのリスト
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except OSError as e:
            logger.error(f"入力ファイルの読み込みに失敗しました: {e}")
            raise

        lines.sort()

        records = []
        skipped = 0
        for line in lines:
            if not line.strip():
                continue
            record = self.parse_line(line)
            if record is None:
                skipped += 1
                continue
            records.append(record)

        logger.info(f"{len(records)}件の移動記録を読み込みました（スキップ: {skipped}件）")
        return records

    def build_from_records(self, records: Iterable[EdgeRecord]) -> StationGraph:
        """
        移動記録からグラフを構築

        Args:
            records: EdgeRecordの列

        Returns:
            変更不可のStationGraphオブジェクト
        """
        graph = StationGraph()
        for record in records:
            u = graph.get_or_add_node(record.source)
            v = graph.get_or_add_node(record.target)
            graph.add_edge(u, v, record.distance)

        graph.freeze()
        logger.info(f"グラフを構築しました（ノード数: {graph.number_of_nodes()}, エッジ数: {graph.number_of_edges()}）")
        return graph

    def build_graph(self, path: str) -> StationGraph:
        """
        ファイルからグラフを構築

        Args:
            path: 入力ファイルのパス

        Returns:
            変更不可のStationGraphオブジェクト
        """
        return self.build_from_records(self.read_records(path))
