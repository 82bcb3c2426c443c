"""
ステーション間の無向マルチグラフを保持するモジュール
"""

import networkx as nx
from typing import Dict, Iterator, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class StationGraph:
    """ステーションをノード、移動記録をエッジとする無向重み付きマルチグラフ

    ノードは生成順の整数ID（0, 1, 2, ...）とラベル（ステーション名）を持つ。
    並行エッジと自己ループを許可する。
    """

    def __init__(self):
        self._graph = nx.MultiGraph()
        self._labels: List[str] = []
        self._index: Dict[str, int] = {}
        self._next_edge_id = 0

    def add_node(self, label: str) -> int:
        """
        ノードを追加

        Args:
            label: ノードのラベル

        Returns:
            追加したノードのID
        """
        if label in self._index:
            raise ValueError(f"ラベル '{label}' のノードは既に存在します")
        node = len(self._labels)
        self._graph.add_node(node, label=label)
        self._labels.append(label)
        self._index[label] = node
        return node

    def get_or_add_node(self, label: str) -> int:
        """ラベルに対応するノードを返す（存在しなければ追加する）"""
        node = self._index.get(label)
        if node is None:
            node = self.add_node(label)
        return node

    def add_edge(self, u: int, v: int, weight: float = 1.0) -> int:
        """
        エッジを追加

        Args:
            u: 始点ノードID（エッジの追加元として記録される）
            v: 終点ノードID
            weight: エッジの重み（非負）

        Returns:
            エッジID（追加順の連番）
        """
        if u not in self._graph or v not in self._graph:
            raise KeyError(f"ノード {u} または {v} がグラフに存在しません")
        if weight < 0:
            raise ValueError(f"エッジの重みは非負である必要があります: {weight}")
        edge_id = self._next_edge_id
        self._graph.add_edge(u, v, key=edge_id, weight=float(weight), origin=u)
        self._next_edge_id += 1
        return edge_id

    def freeze(self) -> 'StationGraph':
        """グラフを変更不可にする"""
        nx.freeze(self._graph)
        return self

    def is_frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    def number_of_nodes(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._labels)))

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, node) -> bool:
        return node in self._graph

    def incident_edges(self, node: int) -> List[Tuple[int, float]]:
        """
        ノードに接続するエッジを列挙

        ノードから追加されたエッジを新しい順に、続いてノードへ追加された
        エッジを新しい順に返す。自己ループは1回だけ現れる。

        Args:
            node: ノードID

        Returns:
            (隣接ノードID, 重み) のリスト
        """
        edges = self._graph.edges(node, keys=True, data=True)
        ordered = sorted(edges, key=lambda e: (e[3]['origin'] != node, -e[2]))
        return [(neighbor, data['weight']) for _, neighbor, _, data in ordered]

    def degree(self, node: int) -> int:
        """接続エッジ数（自己ループは1本として数える）"""
        return len(self._graph.edges(node, keys=True))

    def edge_weight(self, u: int, v: int) -> float:
        """
        2ノード間のエッジの重みを取得

        並行エッジがある場合は最初に追加されたエッジの重みを返す。
        """
        try:
            edges = self._graph[u][v]
        except KeyError:
            raise KeyError(f"ノード {u} と {v} の間にエッジがありません")
        return edges[min(edges)]['weight']

    def label(self, node: int) -> str:
        return self._labels[node]

    def node_for_label(self, label: str) -> Optional[int]:
        return self._index.get(label)

    def to_networkx(self) -> nx.MultiGraph:
        """ラベル付きのNetworkXマルチグラフのコピーを返す"""
        return nx.MultiGraph(self._graph)

    @classmethod
    def from_edges(cls, edges, freeze: bool = True) -> 'StationGraph':
        """
        (始点ラベル, 終点ラベル[, 重み]) の列からグラフを構築

        Args:
            edges: エッジのタプルの列
            freeze: 構築後に変更不可にするかどうか

        Returns:
            StationGraphオブジェクト
        """
        graph = cls()
        for edge in edges:
            source, target = edge[0], edge[1]
            weight = edge[2] if len(edge) > 2 else 1.0
            u = graph.get_or_add_node(source)
            v = graph.get_or_add_node(target)
            graph.add_edge(u, v, weight)
        if freeze:
            graph.freeze()
        return graph
