"""
移動記録ファイルから中心性を計算して表示するコマンド
"""

import argparse
import logging
import sys

from .analysis.ranker import ResultRanker
from .centrality.calculator import CentralityCalculator, load_config
from .graph.builder import GraphBuilder

logger = logging.getLogger(__name__)

METRIC_NAMES = {
    'degree': 'degree centrality',
    'eigenvector': 'eigenvector centrality',
    'betweenness': 'betweenness centrality',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='station-centrality',
        description='ステーション間の移動記録から次数・固有ベクトル・媒介中心性を計算します'
    )
    parser.add_argument('path', type=str, help='移動記録ファイル（出発,到着,<無視>,距離）')
    parser.add_argument('--config', type=str, default=None, help='設定ファイルのパス')
    parser.add_argument('--top', type=int, default=10, help='表示する上位ノード数')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    config = load_config(args.config)
    input_config = config.get('input') or {}
    builder = GraphBuilder(
        delimiter=input_config.get('delimiter', ','),
        distance_field=input_config.get('distance_field', 3)
    )

    try:
        graph = builder.build_graph(args.path)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    calculator = CentralityCalculator(config=config)
    results = calculator.calculate_all(graph)

    ranker = ResultRanker(graph)
    for name, title in METRIC_NAMES.items():
        best = ranker.top(results.get(name, {}))
        if best is None:
            print(f"No {title} available")
            continue
        node, score = best
        print(f"Station with highest {title}: {graph.label(node)}")
        print(f"Max {title}: {score}")

    if args.top > 0:
        df = ranker.to_frame(results, top_n=args.top)
        if not df.empty:
            print()
            print(df.to_string(index=False))

    return 0


if __name__ == '__main__':
    sys.exit(main())
