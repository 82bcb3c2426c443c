"""
中心性計算で使用する例外
"""


class DegenerateGraphError(ValueError):
    """中心性が定義できないグラフが与えられた場合の例外"""
