"""
尾端對齊相似度比對

兩個母音骨架從尾端開始逐一對齊，只比較較短骨架的長度範圍，
相似度 = 相同符號數 / 比較視窗長度。
"""

from dataclasses import dataclass

from phonorhyme.config import DEFAULT_THRESHOLD


@dataclass(frozen=True)
class RhymeComparisonResult:
    """
    比對結果

    Attributes:
        similarity: 0.0 ~ 1.0
        rhymes: similarity >= threshold
        matched: 尾端對齊後相同的符號數
        window: 比較視窗長度 (較短骨架的長度)
        skeleton_a / skeleton_b: 參與比對的母音骨架
        degraded: 讀音失敗後以 0 分降級回傳時為 True
    """

    similarity: float
    rhymes: bool
    matched: int = 0
    window: int = 0
    skeleton_a: str = ""
    skeleton_b: str = ""
    degraded: bool = False


def compare_skeletons(a: str, b: str, *, threshold: float = DEFAULT_THRESHOLD) -> RhymeComparisonResult:
    """
    以尾端對齊比較兩個母音骨架

    任一骨架為空時沒有可比較的內容，回傳 similarity=0.0、rhymes=False。
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")

    window = min(len(a), len(b))
    if window == 0:
        return RhymeComparisonResult(similarity=0.0, rhymes=False, skeleton_a=a, skeleton_b=b)

    matched = sum(1 for i in range(1, window + 1) if a[-i] == b[-i])
    similarity = matched / window
    return RhymeComparisonResult(
        similarity=similarity,
        rhymes=similarity >= threshold,
        matched=matched,
        window=window,
        skeleton_a=a,
        skeleton_b=b,
    )


def suffix_similarity(a: str, b: str) -> float:
    return compare_skeletons(a, b).similarity
