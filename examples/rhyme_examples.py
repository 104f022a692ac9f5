"""
日文韻腳判定範例 (Japanese Rhyme Examples)

本檔案展示 JapaneseRhymeEngine 的核心功能：
1. 基礎用法 - 比較兩個片段的尾端母音
2. 分析單一片段 - 讀音與母音骨架
3. 調整判定閾值
4. 讀音失敗的處理 (raise / degrade)
"""

import sys
from pathlib import Path

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))

from phonorhyme import JapaneseRhymeEngine, ReadingExtractionFailed, RhymeConfig

engine = JapaneseRhymeEngine()


def print_case(title, a, b, result):
    print(f"--- {title} ---")
    print(f"片段 A: {a}  ({result.skeleton_a})")
    print(f"片段 B: {b}  ({result.skeleton_b})")
    print(f"相似度: {result.similarity:.2f}  押韻: {result.rhymes}")
    print()


# =============================================================================
# 範例 1: 基礎用法
# =============================================================================
def example_1_basic_usage():
    print("=" * 60)
    print("範例 1: 基礎用法 (Basic Usage)")
    print("=" * 60)

    pairs = [
        ("見上げて", "待ってて"),
        ("愛", "会い"),
        ("東京", "空"),
    ]
    for a, b in pairs:
        print_case("compare_rhyme", a, b, engine.compare_rhyme(a, b))


# =============================================================================
# 範例 2: 分析單一片段
# =============================================================================
def example_2_analyze():
    print("=" * 60)
    print("範例 2: 分析單一片段 (Analyze)")
    print("=" * 60)

    for text in ["空を見上げて", "ラーメン", "アイス"]:
        analysis = engine.analyze(text)
        print(f"{text} -> {analysis.normalized_text} -> {analysis.reading} -> {analysis.skeleton}")
    print()


# =============================================================================
# 範例 3: 調整判定閾值
# =============================================================================
def example_3_threshold():
    print("=" * 60)
    print("範例 3: 調整判定閾值 (Threshold)")
    print("=" * 60)

    strict = JapaneseRhymeEngine(config=RhymeConfig(threshold=0.8))
    print_case("threshold=0.8", "明日への希望", "胸に抱いて行こう", strict.compare_rhyme("明日への希望", "胸に抱いて行こう"))


# =============================================================================
# 範例 4: 讀音失敗
# =============================================================================
def example_4_failures():
    print("=" * 60)
    print("範例 4: 讀音失敗 (Failures)")
    print("=" * 60)

    try:
        engine.compare_rhyme("", "空")
    except ReadingExtractionFailed as e:
        print(f"raise:   {type(e).__name__} side={e.side} reason={e.reason}")

    result = engine.compare_rhyme("", "空", fail_policy="degrade")
    print(f"degrade: similarity={result.similarity} rhymes={result.rhymes} degraded={result.degraded}")
    print()


if __name__ == "__main__":
    example_1_basic_usage()
    example_2_analyze()
    example_3_threshold()
    example_4_failures()
