"""
母音骨架抽取模組

從片假名讀音中只留下母音假名 (アイウエオ) 與撥音 (ン)。
"""

from .config import JapaneseKanaConfig
from .normalizer import strip_long_vowel_marks

VOWEL_SKELETON_ALPHABET = frozenset(JapaneseKanaConfig.VOWEL_KANA + JapaneseKanaConfig.NASAL_KANA)


def extract_vowel_skeleton(reading: str) -> str:
    """
    將讀音縮減為母音骨架

    讀音本身也可能含長音符號 (例如 ラーメン)，因此先移除再過濾。
    只做字元類別過濾，不把 カ 之類的音節拆成母音。

    Args:
        reading: 串接後的片假名讀音

    Returns:
        str: 只由 VOWEL_SKELETON_ALPHABET 組成的字串，可能為空
    """
    reading = strip_long_vowel_marks(reading)
    return "".join(ch for ch in reading if ch in VOWEL_SKELETON_ALPHABET)


def is_vowel_skeleton(text: str) -> bool:
    return all(ch in VOWEL_SKELETON_ALPHABET for ch in text)
