"""
日文語言支援模組

提供日文的文字正規化、讀音取得、母音骨架抽取與韻腳比對功能。
"""

from .config import JapaneseKanaConfig
from .engine import (
    JapaneseRhymeEngine,
    VowelAnalysis,
    compare_rhyme,
    get_default_engine,
    reset_default_engine,
)
from .normalizer import strip_long_vowel_marks, to_hiragana
from .provider import FugashiReadingProvider, get_fugashi_provider, reset_fugashi_provider
from .skeleton import VOWEL_SKELETON_ALPHABET, extract_vowel_skeleton, is_vowel_skeleton

__all__ = [
    "JapaneseRhymeEngine",
    "VowelAnalysis",
    "compare_rhyme",
    "get_default_engine",
    "reset_default_engine",
    "JapaneseKanaConfig",
    "FugashiReadingProvider",
    "get_fugashi_provider",
    "reset_fugashi_provider",
    "to_hiragana",
    "strip_long_vowel_marks",
    "extract_vowel_skeleton",
    "is_vowel_skeleton",
    "VOWEL_SKELETON_ALPHABET",
]
