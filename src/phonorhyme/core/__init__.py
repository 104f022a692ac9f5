"""
核心抽象層

定義語言無關的介面、比對演算法與錯誤類型。
"""

from .comparator import RhymeComparisonResult, compare_skeletons, suffix_similarity
from .engine_interface import RhymeEngine
from .errors import (
    NoReadingAvailable,
    PhonorhymeError,
    ProviderInitializationFailed,
    ReadingExtractionFailed,
)
from .protocols.reading import PhoneticReadingProvider, PhoneticToken
from .reading import AggregatedReading, ReadingAggregator

__all__ = [
    "RhymeEngine",
    "PhoneticReadingProvider",
    "PhoneticToken",
    "ReadingAggregator",
    "AggregatedReading",
    "RhymeComparisonResult",
    "compare_skeletons",
    "suffix_similarity",
    "PhonorhymeError",
    "ReadingExtractionFailed",
    "ProviderInitializationFailed",
    "NoReadingAvailable",
]
