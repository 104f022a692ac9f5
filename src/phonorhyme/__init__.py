"""
phonorhyme - 日文韻腳相似度判定 (Japanese Rhyme Similarity)

核心概念：
- 片段文字先正規化 (片假名 -> 平假名、移除長音符號)
- 透過形態素解析取得片假名讀音，只留下母音假名與撥音，得到「母音骨架」
- 兩個母音骨架從尾端對齊比較，相同比例 >= 閾值 (預設 0.5) 即判定押韻

官方入口（穩定 API）：
- `phonorhyme.JapaneseRhymeEngine`
- `phonorhyme.compare_rhyme`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from phonorhyme.languages.japanese import (
    FugashiReadingProvider,
    JapaneseRhymeEngine,
    VowelAnalysis,
    compare_rhyme,
    get_default_engine,
    get_fugashi_provider,
    reset_default_engine,
)

# =============================================================================
# 配置
# =============================================================================
from phonorhyme.config import DEFAULT_CONFIG, RhymeConfig

# =============================================================================
# 核心型別與錯誤
# =============================================================================
from phonorhyme.core import (
    NoReadingAvailable,
    PhoneticReadingProvider,
    PhoneticToken,
    PhonorhymeError,
    ProviderInitializationFailed,
    ReadingExtractionFailed,
    RhymeComparisonResult,
    compare_skeletons,
)

# =============================================================================
# 日誌工具
# =============================================================================
from phonorhyme.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Engines
    "JapaneseRhymeEngine",
    "VowelAnalysis",
    "compare_rhyme",
    "get_default_engine",
    "reset_default_engine",
    # Providers
    "PhoneticReadingProvider",
    "PhoneticToken",
    "FugashiReadingProvider",
    "get_fugashi_provider",
    # Results / algorithm
    "RhymeComparisonResult",
    "compare_skeletons",
    # Config
    "RhymeConfig",
    "DEFAULT_CONFIG",
    # Errors
    "PhonorhymeError",
    "ReadingExtractionFailed",
    "ProviderInitializationFailed",
    "NoReadingAvailable",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
