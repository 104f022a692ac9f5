"""
全域配置模組

提供統一的配置類別，控制韻腳判定閾值、日誌與計時等行為。

使用方式:
    from phonorhyme import JapaneseRhymeEngine, RhymeConfig

    # 調整判定閾值
    engine = JapaneseRhymeEngine(config=RhymeConfig(threshold=0.6))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("phonorhyme").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger

DEFAULT_THRESHOLD = 0.5


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class RhymeConfig:
    """
    韻腳判定配置

    屬性:
        threshold: 判定為押韻的最低相似度 (含等於)，範圍 0.0 ~ 1.0，預設 0.5
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
    """

    threshold: float = DEFAULT_THRESHOLD
    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {self.threshold}")
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = RhymeConfig()
