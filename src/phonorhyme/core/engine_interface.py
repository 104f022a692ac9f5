"""
韻腳引擎抽象基類

定義所有語言韻腳引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from phonorhyme.utils.logger import TimingContext, get_logger, setup_logger

if TYPE_CHECKING:
    from phonorhyme.core.comparator import RhymeComparisonResult


class RhymeEngine(ABC):
    """
    韻腳引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有共享的讀音提供者
    - 串接 正規化 -> 讀音 -> 母音骨架 -> 尾端比對
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次，之後重複呼叫 compare_rhyme()
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def compare_rhyme(self, fragment_a: str, fragment_b: str, **kwargs) -> "RhymeComparisonResult":
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_backend_stats(self) -> Dict[str, Any]:
        pass
