"""
日誌工具模組

所有 logger 都掛在 "phonorhyme" 命名空間下。
套件本身只安裝 NullHandler，不主動輸出；
需要輸出時請使用 verbose=True、enable_debug_logging()，或標準 logging 設定。

使用方式:
    from phonorhyme.utils.logger import get_logger, TimingContext

    logger = get_logger(__name__)
    with TimingContext("compare_rhyme", logger):
        ...
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonorhyme"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonorhyme 命名空間下的 logger

    Args:
        name: 子 logger 名稱，可傳入 __name__ 或短名稱 (如 "engine.japanese")

    Returns:
        logging.Logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為 phonorhyme 根 logger 掛上 StreamHandler (只掛一次)

    Args:
        level: 日誌等級
        fmt: 日誌格式

    Returns:
        logging.Logger: phonorhyme 根 logger
    """
    global _handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        root.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(fmt))
    root.setLevel(level)
    return root


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出 (包含計時資訊)"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時相關輸出"""
    setup_logger(level=logging.INFO)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文管理器

    離開區塊時以指定等級輸出 "[Timing] operation: 1.23ms"，
    並呼叫 callback(operation, elapsed_seconds) (若有提供)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception(f"on_timing 回呼執行失敗 ({self.operation})")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        @log_timing("extract")
        def extract(text): ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
