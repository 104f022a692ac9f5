"""
日文讀音提供者 (FugashiReadingProvider)

使用 fugashi (MeCab + UniDic) 分詞並取得每個 token 的片假名讀音。

- 第一次載入辭典採 single-flight：多執行緒同時首次呼叫也只會初始化一次
- 初始化失敗會被記住，之後的呼叫直接拋出同樣的錯誤，不重試
- MeCab tagger 不可重入，每個執行緒各自持有一個 tagger，辭典本身以 mmap 共享
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from phonorhyme.core.errors import ProviderInitializationFailed
from phonorhyme.core.protocols.reading import PhoneticToken
from phonorhyme.utils.logger import get_logger, log_timing

from .config import JapaneseKanaConfig

logger = get_logger(__name__)

JAPANESE_INSTALL_HINT = (
    "Missing Japanese dependencies. Please install with: pip install fugashi unidic-lite"
)

_instance: Optional["FugashiReadingProvider"] = None
_instance_lock = threading.Lock()


def _default_tagger_factory(tagger_args: str) -> Any:
    """
    建立 fugashi Tagger

    Raises:
        ImportError: 如果未安裝 fugashi
        RuntimeError: MeCab 找不到辭典
    """
    try:
        import fugashi
    except ImportError as e:
        logger.error("無法載入 fugashi，請確認是否已安裝 fugashi 與 unidic-lite")
        raise ImportError(JAPANESE_INSTALL_HINT) from e

    if tagger_args:
        return fugashi.Tagger(tagger_args)
    return fugashi.Tagger()


def _reading_of(word: Any) -> Optional[str]:
    # 未知詞的 feature 欄位可能是 None 或 "*"
    try:
        reading = word.feature.kana
    except AttributeError:
        return None
    if not reading or reading == "*":
        return None
    return reading


class FugashiReadingProvider:
    """
    基於 fugashi 的讀音提供者

    使用方式:
        provider = get_fugashi_provider()  # 取得單例
        tokens = provider.segment_and_read("空を見上げて")
    """

    def __init__(
        self,
        config: Optional[JapaneseKanaConfig] = None,
        tagger_factory: Optional[Callable[[str], Any]] = None,
    ):
        self._config = config or JapaneseKanaConfig()
        self._tagger_factory = tagger_factory or _default_tagger_factory
        self._initialized = False
        self._init_error: Optional[str] = None
        self._init_lock = threading.Lock()
        self._local = threading.local()
        self._stats_lock = threading.Lock()
        self._stats = {"taggers": 0}

    def initialize(self) -> None:
        """
        載入分詞器與辭典

        此方法是執行緒安全的，多次呼叫不會重複初始化。

        Raises:
            ProviderInitializationFailed: 辭典或 fugashi 無法載入
        """
        if self._initialized:
            return

        with self._init_lock:
            if self._initialized:
                return
            if self._init_error is not None:
                raise ProviderInitializationFailed(self._init_error)

            try:
                self._local.tagger = self._new_tagger()
            except (ImportError, RuntimeError) as e:
                self._init_error = f"fugashi tagger initialization failed: {e}"
                logger.error(f"形態素解析的初始化錯誤: {e}")
                raise ProviderInitializationFailed(self._init_error) from e

            self._initialized = True
            logger.info("FugashiReadingProvider initialized")

    def is_initialized(self) -> bool:
        """檢查是否已初始化"""
        return self._initialized

    @log_timing("FugashiReadingProvider._new_tagger", level=logging.INFO)
    def _new_tagger(self) -> Any:
        tagger = self._tagger_factory(self._config.tagger_args)
        with self._stats_lock:
            self._stats["taggers"] += 1
        return tagger

    def _get_tagger(self) -> Any:
        self.initialize()
        tagger = getattr(self._local, "tagger", None)
        if tagger is None:
            try:
                tagger = self._new_tagger()
            except (ImportError, RuntimeError) as e:
                raise ProviderInitializationFailed(f"fugashi tagger initialization failed: {e}") from e
            self._local.tagger = tagger
        return tagger

    def segment_and_read(self, text: str) -> List[PhoneticToken]:
        """
        分詞並取得每個 token 的片假名讀音

        Args:
            text: 輸入日文文本

        Returns:
            List[PhoneticToken]: token 列表；未知讀音的 token 其 reading 為 None
        """
        tagger = self._get_tagger()

        if not text:
            return []

        tokens = [PhoneticToken(surface=word.surface, reading=_reading_of(word)) for word in tagger(text)]
        logger.debug(f"Tokens for '{text}': {[(t.surface, t.reading) for t in tokens]}")
        return tokens

    def get_stats(self) -> Dict[str, Any]:
        with self._stats_lock:
            stats = dict(self._stats)
        stats["initialized"] = self._initialized
        return stats


def get_fugashi_provider() -> FugashiReadingProvider:
    """
    取得全域共享的 FugashiReadingProvider (單例)

    辭典載入延後到第一次 segment_and_read() 時才進行。

    注意：初始化失敗會記在這個單例上，之後同一行程內的呼叫都會直接失敗。
    安裝好辭典後，請呼叫 reset_fugashi_provider() (或 reset_default_engine())
    讓下一次呼叫重新載入。
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = FugashiReadingProvider()
    return _instance


def reset_fugashi_provider() -> None:
    """丟棄全域單例 (包含記住的初始化失敗)，下一次 get_fugashi_provider() 會建立新實例"""
    global _instance
    with _instance_lock:
        _instance = None
