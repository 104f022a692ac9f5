"""
日文韻腳引擎 (JapaneseRhymeEngine)

串接 正規化 -> 讀音聚合 -> 母音骨架 -> 尾端對齊比對，
判定兩個日文片段是否押韻。

使用方式:
    from phonorhyme import JapaneseRhymeEngine

    engine = JapaneseRhymeEngine()
    result = engine.compare_rhyme("見上げて", "待ってて")
    print(result.similarity, result.rhymes)
"""

import threading
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from phonorhyme.config import RhymeConfig
from phonorhyme.core.comparator import RhymeComparisonResult, compare_skeletons
from phonorhyme.core.engine_interface import RhymeEngine
from phonorhyme.core.errors import ReadingExtractionFailed, Side
from phonorhyme.core.events import RhymeEvent, RhymeEventHandler
from phonorhyme.core.protocols.reading import PhoneticReadingProvider, PhoneticToken
from phonorhyme.core.reading import ReadingAggregator

from .normalizer import to_hiragana
from .provider import get_fugashi_provider, reset_fugashi_provider
from .skeleton import extract_vowel_skeleton

_default_engine: Optional["JapaneseRhymeEngine"] = None
_default_engine_lock = threading.Lock()


@dataclass(frozen=True)
class VowelAnalysis:
    """單一片段的分析結果"""

    text: str
    normalized_text: str
    tokens: Tuple[PhoneticToken, ...]
    reading: str
    skeleton: str


class JapaneseRhymeEngine(RhymeEngine):
    _engine_name = "japanese"

    def __init__(
        self,
        provider: Optional[PhoneticReadingProvider] = None,
        config: Optional[RhymeConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[RhymeEventHandler] = None,
    ):
        self._config = config or RhymeConfig()
        self._init_logger(
            verbose=verbose or self._config.verbose,
            on_timing=on_timing or self._config.on_timing,
        )

        with self._log_timing("JapaneseRhymeEngine.__init__"):
            self._provider = provider if provider is not None else get_fugashi_provider()
            self._aggregator = ReadingAggregator(self._provider)
            self._on_event = on_event
            self._initialized = True
            self._logger.info("JapaneseRhymeEngine initialized")

    @property
    def provider(self) -> PhoneticReadingProvider:
        return self._provider

    @property
    def config(self) -> RhymeConfig:
        return self._config

    @property
    def threshold(self) -> float:
        return self._config.threshold

    def is_initialized(self) -> bool:
        return getattr(self, "_initialized", False)

    def get_backend_stats(self) -> Dict[str, Any]:
        stats: Dict[str, Any] = {
            "engine": "japanese",
            "initialized": self.is_initialized(),
            "provider": type(self._provider).__name__,
            "threshold": self.threshold,
        }
        get_stats = getattr(self._provider, "get_stats", None)
        if callable(get_stats):
            stats["provider_stats"] = get_stats()
        return stats

    def analyze(self, text: str, *, side: Optional[Side] = None) -> VowelAnalysis:
        """
        將單一片段轉為母音骨架

        Raises:
            ProviderInitializationFailed: 讀音提供者無法載入
            NoReadingAvailable: 沒有任何可用讀音
        """
        normalized = to_hiragana(text)
        try:
            aggregated = self._aggregator.aggregate(normalized, side=side)
        except ReadingExtractionFailed as exc:
            exc.fragment = text
            raise
        skeleton = extract_vowel_skeleton(aggregated.reading)
        self._logger.debug(f"Extracted vowels for '{text}': {skeleton}")
        return VowelAnalysis(
            text=text,
            normalized_text=normalized,
            tokens=aggregated.tokens,
            reading=aggregated.reading,
            skeleton=skeleton,
        )

    def compare_rhyme(
        self,
        fragment_a: str,
        fragment_b: str,
        *,
        fail_policy: str = "raise",
        mode: Optional[str] = None,
        trace_id: Optional[str] = None,
    ) -> RhymeComparisonResult:
        """
        比較兩個片段的韻腳

        Args:
            fragment_a: 第一個片段
            fragment_b: 第二個片段
            fail_policy: "raise" (預設) 讀音失敗時拋出例外；
                         "degrade" 讀音失敗時回傳 0 分結果 (degraded=True)
            mode: "evaluation" 強制 raise，"production" 強制 degrade
            trace_id: 事件追蹤 ID，未提供時自動產生

        Returns:
            RhymeComparisonResult

        Raises:
            ReadingExtractionFailed: 任一側讀音失敗 (fail_policy="raise" 時)，
                                     例外的 side 屬性標明是哪一側
        """
        if mode == "evaluation":
            fail_policy = "raise"
        elif mode == "production":
            fail_policy = "degrade"
        if fail_policy not in ("raise", "degrade"):
            raise ValueError(f"Unknown fail_policy: {fail_policy!r}")

        trace_id_value = trace_id or uuid.uuid4().hex

        with self._log_timing("JapaneseRhymeEngine.compare_rhyme"):
            try:
                first = self.analyze(fragment_a, side="first")
                second = self.analyze(fragment_b, side="second")
            except ReadingExtractionFailed as exc:
                self._emit_reading_failed(exc, fail_policy=fail_policy, trace_id=trace_id_value)
                if fail_policy == "raise":
                    raise
                return self._degraded_result(exc, trace_id=trace_id_value)

            result = compare_skeletons(first.skeleton, second.skeleton, threshold=self.threshold)

        self._logger.debug(
            f"Similarity between '{result.skeleton_a}' and '{result.skeleton_b}' is: {result.similarity}"
        )
        self._emit_event(
            {
                "type": "comparison",
                "engine": self._engine_name,
                "trace_id": trace_id_value,
                "similarity": result.similarity,
                "rhymes": result.rhymes,
                "matched": result.matched,
                "window": result.window,
                "skeleton_a": result.skeleton_a,
                "skeleton_b": result.skeleton_b,
            }
        )
        return result

    def does_rhyme(
        self,
        fragment_a: str,
        fragment_b: str,
        *,
        fail_policy: str = "raise",
        mode: Optional[str] = None,
        trace_id: Optional[str] = None,
    ) -> bool:
        return self.compare_rhyme(
            fragment_a, fragment_b, fail_policy=fail_policy, mode=mode, trace_id=trace_id
        ).rhymes

    def _emit_reading_failed(self, exc: ReadingExtractionFailed, *, fail_policy: str, trace_id: str) -> None:
        self._emit_event(
            {
                "type": "reading_failed",
                "engine": self._engine_name,
                "trace_id": trace_id,
                "side": exc.side,
                "fragment": exc.fragment,
                "reason": exc.reason,
                "fallback": "none" if fail_policy == "raise" else "zero_score",
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            }
        )

    def _degraded_result(self, exc: ReadingExtractionFailed, *, trace_id: str) -> RhymeComparisonResult:
        self._emit_event(
            {
                "type": "degraded",
                "engine": self._engine_name,
                "trace_id": trace_id,
                "side": exc.side,
                "reason": exc.reason,
                "fallback": "zero_score",
            }
        )
        self._logger.warning(f"母音抽取失敗 ({exc})，降級為 0 分")
        return RhymeComparisonResult(similarity=0.0, rhymes=False, degraded=True)

    def _emit_event(self, event: RhymeEvent) -> None:
        try:
            if self._on_event is not None:
                self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")


def get_default_engine() -> JapaneseRhymeEngine:
    """取得全域共享的 JapaneseRhymeEngine (使用 fugashi 讀音提供者)"""
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                _default_engine = JapaneseRhymeEngine()
    return _default_engine


def compare_rhyme(fragment_a: str, fragment_b: str) -> RhymeComparisonResult:
    """
    以預設引擎比較兩個片段

    Raises:
        ReadingExtractionFailed: 任一側讀音失敗
    """
    return get_default_engine().compare_rhyme(fragment_a, fragment_b)


def reset_default_engine() -> None:
    """
    丟棄預設引擎與全域 fugashi 讀音提供者

    辭典在行程啟動後才安裝 (或修復) 時使用，下一次 compare_rhyme() 會重新載入。
    """
    global _default_engine
    with _default_engine_lock:
        reset_fugashi_provider()
        _default_engine = None
