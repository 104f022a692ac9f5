"""
讀音聚合模組

呼叫讀音提供者取得 token 讀音，並依原順序串接成一個字串。
讀音缺漏的 token 不貢獻任何字元 (不會以表層形式代替)。
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from phonorhyme.core.errors import NoReadingAvailable, ProviderInitializationFailed, Side
from phonorhyme.core.protocols.reading import PhoneticReadingProvider, PhoneticToken
from phonorhyme.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AggregatedReading:
    text: str
    tokens: Tuple[PhoneticToken, ...]
    reading: str


class ReadingAggregator:
    """
    讀音聚合器

    失敗情境各自對應不同例外，呼叫端可以區分：
    - 提供者初始化失敗 -> ProviderInitializationFailed
    - 零個 token -> NoReadingAvailable(reason="no_tokens")
    - 所有 token 都沒有讀音 -> NoReadingAvailable(reason="empty_reading")
    """

    def __init__(self, provider: PhoneticReadingProvider):
        self.provider = provider

    def aggregate(self, text: str, *, side: Optional[Side] = None) -> AggregatedReading:
        """
        取得 text 的完整讀音

        Args:
            text: 已正規化的輸入文本
            side: 片段位置，會帶入例外中以便呼叫端辨識

        Returns:
            AggregatedReading: token 列表與串接後的讀音
        """
        try:
            tokens = tuple(self.provider.segment_and_read(text))
        except ProviderInitializationFailed as exc:
            logger.error(f"讀音提供者初始化失敗: {exc.message}")
            raise ProviderInitializationFailed(exc.message, side=side, fragment=text) from exc

        if not tokens:
            logger.error(f"'{text}' 的形態素解析結果為空")
            raise NoReadingAvailable(
                "provider returned no tokens",
                reason="no_tokens",
                side=side,
                fragment=text,
            )

        reading = "".join(token.reading or "" for token in tokens)
        logger.debug(f"Full reading for '{text}': {reading}")

        if not reading:
            logger.error(f"無法取得 '{text}' 的讀音")
            raise NoReadingAvailable(
                "no token carried a reading",
                reason="empty_reading",
                side=side,
                fragment=text,
            )

        return AggregatedReading(text=text, tokens=tokens, reading=reading)
