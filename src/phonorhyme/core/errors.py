"""
錯誤類型

讀音取得失敗一律以型別化例外回報，並標明是哪一側的片段失敗。
「無法判定」與「沒有押韻」是兩回事，引擎不會把前者默默轉成 False。
"""

from typing import Literal, Optional

Side = Literal["first", "second"]
FailureReason = Literal["provider_unavailable", "no_tokens", "empty_reading"]


class PhonorhymeError(Exception):
    """phonorhyme 所有例外的基底類別"""


class ReadingExtractionFailed(PhonorhymeError):
    """
    讀音取得失敗

    Attributes:
        reason: 失敗原因代碼
        side: 失敗的片段位置 ("first" / "second")，單獨呼叫聚合器時為 None
        fragment: 失敗的原始片段
    """

    reason: FailureReason

    def __init__(
        self,
        message: str,
        *,
        reason: FailureReason,
        side: Optional[Side] = None,
        fragment: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.side = side
        self.fragment = fragment

    def __str__(self) -> str:
        if self.side is None:
            return self.message
        return f"[{self.side} fragment {self.fragment!r}] {self.message}"


class ProviderInitializationFailed(ReadingExtractionFailed):
    """讀音提供者的資源 (分詞器、辭典) 無法載入"""

    def __init__(self, message: str, *, side: Optional[Side] = None, fragment: Optional[str] = None):
        super().__init__(message, reason="provider_unavailable", side=side, fragment=fragment)


class NoReadingAvailable(ReadingExtractionFailed):
    """提供者有執行，但沒有產生任何可用讀音"""

    def __init__(
        self,
        message: str,
        *,
        reason: Literal["no_tokens", "empty_reading"],
        side: Optional[Side] = None,
        fragment: Optional[str] = None,
    ):
        super().__init__(message, reason=reason, side=side, fragment=fragment)
