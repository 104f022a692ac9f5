"""
事件模型（Event Model）

引擎預設不直接輸出到 stdout。
若需要取得「本次比對結果」或「哪一側讀音失敗」等資訊，請使用事件回呼（event handler）。

設計原則：
- 預設 fail_policy="raise"：讀音失敗直接拋出型別化例外。
- 降級（degrade）必須可被觀察：會發出 reading_failed 與 degraded 事件。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class RhymeEvent(TypedDict, total=False):
    type: Literal["comparison", "reading_failed", "degraded"]
    engine: str
    trace_id: str

    # comparison
    similarity: float
    rhymes: bool
    matched: int
    window: int
    skeleton_a: str
    skeleton_b: str

    # reading_failed / degraded
    side: Literal["first", "second"]
    fragment: str
    reason: Literal["provider_unavailable", "no_tokens", "empty_reading"]
    fallback: Literal["zero_score", "none"]
    exception_type: str
    exception_message: str


RhymeEventHandler = Callable[[RhymeEvent], None]
