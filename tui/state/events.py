"""
tui/state/events.py - 위젯이 호출자에게 돌려주는 이벤트

위젯은 부수효과를 직접 실행하지 않고 이벤트만 반환합니다.
라우터가 이를 네비게이션이나 이펙트로 변환합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Select:
    """Enter로 선택된 행의 payload"""

    payload: Any


@dataclass(frozen=True)
class CopyRecord:
    """레코드 전체를 JSON으로 복사"""

    payload: Any


@dataclass(frozen=True)
class CopyText:
    text: str


@dataclass(frozen=True)
class OpenEditor:
    text: str


@dataclass(frozen=True)
class OpenPager:
    text: str


WidgetEvent = Select | CopyRecord | CopyText | OpenEditor | OpenPager
