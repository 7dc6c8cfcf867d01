"""
cli/i18n/messages/__init__.py - 메시지 레지스트리

하위 모듈의 메시지 dict를 네임스페이스(menu, dash)별로 모읍니다.

구조:
    MESSAGES = {
        "menu.instances": {"ko": "...", "en": "..."},
        "dash.page_instances": {"ko": "...", "en": "..."},
        ...
    }
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """언어별 메시지"""

    ko: str
    en: str


# 전체 메시지 레지스트리
MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """네임스페이스 접두어를 붙여 MESSAGES에 등록"""
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


# register_messages 정의 이후에 import
from cli.i18n.messages.dash import DASH_MESSAGES  # noqa: E402
from cli.i18n.messages.menu import MENU_MESSAGES  # noqa: E402

register_messages("menu", MENU_MESSAGES)
register_messages("dash", DASH_MESSAGES)

__all__ = ["MESSAGES", "register_messages", "MessageDict"]
