"""
cli/i18n/__init__.py - 다국어(i18n) 모듈

대시보드의 모든 화면 문자열을 한국어(ko, 기본) / 영어(en)로 제공합니다.

구조:
    - 메시지는 네임스페이스(menu, dash)별로 등록
    - t()는 format 문자열 보간 지원, 키가 없으면 키 자체를 반환
    - 언어는 시작 시 AWSDASH_LANG으로 한 번 정하고 ContextVar에서 읽음
    - enum_text()는 Page, FinderCategory, MessageKind처럼 값이 키 접미사인
      열거형 멤버의 제목을 찾음

사용법:
    from cli.i18n import enum_text, set_lang, t

    t("dash.loading")                    # "불러오는 중..."
    t("dash.finder_total", count=5)      # "총 5개 리소스"
    enum_text("dash.page", Page.BUCKETS) # t("dash.page_buckets")

    set_lang("en")
    t("menu.instances")                  # "EC2 Instances"
"""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from enum import Enum
from typing import Any

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def get_lang() -> str:
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """지원하지 않는 언어 코드는 ko로 대체"""
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 현재 언어로 번역

    Args:
        key: "namespace.key" 형식 (예: "dash.select_profile")
        lang: 언어 강제 지정. 없으면 컨텍스트 언어 사용
        **kwargs: format 보간 인자. 빠진 인자가 있으면 템플릿 그대로 반환

    Returns:
        번역 문자열. 해당 언어가 없으면 한국어, 키가 없으면 키 자체
    """
    from cli.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        return key

    text = msg_dict.get(lang)
    if text is None:
        text = msg_dict.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, ValueError):
            text = text.format(**kwargs)
    return text


def enum_text(prefix: str, member: Enum, lang: str | None = None) -> str:
    """열거형 멤버 제목 (키: "{prefix}_{member.value}")"""
    return t(f"{prefix}_{member.value}", lang=lang)


__all__ = [
    "t",
    "enum_text",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
