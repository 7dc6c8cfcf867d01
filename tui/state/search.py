"""
tui/state/search.py - '/' 인라인 검색 프롬프트
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchPrompt:
    active: bool = False
    text: str = ""

    def start(self) -> SearchPrompt:
        return SearchPrompt(active=True)

    def handle_key(self, key: str) -> tuple[SearchPrompt, str | None]:
        """(새 상태, 제출된 검색어). Esc는 취소, 빈 검색어 제출은 검색 해제"""
        if key == "escape":
            return SearchPrompt(), None
        if key == "enter":
            return SearchPrompt(), self.text
        if key == "backspace":
            return SearchPrompt(active=True, text=self.text[:-1]), None
        if len(key) == 1 and key.isprintable():
            return SearchPrompt(active=True, text=self.text + key), None
        return self, None
