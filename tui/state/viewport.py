"""
tui/state/viewport.py - JSON 상세 뷰포트 상태

구조화된 데이터를 2칸 들여쓰기 JSON으로 직렬화하고 rich JSONHighlighter로
키, 문자열, 숫자, 불리언, null을 색으로 구분한 렌더링을 함께 보관합니다.

검색은 원문에서 대소문자 무시 정규식으로 일치 개수를 세고, n/N으로 이동할 때마다
원문을 처음부터 다시 훑어 N번째 위치를 찾은 뒤 그 줄로 스크롤합니다.
소문자 변환본이 아니라 원문 위에서 찾으므로 오프셋이 항상 원문과 일치합니다.

불변 조건: match_index는 -1(검색 없음) 또는 [0, match_count) 범위.

키:
    up/k, down/j, pageup/ctrl+u, pagedown/ctrl+d, home/g, end/G  스크롤
    yy  전체 복사 / e  에디터 / v  페이저
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, replace
from typing import Any

from rich.highlighter import JSONHighlighter
from rich.text import Span, Text

from ..styles import DEFAULT_STYLES, Styles
from .events import CopyText, OpenEditor, OpenPager, WidgetEvent
from .yank import YankGesture

_HIGHLIGHTER = JSONHighlighter()

# JSONHighlighter 스타일 이름 -> Styles 필드
_JSON_STYLE_FIELDS = {
    "json.key": "json_key",
    "json.str": "json_string",
    "json.number": "json_number",
    "json.bool_true": "json_bool",
    "json.bool_false": "json_bool",
    "json.null": "json_null",
}


def to_json(data: Any) -> str:
    """뷰포트, 클립보드, 에디터가 공유하는 직렬화"""
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def search_pattern(query: str) -> re.Pattern[str]:
    """대소문자 무시 리터럴 검색 패턴"""
    return re.compile(re.escape(query), re.IGNORECASE)


def highlight_json(raw: str, styles: Styles) -> Text:
    text = Text(raw, no_wrap=True)
    _HIGHLIGHTER.highlight(text)
    text.spans = [
        Span(span.start, span.end, getattr(styles, _JSON_STYLE_FIELDS[span.style]))
        for span in text.spans
        if span.style in _JSON_STYLE_FIELDS
    ]
    return text


def find_occurrence(raw: str, query: str, n: int) -> int:
    """n번째(0부터) 겹치지 않는 일치 위치, 없으면 -1"""
    if not query:
        return -1
    for i, match in enumerate(search_pattern(query).finditer(raw)):
        if i == n:
            return match.start()
    return -1


@dataclass(frozen=True)
class ViewportState:
    data: Any = None
    raw: str = ""
    base: Text = field(default_factory=Text, compare=False)
    rendered: Text = field(default_factory=Text, compare=False)
    offset: int = 0
    height: int = 10
    query: str = ""
    match_count: int = 0
    match_index: int = -1
    yank: YankGesture = field(default_factory=YankGesture)
    styles: Styles = field(default=DEFAULT_STYLES, compare=False, repr=False)

    @property
    def line_count(self) -> int:
        return self.raw.count("\n") + 1 if self.raw else 0

    @property
    def max_offset(self) -> int:
        return max(0, self.line_count - max(1, self.height))

    def set_content(self, data: Any) -> ViewportState:
        raw = to_json(data)
        base = highlight_json(raw, self.styles)
        return replace(
            self,
            data=data,
            raw=raw,
            base=base,
            rendered=base,
            offset=0,
            query="",
            match_count=0,
            match_index=-1,
        )

    def scroll_to(self, offset: int) -> ViewportState:
        return replace(self, offset=min(max(offset, 0), self.max_offset))

    def scroll(self, delta: int) -> ViewportState:
        return self.scroll_to(self.offset + delta)

    def resize(self, height: int) -> ViewportState:
        resized = replace(self, height=max(1, height))
        return resized.scroll_to(resized.offset)

    def _show_line(self, line: int) -> ViewportState:
        height = max(1, self.height)
        if line < self.offset:
            return self.scroll_to(line)
        if line >= self.offset + height:
            return self.scroll_to(line - height + 1)
        return self

    def search(self, query: str) -> ViewportState:
        if not query:
            return replace(self, query="", match_count=0, match_index=-1, rendered=self.base)

        rendered = self.base.copy()
        count = rendered.highlight_regex(search_pattern(query), self.styles.match)
        if count == 0:
            return replace(self, query=query, match_count=0, match_index=-1, rendered=self.base)

        state = replace(
            self,
            query=query,
            match_count=count,
            match_index=0,
            rendered=rendered,
        )
        return state._scroll_to_match(0)

    def _scroll_to_match(self, n: int) -> ViewportState:
        pos = find_occurrence(self.raw, self.query, n)
        if pos == -1:
            return self
        return self._show_line(self.raw.count("\n", 0, pos))

    def next_match(self) -> ViewportState:
        if self.match_count == 0:
            return self
        index = (self.match_index + 1) % self.match_count
        return replace(self, match_index=index)._scroll_to_match(index)

    def prev_match(self) -> ViewportState:
        if self.match_count == 0:
            return self
        index = (self.match_index - 1) % self.match_count
        return replace(self, match_index=index)._scroll_to_match(index)

    def visible_lines(self) -> Text:
        lines = self.rendered.split("\n", allow_blank=True)
        window = lines[self.offset : self.offset + max(1, self.height)]
        return Text("\n", no_wrap=True).join(window)

    def handle_key(self, key: str, now: float) -> tuple[ViewportState, WidgetEvent | None]:
        height = max(1, self.height)
        if key in ("up", "k"):
            return self.scroll(-1), None
        if key in ("down", "j"):
            return self.scroll(1), None
        if key in ("pageup", "ctrl+u"):
            return self.scroll(-height), None
        if key in ("pagedown", "ctrl+d"):
            return self.scroll(height), None
        if key in ("home", "g"):
            return self.scroll_to(0), None
        if key in ("end", "G"):
            return self.scroll_to(self.max_offset), None
        if key == "y":
            yank, fired = self.yank.press(now)
            state = replace(self, yank=yank)
            if fired:
                return state, CopyText(self.raw)
            return state, None
        if key == "e":
            return self, OpenEditor(self.raw)
        if key == "v":
            return self, OpenPager(self.raw)
        return self, None
