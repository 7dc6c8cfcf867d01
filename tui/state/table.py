"""
tui/state/table.py - 리스트(테이블) 위젯 상태

행은 이미 렌더링된 셀 문자열 튜플이고, payloads는 행과 같은 순서의
원본 레코드입니다 (복사와 네비게이션에 사용).

불변 조건:
    - 행이 있으면 0 <= cursor < len(rows)
    - offset <= cursor < offset + height (커서는 항상 보이는 창 안)

키:
    up/k, down/j        한 줄 이동
    pageup/ctrl+u       한 페이지 위
    pagedown/ctrl+d     한 페이지 아래
    home/g, end/G       처음/끝
    enter               선택 (Select 이벤트)
    yy                  행 복사 (CopyRecord 이벤트)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .events import CopyRecord, Select, WidgetEvent
from .yank import YankGesture


@dataclass(frozen=True)
class Column:
    title: str
    width: int = 0  # 0이면 남은 폭 사용


@dataclass(frozen=True)
class ListState:
    columns: tuple[Column, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()
    payloads: tuple[Any, ...] = ()
    cursor: int = 0
    offset: int = 0
    height: int = 10
    query: str = ""
    matches: tuple[int, ...] = ()
    match_pos: int = -1
    yank: YankGesture = field(default_factory=YankGesture)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def no_match(self) -> bool:
        return bool(self.query) and not self.matches

    def set_rows(self, rows: list[tuple[str, ...]] | tuple, payloads: list[Any] | tuple | None = None) -> ListState:
        """행 교체. 커서, 스크롤, 검색 초기화"""
        rows = tuple(tuple(str(cell) for cell in row) for row in rows)
        payloads = tuple(payloads) if payloads is not None else rows
        return replace(
            self,
            rows=rows,
            payloads=payloads,
            cursor=0,
            offset=0,
            query="",
            matches=(),
            match_pos=-1,
        )

    def _visible(self) -> int:
        return max(1, self.height)

    def move_to(self, index: int) -> ListState:
        if not self.rows:
            return self
        cursor = min(max(index, 0), len(self.rows) - 1)
        offset = self.offset
        height = self._visible()
        if cursor < offset:
            offset = cursor
        elif cursor >= offset + height:
            offset = cursor - height + 1
        return replace(self, cursor=cursor, offset=offset)

    def move_cursor(self, delta: int) -> ListState:
        return self.move_to(self.cursor + delta)

    def page_up(self) -> ListState:
        return self.move_cursor(-self._visible())

    def page_down(self) -> ListState:
        return self.move_cursor(self._visible())

    def home(self) -> ListState:
        return self.move_to(0)

    def end(self) -> ListState:
        return self.move_to(len(self.rows) - 1)

    def resize(self, height: int) -> ListState:
        resized = replace(self, height=max(1, height))
        if not self.rows:
            return replace(resized, offset=0)
        # 커서가 창 밖으로 나가지 않도록 offset 재계산
        max_offset = max(0, len(self.rows) - resized.height)
        resized = replace(resized, offset=min(resized.offset, max_offset))
        return resized.move_to(resized.cursor)

    def search(self, query: str) -> ListState:
        """대소문자 무시 부분 문자열 검색. 일치가 없으면 커서는 그대로"""
        if not query:
            return replace(self, query="", matches=(), match_pos=-1)

        needle = query.lower()
        matches = tuple(i for i, row in enumerate(self.rows) if any(needle in cell.lower() for cell in row))
        state = replace(self, query=query, matches=matches, match_pos=0 if matches else -1)
        if matches:
            state = state.move_to(matches[0])
        return state

    def next_match(self) -> ListState:
        if not self.matches:
            return self
        pos = (self.match_pos + 1) % len(self.matches)
        return replace(self, match_pos=pos).move_to(self.matches[pos])

    def prev_match(self) -> ListState:
        if not self.matches:
            return self
        pos = (self.match_pos - 1) % len(self.matches)
        return replace(self, match_pos=pos).move_to(self.matches[pos])

    def selected_payload(self) -> Any:
        if not self.rows:
            return None
        return self.payloads[self.cursor]

    def visible_rows(self) -> range:
        return range(self.offset, min(len(self.rows), self.offset + self._visible()))

    def handle_key(self, key: str, now: float) -> tuple[ListState, WidgetEvent | None]:
        if key in ("up", "k"):
            return self.move_cursor(-1), None
        if key in ("down", "j"):
            return self.move_cursor(1), None
        if key in ("pageup", "ctrl+u"):
            return self.page_up(), None
        if key in ("pagedown", "ctrl+d"):
            return self.page_down(), None
        if key in ("home", "g"):
            return self.home(), None
        if key in ("end", "G"):
            return self.end(), None
        if key == "enter":
            if not self.rows:
                return self, None
            return self, Select(self.selected_payload())
        if key == "y":
            yank, fired = self.yank.press(now)
            state = replace(self, yank=yank)
            if fired and self.rows:
                return state, CopyRecord(self.selected_payload())
            return state, None
        return self, None
