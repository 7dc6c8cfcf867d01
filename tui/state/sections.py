"""
tui/state/sections.py - 여러 섹션으로 나뉜 테이블 상태

Finder 결과(카테고리별 섹션)와 인스턴스 상세(항목 그룹별 섹션)에서 사용합니다.
커서는 (섹션, 행) 쌍이며 모든 섹션이 공유합니다.

키:
    tab / shift+tab     다음/이전 섹션 (비어 있지 않은 섹션만, 첫 행으로)
    down/j, up/k        섹션 안에서 이동, 경계에서 인접한 섹션으로 넘어감
    home/g, end/G       처음/끝
    enter               선택 (Select 이벤트)
    yy                  행 복사 (CopyText 이벤트)

화면 배치 (섹션마다):
    제목 1줄, 컬럼 헤더 1줄, 행들 (없으면 안내 1줄), 빈 줄 1줄
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .events import CopyText, Select, WidgetEvent
from .table import Column
from .yank import YankGesture

ROW_SEPARATOR = " | "


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    columns: tuple[Column, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()
    payloads: tuple[Any, ...] = ()
    unavailable: bool = False
    copy_value_only: bool = False

    def __len__(self) -> int:
        return len(self.rows)

    def copy_text(self, row: int) -> str:
        cells = self.rows[row]
        if self.copy_value_only:
            return cells[-1]
        return ROW_SEPARATOR.join(cells)


def section_height(section: Section) -> int:
    return 2 + max(1, len(section.rows)) + 1


@dataclass(frozen=True)
class SectionsState:
    sections: tuple[Section, ...] = ()
    section: int = 0
    row: int = 0
    offset: int = 0
    height: int = 10
    query: str = ""
    matches: tuple[tuple[int, int], ...] = ()
    match_pos: int = -1
    yank: YankGesture = field(default_factory=YankGesture)

    # -- 조회 ---------------------------------------------------------------

    def _non_empty(self) -> list[int]:
        return [i for i, s in enumerate(self.sections) if s.rows]

    @property
    def has_rows(self) -> bool:
        return bool(self._non_empty())

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def no_match(self) -> bool:
        return bool(self.query) and not self.matches

    @property
    def total_lines(self) -> int:
        return sum(section_height(s) for s in self.sections)

    def cursor_line(self) -> int:
        line = sum(section_height(s) for s in self.sections[: self.section])
        return line + 2 + self.row

    def selected_payload(self) -> Any:
        if not self.sections:
            return None
        current = self.sections[self.section]
        if not current.rows:
            return None
        return current.payloads[self.row]

    # -- 전이 ---------------------------------------------------------------

    def set_sections(self, sections: list[Section] | tuple[Section, ...]) -> SectionsState:
        state = replace(
            self,
            sections=tuple(sections),
            section=0,
            row=0,
            offset=0,
            query="",
            matches=(),
            match_pos=-1,
        )
        non_empty = state._non_empty()
        if non_empty:
            state = replace(state, section=non_empty[0])
        return state

    def _ensure_visible(self) -> SectionsState:
        height = max(1, self.height)
        line = self.cursor_line()
        offset = self.offset
        # 섹션 제목과 헤더까지 보이도록 row 0에서는 제목 줄 기준
        top = line - 2 - self.row if self.row == 0 else line
        if top < offset:
            offset = top
        elif line >= offset + height:
            offset = line - height + 1
        offset = min(max(offset, 0), max(0, self.total_lines - height))
        return replace(self, offset=offset)

    def move_to(self, section: int, row: int) -> SectionsState:
        if not self.sections:
            return self
        section = min(max(section, 0), len(self.sections) - 1)
        count = len(self.sections[section].rows)
        row = min(max(row, 0), max(0, count - 1))
        return replace(self, section=section, row=row)._ensure_visible()

    def move(self, delta: int) -> SectionsState:
        """섹션 경계에서 인접한 비어 있지 않은 섹션으로 넘어감"""
        if not self.has_rows:
            return self
        count = len(self.sections[self.section].rows)
        target = self.row + delta
        if 0 <= target < count:
            return self.move_to(self.section, target)

        non_empty = self._non_empty()
        if target >= count:
            following = [i for i in non_empty if i > self.section]
            if following:
                return self.move_to(following[0], 0)
            return self.move_to(self.section, count - 1)

        preceding = [i for i in non_empty if i < self.section]
        if preceding:
            prev = preceding[-1]
            return self.move_to(prev, len(self.sections[prev].rows) - 1)
        return self.move_to(self.section, 0)

    def next_section(self) -> SectionsState:
        non_empty = self._non_empty()
        if not non_empty:
            return self
        following = [i for i in non_empty if i > self.section]
        return self.move_to(following[0] if following else non_empty[0], 0)

    def prev_section(self) -> SectionsState:
        non_empty = self._non_empty()
        if not non_empty:
            return self
        preceding = [i for i in non_empty if i < self.section]
        return self.move_to(preceding[-1] if preceding else non_empty[-1], 0)

    def top(self) -> SectionsState:
        non_empty = self._non_empty()
        if not non_empty:
            return replace(self, offset=0)
        return self.move_to(non_empty[0], 0)

    def bottom(self) -> SectionsState:
        non_empty = self._non_empty()
        if not non_empty:
            return self
        last = non_empty[-1]
        return self.move_to(last, len(self.sections[last].rows) - 1)

    def resize(self, height: int) -> SectionsState:
        return replace(self, height=max(1, height))._ensure_visible()

    def search(self, query: str) -> SectionsState:
        if not query:
            return replace(self, query="", matches=(), match_pos=-1)
        needle = query.lower()
        matches = tuple(
            (si, ri)
            for si, section in enumerate(self.sections)
            for ri, row in enumerate(section.rows)
            if any(needle in cell.lower() for cell in row)
        )
        state = replace(self, query=query, matches=matches, match_pos=0 if matches else -1)
        if matches:
            state = state.move_to(*matches[0])
        return state

    def next_match(self) -> SectionsState:
        if not self.matches:
            return self
        pos = (self.match_pos + 1) % len(self.matches)
        return replace(self, match_pos=pos).move_to(*self.matches[pos])

    def prev_match(self) -> SectionsState:
        if not self.matches:
            return self
        pos = (self.match_pos - 1) % len(self.matches)
        return replace(self, match_pos=pos).move_to(*self.matches[pos])

    def handle_key(self, key: str, now: float) -> tuple[SectionsState, WidgetEvent | None]:
        if key in ("down", "j"):
            return self.move(1), None
        if key in ("up", "k"):
            return self.move(-1), None
        if key == "tab":
            return self.next_section(), None
        if key == "shift+tab":
            return self.prev_section(), None
        if key in ("home", "g"):
            return self.top(), None
        if key in ("end", "G"):
            return self.bottom(), None
        if key == "enter":
            payload = self.selected_payload()
            if payload is None:
                return self, None
            return self, Select(payload)
        if key == "y":
            yank, fired = self.yank.press(now)
            state = replace(self, yank=yank)
            if fired and self.has_rows and self.sections[self.section].rows:
                return state, CopyText(self.sections[self.section].copy_text(self.row))
            return state, None
        return self, None
