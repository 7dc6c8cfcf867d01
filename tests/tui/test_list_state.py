"""
tests/tui/test_list_state.py - 리스트 위젯 상태 테스트
"""

import pytest

from tui.state.events import CopyRecord, Select
from tui.state.table import Column, ListState
from tui.state.yank import YANK_WINDOW, YankGesture


def make_list(count: int = 30, height: int = 5) -> ListState:
    rows = [(f"i-{n:03d}", f"host-{n}", "running" if n % 2 else "stopped") for n in range(count)]
    payloads = [{"id": n} for n in range(count)]
    state = ListState(columns=(Column("ID", 6), Column("Name", 10), Column("State")))
    return state.resize(height).set_rows(rows, payloads)


def assert_cursor_visible(state: ListState) -> None:
    assert 0 <= state.cursor < len(state.rows)
    assert state.offset <= state.cursor < state.offset + state.height


# =============================================================================
# 커서 이동
# =============================================================================


class TestCursorMovement:
    """커서 이동과 스크롤"""

    def test_set_rows_resets_cursor(self):
        state = make_list().move_to(12).search("host-1")
        state = state.set_rows([("a",), ("b",)])
        assert state.cursor == 0
        assert state.offset == 0
        assert state.query == ""
        assert state.payloads == (("a",), ("b",))

    def test_down_scrolls_window(self):
        state = make_list(height=5)
        for _ in range(7):
            state, _ = state.handle_key("j", 0.0)
        assert state.cursor == 7
        assert state.offset == 3
        assert_cursor_visible(state)

    def test_up_at_top_stays(self):
        state, event = make_list().handle_key("k", 0.0)
        assert state.cursor == 0
        assert event is None

    def test_page_down_and_up(self):
        state, _ = make_list(height=5).handle_key("ctrl+d", 0.0)
        assert state.cursor == 5
        state, _ = state.handle_key("pageup", 0.0)
        assert state.cursor == 0

    def test_home_and_end(self):
        state, _ = make_list(count=30, height=5).handle_key("G", 0.0)
        assert state.cursor == 29
        assert state.offset == 25
        state, _ = state.handle_key("g", 0.0)
        assert state.cursor == 0
        assert state.offset == 0

    @pytest.mark.parametrize("keys", [["j"] * 40, ["ctrl+d"] * 9 + ["k"] * 3, ["G", "ctrl+u", "j", "g", "end"]])
    def test_cursor_always_visible(self, keys):
        state = make_list(count=30, height=4)
        for key in keys:
            state, _ = state.handle_key(key, 0.0)
            assert_cursor_visible(state)

    def test_resize_keeps_cursor_visible(self):
        state = make_list(count=30, height=10).move_to(9)
        state = state.resize(3)
        assert_cursor_visible(state)
        state = state.resize(50)
        assert state.offset == 0
        assert_cursor_visible(state)

    def test_empty_list_ignores_movement(self):
        state = ListState().resize(5)
        state, event = state.handle_key("j", 0.0)
        assert state.cursor == 0
        assert event is None
        assert state.selected_payload() is None

    def test_visible_rows_window(self):
        state = make_list(count=8, height=5).move_to(7)
        assert list(state.visible_rows()) == [3, 4, 5, 6, 7]


# =============================================================================
# 선택 / 복사
# =============================================================================


class TestEvents:
    """enter 선택과 yy 복사"""

    def test_enter_selects_payload(self):
        state = make_list().move_to(3)
        _, event = state.handle_key("enter", 0.0)
        assert event == Select({"id": 3})

    def test_enter_on_empty_list(self):
        _, event = ListState().handle_key("enter", 0.0)
        assert event is None

    def test_double_y_copies_record(self):
        state = make_list().move_to(2)
        state, first = state.handle_key("y", 10.0)
        state, second = state.handle_key("y", 10.2)
        assert first is None
        assert second == CopyRecord({"id": 2})

    def test_slow_double_y_does_not_copy(self):
        state = make_list()
        state, _ = state.handle_key("y", 10.0)
        state, event = state.handle_key("y", 10.0 + YANK_WINDOW + 0.1)
        assert event is None

    def test_other_key_between_presses_keeps_window(self):
        state = make_list()
        state, _ = state.handle_key("y", 1.0)
        state, _ = state.handle_key("x", 1.1)
        _, event = state.handle_key("y", 1.2)
        assert isinstance(event, CopyRecord)


class TestYankGesture:
    """yy 제스처 카운터"""

    def test_fires_on_second_press_and_resets(self):
        gesture, fired = YankGesture().press(1.0)
        assert not fired
        assert gesture.count == 1
        gesture, fired = gesture.press(1.3)
        assert fired
        assert gesture.count == 0

    def test_third_press_starts_over(self):
        gesture, _ = YankGesture().press(1.0)
        gesture, _ = gesture.press(1.1)
        gesture, fired = gesture.press(1.2)
        assert not fired
        assert gesture.count == 1

    def test_first_press_at_time_zero(self):
        gesture, fired = YankGesture().press(0.0)
        assert not fired
        assert gesture.count == 1


# =============================================================================
# 검색
# =============================================================================


class TestSearch:
    """대소문자 무시 부분 문자열 검색"""

    def test_search_jumps_to_first_match(self):
        state = make_list(height=5).search("HOST-2")
        assert state.matches[0] == 2
        assert state.cursor == 2
        assert state.match_pos == 0

    def test_next_and_prev_match_wrap(self):
        state = make_list(count=30).search("host-1")
        # host-1, host-10 ... host-19
        assert state.match_count == 11
        state = state.prev_match()
        assert state.cursor == 19
        state = state.next_match()
        assert state.cursor == 1

    def test_no_match_keeps_cursor(self):
        state = make_list().move_to(4).search("nothing")
        assert state.cursor == 4
        assert state.no_match
        assert state.match_pos == -1
        assert state.next_match() == state

    def test_empty_query_clears(self):
        state = make_list().search("host").search("")
        assert state.query == ""
        assert state.matches == ()
        assert state.match_pos == -1
