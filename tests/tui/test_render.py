"""
tests/tui/test_render.py - 셀 렌더링 / 검색 강조 테스트
"""

from rich.text import Text

from tui.render import column_widths, fit, highlight, render_row
from tui.state.table import Column
from tui.styles import DEFAULT_STYLES


def match_texts(text: Text) -> list[str]:
    return [text.plain[s.start : s.end] for s in text.spans if s.style == DEFAULT_STYLES.match]


class TestHighlight:
    """대소문자 무시 강조"""

    def test_all_occurrences(self):
        text = highlight(Text("Web web WEB"), "web", DEFAULT_STYLES.match)
        assert match_texts(text) == ["Web", "web", "WEB"]

    def test_empty_query(self):
        text = highlight(Text("web"), "", DEFAULT_STYLES.match)
        assert text.spans == []

    def test_regex_characters_are_literal(self):
        text = highlight(Text("10.0.0.1 10a0b0c1"), "10.0", DEFAULT_STYLES.match)
        assert match_texts(text) == ["10.0"]

    def test_non_ascii_prefix(self):
        row = render_row(("İİİtarget",), [20], DEFAULT_STYLES, query="target")
        assert match_texts(row) == ["target"]


class TestCells:
    """컬럼 폭과 셀 맞춤"""

    def test_fit_truncates_with_ellipsis(self):
        assert fit("abcdefgh", 5) == "abcd…"
        assert fit("ab", 4) == "ab  "

    def test_flex_columns_share_remaining_width(self):
        columns = (Column("ID", 10), Column("Name"), Column("Note"))
        widths = column_widths(columns, 50)
        assert widths[0] == 10
        assert widths[1] == widths[2] == (50 - 10 - 4) // 2
