"""
tui/styles.py - 대시보드 스타일

시작 시 한 번 만든 Styles 인스턴스를 위젯 상태와 렌더러에 전달합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Styles:
    # 크롬
    header: Style = Style(color="#FAFAFA", bgcolor="#7C3AED", bold=True)
    status: Style = Style(color="#D1D5DB", bgcolor="#1F2937")
    status_key: Style = Style(color="#FBBF24", bgcolor="#1F2937", bold=True)
    title: Style = Style(color="#7C3AED", bold=True)
    muted: Style = Style(color="#6B7280")
    loading: Style = Style(color="#06B6D4", bold=True)

    # 테이블
    column_header: Style = Style(color="#A78BFA", bold=True, underline=True)
    cursor: Style = Style(color="#FAFAFA", bgcolor="#4C1D95", bold=True)
    row: Style = Style(color="#E5E7EB")
    match: Style = Style(color="#111827", bgcolor="#CA8A04", bold=True)
    section_title: Style = Style(color="#06B6D4", bold=True)
    section_active: Style = Style(color="#FBBF24", bold=True)
    unavailable: Style = Style(color="#EF4444", italic=True)

    # JSON 하이라이트
    json_key: Style = Style(color="#06B6D4")
    json_string: Style = Style(color="#10B981")
    json_number: Style = Style(color="#F59E0B")
    json_bool: Style = Style(color="#7C3AED")
    json_null: Style = Style(color="#6B7280", italic=True)

    # 모달
    modal_border: str = "#7C3AED"
    modal_info: str = "#06B6D4"
    modal_error: str = "#EF4444"
    modal_success: str = "#10B981"
    modal_selected: Style = Style(color="#FAFAFA", bgcolor="#4C1D95", bold=True)
    modal_current: Style = Style(color="#10B981", italic=True)


DEFAULT_STYLES = Styles()
