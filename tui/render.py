"""
tui/render.py - 라우터 상태를 rich renderable로 변환

상태는 읽기만 하고 Styles는 호출자가 넘겨준 것을 그대로 씁니다.
"""

from __future__ import annotations

from rich.cells import cell_len, set_cell_size
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from cli.i18n import enum_text, t

from .pages import Page, page_title
from .router import Router
from .state.modal import InputModal, MessageKind, MessageModal, ModalLayer, SelectModal
from .state.sections import SectionsState
from .state.table import Column, ListState
from .state.viewport import ViewportState, search_pattern
from .styles import Styles

CELL_GAP = "  "
MIN_FLEX_WIDTH = 8
MODAL_WIDTH = 64
MODAL_LIST_ROWS = 12


# =============================================================================
# 셀 / 테이블
# =============================================================================


def column_widths(columns: tuple[Column, ...], width: int) -> list[int]:
    """고정 폭 컬럼은 그대로, 폭 0 컬럼은 남은 폭을 나눠 가짐"""
    fixed = sum(c.width for c in columns if c.width)
    flex = [c for c in columns if not c.width]
    gaps = len(CELL_GAP) * max(0, len(columns) - 1)
    remaining = max(MIN_FLEX_WIDTH, width - fixed - gaps)
    share = max(MIN_FLEX_WIDTH, remaining // len(flex)) if flex else 0
    return [c.width or share for c in columns]


def fit(text: str, width: int) -> str:
    if cell_len(text) > width:
        return set_cell_size(text, max(0, width - 1)) + "…"
    return set_cell_size(text, width)


def highlight(text: Text, query: str, style) -> Text:
    """대소문자 무시 부분 문자열을 강조 (셀 내용은 유지)"""
    if query:
        text.highlight_regex(search_pattern(query), style)
    return text


def render_row(
    cells: tuple[str, ...],
    widths: list[int],
    styles: Styles,
    query: str = "",
    selected: bool = False,
) -> Text:
    line = Text(no_wrap=True, overflow="crop")
    for i, (cell, width) in enumerate(zip(cells, widths)):
        if i:
            line.append(CELL_GAP)
        line.append(highlight(Text(fit(cell, width)), query, styles.match))
    line.stylize(styles.cursor if selected else styles.row, 0, len(line))
    if selected and query:
        # 커서 배경 위에 일치 강조를 다시 올림
        line = highlight(line, query, styles.match)
    return line


def render_header_row(columns: tuple[Column, ...], widths: list[int], styles: Styles) -> Text:
    titles = CELL_GAP.join(fit(c.title, w) for c, w in zip(columns, widths))
    return Text(titles, style=styles.column_header, no_wrap=True, overflow="crop")


def render_list(model: ListState, styles: Styles, width: int, empty_message: str) -> RenderableType:
    widths = column_widths(model.columns, width)
    lines = [render_header_row(model.columns, widths, styles)]
    if not model.rows:
        lines.append(Text(empty_message, style=styles.muted))
    for index in model.visible_rows():
        lines.append(render_row(model.rows[index], widths, styles, model.query, index == model.cursor))
    return Group(*lines)


def render_viewport(model: ViewportState) -> RenderableType:
    return model.visible_lines()


def render_sections(model: SectionsState, styles: Styles, width: int) -> RenderableType:
    lines: list[Text] = []
    for si, section in enumerate(model.sections):
        active = si == model.section
        title = Text(("▶ " if active else "  ") + section.title, style=styles.section_active if active else styles.section_title)
        if section.unavailable:
            title.append(f" ({t('dash.unavailable')})", style=styles.unavailable)
        else:
            title.append(f" ({len(section.rows)})", style=styles.muted)
        lines.append(title)

        widths = column_widths(section.columns, width)
        lines.append(render_header_row(section.columns, widths, styles))
        if not section.rows:
            lines.append(Text("  " + t("dash.no_results"), style=styles.muted))
        for ri, cells in enumerate(section.rows):
            selected = active and ri == model.row
            lines.append(render_row(cells, widths, styles, model.query, selected))
        lines.append(Text(""))

    window = lines[model.offset : model.offset + max(1, model.height)]
    return Group(*window)


# =============================================================================
# 화면 구성 요소
# =============================================================================


def render_header(router: Router, styles: Styles) -> Text:
    header = Text(no_wrap=True, overflow="crop", style=styles.header)
    header.append(" awsdash ")
    header.append(f"│ {t('dash.profile')}: {router.profile_name} ")
    header.append(f"│ {t('dash.region')}: {router.region} ")
    header.append(f"│ {page_title(router.page)}")
    if router.loading:
        header.append(f"  {t('dash.loading')}", style=styles.loading)
    header.pad_right(max(0, router.width - header.cell_len))
    return header


def _match_info(model) -> str:
    query = getattr(model, "query", "")
    if not query:
        return ""
    if getattr(model, "match_count", 0) == 0:
        return t("dash.search_no_match", query=query)
    index = model.match_index if isinstance(model, ViewportState) else model.match_pos
    return t("dash.search_info", query=query, current=index + 1, total=model.match_count)


def _hints(router: Router) -> str:
    spec = router.spec
    if spec.kind == "menu":
        return t("dash.hint_menu")
    if spec.kind == "viewport":
        return t("dash.hint_viewport")
    if spec.kind == "finder":
        return t("dash.hint_finder")
    if spec.kind == "sections":
        return t("dash.hint_detail")
    hint = t("dash.hint_list")
    if spec.paged:
        hint += " | " + t("dash.hint_paging")
    if spec.shortcuts:
        hint += " | " + " ".join(f"{k}:{page_title(p)}" for k, p in spec.shortcuts.items())
    return hint


def render_status(router: Router, styles: Styles) -> Text:
    status = Text(no_wrap=True, overflow="crop", style=styles.status)
    if router.search.active:
        status.append(" /", style=styles.status_key)
        status.append(router.search.text + "█")
    else:
        info = _match_info(router.frame.model)
        if info:
            status.append(f" {info} ", style=styles.status_key)
        status.append(" " + _hints(router))
    status.pad_right(max(0, router.width - status.cell_len))
    return status


def render_finder_summary(router: Router, styles: Styles) -> Text:
    frame = router.frame
    summary = Text(no_wrap=True, overflow="crop")
    result = frame.result
    query = result.query if result else frame.query
    summary.append(f"{t('dash.finder_result')}: ", style=styles.title)
    summary.append(query)
    if result is not None:
        ips = ", ".join(result.resolved_ips) or t("dash.finder_unresolved")
        summary.append(f" → {ips}", style=styles.muted)
        summary.append("\n")
        summary.append(t("dash.finder_total", count=result.total_count()), style=styles.section_title)
    else:
        summary.append("\n")
    return summary


def render_body(router: Router, styles: Styles) -> RenderableType:
    frame = router.frame
    model = frame.model

    if frame.page == Page.FINDER_RESULTS:
        summary = render_finder_summary(router, styles)
        if frame.loading:
            return Group(summary, Text(t("dash.finder_searching"), style=styles.loading))
        return Group(summary, render_sections(model, styles, router.width))

    if frame.loading:
        return Text(t("dash.loading"), style=styles.loading)
    if isinstance(model, ListState):
        return render_list(model, styles, router.width, t("dash.no_items"))
    if isinstance(model, ViewportState):
        return render_viewport(model)
    if isinstance(model, SectionsState):
        return render_sections(model, styles, router.width)
    return Text("")


# =============================================================================
# 모달
# =============================================================================


def _border_for(modal, styles: Styles) -> str:
    if isinstance(modal, MessageModal):
        return {
            MessageKind.INFO: styles.modal_info,
            MessageKind.ERROR: styles.modal_error,
            MessageKind.SUCCESS: styles.modal_success,
        }[modal.kind]
    return styles.modal_border


def _message_title(modal: MessageModal) -> str:
    if modal.title:
        return modal.title
    return enum_text("dash.modal", modal.kind)


def _select_body(modal: SelectModal, styles: Styles) -> Text:
    body = Text(no_wrap=True, overflow="ellipsis")
    if modal.loading:
        body.append(t("dash.loading"), style=styles.loading)
        return body

    items = modal.visible_items
    if modal.filtering or modal.filter_text:
        body.append(f"/{modal.filter_text}", style=styles.status_key)
        if modal.filtering:
            body.append("█")
        body.append("\n")
    if not items:
        body.append(t("dash.no_items"), style=styles.muted)
        return body

    start = max(0, min(modal.selected - MODAL_LIST_ROWS // 2, len(items) - MODAL_LIST_ROWS))
    for index in range(start, min(len(items), start + MODAL_LIST_ROWS)):
        item = items[index]
        line = Text(("> " if index == modal.selected else "  ") + item)
        if index == modal.selected:
            line.stylize(styles.modal_selected)
        if item == modal.current:
            line.append(f" ({t('dash.current')})", style=styles.modal_current)
        body.append_text(line)
        body.append("\n")
    body.append(t("dash.hint_select"), style=styles.muted)
    return body


def _input_body(modal: InputModal, styles: Styles) -> Text:
    body = Text()
    if modal.prompt:
        body.append(modal.prompt + "\n", style=styles.muted)
    body.append("> ", style=styles.status_key)
    body.append(modal.text + "█")
    body.append("\n" + t("dash.hint_input"), style=styles.muted)
    return body


def render_modal(layer: ModalLayer, styles: Styles) -> RenderableType | None:
    modal = layer.modal
    if not layer.visible or modal is None:
        return None

    if isinstance(modal, MessageModal):
        body = Text(modal.message)
        body.append("\n\n" + t("dash.hint_message"), style=styles.muted)
        title = _message_title(modal)
    elif isinstance(modal, SelectModal):
        body = _select_body(modal, styles)
        title = modal.title
    else:
        body = _input_body(modal, styles)
        title = modal.title

    return Panel(body, title=title, border_style=_border_for(modal, styles), width=MODAL_WIDTH, padding=(1, 2))
