"""
tui/router.py - 네비게이션 상태 머신

현재 페이지, 뒤로 가기 스택, 모달, 검색 프롬프트를 소유하고
키 입력과 비동기 완료 이벤트를 처리합니다. I/O는 하지 않고
실행할 이펙트(tui/effects.py) 목록을 반환합니다.

키 우선순위:
    1. 모달이 보이면 모든 입력은 모달로
    2. 검색 프롬프트가 활성이면 프롬프트로
    3. 전역 단축키
         Q, ctrl+c   종료
         P / R       프로필 / 리전 선택
         q, escape   뒤로 (메뉴 제외)
         /           검색 시작
         n / N       다음 / 이전 일치 (검색어가 있을 때)
         r, ctrl+r   새로고침
         ?           키 도움말
    4. 현재 페이지

비동기 조회 결과는 request_id로 프레임을 찾아 반영하고, 이미 사라진
프레임의 결과는 버립니다.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from cli.i18n import t
from core.data.types import ResourceRecord, as_record, record_data
from core.finder import FindResult

from .effects import (
    CopyToClipboard,
    Effect,
    Fetch,
    LoadChoices,
    OpenExternal,
    Quit,
    RunFinder,
    SwitchSession,
)
from .pages import MENU_ITEMS, PAGES, Page, PageSpec, build_finder_sections, detail_page_for
from .state.events import CopyRecord, CopyText, OpenEditor, OpenPager, Select, WidgetEvent
from .state.modal import (
    Cancelled,
    InputModal,
    ModalLayer,
    Selected,
    SelectModal,
    Submitted,
    error,
    handle_modal_key,
    info,
    remember,
    success,
)
from .state.navigation import NavigationStack
from .state.search import SearchPrompt
from .state.sections import SectionsState
from .state.table import ListState
from .state.viewport import ViewportState, to_json
from .styles import DEFAULT_STYLES, Styles

logger = logging.getLogger(__name__)

# 헤더 1줄 + 상태 표시줄 1줄
CHROME_ROWS = 2
# 테이블 컬럼 헤더
LIST_HEADER_ROWS = 1
# Finder 결과 요약 2줄
FINDER_HEADER_ROWS = 2

PURPOSE_PROFILE = "profile"
PURPOSE_REGION = "region"
PURPOSE_FINDER = "finder"
DEFAULT_PROFILE = "default"


@dataclass
class PageFrame:
    """페이지 하나의 인스턴스 (스택에 쌓이는 단위)"""

    page: Page
    payload: ResourceRecord | None = None
    query: str = ""
    model: Any = None
    loading: bool = False
    request_id: int = 0
    tokens: tuple[str | None, ...] = (None,)
    next_token: str | None = None
    result: FindResult | None = None


class Router:
    def __init__(
        self,
        profile: str | None,
        region: str,
        styles: Styles = DEFAULT_STYLES,
        history: tuple[str, ...] = (),
        clock: Callable[[], float] = time.monotonic,
    ):
        self.profile = profile
        self.region = region
        self.styles = styles
        self.history = tuple(history)
        self.clock = clock
        self.width = 80
        self.height = 24
        self.stack: NavigationStack[PageFrame] = NavigationStack()
        self.modal = ModalLayer()
        self.search = SearchPrompt()
        self._request_seq = 0
        self.frame = self._menu_frame()

    # -- 조회 ---------------------------------------------------------------

    @property
    def page(self) -> Page:
        return self.frame.page

    @property
    def loading(self) -> bool:
        return self.frame.loading

    @property
    def spec(self) -> PageSpec:
        return PAGES[self.frame.page]

    @property
    def body_height(self) -> int:
        return max(1, self.height - CHROME_ROWS)

    @property
    def profile_name(self) -> str:
        return self.profile or DEFAULT_PROFILE

    def _height_for(self, frame: PageFrame) -> int:
        if isinstance(frame.model, ListState):
            return max(1, self.body_height - LIST_HEADER_ROWS)
        if frame.page == Page.FINDER_RESULTS:
            return max(1, self.body_height - FINDER_HEADER_ROWS)
        return self.body_height

    def _frames(self) -> list[PageFrame]:
        return [*self.stack, self.frame]

    # -- 프레임 생성 ----------------------------------------------------------

    def _menu_frame(self) -> PageFrame:
        spec = PAGES[Page.MENU]
        rows = [(key, t(f"menu.{name}"), t(f"menu.{name}_desc")) for key, _, name in MENU_ITEMS]
        frame = PageFrame(page=Page.MENU)
        frame.model = ListState(columns=spec.columns).set_rows(rows, [page for _, page, _ in MENU_ITEMS])
        frame.model = frame.model.resize(self._height_for(frame))
        return frame

    def _viewport(self) -> ViewportState:
        return ViewportState(height=self.body_height, styles=self.styles)

    def _empty_model(self, frame: PageFrame) -> Any:
        spec = PAGES[frame.page]
        if spec.kind in ("sections", "finder"):
            model: Any = SectionsState()
        elif spec.kind == "viewport":
            model = self._viewport()
        else:
            model = ListState(columns=spec.columns)
        frame.model = model
        return model.resize(self._height_for(frame))

    def _build(self, frame: PageFrame) -> Any:
        """payload에서 동기적으로 페이지 상태 생성 (타입이 안 맞으면 TypeError)"""
        spec = PAGES[frame.page]
        model = self._empty_model(frame)
        if spec.kind == "viewport":
            return model.set_content(record_data(frame.payload))
        if spec.kind == "sections":
            return model.set_sections(spec.build(frame.payload))
        records = spec.build(frame.payload)
        return model.set_rows([spec.row(r) for r in records], records)

    def _start(self, frame: PageFrame, token: str | None = None) -> Effect:
        self._request_seq += 1
        frame.request_id = self._request_seq
        frame.loading = True
        if PAGES[frame.page].kind == "finder":
            return RunFinder(frame.request_id, frame.query)
        return Fetch(frame.request_id, frame.page, frame.payload, token)

    def _enter(self, frame: PageFrame) -> list[Effect]:
        spec = PAGES[frame.page]
        frame.loading = True
        if spec.is_async:
            frame.model = self._empty_model(frame)
            return [self._start(frame)]

        try:
            frame.model = self._build(frame)
        except TypeError as e:
            logger.info("payload mismatch on %s, showing JSON instead: %s", frame.page.value, e)
            frame.page = Page.JSON_DETAIL
            frame.model = self._viewport().set_content(record_data(frame.payload))
        frame.loading = False
        return []

    # -- 네비게이션 ------------------------------------------------------------

    def navigate_to(self, page: Page, payload: Any = None, query: str = "") -> list[Effect]:
        """payload는 ResourceRecord로 감싸서 보관 (알 수 없는 값은 RawRecord)"""
        record = as_record(payload) if payload is not None else None
        self.stack = self.stack.push(self.frame)
        self.frame = PageFrame(page=page, payload=record, query=query)
        self.search = SearchPrompt()
        return self._enter(self.frame)

    def go_back(self) -> None:
        if self.page == Page.MENU or not self.stack:
            return
        self.stack, previous = self.stack.pop()
        if previous is not None:
            self.frame = previous
            self.search = SearchPrompt()

    def clear_caches(self) -> None:
        """프로필/리전 전환 후 모든 페이지 상태 폐기"""
        self.stack = NavigationStack()
        self.frame = self._menu_frame()
        self.search = SearchPrompt()

    def resize(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(1, height)
        for frame in self._frames():
            if frame.model is not None:
                frame.model = frame.model.resize(self._height_for(frame))

    # -- 키 입력 -------------------------------------------------------------

    def handle_key(self, key: str) -> list[Effect]:
        if self.modal.visible:
            return self._modal_key(key)
        if self.search.active:
            self._search_key(key)
            return []

        if key in ("Q", "ctrl+c"):
            return [Quit()]
        if key == "P":
            return self._open_select(PURPOSE_PROFILE)
        if key == "R":
            return self._open_select(PURPOSE_REGION)
        if key in ("q", "escape"):
            self.go_back()
            return []
        if key == "?":
            self.modal = self.modal.show(info(t("dash.help_body"), title=t("dash.help_title")))
            return []

        if self.page != Page.MENU:
            model = self.frame.model
            if key == "/" and not self.loading:
                self.search = self.search.start()
                return []
            if key in ("n", "N") and getattr(model, "query", ""):
                self.frame.model = model.next_match() if key == "n" else model.prev_match()
                return []
            if key in ("r", "ctrl+r") and self.spec.is_async:
                return self.refresh()

        return self._page_key(key)

    def _search_key(self, key: str) -> None:
        self.search, submitted = self.search.handle_key(key)
        if submitted is not None and self.frame.model is not None:
            self.frame.model = self.frame.model.search(submitted)

    def _modal_key(self, key: str) -> list[Effect]:
        self.modal, outcome = handle_modal_key(self.modal, key)
        if isinstance(outcome, Selected):
            if outcome.purpose == PURPOSE_PROFILE and outcome.value != self.profile_name:
                return [SwitchSession(outcome.value, self.region)]
            if outcome.purpose == PURPOSE_REGION and outcome.value != self.region:
                return [SwitchSession(self.profile, outcome.value)]
            return []
        if isinstance(outcome, Submitted) and outcome.purpose == PURPOSE_FINDER:
            self.history = remember(self.history, outcome.text)
            return self.navigate_to(Page.FINDER_RESULTS, query=outcome.text)
        if isinstance(outcome, Cancelled):
            logger.debug("modal cancelled: %s", outcome.purpose)
        return []

    def _open_select(self, purpose: str) -> list[Effect]:
        if purpose == PURPOSE_PROFILE:
            modal = SelectModal(purpose, t("dash.select_profile"), loading=True, current=self.profile_name)
        else:
            modal = SelectModal(purpose, t("dash.select_region"), loading=True, current=self.region)
        self.modal = self.modal.show(modal)
        return [LoadChoices(purpose)]

    def open_finder_prompt(self) -> list[Effect]:
        self.modal = self.modal.show(
            InputModal(
                PURPOSE_FINDER,
                title=t("dash.finder_title"),
                prompt=t("dash.finder_prompt"),
                history=self.history,
            )
        )
        return []

    def _open_menu_item(self, page: Page) -> list[Effect]:
        if page == Page.FINDER_RESULTS:
            return self.open_finder_prompt()
        return self.navigate_to(page)

    def _shortcut_payload(self) -> Any:
        # 상세 페이지의 단축키는 페이지가 보여주는 레코드 자체를 넘긴다
        if self.spec.kind == "sections":
            return self.frame.payload
        return self.frame.model.selected_payload()

    def _page_key(self, key: str) -> list[Effect]:
        spec = self.spec
        frame = self.frame
        now = self.clock()

        if spec.kind == "menu":
            for letter, page, _ in MENU_ITEMS:
                if key == letter:
                    return self._open_menu_item(page)
            frame.model, event = frame.model.handle_key(key, now)
            if isinstance(event, Select):
                return self._open_menu_item(event.payload)
            return []

        if frame.loading:
            return []

        if key in spec.shortcuts:
            payload = self._shortcut_payload()
            if payload is None:
                return []
            return self.navigate_to(spec.shortcuts[key], payload)

        if spec.paged and key in ("]", "[", "0"):
            return self._turn_page(key)

        frame.model, event = frame.model.handle_key(key, now)
        return self._widget_event(spec, event)

    def _widget_event(self, spec: PageSpec, event: WidgetEvent | None) -> list[Effect]:
        if isinstance(event, Select):
            if spec.kind == "finder":
                return self.navigate_to(detail_page_for(event.payload), event.payload)
            if spec.enter is not None:
                return self.navigate_to(spec.enter, event.payload)
            return []
        if isinstance(event, CopyRecord):
            return [CopyToClipboard(to_json(record_data(event.payload)))]
        if isinstance(event, CopyText):
            return [CopyToClipboard(event.text)]
        if isinstance(event, OpenEditor):
            return [OpenExternal("editor", event.text)]
        if isinstance(event, OpenPager):
            return [OpenExternal("pager", event.text)]
        return []

    def _turn_page(self, key: str) -> list[Effect]:
        frame = self.frame
        if key == "]":
            if not frame.next_token:
                return []
            frame.tokens = frame.tokens + (frame.next_token,)
        elif key == "[":
            if len(frame.tokens) <= 1:
                return []
            frame.tokens = frame.tokens[:-1]
        else:
            if len(frame.tokens) <= 1:
                return []
            frame.tokens = (None,)
        return [self._start(frame, frame.tokens[-1])]

    def refresh(self) -> list[Effect]:
        frame = self.frame
        if not PAGES[frame.page].is_async:
            return []
        return [self._start(frame, frame.tokens[-1])]

    # -- 비동기 완료 -------------------------------------------------------------

    def _find_frame(self, request_id: int) -> PageFrame | None:
        for frame in self._frames():
            if frame.loading and frame.request_id == request_id:
                return frame
        return None

    def on_loaded(self, request_id: int, data: Any) -> None:
        frame = self._find_frame(request_id)
        if frame is None:
            logger.debug("dropping stale result for request %s", request_id)
            return

        frame.loading = False
        spec = PAGES[frame.page]
        if spec.kind == "finder":
            frame.result = data
            frame.model = frame.model.set_sections(build_finder_sections(data))
        elif spec.kind == "viewport":
            frame.model = frame.model.set_content(record_data(data))
        else:
            records = data
            if spec.paged:
                records, frame.next_token = data
            frame.model = frame.model.set_rows([spec.row(r) for r in records], records)

    def on_failed(self, request_id: int, exc: BaseException) -> None:
        frame = self._find_frame(request_id)
        if frame is None:
            logger.debug("dropping stale error for request %s: %s", request_id, exc)
            return
        frame.loading = False
        logger.warning("load failed on %s: %s", frame.page.value, exc)
        self.modal = self.modal.show(error(str(exc), title=t("dash.error_title")))

    def on_choices_loaded(self, purpose: str, items: list[str]) -> None:
        modal = self.modal.modal
        if self.modal.visible and isinstance(modal, SelectModal) and modal.purpose == purpose and modal.loading:
            self.modal = self.modal.update(modal.with_items(items))

    def on_choices_failed(self, purpose: str, exc: BaseException) -> None:
        modal = self.modal.modal
        if self.modal.visible and isinstance(modal, SelectModal) and modal.purpose == purpose:
            self.modal = self.modal.show(error(str(exc), title=t("dash.error_title")))

    def on_session_switched(self, profile: str | None, region: str) -> None:
        profile_changed = (profile or DEFAULT_PROFILE) != self.profile_name
        self.profile = profile
        self.region = region
        self.clear_caches()
        if profile_changed:
            message = t("dash.switched_profile", profile=self.profile_name)
        else:
            message = t("dash.switched_region", region=region)
        self.modal = self.modal.show(success(message))

    def on_session_failed(self, exc: BaseException) -> None:
        self.modal = self.modal.show(error(str(exc), title=t("dash.error_title")))

    def on_copied(self, exc: BaseException | None = None) -> None:
        if exc is not None:
            self.modal = self.modal.show(error(str(exc), title=t("dash.error_title")))
        else:
            self.modal = self.modal.show(info(t("dash.copied")))

    def on_external_done(self, exc: BaseException | None = None) -> None:
        if exc is not None:
            self.modal = self.modal.show(error(str(exc), title=t("dash.error_title")))
