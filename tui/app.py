"""
tui/app.py - Textual 앱 셸

Router(순수 상태 머신)에 키를 넘기고, 반환된 이펙트를 실행합니다.
    - AWS 조회, Finder, 선택 목록 로딩, 세션 전환, 클립보드: 워커 스레드
    - 에디터/페이저: 터미널을 넘겨주고 종료까지 대기 (App.suspend)
워커 결과는 call_from_thread로 UI 스레드에서 라우터에 반영합니다.
"""

from __future__ import annotations

import logging
from typing import Any

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static

from core.auth import create_session, list_profiles
from core.config import DashConfig
from core.data.cloud import CloudServices
from core.exceptions import ExternalToolError
from core.finder import ResourceFinder
from core.region import RegionCache

from .effects import (
    CopyToClipboard,
    Effect,
    Fetch,
    LoadChoices,
    OpenExternal,
    Quit,
    RunFinder,
    SwitchSession,
    run_fetch,
)
from .external import copy_to_clipboard, open_in_tool
from .render import render_body, render_header, render_modal, render_status
from .router import PURPOSE_PROFILE, Router
from .styles import DEFAULT_STYLES, Styles

logger = logging.getLogger(__name__)

APP_CSS = """
Screen {
    layout: vertical;
}

#header {
    height: 1;
}

#body {
    height: 1fr;
}

#status {
    height: 1;
}

DashModal {
    align: center middle;
}

#modal {
    width: auto;
    height: auto;
}
"""


def normalize_key(key: str, character: str | None) -> str:
    """Textual 키 이벤트를 라우터 키 이름으로 변환

    인쇄 가능한 문자는 문자 자체("G", "?", "/"), 나머지는 Textual 키 이름("up", "ctrl+p").
    """
    if key == "space":
        return " "
    if key.startswith("ctrl+"):
        return key
    if character and len(character) == 1 and character.isprintable():
        return character
    return key


class DashBody(Static, can_focus=True):
    """본문 영역 (키 입력을 받는 위젯)"""

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.app.dispatch_key(normalize_key(event.key, event.character))


class DashModal(ModalScreen):
    """라우터 모달을 그리는 오버레이 화면"""

    def __init__(self, content: Any):
        super().__init__()
        self.modal_content = content

    def compose(self) -> ComposeResult:
        yield Static(self.modal_content, id="modal")

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.app.dispatch_key(normalize_key(event.key, event.character))


class DashApp(App):
    CSS = APP_CSS
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [Binding("ctrl+c", "quit", show=False, priority=True)]

    def __init__(
        self,
        config: DashConfig,
        services: CloudServices,
        region_cache: RegionCache | None = None,
        styles: Styles = DEFAULT_STYLES,
    ):
        super().__init__()
        self.config = config
        self.services = services
        self.region_cache = region_cache or RegionCache(config.region_cache_path)
        self.dash_styles = styles
        self.router = Router(config.profile, services.region, styles=styles)
        self._modal_screen: DashModal | None = None
        self._header = Static(id="header")
        self._body = DashBody(id="body")
        self._status = Static(id="status")

    # -- 화면 ---------------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield self._header
        yield self._body
        yield self._status

    def on_mount(self) -> None:
        self.router.resize(self.size.width, self.size.height)
        self._body.focus()
        self.refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self.router.resize(event.size.width, event.size.height)
        # 첫 Resize는 마운트 이전에 올 수 있음
        if self._body.is_mounted:
            self.refresh_view()

    def refresh_view(self) -> None:
        router = self.router
        self._header.update(render_header(router, self.dash_styles))
        self._body.update(render_body(router, self.dash_styles))
        self._status.update(render_status(router, self.dash_styles))
        self._sync_modal()

    def _sync_modal(self) -> None:
        panel = render_modal(self.router.modal, self.dash_styles)
        if panel is None:
            if self._modal_screen is not None:
                self._modal_screen.dismiss()
                self._modal_screen = None
            return
        if self._modal_screen is None:
            self._modal_screen = DashModal(panel)
            self.push_screen(self._modal_screen)
        elif self._modal_screen.is_mounted:
            self._modal_screen.query_one("#modal", Static).update(panel)
        else:
            self._modal_screen.modal_content = panel

    # -- 키 / 이펙트 ------------------------------------------------------------

    def dispatch_key(self, key: str) -> None:
        self.run_effects(self.router.handle_key(key))

    def run_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            self.run_effect(effect)
        self.refresh_view()

    def run_effect(self, effect: Effect) -> None:
        if isinstance(effect, Fetch):
            self._fetch(self.services, effect)
        elif isinstance(effect, RunFinder):
            self._find(self.services, effect)
        elif isinstance(effect, LoadChoices):
            self._load_choices(self.services, effect.purpose)
        elif isinstance(effect, SwitchSession):
            self._switch_session(effect)
        elif isinstance(effect, CopyToClipboard):
            self._copy(effect.text)
        elif isinstance(effect, OpenExternal):
            self._open_external(effect)
        elif isinstance(effect, Quit):
            self.exit()

    def _complete(self, callback, *args: Any) -> None:
        """UI 스레드에서 라우터 콜백 실행 후 다시 그림"""
        callback(*args)
        self.refresh_view()

    def _open_external(self, effect: OpenExternal) -> None:
        command = self.config.editor if effect.tool == "editor" else self.config.pager
        try:
            open_in_tool(self, command, effect.text)
        except ExternalToolError as e:
            logger.warning("external tool failed: %s", e)
            self.router.on_external_done(e)
        else:
            self.router.on_external_done()

    # -- 워커 ---------------------------------------------------------------

    @work(thread=True, exit_on_error=False)
    def _fetch(self, services: CloudServices, effect: Fetch) -> None:
        try:
            data = run_fetch(services, effect)
        except Exception as e:
            logger.warning("fetch %s failed: %s", effect.page.value, e)
            self.call_from_thread(self._complete, self.router.on_failed, effect.request_id, e)
            return
        self.call_from_thread(self._complete, self.router.on_loaded, effect.request_id, data)

    @work(thread=True, exit_on_error=False)
    def _find(self, services: CloudServices, effect: RunFinder) -> None:
        finder = ResourceFinder(services, timeout=self.config.finder_timeout)
        try:
            result = finder.find(effect.query)
        except Exception as e:
            logger.warning("finder failed for %r: %s", effect.query, e)
            self.call_from_thread(self._complete, self.router.on_failed, effect.request_id, e)
            return
        self.call_from_thread(self._complete, self.router.on_loaded, effect.request_id, result)

    @work(thread=True, exit_on_error=False)
    def _load_choices(self, services: CloudServices, purpose: str) -> None:
        try:
            if purpose == PURPOSE_PROFILE:
                items = list_profiles()
            else:
                items = self.region_cache.get_regions(services.profile, services.regions)
        except Exception as e:
            logger.warning("loading %s choices failed: %s", purpose, e)
            self.call_from_thread(self._complete, self.router.on_choices_failed, purpose, e)
            return
        self.call_from_thread(self._complete, self.router.on_choices_loaded, purpose, items)

    @work(thread=True, exit_on_error=False, exclusive=True, group="session")
    def _switch_session(self, effect: SwitchSession) -> None:
        try:
            session = create_session(effect.profile, effect.region)
            services = CloudServices(session, effect.region, profile=effect.profile)
        except Exception as e:
            logger.warning("session switch failed: %s", e)
            self.call_from_thread(self._complete, self.router.on_session_failed, e)
            return
        self.call_from_thread(self._session_switched, services, effect)

    def _session_switched(self, services: CloudServices, effect: SwitchSession) -> None:
        self.services = services
        self.router.on_session_switched(effect.profile, effect.region)
        self.refresh_view()

    @work(thread=True, exit_on_error=False)
    def _copy(self, text: str) -> None:
        try:
            copy_to_clipboard(text)
        except ExternalToolError as e:
            logger.warning("clipboard copy failed: %s", e)
            self.call_from_thread(self._complete, self.router.on_copied, e)
            return
        self.call_from_thread(self._complete, self.router.on_copied)
