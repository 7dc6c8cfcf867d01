"""
tui/effects.py - 라우터가 요청하는 부수효과

라우터는 I/O를 하지 않고 이 값들을 반환합니다.
앱 셸(tui/app.py)이 워커 스레드나 터미널 핸드오프로 실행한 뒤
결과를 라우터의 on_* 메서드로 돌려줍니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from core.data.types import ResourceRecord

from .pages import PAGES, Page


@dataclass(frozen=True)
class Fetch:
    request_id: int
    page: Page
    payload: ResourceRecord | None = None
    token: str | None = None


@dataclass(frozen=True)
class RunFinder:
    request_id: int
    query: str


@dataclass(frozen=True)
class CopyToClipboard:
    text: str


@dataclass(frozen=True)
class OpenExternal:
    tool: str  # editor, pager
    text: str


@dataclass(frozen=True)
class LoadChoices:
    purpose: str  # profile, region


@dataclass(frozen=True)
class SwitchSession:
    profile: str | None
    region: str


@dataclass(frozen=True)
class Quit:
    pass


Effect = Fetch | RunFinder | CopyToClipboard | OpenExternal | LoadChoices | SwitchSession | Quit


def run_fetch(services: Any, effect: Fetch) -> Any:
    """페이지 loader 실행 (워커 스레드에서 호출)"""
    spec = PAGES[effect.page]
    if spec.loader is None:
        raise ValueError(f"page {effect.page.value} has no loader")
    if spec.paged:
        return spec.loader(services, effect.payload, effect.token)
    return spec.loader(services, effect.payload)
