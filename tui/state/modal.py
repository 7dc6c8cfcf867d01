"""
tui/state/modal.py - 모달 대화상자 상태 머신

변형:
    MessageModal  info / error / success 메시지 (Enter, Esc, Space, q로 닫기)
    SelectModal   프로필/리전 선택 목록 ('/'로 필터 모드)
    InputModal    한 줄 입력 + 이전 입력 히스토리 (ctrl+p / ctrl+n)

한 번에 하나의 모달만 표시되며, 표시 여부는 ModalLayer.visible로 따로 관리합니다.
handle_modal_key는 (새 레이어, 결과)를 반환하고, 결과가 있으면 모달은 닫힌 상태입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class MessageKind(str, Enum):
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class MessageModal:
    kind: MessageKind
    message: str
    title: str = ""


@dataclass(frozen=True)
class SelectModal:
    purpose: str
    title: str
    items: tuple[str, ...] = ()
    selected: int = 0
    filter_text: str = ""
    filtering: bool = False
    loading: bool = False
    current: str = ""

    @property
    def visible_items(self) -> tuple[str, ...]:
        if not self.filter_text:
            return self.items
        needle = self.filter_text.lower()
        return tuple(item for item in self.items if needle in item.lower())

    def with_items(self, items: list[str] | tuple[str, ...]) -> SelectModal:
        """로딩이 끝난 목록 채우기. 현재 항목이 있으면 그 위치를 선택"""
        items = tuple(items)
        selected = items.index(self.current) if self.current in items else 0
        return replace(self, items=items, selected=selected, loading=False, filter_text="", filtering=False)


@dataclass(frozen=True)
class InputModal:
    purpose: str
    title: str
    prompt: str = ""
    text: str = ""
    history: tuple[str, ...] = ()  # 최근 항목이 앞
    history_index: int = -1
    saved_text: str = ""


Modal = MessageModal | SelectModal | InputModal


# =============================================================================
# 결과
# =============================================================================


@dataclass(frozen=True)
class Dismissed:
    pass


@dataclass(frozen=True)
class Cancelled:
    purpose: str


@dataclass(frozen=True)
class Selected:
    purpose: str
    value: str


@dataclass(frozen=True)
class Submitted:
    purpose: str
    text: str


ModalOutcome = Dismissed | Cancelled | Selected | Submitted


@dataclass(frozen=True)
class ModalLayer:
    modal: Modal | None = None
    visible: bool = False

    def show(self, modal: Modal) -> ModalLayer:
        return ModalLayer(modal=modal, visible=True)

    def hide(self) -> ModalLayer:
        return ModalLayer()

    def update(self, modal: Modal) -> ModalLayer:
        return replace(self, modal=modal)


# =============================================================================
# 생성 헬퍼
# =============================================================================

HISTORY_LIMIT = 20


def info(message: str, title: str = "") -> MessageModal:
    return MessageModal(MessageKind.INFO, message, title)


def error(message: str, title: str = "") -> MessageModal:
    return MessageModal(MessageKind.ERROR, message, title)


def success(message: str, title: str = "") -> MessageModal:
    return MessageModal(MessageKind.SUCCESS, message, title)


def remember(history: tuple[str, ...], value: str, limit: int = HISTORY_LIMIT) -> tuple[str, ...]:
    """제출 값을 히스토리 맨 앞에 추가 (중복 제거, 최대 limit개)"""
    rest = tuple(h for h in history if h != value)
    return ((value,) + rest)[:limit]


def _is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


# =============================================================================
# 키 처리
# =============================================================================


def _message_key(layer: ModalLayer, key: str) -> tuple[ModalLayer, ModalOutcome | None]:
    if key in ("enter", "escape", " ", "space", "q"):
        return layer.hide(), Dismissed()
    return layer, None


def _select_key(layer: ModalLayer, modal: SelectModal, key: str) -> tuple[ModalLayer, ModalOutcome | None]:
    if modal.loading:
        if key == "escape":
            return layer.hide(), Cancelled(modal.purpose)
        return layer, None

    if modal.filtering:
        if key == "escape":
            return layer.update(replace(modal, filtering=False, filter_text="", selected=0)), None
        if key == "enter":
            return layer.update(replace(modal, filtering=False)), None
        if key == "backspace":
            return layer.update(replace(modal, filter_text=modal.filter_text[:-1], selected=0)), None
        if _is_printable(key):
            return layer.update(replace(modal, filter_text=modal.filter_text + key, selected=0)), None
        return layer, None

    items = modal.visible_items
    if key in ("up", "k"):
        return layer.update(replace(modal, selected=max(0, modal.selected - 1))), None
    if key in ("down", "j"):
        return layer.update(replace(modal, selected=min(max(0, len(items) - 1), modal.selected + 1))), None
    if key == "/":
        return layer.update(replace(modal, filtering=True)), None
    if key == "enter":
        if not items:
            return layer, None
        return layer.hide(), Selected(modal.purpose, items[min(modal.selected, len(items) - 1)])
    if key == "escape":
        return layer.hide(), Cancelled(modal.purpose)
    return layer, None


def _input_key(layer: ModalLayer, modal: InputModal, key: str) -> tuple[ModalLayer, ModalOutcome | None]:
    if key == "enter":
        text = modal.text.strip()
        if not text:
            return layer, None
        return layer.hide(), Submitted(modal.purpose, text)
    if key == "escape":
        return layer.hide(), Cancelled(modal.purpose)

    if key in ("ctrl+p", "up"):
        if not modal.history:
            return layer, None
        if modal.history_index == -1:
            updated = replace(modal, saved_text=modal.text, history_index=0, text=modal.history[0])
        elif modal.history_index < len(modal.history) - 1:
            index = modal.history_index + 1
            updated = replace(modal, history_index=index, text=modal.history[index])
        else:
            return layer, None
        return layer.update(updated), None

    if key in ("ctrl+n", "down"):
        if modal.history_index > 0:
            index = modal.history_index - 1
            updated = replace(modal, history_index=index, text=modal.history[index])
        elif modal.history_index == 0:
            updated = replace(modal, history_index=-1, text=modal.saved_text)
        else:
            return layer, None
        return layer.update(updated), None

    if key == "backspace":
        return layer.update(replace(modal, text=modal.text[:-1], history_index=-1)), None
    if key == "ctrl+u":
        return layer.update(replace(modal, text="", history_index=-1)), None
    if _is_printable(key):
        return layer.update(replace(modal, text=modal.text + key, history_index=-1)), None
    return layer, None


def handle_modal_key(layer: ModalLayer, key: str) -> tuple[ModalLayer, ModalOutcome | None]:
    modal = layer.modal
    if not layer.visible or modal is None:
        return layer, None
    if isinstance(modal, MessageModal):
        return _message_key(layer, key)
    if isinstance(modal, SelectModal):
        return _select_key(layer, modal, key)
    return _input_key(layer, modal, key)
