"""
tui/state - 위젯 상태와 전이 함수

모든 상태는 frozen dataclass이며 전이는 새 인스턴스를 반환합니다.
렌더 루프 없이 단위 테스트할 수 있습니다.
"""

from .events import CopyRecord, CopyText, OpenEditor, OpenPager, Select
from .modal import InputModal, MessageModal, ModalLayer, SelectModal
from .navigation import NavigationStack
from .search import SearchPrompt
from .sections import Section, SectionsState
from .table import Column, ListState
from .viewport import ViewportState
from .yank import YankGesture

__all__ = [
    "Column",
    "CopyRecord",
    "CopyText",
    "InputModal",
    "ListState",
    "MessageModal",
    "ModalLayer",
    "NavigationStack",
    "OpenEditor",
    "OpenPager",
    "SearchPrompt",
    "Section",
    "SectionsState",
    "Select",
    "SelectModal",
    "ViewportState",
    "YankGesture",
]
