"""
tui/state/navigation.py - 뒤로 가기 스택

navigate 시 push, back 시 pop (LIFO). 빈 스택에서 pop은 아무 일도 하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class NavigationStack(Generic[T]):
    entries: tuple[T, ...] = ()

    def push(self, entry: T) -> NavigationStack[T]:
        return NavigationStack(self.entries + (entry,))

    def pop(self) -> tuple[NavigationStack[T], T | None]:
        if not self.entries:
            return self, None
        return NavigationStack(self.entries[:-1]), self.entries[-1]

    def peek(self) -> T | None:
        return self.entries[-1] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
