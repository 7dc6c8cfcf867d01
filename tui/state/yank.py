"""
tui/state/yank.py - 두 번 누르기(yy) 복사 제스처

리스트와 뷰포트가 동일하게 사용합니다.
마지막 입력 후 YANK_WINDOW 이내에 다시 누르면 발동하고 카운터는 0으로 돌아갑니다.
"""

from __future__ import annotations

from dataclasses import dataclass

YANK_WINDOW = 0.5  # 초


@dataclass(frozen=True)
class YankGesture:
    last_press: float = 0.0
    count: int = 0

    def press(self, now: float) -> tuple[YankGesture, bool]:
        """(새 상태, 복사 발동 여부)"""
        if self.count > 0 and now - self.last_press < YANK_WINDOW:
            count = self.count + 1
        else:
            count = 1

        if count >= 2:
            return YankGesture(last_press=now, count=0), True
        return YankGesture(last_press=now, count=count), False
