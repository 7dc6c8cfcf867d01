"""
tui/external.py - 클립보드 복사와 외부 도구(에디터/페이저) 실행
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from typing import Any

import pyperclip
from textual.app import SuspendNotSupported

from core.exceptions import ExternalToolError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """시스템 클립보드에 복사

    Raises:
        ExternalToolError: 클립보드 메커니즘을 찾지 못한 경우
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ExternalToolError("clipboard", str(e), cause=e) from e
    logger.debug("copied %d chars to clipboard", len(text))


def write_temp(text: str, suffix: str = ".json") -> str:
    with tempfile.NamedTemporaryFile("w", suffix=suffix, prefix="awsdash-", delete=False, encoding="utf-8") as f:
        f.write(text)
        return f.name


def open_in_tool(app: Any, command: str, text: str) -> None:
    """텍스트를 임시 파일로 저장하고 터미널을 넘겨 외부 도구로 연다

    도구가 끝날 때까지 대기하며, 임시 파일은 항상 삭제합니다.

    Args:
        app: textual App (suspend 컨텍스트 제공)
        command: 실행할 명령 (인자 포함 가능, 예: "code --wait")
        text: 열 내용
    """
    argv = shlex.split(command)
    if not argv:
        raise ExternalToolError(command, "empty command")

    path = write_temp(text)
    try:
        with app.suspend():
            completed = subprocess.run([*argv, path], check=False)
        if completed.returncode != 0:
            raise ExternalToolError(argv[0], "non-zero exit", returncode=completed.returncode)
    except SuspendNotSupported as e:
        raise ExternalToolError(argv[0], "terminal handoff not supported", cause=e) from e
    except OSError as e:
        raise ExternalToolError(argv[0], str(e), cause=e) from e
    finally:
        try:
            os.unlink(path)
        except OSError as e:
            logger.debug("temp file cleanup failed: %s", e)
