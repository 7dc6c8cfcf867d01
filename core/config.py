"""
core/config.py - 설정 로드

환경 변수에서 대시보드 설정을 읽어 불변 데이터클래스로 제공합니다.
에디터/페이저 명령, 언어, 리전 캐시 경로, Finder 타임아웃 등을 다룹니다.

환경 변수:
    AWSDASH_EDITOR / EDITOR     외부 에디터 명령 (기본: vi)
    AWSDASH_PAGER / PAGER       외부 페이저 명령 (기본: less)
    AWSDASH_LANG                UI 언어 (ko, en)
    AWSDASH_REGION_CACHE        리전 캐시 파일 경로
    AWSDASH_FINDER_TIMEOUT      Finder 카테고리별 대기 시간(초), 0 또는 미설정이면 무제한
    AWSDASH_LOG_FILE            로그 파일 경로 (미설정이면 파일 로그 없음)
    AWS_PROFILE                 시작 프로필
    AWS_REGION / AWS_DEFAULT_REGION  시작 리전

Usage:
    from core.config import load_config

    config = load_config()
    print(config.editor)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from core.exceptions import ConfigError

VERSION = "0.1.0"

DEFAULT_REGION = "ap-northeast-2"
DEFAULT_EDITOR = "vi"
DEFAULT_PAGER = "less"
DEFAULT_LANG = "ko"
SUPPORTED_LANGS = ("ko", "en")


def get_version() -> str:
    """버전 문자열 반환"""
    return VERSION


def get_env(*names: str, default: str = "") -> str:
    """여러 환경 변수 중 처음으로 값이 있는 것을 반환"""
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return default


def get_env_float(name: str, default: float | None = None) -> float | None:
    """환경 변수를 float로 읽기

    Raises:
        ConfigError: 숫자가 아니거나 음수인 경우
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number", key=name, value=raw) from e
    if value < 0:
        raise ConfigError(f"{name} must not be negative", key=name, value=raw)
    return value


def default_region_cache_path() -> Path:
    return Path.home() / ".awsdash" / "region_cache.json"


@dataclass(frozen=True)
class DashConfig:
    """대시보드 실행 설정"""

    editor: str = DEFAULT_EDITOR
    pager: str = DEFAULT_PAGER
    lang: str = DEFAULT_LANG
    profile: str | None = None
    region: str = DEFAULT_REGION
    region_cache_path: Path = Path()
    finder_timeout: float | None = None
    log_file: str | None = None


def load_config() -> DashConfig:
    """환경 변수에서 DashConfig 생성

    Raises:
        ConfigError: 지원하지 않는 언어 또는 잘못된 숫자 값
    """
    lang = get_env("AWSDASH_LANG", default=DEFAULT_LANG).lower()
    if lang not in SUPPORTED_LANGS:
        raise ConfigError(f"unsupported language: {lang}", key="AWSDASH_LANG", value=lang)

    timeout = get_env_float("AWSDASH_FINDER_TIMEOUT")
    cache_path = get_env("AWSDASH_REGION_CACHE")

    return DashConfig(
        editor=get_env("AWSDASH_EDITOR", "EDITOR", default=DEFAULT_EDITOR),
        pager=get_env("AWSDASH_PAGER", "PAGER", default=DEFAULT_PAGER),
        lang=lang,
        profile=get_env("AWS_PROFILE") or None,
        region=get_env("AWS_REGION", "AWS_DEFAULT_REGION", default=DEFAULT_REGION),
        region_cache_path=Path(cache_path).expanduser() if cache_path else default_region_cache_path(),
        finder_timeout=timeout or None,
        log_file=get_env("AWSDASH_LOG_FILE") or None,
    )
