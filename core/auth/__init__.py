# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

프로필 목록 조회와 프로필 기반 세션 생성만 담당합니다.

사용 예시:
    from core.auth import create_session, list_profiles

    profiles = list_profiles()
    session = create_session("dev", "ap-northeast-2")
"""

from .profiles import create_session, list_profiles

__all__ = ["create_session", "list_profiles"]
