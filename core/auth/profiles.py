"""
core/auth/profiles.py - AWS 프로필 목록과 세션 생성

~/.aws/config, ~/.aws/credentials에 정의된 프로필을 읽고
프로필 + 리전으로 boto3 Session을 만듭니다.
"""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from core.exceptions import AuthError

logger = logging.getLogger(__name__)


def list_profiles() -> list[str]:
    """설정된 AWS 프로필 이름 (정렬)"""
    try:
        return sorted(boto3.Session().available_profiles)
    except BotoCoreError as e:
        raise AuthError("AWS 프로필 목록을 읽을 수 없습니다", cause=e) from e


def create_session(profile: str | None, region: str) -> boto3.Session:
    """프로필/리전으로 세션 생성 후 자격 증명 존재 여부 확인

    Raises:
        AuthError: 프로필이 없거나 자격 증명을 찾을 수 없는 경우
    """
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
        credentials = session.get_credentials()
    except ProfileNotFound as e:
        raise AuthError(f"프로필을 찾을 수 없습니다: {profile}", profile=profile, cause=e) from e
    except BotoCoreError as e:
        raise AuthError("세션 생성 실패", profile=profile, cause=e) from e

    if credentials is None:
        raise AuthError("자격 증명을 찾을 수 없습니다", profile=profile)

    logger.debug("session created (profile=%s, region=%s)", profile or "default", region)
    return session
