"""
tests/core/test_auth_profiles.py - 프로필 목록 / 세션 생성 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import NoRegionError, ProfileNotFound

from core.auth import create_session, list_profiles
from core.exceptions import AuthError


class TestListProfiles:
    """프로필 목록"""

    def test_sorted(self):
        with patch("core.auth.profiles.boto3.Session") as session_class:
            session_class.return_value.available_profiles = ["prod", "default", "dev"]
            assert list_profiles() == ["default", "dev", "prod"]

    def test_botocore_error(self):
        with patch("core.auth.profiles.boto3.Session", side_effect=NoRegionError()):
            with pytest.raises(AuthError):
                list_profiles()


class TestCreateSession:
    """세션 생성"""

    def test_success(self):
        with patch("core.auth.profiles.boto3.Session") as session_class:
            session = session_class.return_value
            session.get_credentials.return_value = MagicMock()

            assert create_session("dev", "us-east-1") is session
            session_class.assert_called_once_with(profile_name="dev", region_name="us-east-1")

    def test_profile_not_found(self):
        with patch("core.auth.profiles.boto3.Session", side_effect=ProfileNotFound(profile="ghost")):
            with pytest.raises(AuthError) as exc_info:
                create_session("ghost", "ap-northeast-2")
        assert exc_info.value.profile == "ghost"
        assert isinstance(exc_info.value.cause, ProfileNotFound)

    def test_missing_credentials(self):
        with patch("core.auth.profiles.boto3.Session") as session_class:
            session_class.return_value.get_credentials.return_value = None
            with pytest.raises(AuthError) as exc_info:
                create_session(None, "ap-northeast-2")
        assert exc_info.value.cause is None
