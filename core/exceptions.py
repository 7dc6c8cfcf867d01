"""
core/exceptions.py - 통합 예외 계층 구조

대시보드 전체에서 사용되는 예외 클래스들을 정의합니다.
UI 계층은 이 예외들을 에러 모달로 변환하고, 시작 단계의 AuthError만
프로세스를 종료시킵니다.

예외 계층 구조:
    DashError (베이스)
    ├── AuthError (프로필/세션 생성 실패 - 시작 시 치명적)
    ├── APICallError (리소스 조회 API 실패)
    ├── ExternalToolError (클립보드, 에디터, 페이저)
    └── ConfigError (설정 값 오류)

Usage:
    from core.exceptions import APICallError

    try:
        response = ec2.describe_instances()
    except ClientError as e:
        raise APICallError(
            service="ec2",
            operation="describe_instances",
            cause=e
        ) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class DashError(Exception):
    """awsdash 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 인증 / 세션
# =============================================================================


class AuthError(DashError):
    """프로필 로드 또는 세션 생성 실패"""

    def __init__(
        self,
        message: str,
        profile: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.profile = profile
        if profile:
            self.details["profile"] = profile


# =============================================================================
# API 호출
# =============================================================================


class APICallError(DashError):
    """AWS API 호출 실패 예외"""

    def __init__(
        self,
        service: str,
        operation: str,
        cause: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        if error_code is None and cause is not None:
            error_code = get_error_code(cause)

        message = f"{service}:{operation} 호출 실패"
        if error_code:
            message += f" ({error_code})"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.details["service"] = service
        self.details["operation"] = operation
        if error_code:
            self.details["error_code"] = error_code

    @property
    def is_access_denied(self) -> bool:
        return self.error_code in ("AccessDenied", "AccessDeniedException", "UnauthorizedOperation")


# =============================================================================
# 외부 도구 (clipboard / editor / pager)
# =============================================================================


class ExternalToolError(DashError):
    """외부 프로세스/도구 실행 실패"""

    def __init__(
        self,
        tool: str,
        reason: str,
        cause: Optional[Exception] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(f"{tool}: {reason}", cause)
        self.tool = tool
        self.reason = reason
        self.returncode = returncode
        self.details["tool"] = tool
        if returncode is not None:
            self.details["returncode"] = returncode


# =============================================================================
# 설정
# =============================================================================


class ConfigError(DashError):
    """설정 관련 예외"""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.key = key
        self.value = value
        if key:
            self.details["key"] = key
        if value is not None:
            self.details["value"] = value


# =============================================================================
# 헬퍼
# =============================================================================


def get_error_code(error: Exception) -> Optional[str]:
    """botocore ClientError에서 에러 코드 추출

    Args:
        error: 예외 객체

    Returns:
        에러 코드 문자열 또는 None
    """
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code")
    return None


__all__ = [
    "DashError",
    "AuthError",
    "APICallError",
    "ExternalToolError",
    "ConfigError",
    "get_error_code",
]
