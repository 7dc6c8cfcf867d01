"""
core/parallel - boto3 클라이언트 생성과 병렬 조회 헬퍼

주요 구성 요소:
- get_client: retry/timeout이 설정된 boto3 client 생성
"""

from .client import get_client

__all__ = ["get_client"]
