"""
core/data - Data Services Layer

리소스 레코드 타입(types), 서비스별 조회 함수(services),
프로필/리전 단위 조회 파사드(cloud.CloudServices)를 제공합니다.
"""

from core.data.cloud import CloudServices
from core.data.types import RECORD_TYPES, ResourceRecord, record_data

__all__ = ["CloudServices", "ResourceRecord", "RECORD_TYPES", "record_data"]
