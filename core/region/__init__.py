# core/region - 리전 목록 캐시
"""
리전 데이터 모듈

Usage:
    from core.region import RegionCache
"""

from .cache import REGION_CACHE_TTL, RegionCache

__all__ = ["RegionCache", "REGION_CACHE_TTL"]
