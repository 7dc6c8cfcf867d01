"""
core/region/cache.py - 프로필별 리전 목록 캐시

리전 목록은 자주 바뀌지 않으므로 프로필마다 JSON 파일에 저장하고
7일 동안 재사용합니다. 만료된 엔트리는 없는 것으로 취급합니다.

파일 형식:
    {
      "profiles": {
        "dev": {
          "profile": "dev",
          "regions": ["ap-northeast-2", "us-east-1"],
          "updated_at": "2026-10-18T09:00:00+00:00"
        }
      }
    }

Usage:
    cache = RegionCache(path)
    regions = cache.get_regions("dev", fetch=services.regions)
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

REGION_CACHE_TTL = timedelta(days=7)
DEFAULT_PROFILE_KEY = "default"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegionCache:
    """JSON 파일 기반 리전 캐시"""

    def __init__(
        self,
        path: str | Path,
        ttl: timedelta = REGION_CACHE_TTL,
        now: Callable[[], datetime] = _utcnow,
    ):
        self.path = Path(path)
        self.ttl = ttl
        self._now = now

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"profiles": {}}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("리전 캐시 로드 실패 (%s): %s", self.path, e)
            return {"profiles": {}}
        if not isinstance(data, dict) or not isinstance(data.get("profiles"), dict):
            return {"profiles": {}}
        return data

    def _save(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except OSError as e:
            logger.warning("리전 캐시 저장 실패 (%s): %s", self.path, e)

    def get(self, profile: str | None) -> list[str] | None:
        """유효한 캐시 엔트리의 리전 목록, 없거나 만료되면 None"""
        key = profile or DEFAULT_PROFILE_KEY
        entry = self._load()["profiles"].get(key)
        if not isinstance(entry, dict):
            return None

        try:
            updated_at = datetime.fromisoformat(entry["updated_at"])
        except (KeyError, TypeError, ValueError):
            return None
        if updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)

        if self._now() - updated_at >= self.ttl:
            logger.debug("region cache expired for %s", key)
            return None

        regions = entry.get("regions")
        if not isinstance(regions, list) or not regions:
            return None
        return [str(r) for r in regions]

    def put(self, profile: str | None, regions: list[str]) -> None:
        key = profile or DEFAULT_PROFILE_KEY
        data = self._load()
        data["profiles"][key] = {
            "profile": key,
            "regions": list(regions),
            "updated_at": self._now().isoformat(),
        }
        self._save(data)

    def clear(self, profile: str | None = None) -> None:
        """profile이 None이면 전체 삭제"""
        if profile is None:
            self._save({"profiles": {}})
            return
        data = self._load()
        data["profiles"].pop(profile, None)
        self._save(data)

    def get_regions(
        self,
        profile: str | None,
        fetch: Callable[[], list[str]],
        force_refresh: bool = False,
    ) -> list[str]:
        """캐시 우선 조회, 미스면 fetch 후 저장

        fetch에서 발생한 예외는 그대로 전파됩니다.
        """
        if not force_refresh:
            cached = self.get(profile)
            if cached is not None:
                return cached

        regions = fetch()
        if regions:
            self.put(profile, regions)
        return regions
