"""
tests/core/test_region_cache.py - 리전 캐시 테스트
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from core.region import REGION_CACHE_TTL, RegionCache


class Clock:
    def __init__(self):
        self.now = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def cache(tmp_path, clock):
    return RegionCache(tmp_path / "cache" / "regions.json", now=clock)


class TestRegionCache:
    """저장 / 조회 / 만료"""

    def test_missing_file(self, cache):
        assert cache.get("dev") is None

    def test_put_and_get(self, cache):
        cache.put("dev", ["ap-northeast-2", "us-east-1"])
        assert cache.get("dev") == ["ap-northeast-2", "us-east-1"]
        assert cache.get("prod") is None

    def test_default_profile_key(self, cache):
        cache.put(None, ["us-west-2"])
        assert cache.get(None) == ["us-west-2"]
        assert cache.get("default") == ["us-west-2"]

    def test_file_format(self, cache):
        cache.put("dev", ["ap-northeast-2"])
        data = json.loads(cache.path.read_text(encoding="utf-8"))
        entry = data["profiles"]["dev"]
        assert entry["profile"] == "dev"
        assert entry["regions"] == ["ap-northeast-2"]
        assert entry["updated_at"].startswith("2026-10-01T09:00:00")

    def test_expires_after_ttl(self, cache, clock):
        cache.put("dev", ["ap-northeast-2"])
        clock.now += REGION_CACHE_TTL - timedelta(seconds=1)
        assert cache.get("dev") == ["ap-northeast-2"]
        clock.now += timedelta(seconds=1)
        assert cache.get("dev") is None

    def test_malformed_file_is_ignored(self, cache):
        cache.path.parent.mkdir(parents=True)
        cache.path.write_text("{not json", encoding="utf-8")
        assert cache.get("dev") is None
        cache.put("dev", ["eu-west-1"])
        assert cache.get("dev") == ["eu-west-1"]

    def test_clear(self, cache):
        cache.put("dev", ["a"])
        cache.put("prod", ["b"])
        cache.clear("dev")
        assert cache.get("dev") is None
        assert cache.get("prod") == ["b"]
        cache.clear()
        assert cache.get("prod") is None


class TestGetRegions:
    """캐시 우선 조회"""

    def test_miss_fetches_and_stores(self, cache):
        calls = []

        def fetch():
            calls.append(1)
            return ["ap-northeast-2", "us-east-1"]

        assert cache.get_regions("dev", fetch) == ["ap-northeast-2", "us-east-1"]
        assert cache.get_regions("dev", fetch) == ["ap-northeast-2", "us-east-1"]
        assert len(calls) == 1

    def test_force_refresh(self, cache):
        cache.put("dev", ["old-region"])
        assert cache.get_regions("dev", lambda: ["new-region"], force_refresh=True) == ["new-region"]
        assert cache.get("dev") == ["new-region"]

    def test_empty_fetch_not_stored(self, cache):
        assert cache.get_regions("dev", lambda: []) == []
        assert cache.get("dev") is None

    def test_fetch_error_propagates(self, cache):
        def fetch():
            raise RuntimeError("denied")

        with pytest.raises(RuntimeError):
            cache.get_regions("dev", fetch)
