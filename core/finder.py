"""
core/finder.py - IP / 도메인 기반 리소스 통합 검색

쿼리(IP 또는 도메인)를 IP 목록으로 해석한 뒤, 6개 리소스 카테고리를
동시에 조회하여 일치하는 리소스를 하나의 FindResult로 모읍니다.

해석 순서 (resolve):
    1. IP 리터럴이면 그대로 반환 (도메인 없음, 조회 없음)
    2. Route53 호스팅 존 중 쿼리와 같거나 접미사인 존에서 A 레코드 검색
    3. 시스템 DNS 조회 (socket.getaddrinfo)
    4. 모두 실패하면 IP 없이 도메인만 유지

카테고리 조회 (find_resources):
    - 카테고리마다 스레드 하나, 전체 목록을 조회한 뒤 필터링
    - 한 카테고리의 실패는 그 카테고리만 비우고 failed에 기록
    - 결과 쓰기는 단일 lock으로 보호 (네트워크 호출 중에는 잡지 않음)

Usage:
    finder = ResourceFinder(services)
    ips, domain = finder.resolve("api.example.com")
    result = finder.find_resources(ips, domain, query="api.example.com")
    print(result.total_count())
"""

from __future__ import annotations

import ipaddress
import logging
import socket
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from core.data.types import (
    CacheCluster,
    DBInstance,
    DNSRecord,
    HostedZone,
    Instance,
    LoadBalancer,
    NetworkInterface,
)

logger = logging.getLogger(__name__)


class FinderCategory(str, Enum):
    """검색 대상 카테고리 (결과 페이지 섹션 순서)"""

    INSTANCES = "instances"
    NETWORK_INTERFACES = "network_interfaces"
    LOAD_BALANCERS = "load_balancers"
    DNS_RECORDS = "dns_records"
    DATABASES = "databases"
    CACHES = "caches"


class FinderSource(Protocol):
    """Finder가 사용하는 조회 인터페이스 (CloudServices가 구현)"""

    def instances(self) -> list[Instance]: ...

    def network_interfaces(self) -> list[NetworkInterface]: ...

    def load_balancers(self) -> list[LoadBalancer]: ...

    def hosted_zones(self) -> list[HostedZone]: ...

    def dns_records(self, zone: HostedZone) -> list[DNSRecord]: ...

    def all_dns_records(self) -> list[DNSRecord]: ...

    def db_instances(self) -> list[DBInstance]: ...

    def cache_clusters(self) -> list[CacheCluster]: ...


@dataclass
class FindResult:
    """카테고리별 검색 결과

    find_resources가 반환한 뒤에는 읽기 전용으로 취급합니다.
    """

    query: str = ""
    domain: str = ""
    resolved_ips: list[str] = field(default_factory=list)
    matches: dict[FinderCategory, list[Any]] = field(
        default_factory=lambda: {category: [] for category in FinderCategory}
    )
    failed: set[FinderCategory] = field(default_factory=set)

    def items(self, category: FinderCategory) -> list[Any]:
        return self.matches.get(category, [])

    def total_count(self) -> int:
        return sum(len(items) for items in self.matches.values())

    def has_results(self) -> bool:
        return self.total_count() > 0


def is_ip_literal(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def contains_any(fields: Iterable[str], needles: Iterable[str]) -> bool:
    """대소문자 무시 부분 문자열 일치 (빈 값은 건너뜀)

    IP도 equals가 아니라 contains로 비교하므로 10.0.0.1은 10.0.0.11에도 일치합니다.
    """
    lowered = [n.lower() for n in needles if n]
    if not lowered:
        return False
    for value in fields:
        if not value:
            continue
        value = value.lower()
        if any(n in value for n in lowered):
            return True
    return False


def system_resolve(domain: str) -> list[str]:
    """시스템 리졸버로 도메인 조회, 실패하면 빈 리스트"""
    try:
        infos = socket.getaddrinfo(domain, None)
    except (OSError, UnicodeError) as e:
        logger.debug("system resolution failed for %s: %s", domain, e)
        return []

    ips: list[str] = []
    for info in infos:
        ip = str(info[4][0])
        if ip not in ips:
            ips.append(ip)
    return ips


# =============================================================================
# 카테고리별 매칭
# =============================================================================


def match_instances(items: list[Instance], ips: list[str], domain: str) -> list[Instance]:
    return [i for i in items if contains_any(i.ip_fields, ips)]


def match_network_interfaces(items: list[NetworkInterface], ips: list[str], domain: str) -> list[NetworkInterface]:
    return [n for n in items if contains_any(n.ip_fields, ips)]


def match_load_balancers(items: list[LoadBalancer], ips: list[str], domain: str) -> list[LoadBalancer]:
    return [lb for lb in items if contains_any(lb.ip_fields, ips)]


def match_dns_records(items: list[DNSRecord], ips: list[str], domain: str) -> list[DNSRecord]:
    matched = []
    domain = domain.lower()
    for record in items:
        if any(value in ips for value in record.values):
            matched.append(record)
        elif domain and (
            any(domain in value.lower() for value in record.values) or domain in record.name.lower()
        ):
            matched.append(record)
    return matched


def match_databases(items: list[DBInstance], ips: list[str], domain: str) -> list[DBInstance]:
    return [
        db
        for db in items
        if contains_any(db.connection_fields, ips) or (domain and contains_any(db.connection_fields, [domain]))
    ]


def match_caches(items: list[CacheCluster], ips: list[str], domain: str) -> list[CacheCluster]:
    return [
        c
        for c in items
        if contains_any(c.connection_fields, ips) or (domain and contains_any(c.connection_fields, [domain]))
    ]


# =============================================================================
# Finder
# =============================================================================


class ResourceFinder:
    """IP/도메인 기반 교차 리소스 검색기

    Args:
        source: 리소스 조회 인터페이스
        resolver: 시스템 DNS 조회 함수 (테스트에서 교체)
        timeout: 전체 대기 시간(초). None이면 모든 카테고리가 끝날 때까지 대기
    """

    MAX_WORKERS = len(FinderCategory)

    def __init__(
        self,
        source: FinderSource,
        resolver: Callable[[str], list[str]] = system_resolve,
        timeout: float | None = None,
    ):
        self.source = source
        self.resolver = resolver
        self.timeout = timeout

    def resolve(self, query: str) -> tuple[list[str], str]:
        """쿼리를 (IP 목록, 도메인)으로 해석"""
        query = query.strip()
        if is_ip_literal(query):
            return [query], ""

        domain = query.rstrip(".")
        ips = self._resolve_from_zones(domain)
        if ips:
            return ips, domain

        ips = self.resolver(domain)
        if ips:
            return ips, domain

        logger.info("could not resolve %s, matching by domain only", domain)
        return [], domain

    def _resolve_from_zones(self, domain: str) -> list[str]:
        lowered = domain.lower()
        try:
            zones = self.source.hosted_zones()
        except Exception as e:
            logger.warning("hosted zone listing failed, falling back to system DNS: %s", e)
            return []

        ips: list[str] = []
        for zone in zones:
            zone_name = zone.name.lower()
            if lowered == zone_name:
                expected = "@"
            elif lowered.endswith("." + zone_name):
                expected = lowered[: -(len(zone_name) + 1)]
            else:
                continue

            try:
                records = self.source.dns_records(zone)
            except Exception as e:
                logger.warning("record listing failed for zone %s: %s", zone.name, e)
                continue

            for record in records:
                if record.record_type == "A" and record.rr.lower() == expected:
                    ips.extend(v for v in record.values if v not in ips)
        return ips

    def _tasks(self) -> dict[FinderCategory, Callable[[list[str], str], list[Any]]]:
        source = self.source
        return {
            FinderCategory.INSTANCES: lambda ips, d: match_instances(source.instances(), ips, d),
            FinderCategory.NETWORK_INTERFACES: lambda ips, d: match_network_interfaces(
                source.network_interfaces(), ips, d
            ),
            FinderCategory.LOAD_BALANCERS: lambda ips, d: match_load_balancers(source.load_balancers(), ips, d),
            FinderCategory.DNS_RECORDS: lambda ips, d: match_dns_records(source.all_dns_records(), ips, d),
            FinderCategory.DATABASES: lambda ips, d: match_databases(source.db_instances(), ips, d),
            FinderCategory.CACHES: lambda ips, d: match_caches(source.cache_clusters(), ips, d),
        }

    def find_resources(self, ips: list[str], domain: str, query: str = "") -> FindResult:
        """6개 카테고리를 동시에 조회하여 FindResult 반환"""
        result = FindResult(query=query or domain or ", ".join(ips), domain=domain, resolved_ips=list(ips))
        lock = threading.Lock()
        closed = False

        def run(category: FinderCategory, task: Callable[[list[str], str], list[Any]]) -> None:
            try:
                found = task(ips, domain)
            except Exception as e:
                logger.warning("finder category %s failed: %s", category.value, e)
                with lock:
                    if not closed:
                        result.failed.add(category)
                return

            with lock:
                if not closed:
                    result.matches[category] = found

        executor = ThreadPoolExecutor(max_workers=self.MAX_WORKERS, thread_name_prefix="finder")
        futures = {executor.submit(run, category, task): category for category, task in self._tasks().items()}
        _, not_done = wait(futures, timeout=self.timeout)

        with lock:
            closed = True
            for future in not_done:
                category = futures[future]
                logger.warning("finder category %s timed out after %ss", category.value, self.timeout)
                result.failed.add(category)

        executor.shutdown(wait=not not_done, cancel_futures=True)
        return result

    def find(self, query: str) -> FindResult:
        """resolve + find_resources"""
        ips, domain = self.resolve(query)
        return self.find_resources(ips, domain, query=query.strip())
