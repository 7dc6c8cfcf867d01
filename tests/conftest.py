"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹, 가짜 조회 서비스, 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_services, moto_s3):
        # fake_services: 메모리 기반 CloudServices 대역
        # moto_s3: moto를 사용한 S3 모킹
        pass
"""

import os
import sys
from pathlib import Path
from typing import Any, Optional
from unittest.mock import MagicMock, patch

import boto3
import moto
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cli.i18n import set_lang  # noqa: E402
from core.data.types import (  # noqa: E402
    CacheCluster,
    DBInstance,
    DNSRecord,
    HostedZone,
    Instance,
    LoadBalancer,
    NetworkInterface,
)

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    # 테스트용 환경 변수 설정
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    set_lang("ko")

    yield

    set_lang("ko")


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        # 기본 클라이언트 설정
        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "ap-northeast-2"
        mock_session.available_profiles = ["default", "dev", "prod"]

        yield mock_session


def paginated_client(**pages: list) -> MagicMock:
    """get_paginator(name).paginate()가 지정한 페이지 목록을 돌려주는 클라이언트"""
    client = MagicMock()

    def get_paginator(name: str) -> MagicMock:
        paginator = MagicMock()
        paginator.paginate.return_value = pages.get(name, [])
        return paginator

    client.get_paginator.side_effect = get_paginator
    return client


@pytest.fixture
def make_paginated_client():
    """paginated_client 팩토리"""
    return paginated_client


# =============================================================================
# 가짜 조회 서비스
# =============================================================================


class FakeServices:
    """CloudServices와 같은 조회 메서드를 가진 메모리 대역

    failing에 메서드 이름을 넣으면 해당 조회가 예외를 던집니다.
    """

    def __init__(self, region: str = "ap-northeast-2", profile: Optional[str] = None):
        self.region = region
        self.profile = profile
        self.failing: set = set()
        self.calls: list = []
        self._instances = [
            Instance(
                instance_id="i-0aaa",
                instance_type="t3.micro",
                state="running",
                name="web-1",
                private_ips=["10.0.1.15"],
                public_ip="3.35.10.20",
                tags={"Name": "web-1", "env": "prod"},
            ),
            Instance(
                instance_id="i-0bbb",
                instance_type="t3.small",
                state="stopped",
                name="batch",
                private_ips=["10.0.2.30"],
            ),
        ]
        self._interfaces = [
            NetworkInterface(interface_id="eni-0aaa", status="in-use", private_ips=["10.0.1.15"]),
            NetworkInterface(interface_id="eni-0ccc", status="available", private_ips=["10.0.3.9"]),
        ]
        self._load_balancers = [
            LoadBalancer(name="api-nlb", dns_name="api-nlb-123.elb.amazonaws.com", lb_type="network",
                         ip_addresses=["10.0.1.100"]),
        ]
        self._zones = [HostedZone(zone_id="Z1", name="example.com", record_count=4)]
        self._records = [
            DNSRecord(zone_name="example.com", name="api.example.com", rr="api", record_type="A",
                      values=["10.0.1.15"], ttl=300, zone_id="Z1"),
            DNSRecord(zone_name="example.com", name="example.com", rr="@", record_type="A",
                      values=["10.0.9.9"], ttl=300, zone_id="Z1"),
            DNSRecord(zone_name="example.com", name="db.example.com", rr="db", record_type="CNAME",
                      values=["main.abc.ap-northeast-2.rds.amazonaws.com"], ttl=60, zone_id="Z1"),
            DNSRecord(zone_name="example.com", name="db.internal.example.com", rr="db.internal", record_type="A",
                      values=["10.0.0.5"], ttl=300, zone_id="Z1"),
        ]
        self._databases = [
            DBInstance(identifier="main", engine="mysql", status="available",
                       endpoint="main.abc.ap-northeast-2.rds.amazonaws.com", port=3306),
        ]
        self._caches = [
            CacheCluster(cluster_id="sessions", engine="redis", status="available",
                         node_endpoints=["sessions.xyz.cache.amazonaws.com"]),
        ]

    def _call(self, name: str, value: Any) -> Any:
        self.calls.append(name)
        if name in self.failing:
            raise RuntimeError(f"{name} failed")
        return value

    def instances(self):
        return self._call("instances", list(self._instances))

    def network_interfaces(self):
        return self._call("network_interfaces", list(self._interfaces))

    def load_balancers(self):
        return self._call("load_balancers", list(self._load_balancers))

    def hosted_zones(self):
        return self._call("hosted_zones", list(self._zones))

    def dns_records(self, zone):
        return self._call("dns_records", [r for r in self._records if r.zone_id == zone.zone_id])

    def all_dns_records(self):
        return self._call("all_dns_records", list(self._records))

    def db_instances(self):
        return self._call("db_instances", list(self._databases))

    def cache_clusters(self):
        return self._call("cache_clusters", list(self._caches))

    def regions(self):
        return self._call("regions", ["ap-northeast-2", "us-east-1"])


@pytest.fixture
def fake_services():
    """메모리 기반 조회 서비스"""
    return FakeServices()


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        "TestOperation",
    )


@pytest.fixture
def client_error():
    """ClientError 팩토리"""
    return create_mock_client_error


# =============================================================================
# moto 통합
# =============================================================================


@pytest.fixture
def aws_credentials():
    """moto 사용 시 AWS 자격 증명 설정"""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "ap-northeast-2"


@pytest.fixture
def moto_s3(aws_credentials):
    """moto를 사용한 S3 모킹"""
    with moto.mock_aws():
        yield boto3.client("s3", region_name="ap-northeast-2")


@pytest.fixture
def moto_route53(aws_credentials):
    """moto를 사용한 Route53 모킹"""
    with moto.mock_aws():
        yield boto3.client("route53", region_name="us-east-1")


@pytest.fixture
def moto_sqs(aws_credentials):
    """moto를 사용한 SQS 모킹"""
    with moto.mock_aws():
        yield boto3.client("sqs", region_name="ap-northeast-2")
