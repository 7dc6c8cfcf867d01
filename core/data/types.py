"""
core/data/types.py - 리소스 레코드 데이터클래스

``core.data.services`` 수집기가 만드는 타입 레코드입니다.
모든 레코드는 API 원본 응답을 ``raw``에 보관하고 JSON 뷰포트는 이를 그대로 보여줍니다.
``ResourceRecord``는 페이지 이동 payload로 쓰이는 레코드 타입의 닫힌 합집합이며,
그 밖의 값은 ``RawRecord``로 감쌉니다.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Union


def parse_tags(tags: list[dict[str, str]] | None) -> tuple[dict[str, str], str]:
    """Tag 리스트를 dict로 변환하고 Name 태그 값을 함께 반환"""
    parsed = {}
    name = ""
    for tag in tags or []:
        key = tag.get("Key", "")
        value = tag.get("Value", "")
        if not key.startswith("aws:"):
            parsed[key] = value
        if key == "Name":
            name = value
    return parsed, name


# =============================================================================
# EC2
# =============================================================================


@dataclass
class Instance:
    """EC2 인스턴스 정보"""

    instance_id: str
    instance_type: str
    state: str
    name: str = ""
    private_ips: list[str] = field(default_factory=list)
    public_ip: str = ""
    ipv6_addresses: list[str] = field(default_factory=list)
    private_dns: str = ""
    public_dns: str = ""
    vpc_id: str = ""
    subnet_id: str = ""
    availability_zone: str = ""
    image_id: str = ""
    key_name: str = ""
    platform: str = ""
    launch_time: datetime | None = None
    security_groups: list[str] = field(default_factory=list)
    network_interfaces: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def private_ip(self) -> str:
        return self.private_ips[0] if self.private_ips else ""

    @property
    def ip_fields(self) -> list[str]:
        return [*self.private_ips, self.public_ip, *self.ipv6_addresses]


@dataclass
class SecurityGroup:
    """Security Group 정보"""

    group_id: str
    group_name: str
    vpc_id: str = ""
    description: str = ""
    owner_id: str = ""
    inbound_count: int = 0
    outbound_count: int = 0
    tags: dict[str, str] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class SecurityGroupRule:
    """Security Group 규칙 (권한 1개 x 소스 1개)"""

    group_id: str
    direction: str  # ingress, egress
    protocol: str
    port_range: str
    source: str
    description: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class Volume:
    """EBS 볼륨 정보"""

    volume_id: str
    size: int
    volume_type: str
    state: str
    name: str = ""
    device: str = ""
    iops: int | None = None
    encrypted: bool = False
    availability_zone: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class NetworkInterface:
    """ENI 정보"""

    interface_id: str
    status: str
    interface_type: str = ""
    description: str = ""
    private_ips: list[str] = field(default_factory=list)
    public_ips: list[str] = field(default_factory=list)
    ipv6_addresses: list[str] = field(default_factory=list)
    vpc_id: str = ""
    subnet_id: str = ""
    availability_zone: str = ""
    attached_instance_id: str = ""
    security_groups: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def ip_fields(self) -> list[str]:
        return [*self.private_ips, *self.public_ips, *self.ipv6_addresses]


# =============================================================================
# ELB
# =============================================================================


@dataclass
class LoadBalancer:
    """로드밸런서 정보 (ALB, NLB, GWLB, CLB)"""

    name: str
    dns_name: str
    lb_type: str  # application, network, gateway, classic
    scheme: str = ""
    state: str = ""
    arn: str = ""
    vpc_id: str = ""
    ip_addresses: list[str] = field(default_factory=list)
    availability_zones: list[str] = field(default_factory=list)
    created_time: datetime | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_classic(self) -> bool:
        return self.lb_type == "classic"

    @property
    def ip_fields(self) -> list[str]:
        return list(self.ip_addresses)


@dataclass
class Listener:
    """로드밸런서 리스너"""

    port: int
    protocol: str
    arn: str = ""
    default_action: str = ""
    certificates: list[str] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class TargetGroup:
    """Target Group 정보"""

    arn: str
    name: str
    protocol: str = ""
    port: int | None = None
    target_type: str = ""
    vpc_id: str = ""
    health_check_path: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class Target:
    """등록된 대상과 헬스 상태"""

    target_id: str
    port: int | None = None
    health: str = ""
    reason: str = ""
    availability_zone: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


# =============================================================================
# Route53
# =============================================================================


@dataclass
class HostedZone:
    """Route53 호스팅 존 (이름은 끝 점 제외)"""

    zone_id: str
    name: str
    private: bool = False
    record_count: int = 0
    comment: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class DNSRecord:
    """Route53 레코드 세트

    ``rr``은 존 기준 상대 이름이며 존 apex는 ``@``.
    """

    zone_name: str
    name: str
    rr: str
    record_type: str
    values: list[str] = field(default_factory=list)
    ttl: int | None = None
    zone_id: str = ""
    alias: bool = False
    routing: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def value(self) -> str:
        return ", ".join(self.values)


# =============================================================================
# RDS / ElastiCache
# =============================================================================


@dataclass
class DBInstance:
    """RDS DB 인스턴스 정보"""

    identifier: str
    engine: str
    status: str
    instance_class: str = ""
    engine_version: str = ""
    endpoint: str = ""
    port: int | None = None
    availability_zone: str = ""
    multi_az: bool = False
    vpc_id: str = ""
    storage_gb: int = 0
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def connection_fields(self) -> list[str]:
        return [self.endpoint] if self.endpoint else []


@dataclass
class DBSnapshot:
    """RDS DB 스냅샷"""

    snapshot_id: str
    db_instance_id: str
    status: str
    snapshot_type: str = ""
    created: datetime | None = None
    storage_gb: int = 0
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class CacheCluster:
    """ElastiCache 클러스터 정보"""

    cluster_id: str
    engine: str
    status: str
    node_type: str = ""
    engine_version: str = ""
    num_nodes: int = 0
    endpoint: str = ""
    port: int | None = None
    node_endpoints: list[str] = field(default_factory=list)
    replication_group_id: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def connection_fields(self) -> list[str]:
        return [e for e in [self.endpoint, *self.node_endpoints] if e]


# =============================================================================
# SQS / S3
# =============================================================================


@dataclass
class Queue:
    """SQS 큐"""

    name: str
    url: str
    fifo: bool = False
    attributes: dict[str, str] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class Bucket:
    """S3 버킷"""

    name: str
    created: datetime | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class S3Object:
    """S3 오브젝트 요약"""

    bucket: str
    key: str
    size: int = 0
    last_modified: datetime | None = None
    storage_class: str = ""
    etag: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


# =============================================================================
# Fallback
# =============================================================================


@dataclass
class RawRecord:
    """일반 JSON 뷰포트로만 보여주는 타입 없는 payload"""

    data: Any = None


ResourceRecord = Union[
    Instance,
    SecurityGroup,
    SecurityGroupRule,
    Volume,
    NetworkInterface,
    LoadBalancer,
    Listener,
    TargetGroup,
    Target,
    HostedZone,
    DNSRecord,
    DBInstance,
    DBSnapshot,
    CacheCluster,
    Queue,
    Bucket,
    S3Object,
    RawRecord,
]

RECORD_TYPES = ResourceRecord.__args__


def as_record(value: Any) -> ResourceRecord:
    """알려진 레코드 타입은 그대로, 그 밖의 값은 RawRecord로 감쌈"""
    if isinstance(value, RECORD_TYPES):
        return value
    return RawRecord(data=value)


def record_data(record: Any) -> Any:
    """JSON 뷰포트, 클립보드, 에디터에 넘길 구조화 데이터"""
    if isinstance(record, RawRecord):
        return record.data
    raw = getattr(record, "raw", None)
    if raw:
        return raw
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        data = dataclasses.asdict(record)
        data.pop("raw", None)
        return data
    return record
