"""
tui/pages.py - 페이지 정의

Page는 상태가 없는 식별자이고, PageSpec이 각 페이지의 모양과 데이터를 정의합니다.

PageSpec 종류:
    menu      메인 메뉴
    list      테이블 (loader가 있으면 비동기 조회, 없으면 payload에서 동기 생성)
    viewport  JSON 뷰포트 (loader가 있으면 조회 결과를 표시)
    sections  섹션 테이블 (인스턴스 상세, Finder 결과)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from cli.i18n import enum_text, t
from core.data.services.compute import security_group_rules
from core.data.types import (
    CacheCluster,
    DBInstance,
    DNSRecord,
    Instance,
    LoadBalancer,
    NetworkInterface,
    SecurityGroup,
    SecurityGroupRule,
)
from core.finder import FinderCategory, FindResult

from .state.sections import Section
from .state.table import Column


class Page(str, Enum):
    MENU = "menu"
    INSTANCES = "instances"
    INSTANCE_DETAIL = "instance_detail"
    INSTANCE_SECURITY_GROUPS = "instance_security_groups"
    INSTANCE_VOLUMES = "instance_volumes"
    INSTANCE_INTERFACES = "instance_interfaces"
    SECURITY_GROUPS = "security_groups"
    SECURITY_GROUP_RULES = "security_group_rules"
    SECURITY_GROUP_INSTANCES = "security_group_instances"
    NETWORK_INTERFACES = "network_interfaces"
    LOAD_BALANCERS = "load_balancers"
    LISTENERS = "listeners"
    TARGET_GROUPS = "target_groups"
    TARGETS = "targets"
    DNS_ZONES = "dns_zones"
    DNS_RECORDS = "dns_records"
    DB_INSTANCES = "db_instances"
    DB_SNAPSHOTS = "db_snapshots"
    CACHE_CLUSTERS = "cache_clusters"
    QUEUES = "queues"
    QUEUE_DETAIL = "queue_detail"
    BUCKETS = "buckets"
    OBJECTS = "objects"
    FINDER_RESULTS = "finder_results"
    JSON_DETAIL = "json_detail"


@dataclass(frozen=True)
class PageSpec:
    kind: str
    columns: tuple[Column, ...] = ()
    row: Callable[[Any], tuple[str, ...]] | None = None
    loader: Callable[..., Any] | None = None
    build: Callable[[Any], Any] | None = None
    enter: Page | None = None
    shortcuts: dict[str, Page] = field(default_factory=dict)
    paged: bool = False

    @property
    def is_async(self) -> bool:
        return self.loader is not None or self.kind == "finder"


# =============================================================================
# 셀 포맷
# =============================================================================


def fmt_time(value: datetime | None) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value)


def fmt_size(num: int) -> str:
    size = float(num)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if size < 1024 or unit == "TB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{num} B"


def fmt_port(port: int | None) -> str:
    return "" if port is None else str(port)


# =============================================================================
# 동기 빌더
# =============================================================================


def build_security_group_rules(payload: Any) -> list[SecurityGroupRule]:
    if not isinstance(payload, SecurityGroup):
        raise TypeError(f"expected SecurityGroup, got {type(payload).__name__}")
    return security_group_rules(payload)


def build_instance_detail(payload: Any) -> list[Section]:
    """인스턴스 상세 섹션. Instance가 아니면 TypeError (JSON 뷰로 대체됨)"""
    if not isinstance(payload, Instance):
        raise TypeError(f"expected Instance, got {type(payload).__name__}")

    def kv(pairs: list[tuple[str, str]]) -> tuple[tuple[str, ...], ...]:
        return tuple((k, v or "-") for k, v in pairs)

    columns = (Column(t("dash.col_field"), 22), Column(t("dash.col_value")))
    inst = payload
    sections = [
        ("basic", t("dash.detail_basic"), kv([
            ("Instance ID", inst.instance_id),
            ("Name", inst.name),
            ("State", inst.state),
            ("Instance Type", inst.instance_type),
            ("Platform", inst.platform),
            ("Image ID", inst.image_id),
            ("Key Name", inst.key_name),
            ("Launch Time", fmt_time(inst.launch_time)),
        ])),
        ("network", t("dash.detail_network"), kv([
            ("Private IPs", ", ".join(inst.private_ips)),
            ("Public IP", inst.public_ip),
            ("IPv6", ", ".join(inst.ipv6_addresses)),
            ("Private DNS", inst.private_dns),
            ("Public DNS", inst.public_dns),
            ("VPC", inst.vpc_id),
            ("Subnet", inst.subnet_id),
            ("Availability Zone", inst.availability_zone),
            ("Security Groups", ", ".join(inst.security_groups)),
            ("Network Interfaces", ", ".join(inst.network_interfaces)),
        ])),
        ("tags", t("dash.detail_tags"), tuple(sorted(inst.tags.items()))),
    ]
    return [
        Section(key=key, title=title, columns=columns, rows=rows, payloads=tuple(v for _, v in rows), copy_value_only=True)
        for key, title, rows in sections
    ]


FINDER_COLUMNS: dict[FinderCategory, tuple[tuple[Column, ...], Callable[[Any], tuple[str, ...]]]] = {}


def build_finder_sections(result: FindResult) -> list[Section]:
    sections = []
    for category in FinderCategory:
        columns, row = FINDER_COLUMNS[category]
        items = result.items(category)
        sections.append(
            Section(
                key=category.value,
                title=enum_text("dash.finder", category),
                columns=columns,
                rows=tuple(row(item) for item in items),
                payloads=tuple(items),
                unavailable=category in result.failed,
            )
        )
    return sections


# =============================================================================
# 페이지 정의
# =============================================================================


def _instance_row(i: Instance) -> tuple[str, ...]:
    return (i.instance_id, i.name, i.state, i.instance_type, i.private_ip, i.public_ip, i.availability_zone)


def _sg_row(g: SecurityGroup) -> tuple[str, ...]:
    return (g.group_id, g.group_name, g.vpc_id, str(g.inbound_count), str(g.outbound_count), g.description)


def _eni_row(n: NetworkInterface) -> tuple[str, ...]:
    return (
        n.interface_id,
        n.status,
        n.interface_type,
        ", ".join(n.private_ips),
        ", ".join(n.public_ips),
        n.attached_instance_id,
        n.description,
    )


def _lb_row(lb: LoadBalancer) -> tuple[str, ...]:
    return (lb.name, lb.lb_type, lb.scheme, lb.state, lb.dns_name)


def _record_row(r: DNSRecord) -> tuple[str, ...]:
    return (r.name, r.record_type, "" if r.ttl is None else str(r.ttl), r.value, r.zone_name)


def _db_row(db: DBInstance) -> tuple[str, ...]:
    return (db.identifier, db.engine, db.engine_version, db.status, db.instance_class, db.endpoint, fmt_port(db.port))


def _cache_row(c: CacheCluster) -> tuple[str, ...]:
    return (c.cluster_id, c.engine, c.engine_version, c.status, c.node_type, str(c.num_nodes), c.endpoint)


INSTANCE_COLUMNS = (
    Column("ID", 21),
    Column("Name", 24),
    Column("State", 10),
    Column("Type", 12),
    Column("Private IP", 16),
    Column("Public IP", 16),
    Column("AZ"),
)
SG_COLUMNS = (
    Column("Group ID", 22),
    Column("Name", 24),
    Column("VPC", 22),
    Column("In", 4),
    Column("Out", 4),
    Column("Description"),
)
ENI_COLUMNS = (
    Column("ENI ID", 22),
    Column("Status", 10),
    Column("Type", 12),
    Column("Private IPs", 20),
    Column("Public IPs", 18),
    Column("Instance", 20),
    Column("Description"),
)
LB_COLUMNS = (Column("Name", 28), Column("Type", 12), Column("Scheme", 16), Column("State", 10), Column("DNS Name"))
RECORD_COLUMNS = (Column("Name", 36), Column("Type", 6), Column("TTL", 6), Column("Value", 40), Column("Zone"))
DB_COLUMNS = (
    Column("Identifier", 24),
    Column("Engine", 14),
    Column("Version", 10),
    Column("Status", 12),
    Column("Class", 16),
    Column("Endpoint", 50),
    Column("Port"),
)
CACHE_COLUMNS = (
    Column("Cluster ID", 24),
    Column("Engine", 10),
    Column("Version", 10),
    Column("Status", 12),
    Column("Node Type", 18),
    Column("Nodes", 6),
    Column("Endpoint"),
)

FINDER_COLUMNS.update(
    {
        FinderCategory.INSTANCES: (INSTANCE_COLUMNS, _instance_row),
        FinderCategory.NETWORK_INTERFACES: (ENI_COLUMNS, _eni_row),
        FinderCategory.LOAD_BALANCERS: (LB_COLUMNS, _lb_row),
        FinderCategory.DNS_RECORDS: (RECORD_COLUMNS, _record_row),
        FinderCategory.DATABASES: (DB_COLUMNS, _db_row),
        FinderCategory.CACHES: (CACHE_COLUMNS, _cache_row),
    }
)


PAGES: dict[Page, PageSpec] = {
    Page.MENU: PageSpec(kind="menu", columns=(Column("", 4), Column("Service", 24), Column("Description"))),
    Page.INSTANCES: PageSpec(
        kind="list",
        columns=INSTANCE_COLUMNS,
        row=_instance_row,
        loader=lambda services, payload: services.instances(),
        enter=Page.INSTANCE_DETAIL,
        shortcuts={"s": Page.INSTANCE_SECURITY_GROUPS, "v": Page.INSTANCE_VOLUMES, "i": Page.INSTANCE_INTERFACES},
    ),
    Page.INSTANCE_DETAIL: PageSpec(
        kind="sections",
        build=build_instance_detail,
        shortcuts={
            "s": Page.INSTANCE_SECURITY_GROUPS,
            "v": Page.INSTANCE_VOLUMES,
            "i": Page.INSTANCE_INTERFACES,
            "o": Page.JSON_DETAIL,
        },
    ),
    Page.INSTANCE_SECURITY_GROUPS: PageSpec(
        kind="list",
        columns=SG_COLUMNS,
        row=_sg_row,
        loader=lambda services, payload: services.instance_security_groups(payload),
        enter=Page.SECURITY_GROUP_RULES,
    ),
    Page.INSTANCE_VOLUMES: PageSpec(
        kind="list",
        columns=(
            Column("Volume ID", 24),
            Column("Name", 20),
            Column("Device", 12),
            Column("Size", 8),
            Column("Type", 6),
            Column("IOPS", 6),
            Column("State"),
        ),
        row=lambda v: (
            v.volume_id,
            v.name,
            v.device,
            f"{v.size} GiB",
            v.volume_type,
            "" if v.iops is None else str(v.iops),
            v.state,
        ),
        loader=lambda services, payload: services.instance_volumes(payload),
        enter=Page.JSON_DETAIL,
    ),
    Page.INSTANCE_INTERFACES: PageSpec(
        kind="list",
        columns=ENI_COLUMNS,
        row=_eni_row,
        loader=lambda services, payload: services.instance_interfaces(payload),
        enter=Page.JSON_DETAIL,
    ),
    Page.SECURITY_GROUPS: PageSpec(
        kind="list",
        columns=SG_COLUMNS,
        row=_sg_row,
        loader=lambda services, payload: services.security_groups(),
        enter=Page.SECURITY_GROUP_RULES,
        shortcuts={"s": Page.SECURITY_GROUP_INSTANCES},
    ),
    Page.SECURITY_GROUP_RULES: PageSpec(
        kind="list",
        columns=(
            Column("Direction", 10),
            Column("Protocol", 9),
            Column("Port", 12),
            Column("Source", 36),
            Column("Description"),
        ),
        row=lambda r: (r.direction, r.protocol, r.port_range, r.source, r.description),
        build=build_security_group_rules,
        enter=Page.JSON_DETAIL,
    ),
    Page.SECURITY_GROUP_INSTANCES: PageSpec(
        kind="list",
        columns=INSTANCE_COLUMNS,
        row=_instance_row,
        loader=lambda services, payload: services.security_group_instances(payload),
        enter=Page.INSTANCE_DETAIL,
    ),
    Page.NETWORK_INTERFACES: PageSpec(
        kind="list",
        columns=ENI_COLUMNS,
        row=_eni_row,
        loader=lambda services, payload: services.network_interfaces(),
        enter=Page.JSON_DETAIL,
    ),
    Page.LOAD_BALANCERS: PageSpec(
        kind="list",
        columns=LB_COLUMNS,
        row=_lb_row,
        loader=lambda services, payload: services.load_balancers(),
        enter=Page.JSON_DETAIL,
        shortcuts={"l": Page.LISTENERS, "t": Page.TARGET_GROUPS},
    ),
    Page.LISTENERS: PageSpec(
        kind="list",
        columns=(Column("Port", 8), Column("Protocol", 10), Column("Default Action", 48), Column("Certificates")),
        row=lambda ls: (str(ls.port), ls.protocol, ls.default_action, ", ".join(ls.certificates)),
        loader=lambda services, payload: services.listeners(payload),
        enter=Page.JSON_DETAIL,
    ),
    Page.TARGET_GROUPS: PageSpec(
        kind="list",
        columns=(
            Column("Name", 32),
            Column("Protocol", 10),
            Column("Port", 8),
            Column("Target Type", 12),
            Column("Health Check", 24),
            Column("VPC"),
        ),
        row=lambda g: (g.name, g.protocol, fmt_port(g.port), g.target_type, g.health_check_path, g.vpc_id),
        loader=lambda services, payload: services.target_groups(payload),
        enter=Page.TARGETS,
    ),
    Page.TARGETS: PageSpec(
        kind="list",
        columns=(Column("Target", 40), Column("Port", 8), Column("Health", 12), Column("AZ", 16), Column("Reason")),
        row=lambda tg: (tg.target_id, fmt_port(tg.port), tg.health, tg.availability_zone, tg.reason),
        loader=lambda services, payload: services.targets(payload),
        enter=Page.JSON_DETAIL,
    ),
    Page.DNS_ZONES: PageSpec(
        kind="list",
        columns=(Column("Zone", 36), Column("Zone ID", 24), Column("Type", 8), Column("Records", 8), Column("Comment")),
        row=lambda z: (z.name, z.zone_id, "private" if z.private else "public", str(z.record_count), z.comment),
        loader=lambda services, payload: services.hosted_zones(),
        enter=Page.DNS_RECORDS,
    ),
    Page.DNS_RECORDS: PageSpec(
        kind="list",
        columns=(Column("Name", 40), Column("RR", 20), Column("Type", 6), Column("TTL", 6), Column("Value")),
        row=lambda r: (r.name, r.rr, r.record_type, "" if r.ttl is None else str(r.ttl), r.value),
        loader=lambda services, payload: services.dns_records(payload),
        enter=Page.JSON_DETAIL,
    ),
    Page.DB_INSTANCES: PageSpec(
        kind="list",
        columns=DB_COLUMNS,
        row=_db_row,
        loader=lambda services, payload: services.db_instances(),
        enter=Page.JSON_DETAIL,
        shortcuts={"s": Page.DB_SNAPSHOTS},
    ),
    Page.DB_SNAPSHOTS: PageSpec(
        kind="list",
        columns=(Column("Snapshot", 40), Column("Status", 12), Column("Type", 10), Column("Size", 8), Column("Created")),
        row=lambda s: (s.snapshot_id, s.status, s.snapshot_type, f"{s.storage_gb} GiB", fmt_time(s.created)),
        loader=lambda services, payload: services.db_snapshots(payload),
        enter=Page.JSON_DETAIL,
    ),
    Page.CACHE_CLUSTERS: PageSpec(
        kind="list",
        columns=CACHE_COLUMNS,
        row=_cache_row,
        loader=lambda services, payload: services.cache_clusters(),
        enter=Page.JSON_DETAIL,
    ),
    Page.QUEUES: PageSpec(
        kind="list",
        columns=(Column("Name", 48), Column("FIFO", 6), Column("URL")),
        row=lambda q: (q.name, "yes" if q.fifo else "", q.url),
        loader=lambda services, payload: services.queues(),
        enter=Page.QUEUE_DETAIL,
    ),
    Page.QUEUE_DETAIL: PageSpec(kind="viewport", loader=lambda services, payload: services.queue(payload)),
    Page.BUCKETS: PageSpec(
        kind="list",
        columns=(Column("Bucket", 56), Column("Created")),
        row=lambda b: (b.name, fmt_time(b.created)),
        loader=lambda services, payload: services.buckets(),
        enter=Page.OBJECTS,
    ),
    Page.OBJECTS: PageSpec(
        kind="list",
        columns=(Column("Key", 60), Column("Size", 10), Column("Class", 14), Column("Last Modified")),
        row=lambda o: (o.key, fmt_size(o.size), o.storage_class, fmt_time(o.last_modified)),
        loader=lambda services, payload, token=None: services.objects(payload, token),
        enter=Page.JSON_DETAIL,
        paged=True,
    ),
    Page.FINDER_RESULTS: PageSpec(kind="finder"),
    Page.JSON_DETAIL: PageSpec(kind="viewport"),
}


# 메인 메뉴: (단축키, 페이지 또는 특수 항목, 메시지 키)
MENU_ITEMS: tuple[tuple[str, Page, str], ...] = (
    ("i", Page.INSTANCES, "instances"),
    ("s", Page.SECURITY_GROUPS, "security_groups"),
    ("e", Page.NETWORK_INTERFACES, "network_interfaces"),
    ("b", Page.LOAD_BALANCERS, "load_balancers"),
    ("d", Page.DNS_ZONES, "dns_zones"),
    ("r", Page.DB_INSTANCES, "db_instances"),
    ("c", Page.CACHE_CLUSTERS, "cache_clusters"),
    ("m", Page.QUEUES, "queues"),
    ("o", Page.BUCKETS, "buckets"),
    ("f", Page.FINDER_RESULTS, "finder"),
)


def page_title(page: Page) -> str:
    return enum_text("dash.page", page)


def detail_page_for(record: Any) -> Page:
    """Finder 결과 등에서 레코드 타입에 맞는 상세 페이지"""
    if isinstance(record, Instance):
        return Page.INSTANCE_DETAIL
    if isinstance(record, SecurityGroup):
        return Page.SECURITY_GROUP_RULES
    return Page.JSON_DETAIL

