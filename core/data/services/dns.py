"""
core/data/services/dns.py - Route53 호스팅 존 / 레코드 수집

존과 레코드 이름은 끝 점을 뺀 형태로 반환하고,
Route53 8진 이스케이프(``*``를 나타내는 ``\\052``)는 복원합니다.
"""

from __future__ import annotations

import re
from typing import Any

from ..types import DNSRecord, HostedZone
from .base import api_call

_OCTAL_ESCAPE = re.compile(r"\\(\d{3})")


def normalize_name(name: str) -> str:
    """Route53 이름 정규화 (끝 점 제거, 8진 이스케이프 복원, 소문자)"""
    name = _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), name)
    return name.rstrip(".").lower()


def relative_name(fqdn: str, zone_name: str) -> str:
    """존 기준 상대 이름. 존 apex는 ``@``"""
    if fqdn == zone_name:
        return "@"
    suffix = "." + zone_name
    if fqdn.endswith(suffix):
        return fqdn[: -len(suffix)]
    return fqdn


@api_call("route53", "list_hosted_zones")
def list_hosted_zones(route53: Any) -> list[HostedZone]:
    zones = []
    paginator = route53.get_paginator("list_hosted_zones")
    for page in paginator.paginate():
        for data in page.get("HostedZones", []):
            config = data.get("Config", {})
            zones.append(
                HostedZone(
                    zone_id=data.get("Id", "").split("/")[-1],
                    name=normalize_name(data.get("Name", "")),
                    private=config.get("PrivateZone", False),
                    record_count=data.get("ResourceRecordSetCount", 0),
                    comment=config.get("Comment", ""),
                    raw=data,
                )
            )
    return zones


@api_call("route53", "list_resource_record_sets")
def list_records(route53: Any, zone: HostedZone) -> list[DNSRecord]:
    records = []
    paginator = route53.get_paginator("list_resource_record_sets")
    for page in paginator.paginate(HostedZoneId=zone.zone_id):
        for data in page.get("ResourceRecordSets", []):
            fqdn = normalize_name(data.get("Name", ""))
            alias = data.get("AliasTarget")
            if alias:
                values = [normalize_name(alias.get("DNSName", ""))]
            else:
                values = [r.get("Value", "") for r in data.get("ResourceRecords", [])]

            routing = ""
            if data.get("SetIdentifier"):
                routing = data["SetIdentifier"]

            records.append(
                DNSRecord(
                    zone_name=zone.name,
                    name=fqdn,
                    rr=relative_name(fqdn, zone.name),
                    record_type=data.get("Type", ""),
                    values=values,
                    ttl=data.get("TTL"),
                    zone_id=zone.zone_id,
                    alias=bool(alias),
                    routing=routing,
                    raw=data,
                )
            )
    return records
