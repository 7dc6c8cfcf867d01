"""
core/data/services/network.py - ENI collection
"""

from __future__ import annotations

from typing import Any

from ..types import NetworkInterface, parse_tags
from .base import api_call


def _parse_interface(data: dict[str, Any]) -> NetworkInterface:
    tags, _ = parse_tags(data.get("TagSet"))

    private_ips = []
    public_ips = []
    for addr in data.get("PrivateIpAddresses", []):
        if addr.get("PrivateIpAddress"):
            private_ips.append(addr["PrivateIpAddress"])
        public_ip = addr.get("Association", {}).get("PublicIp", "")
        if public_ip and public_ip not in public_ips:
            public_ips.append(public_ip)

    primary = data.get("PrivateIpAddress", "")
    if primary and primary not in private_ips:
        private_ips.insert(0, primary)
    association_ip = data.get("Association", {}).get("PublicIp", "")
    if association_ip and association_ip not in public_ips:
        public_ips.insert(0, association_ip)

    return NetworkInterface(
        interface_id=data.get("NetworkInterfaceId", ""),
        status=data.get("Status", ""),
        interface_type=data.get("InterfaceType", ""),
        description=data.get("Description", ""),
        private_ips=private_ips,
        public_ips=public_ips,
        ipv6_addresses=[a.get("Ipv6Address", "") for a in data.get("Ipv6Addresses", []) if a.get("Ipv6Address")],
        vpc_id=data.get("VpcId", ""),
        subnet_id=data.get("SubnetId", ""),
        availability_zone=data.get("AvailabilityZone", ""),
        attached_instance_id=data.get("Attachment", {}).get("InstanceId", ""),
        security_groups=[g.get("GroupId", "") for g in data.get("Groups", [])],
        tags=tags,
        raw=data,
    )


@api_call("ec2", "describe_network_interfaces")
def list_network_interfaces(ec2: Any, instance_id: str | None = None) -> list[NetworkInterface]:
    """ENI 목록 (instance_id가 주어지면 해당 인스턴스에 연결된 것만)"""
    params: dict[str, Any] = {}
    if instance_id:
        params["Filters"] = [{"Name": "attachment.instance-id", "Values": [instance_id]}]

    interfaces = []
    paginator = ec2.get_paginator("describe_network_interfaces")
    for page in paginator.paginate(**params):
        for data in page.get("NetworkInterfaces", []):
            interfaces.append(_parse_interface(data))
    return interfaces
