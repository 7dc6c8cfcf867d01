"""
core/data/services/compute.py - EC2 instances, security groups, volumes, regions
"""

from __future__ import annotations

from typing import Any

from ..types import Instance, SecurityGroup, SecurityGroupRule, Volume, parse_tags
from .base import api_call


def _parse_instance(data: dict[str, Any]) -> Instance:
    tags, name = parse_tags(data.get("Tags"))

    private_ips: list[str] = []
    ipv6: list[str] = []
    enis: list[str] = []
    for eni in data.get("NetworkInterfaces", []):
        enis.append(eni.get("NetworkInterfaceId", ""))
        for addr in eni.get("PrivateIpAddresses", []):
            ip = addr.get("PrivateIpAddress", "")
            if ip and ip not in private_ips:
                private_ips.append(ip)
        ipv6.extend(a.get("Ipv6Address", "") for a in eni.get("Ipv6Addresses", []))

    primary = data.get("PrivateIpAddress", "")
    if primary and primary not in private_ips:
        private_ips.insert(0, primary)

    return Instance(
        instance_id=data.get("InstanceId", ""),
        instance_type=data.get("InstanceType", ""),
        state=data.get("State", {}).get("Name", ""),
        name=name,
        private_ips=private_ips,
        public_ip=data.get("PublicIpAddress", ""),
        ipv6_addresses=[ip for ip in ipv6 if ip],
        private_dns=data.get("PrivateDnsName", ""),
        public_dns=data.get("PublicDnsName", ""),
        vpc_id=data.get("VpcId", ""),
        subnet_id=data.get("SubnetId", ""),
        availability_zone=data.get("Placement", {}).get("AvailabilityZone", ""),
        image_id=data.get("ImageId", ""),
        key_name=data.get("KeyName", ""),
        platform=data.get("PlatformDetails", ""),
        launch_time=data.get("LaunchTime"),
        security_groups=[sg.get("GroupId", "") for sg in data.get("SecurityGroups", [])],
        network_interfaces=enis,
        tags=tags,
        raw=data,
    )


def _collect_instances(ec2: Any, **params: Any) -> list[Instance]:
    instances = []
    paginator = ec2.get_paginator("describe_instances")
    for page in paginator.paginate(**params):
        for reservation in page.get("Reservations", []):
            for data in reservation.get("Instances", []):
                instances.append(_parse_instance(data))
    return instances


@api_call("ec2", "describe_instances")
def list_instances(ec2: Any) -> list[Instance]:
    """리전의 모든 EC2 인스턴스"""
    return _collect_instances(ec2)


@api_call("ec2", "describe_instances")
def list_instances_by_security_group(ec2: Any, group_id: str) -> list[Instance]:
    """보안 그룹을 사용하는 인스턴스"""
    return _collect_instances(ec2, Filters=[{"Name": "instance.group-id", "Values": [group_id]}])


def _parse_security_group(data: dict[str, Any]) -> SecurityGroup:
    tags, _ = parse_tags(data.get("Tags"))
    return SecurityGroup(
        group_id=data.get("GroupId", ""),
        group_name=data.get("GroupName", ""),
        vpc_id=data.get("VpcId", ""),
        description=data.get("Description", ""),
        owner_id=data.get("OwnerId", ""),
        inbound_count=len(data.get("IpPermissions", [])),
        outbound_count=len(data.get("IpPermissionsEgress", [])),
        tags=tags,
        raw=data,
    )


@api_call("ec2", "describe_security_groups")
def list_security_groups(ec2: Any, group_ids: list[str] | None = None) -> list[SecurityGroup]:
    """보안 그룹 목록 (group_ids가 주어지면 해당 그룹만)"""
    params: dict[str, Any] = {}
    if group_ids:
        params["GroupIds"] = group_ids

    groups = []
    paginator = ec2.get_paginator("describe_security_groups")
    for page in paginator.paginate(**params):
        for data in page.get("SecurityGroups", []):
            groups.append(_parse_security_group(data))
    return groups


def _port_range(permission: dict[str, Any]) -> str:
    protocol = permission.get("IpProtocol", "")
    if protocol == "-1":
        return "all"
    from_port = permission.get("FromPort")
    to_port = permission.get("ToPort")
    if from_port is None:
        return "all"
    if from_port == to_port:
        return str(from_port)
    return f"{from_port}-{to_port}"


def security_group_rules(group: SecurityGroup) -> list[SecurityGroupRule]:
    """보안 그룹 raw 데이터에서 규칙을 펼쳐서 반환 (API 호출 없음)

    permission 하나에 source가 여러 개면 source마다 한 줄씩 만듭니다.
    """
    rules = []
    for direction, key in (("ingress", "IpPermissions"), ("egress", "IpPermissionsEgress")):
        for perm in group.raw.get(key, []):
            protocol = perm.get("IpProtocol", "")
            protocol = "all" if protocol == "-1" else protocol
            port_range = _port_range(perm)

            sources: list[tuple[str, str]] = []
            sources += [(r.get("CidrIp", ""), r.get("Description", "")) for r in perm.get("IpRanges", [])]
            sources += [(r.get("CidrIpv6", ""), r.get("Description", "")) for r in perm.get("Ipv6Ranges", [])]
            sources += [(r.get("PrefixListId", ""), r.get("Description", "")) for r in perm.get("PrefixListIds", [])]
            sources += [(r.get("GroupId", ""), r.get("Description", "")) for r in perm.get("UserIdGroupPairs", [])]
            if not sources:
                sources = [("", "")]

            for source, description in sources:
                rules.append(
                    SecurityGroupRule(
                        group_id=group.group_id,
                        direction=direction,
                        protocol=protocol,
                        port_range=port_range,
                        source=source,
                        description=description,
                        raw=perm,
                    )
                )
    return rules


@api_call("ec2", "describe_volumes")
def list_instance_volumes(ec2: Any, instance_id: str) -> list[Volume]:
    """인스턴스에 연결된 EBS 볼륨"""
    volumes = []
    paginator = ec2.get_paginator("describe_volumes")
    for page in paginator.paginate(Filters=[{"Name": "attachment.instance-id", "Values": [instance_id]}]):
        for data in page.get("Volumes", []):
            _, name = parse_tags(data.get("Tags"))
            device = ""
            for attachment in data.get("Attachments", []):
                if attachment.get("InstanceId") == instance_id:
                    device = attachment.get("Device", "")
            volumes.append(
                Volume(
                    volume_id=data.get("VolumeId", ""),
                    size=data.get("Size", 0),
                    volume_type=data.get("VolumeType", ""),
                    state=data.get("State", ""),
                    name=name,
                    device=device,
                    iops=data.get("Iops"),
                    encrypted=data.get("Encrypted", False),
                    availability_zone=data.get("AvailabilityZone", ""),
                    raw=data,
                )
            )
    return volumes


@api_call("ec2", "describe_regions")
def list_regions(ec2: Any) -> list[str]:
    """계정에서 활성화된 리전 코드 (정렬)"""
    response = ec2.describe_regions()
    return sorted(r.get("RegionName", "") for r in response.get("Regions", []) if r.get("RegionName"))
