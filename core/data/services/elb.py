"""
core/data/services/elb.py - Load Balancer collection

ALB/NLB/GWLB (elbv2) and Classic LB (elb), listeners, target groups and
registered targets.
"""

from __future__ import annotations

from typing import Any

from ..types import Listener, LoadBalancer, Target, TargetGroup
from .base import api_call


@api_call("elbv2", "describe_load_balancers")
def list_v2_load_balancers(elbv2: Any) -> list[LoadBalancer]:
    load_balancers = []
    paginator = elbv2.get_paginator("describe_load_balancers")
    for page in paginator.paginate():
        for data in page.get("LoadBalancers", []):
            ips: list[str] = []
            zones: list[str] = []
            for az in data.get("AvailabilityZones", []):
                zones.append(az.get("ZoneName", ""))
                for addr in az.get("LoadBalancerAddresses", []):
                    for key in ("IpAddress", "PrivateIPv4Address", "IPv6Address"):
                        if addr.get(key):
                            ips.append(addr[key])

            load_balancers.append(
                LoadBalancer(
                    name=data.get("LoadBalancerName", ""),
                    dns_name=data.get("DNSName", ""),
                    lb_type=data.get("Type", "application"),
                    scheme=data.get("Scheme", ""),
                    state=data.get("State", {}).get("Code", ""),
                    arn=data.get("LoadBalancerArn", ""),
                    vpc_id=data.get("VpcId", ""),
                    ip_addresses=ips,
                    availability_zones=zones,
                    created_time=data.get("CreatedTime"),
                    raw=data,
                )
            )
    return load_balancers


@api_call("elb", "describe_load_balancers")
def list_classic_load_balancers(elb: Any) -> list[LoadBalancer]:
    load_balancers = []
    paginator = elb.get_paginator("describe_load_balancers")
    for page in paginator.paginate():
        for data in page.get("LoadBalancerDescriptions", []):
            load_balancers.append(
                LoadBalancer(
                    name=data.get("LoadBalancerName", ""),
                    dns_name=data.get("DNSName", ""),
                    lb_type="classic",
                    scheme=data.get("Scheme", ""),
                    state="active",
                    vpc_id=data.get("VPCId", ""),
                    availability_zones=list(data.get("AvailabilityZones", [])),
                    created_time=data.get("CreatedTime"),
                    raw=data,
                )
            )
    return load_balancers


def list_load_balancers(elbv2: Any, elb: Any) -> list[LoadBalancer]:
    """ALB/NLB/GWLB 다음에 Classic LB"""
    return list_v2_load_balancers(elbv2) + list_classic_load_balancers(elb)


def _describe_action(actions: list[dict[str, Any]]) -> str:
    if not actions:
        return ""
    action = actions[0]
    action_type = action.get("Type", "")
    if action_type == "forward" and action.get("TargetGroupArn"):
        return f"forward -> {action['TargetGroupArn'].split('/')[-2]}"
    if action_type == "redirect":
        redirect = action.get("RedirectConfig", {})
        return f"redirect -> {redirect.get('Protocol', '')}:{redirect.get('Port', '')}"
    return action_type


@api_call("elbv2", "describe_listeners")
def list_listeners(elbv2: Any, lb: LoadBalancer) -> list[Listener]:
    """LB 리스너. Classic LB는 describe_load_balancers 응답에서 바로 만든다"""
    if lb.is_classic:
        listeners = []
        for desc in lb.raw.get("ListenerDescriptions", []):
            data = desc.get("Listener", {})
            listeners.append(
                Listener(
                    port=data.get("LoadBalancerPort", 0),
                    protocol=data.get("Protocol", ""),
                    default_action=f"-> {data.get('InstanceProtocol', '')}:{data.get('InstancePort', '')}",
                    certificates=[data["SSLCertificateId"]] if data.get("SSLCertificateId") else [],
                    raw=desc,
                )
            )
        return listeners

    listeners = []
    paginator = elbv2.get_paginator("describe_listeners")
    for page in paginator.paginate(LoadBalancerArn=lb.arn):
        for data in page.get("Listeners", []):
            listeners.append(
                Listener(
                    port=data.get("Port", 0),
                    protocol=data.get("Protocol", ""),
                    arn=data.get("ListenerArn", ""),
                    default_action=_describe_action(data.get("DefaultActions", [])),
                    certificates=[c.get("CertificateArn", "") for c in data.get("Certificates", [])],
                    raw=data,
                )
            )
    return listeners


@api_call("elbv2", "describe_target_groups")
def list_target_groups(elbv2: Any, lb: LoadBalancer) -> list[TargetGroup]:
    """LB에 연결된 Target Group (Classic LB는 없음)"""
    if lb.is_classic:
        return []

    groups = []
    paginator = elbv2.get_paginator("describe_target_groups")
    for page in paginator.paginate(LoadBalancerArn=lb.arn):
        for data in page.get("TargetGroups", []):
            groups.append(
                TargetGroup(
                    arn=data.get("TargetGroupArn", ""),
                    name=data.get("TargetGroupName", ""),
                    protocol=data.get("Protocol", ""),
                    port=data.get("Port"),
                    target_type=data.get("TargetType", ""),
                    vpc_id=data.get("VpcId", ""),
                    health_check_path=data.get("HealthCheckPath", ""),
                    raw=data,
                )
            )
    return groups


@api_call("elbv2", "describe_target_health")
def list_targets(elbv2: Any, group: TargetGroup) -> list[Target]:
    """Target Group에 등록된 대상과 헬스 상태"""
    response = elbv2.describe_target_health(TargetGroupArn=group.arn)
    targets = []
    for data in response.get("TargetHealthDescriptions", []):
        target = data.get("Target", {})
        health = data.get("TargetHealth", {})
        targets.append(
            Target(
                target_id=target.get("Id", ""),
                port=target.get("Port"),
                health=health.get("State", ""),
                reason=health.get("Reason", ""),
                availability_zone=target.get("AvailabilityZone", ""),
                raw=data,
            )
        )
    return targets
