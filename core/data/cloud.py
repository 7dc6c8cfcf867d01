"""
core/data/cloud.py - 프로필/리전 단위 서비스 파사드

boto3 세션 하나와 리전 하나에 묶인 조회 함수 모음입니다.
클라이언트는 처음 사용할 때 생성하고 lock으로 보호합니다
(boto3 Session은 스레드 세이프하지 않지만 생성된 client는 공유 가능).

Usage:
    from core.data.cloud import CloudServices

    services = CloudServices(session, "ap-northeast-2", profile="dev")
    instances = services.instances()
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from core.parallel import get_client

from .services import compute, dns, elasticache, elb, network, rds, s3, sqs
from .types import (
    Bucket,
    CacheCluster,
    DBInstance,
    DBSnapshot,
    DNSRecord,
    HostedZone,
    Instance,
    Listener,
    LoadBalancer,
    NetworkInterface,
    Queue,
    S3Object,
    SecurityGroup,
    Target,
    TargetGroup,
    Volume,
)

if TYPE_CHECKING:
    from boto3 import Session

logger = logging.getLogger(__name__)

# route53 / s3 버킷 목록은 글로벌 엔드포인트
GLOBAL_SERVICES = {"route53": "us-east-1"}


class CloudServices:
    """한 프로필 + 한 리전에 대한 읽기 전용 조회"""

    def __init__(self, session: "Session", region: str, profile: str | None = None):
        self.session = session
        self.region = region
        self.profile = profile
        self._clients: dict[str, Any] = {}
        self._lock = threading.Lock()

    def client(self, service_name: str) -> Any:
        with self._lock:
            client = self._clients.get(service_name)
            if client is None:
                region = GLOBAL_SERVICES.get(service_name, self.region)
                logger.debug("creating %s client (%s)", service_name, region)
                client = get_client(self.session, service_name, region_name=region)
                self._clients[service_name] = client
            return client

    # EC2 -----------------------------------------------------------------

    def instances(self) -> list[Instance]:
        return compute.list_instances(self.client("ec2"))

    def security_groups(self) -> list[SecurityGroup]:
        return compute.list_security_groups(self.client("ec2"))

    def instance_security_groups(self, instance: Instance) -> list[SecurityGroup]:
        if not instance.security_groups:
            return []
        return compute.list_security_groups(self.client("ec2"), group_ids=instance.security_groups)

    def security_group_instances(self, group: SecurityGroup) -> list[Instance]:
        return compute.list_instances_by_security_group(self.client("ec2"), group.group_id)

    def instance_volumes(self, instance: Instance) -> list[Volume]:
        return compute.list_instance_volumes(self.client("ec2"), instance.instance_id)

    def network_interfaces(self) -> list[NetworkInterface]:
        return network.list_network_interfaces(self.client("ec2"))

    def instance_interfaces(self, instance: Instance) -> list[NetworkInterface]:
        return network.list_network_interfaces(self.client("ec2"), instance_id=instance.instance_id)

    def regions(self) -> list[str]:
        return compute.list_regions(self.client("ec2"))

    # ELB -----------------------------------------------------------------

    def load_balancers(self) -> list[LoadBalancer]:
        return elb.list_load_balancers(self.client("elbv2"), self.client("elb"))

    def listeners(self, lb: LoadBalancer) -> list[Listener]:
        return elb.list_listeners(self.client("elbv2"), lb)

    def target_groups(self, lb: LoadBalancer) -> list[TargetGroup]:
        return elb.list_target_groups(self.client("elbv2"), lb)

    def targets(self, group: TargetGroup) -> list[Target]:
        return elb.list_targets(self.client("elbv2"), group)

    # Route53 -------------------------------------------------------------

    def hosted_zones(self) -> list[HostedZone]:
        return dns.list_hosted_zones(self.client("route53"))

    def dns_records(self, zone: HostedZone) -> list[DNSRecord]:
        return dns.list_records(self.client("route53"), zone)

    def all_dns_records(self) -> list[DNSRecord]:
        records = []
        for zone in self.hosted_zones():
            records.extend(self.dns_records(zone))
        return records

    # RDS / ElastiCache ---------------------------------------------------

    def db_instances(self) -> list[DBInstance]:
        return rds.list_db_instances(self.client("rds"))

    def db_snapshots(self, db: DBInstance) -> list[DBSnapshot]:
        return rds.list_db_snapshots(self.client("rds"), db)

    def cache_clusters(self) -> list[CacheCluster]:
        return elasticache.list_cache_clusters(self.client("elasticache"))

    # SQS / S3 ------------------------------------------------------------

    def queues(self) -> list[Queue]:
        return sqs.list_queues(self.client("sqs"))

    def queue(self, queue: Queue) -> Queue:
        return sqs.get_queue(self.client("sqs"), queue)

    def buckets(self) -> list[Bucket]:
        return s3.list_buckets(self.client("s3"))

    def objects(self, bucket: Bucket, token: str | None = None) -> tuple[list[S3Object], str | None]:
        return s3.list_objects(self.client("s3"), bucket.name, token=token)
