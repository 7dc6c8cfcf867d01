"""
tests/core/test_services.py - 리소스 수집기 테스트

paginator 응답은 MagicMock으로, S3 / Route53 / SQS는 moto로 검증합니다.
"""

from unittest.mock import MagicMock

import pytest

from core.data.cloud import CloudServices
from core.data.services import compute, dns, elasticache, elb, network, rds, s3, sqs
from core.data.types import (
    Bucket,
    DBInstance,
    HostedZone,
    LoadBalancer,
    RawRecord,
    TargetGroup,
    as_record,
    parse_tags,
    record_data,
)
from core.exceptions import APICallError

# =============================================================================
# 공통 타입
# =============================================================================


class TestTypes:
    """레코드 타입 헬퍼"""

    def test_parse_tags_skips_aws_prefix(self):
        tags, name = parse_tags(
            [{"Key": "Name", "Value": "web"}, {"Key": "aws:cloudformation:stack-name", "Value": "x"}]
        )
        assert tags == {"Name": "web"}
        assert name == "web"

    def test_parse_tags_none(self):
        assert parse_tags(None) == ({}, "")

    def test_as_record(self):
        db = DBInstance(identifier="main", engine="mysql", status="available")
        assert as_record(db) is db
        assert as_record({"x": 1}) == RawRecord(data={"x": 1})

    def test_record_data_prefers_raw(self):
        bucket = Bucket(name="logs", raw={"Name": "logs"})
        assert record_data(bucket) == {"Name": "logs"}
        assert record_data(RawRecord(data=[1, 2])) == [1, 2]

    def test_record_data_without_raw(self):
        data = record_data(Bucket(name="logs"))
        assert data == {"name": "logs", "created": None}


# =============================================================================
# EC2
# =============================================================================


INSTANCE = {
    "InstanceId": "i-0aaa",
    "InstanceType": "t3.micro",
    "State": {"Name": "running"},
    "PrivateIpAddress": "10.0.1.15",
    "PublicIpAddress": "3.35.10.20",
    "Placement": {"AvailabilityZone": "ap-northeast-2a"},
    "SecurityGroups": [{"GroupId": "sg-1"}],
    "NetworkInterfaces": [
        {
            "NetworkInterfaceId": "eni-1",
            "PrivateIpAddresses": [{"PrivateIpAddress": "10.0.1.15"}, {"PrivateIpAddress": "10.0.1.16"}],
            "Ipv6Addresses": [{"Ipv6Address": "2001:db8::1"}],
        }
    ],
    "Tags": [{"Key": "Name", "Value": "web-1"}],
}


class TestCompute:
    """EC2 수집"""

    def test_list_instances(self, make_paginated_client):
        ec2 = make_paginated_client(describe_instances=[{"Reservations": [{"Instances": [INSTANCE]}]}, {}])
        instances = compute.list_instances(ec2)

        assert len(instances) == 1
        instance = instances[0]
        assert instance.name == "web-1"
        assert instance.state == "running"
        assert instance.private_ips == ["10.0.1.15", "10.0.1.16"]
        assert instance.private_ip == "10.0.1.15"
        assert instance.ipv6_addresses == ["2001:db8::1"]
        assert instance.security_groups == ["sg-1"]
        assert instance.network_interfaces == ["eni-1"]
        assert instance.availability_zone == "ap-northeast-2a"
        assert "3.35.10.20" in instance.ip_fields
        assert instance.raw is INSTANCE

    def test_instances_by_security_group_filter(self):
        ec2 = MagicMock()
        ec2.get_paginator.return_value.paginate.return_value = [{"Reservations": [{"Instances": [INSTANCE]}]}]

        instances = compute.list_instances_by_security_group(ec2, "sg-1")

        assert [i.instance_id for i in instances] == ["i-0aaa"]
        ec2.get_paginator.return_value.paginate.assert_called_once_with(
            Filters=[{"Name": "instance.group-id", "Values": ["sg-1"]}]
        )

    def test_security_group_rules(self):
        group = compute._parse_security_group(
            {
                "GroupId": "sg-1",
                "GroupName": "web",
                "IpPermissions": [
                    {
                        "IpProtocol": "tcp",
                        "FromPort": 443,
                        "ToPort": 443,
                        "IpRanges": [{"CidrIp": "0.0.0.0/0", "Description": "https"}],
                        "UserIdGroupPairs": [{"GroupId": "sg-2"}],
                    },
                    {"IpProtocol": "tcp", "FromPort": 8000, "ToPort": 8080, "IpRanges": [{"CidrIp": "10.0.0.0/8"}]},
                ],
                "IpPermissionsEgress": [{"IpProtocol": "-1", "IpRanges": [{"CidrIp": "0.0.0.0/0"}]}],
            }
        )
        assert (group.inbound_count, group.outbound_count) == (2, 1)

        rules = compute.security_group_rules(group)
        assert [(r.direction, r.protocol, r.port_range, r.source) for r in rules] == [
            ("ingress", "tcp", "443", "0.0.0.0/0"),
            ("ingress", "tcp", "443", "sg-2"),
            ("ingress", "tcp", "8000-8080", "10.0.0.0/8"),
            ("egress", "all", "all", "0.0.0.0/0"),
        ]
        assert rules[0].description == "https"

    def test_instance_volumes_device(self, make_paginated_client):
        ec2 = make_paginated_client(
            describe_volumes=[
                {
                    "Volumes": [
                        {
                            "VolumeId": "vol-1",
                            "Size": 30,
                            "VolumeType": "gp3",
                            "State": "in-use",
                            "Attachments": [{"InstanceId": "i-0aaa", "Device": "/dev/xvda"}],
                        }
                    ]
                }
            ]
        )
        volumes = compute.list_instance_volumes(ec2, "i-0aaa")
        assert volumes[0].device == "/dev/xvda"
        assert volumes[0].size == 30

    def test_list_regions_sorted(self):
        ec2 = MagicMock()
        ec2.describe_regions.return_value = {
            "Regions": [{"RegionName": "us-east-1"}, {"RegionName": "ap-northeast-2"}, {}]
        }
        assert compute.list_regions(ec2) == ["ap-northeast-2", "us-east-1"]

    def test_api_failure(self, client_error):
        ec2 = MagicMock()
        ec2.describe_regions.side_effect = client_error("UnauthorizedOperation")
        with pytest.raises(APICallError) as exc_info:
            compute.list_regions(ec2)
        assert exc_info.value.is_access_denied


class TestNetwork:
    """ENI 수집"""

    def test_list_network_interfaces(self, make_paginated_client):
        ec2 = make_paginated_client(
            describe_network_interfaces=[
                {
                    "NetworkInterfaces": [
                        {
                            "NetworkInterfaceId": "eni-1",
                            "Status": "in-use",
                            "PrivateIpAddress": "10.0.1.15",
                            "PrivateIpAddresses": [
                                {"PrivateIpAddress": "10.0.1.15", "Association": {"PublicIp": "3.35.10.20"}},
                                {"PrivateIpAddress": "10.0.1.16"},
                            ],
                            "Attachment": {"InstanceId": "i-0aaa"},
                            "TagSet": [{"Key": "team", "Value": "core"}],
                        }
                    ]
                }
            ]
        )
        interfaces = network.list_network_interfaces(ec2, instance_id="i-0aaa")

        eni = interfaces[0]
        assert eni.private_ips == ["10.0.1.15", "10.0.1.16"]
        assert eni.public_ips == ["3.35.10.20"]
        assert eni.attached_instance_id == "i-0aaa"
        assert eni.tags == {"team": "core"}


# =============================================================================
# ELB
# =============================================================================


class TestLoadBalancers:
    """ELBv2 + Classic"""

    def test_v2_then_classic(self, make_paginated_client):
        elbv2 = make_paginated_client(
            describe_load_balancers=[
                {
                    "LoadBalancers": [
                        {
                            "LoadBalancerName": "api-nlb",
                            "DNSName": "api-nlb.elb.amazonaws.com",
                            "Type": "network",
                            "State": {"Code": "active"},
                            "AvailabilityZones": [
                                {
                                    "ZoneName": "ap-northeast-2a",
                                    "LoadBalancerAddresses": [
                                        {"IpAddress": "3.3.3.3", "PrivateIPv4Address": "10.0.1.100"}
                                    ],
                                }
                            ],
                        }
                    ]
                }
            ]
        )
        classic = make_paginated_client(
            describe_load_balancers=[
                {"LoadBalancerDescriptions": [{"LoadBalancerName": "legacy", "DNSName": "legacy.elb.amazonaws.com"}]}
            ]
        )
        lbs = elb.list_load_balancers(elbv2, classic)

        assert [(lb.name, lb.lb_type) for lb in lbs] == [("api-nlb", "network"), ("legacy", "classic")]
        assert lbs[0].ip_addresses == ["3.3.3.3", "10.0.1.100"]
        assert lbs[0].availability_zones == ["ap-northeast-2a"]
        assert lbs[1].is_classic

    def test_classic_listeners_from_raw(self):
        lb = LoadBalancer(
            name="legacy",
            dns_name="legacy.elb.amazonaws.com",
            lb_type="classic",
            raw={
                "ListenerDescriptions": [
                    {"Listener": {"LoadBalancerPort": 80, "Protocol": "HTTP", "InstanceProtocol": "HTTP",
                                  "InstancePort": 8080}}
                ]
            },
        )
        elbv2 = MagicMock()
        listeners = elb.list_listeners(elbv2, lb)

        assert [(li.port, li.protocol, li.default_action) for li in listeners] == [(80, "HTTP", "-> HTTP:8080")]
        elbv2.get_paginator.assert_not_called()
        assert elb.list_target_groups(elbv2, lb) == []

    def test_v2_listener_actions(self, make_paginated_client):
        tg_arn = "arn:aws:elasticloadbalancing:ap-northeast-2:123:targetgroup/api-tg/abc"
        elbv2 = make_paginated_client(
            describe_listeners=[
                {
                    "Listeners": [
                        {"Port": 443, "Protocol": "HTTPS",
                         "DefaultActions": [{"Type": "forward", "TargetGroupArn": tg_arn}],
                         "Certificates": [{"CertificateArn": "arn:cert"}]},
                        {"Port": 80, "Protocol": "HTTP",
                         "DefaultActions": [{"Type": "redirect",
                                             "RedirectConfig": {"Protocol": "HTTPS", "Port": "443"}}]},
                    ]
                }
            ]
        )
        lb = LoadBalancer(name="api", dns_name="api", lb_type="application", arn="arn:lb")
        listeners = elb.list_listeners(elbv2, lb)

        assert listeners[0].default_action == "forward -> api-tg"
        assert listeners[0].certificates == ["arn:cert"]
        assert listeners[1].default_action == "redirect -> HTTPS:443"

    def test_targets(self):
        elbv2 = MagicMock()
        elbv2.describe_target_health.return_value = {
            "TargetHealthDescriptions": [
                {"Target": {"Id": "i-0aaa", "Port": 80}, "TargetHealth": {"State": "healthy"}},
            ]
        }
        group = TargetGroup(arn="arn:tg", name="api-tg")
        targets = elb.list_targets(elbv2, group)
        assert [(t.target_id, t.port, t.health) for t in targets] == [("i-0aaa", 80, "healthy")]


# =============================================================================
# RDS / ElastiCache
# =============================================================================


class TestDatabases:
    """RDS / ElastiCache 수집"""

    def test_db_instances(self, make_paginated_client):
        client = make_paginated_client(
            describe_db_instances=[
                {
                    "DBInstances": [
                        {
                            "DBInstanceIdentifier": "main",
                            "Engine": "mysql",
                            "DBInstanceStatus": "available",
                            "Endpoint": {"Address": "main.abc.rds.amazonaws.com", "Port": 3306},
                            "DBSubnetGroup": {"VpcId": "vpc-1"},
                        }
                    ]
                }
            ]
        )
        dbs = rds.list_db_instances(client)
        assert dbs[0].endpoint == "main.abc.rds.amazonaws.com"
        assert dbs[0].port == 3306
        assert dbs[0].vpc_id == "vpc-1"
        assert dbs[0].connection_fields == ["main.abc.rds.amazonaws.com"]

    def test_db_instance_without_endpoint(self, make_paginated_client):
        client = make_paginated_client(
            describe_db_instances=[{"DBInstances": [{"DBInstanceIdentifier": "new", "DBInstanceStatus": "creating"}]}]
        )
        assert rds.list_db_instances(client)[0].connection_fields == []

    def test_snapshots_filtered_by_instance(self, make_paginated_client):
        client = make_paginated_client(
            describe_db_snapshots=[{"DBSnapshots": [{"DBSnapshotIdentifier": "snap-1", "Status": "available"}]}]
        )
        db = DBInstance(identifier="main", engine="mysql", status="available")
        assert [s.snapshot_id for s in rds.list_db_snapshots(client, db)] == ["snap-1"]

    def test_cache_cluster_node_endpoint(self, make_paginated_client):
        client = make_paginated_client(
            describe_cache_clusters=[
                {
                    "CacheClusters": [
                        {
                            "CacheClusterId": "sessions-001",
                            "Engine": "redis",
                            "CacheClusterStatus": "available",
                            "CacheNodes": [{"Endpoint": {"Address": "sessions-001.cache.amazonaws.com", "Port": 6379}}],
                        },
                        {
                            "CacheClusterId": "memcache",
                            "Engine": "memcached",
                            "ConfigurationEndpoint": {"Address": "memcache.cfg.cache.amazonaws.com", "Port": 11211},
                            "CacheNodes": [],
                        },
                    ]
                }
            ]
        )
        clusters = elasticache.list_cache_clusters(client)

        assert clusters[0].endpoint == "sessions-001.cache.amazonaws.com"
        assert clusters[0].port == 6379
        assert clusters[1].endpoint == "memcache.cfg.cache.amazonaws.com"
        assert clusters[1].connection_fields == ["memcache.cfg.cache.amazonaws.com"]


# =============================================================================
# Route53 (moto)
# =============================================================================


class TestDNS:
    """Route53 존과 레코드"""

    @pytest.mark.parametrize(
        "raw,expected",
        [("example.com.", "example.com"), ("\\052.Example.com.", "*.example.com"), ("a.b", "a.b")],
    )
    def test_normalize_name(self, raw, expected):
        assert dns.normalize_name(raw) == expected

    def test_relative_name(self):
        assert dns.relative_name("example.com", "example.com") == "@"
        assert dns.relative_name("api.example.com", "example.com") == "api"
        assert dns.relative_name("other.org", "example.com") == "other.org"

    def test_zones_and_records(self, moto_route53):
        zone_id = moto_route53.create_hosted_zone(Name="example.com.", CallerReference="ref-1")["HostedZone"]["Id"]
        moto_route53.change_resource_record_sets(
            HostedZoneId=zone_id,
            ChangeBatch={
                "Changes": [
                    {
                        "Action": "CREATE",
                        "ResourceRecordSet": {
                            "Name": "api.example.com.",
                            "Type": "A",
                            "TTL": 300,
                            "ResourceRecords": [{"Value": "10.0.1.15"}],
                        },
                    }
                ]
            },
        )

        zones = dns.list_hosted_zones(moto_route53)
        assert [z.name for z in zones] == ["example.com"]
        assert "/" not in zones[0].zone_id

        records = dns.list_records(moto_route53, zones[0])
        by_type = {(r.rr, r.record_type): r for r in records}
        assert by_type[("api", "A")].values == ["10.0.1.15"]
        assert by_type[("api", "A")].ttl == 300
        assert ("@", "SOA") in by_type


# =============================================================================
# SQS / S3 (moto)
# =============================================================================


class TestQueues:
    """SQS 큐"""

    def test_list_and_detail(self, moto_sqs):
        moto_sqs.create_queue(QueueName="orders")
        moto_sqs.create_queue(QueueName="events.fifo", Attributes={"FifoQueue": "true"})

        queues = sqs.list_queues(moto_sqs)
        assert [q.name for q in queues] == ["events.fifo", "orders"]
        assert queues[0].fifo
        assert not queues[1].fifo

        detail = sqs.get_queue(moto_sqs, queues[1])
        assert detail.name == "orders"
        assert "QueueArn" in detail.attributes
        assert detail.raw["QueueUrl"] == queues[1].url


class TestBuckets:
    """S3 버킷과 객체 페이지"""

    def test_buckets_and_object_pages(self, moto_s3):
        moto_s3.create_bucket(
            Bucket="logs", CreateBucketConfiguration={"LocationConstraint": "ap-northeast-2"}
        )
        for n in range(5):
            moto_s3.put_object(Bucket="logs", Key=f"day-{n}.log", Body=b"x" * n)

        assert [b.name for b in s3.list_buckets(moto_s3)] == ["logs"]

        first, token = s3.list_objects(moto_s3, "logs", page_size=2)
        assert [o.key for o in first] == ["day-0.log", "day-1.log"]
        assert token

        second, token = s3.list_objects(moto_s3, "logs", token=token, page_size=2)
        assert [o.key for o in second] == ["day-2.log", "day-3.log"]

        last, token = s3.list_objects(moto_s3, "logs", token=token, page_size=2)
        assert [o.key for o in last] == ["day-4.log"]
        assert last[0].size == 4
        assert token is None

    def test_missing_bucket(self, moto_s3):
        with pytest.raises(APICallError) as exc_info:
            s3.list_objects(moto_s3, "no-such-bucket")
        assert exc_info.value.error_code == "NoSuchBucket"


# =============================================================================
# CloudServices
# =============================================================================


class TestCloudServices:
    """서비스 파사드"""

    def test_client_is_cached(self):
        session = MagicMock()
        services = CloudServices(session, "ap-northeast-2", profile="dev")

        assert services.client("ec2") is services.client("ec2")
        assert session.client.call_count == 1
        assert session.client.call_args.kwargs["region_name"] == "ap-northeast-2"

    def test_route53_uses_global_region(self):
        session = MagicMock()
        CloudServices(session, "ap-northeast-2").client("route53")
        assert session.client.call_args.kwargs["region_name"] == "us-east-1"

    def test_all_dns_records_walks_zones(self):
        services = CloudServices(MagicMock(), "ap-northeast-2")
        zones = [HostedZone(zone_id="Z1", name="a.com"), HostedZone(zone_id="Z2", name="b.com")]
        services.hosted_zones = MagicMock(return_value=zones)
        services.dns_records = MagicMock(side_effect=lambda zone: [zone.zone_id])

        assert services.all_dns_records() == ["Z1", "Z2"]
