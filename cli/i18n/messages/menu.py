"""
cli/i18n/messages/menu.py - 메뉴 메시지

메인 메뉴 항목(리소스 영역당 하나)의 번역.
"""

from __future__ import annotations

MENU_MESSAGES = {
    # =========================================================================
    # Compute / Network
    # =========================================================================
    "instances": {
        "ko": "EC2 인스턴스",
        "en": "EC2 Instances",
    },
    "instances_desc": {
        "ko": "인스턴스 목록, 상세, 보안 그룹, 볼륨, ENI",
        "en": "Instance list, details, security groups, volumes, ENIs",
    },
    "security_groups": {
        "ko": "보안 그룹",
        "en": "Security Groups",
    },
    "security_groups_desc": {
        "ko": "보안 그룹 규칙과 연결된 인스턴스",
        "en": "Security group rules and attached instances",
    },
    "network_interfaces": {
        "ko": "네트워크 인터페이스",
        "en": "Network Interfaces",
    },
    "network_interfaces_desc": {
        "ko": "ENI 목록과 IP 주소",
        "en": "ENIs and their IP addresses",
    },
    "load_balancers": {
        "ko": "로드 밸런서",
        "en": "Load Balancers",
    },
    "load_balancers_desc": {
        "ko": "ALB / NLB / CLB, 리스너, 대상 그룹",
        "en": "ALB / NLB / CLB, listeners, target groups",
    },
    # =========================================================================
    # DNS / Data
    # =========================================================================
    "dns_zones": {
        "ko": "Route53 호스팅 존",
        "en": "Route53 Hosted Zones",
    },
    "dns_zones_desc": {
        "ko": "호스팅 존과 레코드",
        "en": "Hosted zones and records",
    },
    "db_instances": {
        "ko": "RDS 인스턴스",
        "en": "RDS Instances",
    },
    "db_instances_desc": {
        "ko": "DB 인스턴스와 스냅샷",
        "en": "DB instances and snapshots",
    },
    "cache_clusters": {
        "ko": "ElastiCache 클러스터",
        "en": "ElastiCache Clusters",
    },
    "cache_clusters_desc": {
        "ko": "Redis / Memcached 클러스터와 엔드포인트",
        "en": "Redis / Memcached clusters and endpoints",
    },
    "queues": {
        "ko": "SQS 큐",
        "en": "SQS Queues",
    },
    "queues_desc": {
        "ko": "큐 목록과 속성",
        "en": "Queues and their attributes",
    },
    "buckets": {
        "ko": "S3 버킷",
        "en": "S3 Buckets",
    },
    "buckets_desc": {
        "ko": "버킷과 오브젝트 (페이지 단위)",
        "en": "Buckets and objects (paged)",
    },
    # =========================================================================
    # Finder
    # =========================================================================
    "finder": {
        "ko": "리소스 검색",
        "en": "Resource Finder",
    },
    "finder_desc": {
        "ko": "IP 또는 도메인으로 관련 리소스 찾기",
        "en": "Find resources by IP address or domain",
    },
}
