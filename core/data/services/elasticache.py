"""
core/data/services/elasticache.py - ElastiCache clusters
"""

from __future__ import annotations

from typing import Any

from ..types import CacheCluster
from .base import api_call


@api_call("elasticache", "describe_cache_clusters")
def list_cache_clusters(elasticache: Any) -> list[CacheCluster]:
    """노드 정보까지 포함한 캐시 클러스터 목록"""
    clusters = []
    paginator = elasticache.get_paginator("describe_cache_clusters")
    for page in paginator.paginate(ShowCacheNodeInfo=True):
        for data in page.get("CacheClusters", []):
            config_endpoint = data.get("ConfigurationEndpoint") or {}
            node_endpoints = []
            port = config_endpoint.get("Port")
            for node in data.get("CacheNodes", []):
                node_endpoint = node.get("Endpoint") or {}
                if node_endpoint.get("Address"):
                    node_endpoints.append(node_endpoint["Address"])
                    port = port or node_endpoint.get("Port")

            endpoint = config_endpoint.get("Address", "") or (node_endpoints[0] if node_endpoints else "")
            clusters.append(
                CacheCluster(
                    cluster_id=data.get("CacheClusterId", ""),
                    engine=data.get("Engine", ""),
                    status=data.get("CacheClusterStatus", ""),
                    node_type=data.get("CacheNodeType", ""),
                    engine_version=data.get("EngineVersion", ""),
                    num_nodes=data.get("NumCacheNodes", 0),
                    endpoint=endpoint,
                    port=port,
                    node_endpoints=node_endpoints,
                    replication_group_id=data.get("ReplicationGroupId", ""),
                    raw=data,
                )
            )
    return clusters
