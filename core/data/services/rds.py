"""
core/data/services/rds.py - RDS DB instances and snapshots
"""

from __future__ import annotations

from typing import Any

from ..types import DBInstance, DBSnapshot
from .base import api_call


@api_call("rds", "describe_db_instances")
def list_db_instances(rds: Any) -> list[DBInstance]:
    instances = []
    paginator = rds.get_paginator("describe_db_instances")
    for page in paginator.paginate():
        for data in page.get("DBInstances", []):
            endpoint = data.get("Endpoint", {})
            instances.append(
                DBInstance(
                    identifier=data.get("DBInstanceIdentifier", ""),
                    engine=data.get("Engine", ""),
                    status=data.get("DBInstanceStatus", ""),
                    instance_class=data.get("DBInstanceClass", ""),
                    engine_version=data.get("EngineVersion", ""),
                    endpoint=endpoint.get("Address", ""),
                    port=endpoint.get("Port"),
                    availability_zone=data.get("AvailabilityZone", ""),
                    multi_az=data.get("MultiAZ", False),
                    vpc_id=data.get("DBSubnetGroup", {}).get("VpcId", ""),
                    storage_gb=data.get("AllocatedStorage", 0),
                    raw=data,
                )
            )
    return instances


@api_call("rds", "describe_db_snapshots")
def list_db_snapshots(rds: Any, db: DBInstance) -> list[DBSnapshot]:
    snapshots = []
    paginator = rds.get_paginator("describe_db_snapshots")
    for page in paginator.paginate(DBInstanceIdentifier=db.identifier):
        for data in page.get("DBSnapshots", []):
            snapshots.append(
                DBSnapshot(
                    snapshot_id=data.get("DBSnapshotIdentifier", ""),
                    db_instance_id=data.get("DBInstanceIdentifier", ""),
                    status=data.get("Status", ""),
                    snapshot_type=data.get("SnapshotType", ""),
                    created=data.get("SnapshotCreateTime"),
                    storage_gb=data.get("AllocatedStorage", 0),
                    raw=data,
                )
            )
    return snapshots
