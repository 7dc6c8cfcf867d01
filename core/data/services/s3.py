"""
core/data/services/s3.py - S3 buckets and objects

Object listing is page-at-a-time: the caller keeps continuation tokens to move
between pages.
"""

from __future__ import annotations

from typing import Any

from ..types import Bucket, S3Object
from .base import api_call

DEFAULT_PAGE_SIZE = 100


@api_call("s3", "list_buckets")
def list_buckets(s3: Any) -> list[Bucket]:
    response = s3.list_buckets()
    return [
        Bucket(name=data.get("Name", ""), created=data.get("CreationDate"), raw=data)
        for data in response.get("Buckets", [])
    ]


@api_call("s3", "list_objects_v2")
def list_objects(
    s3: Any,
    bucket: str,
    token: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[list[S3Object], str | None]:
    """객체 한 페이지와 다음 페이지 토큰 (없으면 None)"""
    params: dict[str, Any] = {"Bucket": bucket, "MaxKeys": page_size}
    if token:
        params["ContinuationToken"] = token

    response = s3.list_objects_v2(**params)
    objects = [
        S3Object(
            bucket=bucket,
            key=data.get("Key", ""),
            size=data.get("Size", 0),
            last_modified=data.get("LastModified"),
            storage_class=data.get("StorageClass", ""),
            etag=data.get("ETag", "").strip('"'),
            raw=data,
        )
        for data in response.get("Contents", [])
    ]
    next_token = response.get("NextContinuationToken") if response.get("IsTruncated") else None
    return objects, next_token
