"""
core/data/services/sqs.py - SQS queues
"""

from __future__ import annotations

from typing import Any

from ..types import Queue
from .base import api_call


def _queue_from_url(url: str) -> Queue:
    name = url.rstrip("/").split("/")[-1]
    return Queue(name=name, url=url, fifo=name.endswith(".fifo"), raw={"QueueUrl": url})


@api_call("sqs", "list_queues")
def list_queues(sqs: Any) -> list[Queue]:
    """큐 URL 목록 (속성은 상세 페이지에서 조회)"""
    queues = []
    paginator = sqs.get_paginator("list_queues")
    for page in paginator.paginate():
        for url in page.get("QueueUrls", []):
            queues.append(_queue_from_url(url))
    return sorted(queues, key=lambda q: q.name)


@api_call("sqs", "get_queue_attributes")
def get_queue(sqs: Any, queue: Queue) -> Queue:
    """큐 속성을 채운 새 Queue 반환"""
    response = sqs.get_queue_attributes(QueueUrl=queue.url, AttributeNames=["All"])
    attributes = response.get("Attributes", {})
    return Queue(
        name=queue.name,
        url=queue.url,
        fifo=queue.fifo,
        attributes=attributes,
        raw={"QueueUrl": queue.url, "Attributes": attributes},
    )
