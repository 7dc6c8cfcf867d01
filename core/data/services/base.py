"""
core/data/services/base.py - 수집기 공통 데코레이터

botocore 예외를 APICallError로 변환합니다.

Example:
    @api_call("ec2", "describe_instances")
    def list_instances(ec2):
        ...
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import APICallError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def api_call(service: str, operation: str) -> Callable[[F], F]:
    """ClientError / BotoCoreError를 APICallError로 감싸는 데코레이터"""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ClientError, BotoCoreError) as e:
                logger.debug("%s:%s failed: %s", service, operation, e)
                raise APICallError(service=service, operation=operation, cause=e) from e

        return wrapper  # type: ignore[return-value]

    return decorator
