"""
core/data/services - 서비스별 리소스 수집기

각 함수는 boto3 client를 받아 목록을 끝까지 페이지 조회하고(상세 조회는 단일 호출)
``core.data.types``의 타입 레코드를 반환합니다. AWS 실패는 ``APICallError``로 올립니다.
"""

from . import compute, dns, elb, network, rds, elasticache, s3, sqs

__all__ = ["compute", "dns", "elb", "network", "rds", "elasticache", "s3", "sqs"]
