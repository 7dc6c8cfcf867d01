# core/__init__.py
"""
core - awsdash 비 UI 계층

AWS 세션, 리소스 조회, Finder, 리전 캐시, 설정, 예외를 포함합니다.
UI(tui/)와 CLI(cli/)는 이 패키지를 사용하지만 이 패키지는 그 둘을 모릅니다.

아키텍처:
    core/
    ├── auth/           # 프로필 목록, 세션 생성
    ├── data/           # 리소스 타입, 서비스별 조회, CloudServices 파사드
    ├── parallel/       # 재시도/타임아웃이 설정된 boto3 클라이언트
    ├── region/         # 프로필별 리전 목록 캐시
    ├── finder.py       # IP / 도메인 기반 리소스 통합 검색
    ├── config.py       # 환경 변수 설정
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.auth import create_session
    from core.data.cloud import CloudServices
    from core.finder import ResourceFinder

    session = create_session("dev", "ap-northeast-2")
    services = CloudServices(session, "ap-northeast-2", profile="dev")
    result = ResourceFinder(services).find("10.0.1.15")
"""

from core import auth, config, exceptions, parallel, region

__all__: list[str] = [
    # 서브패키지
    "auth",
    "region",
    "parallel",
    # 모듈
    "config",
    "exceptions",
]
