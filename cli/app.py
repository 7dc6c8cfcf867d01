"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 단일 명령입니다. 서브명령이나 옵션 없이 (--help 제외)
설정을 읽고, 시작 프로필/리전으로 AWS 세션을 만든 뒤 전체 화면 대시보드를 실행합니다.

시작 순서:
    1. load_config(): 환경 변수에서 설정 로드
    2. set_lang(): UI 언어 설정
    3. setup_logging(): 로그를 Textual 콘솔(및 선택적 파일)로
    4. create_session() / CloudServices: 자격 증명 확인
    5. DashApp.run()

시작 단계의 실패(설정 오류, 자격 증명 없음)는 표준 에러에 출력하고 종료 코드 1로 끝납니다.

Usage:
    $ awsdash
    $ AWS_PROFILE=dev AWS_REGION=us-east-1 awsdash

    # 모듈로 실행
    $ python -m cli.app
"""

from __future__ import annotations

import logging
import sys

import click
from textual.logging import TextualHandler

from cli.i18n import set_lang, t
from core.auth import create_session
from core.config import load_config
from core.data.cloud import CloudServices
from core.exceptions import DashError
from tui.app import DashApp

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 서드파티 로거는 WARNING 이상만
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def setup_logging(log_file: str | None = None) -> None:
    """중앙 로깅 설정

    전체 화면 UI가 stderr 출력으로 깨지지 않도록 TextualHandler로 보냅니다.
    로그 파일이 지정되면 INFO 레벨까지 파일에도 기록합니다.
    """
    handlers: list[logging.Handler] = [TextualHandler()]
    level = logging.WARNING
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """AWS 리소스를 탐색하는 터미널 대시보드

    \b
    환경 변수:
      AWS_PROFILE, AWS_REGION     시작 프로필 / 리전
      AWSDASH_EDITOR, AWSDASH_PAGER  외부 에디터 / 페이저
      AWSDASH_LANG                UI 언어 (ko, en)
      AWSDASH_FINDER_TIMEOUT      리소스 검색 카테고리별 대기 시간(초)
      AWSDASH_LOG_FILE            로그 파일 경로
    """
    try:
        config = load_config()
        set_lang(config.lang)
        setup_logging(config.log_file)
        session = create_session(config.profile, config.region)
        services = CloudServices(session, config.region, profile=config.profile)
    except DashError as e:
        click.echo(t("dash.startup_error", error=e), err=True)
        sys.exit(1)

    DashApp(config, services).run()


if __name__ == "__main__":
    cli()
