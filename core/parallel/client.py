"""
core/parallel/client.py - boto3 client 생성 헬퍼

조회 한 건에 맞춘 boto3 client를 생성합니다.

- 재시도 없음 (total_max_attempts=1): 계정마다 네트워크 호출은 정확히 한 번
- 연결/읽기 타임아웃: 전역 타임아웃보다 오래 걸리는 호출이 남지 않도록 제한
- 취소 토큰: before-send 훅에서 확인하여 취소된 요청은 전송하지 않음

Example:
    from core.parallel.client import get_client

    ec2 = get_client(session, "ec2", region_name="ap-northeast-2")

    # 팬아웃 중 (취소 + 타임아웃 연동)
    ec2 = get_client(session, "ec2", region_name=region, cancel_token=token, connect_timeout=5, read_timeout=5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

    from .cancel import CancelToken

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

# 기본 설정
DEFAULT_MAX_ATTEMPTS = 1  # 총 시도 횟수 (1 = 재시도 없음)
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
    cancel_token: CancelToken | None = None,
    **kwargs: Any,
) -> Any:
    """조회용 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2, elasticbeanstalk)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 총 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        cancel_token: 취소 토큰 (설정 시 취소된 요청은 전송하지 않음)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        # total_max_attempts: 최초 호출 포함 총 시도 횟수 (max_attempts는 재시도 횟수)
        retries={"total_max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # session.client은 문자열 서비스명을 받지만 boto3-stubs는 Literal 타입 요구
    client = session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )

    if cancel_token is not None:
        attach_cancel_token(client, cancel_token)

    return client


def attach_cancel_token(client: Any, cancel_token: CancelToken) -> None:
    """client의 before-send 이벤트에 취소 확인 훅 등록

    요청이 전송되기 직전에 토큰이 취소 상태면 QueryCancelledError가 발생하여
    API 호출이 네트워크로 나가지 않고 중단됩니다.
    """
    service = client.meta.service_model.service_name

    def _check_cancelled(request: Any = None, event_name: str = "", **kwargs: Any) -> None:
        operation = event_name.rsplit(".", 1)[-1] if event_name else "unknown"
        cancel_token.raise_if_cancelled(service, operation)

    client.meta.events.register("before-send", _check_cancelled, unique_id=f"awsfind-cancel-{id(cancel_token)}")

