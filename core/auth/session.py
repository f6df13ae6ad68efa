# core/auth/session.py
"""
계정 세션 팩토리

리전과 자격 증명 하나를 묶어 boto3 Session을 만듭니다.
네트워크 호출은 하지 않으며, 잘못된 자격 증명은 실제 조회 시점에 에러가 납니다.

Usage:
    from core.auth.session import build_sessions, make_session

    session = make_session("ap-northeast-2", credential)
    sessions = build_sessions("ap-northeast-2", source.list_accounts())
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import boto3
import botocore.session
from botocore.exceptions import ProfileNotFound

from .types import AccountCredential, ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountSession:
    """계정 하나의 조회용 세션

    계정마다 독립적이며 다른 세션과 상태를 공유하지 않습니다.

    Attributes:
        region: AWS 리전
        account: 계정 식별자 (AccountCredential.identifier)
        session: boto3 Session
    """

    region: str
    account: str
    session: boto3.Session


def make_session(region: str, credential: AccountCredential) -> AccountSession:
    """리전과 자격 증명으로 AccountSession 생성

    정적 키가 있으면 키로, 없으면 프로파일명으로 boto3 Session을 만듭니다.
    botocore 세션을 계정마다 따로 만들기 때문에 세션 간 공유 상태가 없고,
    프로세스의 AWS_PROFILE 환경 변수도 읽지 않습니다.

    Args:
        region: AWS 리전
        credential: 계정 자격 증명

    Returns:
        AccountSession

    Raises:
        ConfigurationError: 키 없는 자격 증명의 프로파일이 설정 파일에 없는 경우
    """
    core_session = botocore.session.Session()

    if credential.has_static_keys:
        # 정적 키 세션은 어떤 프로파일도 선택하지 않음 (AWS_PROFILE 무시)
        core_session.get_component("config_store").set_config_variable("profile", None)
        session = boto3.Session(
            aws_access_key_id=credential.access_key_id,
            aws_secret_access_key=credential.secret_access_key,
            aws_session_token=credential.session_token,
            region_name=region,
            botocore_session=core_session,
        )
    else:
        profile = credential.profile_name or credential.identifier
        try:
            session = boto3.Session(profile_name=profile, region_name=region, botocore_session=core_session)
        except ProfileNotFound as e:
            raise ConfigurationError(
                f"프로파일을 찾을 수 없습니다: {profile}",
                config_key="profile",
                cause=e,
            ) from e

    return AccountSession(region=region, account=credential.identifier, session=session)


def build_sessions(region: str, credentials: Iterable[AccountCredential]) -> list[AccountSession]:
    """자격 증명 목록 전체에 대해 AccountSession 생성 (입력 순서 유지)"""
    sessions = [make_session(region, credential) for credential in credentials]
    logger.debug("세션 %d개 생성 (region=%s)", len(sessions), region)
    return sessions
