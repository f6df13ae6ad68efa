# core/auth/types/types.py
"""
core/auth/types/types.py - 인증 모듈의 핵심 타입 정의

이 모듈은 자격 증명 소스 전체에서 사용되는 기본 타입들을 정의합니다.

포함 항목:
    - SourceType: 자격 증명 소스 타입 열거형 (SHARED_FILE, ENCRYPTED_STORE)
    - AccountCredential: 계정 하나의 자격 증명 (불변)
    - CredentialSource: 모든 자격 증명 소스가 구현해야 하는 추상 기본 클래스 (ABC)
    - 에러 클래스: AuthError, ConfigurationError, CredentialsFileNotFoundError,
      CredentialStoreError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from core.exceptions import FinderError

logger = logging.getLogger(__name__)


# =============================================================================
# Source Type Enum
# =============================================================================


class SourceType(Enum):
    """자격 증명 소스 타입

    - SharedFile: ~/.aws/credentials 프로파일 (기본)
    - EncryptedStore: 로컬 암호화 자격 증명 저장소
    """

    SHARED_FILE = "shared-file"
    ENCRYPTED_STORE = "encrypted-store"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Account Credential
# =============================================================================


@dataclass(frozen=True)
class AccountCredential:
    """계정 하나의 자격 증명

    자격 증명 소스가 생성하며, 세션 생성 후에는 더 이상 사용하지 않습니다.
    비밀 값은 repr에 노출되지 않습니다.

    Attributes:
        identifier: 계정 식별자 (프로파일명 또는 "account/username")
        access_key_id: AWS Access Key ID
        secret_access_key: AWS Secret Access Key
        session_token: 임시 자격 증명 세션 토큰 (옵션)
        profile_name: 공유 자격 증명 파일의 프로파일명 (옵션)
    """

    identifier: str
    access_key_id: str | None = None
    secret_access_key: str | None = field(default=None, repr=False)
    session_token: str | None = field(default=None, repr=False)
    profile_name: str | None = None

    @property
    def has_static_keys(self) -> bool:
        """Access Key / Secret Key가 모두 있는지 여부"""
        return bool(self.access_key_id and self.secret_access_key)


# =============================================================================
# Credential Source Interface (Abstract Base Class)
# =============================================================================


class CredentialSource(ABC):
    """모든 자격 증명 소스가 구현해야 하는 추상 기본 클래스

    Example:
        class MySource(CredentialSource):
            def type(self) -> SourceType:
                return SourceType.SHARED_FILE

            def list_accounts(self) -> list[AccountCredential]:
                return [AccountCredential("default", "AKIA...", "secret")]
    """

    @abstractmethod
    def type(self) -> SourceType:
        """소스 타입을 반환합니다."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[AccountCredential]:
        """사용 가능한 계정 자격 증명 목록을 반환합니다.

        자격 증명 저장소를 읽기만 하며 수정하지 않습니다.

        Returns:
            순서가 보장된 AccountCredential 리스트

        Raises:
            AuthError: 자격 증명을 읽을 수 없는 경우
        """
        pass


# =============================================================================
# Error Classes
# =============================================================================


class AuthError(FinderError):
    """인증 관련 기본 에러 클래스

    모든 인증 에러의 부모 클래스입니다.
    원인 예외(cause)를 체이닝하여 디버깅을 용이하게 합니다.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, cause)


class ConfigurationError(AuthError):
    """자격 증명 설정 파일 파싱 실패 등 설정 오류

    Attributes:
        config_key: 문제가 된 설정 키 이름 (옵션)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key


class CredentialsFileNotFoundError(AuthError):
    """공유 자격 증명 파일이 없을 때 발생하는 에러

    Attributes:
        path: 찾을 수 없는 파일 경로
    """

    def __init__(self, path: Path | str):
        super().__init__(f"자격 증명 파일을 찾을 수 없습니다: {path}")
        self.path = Path(path)
        self.details["path"] = str(path)


class CredentialStoreError(AuthError):
    """암호화 저장소 읽기/복호화 실패

    Attributes:
        entry: 문제가 된 저장소 항목 ("account/username", 옵션)
    """

    def __init__(
        self,
        message: str,
        entry: str | None = None,
        cause: Exception | None = None,
    ):
        if entry:
            message = f"{message} [{entry}]"
        super().__init__(message, cause)
        self.entry = entry
