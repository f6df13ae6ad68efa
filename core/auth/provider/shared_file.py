# core/auth/provider/shared_file.py
"""
공유 자격 증명 파일(~/.aws/credentials) 기반 자격 증명 소스

파일의 프로파일 섹션 하나가 계정 하나가 됩니다.
정적 키가 없는 프로파일(role_arn, credential_process 등)은 프로파일명만
설정된 AccountCredential로 반환되어 boto3 프로파일 체인으로 해석됩니다.

파일 형식:
    [default]
    aws_access_key_id = AKIA...
    aws_secret_access_key = ...

    [prod]
    aws_access_key_id = AKIA...
    aws_secret_access_key = ...
    aws_session_token = ...
"""

from __future__ import annotations

import configparser
import logging
from pathlib import Path

from ..types import (
    AccountCredential,
    ConfigurationError,
    CredentialSource,
    CredentialsFileNotFoundError,
    SourceType,
)

logger = logging.getLogger(__name__)


class SharedCredentialsSource(CredentialSource):
    """공유 자격 증명 파일 소스

    Example:
        source = SharedCredentialsSource(Path.home() / ".aws" / "credentials")
        for account in source.list_accounts():
            print(account.identifier)
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def type(self) -> SourceType:
        return SourceType.SHARED_FILE

    def list_accounts(self) -> list[AccountCredential]:
        """프로파일 섹션마다 AccountCredential 하나를 파일 순서대로 반환

        Raises:
            CredentialsFileNotFoundError: 파일이 없는 경우
            ConfigurationError: 파일을 파싱할 수 없는 경우
        """
        if not self._path.is_file():
            raise CredentialsFileNotFoundError(self._path)

        parser = configparser.RawConfigParser()
        try:
            with open(self._path, encoding="utf-8") as f:
                parser.read_file(f)
        except (configparser.Error, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"자격 증명 파일을 파싱할 수 없습니다: {self._path}",
                config_key=str(self._path),
                cause=e,
            ) from e

        accounts: list[AccountCredential] = []
        for profile in parser.sections():
            section = parser[profile]
            accounts.append(
                AccountCredential(
                    identifier=profile,
                    access_key_id=section.get("aws_access_key_id") or None,
                    secret_access_key=section.get("aws_secret_access_key") or None,
                    session_token=section.get("aws_session_token") or None,
                    profile_name=profile,
                )
            )

        logger.debug("공유 자격 증명 파일에서 %d개 프로파일 로드: %s", len(accounts), self._path)
        return accounts
