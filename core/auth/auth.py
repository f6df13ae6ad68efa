# core/auth/auth.py
"""
자격 증명 소스 선택

설정 플래그에 따라 공유 자격 증명 파일 또는 암호화 저장소 소스를 생성합니다.
"""

from __future__ import annotations

import logging

from core.config import Settings, get_settings

from .types import CredentialSource

logger = logging.getLogger(__name__)


def create_credential_source(
    use_encrypted_store: bool = False,
    settings: Settings | None = None,
) -> CredentialSource:
    """자격 증명 소스 생성

    Args:
        use_encrypted_store: True이면 암호화 저장소, False이면 공유 자격 증명 파일
        settings: 실행 설정 (None이면 현재 환경 기준)

    Returns:
        CredentialSource 구현체
    """
    settings = settings or get_settings()

    if use_encrypted_store:
        from .provider.encrypted_store import EncryptedStoreSource

        logger.debug("암호화 저장소 사용: %s", settings.store_dir)
        return EncryptedStoreSource(
            settings.store_dir,
            key=settings.store_key,
            key_file=settings.store_key_file,
        )

    from .provider.shared_file import SharedCredentialsSource

    logger.debug("공유 자격 증명 파일 사용: %s", settings.credentials_file)
    return SharedCredentialsSource(settings.credentials_file)
