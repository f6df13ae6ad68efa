# core/auth/__init__.py
"""
계정 자격 증명 모듈 (core/auth)

구성:
- types: AccountCredential, CredentialSource 인터페이스, 인증 에러
- provider: 자격 증명 소스 구현 (공유 파일, 암호화 저장소)
- session: 리전 + 자격 증명 → AccountSession
- auth: 설정 플래그에 따른 소스 선택

사용 예시:
    from core.auth import build_sessions, create_credential_source

    source = create_credential_source(use_encrypted_store=False)
    sessions = build_sessions("ap-northeast-2", source.list_accounts())

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Types
    "SourceType",
    "CredentialSource",
    "AccountCredential",
    "AuthError",
    "ConfigurationError",
    "CredentialsFileNotFoundError",
    "CredentialStoreError",
    # Sources
    "SharedCredentialsSource",
    "EncryptedStoreSource",
    "create_credential_source",
    # Session
    "AccountSession",
    "make_session",
    "build_sessions",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Types
    "SourceType": (".types", "SourceType"),
    "CredentialSource": (".types", "CredentialSource"),
    "AccountCredential": (".types", "AccountCredential"),
    "AuthError": (".types", "AuthError"),
    "ConfigurationError": (".types", "ConfigurationError"),
    "CredentialsFileNotFoundError": (".types", "CredentialsFileNotFoundError"),
    "CredentialStoreError": (".types", "CredentialStoreError"),
    # Sources
    "SharedCredentialsSource": (".provider", "SharedCredentialsSource"),
    "EncryptedStoreSource": (".provider", "EncryptedStoreSource"),
    "create_credential_source": (".auth", "create_credential_source"),
    # Session
    "AccountSession": (".session", "AccountSession"),
    "make_session": (".session", "make_session"),
    "build_sessions": (".session", "build_sessions"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드

    CLI 시작 시간 최적화를 위해 무거운 의존성(boto3 등)을
    실제 필요한 시점에만 로드합니다.
    """
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
