# core/auth/provider/__init__.py
"""
자격 증명 소스 구현 모듈

소스 목록:
- SharedCredentialsSource: ~/.aws/credentials 프로파일 (기본)
- EncryptedStoreSource: 로컬 암호화 자격 증명 저장소

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    EncryptedStoreSource는 cryptography를 사용하므로 필요할 때만 로드됩니다.
"""

__all__ = [
    "SharedCredentialsSource",
    "EncryptedStoreSource",
]

_IMPORT_MAPPING = {
    "SharedCredentialsSource": (".shared_file", "SharedCredentialsSource"),
    "EncryptedStoreSource": (".encrypted_store", "EncryptedStoreSource"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
