# core/auth/provider/encrypted_store.py
"""
로컬 암호화 자격 증명 저장소

계정/사용자 쌍마다 Fernet으로 암호화된 자격 증명 파일을 하나씩 보관합니다.

저장소 구조:
    <store_dir>/
        <account>/
            <username>.json     # {"ciphertext": "<Fernet token>"}
    <store_dir>/../store.key    # Fernet 키 (AWSFIND_STORE_KEY로 대체 가능)

복호화된 평문:
    {"access_key_id": "...", "secret_access_key": "...", "session_token": "..."}

항목 하나라도 복호화에 실패하면 전체 실행을 중단합니다 (건너뛰지 않음).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from cryptography.fernet import Fernet, InvalidToken

from ..types import AccountCredential, CredentialSource, CredentialStoreError, SourceType

logger = logging.getLogger(__name__)

ENTRY_SUFFIX = ".json"


class EncryptedStoreSource(CredentialSource):
    """암호화 저장소 기반 자격 증명 소스

    Example:
        source = EncryptedStoreSource(store_dir, key=os.environ["AWSFIND_STORE_KEY"])
        source.add("prod", "deploy", "AKIA...", "secret")
        accounts = source.list_accounts()  # [AccountCredential("prod/deploy", ...)]
    """

    def __init__(
        self,
        store_dir: Path | str,
        key: str | bytes | None = None,
        key_file: Path | str | None = None,
    ):
        self._store_dir = Path(store_dir)
        self._key = key
        self._key_file = Path(key_file) if key_file else self._store_dir.parent / "store.key"

    def type(self) -> SourceType:
        return SourceType.ENCRYPTED_STORE

    # =========================================================================
    # 조회
    # =========================================================================

    def list_entries(self) -> list[tuple[str, str]]:
        """(account, username) 쌍을 정렬된 순서로 반환

        Raises:
            CredentialStoreError: 저장소 디렉토리가 없는 경우
        """
        if not self._store_dir.is_dir():
            raise CredentialStoreError(f"자격 증명 저장소를 찾을 수 없습니다: {self._store_dir}")

        entries: list[tuple[str, str]] = []
        for account_dir in sorted(p for p in self._store_dir.iterdir() if p.is_dir()):
            for entry_file in sorted(account_dir.glob(f"*{ENTRY_SUFFIX}")):
                entries.append((account_dir.name, entry_file.stem))
        return entries

    def list_accounts(self) -> list[AccountCredential]:
        """저장소의 모든 항목을 복호화하여 반환

        Raises:
            CredentialStoreError: 저장소/키가 없거나 항목 복호화에 실패한 경우
        """
        fernet = self._fernet()
        accounts: list[AccountCredential] = []

        for account, username in self.list_entries():
            entry = f"{account}/{username}"
            try:
                secret = self._decrypt_entry(fernet, account, username)
            except CredentialStoreError as e:
                logger.error("자격 증명 복호화 실패 [%s]: %s", entry, e)
                raise

            accounts.append(
                AccountCredential(
                    identifier=entry,
                    access_key_id=secret["access_key_id"],
                    secret_access_key=secret["secret_access_key"],
                    session_token=secret.get("session_token") or None,
                )
            )

        logger.debug("암호화 저장소에서 %d개 계정 로드: %s", len(accounts), self._store_dir)
        return accounts

    # =========================================================================
    # 저장
    # =========================================================================

    def add(
        self,
        account: str,
        username: str,
        access_key_id: str,
        secret_access_key: str,
        session_token: str | None = None,
    ) -> Path:
        """자격 증명을 암호화하여 저장소에 추가 (이미 있으면 덮어씀)

        Returns:
            저장된 항목 파일 경로
        """
        plaintext = {"access_key_id": access_key_id, "secret_access_key": secret_access_key}
        if session_token:
            plaintext["session_token"] = session_token

        token = self._fernet().encrypt(json.dumps(plaintext).encode("utf-8"))

        entry_file = self._store_dir / account / f"{username}{ENTRY_SUFFIX}"
        entry_file.parent.mkdir(parents=True, exist_ok=True)
        entry_file.write_text(json.dumps({"ciphertext": token.decode("ascii")}), encoding="utf-8")
        entry_file.chmod(0o600)
        return entry_file

    @staticmethod
    def generate_key() -> str:
        """새 저장소 키 생성"""
        return Fernet.generate_key().decode("ascii")

    # =========================================================================
    # 내부
    # =========================================================================

    def _fernet(self) -> Fernet:
        key = self._key
        if key is None:
            if not self._key_file.is_file():
                raise CredentialStoreError(f"저장소 키를 찾을 수 없습니다: {self._key_file}")
            key = self._key_file.read_text(encoding="utf-8").strip()

        try:
            return Fernet(key)
        except (ValueError, TypeError) as e:
            raise CredentialStoreError("저장소 키 형식이 잘못되었습니다", cause=e) from e

    def _decrypt_entry(self, fernet: Fernet, account: str, username: str) -> dict[str, str]:
        entry = f"{account}/{username}"
        entry_file = self._store_dir / account / f"{username}{ENTRY_SUFFIX}"

        try:
            envelope = json.loads(entry_file.read_text(encoding="utf-8"))
            plaintext = fernet.decrypt(envelope["ciphertext"].encode("ascii"))
            secret = json.loads(plaintext)
        except InvalidToken as e:
            raise CredentialStoreError("복호화 실패 (키 불일치 또는 손상된 항목)", entry=entry, cause=e) from e
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise CredentialStoreError("저장소 항목 형식이 잘못되었습니다", entry=entry, cause=e) from e

        if not isinstance(secret, dict) or not secret.get("access_key_id") or not secret.get("secret_access_key"):
            raise CredentialStoreError("access_key_id/secret_access_key가 없습니다", entry=entry)
        return secret
