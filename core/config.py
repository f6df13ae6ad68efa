"""
core/config.py - 중앙 설정 관리

기본값과 환경 변수 오버라이드를 한 곳에서 관리합니다.

환경 변수:
    AWS_REGION / AWS_DEFAULT_REGION: 기본 리전
    AWS_SHARED_CREDENTIALS_FILE: 공유 자격 증명 파일 경로
    AWSFIND_STORE_DIR: 암호화 자격 증명 저장소 디렉토리
    AWSFIND_STORE_KEY: 암호화 저장소 키 (Fernet)
    AWSFIND_MAX_WORKERS: 최대 동시 조회 수

Usage:
    from core.config import get_settings

    settings = get_settings()
    print(settings.credentials_file)
"""

from __future__ import annotations

import logging
import math
import os
import re
from dataclasses import dataclass
from pathlib import Path

from core.exceptions import InvalidDurationError

logger = logging.getLogger(__name__)

# 기본 타임아웃 (초)
DEFAULT_TIMEOUT = 5.0

# 최대 동시 조회 수 (계정 수가 더 많으면 나머지는 대기열에서 실행)
DEFAULT_MAX_WORKERS = 50

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _home_dir() -> Path:
    """홈 디렉토리 (HOME 환경 변수 우선)"""
    home = os.environ.get("HOME")
    return Path(home) if home else Path.home()


def get_default_region() -> str | None:
    """환경 변수에서 기본 리전 반환 (없으면 None)"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or None


def get_version() -> str:
    """버전 문자열 반환

    프로젝트 루트의 version.txt에서 읽습니다.
    """
    version_file = PROJECT_ROOT / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug("Failed to read version file: %s", e)
    return "0.0.1"


@dataclass(frozen=True)
class Settings:
    """실행 설정

    Attributes:
        default_timeout: 전역 조회 타임아웃 (초)
        credentials_file: 공유 자격 증명 파일 경로
        store_dir: 암호화 자격 증명 저장소 디렉토리
        store_key: 암호화 저장소 키 (None이면 store.key 파일 사용)
        max_workers: 최대 동시 조회 수
    """

    default_timeout: float
    credentials_file: Path
    store_dir: Path
    store_key: str | None
    max_workers: int

    @property
    def store_key_file(self) -> Path:
        """저장소 키 파일 경로 (저장소 디렉토리와 같은 위치)"""
        return self.store_dir.parent / "store.key"


def get_settings() -> Settings:
    """현재 환경 변수 기준 설정 생성

    호출 시점의 환경을 읽으므로 테스트에서 monkeypatch로 쉽게 바꿀 수 있습니다.
    """
    home = _home_dir()

    credentials_file = os.environ.get("AWS_SHARED_CREDENTIALS_FILE")
    store_dir = os.environ.get("AWSFIND_STORE_DIR")

    max_workers = DEFAULT_MAX_WORKERS
    raw_workers = os.environ.get("AWSFIND_MAX_WORKERS")
    if raw_workers:
        try:
            max_workers = max(1, int(raw_workers))
        except ValueError:
            logger.warning("AWSFIND_MAX_WORKERS 값이 잘못되었습니다: %s (기본값 사용)", raw_workers)

    return Settings(
        default_timeout=DEFAULT_TIMEOUT,
        credentials_file=Path(credentials_file) if credentials_file else home / ".aws" / "credentials",
        store_dir=Path(store_dir) if store_dir else home / ".awsfind" / "store",
        store_key=os.environ.get("AWSFIND_STORE_KEY") or None,
        max_workers=max_workers,
    )


# 타임아웃 문자열 단위 (초)
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """타임아웃 문자열을 초 단위로 변환

    지원 형식:
        - 단위 조합: "500ms", "5s", "1m30s", "1.5h"
        - 단위 없는 숫자 (초): "2.5", "10"

    Args:
        value: 타임아웃 문자열

    Returns:
        초 (0보다 큼)

    Raises:
        InvalidDurationError: 형식이 잘못되었거나 0 이하인 경우
    """
    text = (value or "").strip()
    if not text:
        raise InvalidDurationError(value, "값이 비어 있습니다")

    try:
        seconds = float(text)
    except ValueError:
        seconds = _parse_unit_duration(value, text)

    if not math.isfinite(seconds) or seconds <= 0:
        raise InvalidDurationError(value, "0보다 커야 합니다")
    return seconds


def _parse_unit_duration(value: str, text: str) -> float:
    total = 0.0
    pos = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()

    if pos == 0 or pos != len(text):
        raise InvalidDurationError(value, "잘못된 형식 (예: 500ms, 5s, 1m30s)")
    return total
