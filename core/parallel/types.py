"""
core/parallel/types.py - 병렬 조회 공통 타입

주요 구성 요소:
- ErrorCategory: 계정 단위 조회 에러 분류
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """계정 단위 조회 에러 분류

    Errored 결과의 진단 정보로 사용됩니다.
    """

    THROTTLING = "throttling"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    INVALID_REQUEST = "invalid_request"
    EXPIRED_TOKEN = "expired_token"
    TIMEOUT = "timeout"
    NETWORK = "network"
    SERVICE_ERROR = "service_error"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"
