"""
core/query/services/helpers.py - 조회 응답 공통 헬퍼
"""

from __future__ import annotations

from typing import Any


def strip_metadata(response: dict[str, Any]) -> dict[str, Any]:
    """boto3 응답에서 ResponseMetadata 제거 (원본은 변경하지 않음)"""
    return {key: value for key, value in response.items() if key != "ResponseMetadata"}
