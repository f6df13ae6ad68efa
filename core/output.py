"""
core/output.py - 결과 출력 포매터

채택된 레코드를 JSON 문자열로 직렬화하여 표준 출력에 씁니다.

- 키 이름과 구조는 AWS API 응답 그대로 유지
- datetime은 ISO 8601 문자열로 변환
- 출력 끝에 줄바꿈을 붙이지 않음 (파이프라인에서 그대로 파싱 가능)
- 직렬화 실패 시 ERROR 로그를 남기고 아무것도 출력하지 않음

Usage:
    from core.output import write_payload

    if not write_payload(outcome.payload):
        raise SystemExit(1)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TextIO

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    """json.dumps가 처리하지 못하는 타입 변환"""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def format_payload(payload: Any) -> str:
    """레코드를 JSON 문자열로 직렬화 (compact, 줄바꿈 없음)

    Raises:
        TypeError / ValueError: 순환 참조나 문자열이 아닌 키 등 직렬화할 수 없는 구조인 경우
    """
    return json.dumps(payload, default=_json_default, ensure_ascii=False)


def write_payload(
    payload: Any,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> bool:
    """레코드를 JSON으로 직렬화하여 stream에 출력

    Args:
        payload: 출력할 레코드 (API 응답 구조 그대로)
        stream: 출력 대상 (None이면 sys.stdout)
        logger: 에러 로그용 logger (None이면 모듈 logger)

    Returns:
        출력에 성공하면 True, 직렬화 실패 시 False (아무것도 출력하지 않음)
    """
    log = logger or logging.getLogger(__name__)
    out = stream if stream is not None else sys.stdout

    try:
        text = format_payload(payload)
    except (TypeError, ValueError) as e:
        log.error("결과를 JSON으로 직렬화하지 못했습니다: %s", e)
        return False

    out.write(text)
    out.flush()
    return True
