"""
core/parallel/errors.py - AWS API 에러 분류

계정 단위 조회에서 발생한 예외를 분류하고 에러 코드를 추출합니다.
분류 결과는 Errored 결과의 진단 정보와 로그에 사용됩니다.

주요 구성 요소:
- categorize_error: 예외를 ErrorCategory로 분류
- categorize_error_code: 에러 코드 문자열 기반 분류
- get_error_code: 예외에서 에러 코드 추출
"""

from __future__ import annotations

import logging

from botocore.exceptions import ConnectTimeoutError, EndpointConnectionError, ReadTimeoutError

from core.exceptions import QueryCancelledError, is_access_denied, is_not_found, is_throttling

from .types import ErrorCategory

logger = logging.getLogger(__name__)


def categorize_error_code(error_code: str) -> ErrorCategory:
    """에러 코드 문자열을 기반으로 ErrorCategory 분류

    Args:
        error_code: AWS 에러 코드 문자열 (예: "AccessDenied", "InvalidParameterValue")

    Returns:
        분류된 에러 카테고리. 매칭되는 키워드가 없으면 UNKNOWN 반환.
    """
    code = error_code.lower()

    if any(x in code for x in ["accessdenied", "unauthorized", "forbidden", "authfailure"]):
        return ErrorCategory.ACCESS_DENIED
    if any(x in code for x in ["expiredtoken", "invalidclienttokenid"]):
        return ErrorCategory.EXPIRED_TOKEN
    if any(x in code for x in ["notfound", "nosuch", "doesnotexist"]):
        return ErrorCategory.NOT_FOUND
    if any(x in code for x in ["throttl", "ratelimit", "toomanyrequests", "requestlimitexceeded"]):
        return ErrorCategory.THROTTLING
    if any(x in code for x in ["timeout", "timedout"]):
        return ErrorCategory.TIMEOUT
    if any(x in code for x in ["invalid", "validation", "malformed"]):
        return ErrorCategory.INVALID_REQUEST
    if any(x in code for x in ["internal", "serviceunavailable", "serviceerror"]):
        return ErrorCategory.SERVICE_ERROR

    return ErrorCategory.UNKNOWN


def categorize_error(error: BaseException) -> ErrorCategory:
    """예외 객체를 분석하여 ErrorCategory로 분류

    ClientError/QueryError는 에러 코드로, 네트워크/타임아웃 에러는 타입으로 분류합니다.

    Args:
        error: 분류할 예외

    Returns:
        에러 카테고리
    """
    if isinstance(error, QueryCancelledError):
        return ErrorCategory.CANCELLED
    if isinstance(error, (ConnectTimeoutError, ReadTimeoutError)):
        return ErrorCategory.TIMEOUT
    if isinstance(error, EndpointConnectionError):
        return ErrorCategory.NETWORK

    if isinstance(error, Exception):
        if is_throttling(error):
            return ErrorCategory.THROTTLING
        if is_access_denied(error):
            return ErrorCategory.ACCESS_DENIED
        if is_not_found(error):
            return ErrorCategory.NOT_FOUND

    code = get_error_code(error)
    if code != error.__class__.__name__:
        category = categorize_error_code(code)
        if category != ErrorCategory.UNKNOWN:
            return category

    if isinstance(error, (ConnectionError, TimeoutError, OSError)):
        return ErrorCategory.NETWORK

    return ErrorCategory.UNKNOWN


def get_error_code(error: BaseException) -> str:
    """예외 객체에서 에러 코드 문자열 추출

    ClientError의 경우 response에서 Code를 추출하고,
    QueryError는 error_code를, 그 외에는 예외 클래스명을 반환합니다.

    Args:
        error: 예외 객체

    Returns:
        에러 코드 문자열
    """
    code = getattr(error, "error_code", None)
    if isinstance(code, str) and code:
        return code

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        code = response.get("Error", {}).get("Code")
        if code:
            return str(code)
    return error.__class__.__name__
