"""
core/exceptions.py - 통합 예외 계층 구조

awsfind 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    FinderError (베이스)
    ├── ConfigError (설정/입력 관련 - 조회 시작 전 종료)
    │   ├── UnknownActionError
    │   └── InvalidDurationError
    ├── AuthError (인증 정보 관련) - core.auth.types에서 재정의
    │   ├── ConfigurationError
    │   ├── CredentialsFileNotFoundError
    │   └── CredentialStoreError
    ├── QueryError (계정 단위 조회 실패 - Errored 결과로 변환)
    │   └── QueryCancelledError
    └── DispatchError (팬아웃 종료 사유)
        ├── DispatchTimeoutError
        └── NoMatchError

Usage:
    from core.exceptions import QueryError

    try:
        response = ec2.describe_instances(Filters=filters)
    except ClientError as e:
        raise QueryError.from_client_error("ec2", "describe_instances", e)
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class FinderError(Exception):
    """awsfind 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(FinderError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class UnknownActionError(ConfigError):
    """지원하지 않는 조회 액션"""

    def __init__(self, action: str, valid_actions: Optional[list] = None):
        valid = ", ".join(valid_actions or [])
        super().__init__("action", f"'{action}'은(는) 유효한 액션이 아닙니다 (사용 가능: {valid})")
        self.action = action
        self.details["action"] = action


class InvalidDurationError(ConfigError):
    """타임아웃 문자열 파싱 실패"""

    def __init__(self, value: str, reason: str = "잘못된 형식"):
        super().__init__("timeout", f"'{value}': {reason}")
        self.value = value


# =============================================================================
# 조회 관련 예외
# =============================================================================


class QueryError(FinderError):
    """계정 단위 AWS API 조회 실패

    boto3/botocore 에러를 래핑합니다. 팬아웃 중에는 전파되지 않고
    Errored 결과로 변환되어 진단용으로 보관됩니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "QueryError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 예외

        Returns:
            QueryError 인스턴스
        """
        error_code = None
        error_message = None

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


class QueryCancelledError(QueryError):
    """디스패처가 결과를 확정한 뒤 취소된 조회"""

    def __init__(self, service: str = "unknown", operation: str = "unknown"):
        super().__init__(service, operation, error_code="Cancelled", error_message="조회가 취소되었습니다")


# =============================================================================
# 디스패치 관련 예외
# =============================================================================


class DispatchError(FinderError):
    """팬아웃 디스패치 실패"""

    pass


class DispatchTimeoutError(DispatchError):
    """전역 타임아웃 내에 결과를 찾지 못함"""

    def __init__(self, timeout: float, pending: int = 0):
        super().__init__(f"{timeout:g}초 내에 결과를 찾지 못했습니다 (대기 중인 계정: {pending}개)")
        self.timeout = timeout
        self.pending = pending
        self.details.update({"timeout": timeout, "pending": pending})


class NoMatchError(DispatchError):
    """모든 계정이 응답했으나 일치하는 리소스가 없음"""

    def __init__(self, accounts: int, errors: int = 0):
        super().__init__(f"{accounts}개 계정에서 리소스를 찾지 못했습니다 (에러: {errors}개)")
        self.accounts = accounts
        self.errors = errors
        self.details.update({"accounts": accounts, "errors": errors})


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

_ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
    "UnauthorizedOperation",
}

_THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}

_NOT_FOUND_CODES = {
    "ResourceNotFoundException",
    "NotFoundException",
    "InvalidInstanceID.NotFound",
    "InvalidAMIID.NotFound",
    "InvalidAMIID.Malformed",
}


def _error_code_of(error: Exception) -> str:
    if isinstance(error, QueryError):
        return error.error_code or ""
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return _error_code_of(error) in _ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    return _error_code_of(error) in _THROTTLING_CODES


def is_not_found(error: Exception) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인"""
    return _error_code_of(error) in _NOT_FOUND_CODES


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, FinderError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))

        friendly_messages = {
            "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
            "ExpiredToken": "인증 토큰이 만료되었습니다. 자격 증명을 갱신하세요.",
            "InvalidClientTokenId": "잘못된 자격 증명입니다.",
            "AuthFailure": "잘못된 자격 증명입니다.",
        }

        return friendly_messages.get(code, f"{code}: {message}")

    return str(error)
