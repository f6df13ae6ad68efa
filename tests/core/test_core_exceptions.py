"""
tests/core/test_core_exceptions.py - 예외 계층 테스트
"""

from core.auth.types import AuthError, CredentialsFileNotFoundError
from core.exceptions import (
    ConfigError,
    DispatchError,
    DispatchTimeoutError,
    FinderError,
    InvalidDurationError,
    NoMatchError,
    QueryCancelledError,
    QueryError,
    UnknownActionError,
    format_error_for_user,
    is_access_denied,
    is_not_found,
    is_throttling,
)


class TestHierarchy:
    """예외 계층 구조"""

    def test_all_derive_from_finder_error(self):
        for cls in (
            ConfigError,
            UnknownActionError,
            InvalidDurationError,
            QueryError,
            QueryCancelledError,
            DispatchError,
            DispatchTimeoutError,
            NoMatchError,
            AuthError,
            CredentialsFileNotFoundError,
        ):
            assert issubclass(cls, FinderError)

    def test_to_dict(self):
        cause = ValueError("bad")
        error = FinderError("실패", cause=cause, details={"k": "v"})

        assert error.to_dict() == {
            "error_type": "FinderError",
            "message": "실패",
            "cause": "bad",
            "details": {"k": "v"},
        }
        assert str(error) == "실패: bad"


class TestQueryError:
    """QueryError 테스트"""

    def test_from_client_error(self, client_error):
        cause = client_error("AccessDenied", "not allowed")

        error = QueryError.from_client_error("ec2", "describe_instances", cause)

        assert error.error_code == "AccessDenied"
        assert error.error_message == "not allowed"
        assert error.cause is cause
        assert "ec2.describe_instances" in str(error)
        assert error.details["service"] == "ec2"

    def test_cancelled(self):
        error = QueryCancelledError("ec2", "DescribeImages")

        assert error.error_code == "Cancelled"
        assert isinstance(error, QueryError)


class TestDispatchErrors:
    """디스패치 예외"""

    def test_timeout(self):
        error = DispatchTimeoutError(2.0, pending=3)

        assert error.timeout == 2.0
        assert error.details == {"timeout": 2.0, "pending": 3}
        assert "2" in str(error)

    def test_no_match(self):
        error = NoMatchError(5, errors=2)

        assert error.accounts == 5
        assert error.errors == 2


class TestHelpers:
    """예외 유틸리티 함수"""

    def test_classifiers(self, client_error):
        assert is_access_denied(client_error("AccessDenied"))
        assert is_throttling(client_error("RequestLimitExceeded"))
        assert is_not_found(client_error("InvalidInstanceID.NotFound"))
        assert not is_access_denied(RuntimeError("x"))

    def test_classifiers_on_query_error(self):
        assert is_throttling(QueryError("ec2", "describe_instances", error_code="Throttling"))

    def test_format_error_for_user(self, client_error):
        assert "IAM" in format_error_for_user(client_error("AccessDenied"))
        assert format_error_for_user(client_error("Weird", "odd")) == "Weird: odd"
        assert format_error_for_user(NoMatchError(1)) == str(NoMatchError(1))
        assert format_error_for_user(RuntimeError("plain")) == "plain"
