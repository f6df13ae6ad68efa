"""
tests/core/parallel/test_parallel_cancel.py - CancelToken 테스트
"""

import threading
import time

import pytest

from core.exceptions import QueryCancelledError
from core.parallel.cancel import CancelToken


class TestCancelToken:
    """CancelToken 테스트"""

    def test_initial_state(self):
        token = CancelToken()

        assert token.cancelled is False
        assert token.reason is None
        token.raise_if_cancelled()  # 예외 없음

    def test_cancel_once(self):
        """처음 취소만 True, 사유 유지"""
        token = CancelToken()

        assert token.cancel("satisfied") is True
        assert token.cancel("timed_out") is False
        assert token.cancelled
        assert token.reason == "satisfied"

    def test_raise_if_cancelled(self):
        token = CancelToken()
        token.cancel()

        with pytest.raises(QueryCancelledError) as exc_info:
            token.raise_if_cancelled("ec2", "DescribeInstances")

        assert exc_info.value.service == "ec2"
        assert exc_info.value.operation == "DescribeInstances"
        assert exc_info.value.error_code == "Cancelled"

    def test_wait_wakes_on_cancel(self):
        """다른 스레드에서 취소하면 대기가 바로 끝남"""
        token = CancelToken()
        threading.Timer(0.05, token.cancel).start()

        start = time.monotonic()
        assert token.wait(5) is True
        assert time.monotonic() - start < 2

    def test_wait_timeout(self):
        assert CancelToken().wait(0.01) is False
