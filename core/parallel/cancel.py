"""
core/parallel/cancel.py - 팬아웃 취소 토큰

디스패처가 결과를 확정하거나 타임아웃되면 토큰을 취소 상태로 바꿉니다.
모든 조회 작업이 같은 토큰을 공유하며, boto3 client의 before-send 훅에서
토큰을 확인하여 아직 전송되지 않은 요청을 중단합니다.

Example:
    token = CancelToken()
    client = get_client(session, "ec2", region_name=region, cancel_token=token)

    token.cancel("first result received")
    client.describe_instances()  # QueryCancelledError
"""

from __future__ import annotations

import threading

from core.exceptions import QueryCancelledError


class CancelToken:
    """스레드 세이프 취소 토큰

    한 번 취소되면 되돌릴 수 없습니다.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled") -> bool:
        """토큰 취소

        Returns:
            이번 호출로 취소되었으면 True (이미 취소된 상태면 False)
        """
        with self._lock:
            if self._event.is_set():
                return False
            self._reason = reason
            self._event.set()
            return True

    def wait(self, timeout: float | None = None) -> bool:
        """취소될 때까지 최대 timeout초 대기

        Returns:
            취소되었으면 True
        """
        return self._event.wait(timeout)

    def raise_if_cancelled(self, service: str = "unknown", operation: str = "unknown") -> None:
        """취소된 상태면 QueryCancelledError 발생"""
        if self._event.is_set():
            raise QueryCancelledError(service, operation)
