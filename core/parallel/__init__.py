"""
core/parallel - 팬아웃 병렬 조회 모듈

여러 계정에 같은 조회를 동시에 실행하고 첫 번째 일치 결과를 채택합니다.

주요 구성 요소:
- FanOutDispatcher: 첫 결과 우선 + 전역 타임아웃 디스패처
- CancelToken: 결과 확정 후 남은 요청을 중단하는 취소 토큰
- get_client: 재시도 없음 + 타임아웃 + 취소 훅이 적용된 boto3 client
- categorize_error: 계정 단위 에러 분류

Example:
    from core.parallel import DispatchConfig, FanOutDispatcher

    dispatcher = FanOutDispatcher(DispatchConfig(timeout=5))
    outcome = dispatcher.dispatch(sessions, request)

    if outcome.succeeded:
        print(outcome.payload)
    print(f"NotFound: {outcome.not_found_count}, Errored: {outcome.error_count}")
"""

from .cancel import CancelToken
from .client import attach_cancel_token, get_client
from .dispatcher import (
    DispatchConfig,
    DispatchOutcome,
    DispatchState,
    FanOutDispatcher,
    FirstResultSlot,
    dispatch_first,
)
from .errors import categorize_error, categorize_error_code, get_error_code
from .types import ErrorCategory

__all__: list[str] = [
    # Dispatcher
    "FanOutDispatcher",
    "DispatchConfig",
    "DispatchOutcome",
    "DispatchState",
    "FirstResultSlot",
    "dispatch_first",
    # Cancellation
    "CancelToken",
    # Client
    "get_client",
    "attach_cancel_token",
    # Error handling
    "ErrorCategory",
    "categorize_error",
    "categorize_error_code",
    "get_error_code",
]
