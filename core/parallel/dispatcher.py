"""
core/parallel/dispatcher.py - 팬아웃 디스패처 (첫 결과 우선)

모든 계정 세션에 같은 조회를 동시에 실행하고, 가장 먼저 도착한 Found 결과를
채택합니다. 전역 타임아웃이 지나거나 결과가 확정되면 남은 작업은 취소합니다.

상태 전이:
    RUNNING ─┬─ 첫 Found 도착 ──────────────→ SATISFIED
             ├─ 타임아웃 ───────────────────→ TIMED_OUT
             └─ 모든 계정 응답, Found 없음 ──→ EXHAUSTED

특징:
- 데몬 워커 스레드 + 작업 큐, 계정마다 작업 하나
- 단일 슬롯 완료 신호 (FirstResultSlot): 첫 publish만 채택, 이후는 논블로킹 무시
- 확정 시 CancelToken 취소: 대기열 작업은 시작하지 않고, 아직 전송 전인 요청은 before-send 훅에서 중단
- 이미 전송된 요청이나 자격 증명 조회(credential_process)에 묶인 워커는 버려짐.
  데몬 스레드이므로 프로세스 종료를 막지 않음
- Errored 결과는 승자도 타임아웃 원인도 아니며, 진단용으로 보관

Example:
    from core.parallel import DispatchConfig, FanOutDispatcher

    dispatcher = FanOutDispatcher(DispatchConfig(timeout=5), executor=ResourceQueryExecutor(timeout=5))
    outcome = dispatcher.dispatch(sessions, QueryRequest(QueryAction.INSTANCE, "i-123"))

    if outcome.succeeded:
        print(outcome.payload)
    else:
        outcome.raise_for_state()
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from core.config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT
from core.exceptions import DispatchTimeoutError, NoMatchError
from core.query.types import QueryRequest, QueryResult, QueryStatus

from .cancel import CancelToken
from .errors import categorize_error

if TYPE_CHECKING:
    from core.auth.session import AccountSession

logger = logging.getLogger(__name__)

# (session, request, cancel_token) -> QueryResult
QueryExecutorFunc = Callable[["AccountSession", QueryRequest, CancelToken], QueryResult]


def _clear_exception_chain(e: BaseException) -> None:
    """traceback + chained exception 메모리 누수 방지"""
    e.__traceback__ = None
    if e.__context__ is not None:
        e.__context__.__traceback__ = None
    if e.__cause__ is not None:
        e.__cause__.__traceback__ = None


class DispatchState(Enum):
    """디스패처 상태"""

    RUNNING = "running"
    SATISFIED = "satisfied"
    TIMED_OUT = "timed_out"
    EXHAUSTED = "exhausted"


@dataclass
class DispatchConfig:
    """디스패치 설정

    Attributes:
        timeout: 전역 타임아웃 (초, 0보다 커야 함)
        max_workers: 최대 동시 작업 수 (계정 수가 더 적으면 계정 수만큼)
        stop_when_exhausted: 모든 계정이 Found 없이 응답하면 타임아웃 전에 EXHAUSTED로 종료
            (False면 타임아웃까지 기다린 뒤 TIMED_OUT)
    """

    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS
    stop_when_exhausted: bool = True

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


class FirstResultSlot:
    """단일 슬롯 완료 신호

    첫 번째 publish만 채택하고, 이후 publish는 블로킹 없이 버려지며 개수만 셉니다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._result: QueryResult | None = None
        self._discarded = 0

    def publish(self, result: QueryResult) -> bool:
        """결과 게시

        Returns:
            채택되었으면 True, 이미 다른 결과가 있으면 False
        """
        with self._lock:
            if self._result is not None:
                self._discarded += 1
                return False
            self._result = result
        self._event.set()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)

    @property
    def result(self) -> QueryResult | None:
        with self._lock:
            return self._result

    @property
    def discarded(self) -> int:
        with self._lock:
            return self._discarded


class _DispatchStats:
    """작업 결과 집계 (스레드 세이프)

    결과 확정 이후에 끝나는 작업도 계속 집계되므로,
    DispatchOutcome의 카운터는 조회 시점의 값을 반환합니다.
    """

    def __init__(self, total: int) -> None:
        self._lock = threading.Lock()
        self.total = total
        self.completed = 0
        self.found = 0
        self.not_found = 0
        self.errors: list[QueryResult] = []
        self.all_done = threading.Event()
        if total == 0:
            self.all_done.set()

    def record(self, result: QueryResult) -> None:
        with self._lock:
            if result.status is QueryStatus.FOUND:
                self.found += 1
            elif result.status is QueryStatus.NOT_FOUND:
                self.not_found += 1
            else:
                self.errors.append(result)
            self.completed += 1
            if self.completed >= self.total:
                self.all_done.set()

    def snapshot_pending(self) -> int:
        with self._lock:
            return self.total - self.completed


@dataclass
class DispatchOutcome:
    """팬아웃 결과

    Attributes:
        state: 종료 상태 (SATISFIED / TIMED_OUT / EXHAUSTED)
        result: 채택된 Found 결과 (SATISFIED일 때만)
        timeout: 적용된 전역 타임아웃 (초)
        total: 전체 계정 수
        pending_count: 확정 시점에 끝나지 않은 작업 수
        elapsed_ms: 확정까지 걸린 시간
    """

    state: DispatchState
    result: QueryResult | None
    timeout: float
    total: int
    pending_count: int
    elapsed_ms: float
    _stats: _DispatchStats = field(repr=False)
    _slot: FirstResultSlot = field(repr=False)

    @property
    def succeeded(self) -> bool:
        return self.state is DispatchState.SATISFIED

    @property
    def payload(self) -> Any:
        return self.result.payload if self.result else None

    @property
    def account(self) -> str | None:
        return self.result.account if self.result else None

    @property
    def found_count(self) -> int:
        return self._stats.found

    @property
    def not_found_count(self) -> int:
        return self._stats.not_found

    @property
    def error_count(self) -> int:
        return len(self._stats.errors)

    @property
    def errors(self) -> list[QueryResult]:
        """Errored 결과 목록 (진단용)"""
        return list(self._stats.errors)

    @property
    def discarded_matches(self) -> int:
        """채택되지 않은 추가 Found 결과 수 (여러 계정에서 일치한 경우)"""
        return self._slot.discarded

    def raise_for_state(self) -> None:
        """실패 상태면 해당 예외 발생

        Raises:
            DispatchTimeoutError: TIMED_OUT
            NoMatchError: EXHAUSTED
        """
        if self.state is DispatchState.TIMED_OUT:
            raise DispatchTimeoutError(self.timeout, pending=self.pending_count)
        if self.state is DispatchState.EXHAUSTED:
            raise NoMatchError(self.total, errors=self.error_count)


class FanOutDispatcher:
    """팬아웃 디스패처

    계정 세션마다 조회 작업 하나를 동시에 실행하고 첫 Found 결과를 채택합니다.
    결과 확정 또는 타임아웃 시 남은 작업을 기다리지 않습니다.
    """

    def __init__(
        self,
        config: DispatchConfig | None = None,
        executor: QueryExecutorFunc | None = None,
        logger: logging.Logger | None = None,
    ):
        """초기화

        Args:
            config: 디스패치 설정 (None이면 기본값)
            executor: (session, request, cancel_token) -> QueryResult 함수
                (None이면 ResourceQueryExecutor(timeout=config.timeout))
            logger: 진단 로그용 logger (None이면 모듈 logger)
        """
        self.config = config or DispatchConfig()
        self.logger = logger or logging.getLogger(__name__)

        if executor is None:
            from core.query.executor import ResourceQueryExecutor

            executor = ResourceQueryExecutor(timeout=self.config.timeout, logger=self.logger)
        self._executor = executor

        self._workers: list[threading.Thread] = []
        self._cancel_token: CancelToken | None = None

    @property
    def cancel_token(self) -> CancelToken | None:
        """마지막 dispatch()에서 사용한 취소 토큰"""
        return self._cancel_token

    @property
    def workers(self) -> list[threading.Thread]:
        """마지막 dispatch()의 워커 스레드 (모두 데몬)"""
        return list(self._workers)

    def dispatch(self, sessions: Sequence[AccountSession], request: QueryRequest) -> DispatchOutcome:
        """모든 세션에 조회를 동시에 실행하고 첫 Found 결과를 반환

        Args:
            sessions: 계정 세션 목록
            request: 조회 요청 (모든 작업이 읽기 전용으로 공유)

        Returns:
            DispatchOutcome
        """
        total = len(sessions)
        timeout = self.config.timeout
        slot = FirstResultSlot()
        stats = _DispatchStats(total)
        token = CancelToken()
        wake = threading.Event()
        self._cancel_token = token
        self._workers = []

        start_time = time.monotonic()

        if total == 0:
            self.logger.warning("조회할 계정이 없습니다")
            return DispatchOutcome(DispatchState.EXHAUSTED, None, timeout, 0, 0, 0.0, stats, slot)

        max_workers = min(total, self.config.max_workers)
        self.logger.info(
            "팬아웃 시작: %d개 계정, action=%s, id=%s, timeout=%gs, max_workers=%d",
            total,
            request.action,
            request.identifier,
            timeout,
            max_workers,
        )

        work: queue.Queue[AccountSession] = queue.Queue()
        for session in sessions:
            work.put(session)

        # 데몬 스레드: 응답 없는 요청에 묶인 워커가 프로세스 종료를 막지 않음
        self._workers = [
            threading.Thread(
                target=self._worker,
                args=(work, request, token, slot, stats, wake),
                name=f"awsfind-query-{i}",
                daemon=True,
            )
            for i in range(max_workers)
        ]
        for worker in self._workers:
            worker.start()

        # 첫 Found, 전체 완료, 타임아웃 중 먼저 오는 쪽
        woke = wake.wait(timeout)

        if slot.result is not None:
            state = DispatchState.SATISFIED
        elif woke and stats.all_done.is_set():
            state = DispatchState.EXHAUSTED
        else:
            state = DispatchState.TIMED_OUT

        pending = stats.snapshot_pending()
        token.cancel(state.value)

        elapsed_ms = (time.monotonic() - start_time) * 1000
        outcome = DispatchOutcome(
            state=state,
            result=slot.result if state is DispatchState.SATISFIED else None,
            timeout=timeout,
            total=total,
            pending_count=pending,
            elapsed_ms=elapsed_ms,
            _stats=stats,
            _slot=slot,
        )

        if state is DispatchState.SATISFIED:
            self.logger.info("결과 확정: account=%s, %.0fms (미완료 %d개 취소)", outcome.account, elapsed_ms, pending)
        elif state is DispatchState.TIMED_OUT:
            self.logger.error("타임아웃: %gs 내에 결과 없음 (미완료 %d개 취소)", timeout, pending)
        else:
            self.logger.warning(
                "모든 계정에서 찾지 못함: NotFound %d, Errored %d", stats.not_found, len(stats.errors)
            )

        return outcome

    def join(self, timeout: float | None = None) -> bool:
        """취소된 작업까지 모두 끝날 때까지 대기 (테스트/정리용)

        Returns:
            모든 작업 스레드가 종료되었으면 True
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        for thread in self._workers:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            thread.join(remaining)
            if thread.is_alive():
                return False
        return True

    def _worker(
        self,
        work: queue.Queue[AccountSession],
        request: QueryRequest,
        token: CancelToken,
        slot: FirstResultSlot,
        stats: _DispatchStats,
        wake: threading.Event,
    ) -> None:
        """작업 큐가 비거나 토큰이 취소될 때까지 조회 실행"""
        while not token.cancelled:
            try:
                session = work.get_nowait()
            except queue.Empty:
                return
            self._run_task(session, request, token, slot, stats, wake)

    def _run_task(
        self,
        session: AccountSession,
        request: QueryRequest,
        token: CancelToken,
        slot: FirstResultSlot,
        stats: _DispatchStats,
        wake: threading.Event,
    ) -> None:
        """단일 계정 조회 (워커 스레드 내에서 호출)"""
        try:
            result = self._executor(session, request, token)
        except Exception as e:
            # 예상치 못한 executor 에러도 계정 단위 Errored로 처리
            self.logger.error("조회 중 예외 [%s]: %s (category=%s)", session.account, e, categorize_error(e).value)
            _clear_exception_chain(e)
            result = QueryResult.errored(e, account=session.account)

        if result.is_found:
            if slot.publish(result):
                wake.set()
            else:
                self.logger.warning("다른 계정에서도 일치 항목 발견 (무시됨): %s", session.account)

        stats.record(result)
        if stats.all_done.is_set() and self.config.stop_when_exhausted:
            wake.set()


def dispatch_first(
    sessions: Sequence[AccountSession],
    request: QueryRequest,
    timeout: float = DEFAULT_TIMEOUT,
    executor: QueryExecutorFunc | None = None,
    logger: logging.Logger | None = None,
) -> DispatchOutcome:
    """팬아웃 편의 함수

    FanOutDispatcher를 간단하게 사용할 수 있는 래퍼입니다.
    """
    dispatcher = FanOutDispatcher(DispatchConfig(timeout=timeout), executor=executor, logger=logger)
    return dispatcher.dispatch(sessions, request)
