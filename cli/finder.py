"""
cli/finder.py - 리소스 찾기 실행기

CLI 인자 검증이 끝난 뒤의 실행 흐름을 담당합니다.

    1. 자격 증명 소스에서 계정 목록 로드 (실패 시 조회 없이 종료)
    2. 계정마다 세션 생성
    3. 팬아웃 디스패치 (첫 결과 우선 + 전역 타임아웃)
    4. 성공 시 JSON 출력, 실패 시 stderr에 진단 한 줄

Returns (exit code):
    0: 결과 출력
    1: 자격 증명 실패, 계정 없음, 타임아웃, 모든 계정에서 찾지 못함, 출력 실패
    130: Ctrl+C
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cli.i18n import t
from cli.ui.console import print_error, print_warning
from core.auth import AuthError, build_sessions, create_credential_source
from core.config import DEFAULT_TIMEOUT, get_settings
from core.output import write_payload
from core.parallel import DispatchConfig, DispatchOutcome, DispatchState, FanOutDispatcher
from core.query import QueryRequest, ResourceQueryExecutor


@dataclass
class FindConfig:
    """찾기 실행 설정"""

    region: str
    request: QueryRequest
    timeout: float = DEFAULT_TIMEOUT
    use_encrypted_store: bool = False


class FindRunner:
    """리소스 찾기 실행기

    모든 계정을 동시에 조회하고 첫 번째 일치 결과를 표준 출력에 씁니다.
    """

    def __init__(self, config: FindConfig, logger: logging.Logger | None = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.settings = get_settings()

    def run(self) -> int:
        """실행

        Returns:
            0: 성공
            1: 실패
        """
        try:
            sessions = self._load_sessions()
            if sessions is None:
                return 1

            outcome = self._dispatch(sessions)
            return self._report(outcome)

        except KeyboardInterrupt:
            print_warning(t("find.interrupted"))
            return 130

    def _load_sessions(self) -> list | None:
        """자격 증명 로드 및 세션 생성 (네트워크 호출 없음)"""
        try:
            source = create_credential_source(self.config.use_encrypted_store, self.settings)
            credentials = source.list_accounts()
            if not credentials:
                print_error(t("find.no_accounts"))
                return None

            self.logger.debug("%s: %d개 계정", source.type().value, len(credentials))
            return build_sessions(self.config.region, credentials)

        except AuthError as e:
            self.logger.error("자격 증명 로드 실패: %s", e)
            print_error(t("find.credentials_failed", message=str(e)))
            return None

    def _dispatch(self, sessions: list) -> DispatchOutcome:
        timeout = self.config.timeout
        executor = ResourceQueryExecutor(timeout=timeout, logger=self.logger)
        dispatcher = FanOutDispatcher(
            DispatchConfig(timeout=timeout, max_workers=self.settings.max_workers),
            executor=executor,
            logger=self.logger,
        )
        return dispatcher.dispatch(sessions, self.config.request)

    def _report(self, outcome: DispatchOutcome) -> int:
        """결과 출력 및 exit code 결정"""
        request = self.config.request

        if outcome.state is DispatchState.SATISFIED:
            if not write_payload(outcome.payload, logger=self.logger):
                print_error(t("find.output_failed"))
                return 1
            return 0

        if outcome.state is DispatchState.TIMED_OUT:
            print_error(t("find.timed_out", timeout=f"{self.config.timeout:g}"))
        else:
            print_error(
                t(
                    "find.not_found",
                    identifier=request.identifier,
                    accounts=outcome.total,
                    errors=outcome.error_count,
                )
            )

        for result in outcome.errors:
            self.logger.debug("[%s] %s", result.account, result.error)
        return 1


def run_find(
    region: str,
    request: QueryRequest,
    timeout: float = DEFAULT_TIMEOUT,
    use_encrypted_store: bool = False,
    logger: logging.Logger | None = None,
) -> int:
    """찾기 실행 진입점

    Returns:
        exit code
    """
    config = FindConfig(
        region=region,
        request=request,
        timeout=timeout,
        use_encrypted_store=use_encrypted_store,
    )
    return FindRunner(config, logger=logger).run()
