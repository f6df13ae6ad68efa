"""
core/query/executor.py - 리소스 조회 실행기

계정 세션 하나에 대해 액션에 맞는 읽기 전용 API를 정확히 한 번 호출하고
Found / NotFound / Errored 결과를 반환합니다.

액션 → API 매핑:
    instance      ec2.describe_instances (filter instance-id)
    ip            ec2.describe_instances (filter private-ip-address)
    public-ip     ec2.describe_instances (filter ip-address)
    ami           ec2.describe_images (ImageIds)
    eb            elasticbeanstalk.describe_applications (ApplicationNames)
    eb-resources  elasticbeanstalk.describe_environment_resources (EnvironmentName)
    eb-env        elasticbeanstalk.describe_environments (EnvironmentNames)

API 에러는 NotFound로 바꾸지 않고 Errored 결과로 반환합니다.
액션 검증은 팬아웃 전에 QueryAction.parse()에서 한 번만 수행합니다.

Example:
    from core.query import QueryAction, QueryRequest, ResourceQueryExecutor

    executor = ResourceQueryExecutor(timeout=5)
    result = executor.execute(account_session, QueryRequest(QueryAction.INSTANCE, "i-123"))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import DEFAULT_TIMEOUT
from core.exceptions import QueryCancelledError, QueryError
from core.parallel.client import get_client
from core.parallel.errors import categorize_error, get_error_code

from .services.beanstalk import query_application, query_environment, query_environment_resources
from .services.ec2 import query_ami, query_instance
from .types import QueryAction, QueryRequest, QueryResult

if TYPE_CHECKING:
    from core.auth.session import AccountSession
    from core.parallel.cancel import CancelToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionSpec:
    """액션 하나의 API 호출 명세

    Attributes:
        service: boto3 서비스 이름
        operation: API 작업 이름 (로깅용)
        query: (client, identifier) -> payload | None
    """

    service: str
    operation: str
    query: Callable[[Any, str], Any]


ACTION_SPECS: dict[QueryAction, ActionSpec] = {
    QueryAction.INSTANCE: ActionSpec("ec2", "describe_instances", partial(query_instance, filter_name="instance-id")),
    QueryAction.IP: ActionSpec("ec2", "describe_instances", partial(query_instance, filter_name="private-ip-address")),
    QueryAction.PUBLIC_IP: ActionSpec("ec2", "describe_instances", partial(query_instance, filter_name="ip-address")),
    QueryAction.AMI: ActionSpec("ec2", "describe_images", query_ami),
    QueryAction.EB: ActionSpec("elasticbeanstalk", "describe_applications", query_application),
    QueryAction.EB_RESOURCES: ActionSpec(
        "elasticbeanstalk", "describe_environment_resources", query_environment_resources
    ),
    QueryAction.EB_ENV: ActionSpec("elasticbeanstalk", "describe_environments", query_environment),
}


class ResourceQueryExecutor:
    """계정 단위 리소스 조회 실행기

    디스패처가 계정마다 하나씩 작업으로 호출합니다.
    인스턴스는 상태가 없으므로 모든 작업이 공유해도 안전합니다.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        logger: logging.Logger | None = None,
        client_factory: Callable[..., Any] = get_client,
    ):
        """초기화

        Args:
            timeout: API 연결/읽기 타임아웃 (초, 보통 전역 타임아웃과 동일)
            logger: 진단 로그용 logger (None이면 모듈 logger)
            client_factory: boto3 client 생성 함수 (테스트에서 교체 가능)
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self._client_factory = client_factory

    def __call__(
        self,
        session: AccountSession,
        request: QueryRequest,
        cancel_token: CancelToken | None = None,
    ) -> QueryResult:
        return self.execute(session, request, cancel_token)

    def execute(
        self,
        session: AccountSession,
        request: QueryRequest,
        cancel_token: CancelToken | None = None,
    ) -> QueryResult:
        """조회 실행 (네트워크 호출 1회, 재시도 없음)

        Args:
            session: 계정 세션
            request: 조회 요청
            cancel_token: 취소 토큰 (취소되면 요청을 전송하지 않음)

        Returns:
            QueryResult (FOUND / NOT_FOUND / ERRORED)
        """
        spec = ACTION_SPECS[request.action]
        account = session.account

        try:
            if cancel_token is not None:
                cancel_token.raise_if_cancelled(spec.service, spec.operation)

            client = self._client_factory(
                session.session,
                spec.service,
                region_name=session.region,
                connect_timeout=self.timeout,
                read_timeout=self.timeout,
                cancel_token=cancel_token,
            )
            payload = spec.query(client, request.identifier)

        except QueryCancelledError as e:
            self.logger.debug("[%s] 조회 취소됨 (%s.%s)", account, spec.service, spec.operation)
            return QueryResult.errored(e, account=account)

        except ClientError as e:
            error = QueryError.from_client_error(spec.service, spec.operation, e)
            self._log_error(account, error, e)
            return QueryResult.errored(error, account=account)

        except BotoCoreError as e:
            error = QueryError(spec.service, spec.operation, error_code=get_error_code(e), error_message=str(e), cause=e)
            self._log_error(account, error, e)
            return QueryResult.errored(error, account=account)

        if payload is None:
            self.logger.debug("[%s] %s '%s' 없음", account, request.action, request.identifier)
            return QueryResult.not_found(account=account)

        self.logger.info("[%s] %s '%s' 발견", account, request.action, request.identifier)
        return QueryResult.found(payload, account=account)

    def _log_error(self, account: str, error: QueryError, cause: Exception) -> None:
        self.logger.warning(
            "[%s] %s (category=%s)",
            account,
            error,
            categorize_error(cause).value,
        )


def execute(
    session: AccountSession,
    request: QueryRequest,
    cancel_token: CancelToken | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> QueryResult:
    """조회 편의 함수

    ResourceQueryExecutor를 간단하게 사용할 수 있는 래퍼입니다.
    """
    return ResourceQueryExecutor(timeout=timeout).execute(session, request, cancel_token)
