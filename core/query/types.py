"""
core/query/types.py - 리소스 조회 타입

주요 구성 요소:
- QueryAction: 조회 액션 (instance, ip, public-ip, ami, eb, eb-resources, eb-env)
- QueryRequest: 모든 계정에 공유되는 불변 조회 요청
- QueryStatus / QueryResult: Found / NotFound / Errored 3-way 결과
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.exceptions import UnknownActionError


class QueryAction(str, Enum):
    """조회 액션

    각 액션은 읽기 전용 AWS API 호출 하나에 대응합니다.
    """

    INSTANCE = "instance"  # 인스턴스 ID
    IP = "ip"  # 프라이빗 IP
    PUBLIC_IP = "public-ip"  # 퍼블릭 IP
    AMI = "ami"  # 이미지 ID
    EB = "eb"  # Beanstalk 애플리케이션 이름
    EB_RESOURCES = "eb-resources"  # Beanstalk 환경 리소스 (환경 이름)
    EB_ENV = "eb-env"  # Beanstalk 환경 이름

    def __str__(self) -> str:
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        return [action.value for action in cls]

    @classmethod
    def parse(cls, name: str) -> QueryAction:
        """액션 이름 파싱 (대소문자 무시)

        Raises:
            UnknownActionError: 지원하지 않는 액션인 경우
        """
        normalized = (name or "").strip().lower()
        for action in cls:
            if action.value == normalized:
                return action
        raise UnknownActionError(name, cls.names())


@dataclass(frozen=True)
class QueryRequest:
    """조회 요청 (모든 작업이 읽기 전용으로 공유)

    Attributes:
        action: 조회 액션
        identifier: 찾을 리소스 식별자
    """

    action: QueryAction
    identifier: str


class QueryStatus(Enum):
    """조회 결과 상태"""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERRORED = "errored"


@dataclass(frozen=True)
class QueryResult:
    """계정 하나의 조회 결과

    Attributes:
        status: FOUND / NOT_FOUND / ERRORED
        account: 조회한 계정 식별자
        payload: FOUND일 때 찾은 레코드
        error: ERRORED일 때 원인 예외
    """

    status: QueryStatus
    account: str = ""
    payload: Any = None
    error: BaseException | None = None

    @classmethod
    def found(cls, payload: Any, account: str = "") -> QueryResult:
        return cls(QueryStatus.FOUND, account=account, payload=payload)

    @classmethod
    def not_found(cls, account: str = "") -> QueryResult:
        return cls(QueryStatus.NOT_FOUND, account=account)

    @classmethod
    def errored(cls, error: BaseException, account: str = "") -> QueryResult:
        return cls(QueryStatus.ERRORED, account=account, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is QueryStatus.FOUND

    @property
    def is_errored(self) -> bool:
        return self.status is QueryStatus.ERRORED
