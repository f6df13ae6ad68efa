"""
core/query - 리소스 조회

주요 구성 요소:
- QueryAction / QueryRequest / QueryResult: 조회 타입
- ResourceQueryExecutor: 계정 세션 하나에 대한 조회 실행기
"""

from .executor import ACTION_SPECS, ResourceQueryExecutor, execute
from .types import QueryAction, QueryRequest, QueryResult, QueryStatus

__all__: list[str] = [
    "QueryAction",
    "QueryRequest",
    "QueryResult",
    "QueryStatus",
    "ResourceQueryExecutor",
    "ACTION_SPECS",
    "execute",
]
