# core/__init__.py
"""
core - awsfind 인프라

여러 AWS 계정에서 리소스를 찾는 데 필요한 기반 모듈을 모은 최상위 패키지입니다.

아키텍처:
    core/
    ├── auth/           # 자격 증명 소스 (공유 파일, 암호화 저장소) + 세션
    ├── query/          # 액션별 조회 실행기 (EC2, Elastic Beanstalk)
    ├── parallel/       # 팬아웃 디스패처, 취소 토큰, client 팩토리
    ├── output.py       # 결과 JSON 직렬화
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import get_settings, parse_duration
    timeout = parse_duration("1m30s")  # 90.0

    # 예외 처리
    from core.exceptions import FinderError
    try:
        outcome.raise_for_state()
    except FinderError as e:
        print(e.to_dict())

    # 자격 증명 + 세션
    from core.auth import build_sessions, create_credential_source
    sessions = build_sessions("ap-northeast-2", create_credential_source().list_accounts())

    # 팬아웃 조회
    from core.parallel import dispatch_first
    from core.query import QueryAction, QueryRequest
    outcome = dispatch_first(sessions, QueryRequest(QueryAction.INSTANCE, "i-0123"), timeout=5)
"""

from core import auth, config, exceptions, output, parallel, query

__all__: list[str] = [
    # 서브패키지
    "auth",
    "parallel",
    "query",
    # 모듈
    "config",
    "exceptions",
    "output",
]
