"""
core/query/services/beanstalk.py - Elastic Beanstalk 애플리케이션/환경 조회
"""

from __future__ import annotations

from typing import Any

from .helpers import strip_metadata


def query_application(eb: Any, name: str) -> dict[str, Any] | None:
    """애플리케이션 이름으로 조회"""
    response = eb.describe_applications(ApplicationNames=[name])
    if response.get("Applications"):
        return strip_metadata(response)
    return None


def query_environment_resources(eb: Any, environment_name: str) -> dict[str, Any] | None:
    """환경 이름으로 환경 리소스 세트 조회"""
    response = eb.describe_environment_resources(EnvironmentName=environment_name)
    if response.get("EnvironmentResources"):
        return strip_metadata(response)
    return None


def query_environment(eb: Any, environment_name: str) -> dict[str, Any] | None:
    """환경 이름으로 조회"""
    response = eb.describe_environments(EnvironmentNames=[environment_name])
    if response.get("Environments"):
        return strip_metadata(response)
    return None
