"""
tests/core/parallel/test_parallel_client.py - get_client / 취소 훅 테스트
"""

from unittest.mock import MagicMock

import boto3
import pytest

from core.exceptions import QueryCancelledError
from core.parallel.cancel import CancelToken
from core.parallel.client import attach_cancel_token, get_client


@pytest.fixture
def session():
    return boto3.Session(aws_access_key_id="testing", aws_secret_access_key="testing", region_name="ap-northeast-2")


class TestGetClient:
    """get_client 테스트"""

    def test_no_retries_by_default(self, session):
        """재시도 없음 (총 시도 1회)"""
        client = get_client(session, "ec2", region_name="us-east-1")

        assert client.meta.region_name == "us-east-1"
        assert client.meta.config.retries["total_max_attempts"] == 1
        assert client.meta.config.retries["mode"] == "standard"

    def test_timeouts(self, session):
        """연결/읽기 타임아웃 적용"""
        client = get_client(session, "elasticbeanstalk", connect_timeout=2.5, read_timeout=2.5)

        assert client.meta.config.connect_timeout == 2.5
        assert client.meta.config.read_timeout == 2.5

    def test_merge_existing_config(self, session):
        """기존 config 병합"""
        from botocore.config import Config

        client = get_client(session, "ec2", config=Config(user_agent_extra="awsfind-test"))

        assert client.meta.config.user_agent_extra == "awsfind-test"
        assert client.meta.config.retries["total_max_attempts"] == 1

    def test_session_client_called(self):
        """session.client에 서비스명/리전 전달"""
        mock_session = MagicMock()

        get_client(mock_session, "ec2", region_name="eu-west-1")

        args, kwargs = mock_session.client.call_args
        assert args[0] == "ec2"
        assert kwargs["region_name"] == "eu-west-1"
        assert "config" in kwargs


class TestCancelHook:
    """before-send 취소 훅 테스트"""

    def test_cancelled_request_is_not_sent(self, session):
        """취소된 토큰이면 요청 전송 직전에 중단"""
        token = CancelToken()
        client = get_client(session, "ec2", cancel_token=token)
        token.cancel()

        with pytest.raises(QueryCancelledError) as exc_info:
            client.describe_instances()

        assert exc_info.value.service == "ec2"
        assert exc_info.value.operation == "DescribeInstances"

    def test_hook_passes_when_not_cancelled(self, session):
        """취소되지 않았으면 훅은 아무것도 하지 않음"""
        client = get_client(session, "ec2", cancel_token=CancelToken())

        responses = client.meta.events.emit("before-send.ec2.DescribeInstances", request=None)

        assert all(response is None for _, response in responses)

    def test_attach_once_per_token(self, session):
        """같은 토큰을 여러 번 붙여도 훅은 하나"""
        token = CancelToken()
        client = session.client("ec2")
        attach_cancel_token(client, token)
        attach_cancel_token(client, token)
        token.cancel()

        with pytest.raises(QueryCancelledError):
            client.meta.events.emit("before-send.ec2.DescribeInstances", request=None)

    def test_cancel_with_moto(self, moto_session):
        """moto 위에서도 취소 후 호출은 중단"""
        token = CancelToken()
        client = get_client(moto_session.session, "ec2", cancel_token=token)

        assert client.describe_instances()["Reservations"] == []

        token.cancel()
        with pytest.raises(QueryCancelledError):
            client.describe_instances()
