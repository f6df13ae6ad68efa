"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI options, help text, and argument errors.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "등록된 모든 AWS 계정에서 리소스를 동시에 찾아,\n가장 먼저 일치한 레코드를 JSON으로 출력합니다.",
        "en": "Searches every configured AWS account concurrently and\nprints the first matching record as JSON.",
    },
    "help_region": {
        "ko": "조회할 AWS 리전 (기본: AWS_REGION / AWS_DEFAULT_REGION)",
        "en": "AWS region to query (default: AWS_REGION / AWS_DEFAULT_REGION)",
    },
    "help_id": {
        "ko": "찾을 리소스 식별자 (인스턴스 ID, IP, AMI ID, Beanstalk 이름)",
        "en": "Resource identifier to find (instance ID, IP, AMI ID, Beanstalk name)",
    },
    "help_action": {
        "ko": "조회 액션: {actions}",
        "en": "Query action: {actions}",
    },
    "help_verbose": {
        "ko": "진단 로그를 stderr로 출력",
        "en": "Print diagnostic logs to stderr",
    },
    "help_timeout": {
        "ko": "전역 타임아웃 (예: 500ms, 5s, 1m30s, 2.5). "
        "모든 계정이 찾지 못함/에러로 응답하면 타임아웃 전에 바로 종료합니다",
        "en": "Global timeout (e.g. 500ms, 5s, 1m30s, 2.5). "
        "Exits early once every account has answered without a match",
    },
    "help_encrypted_store": {
        "ko": "공유 자격 증명 파일 대신 암호화 저장소 사용",
        "en": "Use the encrypted credential store instead of the shared credentials file",
    },
    "help_lang": {
        "ko": "메시지 언어 (ko, en)",
        "en": "Message language (ko, en)",
    },
    # =========================================================================
    # Argument Errors
    # =========================================================================
    "region_required": {
        "ko": "리전이 필요합니다. --region 옵션이나 AWS_REGION 환경 변수를 지정하세요.",
        "en": "A region is required. Pass --region or set AWS_REGION.",
    },
    "id_required": {
        "ko": "리소스 식별자가 필요합니다. --id 옵션을 지정하세요.",
        "en": "A resource identifier is required. Pass --id.",
    },
    "invalid_option": {
        "ko": "잘못된 옵션: {message}",
        "en": "Invalid option: {message}",
    },
}
