"""
cli/i18n/messages/find.py - Resource Find Messages

Contains translations for the final diagnostic line printed on failure.
"""

from __future__ import annotations

FIND_MESSAGES = {
    "unknown_action": {
        "ko": "지원하지 않는 액션입니다: {action} (사용 가능: {actions})",
        "en": "Unknown action: {action} (valid: {actions})",
    },
    "credentials_failed": {
        "ko": "자격 증명을 읽지 못했습니다: {message}",
        "en": "Failed to load credentials: {message}",
    },
    "no_accounts": {
        "ko": "설정된 계정이 없습니다.",
        "en": "No accounts are configured.",
    },
    "timed_out": {
        "ko": "{timeout}초 내에 결과를 찾지 못했습니다.",
        "en": "No result within {timeout}s.",
    },
    "not_found": {
        "ko": "{accounts}개 계정 어디에서도 '{identifier}'를 찾지 못했습니다. (에러 {errors}개)",
        "en": "'{identifier}' was not found in any of {accounts} accounts ({errors} errors).",
    },
    "output_failed": {
        "ko": "결과를 출력하지 못했습니다.",
        "en": "Failed to write the result.",
    },
    "interrupted": {
        "ko": "취소됨",
        "en": "Cancelled",
    },
}
