# cli/ui - 콘솔 출력 (rich)
"""
콘솔 출력 모듈

stderr 전용 Rich 콘솔과 로깅 설정
"""

from .console import (
    LOGGER_NAME,
    SYMBOL_ERROR,
    SYMBOL_WARNING,
    configure_logging,
    console,
    get_console,
    print_error,
    print_warning,
)

__all__ = [
    "LOGGER_NAME",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "configure_logging",
    "console",
    "get_console",
    "print_error",
    "print_warning",
]
