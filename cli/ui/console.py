"""
cli/ui/console.py - Rich 콘솔 및 로깅 설정

표준 출력은 JSON 결과 전용이므로, 진단 메시지와 로그는 모두 stderr 콘솔로 보냅니다.
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# 명시적으로 주입하는 진단 logger 이름
LOGGER_NAME = "awsfind"

# 로깅 비활성 레벨 (CRITICAL보다 높음)
SILENT_LEVEL = logging.CRITICAL + 1

# botocore 노이즈 로그 제한
_NOISY_LOGGERS = (
    "botocore",
    "botocore.httpchecksum",
    "botocore.credentials",
    "botocore.loaders",
    "botocore.session",
    "boto3",
    "urllib3",
)


def get_console() -> Console:
    """stderr 출력용 Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=True,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스 (stderr)
console = get_console()


def configure_logging(verbose: bool = False) -> logging.Logger:
    """시작 시 한 번 로깅 레벨과 핸들러를 설정합니다.

    Args:
        verbose: True면 DEBUG 로그를 stderr로 출력, False면 진단 로그를 모두 버림

    Returns:
        logging.Logger: 디스패처/조회 실행기에 주입할 logger
    """
    root = logging.getLogger()

    # 이전 호출에서 추가한 핸들러 제거 (CLI를 여러 번 호출하는 테스트 대비)
    for handler in list(root.handlers):
        if getattr(handler, "_awsfind", False):
            root.removeHandler(handler)

    if verbose:
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        handler._awsfind = True  # type: ignore[attr-defined]
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
        noisy_level = logging.WARNING
    else:
        root.setLevel(SILENT_LEVEL)
        noisy_level = SILENT_LEVEL

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    return logging.getLogger(LOGGER_NAME)


# =============================================================================
# 표준 출력 스타일 (stderr)
# =============================================================================

SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)

    Args:
        message: 출력할 메시지
    """
    console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]", markup=True, highlight=False)


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고)"""
    console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]", markup=True, highlight=False)
