"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
인자를 검증한 뒤 cli.finder의 실행기로 넘깁니다.

명령어 구조:
    awsfind --region ap-northeast-2 --id i-0123456789abcdef0
    awsfind -r us-east-1 --id 10.0.1.23 --action ip
    awsfind -r us-east-1 --id ami-0abc --action ami --timeout 2s --verbose
    awsfind -r us-east-1 --id my-env --action eb-env --encrypted-store
    awsfind --version

종료 코드:
    0: 결과를 표준 출력에 JSON으로 출력
    1: 잘못된 인자, 지원하지 않는 액션, 자격 증명 실패, 타임아웃, 찾지 못함

Usage:
    # 명령줄에서 직접 실행
    $ awsfind --region ap-northeast-2 --id i-0123456789abcdef0

    # 모듈로 실행
    $ python -m cli.app
"""

from __future__ import annotations

from typing import Any, NoReturn

import click
from click import Context

from cli.i18n import DEFAULT_LANG, SUPPORTED_LANGS, set_lang, t
from cli.ui.console import configure_logging, print_error
from core.config import DEFAULT_TIMEOUT, get_version, parse_duration
from core.exceptions import InvalidDurationError, UnknownActionError
from core.query import QueryAction, QueryRequest

VERSION = get_version()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class DurationParamType(click.ParamType):
    """타임아웃 옵션 타입 ("500ms", "5s", "1m30s", "2.5")"""

    name = "duration"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            if value <= 0:
                self.fail(f"'{value}': 0보다 커야 합니다", param, ctx)
            return float(value)
        try:
            return parse_duration(value)
        except InvalidDurationError as e:
            self.fail(e.message, param, ctx)


DURATION = DurationParamType()


class FindCommand(click.Command):
    """인자 오류도 exit code 1로 종료하는 Click 명령어

    Click 기본값(2) 대신 다른 실패와 같은 1을 사용합니다.
    """

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        # --lang 처리 전에 출력되는 메시지는 기본 언어
        set_lang(DEFAULT_LANG)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def format_help_text(self, ctx: Context, formatter: click.HelpFormatter) -> None:
        self.help = t("cli.help_intro")
        super().format_help_text(ctx, formatter)


class I18nOption(click.Option):
    """도움말을 출력 시점의 언어로 번역하는 옵션

    --help가 처리될 때 t(help_key)를 호출하므로 `--lang en --help`는 영어로 표시됩니다.
    """

    def __init__(self, *args: Any, help_key: str | None = None, help_kwargs: dict | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.help_key = help_key
        self.help_kwargs = help_kwargs or {}

    def get_help_record(self, ctx: Context) -> tuple[str, str] | None:
        if self.help_key:
            self.help = t(self.help_key, **self.help_kwargs)
        return super().get_help_record(ctx)


def _apply_lang(ctx: Context, param: click.Parameter, value: str) -> str:
    # eager 옵션: 같은 명령줄의 --help보다 먼저 적용
    set_lang(value)
    return value


def _fail(message: str) -> NoReturn:
    print_error(message)
    raise SystemExit(1)


@click.command(name="awsfind", cls=FindCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=VERSION, prog_name="awsfind")
@click.option(
    "-r",
    "--region",
    cls=I18nOption,
    envvar=["AWS_REGION", "AWS_DEFAULT_REGION"],
    default=None,
    help_key="cli.help_region",
)
@click.option("--id", "identifier", cls=I18nOption, default=None, help_key="cli.help_id")
@click.option(
    "--action",
    cls=I18nOption,
    default=QueryAction.INSTANCE.value,
    show_default=True,
    help_key="cli.help_action",
    help_kwargs={"actions": ", ".join(QueryAction.names())},
)
@click.option("-v", "--verbose", cls=I18nOption, is_flag=True, help_key="cli.help_verbose")
@click.option(
    "--timeout",
    cls=I18nOption,
    type=DURATION,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help_key="cli.help_timeout",
)
@click.option(
    "--encrypted-store",
    "encrypted_store",
    cls=I18nOption,
    is_flag=True,
    help_key="cli.help_encrypted_store",
)
@click.option(
    "--lang",
    cls=I18nOption,
    type=click.Choice(SUPPORTED_LANGS),
    default=DEFAULT_LANG,
    show_default=True,
    is_eager=True,
    callback=_apply_lang,
    help_key="cli.help_lang",
)
def cli(
    region: str | None,
    identifier: str | None,
    action: str,
    verbose: bool,
    timeout: float,
    encrypted_store: bool,
    lang: str,
) -> None:
    """등록된 모든 AWS 계정에서 리소스를 찾습니다."""
    logger = configure_logging(verbose)

    # 필수 인자 검증
    if not region:
        _fail(t("cli.region_required"))
    if not identifier or not identifier.strip():
        _fail(t("cli.id_required"))

    # 액션은 자격 증명을 읽기 전에 한 번만 검증
    try:
        query_action = QueryAction.parse(action)
    except UnknownActionError:
        _fail(t("find.unknown_action", action=action, actions=", ".join(QueryAction.names())))

    from cli.finder import run_find

    exit_code = run_find(
        region=region,
        request=QueryRequest(query_action, identifier.strip()),
        timeout=timeout,
        use_encrypted_store=encrypted_store,
        logger=logger,
    )
    raise SystemExit(exit_code)


if __name__ == "__main__":
    cli()
