"""Command line interface.

Commands:
- format LINE...   print the Beancount entry for a shorthand line
- accounts         list configured tags and the default currency
- check-config     validate the account configuration
- version

The account table comes from ``--config PATH`` or, when omitted, from the
CONFIG / ACCOUNTS_FILE settings. Logs go to stderr so stdout carries only the
command output. Exit codes are handled in ``cli``: success=0,
ParseError/ConfigError/ValueError=2, unexpected=1.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

from typer import Argument, Option, Typer

from beancount_shorthand import __version__
from beancount_shorthand.application.builder import parse_date
from beancount_shorthand.application.pipeline import parse_and_format
from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.domain.errors import DomainError
from beancount_shorthand.infrastructure.clock import SystemClock
from beancount_shorthand.infrastructure.config.accounts import (
    load_account_map_from_file,
    load_account_map_from_settings,
)
from beancount_shorthand.infrastructure.config.settings import get_settings
from beancount_shorthand.infrastructure.logging.config import configure_logging, get_logger

app: Typer = Typer(
    help="Convert shorthand transactions into Beancount entries.",
    add_completion=False,
    pretty_exceptions_enable=False,
)

log = get_logger("beancount_shorthand.cli")

_CONFIG_HELP = "TOML account configuration file (defaults to CONFIG / ACCOUNTS_FILE settings)."


def _load_accounts(config: Path | None) -> AccountMap:
    if config is not None:
        return load_account_map_from_file(config)
    return load_account_map_from_settings(get_settings())


@app.callback()
def _setup() -> None:
    configure_logging(stream=sys.stderr)


@app.command("format")
def format_cmd(
    line: list[str] = Argument(..., help="Shorthand line; quote '>' or pass it as one argument."),
    config: Path | None = Option(None, "--config", "-c", help=_CONFIG_HELP),
    on: str | None = Option(None, "--date", help="Date for lines typed without one (YYYY-MM-DD)."),
    json_output: bool = Option(False, "--json", help="Output JSON object {entry}."),
) -> None:
    """Print the Beancount entry for LINE.

    Errors:
        ParseError for invalid input; ConfigError for a bad account table.
    """
    accounts = _load_accounts(config)
    today = parse_date(on) if on else SystemClock(get_settings().timezone).today()
    entry = parse_and_format(" ".join(line), accounts, today=today)
    if json_output:
        print(json.dumps({"entry": entry}, ensure_ascii=False))
        return
    sys.stdout.write(entry)


@app.command("accounts")
def accounts_cmd(
    config: Path | None = Option(None, "--config", "-c", help=_CONFIG_HELP),
    json_output: bool = Option(False, "--json", help="Output JSON object {currency, accounts}."),
) -> None:
    """List tags with their accounts, sorted by tag."""
    accounts = _load_accounts(config)
    if json_output:
        payload = {"currency": accounts.default_currency(), "accounts": dict(accounts)}
        print(json.dumps(payload, ensure_ascii=False))
        return
    print(f"currency {accounts.default_currency()}")
    width = max((len(tag) for tag, _ in accounts), default=0)
    for tag, account in accounts:
        print(f"{tag.ljust(width)}  {account}")


@app.command("check-config")
def check_config_cmd(
    config: Path | None = Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Validate the account configuration and print 'ok'."""
    _load_accounts(config)
    print("ok")


@app.command("version")
def version_cmd() -> None:
    """Print package version."""
    print(__version__)


def cli(argv: list[str] | None = None) -> int:
    """Run the Typer application with top-level error handling.

    Accepts optional argv for programmatic testing and returns a
    process-style exit code.
    """
    try:
        app(args=argv if argv is not None else sys.argv[1:], prog_name="beancount-shorthand")
        return 0
    except DomainError as de:
        print(f"[ERROR] {de}", file=sys.stderr)
        return 2
    except ValueError as ve:  # settings validation (e.g. unknown TIMEZONE)
        print(f"[ERROR] {ve}", file=sys.stderr)
        return 2
    except SystemExit as se:
        return int(se.code) if isinstance(se.code, int) else 0
    except Exception as exc:
        log.exception("cli_unexpected_error")
        print(f"[ERROR] unexpected: {exc}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    return cli(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(cli())
