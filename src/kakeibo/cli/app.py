from __future__ import annotations

"""
Kakeibo CLI Wrapper (Typer + Rich)

Local-only household ledger: record income and expenses and report
monthly and overall balances.

All paths are resolved from a single workspace root:
  --data-dir / KAKEIBO_DATA env var / current working directory
The ledger lives in <root>/store/, which must be created by the user.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from kakeibo.config import DATA_DIR_ENV
from kakeibo.errors import SettingsError
from kakeibo.log import setup_logging
from kakeibo.model.settings import Settings
from kakeibo.model.settings_io import load_settings
from kakeibo.workspace import Workspace

logger = logging.getLogger(__name__)

APP_HELP = "Kakeibo household ledger (local-only). Run without a command for the interactive menu."
HELP_YEAR = "Year to filter"
HELP_MONTH = "Month to filter (1-12, requires --year)"

app = typer.Typer(add_completion=False, help=APP_HELP)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=DATA_DIR_ENV,
        help="Workspace root directory containing store/ (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Kakeibo CLI — all paths resolved from a single workspace root."""
    setup_logging(verbose=verbose)

    ws = Workspace.resolve(data_dir)
    try:
        settings = load_settings(ws.settings_path)
    except SettingsError as e:
        from kakeibo.cli.command.util import print_error

        print_error(e)
        raise typer.Exit(code=1)

    ws = replace(ws, data_file=settings.data_file)
    logger.debug("Using ledger %s", ws.data_path)

    ctx.ensure_object(dict)
    ctx.obj["workspace"] = ws
    ctx.obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        from kakeibo.cli.command import menu as cmd_menu

        code = cmd_menu.run(workspace=ws, settings=settings)
        raise typer.Exit(code=code)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


@app.command()
def menu(ctx: typer.Context):
    """Interactive menu: register, summarize or show the balance until you quit.

    Examples:
      kakeibo
      kakeibo menu
    """
    from kakeibo.cli.command import menu as cmd_menu

    code = cmd_menu.run(workspace=_ws(ctx), settings=_settings(ctx))
    raise typer.Exit(code=code)


@app.command()
def register(
    ctx: typer.Context,
    register_type: Optional[str] = typer.Option(None, "--type", "-t", help="income/expense (or 0/1)"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Item name"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category name or number (income: Salary/Bonus/Other, expense: Food/Hobby/Other)"),
    price: Optional[str] = typer.Option(None, "--price", "-p", help="Amount as a whole non-negative number"),
    when: Optional[str] = typer.Option(None, "--date", "-d", help="Date as YYYY-MM-DD"),
    memo: Optional[str] = typer.Option(None, "--memo", "-m", help="Optional memo"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate and preview without saving"),
):
    """Record an income or expense item.

    Any field not given as an option is asked for interactively.

    Examples:
      kakeibo register
      kakeibo register --type expense --name Lunch --category Food --price 1200 --date 2024-05-01
      kakeibo register -t income -n Salary -c 0 -p 300000
    """
    from kakeibo.cli.command import register as cmd_register

    code = cmd_register.run(
        workspace=_ws(ctx),
        settings=_settings(ctx),
        register_type=register_type,
        name=name,
        category=category,
        price=price,
        when=when,
        memo=memo,
        dry_run=dry_run,
    )
    raise typer.Exit(code=code)


@app.command()
def summarize(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help=HELP_YEAR),
):
    """Show the net balance of each month that has entries.

    Examples:
      kakeibo summarize
      kakeibo summarize --year 2024
    """
    from kakeibo.cli.command import summarize as cmd_summarize

    code = cmd_summarize.run(workspace=_ws(ctx), settings=_settings(ctx), year=year)
    raise typer.Exit(code=code)


@app.command()
def balance(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help=HELP_YEAR),
    month: Optional[int] = typer.Option(None, "--month", "-m", help=HELP_MONTH),
    by_category: bool = typer.Option(False, "--by-category", help="Add a per-category breakdown"),
):
    """Show income, expense and net totals.

    Examples:
      kakeibo balance
      kakeibo balance --year 2024 --month 5 --by-category
    """
    from kakeibo.cli.command import balance as cmd_balance

    code = cmd_balance.run(
        workspace=_ws(ctx),
        settings=_settings(ctx),
        year=year,
        month=month,
        by_category=by_category,
    )
    raise typer.Exit(code=code)


@app.command(name="list")
def list_entries(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help=HELP_YEAR),
    month: Optional[int] = typer.Option(None, "--month", "-m", help=HELP_MONTH),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max number of rows to show"),
):
    """List recorded items sorted by date.

    Examples:
      kakeibo list
      kakeibo list --year 2024 --month 5 --limit 20
    """
    from kakeibo.cli.command import entries as cmd_entries

    code = cmd_entries.run(
        workspace=_ws(ctx),
        settings=_settings(ctx),
        year=year,
        month=month,
        limit=limit,
    )
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
