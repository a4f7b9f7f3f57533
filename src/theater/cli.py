import json
import logging
import sys

import click

from . import __version__ as VERSION
from .config import LOG_LEVELS, refresh_config
from .errors import CustomerNotFoundError, TheaterError
from .loader import load_invoices, load_plays
from .statement import build_statement_data, format_statement

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--version", is_flag=True, help="Show the version and exit.")
@click.option("--log-level", type=click.Choice(list(LOG_LEVELS), case_sensitive=False), help="Override the configured log level.")
def main(ctx, version, log_level):
    """Theater invoice statements CLI"""
    if version:
        click.echo(f"theater version {VERSION}")
        ctx.exit()

    try:
        config = refresh_config()
    except TheaterError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category)
    ctx.obj = {"config": config}
    logging.basicConfig(level=(log_level or config.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _emit_structured_error(message: str, *, code: str, category: str, as_json: bool = False, exit_code: int = 2):
    payload = {
        "ok": False,
        "error": {
            "code": code,
            "category": category,
            "message": message,
        },
    }
    if as_json:
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        prefix = "theater internal error" if code == "INTERNAL" else "theater error"
        click.echo(f"{prefix} [{category}:{code}]: {message}", err=True)
    sys.exit(exit_code)


@main.command()
@click.argument("invoices_path", metavar="INVOICES", type=click.Path(dir_okay=False))
@click.argument("plays_path", metavar="PLAYS", type=click.Path(dir_okay=False))
@click.option("--customer", help="Only print the statement for this customer")
@click.option("--json", "json_output", is_flag=True, help="Emit machine-readable statement data")
@click.pass_context
def statement(ctx, invoices_path, plays_path, customer, json_output):
    """Print the statement for every invoice in INVOICES."""
    rates = ctx.obj["config"].rates
    try:
        plays = load_plays(plays_path)
        invoices = load_invoices(invoices_path)
        if customer is not None:
            invoices = [invoice for invoice in invoices if invoice.customer == customer]
            if not invoices:
                raise CustomerNotFoundError(customer)

        statements = [build_statement_data(invoice, plays, rates) for invoice in invoices]
    except TheaterError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category, as_json=json_output)
    except Exception as exc:
        logger.exception("Unhandled statement error")
        _emit_structured_error(str(exc), code="INTERNAL", category="SYSTEM", as_json=json_output)

    if json_output:
        click.echo(json.dumps([data.as_dict() for data in statements], indent=2))
        return
    for data in statements:
        click.echo(format_statement(data, line_separator="\n"), nl=False)


@main.command()
@click.option("--json", "json_output", is_flag=True, help="Emit the rate table as JSON")
@click.pass_context
def rates(ctx, json_output):
    """Show the active pricing and credit rates."""
    table = ctx.obj["config"].rates.as_dict()
    if json_output:
        click.echo(json.dumps(table, indent=2))
        return
    width = max(len(name) for name in table)
    for name, value in table.items():
        click.echo(f"{name.ljust(width)}  {value}")


if __name__ == "__main__":
    main()
