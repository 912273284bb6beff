"""
Command Line Interface for wp-env

Example Usage:
    $ wp-env info
    $ wp-env info --json
    $ wp-env get WP_DEBUG --type bool
    $ wp-env --dotenv .env.production check DB_HOST DB_NAME DB_PASSWORD
"""

import json
import sys
from typing import Any, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from .coercion import to_bool, to_float, to_int, to_list
from .config import load_settings
from .constants import MASK
from .environment import Environment
from .errors import ConfigurationError, MissingRequiredKeys
from .logging import init_logging

console = Console()

VALUE_TYPES = ("str", "bool", "int", "float", "array")


@click.group()
@click.option("--settings", "settings_path", type=click.Path(dir_okay=False), help="Settings file")
@click.option("--dotenv", "dotenv_path", type=click.Path(dir_okay=False), help="Path to .env file")
@click.option("--no-dotenv", is_flag=True, help="Don't read a .env file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level",
)
@click.pass_context
def cli(
    ctx: click.Context,
    settings_path: Optional[str],
    dotenv_path: Optional[str],
    no_dotenv: bool,
    log_level: Optional[str],
) -> None:
    """Inspect environment configuration."""
    try:
        settings = load_settings(settings_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    updates: dict = {}
    if dotenv_path:
        updates["dotenv_path"] = dotenv_path
    if no_dotenv:
        updates["dotenv_enabled"] = False
    if log_level:
        updates["log_level"] = log_level.upper()
    settings = settings.model_copy(update=updates)

    init_logging(settings.log_level)
    ctx.obj = Environment.from_settings(settings)


def _format(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    if value is None:
        return "null"
    return str(value)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
@click.pass_obj
def info(env: Environment, as_json: bool) -> None:
    """Show environment debug information."""
    debug_info = env.get_debug_info()

    if as_json:
        click.echo(json.dumps(debug_info, indent=2))
        return

    table = Table(title="Environment", show_header=True, header_style="bold magenta")
    table.add_column("Key", justify="left", style="cyan")
    table.add_column("Value", justify="left")
    for key, value in debug_info.items():
        table.add_row(key, _format(value))
    console.print(table)


@cli.command()
@click.argument("key")
@click.option("--type", "value_type", type=click.Choice(VALUE_TYPES), default="str", help="Value type")
@click.option("--default", "default", default=None, help="Default value")
@click.option("--reveal", is_flag=True, help="Show values of sensitive keys")
@click.pass_obj
def get(env: Environment, key: str, value_type: str, default: Optional[str], reveal: bool) -> None:
    """Resolve a single key."""
    if value_type == "bool":
        value: Any = env.get_bool(key, to_bool(default, False))
    elif value_type == "int":
        value = env.get_int(key, to_int(default, 0))
    elif value_type == "float":
        value = env.get_float(key, to_float(default, 0.0))
    elif value_type == "array":
        value = env.get_array(key, to_list(default))
    else:
        value = env.get(key, default)

    if env.is_sensitive_key(key) and not reveal and value not in (None, ""):
        value = MASK

    click.echo(_format(value))


@cli.command()
@click.argument("keys", nargs=-1, required=True)
@click.pass_obj
def check(env: Environment, keys: Tuple[str, ...]) -> None:
    """Check that required keys are set."""
    try:
        env.validate_required(keys)
    except MissingRequiredKeys as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("All required variables are set")
