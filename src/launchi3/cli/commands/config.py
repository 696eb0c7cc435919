"""
Config command implementations.

Commands:
    - config show          # Display the effective configuration
    - config init          # Write the defaults to the config file
    - config validate      # Validate the config file
"""

import json
import sys

import click

from launchi3.models import AppConfig
from launchi3.models.config import DEFAULT_CONFIG_PATH
from launchi3.utils import PydanticPersistence


def _config_path(ctx: click.Context):
    return ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH


@click.group(name="config")
def config_group():
    """Inspect and create the configuration file."""
    pass


@config_group.command(name="show")
@click.pass_context
def show(ctx):
    """Display the configuration launchi3 would run with."""
    from launchi3.exceptions import Launchi3Error

    path = _config_path(ctx)
    try:
        app_config = AppConfig.load_or_default(path)
    except Launchi3Error as e:
        click.echo(f"Error: {e.user_message}", err=True)
        sys.exit(1)

    source = path if path.exists() else "defaults"
    click.echo(f"Configuration ({source}):\n")
    click.echo(json.dumps(app_config.model_dump(mode="json"), indent=2))


@config_group.command(name="init")
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
@click.pass_context
def init(ctx, force: bool):
    """Write the default configuration to the config file."""
    path = _config_path(ctx)
    if path.exists() and not force:
        click.echo(f"Config file already exists: {path} (use --force to overwrite)", err=True)
        sys.exit(1)

    AppConfig().save(path)
    click.echo(f"Wrote default configuration to {path}")


@config_group.command(name="validate")
@click.pass_context
def validate(ctx):
    """Validate the config file."""
    path = _config_path(ctx)
    if not path.exists():
        click.echo(f"No config file at {path}; defaults will be used.")
        return

    is_valid, error = PydanticPersistence.validate_json(path, AppConfig)
    if is_valid:
        click.echo(f"✓ {path} is valid")
    else:
        click.echo(f"✗ {path} is invalid:\n{error}", err=True)
        sys.exit(1)
