"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from launchi3 import __version__

from .commands import config_group, midi_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".launchi3" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "launchi3-debug.log"
    return DEFAULT_LOG_DIR / "launchi3.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with a custom log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


def report_error(error: Exception, log_path: Path) -> None:
    """Print a framed error message to stderr."""
    from launchi3.exceptions import format_error_for_display

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    click.echo(f"\nFor details, check the log file: {log_path}", err=True)
    click.echo("For logging options, run: launchi3 --help", err=True)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="launchi3")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.launchi3/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./launchi3-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    launchi3 - show i3 workspaces and windows on a Novation Launchpad.

    Each column of the grid is a workspace and each lit pad a window,
    colored by window class. Press a lit pad to focus its window, or an
    unlit pad in a used column to switch to that workspace.

    \b
    Examples:
      # Run with ~/.launchi3/config.json (or defaults)
      launchi3

      # Use another config file
      launchi3 --config ./launchi3.json

      # Enable debug logging
      launchi3 --debug

      # List MIDI devices
      launchi3 midi list
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        return

    from launchi3.core import ControlLoop
    from launchi3.devices import LaunchpadDevice
    from launchi3.exceptions import ErrorContext
    from launchi3.models import AppConfig
    from launchi3.wm import I3Connection

    setup_logging(verbose, debug, log_file, log_level)
    log_path = resolve_log_path(debug, log_file)

    logger.info("Starting launchi3")

    try:
        with ErrorContext("load configuration", logger):
            app_config = AppConfig.load_or_default(config_path)

        with ErrorContext("connect to i3", logger):
            manager = I3Connection.connect()

        with ErrorContext("connect to Launchpad", logger):
            device = LaunchpadDevice.autodetect()

        with device:
            click.echo(f"Connected to {device.display_name}. Press Ctrl+C to quit.", err=True)
            ControlLoop(manager, device, app_config).run()

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running launchi3")
        report_error(e, log_path)
        sys.exit(1)


cli.add_command(config_group)
cli.add_command(midi_group)

if __name__ == "__main__":
    cli()
