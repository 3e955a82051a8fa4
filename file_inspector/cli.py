"""Command-line interface for file inspector."""

import logging
import sys
import click
from click.core import ParameterSource
from typing import Optional

from .core.errors import InspectError
from .core.inspector import MetadataInspector
from .config.config_manager import ConfigManager
from .utils.formatters import format_report, format_report_json


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration.

    Console logging goes to stderr so stdout only carries the report.
    """
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _pick(ctx, name: str, config_value):
    """Return an option's value when given on the command line, else the config value."""
    if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE:
        return ctx.params[name]
    return config_value


@click.command()
@click.argument('path', required=False)
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--units', '-u', type=click.Choice(['long', 'short']), default='long',
              help='Size units: long (gigabytes/megabytes/bytes) or short (GB/MB/KB/bytes)')
@click.option('--name/--no-name', 'show_name', default=True,
              help='Show the Name line')
@click.option('--symlink/--no-symlink', 'show_symlink', default=True,
              help='Show the Is a symlink line')
@click.option('--follow-symlinks/--no-follow-symlinks', default=False,
              help='Report the link target instead of the link itself')
@click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.option('--platform-attributes/--no-platform-attributes', default=False,
              help='Show Windows file attributes when available')
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, path: Optional[str], config_path: Optional[str], units: str,
        show_name: bool, show_symlink: bool, follow_symlinks: bool, output: str,
        platform_attributes: bool, log_level: str, log_file: Optional[str]):
    """File Inspector - Show size, type and modification time of PATH.

    Options given on the command line override values from --config.
    """
    if path is None:
        click.echo(ctx.get_usage(), err=True)
        sys.exit(1)

    try:
        config_manager = ConfigManager(config_path)
        config_manager.load_config()
        display = config_manager.get_display_config()
        logging_config = config_manager.get_logging_config()

        setup_logging(_pick(ctx, 'log_level', logging_config['level']),
                      _pick(ctx, 'log_file', logging_config['file']))

        inspector = MetadataInspector(
            follow_symlinks=_pick(ctx, 'follow_symlinks', display['follow_symlinks'])
        )
        report = inspector.inspect(path)

        options = {
            'units': _pick(ctx, 'units', display['units']),
            'show_name': _pick(ctx, 'show_name', display['show_name']),
            'show_symlink': _pick(ctx, 'show_symlink', display['show_symlink']),
            'show_platform': _pick(ctx, 'platform_attributes', display['platform_attributes'])
        }

        if _pick(ctx, 'output', display['output']) == 'json':
            click.echo(format_report_json(report, **options))
        else:
            click.echo(format_report(report, **options))

    except (InspectError, OSError, ValueError) as e:
        logging.getLogger(__name__).debug(f"Inspection of {path} failed", exc_info=True)
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
