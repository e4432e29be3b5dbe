"""oho CLI entrypoint."""

from __future__ import annotations

import click

from oho import __version__
from oho.cli_commands._output import err_console
from oho.config import ConfigError, Settings, load_settings
from oho.utils.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="oho")
@click.option("--host", default=None, help="Server host address.")
@click.option("--port", "-p", type=int, default=None, help="Server port.")
@click.option("--password", default=None, help="Server password (overrides the environment).")
@click.option("--json", "-j", "json_output", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    password: str | None,
    json_output: bool,
    verbose: bool,
) -> None:
    """oho — command-line client for the OpenCode Server."""
    setup_logging(verbose=verbose)

    try:
        settings = load_settings()
    except ConfigError as exc:
        err_console.print(f"[yellow]Warning: config initialization failed:[/yellow] {exc}")
        settings = Settings()

    ctx.obj = settings.merged(
        host=host or None,
        port=port,
        password=password or None,
        json_output=json_output or None,
    )


# Register subcommands
from oho.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
