"""
trello-mcp CLI - serve the Trello tools over stdio, or inspect and call them.

Run `trello-mcp` (or `trello-mcp serve`) from an MCP client config.
stdout carries the MCP stream; logs and diagnostics go to stderr.
"""

import asyncio
import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from trello_mcp import __version__
from trello_mcp.validation.config import Config, ConfigError, Credentials, MissingCredentialsError

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich; stdout is reserved for MCP."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs full request URLs, which carry the key and token.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _load_config() -> Config:
    try:
        config = Config.load()
        config.merged  # validate early
    except ConfigError as exc:
        err_console.print(f"[red]{exc}[/red]")
        sys.exit(1)
    return config


def _require_credentials(config: Config) -> Credentials:
    """Resolve credentials or stop the process with setup guidance."""
    try:
        return config.credentials()
    except MissingCredentialsError as exc:
        click.echo(exc.guidance(), err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(__version__, "--version", "-v", prog_name="trello-mcp")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    trello-mcp - Trello boards, lists, and cards as MCP tools.

    Run without a command to serve over stdio.

    \b
    Examples:
        trello-mcp                          # Serve over stdio
        trello-mcp tools                    # Show the tool catalog
        trello-mcp tools create_card        # Show one tool's parameters
        trello-mcp call list_boards         # Run one tool and print the result
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command()
def serve() -> None:
    """Serve the Trello tools over stdin/stdout."""
    from trello_mcp.server import serve as run_server

    config = _load_config()
    credentials = _require_credentials(config)
    configure_logging(config.log_level)

    try:
        asyncio.run(run_server(config, credentials))
    except KeyboardInterrupt:
        pass


@cli.command()
@click.argument("name", required=False)
def tools(name: Optional[str]) -> None:
    """Show the tool catalog, or the parameters of one tool."""
    from trello_mcp.tools.registry import default_registry

    registry = default_registry()

    if name:
        if name not in registry:
            err_console.print(f"[red]Tool not found: {name}[/red]")
            sys.exit(1)
        console.print(registry.build_full_schema(name))
        return

    table = Table(title=f"Trello tools ({len(registry)})")
    table.add_column("Tool", style="cyan")
    table.add_column("Required")
    table.add_column("Description", style="dim")
    for tool in registry.list_tools():
        table.add_row(tool.name, ", ".join(tool.required) or "-", tool.description)
    console.print(table)


@cli.command()
@click.argument("name")
@click.option("--args", "-a", "raw_args", default="{}", help="Tool arguments as a JSON object")
def call(name: str, raw_args: str) -> None:
    """Run a single tool call and print its result."""
    from trello_mcp.api.transport import TrelloClient
    from trello_mcp.tools.executor import ToolExecutor
    from trello_mcp.tools.registry import default_registry

    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--args")
    if not isinstance(arguments, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")

    config = _load_config()
    credentials = _require_credentials(config)
    configure_logging(config.log_level)

    async def _run():
        async with TrelloClient(credentials, base_url=config.api_base, timeout=config.timeout) as client:
            return await ToolExecutor(default_registry(), client).execute(name, arguments)

    result = asyncio.run(_run())
    click.echo(result.payload, err=result.is_error)
    if result.is_error:
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
