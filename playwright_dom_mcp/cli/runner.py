"""CLI runner for the DOM server and one-shot extractions."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from playwright_dom_mcp.core.config import Config
from playwright_dom_mcp.core.logging import setup_logging
from playwright_dom_mcp.browser.session import BrowserSession
from playwright_dom_mcp.server.app import serve as serve_stdio

# stdout is reserved for payloads and the MCP transport
console = Console(stderr=True)
stdout_console = Console()


def setup_cli_logging(verbose: bool = False) -> None:
    """Set up logging for CLI."""
    level = "DEBUG" if verbose else "INFO"

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=False,
        )]
    )

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("playwright").setLevel(logging.WARNING)


async def run_extract(
    url: str,
    output_format: Optional[str] = None,
    headless: bool = False,
) -> str:
    """
    Open a page and return its compressed DOM.

    Args:
        url: Page to load
        output_format: "json" or "markup" (None = configured default)
        headless: Force headless mode

    Returns:
        Serialized payload
    """
    config = Config.from_env()
    if headless:
        config.browser.headless = True

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task("Launching browser...", total=None)

        async with BrowserSession(config.browser, config.dom) as session:
            progress.update(task_id, description=f"Loading {url}...")
            await session.navigate(url)

            progress.update(task_id, description="Extracting DOM...")
            return await session.extract_dom(output_format)


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """🧭 Playwright DOM MCP - compressed DOM snapshots for LLM agents"""
    pass


@cli.command()
def serve():
    """Run the MCP server on stdio."""
    config = Config.from_env()
    config.ensure_directories()
    setup_logging(config.log_level, config.log_file, config.json_logs)

    try:
        asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        pass


@cli.command()
@click.argument("url")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["json", "markup"]),
    default=None,
    help="Output format (default: DOM_OUTPUT_FORMAT or json)",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the payload to a file")
@click.option("--headless", is_flag=True, help="Run browser in headless mode")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def extract(
    url: str,
    output_format: Optional[str],
    output: Optional[str],
    headless: bool,
    verbose: bool,
):
    """Extract the compressed DOM of a page.

    Examples:

        playwright-dom-mcp extract https://example.com

        playwright-dom-mcp extract https://example.com -f markup -o dom.txt --headless
    """
    setup_cli_logging(verbose)

    try:
        payload = asyncio.run(run_extract(url, output_format, headless))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if output:
        Path(output).write_text(payload, encoding="utf-8")
        console.print(Panel(
            f"{len(payload)} characters written to [bold]{output}[/bold]",
            title="📄 DOM extracted",
            border_style="green",
        ))
    else:
        click.echo(payload)


@cli.command()
def info():
    """Show server information and configuration."""
    config = Config.from_env()

    table = Table(title="Configuration", border_style="blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    # Server settings
    table.add_row("Server Name", config.server.name)
    table.add_row("Server Version", config.server.version)
    table.add_row("Log Level", config.log_level)

    # Browser settings
    table.add_row("Headless", "Yes" if config.browser.headless else "No")
    table.add_row("Viewport", f"{config.browser.viewport_width}x{config.browser.viewport_height}")
    table.add_row("Timeout", f"{config.browser.timeout}ms")
    table.add_row("Executable", config.browser.executable_path or "bundled Chromium")

    # DOM settings
    table.add_row("Output Format", config.dom.output_format)
    table.add_row("Strict Pruning", "Yes" if config.dom.strict_pruning else "No")
    table.add_row("Max Output", f"{config.dom.max_output_chars} chars")
    table.add_row("Dump Path", config.dom.dump_path or "-")

    stdout_console.print(table)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
