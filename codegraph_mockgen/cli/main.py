"""
Mockgen CLI

- generate: write mocks for Go interfaces found by name and/or file
- serve: start the HTTP API
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from codegraph_mockgen.common.exceptions import MockgenError, UsageError
from codegraph_mockgen.infra.config.settings import get_settings
from codegraph_mockgen.infra.observability.logging import setup_logging

app = typer.Typer(name="mockgen", help="Generate mocks for Go interfaces", add_completion=False)
console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override MOCKGEN_LOG_LEVEL"),
):
    """Generate mocks for Go interfaces."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


@app.command()
def generate(
    file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        metavar="PATH",
        help="File containing the interface(s) to mock. If not set, all .go files under --root are searched",
    ),
    interface: list[str] | None = typer.Option(
        None,
        "--interface",
        "-i",
        metavar="NAME",
        help="Interface(s) to mock. If not set, every interface in --file is mocked",
    ),
    root: Path | None = typer.Option(None, "--root", help="Search root and base of the mock directory"),
):
    """
    Generate mock files.

    Examples:
        mockgen generate -i Reader -i Writer
        mockgen generate -f storage/store.go
        mockgen generate -f storage/store.go -i Store
    """
    from codegraph_mockgen.service import MockService

    try:
        if not file and not interface:
            raise UsageError(
                "please provide at least interface name or file path. Run `mockgen generate --help` for details"
            )
        report = MockService().process(interface, file, root)
    except MockgenError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Mocks")
    table.add_column("Interface", style="cyan")
    table.add_column("Result")
    for name, path in sorted(report.written.items()):
        table.add_row(name, f"[green]{path}[/green]")
    for name, error in sorted(report.failed.items()):
        table.add_row(name, f"[red]{error.message}[/red]")
    console.print(table)

    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
):
    """
    Start API server.

    POST Go source with one interface to /mock to get its mock back.
    """
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    console.print(f"\n[bold cyan]🚀 Starting mockgen API server[/bold cyan] on {host}:{port}\n")

    uvicorn.run("codegraph_mockgen.server.api_server.main:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    app()
