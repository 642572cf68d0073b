"""
Heritage Archive CLI - Command-line interface.

Serve the API and inspect the archive from the terminal.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from heritage_archive.api.auth import ADMIN_SCOPE, create_access_token
from heritage_archive.artifacts import build_artifact_service
from heritage_archive.config import load_settings
from heritage_archive.embeds import resolve_reference

app = typer.Typer(
    name="heritage-archive",
    help="Heritage Archive - 3D cultural heritage gallery service",
    no_args_is_help=True,
)
console = Console()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    console.print(f"[bold]Heritage Archive API[/bold] on http://{host}:{port}")
    uvicorn.run("heritage_archive.api.app:app", host=host, port=port, reload=reload)


@app.command()
def artifacts(
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON records"),
):
    """List all artifacts in the archive."""
    service = build_artifact_service(load_settings())
    records = service.get_all()

    if as_json:
        payload = [r.model_dump(by_alias=True) for r in records]
        console.print_json(json.dumps(payload))
        return

    table = Table(title=f"Artifacts ({len(records)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Category", style="magenta")
    table.add_column("Location")
    table.add_column("Tags", style="green")

    for record in records:
        table.add_row(
            record.id,
            record.title,
            record.category or "-",
            record.location or "-",
            ", ".join(record.tags) or "-",
        )

    console.print(table)
    console.print(f"[dim]Served by: {' -> '.join(service.tier_names)}[/dim]")


@app.command()
def show(artifact_id: str = typer.Argument(..., help="Artifact ID")):
    """Show one artifact in detail."""
    service = build_artifact_service(load_settings())
    record = service.get_by_id(artifact_id)

    if record is None:
        console.print(f"[red]Artifact not found: {artifact_id}[/red]")
        raise typer.Exit(1)

    details = Table(show_header=False, box=None)
    details.add_column("Field", style="cyan")
    details.add_column("Value")
    for name, value in record.model_dump(by_alias=True).items():
        if isinstance(value, list):
            value = ", ".join(value)
        details.add_row(name, str(value) if value else "[dim]-[/dim]")

    console.print(Panel(details, title=f"[bold]{record.title}[/bold]"))


@app.command()
def embed(text: str = typer.Argument(..., help="Viewer URL or iframe embed code")):
    """Extract and validate a viewer reference."""
    resolution = resolve_reference(text)

    console.print(f"URL: {resolution.url}")
    if resolution.valid:
        console.print("[green]Valid viewer reference[/green]")
    else:
        console.print("[red]Not a valid viewer reference[/red]")
        raise typer.Exit(1)


@app.command()
def token(
    subject: Optional[str] = typer.Option(None, "--subject", "-s", help="Token subject (default: admin email)"),
    hours: float = typer.Option(24.0, "--hours", help="Token lifetime in hours"),
):
    """Issue an admin token for scripting against the API."""
    settings = load_settings()
    subject = subject or settings.admin_email
    if not subject:
        console.print("[red]No subject given and HA_ADMIN_EMAIL is not set[/red]")
        raise typer.Exit(1)
    if not settings.jwt_secret:
        console.print("[red]HA_JWT_SECRET is not set; the server would not accept a token issued here[/red]")
        raise typer.Exit(1)

    access_token = create_access_token(
        subject=subject,
        expiration_seconds=int(hours * 3600),
        scope=ADMIN_SCOPE,
        secret=settings.jwt_secret,
    )
    console.print(access_token, soft_wrap=True)


@app.command()
def version():
    """Show Heritage Archive version."""
    from heritage_archive import __version__

    console.print(f"Heritage Archive v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
