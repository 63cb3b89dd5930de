"""userhub CLI application using Typer.

Command-line utilities for running the API server, managing the database
schema and generating deployment secrets.
"""

import asyncio
import secrets
from typing import Awaitable, Callable, Optional

import typer
import uvicorn
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncEngine

from userhub.config import Settings, get_settings
from userhub.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_tables,
    display_url,
    drop_tables,
)

app = typer.Typer(
    name="userhub",
    help="userhub - user account service CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST setting)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: PORT setting)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API server."""
    settings = get_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port

    console.print(
        f"[bold green]Starting {settings.app_name}[/bold green] "
        f"on [cyan]{bind_host}:{bind_port}[/cyan]"
    )
    uvicorn.run(
        "userhub.presentation.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def _run_with_engine(
    settings: Settings,
    action: Callable[[AsyncEngine], Awaitable[None]],
) -> None:
    async def _run() -> None:
        engine = create_engine(settings)
        try:
            await action(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())


def _confirm_destructive(settings: Settings, force: bool) -> None:
    console.print(f"Database: [cyan]{display_url(settings.database_url)}[/cyan]\n")
    if force:
        return
    console.print("[yellow]WARNING: This will DELETE ALL DATA in the database![/yellow]\n")
    response = typer.prompt("Type 'yes' to confirm")
    if response.lower() != "yes":
        console.print("Aborted.")
        raise typer.Exit(code=1)


@db_app.command("init")
def db_init() -> None:
    """Create missing tables (idempotent)."""
    settings = get_settings()
    console.print(f"Database: [cyan]{display_url(settings.database_url)}[/cyan]")
    _run_with_engine(settings, create_tables)
    console.print("[green]Database initialized successfully![/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables."""
    settings = get_settings()
    _confirm_destructive(settings, force)
    _run_with_engine(settings, drop_tables)
    console.print("[green]Database tables dropped successfully![/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables and recreate them."""
    settings = get_settings()
    _confirm_destructive(settings, force)

    async def _reset(engine: AsyncEngine) -> None:
        await drop_tables(engine)
        await create_tables(engine)

    _run_with_engine(settings, _reset)
    console.print("[green]Database recreated successfully![/green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT_SECRET value for the environment."""
    console.print("\n[bold green]userhub Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes of randomness, URL-safe
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET[/cyan]={jwt_secret}")

    console.print("=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
