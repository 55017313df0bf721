"""Tillbook command-line utilities (Typer)."""

import asyncio
import secrets

import typer
from cryptography.fernet import Fernet
from rich.console import Console

app = typer.Typer(
    name="tillbook",
    help="Tillbook - multi-tenant bookkeeping backend CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Print the secrets Tillbook needs in its .env file.

    - ENCRYPTION_KEY: Fernet key for bank access tokens at rest
    - JWT_SECRET_KEY: HS256 signing secret
    - POSTGRES_PASSWORD: database password
    """
    console.print("\n[bold green]Tillbook Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(f"[cyan]ENCRYPTION_KEY[/cyan]={Fernet.generate_key().decode()}")
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")
    console.print("=" * 60)
    console.print(
        "[yellow]Keep these secrets out of version control.[/yellow]\n"
    )


@db_app.command("init")
def init_db() -> None:
    """Create missing tables. Existing tables are left untouched."""
    from tillbook.infrastructure.persistence.sqlalchemy import create_tables
    from tillbook.presentation.api.dependencies import get_engine

    async def _run() -> None:
        engine = get_engine()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print("[green]Database schema is up to date.[/green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    from tillbook_config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "tillbook.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
