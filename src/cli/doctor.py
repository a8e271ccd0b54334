"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client, describe_transport_error
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, path: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(path)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, describe_transport_error(exc)
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured API."""

    settings = AppSettings()

    table = Table(title="fetchlab doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base URL", "OK", settings.api_base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Language", "OK", settings.default_language.label())
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    failed = False
    for path in ("/users", f"/{settings.crud_resource}"):
        ok, detail = asyncio.run(_check_http(settings, path))
        failed = failed or not ok
        table.add_row(f"GET {path}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failed:
        _console.print(
            "\n[yellow]Note:[/yellow] every view renders fetch failures inline; "
            "check the base URL with `fetchlab doctor set-endpoint`."
        )
        raise typer.Exit(code=1)


@app.command(name="set-endpoint")
def set_endpoint(url: str = typer.Argument(..., help="Base URL of the REST API.")) -> None:
    """Store the API base URL in the user config .env."""

    url = url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("URL must start with http:// or https://")
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise typer.BadParameter(f"Invalid URL: {exc}") from exc

    env_path = write_user_env_vars({"FETCHLAB_API_BASE_URL": url})
    _console.print(f"[green]Saved API endpoint to:[/green] {env_path}")
