"""fetchlab command line interface.

Every command builds its views over one shared ``RestClient``, drives their
lifecycle (mount, events) with ``asyncio.run`` and renders the resulting
state with Rich. Fetch failures are part of the state and are rendered
inline; they never surface as tracebacks.
"""

from __future__ import annotations

import asyncio
import shlex
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

import typer
from rich.console import Console

from adapters.http_client import RestClient
from cli.doctor import app as doctor_app
from cli.log import configure_logging
from cli.texts import UiTexts, get_texts
from cli.ui_components import (
    build_error,
    build_section,
    build_stats_table,
    print_banner,
    render_collection,
    render_dependent_view,
)
from core.config import AppSettings
from core.domain.language import Language
from core.views import BasicFetchView, CrudFormView, DependentFetchView, RootView

app = typer.Typer(no_args_is_help=True, help="Data fetching and CRUD demo against a public REST API.")
crud_app = typer.Typer(no_args_is_help=True, help="Create, update and delete entries of the CRUD resource.")
app.add_typer(crud_app, name="crud")
app.add_typer(doctor_app, name="doctor")

_console = Console()


@dataclass
class CliContext:
    settings: AppSettings
    texts: UiTexts


def build_rest_client(settings: AppSettings) -> RestClient:
    """Factory for the HTTP client (tests replace it to inject a mock transport)."""

    return RestClient(settings)


def _ctx(ctx: typer.Context) -> CliContext:
    obj = ctx.find_root().obj
    if not isinstance(obj, CliContext):
        settings = AppSettings()
        obj = CliContext(settings=settings, texts=get_texts(settings.default_language))
    return obj


@app.callback()
def main(
    ctx: typer.Context,
    lang: Optional[Language] = typer.Option(None, "--lang", help="Label language (en/id)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = CliContext(settings=settings, texts=get_texts(lang or settings.default_language))


@app.command()
def basic(
    ctx: typer.Context,
    resource: Optional[str] = typer.Option(None, "--resource", help="Collection to fetch."),
    limit: int = typer.Option(10, "--limit", min=1, help="Rows to display."),
) -> None:
    """Fetch one collection on mount and show it."""

    c = _ctx(ctx)

    async def _run() -> BasicFetchView:
        async with build_rest_client(c.settings) as client:
            view = BasicFetchView(client, resource or c.settings.basic_resource)
            await view.mount()
            return view

    view = asyncio.run(_run())
    _console.print(build_section(c.texts.basic_title, render_collection(view.state, view.resource, c.texts, limit=limit)))


@app.command()
def advanced(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter users by name or email."),
    select: Optional[int] = typer.Option(None, "--select", min=1, help="User id whose posts to fetch."),
) -> None:
    """Users list with search, plus the selected user's posts."""

    c = _ctx(ctx)

    async def _run() -> DependentFetchView:
        async with build_rest_client(c.settings) as client:
            view = DependentFetchView(client)
            await view.mount()
            view.set_filter_term(search)
            if select is not None:
                view.select_owner(select)
            await view.wait_idle()
            return view

    view = asyncio.run(_run())
    _console.print(build_section(c.texts.advanced_title, render_dependent_view(view, c.texts)))


@app.command()
def explore(ctx: typer.Context) -> None:
    """Interactive session over the dependent-fetch view."""

    c = _ctx(ctx)
    print_banner(_console, c.texts)
    asyncio.run(_explore(c))


async def _explore(c: CliContext) -> None:
    async with build_rest_client(c.settings) as client:
        view = DependentFetchView(client)
        with _console.status(c.texts.loading_users):
            await view.mount()
        _console.print(render_dependent_view(view, c.texts))

        try:
            await _explore_loop(view, c)
        finally:
            view.unmount()


async def _explore_loop(view: DependentFetchView, c: CliContext) -> None:
    while True:
        try:
            raw = await asyncio.to_thread(_console.input, f"[dim]{c.texts.search_prompt}[/dim]\n> ")
        except (EOFError, KeyboardInterrupt):
            break
        try:
            parts = shlex.split(raw)
        except ValueError:
            parts = raw.split()
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit", "q"):
            break
        if command == "search":
            view.set_filter_term(" ".join(args))
        elif command == "select" and len(args) == 1:
            view.select_owner(args[0])
            with _console.status(c.texts.loading_posts):
                await view.wait_idle()
        elif command == "reset":
            view.reset()
        elif command == "stats":
            _console.print(build_stats_table(view.stats(), c.texts))
            continue
        else:
            _console.print(build_error(c.texts.explore_help))
            continue
        _console.print(render_dependent_view(view, c.texts))


@app.command(name="all")
def show_all(
    ctx: typer.Context,
    limit: int = typer.Option(5, "--limit", min=1, help="Rows per collection."),
) -> None:
    """Render the three demos one after the other."""

    c = _ctx(ctx)

    async def _run() -> RootView:
        async with build_rest_client(c.settings) as client:
            root = RootView(client, c.settings)
            await root.mount()
            return root

    root = asyncio.run(_run())
    print_banner(_console, c.texts)
    _console.print(build_section(c.texts.basic_title, render_collection(root.basic.state, root.basic.resource, c.texts, limit=limit)))
    _console.print(build_section(c.texts.advanced_title, render_dependent_view(root.advanced, c.texts)))
    _console.print(build_section(c.texts.crud_title, render_collection(root.crud.state, root.crud.resource, c.texts, limit=limit)))


# CRUD


async def _with_crud(c: CliContext, action: Callable[[CrudFormView], Awaitable[None]]) -> CrudFormView:
    async with build_rest_client(c.settings) as client:
        view = CrudFormView(client, c.settings.crud_resource)
        await view.mount()
        if not view.state.channel.error:
            await action(view)
        return view


def _finish_write(view: CrudFormView, message: str) -> None:
    if view.state.channel.error:
        _console.print(build_error(view.state.channel.error))
        raise typer.Exit(code=1)
    if view.write.error:
        _console.print(build_error(view.write.error))
        raise typer.Exit(code=1)
    _console.print(f"[green]{message}[/green]")


@crud_app.command("list")
def crud_list(
    ctx: typer.Context,
    limit: int = typer.Option(10, "--limit", min=1, help="Rows to display."),
) -> None:
    """Show the CRUD resource."""

    c = _ctx(ctx)

    async def _noop(view: CrudFormView) -> None:
        return None

    view = asyncio.run(_with_crud(c, _noop))
    _console.print(build_section(c.texts.crud_title, render_collection(view.state, view.resource, c.texts, limit=limit)))


@crud_app.command("create")
def crud_create(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Title of the new entry."),
    body: str = typer.Option(..., "--body", help="Body of the new entry."),
    user_id: int = typer.Option(1, "--user-id", min=1, help="Owner of the new entry."),
) -> None:
    """Create an entry and append it to the local list."""

    c = _ctx(ctx)
    created: list[int] = []

    async def _create(view: CrudFormView) -> None:
        view.set_draft(title=title, body=body, owner_id=user_id)
        post = await view.create()
        if post is not None:
            created.append(post.id)

    view = asyncio.run(_with_crud(c, _create))
    _finish_write(view, c.texts.saved.format(resource=view.resource, id=created[0] if created else "?"))


@crud_app.command("update")
def crud_update(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., min=1, help="Entry to update."),
    title: Optional[str] = typer.Option(None, "--title", help="New title."),
    body: Optional[str] = typer.Option(None, "--body", help="New body."),
) -> None:
    """Update an existing entry and replace it in the local list."""

    c = _ctx(ctx)

    async def _update(view: CrudFormView) -> None:
        if view.start_edit(item_id) is None:
            return
        view.set_draft(title=title, body=body)
        await view.update()

    view = asyncio.run(_with_crud(c, _update))
    _finish_write(view, c.texts.saved.format(resource=view.resource, id=item_id))


@crud_app.command("delete")
def crud_delete(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., min=1, help="Entry to delete."),
) -> None:
    """Delete an entry and drop it from the local list."""

    c = _ctx(ctx)

    async def _delete(view: CrudFormView) -> None:
        await view.delete(item_id)

    view = asyncio.run(_with_crud(c, _delete))
    _finish_write(view, c.texts.deleted.format(resource=view.resource, id=item_id))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
