"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Each view renders from its state alone, so the same builders serve the
  one-shot commands, the interactive session and the root view.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cli.texts import UiTexts
from core.domain.models import Post, User
from core.domain.state import ChannelState, CollectionState, DependentFetchStats
from core.views.dependent_fetch import DependentFetchView


def print_banner(console: Console, texts: UiTexts) -> None:
    """Print the welcome banner."""

    title = Text("fetchlab", style="bold cyan")
    subtitle = Text(texts.app_title, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_error(message: str | None) -> Text:
    return Text(message or "", style="bold red")


def build_loading(message: str) -> Text:
    return Text(f"⏳ {message}", style="yellow")


def build_users_table(users: Sequence[User], selected_id: str, texts: UiTexts) -> Table:
    table = Table(title=texts.users_title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Email", style="white")
    table.add_column("Company", style="magenta")
    table.add_column("Website", style="blue")
    for user in users:
        active = str(user.id) == selected_id
        table.add_row(
            ("▶ " if active else "") + str(user.id),
            user.name,
            user.email,
            user.company_name,
            user.website,
            style="reverse" if active else None,
        )
    return table


def build_posts_table(posts: Sequence[Post], title: str | None = None, limit: int | None = None) -> Table:
    table = Table(title=title, show_lines=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold white")
    table.add_column("Body", style="dim")
    shown = posts if limit is None else posts[:limit]
    for post in shown:
        table.add_row(str(post.id), post.title, post.body)
    if limit is not None and len(posts) > limit:
        table.caption = f"{limit} / {len(posts)}"
    return table


def build_channel_body(
    channel: ChannelState,
    *,
    loading_message: str,
    content: RenderableType,
) -> RenderableType:
    """Loading text, inline error, or the content, in that order of precedence."""

    if channel.loading:
        return build_loading(loading_message)
    if channel.error:
        return build_error(channel.error)
    return content


def build_posts_section(view: DependentFetchView, texts: UiTexts) -> RenderableType | None:
    state = view.state
    if not state.selected_owner_id:
        return None

    heading = Text(texts.posts_title.format(name=view.posts_heading_name()), style="bold")
    if state.secondary.loading:
        heading.append(f"  {texts.loading_badge}", style="yellow")

    if state.secondary.error:
        body: RenderableType = build_error(state.secondary.error)
    elif not state.posts and not state.secondary.loading:
        body = Text(texts.no_posts, style="dim italic")
    else:
        body = build_posts_table(state.posts)
    return Panel(body, title=heading, border_style="green")


def build_stats_table(stats: DependentFetchStats, texts: UiTexts) -> Table:
    table = Table(title=texts.stats_title)
    table.add_column(texts.total_users, justify="right")
    table.add_column(texts.filtered_users, justify="right")
    table.add_column(texts.user_posts, justify="right")
    table.add_column(texts.user_selected, justify="center")
    table.add_row(
        str(stats.total_users),
        str(stats.filtered_users),
        str(stats.post_count),
        texts.yes if stats.has_selection else texts.no,
    )
    return table


def render_dependent_view(view: DependentFetchView, texts: UiTexts) -> Group:
    state = view.state
    parts: list[RenderableType] = [Text(texts.advanced_subtitle, style="dim")]
    if state.filter_term:
        parts.append(Text(f"🔎 {state.filter_term}", style="cyan"))

    parts.append(
        build_channel_body(
            state.primary,
            loading_message=texts.loading_users,
            content=build_users_table(view.filtered_users(), state.selected_owner_id, texts),
        )
    )
    posts = build_posts_section(view, texts)
    if posts is not None:
        parts.append(posts)
    parts.append(build_stats_table(view.stats(), texts))
    return Group(*parts)


def render_collection(
    state: CollectionState,
    resource: str,
    texts: UiTexts,
    *,
    limit: int | None = None,
) -> RenderableType:
    if state.channel.settled and not state.channel.error and not state.items:
        content: RenderableType = Text(texts.empty_collection, style="dim italic")
    else:
        content = build_posts_table(state.items, title=resource, limit=limit)
    return build_channel_body(
        state.channel,
        loading_message=texts.loading_collection.format(resource=resource),
        content=content,
    )


def build_section(title: str, body: RenderableType) -> Panel:
    return Panel(body, title=Text(title, style="bold"), border_style="cyan", title_align="left")
