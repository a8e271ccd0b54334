"""Explicit state records owned by each view instance.

Each fetch channel is one ``ChannelState`` instead of a pair of loose
loading/error flags, so the ``idle -> loading -> ok | error`` transitions
are enforced in a single place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.domain.models import Post, User


class ChannelStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    OK = "ok"
    ERROR = "error"


@dataclass
class ChannelState:
    """Loading/error state of one fetch channel."""

    status: ChannelStatus = ChannelStatus.IDLE
    error: str | None = None

    @property
    def loading(self) -> bool:
        return self.status is ChannelStatus.LOADING

    @property
    def settled(self) -> bool:
        return self.status in (ChannelStatus.OK, ChannelStatus.ERROR)

    def start(self) -> None:
        self.status = ChannelStatus.LOADING
        self.error = None

    def succeed(self) -> None:
        self.status = ChannelStatus.OK
        self.error = None

    def fail(self, message: str) -> None:
        self.status = ChannelStatus.ERROR
        # Channels always carry a non-empty message once failed.
        self.error = message or "Unknown error"

    def clear_error(self) -> None:
        self.error = None
        if self.status is ChannelStatus.ERROR:
            self.status = ChannelStatus.IDLE

    def reset(self) -> None:
        self.status = ChannelStatus.IDLE
        self.error = None


@dataclass
class DependentFetchState:
    """Everything the dependent-fetch view renders."""

    users: list[User] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)
    selected_owner_id: str = ""
    filter_term: str = ""
    primary: ChannelState = field(default_factory=ChannelState)
    secondary: ChannelState = field(default_factory=ChannelState)


@dataclass
class CollectionState:
    """State of a single-channel collection view."""

    items: list[Post] = field(default_factory=list)
    channel: ChannelState = field(default_factory=ChannelState)


@dataclass(frozen=True)
class DependentFetchStats:
    """Figures shown in the statistics panel."""

    total_users: int
    filtered_users: int
    post_count: int
    has_selection: bool
