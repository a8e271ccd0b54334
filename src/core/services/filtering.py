"""Pure projections over view state.

Filtering is recomputed on every render; results depend only on the
arguments, so callers may memoize on (list identity, term) if they need to.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import User


def filter_users(users: Sequence[User], term: str) -> list[User]:
    """Users whose name or email contains ``term``, case-insensitively.

    An empty term returns every user, in the original order.
    """

    needle = term.lower()
    if not needle:
        return list(users)
    return [u for u in users if needle in u.name.lower() or needle in u.email.lower()]


def find_user(users: Sequence[User], user_id: str) -> User | None:
    """Return the user whose id matches the string-encoded ``user_id``."""

    if not user_id:
        return None
    return next((u for u in users if str(u.id) == user_id), None)
