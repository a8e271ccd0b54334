"""Basic fetching: one collection, fetched once on mount."""

from __future__ import annotations

import logging

from core.domain.state import CollectionState
from core.errors import FetchError
from core.interfaces.resource_client import ResourceClient

logger = logging.getLogger(__name__)


class BasicFetchView:
    def __init__(self, client: ResourceClient, resource: str = "posts") -> None:
        self._client = client
        self.resource = resource
        self.state = CollectionState()
        self._mounted = False

    async def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True

        channel = self.state.channel
        channel.start()
        logger.info("Fetching %s...", self.resource)
        try:
            items = await self._client.list_resource(self.resource)
        except FetchError as exc:
            logger.error("Error fetching %s: %s", self.resource, exc)
            channel.fail(str(exc))
            return

        self.state.items = items
        channel.succeed()
