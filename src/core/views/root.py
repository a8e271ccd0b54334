"""Root view: static composition of the three demo views.

The views share the HTTP client but no state; each captures its own failures,
so mounting them concurrently never raises.
"""

from __future__ import annotations

import asyncio

from core.config import AppSettings
from core.interfaces.resource_client import ResourceClient
from core.views.basic_fetch import BasicFetchView
from core.views.crud_form import CrudFormView
from core.views.dependent_fetch import DependentFetchView


class RootView:
    def __init__(self, client: ResourceClient, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self.basic = BasicFetchView(client, settings.basic_resource)
        self.advanced = DependentFetchView(client)
        self.crud = CrudFormView(client, settings.crud_resource)

    async def mount(self) -> None:
        await asyncio.gather(self.basic.mount(), self.advanced.mount(), self.crud.mount())

    def unmount(self) -> None:
        self.advanced.unmount()
