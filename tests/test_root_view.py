import pytest

from core.config import AppSettings
from core.views.root import RootView


@pytest.mark.asyncio
async def test_mount_composes_three_views(api, client, settings):
    root = RootView(client, settings)

    await root.mount()

    assert len(root.basic.state.items) == 3
    assert len(root.advanced.state.users) == 3
    assert len(root.crud.state.items) == 3
    assert api.count("GET", "/users") == 1
    assert api.count("GET", "/posts") == 2


@pytest.mark.asyncio
async def test_one_failing_view_does_not_stop_the_others(api, client):
    api.fail["/users"] = 500
    root = RootView(client, AppSettings(api_base_url="https://api.test", crud_resource="posts"))

    await root.mount()

    assert root.advanced.state.primary.error == "Request failed with status code 500"
    assert root.basic.state.channel.error is None
    assert len(root.crud.state.items) == 3


@pytest.mark.asyncio
async def test_views_share_no_state(client, settings):
    root = RootView(client, settings)
    await root.mount()

    root.crud.state.items.clear()

    assert len(root.basic.state.items) == 3
