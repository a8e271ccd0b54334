import pytest

from core.domain.state import ChannelStatus
from core.views.basic_fetch import BasicFetchView


@pytest.mark.asyncio
async def test_mount_fetches_collection(api, client):
    view = BasicFetchView(client, "posts")

    await view.mount()
    await view.mount()

    assert [p.id for p in view.state.items] == [1, 2, 11]
    assert view.state.channel.status is ChannelStatus.OK
    assert api.count("GET", "/posts") == 1


@pytest.mark.asyncio
async def test_failure_is_captured(api, client):
    api.fail["/posts"] = 404
    view = BasicFetchView(client)

    await view.mount()

    assert view.state.items == []
    assert view.state.channel.loading is False
    assert view.state.channel.error == "Request failed with status code 404"
