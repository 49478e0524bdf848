import pytest
import respx
from httpx import Response
from youtrack_client.client import YouTrackClient
from youtrack_client.core.errors import MissingPathParameterError
from youtrack_client.resources.work_items import WorkItemsApi, WorkItemsParams


@pytest.fixture
def client():
    return YouTrackClient(base_url="https://yt.example.com", token="perm:mock")


@pytest.mark.asyncio
@respx.mock
async def test_get_work_items_with_dict_params(client):
    route = respx.get("https://yt.example.com/api/workItems").mock(
        return_value=Response(200, json=[{"id": "115-1", "duration": {"minutes": 30}}])
    )

    async with client:
        items = await WorkItemsApi(client).get_work_items(
            {
                "fields": ["id", {"duration": ["minutes"]}],
                "query": "project: PRJ",
                "author": ["me", "jane"],
                "$top": 50,
            }
        )

    assert items[0]["duration"]["minutes"] == 30
    url = route.calls[0].request.url
    assert url.params["fields"] == "id,duration(minutes)"
    assert url.params["query"] == "project: PRJ"
    assert url.params.get_list("author") == ["me", "jane"]
    assert url.params["$top"] == "50"
    assert list(url.params.keys()) == ["fields", "$top", "query", "author"]


@pytest.mark.asyncio
@respx.mock
async def test_get_work_items_with_record(client):
    route = respx.get("https://yt.example.com/api/workItems").mock(
        return_value=Response(200, json=[])
    )

    params = WorkItemsParams(start_date="2024-01-01", end_date="2024-01-31", skip=10)
    async with client:
        assert await WorkItemsApi(client).get_work_items(params) == []

    url = route.calls[0].request.url
    assert url.params["startDate"] == "2024-01-01"
    assert url.params["endDate"] == "2024-01-31"
    assert url.params["$skip"] == "10"
    assert "fields" not in url.params


@pytest.mark.asyncio
@respx.mock
async def test_get_work_items_without_params(client):
    route = respx.get("https://yt.example.com/api/workItems").mock(
        return_value=Response(200, json=[])
    )

    async with client:
        await WorkItemsApi(client).get_work_items()

    assert str(route.calls[0].request.url) == "https://yt.example.com/api/workItems"


@pytest.mark.asyncio
@respx.mock
async def test_get_work_item(client):
    route = respx.get("https://yt.example.com/api/workItems/115-1").mock(
        return_value=Response(200, json={"id": "115-1", "text": "review"})
    )

    async with client:
        item = await WorkItemsApi(client).get_work_item(
            "115-1", {"fields": ["id", "text"]}
        )

    assert item["text"] == "review"
    assert route.calls[0].request.url.params["fields"] == "id,text"


@pytest.mark.asyncio
async def test_get_work_item_requires_id(client):
    async with client:
        with pytest.raises(MissingPathParameterError):
            await WorkItemsApi(client).get_work_item(None)
