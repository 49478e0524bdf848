import pytest
import respx
from httpx import Response
from youtrack_client.client import YouTrackClient
from youtrack_client.resources.workflows import WorkflowRuleParams, WorkflowsApi


@pytest.fixture
def client():
    return YouTrackClient(base_url="https://yt.example.com", token="perm:mock")


@pytest.mark.asyncio
@respx.mock
async def test_get_workflows(client):
    route = respx.get("https://yt.example.com/api/admin/workflows").mock(
        return_value=Response(200, json=[{"id": "54-1", "name": "@jetbrains/dnd"}])
    )

    async with client:
        data = await WorkflowsApi(client).get_workflows(
            {"fields": "id,name", "query": "language:JS,mps", "$top": -1}
        )

    assert data[0]["name"] == "@jetbrains/dnd"
    url = route.calls[0].request.url
    assert url.params["fields"] == "id,name"
    assert url.params["query"] == "language:JS,mps"
    assert url.params["$top"] == "-1"


@pytest.mark.asyncio
@respx.mock
async def test_get_workflow_rule_logs(client):
    route = respx.get(
        "https://yt.example.com/api/admin/workflows/54-1/rules/55-2/logs"
    ).mock(return_value=Response(200, json=[{"id": "1", "message": "ok"}]))

    params = WorkflowRuleParams(fields=["id", "message"], top=5, query="1700000000000")
    async with client:
        logs = await WorkflowsApi(client).get_workflow_logs("54-1", "55-2", params)

    assert logs[0]["message"] == "ok"
    url = route.calls[0].request.url
    assert url.params["$top"] == "5"
    assert url.params["query"] == "1700000000000"


@pytest.mark.asyncio
@respx.mock
async def test_get_workflow_and_rule(client):
    respx.get("https://yt.example.com/api/admin/workflows/54-1").mock(
        return_value=Response(200, json={"id": "54-1"})
    )
    respx.get("https://yt.example.com/api/admin/workflows/54-1/rules/55-2").mock(
        return_value=Response(200, json={"id": "55-2"})
    )

    async with client:
        api = WorkflowsApi(client)
        assert (await api.get_workflow("54-1"))["id"] == "54-1"
        assert (await api.get_workflow_rule("54-1", "55-2"))["id"] == "55-2"


@pytest.mark.asyncio
@respx.mock
async def test_upload_workflow(client):
    route = respx.post("https://yt.example.com/api/admin/workflows/import").mock(
        return_value=Response(200, content=b"")
    )

    async with client:
        result = await WorkflowsApi(client).upload_workflow("my-flow", b"PK\x03\x04")

    assert result == {}
    req = route.calls[0].request
    assert req.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="my-flow.zip"' in req.content
    assert b"application/zip" in req.content


@pytest.mark.asyncio
@respx.mock
async def test_delete_workflow(client):
    route = respx.delete("https://yt.example.com/api/admin/workflows/54-1").mock(
        return_value=Response(200, content=b"")
    )

    async with client:
        result = await WorkflowsApi(client).delete_workflow("54-1")

    assert result == {}
    req = route.calls[0].request
    assert req.method == "DELETE"
    assert str(req.url) == "https://yt.example.com/api/admin/workflows/54-1"
    assert not req.content
