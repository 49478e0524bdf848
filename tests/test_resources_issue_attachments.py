import json

import pytest
import respx
from httpx import Response
from youtrack_client.client import YouTrackClient
from youtrack_client.core.body import MultipartForm
from youtrack_client.resources.issue_attachments import (
    IssueAttachmentCreateParams,
    IssueAttachmentsApi,
)
from youtrack_client.youtrack import YouTrack


@pytest.fixture
def client():
    return YouTrackClient(base_url="https://yt.example.com", token="perm:mock")


@pytest.mark.asyncio
@respx.mock
async def test_list_attachments(client):
    route = respx.get("https://yt.example.com/api/issues/PRJ-7/attachments").mock(
        return_value=Response(200, json=[{"id": "8-1"}])
    )

    async with client:
        data = await IssueAttachmentsApi(client).get_issue_attachments(
            "PRJ-7", {"fields": ["id", {"author": ["login"]}], "$skip": 0}
        )

    assert data == [{"id": "8-1"}]
    url = route.calls[0].request.url
    assert url.params["fields"] == "id,author(login)"
    assert url.params["$skip"] == "0"


@pytest.mark.asyncio
@respx.mock
async def test_create_attachment(client):
    route = respx.post("https://yt.example.com/api/issues/PRJ-7/attachments").mock(
        return_value=Response(200, json=[{"id": "8-2", "name": "trace.log"}])
    )
    form = MultipartForm().append_file("file", b"trace", "trace.log", "text/plain")

    async with client:
        data = await IssueAttachmentsApi(client).create_issue_attachment(
            "PRJ-7",
            form,
            IssueAttachmentCreateParams(
                fields=["id", "name"], mute_update_notifications=True
            ),
        )

    assert data[0]["name"] == "trace.log"
    req = route.calls[0].request
    assert req.url.params["muteUpdateNotifications"] == "true"
    assert req.headers["Content-Type"].startswith("multipart/form-data")


@pytest.mark.asyncio
@respx.mock
async def test_update_and_delete_attachment(client):
    update = respx.post("https://yt.example.com/api/issues/PRJ-7/attachments/8-2").mock(
        return_value=Response(200, json={"id": "8-2", "name": "renamed.log"})
    )
    delete = respx.delete(
        "https://yt.example.com/api/issues/PRJ-7/attachments/8-2"
    ).mock(return_value=Response(200, content=b""))

    async with client:
        api = IssueAttachmentsApi(client)
        updated = await api.update_issue_attachment(
            "PRJ-7", "8-2", {"name": "renamed.log"}, {"fields": ["id", "name"]}
        )
        deleted = await api.delete_issue_attachment("PRJ-7", "8-2")

    assert updated["name"] == "renamed.log"
    assert json.loads(update.calls[0].request.content) == {"name": "renamed.log"}
    assert deleted == {}
    assert delete.called


@pytest.mark.asyncio
@respx.mock
async def test_get_attachment_through_facade():
    respx.get("https://yt.example.com/api/issues/PRJ-7/attachments/8-2").mock(
        return_value=Response(200, json={"id": "8-2"})
    )

    async with YouTrack.connect("https://yt.example.com", "perm:mock") as yt:
        data = await yt.issue_attachments.get_issue_attachment("PRJ-7", "8-2")

    assert data == {"id": "8-2"}
