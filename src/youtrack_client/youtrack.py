from __future__ import annotations

from .client import YouTrackClient
from .resources import IssueAttachmentsApi, WorkflowsApi, WorkItemsApi


class YouTrack:
    """Resource wrappers sharing one YouTrackClient."""

    def __init__(self, client: YouTrackClient):
        self.client = client
        self.issue_attachments = IssueAttachmentsApi(client)
        self.work_items = WorkItemsApi(client)
        self.workflows = WorkflowsApi(client)

    @classmethod
    def connect(cls, base_url: str, token: str, **kwargs) -> "YouTrack":
        return cls(YouTrackClient(base_url=base_url, token=token, **kwargs))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "YouTrack":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["YouTrack"]
