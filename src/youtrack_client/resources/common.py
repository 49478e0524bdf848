from __future__ import annotations

from typing import Any, Optional

from ..client import YouTrackClient
from ..core.request import RequestDescriptor


class ResourceApi:
    """Base for resource wrappers: build descriptors with the core, send them here."""

    tool: Optional[str] = None

    def __init__(self, client: YouTrackClient):
        self.client = client

    async def fetch(self, descriptor: RequestDescriptor) -> Any:
        return await self.client.fetch(descriptor, tool=self.tool)


__all__ = ["ResourceApi"]
