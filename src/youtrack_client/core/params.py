"""
Parameter records for YouTrack endpoints.

Python attribute names are snake_case; aliases carry the wire names
(`$top`, `customFields`, ...). Endpoint records compose these by inheritance
and are passed to RequestBuilder in place of a plain dict.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    def to_query(self) -> Dict[str, Any]:
        """Wire-named values that were actually supplied."""
        return self.model_dump(by_alias=True, exclude_none=True)

class FieldsParam(BaseParams):
    fields: Optional[Union[str, List[Any]]] = None

class ListParams(BaseParams):
    skip: Optional[int] = Field(default=None, alias="$skip", ge=0)
    top: Optional[int] = Field(default=None, alias="$top", ge=-1)

class CustomFieldsParam(BaseParams):
    custom_fields: Optional[List[str]] = Field(default=None, alias="customFields")

class QueryParam(BaseParams):
    query: Optional[str] = None

class MuteUpdateNotificationsParam(BaseParams):
    mute_update_notifications: Optional[bool] = Field(
        default=None, alias="muteUpdateNotifications"
    )

__all__ = [
    "BaseParams",
    "FieldsParam",
    "ListParams",
    "CustomFieldsParam",
    "QueryParam",
    "MuteUpdateNotificationsParam",
]
