"""
Work items across issues.
https://www.jetbrains.com/help/youtrack/devportal/resource-api-workItems.html
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import Field

from ..core.fields import fields
from ..core.params import FieldsParam, ListParams, QueryParam
from ..core.query import query_params
from ..core.request import RequestBuilder
from .common import ResourceApi


class WorkItemsParams(FieldsParam, ListParams, QueryParam):
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    author: Optional[Union[str, List[str]]] = None
    creator: Optional[Union[str, List[str]]] = None
    start: Optional[int] = None
    end: Optional[int] = None
    created_start: Optional[int] = Field(default=None, alias="createdStart")
    created_end: Optional[int] = Field(default=None, alias="createdEnd")
    updated_start: Optional[int] = Field(default=None, alias="updatedStart")
    updated_end: Optional[int] = Field(default=None, alias="updatedEnd")


WORK_ITEMS_QUERY = {
    "fields": fields,
    **query_params(
        "$skip",
        "$top",
        "query",
        "startDate",
        "endDate",
        "author",
        "creator",
        "start",
        "end",
        "createdStart",
        "createdEnd",
        "updatedStart",
        "updatedEnd",
    ),
}


class WorkItemsApi(ResourceApi):
    tool = "work_items"

    async def get_work_items(
        self, params: Union[WorkItemsParams, Mapping[str, Any], None] = None
    ) -> List[Dict[str, Any]]:
        """
        Work items of all issues matching `query`; every work item when no query is given.
        Dates are YYYY-MM-DD; start/end/created*/updated* are epoch milliseconds.
        author/creator accept a login, id or "me" (repeat via a list).
        """
        return await self.fetch(
            RequestBuilder("api/workItems", WORK_ITEMS_QUERY, params).get()
        )

    async def get_work_item(
        self, item_id: str, params: Union[FieldsParam, Mapping[str, Any], None] = None
    ) -> Dict[str, Any]:
        return await self.fetch(
            RequestBuilder(
                "api/workItems/:itemId",
                {"fields": fields},
                params,
                path_params={"itemId": item_id},
            ).get()
        )


__all__ = ["WorkItemsParams", "WorkItemsApi", "WORK_ITEMS_QUERY"]
