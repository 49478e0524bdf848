from __future__ import annotations

from typing import Any, Dict, List, Mapping, Union

from ..core.body import MultipartForm
from ..core.fields import fields
from ..core.params import FieldsParam, ListParams, MuteUpdateNotificationsParam
from ..core.query import query_params
from ..core.request import RequestBuilder
from .common import ResourceApi


class IssueAttachmentsListParams(FieldsParam, ListParams):
    pass


class IssueAttachmentCreateParams(FieldsParam, MuteUpdateNotificationsParam):
    pass


ATTACHMENT_PATH = "api/issues/:issueId/attachments/:attachmentId"


class IssueAttachmentsApi(ResourceApi):
    tool = "issue_attachments"

    async def get_issue_attachments(
        self,
        issue_id: str,
        params: Union[IssueAttachmentsListParams, Mapping[str, Any], None] = None,
    ) -> List[Dict[str, Any]]:
        return await self.fetch(
            RequestBuilder(
                "api/issues/:issueId/attachments",
                {"fields": fields, **query_params("$skip", "$top")},
                params,
                path_params={"issueId": issue_id},
            ).get()
        )

    async def create_issue_attachment(
        self,
        issue_id: str,
        form: MultipartForm,
        params: Union[IssueAttachmentCreateParams, Mapping[str, Any], None] = None,
    ) -> List[Dict[str, Any]]:
        """Upload the files in `form`; YouTrack answers with the created attachments."""
        return await self.fetch(
            RequestBuilder(
                "api/issues/:issueId/attachments",
                {"fields": fields, "muteUpdateNotifications": "boolean"},
                params,
                path_params={"issueId": issue_id},
            ).post_file(form)
        )

    async def get_issue_attachment(
        self,
        issue_id: str,
        attachment_id: str,
        params: Union[FieldsParam, Mapping[str, Any], None] = None,
    ) -> Dict[str, Any]:
        return await self.fetch(
            RequestBuilder(
                ATTACHMENT_PATH,
                {"fields": fields},
                params,
                path_params={"issueId": issue_id, "attachmentId": attachment_id},
            ).get()
        )

    async def update_issue_attachment(
        self,
        issue_id: str,
        attachment_id: str,
        body: Mapping[str, Any],
        params: Union[FieldsParam, Mapping[str, Any], None] = None,
    ) -> Dict[str, Any]:
        return await self.fetch(
            RequestBuilder(
                ATTACHMENT_PATH,
                {"fields": fields},
                params,
                path_params={"issueId": issue_id, "attachmentId": attachment_id},
            ).post(body)
        )

    async def delete_issue_attachment(
        self,
        issue_id: str,
        attachment_id: str,
        params: Union[FieldsParam, Mapping[str, Any], None] = None,
    ) -> Dict[str, Any]:
        return await self.fetch(
            RequestBuilder(
                ATTACHMENT_PATH,
                {"fields": fields},
                params,
                path_params={"issueId": issue_id, "attachmentId": attachment_id},
            ).delete()
        )


__all__ = [
    "IssueAttachmentsListParams",
    "IssueAttachmentCreateParams",
    "IssueAttachmentsApi",
]
