"""Thin YouTrack resource wrappers built on youtrack_client.core."""

from .common import ResourceApi
from .issue_attachments import (
    IssueAttachmentCreateParams,
    IssueAttachmentsApi,
    IssueAttachmentsListParams,
)
from .work_items import WorkItemsApi, WorkItemsParams
from .workflows import WorkflowRuleParams, WorkflowsApi, WorkflowsParams

__all__ = [
    "ResourceApi",
    "IssueAttachmentsApi",
    "IssueAttachmentsListParams",
    "IssueAttachmentCreateParams",
    "WorkItemsApi",
    "WorkItemsParams",
    "WorkflowsApi",
    "WorkflowsParams",
    "WorkflowRuleParams",
]
