from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import Field

from ..core.body import MultipartForm
from ..core.fields import fields
from ..core.params import FieldsParam, ListParams, QueryParam
from ..core.query import query_params
from ..core.request import RequestBuilder
from .common import ResourceApi

ParamsLike = Union[FieldsParam, Mapping[str, Any], None]


class WorkflowsParams(FieldsParam, ListParams, QueryParam):
    pass


class WorkflowRuleParams(FieldsParam, QueryParam):
    top: Optional[int] = Field(default=None, alias="$top", ge=-1)


class WorkflowsApi(ResourceApi):
    """Admin access to workflows, their rules and rule logs."""

    tool = "workflows"

    async def get_workflows(
        self, params: Union[WorkflowsParams, Mapping[str, Any], None] = None
    ) -> List[Dict[str, Any]]:
        """`query` filters by language, e.g. "language:JS,mps"."""
        return await self.fetch(
            RequestBuilder(
                "api/admin/workflows",
                {"fields": fields, **query_params("$top", "$skip"), "query": "string"},
                params,
            ).get()
        )

    async def get_workflow(
        self, workflow_id: str, params: ParamsLike = None
    ) -> Dict[str, Any]:
        return await self.fetch(
            RequestBuilder(
                "api/admin/workflows/:workflowId",
                {"fields": fields},
                params,
                path_params={"workflowId": workflow_id},
            ).get()
        )

    async def get_workflow_rule(
        self,
        workflow_id: str,
        rule_id: str,
        params: Union[WorkflowRuleParams, Mapping[str, Any], None] = None,
    ) -> Dict[str, Any]:
        return await self.fetch(
            RequestBuilder(
                "api/admin/workflows/:workflowId/rules/:ruleId",
                {"fields": fields, "$top": "number", "query": "string"},
                params,
                path_params={"workflowId": workflow_id, "ruleId": rule_id},
            ).get()
        )

    async def get_workflow_logs(
        self,
        workflow_id: str,
        rule_id: str,
        params: Union[WorkflowRuleParams, Mapping[str, Any], None] = None,
    ) -> List[Dict[str, Any]]:
        """`query` is a timestamp; only newer log entries are returned."""
        return await self.fetch(
            RequestBuilder(
                "api/admin/workflows/:workflowId/rules/:ruleId/logs",
                {"fields": fields, "$top": "number", "query": "string"},
                params,
                path_params={"workflowId": workflow_id, "ruleId": rule_id},
            ).get()
        )

    async def upload_workflow(self, workflow_name: str, content: bytes) -> Any:
        """Import a workflow from zip archive bytes."""
        form = MultipartForm().append_file(
            "file", content, f"{workflow_name}.zip", "application/zip"
        )
        return await self.fetch(
            RequestBuilder("api/admin/workflows/import", {}).post_file(form)
        )

    async def delete_workflow(self, workflow_id: str) -> Any:
        return await self.fetch(
            RequestBuilder(
                "api/admin/workflows/:workflowId",
                {},
                path_params={"workflowId": workflow_id},
            ).delete()
        )


__all__ = ["WorkflowsParams", "WorkflowRuleParams", "WorkflowsApi"]
