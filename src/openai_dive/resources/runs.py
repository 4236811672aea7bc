"""Runs 资源 handle"""

from ..models.run import (
    ModifyRunParameters,
    Run,
    RunList,
    RunParameters,
    SubmitToolOutputsParameters,
)
from ..models.shared import ListParameters
from .base import Resource, api_path


class Runs(Resource):
    beta = True

    async def create(self, thread_id: str, parameters: RunParameters) -> Run:
        return await self._client.request(
            Run,
            "POST",
            api_path("threads", thread_id, "runs"),
            params=parameters,
            beta=self.beta,
        )

    async def list(self, thread_id: str, query: ListParameters | None = None) -> RunList:
        return await self._client.request(
            RunList,
            "GET",
            api_path("threads", thread_id, "runs"),
            query=query.to_query() if query else None,
            beta=self.beta,
        )

    async def retrieve(self, thread_id: str, run_id: str) -> Run:
        return await self._client.request(
            Run, "GET", api_path("threads", thread_id, "runs", run_id), beta=self.beta
        )

    async def modify(
        self, thread_id: str, run_id: str, parameters: ModifyRunParameters
    ) -> Run:
        return await self._client.request(
            Run,
            "POST",
            api_path("threads", thread_id, "runs", run_id),
            params=parameters,
            beta=self.beta,
        )

    async def submit_tool_outputs(
        self,
        thread_id: str,
        run_id: str,
        parameters: SubmitToolOutputsParameters,
    ) -> Run:
        """提交工具调用结果（run 处于 requires_action 时）"""
        return await self._client.request(
            Run,
            "POST",
            api_path("threads", thread_id, "runs", run_id, "submit_tool_outputs"),
            params=parameters,
            beta=self.beta,
        )

    async def cancel(self, thread_id: str, run_id: str) -> Run:
        """取消 in_progress 的 run"""
        return await self._client.request(
            Run,
            "POST",
            api_path("threads", thread_id, "runs", run_id, "cancel"),
            beta=self.beta,
        )
