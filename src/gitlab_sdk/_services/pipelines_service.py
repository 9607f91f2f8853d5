from datetime import datetime
from typing import Dict, List, Optional

from .._response import GitLabResponse
from .._utils import (
    Endpoint,
    JSONValue,
    OptionLocation,
    OptionsCollection,
    RequestSpec,
)
from ..models import Pipeline, PipelineVariable
from ..models.enums import (
    PipelineOrder,
    PipelineScope,
    PipelineSource,
    PipelineStatus,
    Sort,
)
from ._base_service import BaseService, ProjectId


class PipelinesSearchOptions(OptionsCollection):
    def __init__(
        self,
        project: ProjectId,
        *,
        scope: Optional[PipelineScope] = None,
        status: Optional[PipelineStatus] = None,
        source: Optional[PipelineSource] = None,
        ref: Optional[str] = None,
        sha: Optional[str] = None,
        yaml_errors: Optional[bool] = None,
        username: Optional[str] = None,
        updated_after: Optional[datetime] = None,
        updated_before: Optional[datetime] = None,
        order_by: Optional[PipelineOrder] = None,
        sort: Optional[Sort] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> None:
        super().__init__(page=page, per_page=per_page)
        self.declare("id", project)
        self.declare("scope", scope)
        self.declare("status", status)
        self.declare("source", source)
        self.declare("ref", ref)
        self.declare("sha", sha)
        self.declare("yaml_errors", yaml_errors)
        self.declare("username", username)
        self.declare("updated_after", updated_after)
        self.declare("updated_before", updated_before)
        self.declare("order_by", order_by)
        self.declare("sort", sort)


class PipelinesService(BaseService):
    """Service for the CI/CD pipelines of a project.

    See https://docs.gitlab.com/ee/api/pipelines.html
    """

    def list(
        self,
        project: ProjectId,
        *,
        scope: Optional[PipelineScope] = None,
        status: Optional[PipelineStatus] = None,
        source: Optional[PipelineSource] = None,
        ref: Optional[str] = None,
        sha: Optional[str] = None,
        yaml_errors: Optional[bool] = None,
        username: Optional[str] = None,
        updated_after: Optional[datetime] = None,
        updated_before: Optional[datetime] = None,
        order_by: Optional[PipelineOrder] = None,
        sort: Optional[Sort] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Pipeline]]:
        """List the pipelines of a project.

        Args:
            project (ProjectId): The ID or the ``namespace/project`` path of the project.
            scope (Optional[PipelineScope]): Scope of the pipelines.
            status (Optional[PipelineStatus]): Status of the pipelines.
            source (Optional[PipelineSource]): How the pipelines were triggered.
            ref (Optional[str]): Branch or tag of the pipelines.
            sha (Optional[str]): Commit SHA of the pipelines.
            yaml_errors (Optional[bool]): Only pipelines with an invalid configuration.
            username (Optional[str]): Username of the user who triggered the pipelines.
            updated_after (Optional[datetime]): Only pipelines updated after this date.
            updated_before (Optional[datetime]): Only pipelines updated before this date.
            order_by (Optional[PipelineOrder]): Field to order the pipelines by.
            sort (Optional[Sort]): Sort direction.
            page (Optional[int]): Page to retrieve.
            per_page (Optional[int]): Number of pipelines per page.

        Returns:
            GitLabResponse[List[Pipeline]]: A page of pipelines.
        """
        spec = self._list_spec(
            project,
            scope=scope,
            status=status,
            source=source,
            ref=ref,
            sha=sha,
            yaml_errors=yaml_errors,
            username=username,
            updated_after=updated_after,
            updated_before=updated_before,
            order_by=order_by,
            sort=sort,
            page=page,
            per_page=per_page,
        )
        return self.request(spec, List[Pipeline])

    async def list_async(
        self,
        project: ProjectId,
        *,
        scope: Optional[PipelineScope] = None,
        status: Optional[PipelineStatus] = None,
        source: Optional[PipelineSource] = None,
        ref: Optional[str] = None,
        sha: Optional[str] = None,
        yaml_errors: Optional[bool] = None,
        username: Optional[str] = None,
        updated_after: Optional[datetime] = None,
        updated_before: Optional[datetime] = None,
        order_by: Optional[PipelineOrder] = None,
        sort: Optional[Sort] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Pipeline]]:
        """Asynchronously list the pipelines of a project."""
        spec = self._list_spec(
            project,
            scope=scope,
            status=status,
            source=source,
            ref=ref,
            sha=sha,
            yaml_errors=yaml_errors,
            username=username,
            updated_after=updated_after,
            updated_before=updated_before,
            order_by=order_by,
            sort=sort,
            page=page,
            per_page=per_page,
        )
        return await self.request_async(spec, List[Pipeline])

    def get(self, project: ProjectId, pipeline_id: int) -> GitLabResponse[Pipeline]:
        """Get a single pipeline."""
        spec = self._pipeline_spec(
            "GET", "/projects/{id}/pipelines/{pipeline_id}", project, pipeline_id
        )
        return self.request(spec, Pipeline)

    async def get_async(
        self, project: ProjectId, pipeline_id: int
    ) -> GitLabResponse[Pipeline]:
        spec = self._pipeline_spec(
            "GET", "/projects/{id}/pipelines/{pipeline_id}", project, pipeline_id
        )
        return await self.request_async(spec, Pipeline)

    def variables(
        self, project: ProjectId, pipeline_id: int
    ) -> GitLabResponse[List[PipelineVariable]]:
        """Get the variables a pipeline was run with."""
        spec = self._pipeline_spec(
            "GET",
            "/projects/{id}/pipelines/{pipeline_id}/variables",
            project,
            pipeline_id,
        )
        return self.request(spec, List[PipelineVariable])

    async def variables_async(
        self, project: ProjectId, pipeline_id: int
    ) -> GitLabResponse[List[PipelineVariable]]:
        spec = self._pipeline_spec(
            "GET",
            "/projects/{id}/pipelines/{pipeline_id}/variables",
            project,
            pipeline_id,
        )
        return await self.request_async(spec, List[PipelineVariable])

    def create(
        self,
        project: ProjectId,
        ref: str,
        *,
        variables: Optional[List[Dict[str, JSONValue]]] = None,
    ) -> GitLabResponse[Pipeline]:
        """Create a new pipeline.

        Args:
            project (ProjectId): The ID or path of the project.
            ref (str): Branch or tag to run the pipeline on.
            variables (Optional[List[Dict[str, JSONValue]]]): Variables available in
                the pipeline, e.g. ``[{"key": "ENV", "value": "prod"}]``.
                An optional ``variable_type`` of ``env_var`` or ``file`` may be given.

        Returns:
            GitLabResponse[Pipeline]: The created pipeline.

        Examples:
            ```python
            from gitlab_sdk import GitLab

            gitlab = GitLab()

            pipeline = gitlab.pipelines.create(
                "group/project",
                "main",
                variables=[{"key": "DEPLOY", "value": "true"}],
            ).decode()
            ```
        """
        return self.request(self._create_spec(project, ref, variables), Pipeline)

    async def create_async(
        self,
        project: ProjectId,
        ref: str,
        *,
        variables: Optional[List[Dict[str, JSONValue]]] = None,
    ) -> GitLabResponse[Pipeline]:
        """Asynchronously create a new pipeline."""
        return await self.request_async(
            self._create_spec(project, ref, variables), Pipeline
        )

    def retry(self, project: ProjectId, pipeline_id: int) -> GitLabResponse[Pipeline]:
        """Retry the failed or canceled jobs of a pipeline."""
        spec = self._pipeline_spec(
            "POST", "/projects/{id}/pipelines/{pipeline_id}/retry", project, pipeline_id
        )
        return self.request(spec, Pipeline)

    async def retry_async(
        self, project: ProjectId, pipeline_id: int
    ) -> GitLabResponse[Pipeline]:
        spec = self._pipeline_spec(
            "POST", "/projects/{id}/pipelines/{pipeline_id}/retry", project, pipeline_id
        )
        return await self.request_async(spec, Pipeline)

    def cancel(self, project: ProjectId, pipeline_id: int) -> GitLabResponse[Pipeline]:
        """Cancel the running jobs of a pipeline."""
        spec = self._pipeline_spec(
            "POST",
            "/projects/{id}/pipelines/{pipeline_id}/cancel",
            project,
            pipeline_id,
        )
        return self.request(spec, Pipeline)

    async def cancel_async(
        self, project: ProjectId, pipeline_id: int
    ) -> GitLabResponse[Pipeline]:
        spec = self._pipeline_spec(
            "POST",
            "/projects/{id}/pipelines/{pipeline_id}/cancel",
            project,
            pipeline_id,
        )
        return await self.request_async(spec, Pipeline)

    def _list_spec(self, project: ProjectId, **options) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projects/{id}/pipelines"),
            options=PipelinesSearchOptions(project, **options),
        )

    def _pipeline_spec(
        self, method: str, endpoint: str, project: ProjectId, pipeline_id: int
    ) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("pipeline_id", pipeline_id)
        return RequestSpec(method=method, endpoint=Endpoint(endpoint), options=options)

    def _create_spec(
        self,
        project: ProjectId,
        ref: str,
        variables: Optional[List[Dict[str, JSONValue]]],
    ) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("ref", ref)
        options.declare("variables", variables, OptionLocation.JSON_BODY)
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/projects/{id}/pipeline"),
            options=options,
        )
