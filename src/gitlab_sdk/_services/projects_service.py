from datetime import datetime
from os import PathLike
from typing import List, Optional, Union

from .._response import GitLabResponse
from .._utils import Endpoint, OptionLocation, OptionsCollection, RequestSpec
from ..models import Project, UploadedFile
from ..models.enums import AccessLevel, ProjectOrder, ProjectVisibility, Sort
from ._base_service import BaseService, ProjectId


class ProjectsSearchOptions(OptionsCollection):
    """Filters of the projects listing."""

    def __init__(
        self,
        *,
        archived: Optional[bool] = None,
        id_after: Optional[int] = None,
        id_before: Optional[int] = None,
        last_activity_after: Optional[datetime] = None,
        last_activity_before: Optional[datetime] = None,
        membership: Optional[bool] = None,
        min_access_level: Optional[AccessLevel] = None,
        order_by: Optional[ProjectOrder] = None,
        owned: Optional[bool] = None,
        search: Optional[str] = None,
        simple: Optional[bool] = None,
        sort: Optional[Sort] = None,
        starred: Optional[bool] = None,
        statistics: Optional[bool] = None,
        topic: Optional[List[str]] = None,
        visibility: Optional[ProjectVisibility] = None,
        with_issues_enabled: Optional[bool] = None,
        with_merge_requests_enabled: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> None:
        super().__init__(page=page, per_page=per_page)
        self.declare("archived", archived)
        self.declare("id_after", id_after)
        self.declare("id_before", id_before)
        self.declare("last_activity_after", last_activity_after)
        self.declare("last_activity_before", last_activity_before)
        self.declare("membership", membership)
        self.declare("min_access_level", min_access_level)
        self.declare("order_by", order_by)
        self.declare("owned", owned)
        self.declare("search", search)
        self.declare("simple", simple)
        self.declare("sort", sort)
        self.declare("starred", starred)
        self.declare("statistics", statistics)
        self.declare("topic", topic)
        self.declare("visibility", visibility)
        self.declare("with_issues_enabled", with_issues_enabled)
        self.declare("with_merge_requests_enabled", with_merge_requests_enabled)


class ProjectsService(BaseService):
    """Service for GitLab projects.

    See https://docs.gitlab.com/ee/api/projects.html
    """

    def list(
        self,
        *,
        archived: Optional[bool] = None,
        id_after: Optional[int] = None,
        id_before: Optional[int] = None,
        last_activity_after: Optional[datetime] = None,
        last_activity_before: Optional[datetime] = None,
        membership: Optional[bool] = None,
        min_access_level: Optional[AccessLevel] = None,
        order_by: Optional[ProjectOrder] = None,
        owned: Optional[bool] = None,
        search: Optional[str] = None,
        simple: Optional[bool] = None,
        sort: Optional[Sort] = None,
        starred: Optional[bool] = None,
        statistics: Optional[bool] = None,
        topic: Optional[List[str]] = None,
        visibility: Optional[ProjectVisibility] = None,
        with_issues_enabled: Optional[bool] = None,
        with_merge_requests_enabled: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Project]]:
        """List the projects visible to the authenticated user.

        Every argument is an optional filter; ``topic`` is sent as an array
        (``topic[]=a&topic[]=b``).

        Returns:
            GitLabResponse[List[Project]]: A page of projects.

        Examples:
            ```python
            from gitlab_sdk import GitLab, ProjectOrder

            gitlab = GitLab()

            response = gitlab.projects.list(owned=True, order_by=ProjectOrder.NAME)
            projects = [
                project
                for page in [response, *response.next_pages()]
                for project in page.decode()
            ]
            ```
        """
        spec = self._list_spec(
            archived=archived,
            id_after=id_after,
            id_before=id_before,
            last_activity_after=last_activity_after,
            last_activity_before=last_activity_before,
            membership=membership,
            min_access_level=min_access_level,
            order_by=order_by,
            owned=owned,
            search=search,
            simple=simple,
            sort=sort,
            starred=starred,
            statistics=statistics,
            topic=topic,
            visibility=visibility,
            with_issues_enabled=with_issues_enabled,
            with_merge_requests_enabled=with_merge_requests_enabled,
            page=page,
            per_page=per_page,
        )
        return self.request(spec, List[Project])

    async def list_async(
        self,
        *,
        archived: Optional[bool] = None,
        id_after: Optional[int] = None,
        id_before: Optional[int] = None,
        last_activity_after: Optional[datetime] = None,
        last_activity_before: Optional[datetime] = None,
        membership: Optional[bool] = None,
        min_access_level: Optional[AccessLevel] = None,
        order_by: Optional[ProjectOrder] = None,
        owned: Optional[bool] = None,
        search: Optional[str] = None,
        simple: Optional[bool] = None,
        sort: Optional[Sort] = None,
        starred: Optional[bool] = None,
        statistics: Optional[bool] = None,
        topic: Optional[List[str]] = None,
        visibility: Optional[ProjectVisibility] = None,
        with_issues_enabled: Optional[bool] = None,
        with_merge_requests_enabled: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Project]]:
        """Asynchronously list the projects visible to the authenticated user."""
        spec = self._list_spec(
            archived=archived,
            id_after=id_after,
            id_before=id_before,
            last_activity_after=last_activity_after,
            last_activity_before=last_activity_before,
            membership=membership,
            min_access_level=min_access_level,
            order_by=order_by,
            owned=owned,
            search=search,
            simple=simple,
            sort=sort,
            starred=starred,
            statistics=statistics,
            topic=topic,
            visibility=visibility,
            with_issues_enabled=with_issues_enabled,
            with_merge_requests_enabled=with_merge_requests_enabled,
            page=page,
            per_page=per_page,
        )
        return await self.request_async(spec, List[Project])

    def get(
        self,
        project: ProjectId,
        *,
        statistics: Optional[bool] = None,
        license: Optional[bool] = None,
        with_custom_attributes: Optional[bool] = None,
    ) -> GitLabResponse[Project]:
        """Get a single project."""
        spec = self._get_spec(
            project,
            statistics=statistics,
            license=license,
            with_custom_attributes=with_custom_attributes,
        )
        return self.request(spec, Project)

    async def get_async(
        self,
        project: ProjectId,
        *,
        statistics: Optional[bool] = None,
        license: Optional[bool] = None,
        with_custom_attributes: Optional[bool] = None,
    ) -> GitLabResponse[Project]:
        spec = self._get_spec(
            project,
            statistics=statistics,
            license=license,
            with_custom_attributes=with_custom_attributes,
        )
        return await self.request_async(spec, Project)

    def upload(
        self, project: ProjectId, file: Union[str, PathLike]
    ) -> GitLabResponse[UploadedFile]:
        """Upload a file to the project.

        The file is sent as the ``file`` part of a multipart form and can then
        be referenced in issues, merge requests and comments.

        Args:
            project (ProjectId): The ID or path of the project.
            file (Union[str, PathLike]): Path of the local file to upload.

        Returns:
            GitLabResponse[UploadedFile]: The uploaded file and its markdown.
        """
        return self.request(self._upload_spec(project, file), UploadedFile)

    async def upload_async(
        self, project: ProjectId, file: Union[str, PathLike]
    ) -> GitLabResponse[UploadedFile]:
        """Asynchronously upload a file to the project."""
        return await self.request_async(self._upload_spec(project, file), UploadedFile)

    def star(self, project: ProjectId) -> GitLabResponse[Project]:
        """Star a project."""
        return self.request(self._action_spec("/projects/{id}/star", project), Project)

    async def star_async(self, project: ProjectId) -> GitLabResponse[Project]:
        return await self.request_async(
            self._action_spec("/projects/{id}/star", project), Project
        )

    def unstar(self, project: ProjectId) -> GitLabResponse[Project]:
        """Unstar a project."""
        return self.request(
            self._action_spec("/projects/{id}/unstar", project), Project
        )

    async def unstar_async(self, project: ProjectId) -> GitLabResponse[Project]:
        return await self.request_async(
            self._action_spec("/projects/{id}/unstar", project), Project
        )

    def _list_spec(self, **options) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projects"),
            options=ProjectsSearchOptions(**options),
        )

    def _get_spec(
        self,
        project: ProjectId,
        *,
        statistics: Optional[bool],
        license: Optional[bool],
        with_custom_attributes: Optional[bool],
    ) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("statistics", statistics)
        options.declare("license", license)
        options.declare("with_custom_attributes", with_custom_attributes)
        return RequestSpec(
            method="GET", endpoint=Endpoint("/projects/{id}"), options=options
        )

    def _upload_spec(self, project: ProjectId, file: Union[str, PathLike]) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("file", file, OptionLocation.FORM_FILE)
        return RequestSpec(
            method="POST", endpoint=Endpoint("/projects/{id}/uploads"), options=options
        )

    def _action_spec(self, endpoint: str, project: ProjectId) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        return RequestSpec(method="POST", endpoint=Endpoint(endpoint), options=options)
