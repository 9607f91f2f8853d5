from typing import Any, List, Optional

from .._response import GitLabResponse
from .._utils import Endpoint, OptionsCollection, RequestSpec
from ..models import Branch
from ._base_service import BaseService, ProjectId


class BranchesService(BaseService):
    """Service for the repository branches of a project.

    See https://docs.gitlab.com/ee/api/branches.html
    """

    def list(
        self,
        project: ProjectId,
        *,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Branch]]:
        """List the branches of a project.

        Args:
            project (ProjectId): The ID or the ``namespace/project`` path of the project.
            search (Optional[str]): Only branches containing this string. ``^term``
                and ``term$`` match names beginning and ending with ``term``.
            page (Optional[int]): Page to retrieve.
            per_page (Optional[int]): Number of branches per page.

        Returns:
            GitLabResponse[List[Branch]]: A page of branches.
        """
        spec = self._list_spec(project, search=search, page=page, per_page=per_page)
        return self.request(spec, List[Branch])

    async def list_async(
        self,
        project: ProjectId,
        *,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Branch]]:
        """Asynchronously list the branches of a project."""
        spec = self._list_spec(project, search=search, page=page, per_page=per_page)
        return await self.request_async(spec, List[Branch])

    def get(self, project: ProjectId, branch: str) -> GitLabResponse[Branch]:
        """Get a single branch. Slashes in the branch name are percent-encoded."""
        return self.request(self._branch_spec("GET", project, branch), Branch)

    async def get_async(self, project: ProjectId, branch: str) -> GitLabResponse[Branch]:
        return await self.request_async(
            self._branch_spec("GET", project, branch), Branch
        )

    def create(self, project: ProjectId, branch: str, ref: str) -> GitLabResponse[Branch]:
        """Create a branch.

        Args:
            project (ProjectId): The ID or path of the project.
            branch (str): Name of the new branch.
            ref (str): Branch name or commit SHA to create the branch from.

        Returns:
            GitLabResponse[Branch]: The created branch.
        """
        return self.request(self._create_spec(project, branch, ref), Branch)

    async def create_async(
        self, project: ProjectId, branch: str, ref: str
    ) -> GitLabResponse[Branch]:
        """Asynchronously create a branch."""
        return await self.request_async(self._create_spec(project, branch, ref), Branch)

    def delete(self, project: ProjectId, branch: str) -> GitLabResponse[Any]:
        """Delete a branch. The server answers with an empty body."""
        return self.request(self._branch_spec("DELETE", project, branch))

    async def delete_async(self, project: ProjectId, branch: str) -> GitLabResponse[Any]:
        return await self.request_async(self._branch_spec("DELETE", project, branch))

    def delete_merged(self, project: ProjectId) -> GitLabResponse[Any]:
        """Delete every branch merged into the default branch.

        Protected branches are kept.
        """
        return self.request(self._delete_merged_spec(project))

    async def delete_merged_async(self, project: ProjectId) -> GitLabResponse[Any]:
        return await self.request_async(self._delete_merged_spec(project))

    def _list_spec(
        self,
        project: ProjectId,
        *,
        search: Optional[str],
        page: Optional[int],
        per_page: Optional[int],
    ) -> RequestSpec:
        options = OptionsCollection(page=page, per_page=per_page)
        options.declare("id", project)
        options.declare("search", search)
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projects/{id}/repository/branches"),
            options=options,
        )

    def _branch_spec(self, method: str, project: ProjectId, branch: str) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("branch", branch)
        return RequestSpec(
            method=method,
            endpoint=Endpoint("/projects/{id}/repository/branches/{branch}"),
            options=options,
        )

    def _create_spec(self, project: ProjectId, branch: str, ref: str) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("branch", branch)
        options.declare("ref", ref)
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/projects/{id}/repository/branches"),
            options=options,
        )

    def _delete_merged_spec(self, project: ProjectId) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/projects/{id}/repository/merged_branches"),
            options=options,
        )
