from datetime import datetime
from typing import List, Optional

from .._response import GitLabResponse
from .._utils import Endpoint, OptionsCollection, RequestSpec
from ..models import Commit, CommitComment, CommitDiff, CommitRef
from ..models.enums import CommitOrder, CommitRefType
from ._base_service import BaseService, ProjectId


class CommitsListOptions(OptionsCollection):
    """Filters of the repository commits listing."""

    def __init__(
        self,
        project: ProjectId,
        *,
        ref_name: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        path: Optional[str] = None,
        all: Optional[bool] = None,
        with_stats: Optional[bool] = None,
        first_parent: Optional[bool] = None,
        order: Optional[CommitOrder] = None,
        trailers: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> None:
        super().__init__(page=page, per_page=per_page)
        self.declare("id", project)
        self.declare("ref_name", ref_name)
        self.declare("since", since)
        self.declare("until", until)
        self.declare("path", path)
        self.declare("all", all)
        self.declare("with_stats", with_stats)
        self.declare("first_parent", first_parent)
        self.declare("order", order)
        self.declare("trailers", trailers)


class CherryPickOptions(OptionsCollection):
    def __init__(
        self,
        project: ProjectId,
        sha: str,
        branch: str,
        *,
        dry_run: Optional[bool] = None,
        message: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.declare("id", project)
        self.declare("sha", sha)
        self.declare("branch", branch)
        self.declare("dry_run", dry_run)
        self.declare("message", message)


class CommitsService(BaseService):
    """Service for the repository commits of a project.

    See https://docs.gitlab.com/ee/api/commits.html
    """

    def list(
        self,
        project: ProjectId,
        *,
        ref_name: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        path: Optional[str] = None,
        all: Optional[bool] = None,
        with_stats: Optional[bool] = None,
        first_parent: Optional[bool] = None,
        order: Optional[CommitOrder] = None,
        trailers: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Commit]]:
        """List the commits of a project.

        Args:
            project (ProjectId): The ID or the ``namespace/project`` path of the project.
            ref_name (Optional[str]): Branch, tag or revision range to list. Defaults to the default branch.
            since (Optional[datetime]): Only commits after or on this date.
            until (Optional[datetime]): Only commits before or on this date.
            path (Optional[str]): Only commits touching this file path.
            all (Optional[bool]): Retrieve every commit in the repository.
            with_stats (Optional[bool]): Include the stats of every commit.
            first_parent (Optional[bool]): Follow only the first parent on merge commits.
            order (Optional[CommitOrder]): Order of the listed commits.
            trailers (Optional[bool]): Parse and include Git trailers.
            page (Optional[int]): Page to retrieve.
            per_page (Optional[int]): Number of commits per page.

        Returns:
            GitLabResponse[List[Commit]]: A page of commits.

        Examples:
            ```python
            from gitlab_sdk import GitLab

            gitlab = GitLab()

            response = gitlab.commits.list("group/project", ref_name="main")
            for commit in response.decode():
                print(commit.short_id, commit.title)
            ```
        """
        spec = self._list_spec(
            project,
            ref_name=ref_name,
            since=since,
            until=until,
            path=path,
            all=all,
            with_stats=with_stats,
            first_parent=first_parent,
            order=order,
            trailers=trailers,
            page=page,
            per_page=per_page,
        )
        return self.request(spec, List[Commit])

    async def list_async(
        self,
        project: ProjectId,
        *,
        ref_name: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        path: Optional[str] = None,
        all: Optional[bool] = None,
        with_stats: Optional[bool] = None,
        first_parent: Optional[bool] = None,
        order: Optional[CommitOrder] = None,
        trailers: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[Commit]]:
        """Asynchronously list the commits of a project."""
        spec = self._list_spec(
            project,
            ref_name=ref_name,
            since=since,
            until=until,
            path=path,
            all=all,
            with_stats=with_stats,
            first_parent=first_parent,
            order=order,
            trailers=trailers,
            page=page,
            per_page=per_page,
        )
        return await self.request_async(spec, List[Commit])

    def get(
        self, project: ProjectId, sha: str, *, stats: Optional[bool] = None
    ) -> GitLabResponse[Commit]:
        """Get a single commit.

        Args:
            project (ProjectId): The ID or path of the project.
            sha (str): Commit hash, branch or tag name.
            stats (Optional[bool]): Include the commit stats.

        Returns:
            GitLabResponse[Commit]: The commit.
        """
        return self.request(self._get_spec(project, sha, stats=stats), Commit)

    async def get_async(
        self, project: ProjectId, sha: str, *, stats: Optional[bool] = None
    ) -> GitLabResponse[Commit]:
        """Asynchronously get a single commit."""
        return await self.request_async(
            self._get_spec(project, sha, stats=stats), Commit
        )

    def refs(
        self,
        project: ProjectId,
        sha: str,
        *,
        type: Optional[CommitRefType] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[CommitRef]]:
        """List the branches and tags a commit is pushed to.

        Args:
            project (ProjectId): The ID or path of the project.
            sha (str): The commit hash.
            type (Optional[CommitRefType]): Restrict to branches or tags. All refs by default.
            page (Optional[int]): Page to retrieve.
            per_page (Optional[int]): Number of refs per page.

        Returns:
            GitLabResponse[List[CommitRef]]: A page of refs.
        """
        spec = self._refs_spec(project, sha, type=type, page=page, per_page=per_page)
        return self.request(spec, List[CommitRef])

    async def refs_async(
        self,
        project: ProjectId,
        sha: str,
        *,
        type: Optional[CommitRefType] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[CommitRef]]:
        """Asynchronously list the branches and tags a commit is pushed to."""
        spec = self._refs_spec(project, sha, type=type, page=page, per_page=per_page)
        return await self.request_async(spec, List[CommitRef])

    def diff(
        self,
        project: ProjectId,
        sha: str,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[CommitDiff]]:
        """Get the diff of a commit."""
        spec = self._sha_spec(
            "/projects/{id}/repository/commits/{sha}/diff",
            project,
            sha,
            page=page,
            per_page=per_page,
        )
        return self.request(spec, List[CommitDiff])

    async def diff_async(
        self,
        project: ProjectId,
        sha: str,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[CommitDiff]]:
        spec = self._sha_spec(
            "/projects/{id}/repository/commits/{sha}/diff",
            project,
            sha,
            page=page,
            per_page=per_page,
        )
        return await self.request_async(spec, List[CommitDiff])

    def comments(
        self,
        project: ProjectId,
        sha: str,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[CommitComment]]:
        """Get the comments of a commit."""
        spec = self._sha_spec(
            "/projects/{id}/repository/commits/{sha}/comments",
            project,
            sha,
            page=page,
            per_page=per_page,
        )
        return self.request(spec, List[CommitComment])

    async def comments_async(
        self,
        project: ProjectId,
        sha: str,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[CommitComment]]:
        spec = self._sha_spec(
            "/projects/{id}/repository/commits/{sha}/comments",
            project,
            sha,
            page=page,
            per_page=per_page,
        )
        return await self.request_async(spec, List[CommitComment])

    def cherry_pick(
        self,
        project: ProjectId,
        sha: str,
        branch: str,
        *,
        dry_run: Optional[bool] = None,
        message: Optional[str] = None,
    ) -> GitLabResponse[Commit]:
        """Cherry-pick a commit into a branch.

        Args:
            project (ProjectId): The ID or path of the project.
            sha (str): The commit hash.
            branch (str): The target branch.
            dry_run (Optional[bool]): Check the cherry-pick without committing it.
            message (Optional[str]): Custom commit message for the new commit.

        Returns:
            GitLabResponse[Commit]: The created commit.
        """
        spec = self._cherry_pick_spec(
            project, sha, branch, dry_run=dry_run, message=message
        )
        return self.request(spec, Commit)

    async def cherry_pick_async(
        self,
        project: ProjectId,
        sha: str,
        branch: str,
        *,
        dry_run: Optional[bool] = None,
        message: Optional[str] = None,
    ) -> GitLabResponse[Commit]:
        """Asynchronously cherry-pick a commit into a branch."""
        spec = self._cherry_pick_spec(
            project, sha, branch, dry_run=dry_run, message=message
        )
        return await self.request_async(spec, Commit)

    def revert(
        self,
        project: ProjectId,
        sha: str,
        branch: str,
        *,
        dry_run: Optional[bool] = None,
    ) -> GitLabResponse[Commit]:
        """Revert a commit in a branch.

        Returns:
            GitLabResponse[Commit]: The revert commit.
        """
        return self.request(
            self._revert_spec(project, sha, branch, dry_run=dry_run), Commit
        )

    async def revert_async(
        self,
        project: ProjectId,
        sha: str,
        branch: str,
        *,
        dry_run: Optional[bool] = None,
    ) -> GitLabResponse[Commit]:
        return await self.request_async(
            self._revert_spec(project, sha, branch, dry_run=dry_run), Commit
        )

    def _list_spec(self, project: ProjectId, **options) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projects/{id}/repository/commits"),
            options=CommitsListOptions(project, **options),
        )

    def _get_spec(
        self, project: ProjectId, sha: str, *, stats: Optional[bool]
    ) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("sha", sha)
        options.declare("stats", stats)
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projects/{id}/repository/commits/{sha}"),
            options=options,
        )

    def _refs_spec(
        self,
        project: ProjectId,
        sha: str,
        *,
        type: Optional[CommitRefType],
        page: Optional[int],
        per_page: Optional[int],
    ) -> RequestSpec:
        options = OptionsCollection(page=page, per_page=per_page)
        options.declare("id", project)
        options.declare("sha", sha)
        options.declare("type", type)
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projects/{id}/repository/commits/{sha}/refs"),
            options=options,
        )

    def _sha_spec(
        self,
        endpoint: str,
        project: ProjectId,
        sha: str,
        *,
        page: Optional[int],
        per_page: Optional[int],
    ) -> RequestSpec:
        options = OptionsCollection(page=page, per_page=per_page)
        options.declare("id", project)
        options.declare("sha", sha)
        return RequestSpec(method="GET", endpoint=Endpoint(endpoint), options=options)

    def _cherry_pick_spec(
        self,
        project: ProjectId,
        sha: str,
        branch: str,
        *,
        dry_run: Optional[bool],
        message: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/projects/{id}/repository/commits/{sha}/cherry_pick"),
            options=CherryPickOptions(
                project, sha, branch, dry_run=dry_run, message=message
            ),
        )

    def _revert_spec(
        self, project: ProjectId, sha: str, branch: str, *, dry_run: Optional[bool]
    ) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("sha", sha)
        options.declare("branch", branch)
        options.declare("dry_run", dry_run)
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/projects/{id}/repository/commits/{sha}/revert"),
            options=options,
        )
