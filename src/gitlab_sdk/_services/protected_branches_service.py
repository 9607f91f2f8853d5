from typing import Any, List, Mapping, Optional, Sequence, Union

from .._response import GitLabResponse
from .._utils import Endpoint, OptionsCollection, RequestSpec
from ..models import ProtectedBranch
from ..models.enums import AccessLevel
from ._base_service import BaseService, ProjectId

# A single rule such as {"user_id": 5} or a list of them
AccessRules = Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]


class BranchPermissionOptions(OptionsCollection):
    """Granular permissions shared by protecting and updating a branch.

    Each ``allowed_to_*`` value is a rule hash (``{"access_level": 30}``,
    ``{"user_id": 5}``, ``{"group_id": 7}``) or a list of rule hashes.
    """

    def __init__(
        self,
        *,
        allow_force_push: Optional[bool] = None,
        allowed_to_push: Optional[AccessRules] = None,
        allowed_to_merge: Optional[AccessRules] = None,
        allowed_to_unprotect: Optional[AccessRules] = None,
        code_owner_approval_required: Optional[bool] = None,
    ) -> None:
        super().__init__()
        self.declare("allow_force_push", allow_force_push)
        self.declare("allowed_to_push", allowed_to_push)
        self.declare("allowed_to_merge", allowed_to_merge)
        self.declare("allowed_to_unprotect", allowed_to_unprotect)
        self.declare("code_owner_approval_required", code_owner_approval_required)


class ProtectBranchOptions(OptionsCollection):
    def __init__(
        self,
        project: ProjectId,
        name: str,
        *,
        push_access_level: Optional[AccessLevel] = None,
        merge_access_level: Optional[AccessLevel] = None,
        unprotect_access_level: Optional[AccessLevel] = None,
        permissions: Optional[BranchPermissionOptions] = None,
    ) -> None:
        super().__init__(base=permissions)
        self.declare("id", project)
        self.declare("name", name)
        self.declare("push_access_level", push_access_level)
        self.declare("merge_access_level", merge_access_level)
        self.declare("unprotect_access_level", unprotect_access_level)


class UpdateProtectedBranchOptions(OptionsCollection):
    def __init__(
        self,
        project: ProjectId,
        branch: str,
        *,
        permissions: Optional[BranchPermissionOptions] = None,
    ) -> None:
        super().__init__(base=permissions)
        self.declare("id", project)
        self.declare("branch", branch)


class ProtectedBranchesService(BaseService):
    """Service for the protected branches of a project.

    See https://docs.gitlab.com/ee/api/protected_branches.html
    """

    def list(
        self,
        project: ProjectId,
        *,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[ProtectedBranch]]:
        """List the protected branches of a project."""
        spec = self._list_spec(project, search=search, page=page, per_page=per_page)
        return self.request(spec, List[ProtectedBranch])

    async def list_async(
        self,
        project: ProjectId,
        *,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[ProtectedBranch]]:
        spec = self._list_spec(project, search=search, page=page, per_page=per_page)
        return await self.request_async(spec, List[ProtectedBranch])

    def get(self, project: ProjectId, name: str) -> GitLabResponse[ProtectedBranch]:
        """Get a protected branch or wildcard protected branch."""
        return self.request(self._detail_spec("GET", project, name), ProtectedBranch)

    async def get_async(
        self, project: ProjectId, name: str
    ) -> GitLabResponse[ProtectedBranch]:
        return await self.request_async(
            self._detail_spec("GET", project, name), ProtectedBranch
        )

    def protect(
        self,
        project: ProjectId,
        name: str,
        *,
        push_access_level: Optional[AccessLevel] = None,
        merge_access_level: Optional[AccessLevel] = None,
        unprotect_access_level: Optional[AccessLevel] = None,
        allow_force_push: Optional[bool] = None,
        allowed_to_push: Optional[AccessRules] = None,
        allowed_to_merge: Optional[AccessRules] = None,
        allowed_to_unprotect: Optional[AccessRules] = None,
        code_owner_approval_required: Optional[bool] = None,
    ) -> GitLabResponse[ProtectedBranch]:
        """Protect a single branch or a wildcard pattern.

        Args:
            project (ProjectId): The ID or path of the project.
            name (str): Name of the branch or wildcard, e.g. ``release/*``.
            push_access_level (Optional[AccessLevel]): Who is allowed to push.
            merge_access_level (Optional[AccessLevel]): Who is allowed to merge.
            unprotect_access_level (Optional[AccessLevel]): Who is allowed to unprotect.
            allow_force_push (Optional[bool]): Allow force push for users with push access.
            allowed_to_push (Optional[AccessRules]): Granular push rules.
            allowed_to_merge (Optional[AccessRules]): Granular merge rules.
            allowed_to_unprotect (Optional[AccessRules]): Granular unprotect rules.
            code_owner_approval_required (Optional[bool]): Reject pushes to files
                matched by the CODEOWNERS file.

        Returns:
            GitLabResponse[ProtectedBranch]: The protected branch.

        Examples:
            ```python
            from gitlab_sdk import AccessLevel, GitLab

            gitlab = GitLab()

            gitlab.protected_branches.protect(
                42,
                "main",
                push_access_level=AccessLevel.MAINTAINER,
                allowed_to_push=[{"user_id": 5}, {"group_id": 7}],
            )
            ```
        """
        spec = self._protect_spec(
            project,
            name,
            push_access_level=push_access_level,
            merge_access_level=merge_access_level,
            unprotect_access_level=unprotect_access_level,
            permissions=BranchPermissionOptions(
                allow_force_push=allow_force_push,
                allowed_to_push=allowed_to_push,
                allowed_to_merge=allowed_to_merge,
                allowed_to_unprotect=allowed_to_unprotect,
                code_owner_approval_required=code_owner_approval_required,
            ),
        )
        return self.request(spec, ProtectedBranch)

    async def protect_async(
        self,
        project: ProjectId,
        name: str,
        *,
        push_access_level: Optional[AccessLevel] = None,
        merge_access_level: Optional[AccessLevel] = None,
        unprotect_access_level: Optional[AccessLevel] = None,
        allow_force_push: Optional[bool] = None,
        allowed_to_push: Optional[AccessRules] = None,
        allowed_to_merge: Optional[AccessRules] = None,
        allowed_to_unprotect: Optional[AccessRules] = None,
        code_owner_approval_required: Optional[bool] = None,
    ) -> GitLabResponse[ProtectedBranch]:
        """Asynchronously protect a single branch or a wildcard pattern."""
        spec = self._protect_spec(
            project,
            name,
            push_access_level=push_access_level,
            merge_access_level=merge_access_level,
            unprotect_access_level=unprotect_access_level,
            permissions=BranchPermissionOptions(
                allow_force_push=allow_force_push,
                allowed_to_push=allowed_to_push,
                allowed_to_merge=allowed_to_merge,
                allowed_to_unprotect=allowed_to_unprotect,
                code_owner_approval_required=code_owner_approval_required,
            ),
        )
        return await self.request_async(spec, ProtectedBranch)

    def update(
        self,
        project: ProjectId,
        name: str,
        *,
        allow_force_push: Optional[bool] = None,
        allowed_to_push: Optional[AccessRules] = None,
        allowed_to_merge: Optional[AccessRules] = None,
        allowed_to_unprotect: Optional[AccessRules] = None,
        code_owner_approval_required: Optional[bool] = None,
    ) -> GitLabResponse[ProtectedBranch]:
        """Update the permissions of a protected branch.

        Returns:
            GitLabResponse[ProtectedBranch]: The updated protected branch.
        """
        spec = self._update_spec(
            project,
            name,
            BranchPermissionOptions(
                allow_force_push=allow_force_push,
                allowed_to_push=allowed_to_push,
                allowed_to_merge=allowed_to_merge,
                allowed_to_unprotect=allowed_to_unprotect,
                code_owner_approval_required=code_owner_approval_required,
            ),
        )
        return self.request(spec, ProtectedBranch)

    async def update_async(
        self,
        project: ProjectId,
        name: str,
        *,
        allow_force_push: Optional[bool] = None,
        allowed_to_push: Optional[AccessRules] = None,
        allowed_to_merge: Optional[AccessRules] = None,
        allowed_to_unprotect: Optional[AccessRules] = None,
        code_owner_approval_required: Optional[bool] = None,
    ) -> GitLabResponse[ProtectedBranch]:
        spec = self._update_spec(
            project,
            name,
            BranchPermissionOptions(
                allow_force_push=allow_force_push,
                allowed_to_push=allowed_to_push,
                allowed_to_merge=allowed_to_merge,
                allowed_to_unprotect=allowed_to_unprotect,
                code_owner_approval_required=code_owner_approval_required,
            ),
        )
        return await self.request_async(spec, ProtectedBranch)

    def unprotect(self, project: ProjectId, name: str) -> GitLabResponse[Any]:
        """Unprotect a branch. The server answers with an empty body."""
        return self.request(self._detail_spec("DELETE", project, name))

    async def unprotect_async(self, project: ProjectId, name: str) -> GitLabResponse[Any]:
        return await self.request_async(self._detail_spec("DELETE", project, name))

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
            endpoint=Endpoint("/projects/{id}/protected_branches"),
            options=options,
        )

    def _detail_spec(self, method: str, project: ProjectId, name: str) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", project)
        options.declare("branch", name)
        return RequestSpec(
            method=method,
            endpoint=Endpoint("/projects/{id}/protected_branches/{branch}"),
            options=options,
        )

    def _protect_spec(self, project: ProjectId, name: str, **options) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/projects/{id}/protected_branches"),
            options=ProtectBranchOptions(project, name, **options),
        )

    def _update_spec(
        self, project: ProjectId, name: str, permissions: BranchPermissionOptions
    ) -> RequestSpec:
        return RequestSpec(
            method="PATCH",
            endpoint=Endpoint("/projects/{id}/protected_branches/{branch}"),
            options=UpdateProtectedBranchOptions(
                project, name, permissions=permissions
            ),
        )
