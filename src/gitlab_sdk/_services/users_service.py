from datetime import datetime
from typing import List, Optional

from .._response import GitLabResponse
from .._utils import Endpoint, OptionsCollection, RequestSpec
from ..models import User
from ..models.enums import Sort, UsersOrder
from ._base_service import BaseService


class UsersSearchOptions(OptionsCollection):
    def __init__(
        self,
        *,
        search: Optional[str] = None,
        username: Optional[str] = None,
        extern_uid: Optional[str] = None,
        provider: Optional[str] = None,
        active: Optional[bool] = None,
        blocked: Optional[bool] = None,
        external: Optional[bool] = None,
        admins: Optional[bool] = None,
        without_projects: Optional[bool] = None,
        two_factor: Optional[str] = None,
        created_after: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        order_by: Optional[UsersOrder] = None,
        sort: Optional[Sort] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> None:
        super().__init__(page=page, per_page=per_page)
        self.declare("search", search)
        self.declare("username", username)
        self.declare("extern_uid", extern_uid)
        self.declare("provider", provider)
        self.declare("active", active)
        self.declare("blocked", blocked)
        self.declare("external", external)
        self.declare("admins", admins)
        self.declare("without_projects", without_projects)
        self.declare("two_factor", two_factor)
        self.declare("created_after", created_after)
        self.declare("created_before", created_before)
        self.declare("order_by", order_by)
        self.declare("sort", sort)


class UsersService(BaseService):
    """Service for GitLab users.

    See https://docs.gitlab.com/ee/api/users.html
    """

    def list(
        self,
        *,
        search: Optional[str] = None,
        username: Optional[str] = None,
        extern_uid: Optional[str] = None,
        provider: Optional[str] = None,
        active: Optional[bool] = None,
        blocked: Optional[bool] = None,
        external: Optional[bool] = None,
        admins: Optional[bool] = None,
        without_projects: Optional[bool] = None,
        two_factor: Optional[str] = None,
        created_after: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        order_by: Optional[UsersOrder] = None,
        sort: Optional[Sort] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[User]]:
        """List users.

        Args:
            search (Optional[str]): Match against name, username and public email.
            username (Optional[str]): Exact username.
            extern_uid (Optional[str]): External UID, together with ``provider``.
            provider (Optional[str]): External provider.
            active (Optional[bool]): Only active users.
            blocked (Optional[bool]): Only blocked users.
            external (Optional[bool]): Only external users. Administrators only.
            admins (Optional[bool]): Only administrators. Administrators only.
            without_projects (Optional[bool]): Only users without projects.
            two_factor (Optional[str]): ``enabled`` or ``disabled``.
            created_after (Optional[datetime]): Only users created after this date.
            created_before (Optional[datetime]): Only users created before this date.
            order_by (Optional[UsersOrder]): Field to order the users by.
            sort (Optional[Sort]): Sort direction.
            page (Optional[int]): Page to retrieve.
            per_page (Optional[int]): Number of users per page.

        Returns:
            GitLabResponse[List[User]]: A page of users.
        """
        spec = self._list_spec(
            search=search,
            username=username,
            extern_uid=extern_uid,
            provider=provider,
            active=active,
            blocked=blocked,
            external=external,
            admins=admins,
            without_projects=without_projects,
            two_factor=two_factor,
            created_after=created_after,
            created_before=created_before,
            order_by=order_by,
            sort=sort,
            page=page,
            per_page=per_page,
        )
        return self.request(spec, List[User])

    async def list_async(
        self,
        *,
        search: Optional[str] = None,
        username: Optional[str] = None,
        extern_uid: Optional[str] = None,
        provider: Optional[str] = None,
        active: Optional[bool] = None,
        blocked: Optional[bool] = None,
        external: Optional[bool] = None,
        admins: Optional[bool] = None,
        without_projects: Optional[bool] = None,
        two_factor: Optional[str] = None,
        created_after: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        order_by: Optional[UsersOrder] = None,
        sort: Optional[Sort] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> GitLabResponse[List[User]]:
        spec = self._list_spec(
            search=search,
            username=username,
            extern_uid=extern_uid,
            provider=provider,
            active=active,
            blocked=blocked,
            external=external,
            admins=admins,
            without_projects=without_projects,
            two_factor=two_factor,
            created_after=created_after,
            created_before=created_before,
            order_by=order_by,
            sort=sort,
            page=page,
            per_page=per_page,
        )
        return await self.request_async(spec, List[User])

    def get(self, user_id: int) -> GitLabResponse[User]:
        """Get a single user."""
        return self.request(self._get_spec(user_id), User)

    async def get_async(self, user_id: int) -> GitLabResponse[User]:
        return await self.request_async(self._get_spec(user_id), User)

    def me(self) -> GitLabResponse[User]:
        """Get the authenticated user."""
        return self.request(self._me_spec(), User)

    async def me_async(self) -> GitLabResponse[User]:
        return await self.request_async(self._me_spec(), User)

    def _list_spec(self, **options) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/users"),
            options=UsersSearchOptions(**options),
        )

    def _get_spec(self, user_id: int) -> RequestSpec:
        options = OptionsCollection()
        options.declare("id", user_id)
        return RequestSpec(method="GET", endpoint=Endpoint("/users/{id}"), options=options)

    def _me_spec(self) -> RequestSpec:
        return RequestSpec(method="GET", endpoint=Endpoint("/user"))
