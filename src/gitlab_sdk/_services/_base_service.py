from logging import getLogger
from typing import TYPE_CHECKING, Any, Union

from .._response import GitLabResponse
from .._utils import RequestSpec

if TYPE_CHECKING:
    from .._gitlab import GitLab

# Numeric project ID or URL-encodable "namespace/project" path
ProjectId = Union[int, str]


class BaseService:
    def __init__(self, client: "GitLab") -> None:
        self._logger = getLogger("gitlab_sdk")
        self._client = client

    def request(self, spec: RequestSpec, model: Any = Any) -> GitLabResponse[Any]:
        return self._client.execute(spec, model=model)

    async def request_async(
        self, spec: RequestSpec, model: Any = Any
    ) -> GitLabResponse[Any]:
        return await self._client.execute_async(spec, model=model)
