from logging import getLogger
from typing import Any, Optional

from dotenv import load_dotenv
from opentelemetry import trace
from opentelemetry.trace import SpanKind

from ._config import Config
from ._response import Decoder, GitLabResponse
from ._services import (
    BranchesService,
    CommitsService,
    PipelinesService,
    ProjectsService,
    ProtectedBranchesService,
    UsersService,
)
from ._utils import (
    HttpxTransport,
    RequestSpec,
    Transport,
    TransportRequest,
    TransportResponse,
    setup_logging,
)
from ._utils._auth import resolve_config
from ._utils._errors import raise_for_status
from ._utils.constants import HEADER_USER_AGENT, SDK_VERSION

load_dotenv()

_tracer = trace.get_tracer("gitlab_sdk")


def user_agent_value() -> str:
    return f"gitlab-sdk-python/{SDK_VERSION}"


class GitLab:
    """Entry point of the SDK.

    Connection settings not passed explicitly are read from the environment
    (``GITLAB_URL``, ``GITLAB_TOKEN``, ``CI_JOB_TOKEN``), a ``.env`` file being
    loaded first.

    Examples:
        ```python
        from gitlab_sdk import GitLab

        with GitLab(base_url="https://gitlab.example.com", token="glpat-...") as gitlab:
            me = gitlab.users.me().decode()
            print(me.username)
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        token_type: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        transport: Optional[Transport] = None,
    ) -> None:
        base_url_value, token_value, token_type_value, api_version_value = (
            resolve_config(base_url, token, token_type, api_version)
        )

        settings: dict = {"token": token_value}
        if base_url_value is not None:
            settings["base_url"] = base_url_value
        if token_type_value is not None:
            settings["token_type"] = token_type_value
        if api_version_value is not None:
            settings["api_version"] = api_version_value
        if timeout is not None:
            settings["timeout"] = timeout

        self._config = Config(**settings)

        setup_logging(debug)
        self._logger = getLogger("gitlab_sdk")
        self._logger.debug(f"CONFIG: {self._config.model_dump(exclude={'token'})}")

        self._transport: Transport = (
            transport
            if transport is not None
            else HttpxTransport(timeout=self._config.timeout)
        )

    @property
    def config(self) -> Config:
        return self._config

    def _build(self, spec: RequestSpec) -> TransportRequest:
        request = spec.build(self._config.api_url, self._config.auth_header)
        request.headers[HEADER_USER_AGENT] = user_agent_value()
        self._logger.debug(f"Request: {request.method} {request.full_url}")
        return request

    def _wrap(
        self,
        spec: RequestSpec,
        response: TransportResponse,
        model: Any,
        decoder: Optional[Decoder],
    ) -> GitLabResponse[Any]:
        return GitLabResponse(
            response,
            model=model,
            decoder=decoder,
            client=self,
            request=spec if spec.fixed_url is None else None,
        )

    def _check(self, request: TransportRequest, response: TransportResponse) -> None:
        if not 200 <= response.status_code < 300:
            self._logger.debug(
                f"Response: {request.method} {request.url} failed with "
                f"status {response.status_code}"
            )
        raise_for_status(response)

    def execute(
        self,
        spec: RequestSpec,
        model: Any = Any,
        *,
        decoder: Optional[Decoder] = None,
    ) -> GitLabResponse[Any]:
        """Execute a request and wrap the response.

        Args:
            spec: The request to execute.
            model: Type the body is decoded into by :meth:`GitLabResponse.decode`.
            decoder: Custom decoder replacing the pydantic validation of ``model``.

        Returns:
            GitLabResponse: The response, able to fetch adjacent pages.

        Raises:
            InvalidRequestError: If the request cannot be built.
            GitLabAPIError: If the server answers with a non-2xx status.
        """
        request = self._build(spec)
        with _tracer.start_as_current_span("gitlab.request", kind=SpanKind.CLIENT) as span:
            span.set_attribute("http.request.method", request.method)
            span.set_attribute("url.full", request.url)
            response = self._transport.execute(request)
            span.set_attribute("http.response.status_code", response.status_code)
            self._check(request, response)
        return self._wrap(spec, response, model, decoder)

    async def execute_async(
        self,
        spec: RequestSpec,
        model: Any = Any,
        *,
        decoder: Optional[Decoder] = None,
    ) -> GitLabResponse[Any]:
        """Asynchronously execute a request and wrap the response."""
        request = self._build(spec)
        with _tracer.start_as_current_span("gitlab.request", kind=SpanKind.CLIENT) as span:
            span.set_attribute("http.request.method", request.method)
            span.set_attribute("url.full", request.url)
            response = await self._transport.execute_async(request)
            span.set_attribute("http.response.status_code", response.status_code)
            self._check(request, response)
        return self._wrap(spec, response, model, decoder)

    def fetch(self, url: str, model: Any = Any) -> GitLabResponse[Any]:
        """GET an absolute URL, such as a link returned by the API.

        The response has no origin request and cannot paginate.
        """
        return self.execute(RequestSpec(method="GET", fixed_url=url), model=model)

    async def fetch_async(self, url: str, model: Any = Any) -> GitLabResponse[Any]:
        return await self.execute_async(
            RequestSpec(method="GET", fixed_url=url), model=model
        )

    @property
    def commits(self) -> CommitsService:
        return CommitsService(self)

    @property
    def branches(self) -> BranchesService:
        return BranchesService(self)

    @property
    def protected_branches(self) -> ProtectedBranchesService:
        return ProtectedBranchesService(self)

    @property
    def pipelines(self) -> PipelinesService:
        return PipelinesService(self)

    @property
    def projects(self) -> ProjectsService:
        return ProjectsService(self)

    @property
    def users(self) -> UsersService:
        return UsersService(self)

    def close(self) -> None:
        """Release the synchronous HTTP client. Use :meth:`aclose` after async calls."""
        if isinstance(self._transport, HttpxTransport):
            self._transport.close()

    async def aclose(self) -> None:
        if isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    def __enter__(self) -> "GitLab":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "GitLab":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
