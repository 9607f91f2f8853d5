from os import PathLike
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from httpx import Headers
from pydantic import TypeAdapter

from ._utils import RequestSpec, TransportResponse
from ._utils.constants import (
    HEADER_NEXT_PAGE,
    HEADER_PAGE,
    HEADER_PER_PAGE,
    HEADER_PREV_PAGE,
    HEADER_REQUEST_ID,
    HEADER_TOTAL,
    HEADER_TOTAL_PAGES,
)
from .models.errors import (
    EmptyResponseError,
    PageLimitReachedError,
    RequestDerivationError,
)

if TYPE_CHECKING:
    from ._gitlab import GitLab

T = TypeVar("T")

Decoder = Callable[[bytes], Any]

_UNSET: Any = object()


class GitLabResponse(Generic[T]):
    """A response received from GitLab, with the means to fetch adjacent pages.

    The raw body is decoded lazily into ``T`` by :meth:`decode` and cached.
    Pagination metadata is read from the ``X-Page`` family of headers. A
    response executed through :class:`~gitlab_sdk.GitLab` keeps a reference to
    the client and to the request that produced it, so :meth:`next_page` and
    :meth:`prev_page` can issue the same call for another page.

    Examples:
        ```python
        from gitlab_sdk import GitLab

        gitlab = GitLab()

        response = gitlab.commits.list(project=42, per_page=50)
        for commit in response.decode():
            print(commit.short_id, commit.title)

        for page in response.next_pages():
            print(page.current_page, len(page.decode()))
        ```
    """

    def __init__(
        self,
        response: TransportResponse,
        *,
        model: Any = Any,
        decoder: Optional[Decoder] = None,
        client: Optional["GitLab"] = None,
        request: Optional[RequestSpec] = None,
    ) -> None:
        self._response = response
        self._headers = Headers(response.headers)
        self._model = model
        self._custom_decoder = decoder
        self._decoder: Decoder = (
            decoder if decoder is not None else TypeAdapter(model).validate_json
        )
        self._value: Any = _UNSET
        self._client = client
        self._request = request

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Headers:
        return self._headers

    @property
    def raw_body(self) -> Optional[bytes]:
        return self._response.body

    @property
    def request(self) -> Optional[RequestSpec]:
        """The request this response was produced by, if known."""
        return self._request

    def decode(self) -> T:
        """Decode the body into ``T``, parsing at most once.

        Raises:
            EmptyResponseError: If the response has no body.
            pydantic.ValidationError: If the body does not match ``T``.
        """
        if self._value is not _UNSET:
            return self._value

        if not self._response.body:
            raise EmptyResponseError()

        self._value = self._decoder(self._response.body)
        return self._value

    # Pagination headers

    def _int_header(self, name: str) -> Optional[int]:
        value = self._headers.get(name)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def current_page(self) -> int:
        page = self._int_header(HEADER_PAGE)
        return page if page is not None else 1

    @property
    def next_page_number(self) -> Optional[int]:
        return self._int_header(HEADER_NEXT_PAGE)

    @property
    def prev_page_number(self) -> Optional[int]:
        return self._int_header(HEADER_PREV_PAGE)

    @property
    def total_pages(self) -> int:
        pages = self._int_header(HEADER_TOTAL_PAGES)
        return pages if pages is not None else 1

    @property
    def total_items(self) -> Optional[int]:
        return self._int_header(HEADER_TOTAL)

    @property
    def per_page(self) -> Optional[int]:
        return self._int_header(HEADER_PER_PAGE)

    @property
    def request_id(self) -> Optional[str]:
        return self._headers.get(HEADER_REQUEST_ID)

    # Page navigation

    def _origin(self) -> Tuple["GitLab", RequestSpec]:
        if self._client is None or self._request is None:
            raise RequestDerivationError()
        return self._client, self._request

    def _next_page_request(self) -> Tuple["GitLab", RequestSpec]:
        client, request = self._origin()
        if self.current_page >= self.total_pages:
            raise PageLimitReachedError.create(
                self.current_page, self.current_page + 1, self.total_pages
            )
        return client, request.with_page(self.current_page + 1)

    def _prev_page_request(self) -> Tuple["GitLab", RequestSpec]:
        client, request = self._origin()
        if self.current_page <= 1:
            raise PageLimitReachedError.create(
                self.current_page, self.current_page - 1, self.total_pages
            )
        return client, request.with_page(self.current_page - 1)

    def _pages_to_fetch(self, count: Optional[int]) -> int:
        remaining = self.total_pages - self.current_page
        if count is None:
            return max(remaining, 0)
        return max(min(count, remaining), 0)

    def next_page(self) -> "GitLabResponse[T]":
        """Fetch the page following this one.

        Raises:
            RequestDerivationError: If the response has no origin request.
            PageLimitReachedError: If this is the last page.
        """
        client, request = self._next_page_request()
        return client.execute(request, model=self._model, decoder=self._custom_decoder)

    async def next_page_async(self) -> "GitLabResponse[T]":
        """Asynchronously fetch the page following this one."""
        client, request = self._next_page_request()
        return await client.execute_async(
            request, model=self._model, decoder=self._custom_decoder
        )

    def prev_page(self) -> "GitLabResponse[T]":
        """Fetch the page preceding this one.

        Raises:
            RequestDerivationError: If the response has no origin request.
            PageLimitReachedError: If this is the first page.
        """
        client, request = self._prev_page_request()
        return client.execute(request, model=self._model, decoder=self._custom_decoder)

    async def prev_page_async(self) -> "GitLabResponse[T]":
        """Asynchronously fetch the page preceding this one."""
        client, request = self._prev_page_request()
        return await client.execute_async(
            request, model=self._model, decoder=self._custom_decoder
        )

    def next_pages(self, count: Optional[int] = None) -> List["GitLabResponse[T]"]:
        """Fetch the following pages one after another.

        Args:
            count: How many pages to fetch. All the remaining pages when omitted.
                Never goes past the last page reported by the server.

        Returns:
            List[GitLabResponse[T]]: The fetched pages in increasing page order;
            empty when this is already the last page.
        """
        responses: List[GitLabResponse[T]] = []
        cursor: GitLabResponse[T] = self
        for _ in range(self._pages_to_fetch(count)):
            cursor = cursor.next_page()
            responses.append(cursor)
        return responses

    async def next_pages_async(
        self, count: Optional[int] = None
    ) -> List["GitLabResponse[T]"]:
        """Asynchronously fetch the following pages, awaiting each one in turn."""
        responses: List[GitLabResponse[T]] = []
        cursor: GitLabResponse[T] = self
        for _ in range(self._pages_to_fetch(count)):
            cursor = await cursor.next_page_async()
            responses.append(cursor)
        return responses

    def write_raw_response(self, path: Union[str, PathLike]) -> None:
        """Write the raw body to ``path``. Nothing is written for an empty body."""
        if not self._response.body:
            return
        Path(path).write_bytes(self._response.body)

    def __repr__(self) -> str:
        return (
            f"GitLabResponse(status_code={self.status_code}, "
            f"page={self.current_page}/{self.total_pages})"
        )
