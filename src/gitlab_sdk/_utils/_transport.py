import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

from httpx import AsyncClient, Client, Response

from ._encoding import QueryItem, encode_query_string
from ._options import MultipartFile
from ._ssl_context import get_httpx_client_kwargs
from .constants import DEFAULT_TIMEOUT


@dataclass
class TransportRequest:
    """A fully built request, ready to be executed by a transport."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    query_items: List[QueryItem] = field(default_factory=list)
    content: Optional[bytes] = None
    files: Optional[Tuple[MultipartFile, ...]] = None

    @property
    def full_url(self) -> str:
        """The URL with the query items appended as a query string."""
        if not self.query_items:
            return self.url
        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}{encode_query_string(self.query_items)}"


@dataclass
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


class Transport(Protocol):
    """Executes built requests. Errors raised by the transport are propagated as is."""

    def execute(self, request: TransportRequest) -> TransportResponse: ...

    async def execute_async(self, request: TransportRequest) -> TransportResponse: ...


def _read_files(files: Optional[Tuple[MultipartFile, ...]]) -> Optional[List[Tuple[str, Any]]]:
    if not files:
        return None
    return [
        (part.name, (os.path.basename(part.path), Path(part.path).read_bytes()))
        for part in files
    ]


def _to_transport_response(response: Response) -> TransportResponse:
    return TransportResponse(
        status_code=response.status_code,
        headers=response.headers,
        body=response.content or None,
    )


class HttpxTransport:
    """Transport backed by long-lived ``httpx`` clients.

    The synchronous client is created on construction. The asynchronous one is
    created by the first async request, so synchronous callers only need
    :meth:`close`; once an async request has run, release both with
    :meth:`aclose`.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, **client_kwargs: Any) -> None:
        kwargs = {**get_httpx_client_kwargs(timeout), **client_kwargs}
        self._client_kwargs = kwargs
        self._client = Client(**kwargs)
        self._client_async: Optional[AsyncClient] = None

    def execute(self, request: TransportRequest) -> TransportResponse:
        response = self._client.request(
            request.method,
            request.full_url,
            headers=request.headers,
            content=request.content,
            files=_read_files(request.files),
        )
        return _to_transport_response(response)

    async def execute_async(self, request: TransportRequest) -> TransportResponse:
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs)
        response = await self._client_async.request(
            request.method,
            request.full_url,
            headers=request.headers,
            content=request.content,
            files=_read_files(request.files),
        )
        return _to_transport_response(response)

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        self._client.close()
        if self._client_async is not None:
            await self._client_async.aclose()
