from typing import Optional


class GitLabError(Exception):
    """Base class for every error raised by the SDK."""


class InvalidRequestError(GitLabError):
    """Raised when a request cannot be materialized from its declaration.

    These are programming errors in the calling code (an option declared with a
    value the encoder cannot represent, an endpoint missing a path value) and
    are detected before anything is sent over the network.
    """


class UnsupportedOptionValueError(InvalidRequestError, TypeError):
    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(
            f"Value of type {type(value).__name__} for option '{key}' "
            f"has no query encoding"
        )


class MissingPathParameterError(InvalidRequestError, ValueError):
    def __init__(self, endpoint: str, name: str):
        self.endpoint = endpoint
        self.name = name
        super().__init__(
            f"Endpoint '{endpoint}' requires a value for path parameter '{name}'"
        )


class EmptyResponseError(GitLabError):
    def __init__(self, message="Empty data received"):
        self.message = message
        super().__init__(self.message)


class GitLabAPIError(GitLabError):
    """Raised for every non-2xx response received from the server.

    Attributes:
        message: The ``message`` field of the error body when present, otherwise
            ``"HTTP response received: <status_code>"``.
        status_code: The HTTP status code of the response.
        body: The raw error body decoded as text, if any.
    """

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class PaginationError(GitLabError):
    """Base class for conditions raised while moving between pages."""


class PageLimitReachedError(PaginationError):
    """Raised when paginating past the last page or before the first one."""

    def __init__(
        self,
        message: str,
        *,
        current_page: Optional[int] = None,
        target_page: Optional[int] = None,
        total_pages: Optional[int] = None,
    ):
        self.message = message
        self.current_page = current_page
        self.target_page = target_page
        self.total_pages = total_pages
        super().__init__(self.message)

    @staticmethod
    def create(current_page: int, target_page: int, total_pages: int) -> "PageLimitReachedError":
        """Create a PageLimitReachedError with a standardized message.

        Args:
            current_page: Page held by the response being paginated
            target_page: Page that was requested
            total_pages: Total pages reported by the server

        Returns:
            PageLimitReachedError with formatted message
        """
        return PageLimitReachedError(
            f"Page limit reached: cannot move from page {current_page} "
            f"to page {target_page} (total pages: {total_pages})",
            current_page=current_page,
            target_page=target_page,
            total_pages=total_pages,
        )


class RequestDerivationError(PaginationError):
    def __init__(
        self,
        message="Cannot create a page request: the response has no origin client or request",
    ):
        self.message = message
        super().__init__(self.message)
