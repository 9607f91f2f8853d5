from typing import Optional

from pydantic import ValidationError

from ..models.common import ErrorResponse
from ..models.errors import GitLabAPIError
from ._transport import TransportResponse


def error_message(status_code: int, body: Optional[bytes]) -> str:
    """Extract the human readable message of an error response.

    GitLab reports failures as ``{"message": "..."}``. Bodies of any other
    shape fall back to a message naming the status code.
    """
    default = f"HTTP response received: {status_code}"
    if not body:
        return default

    try:
        return ErrorResponse.model_validate_json(body).message
    except ValidationError:
        return default


def raise_for_status(response: TransportResponse) -> None:
    """Convert a non-2xx response into a :class:`GitLabAPIError`.

    Raises:
        GitLabAPIError: With the parsed or default message and the status code.
    """
    if 200 <= response.status_code < 300:
        return

    body_text = (
        response.body.decode("utf-8", errors="replace") if response.body else None
    )
    raise GitLabAPIError(
        error_message(response.status_code, response.body),
        response.status_code,
        body_text,
    )
