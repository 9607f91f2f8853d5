from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    HEADER_AUTHORIZATION,
    HEADER_JOB_TOKEN,
    HEADER_PRIVATE_TOKEN,
)


class TokenType(str, Enum):
    """How the token is presented to the server."""

    BEARER = "bearer"
    PRIVATE = "private"
    JOB = "job"


class Config(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    token: Optional[str] = None
    token_type: TokenType = TokenType.BEARER
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api/v{self.api_version}"

    def auth_header(self) -> Optional[Tuple[str, str]]:
        """Return the authentication header pair, or ``None`` without a token."""
        if not self.token:
            return None
        if self.token_type is TokenType.PRIVATE:
            return HEADER_PRIVATE_TOKEN, self.token
        if self.token_type is TokenType.JOB:
            return HEADER_JOB_TOKEN, self.token
        return HEADER_AUTHORIZATION, f"Bearer {self.token}"
