"""Typed client for the GitLab REST API v4."""

from ._config import Config, TokenType
from ._gitlab import GitLab
from ._response import GitLabResponse
from ._utils import (
    Endpoint,
    HttpxTransport,
    MultipartFile,
    Option,
    OptionLocation,
    OptionsCollection,
    RequestSpec,
    Transport,
    TransportRequest,
    TransportResponse,
)
from .models.enums import (
    AccessLevel,
    CommitOrder,
    CommitRefType,
    PipelineOrder,
    PipelineScope,
    PipelineSource,
    PipelineStatus,
    ProjectOrder,
    ProjectVisibility,
    Sort,
    UsersOrder,
)
from .models.errors import (
    EmptyResponseError,
    GitLabAPIError,
    GitLabError,
    InvalidRequestError,
    MissingPathParameterError,
    PageLimitReachedError,
    PaginationError,
    RequestDerivationError,
    UnsupportedOptionValueError,
)

__all__ = [
    "AccessLevel",
    "CommitOrder",
    "CommitRefType",
    "Config",
    "EmptyResponseError",
    "Endpoint",
    "GitLab",
    "GitLabAPIError",
    "GitLabError",
    "GitLabResponse",
    "HttpxTransport",
    "InvalidRequestError",
    "MissingPathParameterError",
    "MultipartFile",
    "Option",
    "OptionLocation",
    "OptionsCollection",
    "PageLimitReachedError",
    "PaginationError",
    "PipelineOrder",
    "PipelineScope",
    "PipelineSource",
    "PipelineStatus",
    "ProjectOrder",
    "ProjectVisibility",
    "RequestDerivationError",
    "RequestSpec",
    "Sort",
    "TokenType",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "UnsupportedOptionValueError",
    "UsersOrder",
]
