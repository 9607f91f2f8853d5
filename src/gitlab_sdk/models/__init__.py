from .branches import Branch, BranchAccessLevel, ProtectedBranch
from .commits import Commit, CommitComment, CommitDiff, CommitRef
from .common import ErrorResponse
from .errors import (
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
from .pipelines import Pipeline, PipelineVariable
from .projects import Project, UploadedFile
from .users import User

__all__ = [
    "Branch",
    "BranchAccessLevel",
    "Commit",
    "CommitComment",
    "CommitDiff",
    "CommitRef",
    "EmptyResponseError",
    "ErrorResponse",
    "GitLabAPIError",
    "GitLabError",
    "InvalidRequestError",
    "MissingPathParameterError",
    "PageLimitReachedError",
    "PaginationError",
    "Pipeline",
    "PipelineVariable",
    "Project",
    "RequestDerivationError",
    "UnsupportedOptionValueError",
    "UploadedFile",
    "User",
]
