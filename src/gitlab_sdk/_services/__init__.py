from .branches_service import BranchesService
from .commits_service import CommitsService
from .pipelines_service import PipelinesService
from .projects_service import ProjectsService
from .protected_branches_service import ProtectedBranchesService
from .users_service import UsersService

__all__ = [
    "BranchesService",
    "CommitsService",
    "PipelinesService",
    "ProjectsService",
    "ProtectedBranchesService",
    "UsersService",
]
