from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .users import User


class Project(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    description: Optional[str] = None
    path_with_namespace: Optional[str] = None
    created_at: Optional[datetime] = None
    default_branch: Optional[str] = None
    visibility: Optional[str] = None
    web_url: Optional[str] = None
    avatar_url: Optional[str] = None
    star_count: Optional[int] = None
    forks_count: Optional[int] = None
    last_activity_at: Optional[datetime] = None
    archived: Optional[bool] = None
    owner: Optional[User] = None


class UploadedFile(BaseModel):
    """A file uploaded to a project, referenceable from markdown."""

    model_config = ConfigDict(extra="allow")

    alt: Optional[str] = None
    url: str
    full_path: str
    markdown: Optional[str] = None
