from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .users import User


class Commit(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    short_id: Optional[str] = None
    title: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None
    parent_ids: Optional[List[str]] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    committer_name: Optional[str] = None
    committer_email: Optional[str] = None
    committed_date: Optional[datetime] = None
    status: Optional[str] = None
    web_url: Optional[str] = None


class CommitRef(BaseModel):
    """A branch or tag a commit was pushed to."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    name: Optional[str] = None


class CommitDiff(BaseModel):
    model_config = ConfigDict(extra="allow")

    old_path: Optional[str] = None
    new_path: Optional[str] = None
    a_mode: Optional[str] = None
    b_mode: Optional[str] = None
    new_file: Optional[bool] = None
    renamed_file: Optional[bool] = None
    deleted_file: Optional[bool] = None
    diff: Optional[str] = None


class CommitComment(BaseModel):
    model_config = ConfigDict(extra="allow")

    note: Optional[str] = None
    author: Optional[User] = None
