from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .users import User


class Pipeline(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    iid: Optional[int] = None
    project_id: Optional[int] = None
    sha: Optional[str] = None
    ref: Optional[str] = None
    status: Optional[str] = None
    source: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    web_url: Optional[str] = None
    user: Optional[User] = None


class PipelineVariable(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: str
    value: Optional[str] = None
    variable_type: Optional[str] = None
