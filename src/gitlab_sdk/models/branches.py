from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .commits import Commit


class Branch(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    merged: Optional[bool] = None
    protected: Optional[bool] = None
    default: Optional[bool] = None
    developers_can_push: Optional[bool] = None
    developers_can_merge: Optional[bool] = None
    web_url: Optional[str] = None
    commit: Optional[Commit] = None


class BranchAccessLevel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    access_level: Optional[int] = None
    access_level_description: Optional[str] = None
    user_id: Optional[int] = None
    group_id: Optional[int] = None

    def __str__(self) -> str:
        return self.access_level_description or str(self.access_level)


class ProtectedBranch(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    name: str
    push_access_levels: List[BranchAccessLevel] = Field(default_factory=list)
    merge_access_levels: List[BranchAccessLevel] = Field(default_factory=list)
    unprotect_access_levels: List[BranchAccessLevel] = Field(default_factory=list)
    allow_force_push: Optional[bool] = None
    code_owner_approval_required: Optional[bool] = None

    def __str__(self) -> str:
        push_levels = ",".join(str(level) for level in self.push_access_levels)
        merge_levels = ",".join(str(level) for level in self.merge_access_levels)
        return (
            f"Protected Branch '{self.name}'\n"
            f"  Push Levels: {push_levels}\n"
            f"  Merge Levels: {merge_levels}"
        )
