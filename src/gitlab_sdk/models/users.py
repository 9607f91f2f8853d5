from typing import Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    username: str
    email: Optional[str] = None
    state: Optional[str] = None
    avatar_url: Optional[str] = None
    web_url: Optional[str] = None

    def __str__(self) -> str:
        return f"ID {self.id} - {self.username} ({self.name})"
