from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Body sent by GitLab along with a non-2xx status."""

    model_config = ConfigDict(extra="allow")

    message: str
