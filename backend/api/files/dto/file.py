"""File Data Transfer Objects."""

from pydantic import BaseModel, ConfigDict, Field


class FileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    size: int = Field(ge=0)
    upload_date: str = Field(alias="uploadDate")
