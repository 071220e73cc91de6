from typing import List
from pydantic import BaseModel, Field


class Upload(BaseModel):
    id: str
    tool_id: str
    file_name: str
    file_url: str
    file_type: str = ""
    file_size: int = Field(default=0, ge=0, description="Size in bytes")
    author_name: str
    created_at: str


class UploadResponse(BaseModel):
    upload: Upload


class UploadListResponse(BaseModel):
    uploads: List[Upload]
