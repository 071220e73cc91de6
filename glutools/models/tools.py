from typing import List, Optional
from pydantic import BaseModel, Field


class AITool(BaseModel):
    id: str
    subject_id: str = ""
    name: str = ""
    description: str = ""
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)
    image_url: str = ""
    link_url: str = ""


# Required fields are checked by the repository so a missing one answers
# 400 "Missing required fields" instead of a schema error.
class ToolIn(BaseModel):
    subject_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    advantages: Optional[List[str]] = None
    disadvantages: Optional[List[str]] = None
    image_url: Optional[str] = None
    link_url: Optional[str] = None


class ToolResponse(BaseModel):
    tool: AITool


class ToolListResponse(BaseModel):
    tools: List[AITool]


class BulkImportResponse(BaseModel):
    success: bool = True
    message: str
    added: int
    total: int
