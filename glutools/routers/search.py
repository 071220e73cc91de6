from fastapi import APIRouter, Depends, Query

from glutools.core.deps import get_tool_repository
from glutools.core.errors import failure_message
from glutools.models.tools import ToolListResponse
from glutools.services.repositories import ToolRepository
from glutools.services.search import search_tools

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=ToolListResponse)
def search(q: str = Query(default=""), tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to search AI tools"):
        return {"tools": search_tools(tools.list_all(), q)}
