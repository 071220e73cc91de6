import logging

from fastapi import APIRouter, Depends

from glutools.core.deps import get_tool_repository
from glutools.core.errors import failure_message
from glutools.models.common import SuccessResponse
from glutools.models.tools import BulkImportResponse, ToolIn, ToolListResponse, ToolResponse
from glutools.services.catalog import import_catalog
from glutools.services.repositories import ToolRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai-tools"])


# =========================================================
# Reads
# =========================================================
@router.get("/ai-tools", response_model=ToolListResponse)
def list_tools(tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to fetch AI tools"):
        return {"tools": tools.list_all()}


@router.get("/ai-tools/{subject_id}", response_model=ToolListResponse)
def list_tools_by_subject(subject_id: str, tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to fetch AI tools"):
        return {"tools": tools.list_by_foreign_key(subject_id)}


# =========================================================
# CMS
# =========================================================
@router.post("/ai-tools", response_model=ToolResponse)
def create_tool(payload: ToolIn, tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to create AI tool"):
        tool = tools.create(payload.model_dump(exclude_none=True))
        logger.info("Created AI tool %s (%s)", tool["id"], tool["name"])
        return {"tool": tool}


@router.put("/ai-tools/{tool_id}", response_model=ToolResponse)
def update_tool(tool_id: str, payload: ToolIn, tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to update AI tool"):
        return {"tool": tools.update(tool_id, payload.model_dump(exclude_unset=True))}


@router.delete("/ai-tools/{tool_id}", response_model=SuccessResponse)
def delete_tool(tool_id: str, tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to delete AI tool"):
        tools.delete(tool_id)
        return {"success": True}


@router.post("/bulk-import-tools", response_model=BulkImportResponse)
def bulk_import_tools(tools: ToolRepository = Depends(get_tool_repository)):
    with failure_message("Failed to bulk import tools"):
        return import_catalog(tools)
