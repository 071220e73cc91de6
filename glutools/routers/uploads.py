from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.status import HTTP_413_REQUEST_ENTITY_TOO_LARGE

from glutools.core.config import Settings
from glutools.core.deps import get_settings_dep, get_upload_repository
from glutools.core.errors import AppError, ValidationError, failure_message
from glutools.models.common import SuccessResponse
from glutools.models.uploads import UploadListResponse, UploadResponse
from glutools.services.repositories import UploadRepository, is_missing

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.get("", response_model=UploadListResponse)
def list_uploads(uploads: UploadRepository = Depends(get_upload_repository)):
    with failure_message("Failed to fetch uploads"):
        return {"uploads": uploads.list_all()}


@router.get("/{tool_id}", response_model=UploadListResponse)
def list_tool_uploads(tool_id: str, uploads: UploadRepository = Depends(get_upload_repository)):
    with failure_message("Failed to fetch uploads"):
        return {"uploads": uploads.list_by_foreign_key(tool_id)}


@router.post("", response_model=UploadResponse)
def create_upload(
    file: UploadFile | None = File(default=None),
    tool_id: str | None = Form(default=None),
    author_name: str | None = Form(default=None),
    uploads: UploadRepository = Depends(get_upload_repository),
    settings: Settings = Depends(get_settings_dep),
):
    # Only the metadata is kept; the bytes are read to measure them, then dropped.
    if file is None or not file.filename or is_missing(tool_id) or is_missing(author_name):
        raise ValidationError("Missing required fields")

    with failure_message("Failed to create upload"):
        contents = file.file.read()
        max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
        if len(contents) > max_bytes:
            raise AppError(
                f"File too large (max {settings.MAX_UPLOAD_MB} MB)",
                status_code=HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )

        upload = uploads.create({
            "tool_id": tool_id,
            "file_name": file.filename,
            "file_type": file.content_type or "",
            "file_size": len(contents),
            "author_name": author_name,
        })
        return {"upload": upload}


@router.delete("/{upload_id}", response_model=SuccessResponse)
def delete_upload(upload_id: str, uploads: UploadRepository = Depends(get_upload_repository)):
    with failure_message("Failed to delete upload"):
        uploads.delete(upload_id)
        return {"success": True}
