"""
Admin management. Reads only need the shared API key; every mutation also
needs the caller's own admin credentials, and the permission rules are
checked here before anything is written.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from glutools.core.deps import get_admin_repository, get_auth_gate
from glutools.core.errors import failure_message
from glutools.core.security import get_current_admin
from glutools.models.admins import AdminIn, AdminListResponse, AdminResponse
from glutools.models.common import SuccessResponse
from glutools.services.auth_gate import AuthGate
from glutools.services.repositories import AdminRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admins", tags=["admins"])


@router.get("", response_model=AdminListResponse)
def list_admins(admins: AdminRepository = Depends(get_admin_repository)):
    with failure_message("Failed to fetch admins"):
        return {"admins": admins.list_public()}


@router.post("", response_model=AdminResponse)
def create_admin(
    payload: AdminIn,
    admins: AdminRepository = Depends(get_admin_repository),
    caller: Dict[str, Any] = Depends(get_current_admin),
):
    with failure_message("Failed to create admin"):
        AuthGate.ensure_can_create(caller)
        admin = admins.create(payload.model_dump(exclude_none=True))
        logger.info("Admin %s created by %s", admin["id"], caller["id"])
        return {"admin": AdminRepository.public(admin)}


@router.put("/{admin_id}", response_model=AdminResponse)
def update_admin(
    admin_id: str,
    payload: AdminIn,
    admins: AdminRepository = Depends(get_admin_repository),
    caller: Dict[str, Any] = Depends(get_current_admin),
):
    with failure_message("Failed to update admin"):
        # 404 before 403: an unknown id is reported as such
        admins.find(admin_id)
        AuthGate.ensure_can_edit(caller, admin_id)
        admin = admins.update(admin_id, payload.model_dump(exclude_unset=True))
        return {"admin": AdminRepository.public(admin)}


@router.delete("/{admin_id}", response_model=SuccessResponse)
def delete_admin(
    admin_id: str,
    gate: AuthGate = Depends(get_auth_gate),
    caller: Dict[str, Any] = Depends(get_current_admin),
):
    with failure_message("Failed to delete admin"):
        gate.delete_admin(caller, admin_id)
        return {"success": True}
