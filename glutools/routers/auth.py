from fastapi import APIRouter, Depends

from glutools.core.deps import get_auth_gate
from glutools.core.errors import failure_message
from glutools.models.admins import LoginIn, LoginResponse
from glutools.services.auth_gate import AuthGate

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginIn, gate: AuthGate = Depends(get_auth_gate)):
    with failure_message("Login failed"):
        admin = gate.login(payload.email, payload.password)
        return {"success": True, "admin": admin}
