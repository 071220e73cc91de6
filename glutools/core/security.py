import secrets
from typing import Any, Dict

from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from glutools.core.config import get_settings
from glutools.core.deps import get_auth_gate
from glutools.services.auth_gate import AuthGate

bearer = HTTPBearer(auto_error=False)


def require_api_key(creds: HTTPAuthorizationCredentials | None = Security(bearer)) -> str:
    """
    Checks the shared key sent as `Authorization: Bearer <API_KEY>`.
    """
    settings = get_settings()
    if creds and secrets.compare_digest(creds.credentials.encode(), settings.API_KEY.encode()):
        return creds.credentials
    raise HTTPException(
        status_code=HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_admin(
    x_admin_email: str | None = Header(default=None),
    x_admin_password: str | None = Header(default=None),
    gate: AuthGate = Depends(get_auth_gate),
) -> Dict[str, Any]:
    """
    Resolves the calling admin from the X-Admin-Email / X-Admin-Password
    headers. Used by the admin-management mutations.
    """
    if not x_admin_email or not x_admin_password:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Admin credentials required")
    return gate.login(x_admin_email, x_admin_password)
