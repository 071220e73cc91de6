from typing import List, Optional
from pydantic import BaseModel


class AdminOut(BaseModel):
    """Admin as returned by the API: never carries the password."""
    id: str
    name: str
    email: str
    created_at: str = ""
    is_super_admin: bool = False


class AdminIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    admin: AdminOut


class AdminResponse(BaseModel):
    admin: AdminOut


class AdminListResponse(BaseModel):
    admins: List[AdminOut]
