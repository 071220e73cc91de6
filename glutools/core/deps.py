from fastapi import Depends, Request

from glutools.core.config import get_settings
from glutools.services.auth_gate import AuthGate
from glutools.services.kv_store import KeyValueStore
from glutools.services.repositories import (
    AdminRepository,
    ContactRepository,
    ReviewRepository,
    SubjectRepository,
    ToolRepository,
    UploadRepository,
)


def get_settings_dep():
    return get_settings()


def get_store(request: Request) -> KeyValueStore:
    """
    Store handle built once by create_app() and kept on app.state.
    """
    return request.app.state.store


def get_subject_repository(store: KeyValueStore = Depends(get_store)) -> SubjectRepository:
    return SubjectRepository(store)


def get_tool_repository(store: KeyValueStore = Depends(get_store)) -> ToolRepository:
    return ToolRepository(store)


def get_review_repository(store: KeyValueStore = Depends(get_store)) -> ReviewRepository:
    return ReviewRepository(store)


def get_upload_repository(store: KeyValueStore = Depends(get_store)) -> UploadRepository:
    return UploadRepository(store)


def get_contact_repository(store: KeyValueStore = Depends(get_store)) -> ContactRepository:
    return ContactRepository(store)


def get_admin_repository(store: KeyValueStore = Depends(get_store)) -> AdminRepository:
    return AdminRepository(store)


def get_auth_gate(admins: AdminRepository = Depends(get_admin_repository)) -> AuthGate:
    return AuthGate(admins)
