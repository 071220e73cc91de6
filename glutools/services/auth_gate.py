"""
Admin authentication and the admin-management permission rules.

Passwords are stored and compared in plaintext; the only guarantee kept is
that a password never leaves this module in a returned record.
"""
from __future__ import annotations

import logging
import secrets
from typing import Any, Dict, List

from glutools.core.errors import ForbiddenError, InvalidCredentials, NotFoundError, ValidationError
from glutools.services.repositories import AdminRepository, is_missing

logger = logging.getLogger(__name__)

Admin = Dict[str, Any]


class AuthGate:
    def __init__(self, admins: AdminRepository):
        self.admins = admins

    def login(self, email: str | None, password: str | None) -> Admin:
        if is_missing(email) or is_missing(password):
            raise ValidationError("Email and password are required")

        for admin in self.admins.list_all():
            if admin.get("email") != email:
                continue
            stored = str(admin.get("password") or "")
            if secrets.compare_digest(stored.encode("utf-8"), password.encode("utf-8")):
                return AdminRepository.public(admin)

        logger.warning("Failed login for %s", email)
        raise InvalidCredentials("Invalid credentials")

    # -------------------
    # Permission rules
    # -------------------
    @staticmethod
    def ensure_can_create(caller: Admin) -> None:
        if not caller.get("is_super_admin"):
            raise ForbiddenError("Only super admins can create new admin accounts")

    @staticmethod
    def ensure_can_edit(caller: Admin, target_id: str) -> None:
        if caller.get("is_super_admin") or caller.get("id") == target_id:
            return
        raise ForbiddenError("You can only edit your own account")

    @staticmethod
    def ensure_can_delete(caller: Admin, target: Admin, admins: List[Admin]) -> None:
        if not caller.get("is_super_admin"):
            raise ForbiddenError("Only super admins can delete admin accounts")
        if target.get("is_super_admin"):
            raise ForbiddenError("Cannot delete super admin account")
        if target.get("id") == caller.get("id"):
            raise ForbiddenError("Cannot delete your own account")
        if not [a for a in admins if a.get("id") != target.get("id")]:
            raise ForbiddenError("Cannot delete the last admin account")

    def delete_admin(self, caller: Admin, target_id: str) -> None:
        """Checks every deletion rule against the current collection, then deletes."""
        admins = self.admins.list_all()
        target = next((a for a in admins if a.get("id") == target_id), None)
        if target is None:
            raise NotFoundError("Admin not found")
        self.ensure_can_delete(caller, target, admins)
        self.admins.delete(target_id)
        logger.info("Admin %s deleted by %s", target_id, caller.get("id"))
