"""
Collection repositories over the key-value store.

One repository per entity; each owns a single array-valued key. Every
operation reads the whole collection and, for writes, stores the whole
collection back. Nothing is cached between calls.
"""
from __future__ import annotations

import copy
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

from glutools.core.errors import ConflictError, NotFoundError, ValidationError
from glutools.services.kv_store import KeyValueStore

Record = Dict[str, Any]

PLACEHOLDER_URL = "https://via.placeholder.com/400x300?text={name}"


# =========================================================
# Helpers
# =========================================================
def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_id(existing: Iterable[Record]) -> str:
    taken = {r.get("id") for r in existing}
    while True:
        candidate = str(uuid.uuid4())
        if candidate not in taken:
            return candidate


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def clamp_rating(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("Rating must be a number")
    try:
        rating = int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("Rating must be a number")
    return max(1, min(5, rating))


# =========================================================
# Generic repository
# =========================================================
class Repository:
    key: str = ""
    fields: tuple = ()
    required_fields: tuple = ()
    defaults: Dict[str, Any] = {}
    foreign_key: Optional[str] = None
    label: str = "Record"

    def __init__(self, store: KeyValueStore):
        self.store = store

    # -------------------
    # Reads
    # -------------------
    def list_all(self) -> List[Record]:
        return self.store.get(self.key) or []

    def list_by_foreign_key(self, value: str) -> List[Record]:
        if not self.foreign_key:
            raise TypeError(f"{type(self).__name__} has no foreign key")
        return [r for r in self.list_all() if r.get(self.foreign_key) == value]

    def find(self, record_id: str) -> Record:
        for record in self.list_all():
            if record.get("id") == record_id:
                return record
        raise NotFoundError(f"{self.label} not found")

    # -------------------
    # Writes
    # -------------------
    def save_all(self, records: List[Record]) -> None:
        self.store.set(self.key, records)

    def validate(self, payload: Record) -> None:
        missing = [f for f in self.required_fields if is_missing(payload.get(f))]
        if missing:
            raise ValidationError("Missing required fields: " + ", ".join(missing))

    def build(self, payload: Record, records: List[Record]) -> Record:
        record: Record = {"id": new_id(records)}
        for field in self.fields:
            value = payload.get(field)
            if value is None:
                if field not in self.defaults:
                    continue
                value = copy.deepcopy(self.defaults[field])
            record[field] = value
        return record

    def create(self, payload: Record) -> Record:
        self.validate(payload)
        records = self.list_all()
        record = self.build(payload, records)
        records.append(record)
        self.save_all(records)
        return record

    def _index_of(self, records: List[Record], record_id: str) -> int:
        for i, record in enumerate(records):
            if record.get("id") == record_id:
                return i
        raise NotFoundError(f"{self.label} not found")

    def update(self, record_id: str, changes: Record) -> Record:
        """
        Applies every known field that is present and not None in `changes`.
        Empty strings and empty lists are applied like any other value,
        except that a required field cannot be blanked.
        """
        records = self.list_all()
        index = self._index_of(records, record_id)
        blanked = [
            f for f in self.required_fields
            if changes.get(f) is not None and is_missing(changes[f])
        ]
        if blanked:
            raise ValidationError("Required fields cannot be empty: " + ", ".join(blanked))
        record = records[index]
        for field in self.fields:
            if changes.get(field) is not None:
                record[field] = changes[field]
        self.save_all(records)
        return record

    def delete(self, record_id: str) -> None:
        records = self.list_all()
        remaining = [r for r in records if r.get("id") != record_id]
        if len(remaining) == len(records):
            raise NotFoundError(f"{self.label} not found")
        self.save_all(remaining)


# =========================================================
# Entities
# =========================================================
class SubjectRepository(Repository):
    key = "subjects"
    fields = ("name", "description")
    label = "Subject"


class ToolRepository(Repository):
    key = "ai_tools"
    fields = (
        "subject_id", "name", "description",
        "advantages", "disadvantages", "image_url", "link_url",
    )
    required_fields = ("subject_id", "name", "description")
    defaults = {
        "advantages": [],
        "disadvantages": [],
        "image_url": "",
        "link_url": "",
    }
    foreign_key = "subject_id"
    label = "Tool"

    def append_missing(self, candidates: List[Record]) -> tuple[int, int]:
        """Appends the candidates whose id is not stored yet. Returns (added, total)."""
        records = self.list_all()
        existing_ids = {r.get("id") for r in records}
        to_add = [copy.deepcopy(c) for c in candidates if c["id"] not in existing_ids]
        if to_add:
            records.extend(to_add)
            self.save_all(records)
        return len(to_add), len(records)


class ReviewRepository(Repository):
    key = "reviews"
    fields = ("tool_id", "author_name", "rating", "comment")
    required_fields = ("tool_id", "rating", "comment")
    defaults = {"author_name": "Anonymous"}
    foreign_key = "tool_id"
    label = "Review"

    def validate(self, payload: Record) -> None:
        super().validate(payload)
        clamp_rating(payload["rating"])

    def build(self, payload: Record, records: List[Record]) -> Record:
        record = super().build(payload, records)
        if is_missing(record.get("author_name")):
            record["author_name"] = "Anonymous"
        record["rating"] = clamp_rating(record["rating"])
        record["created_at"] = utcnow_iso()
        record["helpful_count"] = 0
        return record

    def mark_helpful(self, review_id: str) -> Record:
        records = self.list_all()
        review = records[self._index_of(records, review_id)]
        review["helpful_count"] = int(review.get("helpful_count") or 0) + 1
        self.save_all(records)
        return review


class UploadRepository(Repository):
    key = "uploads"
    fields = ("tool_id", "file_name", "file_url", "file_type", "file_size", "author_name")
    required_fields = ("tool_id", "file_name", "author_name")
    defaults = {"file_type": "", "file_size": 0}
    foreign_key = "tool_id"
    label = "Upload"

    def build(self, payload: Record, records: List[Record]) -> Record:
        record = super().build(payload, records)
        if is_missing(record.get("file_url")):
            record["file_url"] = PLACEHOLDER_URL.format(name=quote(record["file_name"], safe=""))
        record["created_at"] = utcnow_iso()
        return record


class ContactRepository(Repository):
    key = "contact_submissions"
    fields = ("name", "email", "message")
    required_fields = ("name", "email", "message")
    label = "Submission"

    def build(self, payload: Record, records: List[Record]) -> Record:
        record = super().build(payload, records)
        record["date"] = utcnow_iso()
        return record


class AdminRepository(Repository):
    key = "admins"
    fields = ("name", "email", "password")
    required_fields = ("name", "email", "password")
    label = "Admin"

    @staticmethod
    def public(admin: Record) -> Record:
        return {k: v for k, v in admin.items() if k != "password"}

    def list_public(self) -> List[Record]:
        return [self.public(a) for a in self.list_all()]

    def validate(self, payload: Record) -> None:
        missing = [f for f in self.required_fields if is_missing(payload.get(f))]
        if missing:
            raise ValidationError("Name, email, and password are required")

    def build(self, payload: Record, records: List[Record]) -> Record:
        if any(a.get("email") == payload["email"] for a in records):
            raise ConflictError("Admin with this email already exists")
        record = super().build(payload, records)
        record["created_at"] = utcnow_iso()
        record["is_super_admin"] = False
        return record

    def update(self, record_id: str, changes: Record) -> Record:
        records = self.list_all()
        self._index_of(records, record_id)
        email = changes.get("email")
        if email is not None:
            for admin in records:
                if admin.get("email") == email and admin.get("id") != record_id:
                    raise ConflictError("Admin with this email already exists")
        return super().update(record_id, changes)
