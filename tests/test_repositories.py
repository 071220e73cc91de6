import pytest

from glutools.core.errors import ConflictError, NotFoundError, ValidationError
from glutools.services.repositories import (
    AdminRepository,
    ContactRepository,
    ReviewRepository,
    ToolRepository,
    UploadRepository,
    clamp_rating,
)

TOOL = {
    "subject_id": "design",
    "name": "Krita AI",
    "description": "Diffusion plugin for Krita",
}


# -------------------
# Tools
# -------------------
def test_create_tool_applies_defaults(store):
    tools = ToolRepository(store)
    before = len(tools.list_all())

    tool = tools.create(TOOL)

    after = tools.list_all()
    assert len(after) == before + 1
    assert after[-1] == tool
    assert tool["id"]
    assert {k: tool[k] for k in TOOL} == TOOL
    assert tool["advantages"] == []
    assert tool["disadvantages"] == []
    assert tool["image_url"] == ""
    assert tool["link_url"] == ""


def test_create_tool_keeps_payload_fields(store):
    tools = ToolRepository(store)
    payload = {**TOOL, "advantages": ["Free"], "link_url": "https://krita.org"}
    tool = tools.create(payload)
    assert tool["advantages"] == ["Free"]
    assert tool["link_url"] == "https://krita.org"


def test_create_tool_ignores_unknown_fields(store):
    tool = ToolRepository(store).create({**TOOL, "id": "forced", "rank": 1})
    assert tool["id"] != "forced"
    assert "rank" not in tool


@pytest.mark.parametrize("missing", ["subject_id", "name", "description"])
def test_create_tool_requires_fields(store, missing):
    payload = {k: v for k, v in TOOL.items() if k != missing}
    with pytest.raises(ValidationError):
        ToolRepository(store).create(payload)
    assert store.get("ai_tools") is None


def test_create_tool_blank_required_field(store):
    with pytest.raises(ValidationError):
        ToolRepository(store).create({**TOOL, "name": "  "})


def test_ids_are_unique(store):
    tools = ToolRepository(store)
    ids = {tools.create(TOOL)["id"] for _ in range(20)}
    assert len(ids) == 20


def test_list_by_foreign_key(seeded_store):
    tools = ToolRepository(seeded_store)
    design = tools.list_by_foreign_key("design")
    assert [t["name"] for t in design] == ["Figma AI"]
    assert tools.list_by_foreign_key("nope") == []


def test_update_with_empty_changes_is_noop(seeded_store):
    tools = ToolRepository(seeded_store)
    before = tools.find("2")
    assert tools.update("2", {}) == before
    assert tools.find("2") == before


def test_update_applies_present_fields(seeded_store):
    tools = ToolRepository(seeded_store)
    updated = tools.update("1", {"name": "Figma", "advantages": [], "image_url": "", "link_url": None})
    assert updated["name"] == "Figma"
    assert updated["advantages"] == []
    assert updated["image_url"] == ""
    # None means "not provided"
    assert updated["link_url"] == "https://www.figma.com/"
    assert updated["id"] == "1"
    assert tools.find("1") == updated


def test_update_cannot_blank_required_field(seeded_store):
    tools = ToolRepository(seeded_store)
    with pytest.raises(ValidationError):
        tools.update("1", {"name": ""})
    assert tools.find("1")["name"] == "Figma AI"


def test_update_unknown_id(seeded_store):
    with pytest.raises(NotFoundError):
        ToolRepository(seeded_store).update("404", {"name": "x"})


def test_delete_then_find(seeded_store):
    tools = ToolRepository(seeded_store)
    tools.delete("3")
    with pytest.raises(NotFoundError):
        tools.find("3")
    assert len(tools.list_all()) == 2


def test_delete_unknown_id_keeps_collection(seeded_store):
    tools = ToolRepository(seeded_store)
    with pytest.raises(NotFoundError):
        tools.delete("404")
    assert len(tools.list_all()) == 3


def test_append_missing_skips_existing_ids(seeded_store):
    tools = ToolRepository(seeded_store)
    candidates = [
        {"id": "1", "subject_id": "design", "name": "dup", "description": "d"},
        {"id": "new", "subject_id": "vr", "name": "New", "description": "d"},
    ]
    assert tools.append_missing(candidates) == (1, 4)
    assert tools.append_missing(candidates) == (0, 4)
    assert tools.find("1")["name"] == "Figma AI"


# -------------------
# Reviews
# -------------------
@pytest.mark.parametrize("raw, expected", [(0, 1), (9, 5), (-3, 1), (3, 3), ("4", 4), (4.8, 4)])
def test_clamp_rating(raw, expected):
    assert clamp_rating(raw) == expected


@pytest.mark.parametrize("raw", ["abc", None, True, [], "nan"])
def test_clamp_rating_rejects_non_numbers(raw):
    with pytest.raises(ValidationError):
        clamp_rating(raw)


def test_create_review(store):
    reviews = ReviewRepository(store)
    review = reviews.create({"tool_id": "1", "rating": 0, "comment": "meh"})
    assert review["rating"] == 1
    assert review["author_name"] == "Anonymous"
    assert review["helpful_count"] == 0
    assert review["created_at"]

    review = reviews.create({"tool_id": "1", "rating": 9, "comment": "wow", "author_name": "Noor"})
    assert review["rating"] == 5
    assert review["author_name"] == "Noor"


def test_create_review_requires_fields(store):
    reviews = ReviewRepository(store)
    with pytest.raises(ValidationError):
        reviews.create({"tool_id": "1", "comment": "no rating"})
    with pytest.raises(ValidationError):
        reviews.create({"tool_id": "1", "rating": 3})
    with pytest.raises(ValidationError):
        reviews.create({"tool_id": "1", "rating": "five", "comment": "x"})
    assert reviews.list_all() == []


def test_mark_helpful_increments_by_one(store):
    reviews = ReviewRepository(store)
    review = reviews.create({"tool_id": "1", "rating": 4, "comment": "good"})
    counts = [reviews.mark_helpful(review["id"])["helpful_count"] for _ in range(3)]
    assert counts == [1, 2, 3]
    assert reviews.find(review["id"])["helpful_count"] == 3


def test_mark_helpful_unknown_review(store):
    with pytest.raises(NotFoundError):
        ReviewRepository(store).mark_helpful("404")


# -------------------
# Uploads / contact
# -------------------
def test_create_upload_uses_placeholder_url(store):
    upload = UploadRepository(store).create({
        "tool_id": "1",
        "file_name": "my notes.pdf",
        "file_type": "application/pdf",
        "file_size": 12,
        "author_name": "Sam",
    })
    assert upload["file_url"] == "https://via.placeholder.com/400x300?text=my%20notes.pdf"
    assert upload["file_size"] == 12
    assert upload["created_at"]


def test_contact_submission_is_dated(store):
    contact = ContactRepository(store)
    submission = contact.create({"name": "Eva", "email": "eva@example.com", "message": "Hi"})
    assert submission["date"]
    with pytest.raises(ValidationError):
        contact.create({"name": "Eva", "email": "eva@example.com"})
    assert len(contact.list_all()) == 1


# -------------------
# Admins
# -------------------
def test_create_admin(seeded_store):
    admins = AdminRepository(seeded_store)
    admin = admins.create({"name": "Tess", "email": "tess@glutools.com", "password": "pw"})
    assert admin["is_super_admin"] is False
    assert admin["created_at"]
    assert "password" not in AdminRepository.public(admin)
    assert all("password" not in a for a in admins.list_public())


def test_create_admin_duplicate_email(seeded_store):
    admins = AdminRepository(seeded_store)
    with pytest.raises(ConflictError):
        admins.create({"name": "Copy", "email": "admin@glutools.com", "password": "pw"})
    assert len(admins.list_all()) == 1


def test_update_admin_email_collision(seeded_store):
    admins = AdminRepository(seeded_store)
    other = admins.create({"name": "Tess", "email": "tess@glutools.com", "password": "pw"})
    with pytest.raises(ConflictError):
        admins.update(other["id"], {"email": "admin@glutools.com"})
    # keeping one's own email is fine
    assert admins.update(other["id"], {"email": "tess@glutools.com"})["email"] == "tess@glutools.com"


def test_update_unknown_admin_is_not_found_even_with_taken_email(seeded_store):
    with pytest.raises(NotFoundError):
        AdminRepository(seeded_store).update("404", {"email": "admin@glutools.com"})
