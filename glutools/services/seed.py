"""
Default data written at startup when a collection key is absent.

`seed_store` is idempotent: each collection is checked on its own and a
second run writes nothing.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from glutools.services.kv_store import KeyValueStore
from glutools.services.repositories import utcnow_iso

logger = logging.getLogger(__name__)

DEFAULT_SUBJECTS: List[Dict[str, str]] = [
    {"id": "design", "name": "Design", "description": "General design tools and resources"},
    {"id": "development", "name": "Development", "description": "Web and software development tools"},
    {"id": "marketing", "name": "Marketing", "description": "Digital marketing and advertising tools"},
    {"id": "video", "name": "Video editing/production", "description": "Video creation and editing tools"},
    {"id": "social", "name": "Social media", "description": "Social media management and content creation"},
    {"id": "gameart", "name": "Game art / 3D modeling", "description": "3D modeling and game art creation tools"},
    {"id": "gamedesign", "name": "Game design", "description": "Game development and design tools"},
    {"id": "vr", "name": "VR development", "description": "Virtual reality development tools"},
    {"id": "brand", "name": "Brand design", "description": "Branding and identity design tools"},
    {"id": "content", "name": "Content design", "description": "Content creation and design tools"},
    {"id": "art", "name": "Art design", "description": "Digital art and illustration tools"},
    {"id": "dtp", "name": "Media production (DTP)", "description": "Desktop publishing and media production tools"},
]

SAMPLE_TOOLS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "subject_id": "design",
        "name": "Figma AI",
        "description": "AI-powered design assistant integrated into Figma",
        "advantages": ["Streamlines design workflow", "Generates design variations", "Smart layout suggestions"],
        "disadvantages": ["Requires Figma subscription", "Limited to Figma ecosystem"],
        "image_url": "",
        "link_url": "https://www.figma.com/",
    },
    {
        "id": "2",
        "subject_id": "development",
        "name": "GitHub Copilot",
        "description": "AI pair programmer that helps write code faster",
        "advantages": ["Code completion", "Supports multiple languages", "Learns from context"],
        "disadvantages": ["Subscription required", "May generate incorrect code"],
        "image_url": "",
        "link_url": "https://github.com/features/copilot",
    },
    {
        "id": "3",
        "subject_id": "marketing",
        "name": "ChatGPT",
        "description": "AI assistant for content creation and marketing copy",
        "advantages": ["Versatile content generation", "Multiple languages", "Creative writing"],
        "disadvantages": ["May lack brand consistency", "Requires fact-checking"],
        "image_url": "",
        "link_url": "https://chat.openai.com/",
    },
]


def default_admin(name: str, email: str, password: str) -> Dict[str, Any]:
    return {
        "id": "1",
        "name": name,
        "email": email,
        "password": password,
        "created_at": utcnow_iso(),
        "is_super_admin": True,
    }


def seed_store(
    store: KeyValueStore,
    admin_name: str = "GLU Admin",
    admin_email: str = "admin@glutools.com",
    admin_password: str = "admin123",
) -> List[str]:
    """
    Writes subjects, the super admin and the sample tools where missing.
    Returns the keys that were written.
    """
    written: List[str] = []

    if not store.get("subjects"):
        store.set("subjects", DEFAULT_SUBJECTS)
        logger.info("Initialized default subjects")
        written.append("subjects")

    if not store.get("admins"):
        store.set("admins", [default_admin(admin_name, admin_email, admin_password)])
        logger.info("Initialized default admin account")
        written.append("admins")

    if not store.get("ai_tools"):
        store.set("ai_tools", SAMPLE_TOOLS)
        logger.info("Initialized sample AI tools")
        written.append("ai_tools")

    return written
