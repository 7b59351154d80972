"""Identifier helpers shared by the repository and the controllers."""

import re
import uuid
from typing import Any

UUID_V4_PATTERN = re.compile(r"^[a-f0-9]{8}-[a-f0-9]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[a-f0-9]{12}$")


def is_valid_uuid_v4(value: Any) -> bool:
    """Check whether ``value`` is a lowercase, textual version-4 UUID."""
    if not isinstance(value, str):
        return False
    return UUID_V4_PATTERN.fullmatch(value) is not None


def normalize_org_id(org_id: str | uuid.UUID) -> str:
    """Return the textual form of an org ID; UUID instances are rendered canonically."""
    if isinstance(org_id, uuid.UUID):
        return str(org_id)
    return org_id
