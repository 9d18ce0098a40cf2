# backend/services/song_validation.py

import re
from typing import Any, Dict

from models.song_models import SONG_FIELDS

RESTRICTED_FIELDS = ("Title", "Artist")
DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9\s]")


def validate_field(name: str, value: str) -> str:
    """
    Returns an error message for a single form field, or "" when it passes.
    Title and Artist only accept letters, numbers and whitespace.
    """
    if not value or not value.strip():
        return f"{name} is required"

    if name in RESTRICTED_FIELDS and DISALLOWED_CHARS.search(value):
        return f"{name} can only contain letters, numbers, and spaces"

    return ""


def validate_song(data: Dict[str, Any]) -> Dict[str, str]:
    """
    Validate every song field independently.
    Returns {field: message} for failing fields only; empty means valid.
    """
    errors: Dict[str, str] = {}
    for name in SONG_FIELDS:
        raw = data.get(name)
        value = raw if isinstance(raw, str) else ("" if raw is None else str(raw))
        message = validate_field(name, value)
        if message:
            errors[name] = message
    return errors
