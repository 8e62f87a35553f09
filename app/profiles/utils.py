from __future__ import annotations

import json

from app.profiles.models import PROFILE_FIELDS, ClientProfile


def _match_key(payload: dict, field: str) -> str | None:
    """Exact key first, then the first case-insensitive match."""
    if field in payload:
        return field
    lowered = field.lower()
    for key in payload:
        if isinstance(key, str) and key.lower() == lowered:
            return key
    return None


def parse_profile_payload(raw: bytes | str | None) -> tuple[ClientProfile | None, str | None]:
    """Parse a PATCH body into a candidate profile. Returns (profile, error)."""
    if raw is None:
        raw = b""
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return None, f"Invalid JSON: {e}"
    if value is None:
        return ClientProfile(), None
    if not isinstance(value, dict):
        return None, "Invalid JSON: body must be an object."

    candidate = ClientProfile()
    for field in PROFILE_FIELDS:
        key = _match_key(value, field)
        if key is None or value[key] is None:
            continue
        if not isinstance(value[key], str):
            return None, f"Invalid JSON: {field} must be a string."
        setattr(candidate, field, value[key])
    return candidate, None


def merge_profile(current: ClientProfile, candidate: ClientProfile) -> ClientProfile:
    # Id and Token are never taken from the candidate.
    if candidate.Name:
        current.Name = candidate.Name
    if candidate.Email:
        current.Email = candidate.Email
    return current
