from __future__ import annotations

from typing import TYPE_CHECKING

from app.profiles.audit import record_event
from app.profiles.utils import merge_profile

if TYPE_CHECKING:
    from app.profiles.models import ClientProfile
    from app.profiles.store import ProfileStore


def get_public_profile(store: "ProfileStore", client_id: str) -> dict[str, str] | None:
    """
    Public projection of a profile, or None when it cannot be shown.

    An all-empty record is indistinguishable from a missing one and is
    reported the same way.
    """
    profile = store.get(client_id)
    if profile is None or profile.is_empty():
        return None
    return profile.public_dict()


def update_profile(store: "ProfileStore", client_id: str, candidate: "ClientProfile") -> "ClientProfile | None":
    """Merge Name/Email from candidate into the stored profile."""
    changes: dict[str, dict[str, str]] = {}

    def _apply(current: "ClientProfile") -> "ClientProfile":
        before = current.copy()
        merged = merge_profile(current, candidate)
        for field in ("Name", "Email"):
            if getattr(before, field) != getattr(merged, field):
                changes[field] = {"old": getattr(before, field), "new": getattr(merged, field)}
        return merged

    updated = store.update(client_id, _apply)
    if updated is None:
        return None

    record_event(
        action="client_profile.update",
        entity_type="ClientProfile",
        entity_id=client_id,
        metadata={"changes": changes} if changes else None,
    )
    return updated


def delete_profile(store: "ProfileStore", client_id: str) -> bool:
    if not store.delete(client_id):
        return False
    record_event(action="client_profile.delete", entity_type="ClientProfile", entity_id=client_id)
    return True
