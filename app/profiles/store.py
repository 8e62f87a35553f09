from __future__ import annotations

import threading
from collections.abc import Callable, Iterable

from flask import Flask, current_app

from app.profiles.models import ClientProfile, seed_profiles


class ProfileStore:
    """
    In-memory client profiles keyed by client id.

    Every operation holds one lock. Records are copied on the way in and on
    the way out so callers never share state with the store.
    """

    def __init__(self, profiles: Iterable[ClientProfile] | dict[str, ClientProfile] | None = None) -> None:
        self._lock = threading.Lock()
        self._profiles: dict[str, ClientProfile] = {}
        if isinstance(profiles, dict):
            for client_id, profile in profiles.items():
                self._profiles[client_id] = profile.copy()
        elif profiles:
            for profile in profiles:
                self._profiles[profile.Id] = profile.copy()

    @classmethod
    def seeded(cls) -> "ProfileStore":
        return cls(seed_profiles())

    def get(self, client_id: str) -> ClientProfile | None:
        with self._lock:
            profile = self._profiles.get(client_id)
            return profile.copy() if profile is not None else None

    def set(self, client_id: str, profile: ClientProfile) -> None:
        with self._lock:
            self._profiles[client_id] = profile.copy()

    def delete(self, client_id: str) -> bool:
        with self._lock:
            return self._profiles.pop(client_id, None) is not None

    def update(self, client_id: str, apply: Callable[[ClientProfile], ClientProfile]) -> ClientProfile | None:
        """
        Read-modify-write under the lock. `apply` receives a copy of the
        current record and returns the record to store. Returns the stored
        record (copy), or None when the id is unknown.
        """
        with self._lock:
            current = self._profiles.get(client_id)
            if current is None:
                return None
            updated = apply(current.copy())
            self._profiles[client_id] = updated.copy()
            return updated.copy()

    def ids(self) -> list[str]:
        with self._lock:
            return sorted(self._profiles)

    def __contains__(self, client_id: object) -> bool:
        with self._lock:
            return client_id in self._profiles

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)


def init_store(app: Flask, store: ProfileStore | None = None) -> ProfileStore:
    if store is None:
        store = ProfileStore.seeded() if app.config.get("SEED_PROFILES") else ProfileStore()
    app.extensions["profile_store"] = store
    app.logger.info("Profile store ready (%d profiles)", len(store))
    return store


def profile_store(app: Flask | None = None) -> ProfileStore:
    """
    Store bound to the app. Use inside request handlers.
    """
    if app is None:
        app = current_app
    return app.extensions["profile_store"]
