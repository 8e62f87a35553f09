import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    seed_profiles: bool


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getbool(name: str, default: bool) -> bool:
    raw = _getenv(name)
    if not raw:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    return Settings(
        env=_getenv("ENV", "development"),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        seed_profiles=_getbool("SEED_PROFILES", True),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "ENV": s.env,
        "LOG_LEVEL": s.log_level,
        "SEED_PROFILES": s.seed_profiles,
    }
