from __future__ import annotations

from dataclasses import asdict, dataclass, replace


@dataclass
class ClientProfile:
    # Field names double as the JSON wire names.
    Email: str = ""
    Id: str = ""
    Name: str = ""
    Token: str = ""  # sensitive: never part of public_dict()

    def is_empty(self) -> bool:
        return self == ClientProfile()

    def copy(self) -> "ClientProfile":
        return replace(self)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def public_dict(self) -> dict[str, str]:
        """Projection returned by GET: everything except Token."""
        return {"Email": self.Email, "Id": self.Id, "Name": self.Name}


PROFILE_FIELDS = ("Email", "Id", "Name", "Token")

SEED_PROFILES = (
    ClientProfile(Email="email1@gmail.com", Id="user1", Name="User One", Token="123"),
    ClientProfile(Email="email2@gmail.com", Id="user2", Name="User Two", Token="456"),
)


def seed_profiles() -> dict[str, ClientProfile]:
    return {p.Id: p.copy() for p in SEED_PROFILES}
