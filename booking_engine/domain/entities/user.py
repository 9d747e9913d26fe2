"""Identity data the engine needs for notifications and contract snapshots."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    id: int
    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
