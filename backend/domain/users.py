"""User record and the fixed seed list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    name: str
    email: str

    def to_dict(self) -> dict:
        # ordem das chaves faz parte do formato gravado
        return {"name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(name=data["name"], email=data["email"])


SEED_USERS: tuple[User, ...] = (User("Aye Chan", "fate.macz@gmail.com"),)
