"""
models/user.py
--------------
Domain model for LightBnB users (hosts and guests alike).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    A registered LightBnB user.

    Attributes:
        name: Display name.
        email: Login email, unique by convention (enforced on insert).
        password: Stored password hash; never interpreted by this layer.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
