# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Record types returned by fixture providers.

- UserRecord: One sample user (id, email, roles, password)

Records are plain tuples so they compare equal to literal tuples in tests,
and serialize to JSON-compatible dicts for export.
"""

from typing import Any, Dict, List, NamedTuple


class UserRecord(NamedTuple):
    """A sample user.

    Fields keep their positional order: ``record[0]`` is the id,
    ``record[3]`` the password.

    The password is plain text. These are fixture values only and are
    never hashed.
    """

    id: int
    email: str
    roles: List[str]
    password: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "id": self.id,
            "email": self.email,
            "roles": list(self.roles),
            "password": self.password,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserRecord":
        """Deserialize from JSON-compatible dict."""
        return cls(
            id=data["id"],
            email=data["email"],
            roles=list(data.get("roles", [])),
            password=data["password"],
        )
