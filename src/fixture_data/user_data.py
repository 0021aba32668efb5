# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Sample user records for tests."""

from typing import List, Tuple

from .base import FixtureData
from .models import UserRecord

# (id, email, roles, password)
USER_RECORDS: Tuple[Tuple[int, str, Tuple[str, ...], str], ...] = (
    (1, "user_one@example.org", (), "user-one-!"),
    (2, "user_two@example.org", (), "user-two-@"),
    (3, "user_three@example.org", (), "user-three-#"),
    (4, "user_four@example.org", (), "user-four-$"),
)


class UserData(FixtureData):
    """Provides the four sample users.

    Example:
        >>> UserData().get_data()[0]
        UserRecord(id=1, email='user_one@example.org', roles=[], password='user-one-!')
    """

    def name(self) -> str:
        return "users"

    def get_data(self) -> List[UserRecord]:
        """Return the sample users in id order.

        Every call builds fresh records (including fresh ``roles`` lists),
        so mutating a result never leaks into later calls.
        """
        return [
            UserRecord(id=user_id, email=email, roles=list(roles), password=password)
            for user_id, email, roles, password in USER_RECORDS
        ]
