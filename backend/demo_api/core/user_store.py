"""User Store: the in-memory, insertion-ordered collection of user records.

Invariants:
    - Records keep insertion order; the list is never re-sorted
    - Identifiers come from next_id, which only increases (never reused)
    - Every read and write holds _lock, so id assignment never interleaves and
      a delete is never observed half-applied
    - State lives only in the instance: lost when the process exits

Design Decisions:
    - One explicitly owned instance per app (app.state.store), injected into
      routes via a dependency: no module-level mutable globals
    - threading.Lock although the event loop already serialises async routes:
      the store stays safe if a sync route or worker thread ever touches it
"""

import re
import threading
from dataclasses import dataclass

from demo_api.core.domain_types import UserId
from demo_api.core.errors import UserNotFoundError


EMAIL_DOMAIN: str = "example.com"
FALLBACK_LAST_NAME: str = "User"

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class UserRecord:
    """A stored user. job is optional on seed records."""
    id: UserId
    email: str
    first_name: str
    last_name: str
    job: str | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }
        if self.job is not None:
            data["job"] = self.job
        return data


SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(UserId(1), "janet.weaver@example.com", "Janet", "Weaver", "QA Engineer"),
    UserRecord(UserId(2), "emma.wong@example.com", "Emma", "Wong", "Product Owner"),
)


def derive_user(user_id: UserId, name: str, job: str) -> UserRecord:
    """Build the stored record for a created user from its display name.

    "Ada Lovelace King" -> ada.lovelace.king@example.com, first "Ada",
    last "Lovelace King". A single-word name gets last name "User".
    """
    parts = name.split(" ")
    return UserRecord(
        id=user_id,
        email=f"{_WHITESPACE_RUN.sub('.', name.lower())}@{EMAIL_DOMAIN}",
        first_name=parts[0],
        last_name=" ".join(parts[1:]) or FALLBACK_LAST_NAME,
        job=job,
    )


class UserStore:
    """Ordered user records plus the identifier counter."""

    def __init__(self, users: list[UserRecord] | None = None):
        self._users: list[UserRecord] = list(users or [])
        self._next_id = max((u.id for u in self._users), default=0) + 1
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "UserStore":
        """Fresh store holding the two seed records (next id: 3)."""
        return cls(list(SEED_USERS))

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_all(self) -> list[UserRecord]:
        """Snapshot of every record in store order."""
        with self._lock:
            return list(self._users)

    def find(self, user_id: float) -> UserRecord | None:
        """First record whose id equals user_id, or None."""
        with self._lock:
            return next((u for u in self._users if u.id == user_id), None)

    def get(self, user_id: float) -> UserRecord:
        user = self.find(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create(self, name: str, job: str) -> UserRecord:
        """Assign the next id and append the derived record."""
        with self._lock:
            user = derive_user(UserId(self._next_id), name, job)
            self._next_id += 1
            self._users.append(user)
            return user

    def delete(self, user_id: int) -> int:
        """Remove every record with user_id. Returns how many were removed."""
        with self._lock:
            remaining = [u for u in self._users if u.id != user_id]
            removed = len(self._users) - len(remaining)
            if removed == 0:
                raise UserNotFoundError(user_id)
            self._users = remaining
            return removed
