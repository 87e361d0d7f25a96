# In-memory CRUD for users
import copy
import re
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

# Leading integer the way JavaScript's parseInt reads it without a radix:
# "12abc" -> 12, "0x1f" -> 31. ASCII digits only.
_LEADING_HEX = re.compile(r"\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

SEED_USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "user1", "email": "example@gmail.com"},
    {"id": 2, "name": "user2", "email": "example2@gmail.com"},
    {"id": 3, "name": "user3", "email": "example3@gmail.com"},
]

UPDATABLE_FIELDS = ("name", "email")


def parse_user_id(raw: str) -> Optional[int]:
    """
    Parse a path segment into a user id.

    Returns None when the segment has no leading digits. None never
    matches a stored id, so lookups with it simply miss.
    """
    raw = raw or ""
    hex_match = _LEADING_HEX.match(raw)
    if hex_match is not None:
        sign, digits = hex_match.groups()
        if not digits:
            return None
        value = int(digits, 16)
        return -value if sign == "-" else value

    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _matches(record: Dict[str, Any], user_id: Optional[int]) -> bool:
    if user_id is None:
        return False
    value = record.get("id")
    # bool is an int subclass; True must not match id 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == user_id


class UserStore(ABC):
    """Ordered collection of user records."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def list(self) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    def get(self, user_id: Optional[int]) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def create(self, user: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def update(self, user_id: Optional[int], changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def delete(self, user_id: Optional[int]) -> Optional[List[Dict[str, Any]]]:
        ...


class InMemoryUserStore(UserStore):
    """
    UserStore backed by a plain list.

    Every operation runs under one lock and hands back deep copies, so
    callers never see a record while another request is changing it.
    Ids are not checked for uniqueness: create appends whatever it gets
    and lookups return the first match.
    """

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._users: List[Dict[str, Any]] = copy.deepcopy(seed if seed is not None else SEED_USERS)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._users)

    def get(self, user_id: Optional[int]) -> Optional[Dict[str, Any]]:
        with self._lock:
            user = self._find(user_id)
            return copy.deepcopy(user) if user is not None else None

    def create(self, user: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            self._users.append(copy.deepcopy(user))
            return copy.deepcopy(user)

    def update(self, user_id: Optional[int], changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            for field in UPDATABLE_FIELDS:
                if field in changes:
                    user[field] = copy.deepcopy(changes[field])
                else:
                    # An absent field is cleared, not left as it was
                    user.pop(field, None)
            return copy.deepcopy(user)

    def delete(self, user_id: Optional[int]) -> Optional[List[Dict[str, Any]]]:
        with self._lock:
            if self._find(user_id) is None:
                return None
            self._users = [u for u in self._users if not _matches(u, user_id)]
            return copy.deepcopy(self._users)

    def _find(self, user_id: Optional[int]) -> Optional[Dict[str, Any]]:
        for user in self._users:
            if _matches(user, user_id):
                return user
        return None
