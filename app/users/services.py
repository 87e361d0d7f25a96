from typing import Any, Dict, List

from app.shared.annotations.logging import LoggerBinding
from app.users.crud import UserStore, parse_user_id
from app.users.exceptions import UserNotFoundError


@LoggerBinding("user_service")
class UserService:
    """Translates route calls into store operations and logs each one."""

    def __init__(self, store: UserStore, logger=None):
        self.store = store
        self.logger = logger

    async def list_users(self) -> List[Dict[str, Any]]:
        users = self.store.list()
        self.logger.debug("Users listed", count=len(users))
        return users

    async def retrieve_user(self, raw_id: str) -> Dict[str, Any]:
        user = self.store.get(parse_user_id(raw_id))
        if user is None:
            self._not_found("get", raw_id)
        return user

    async def register_user(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        user = self.store.create(user_data)
        self.logger.info("User registered", user_id=user.get("id"))
        return user

    async def modify_user(self, raw_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        user = self.store.update(parse_user_id(raw_id), changes)
        if user is None:
            self._not_found("update", raw_id)
        self.logger.info("User updated", user_id=user.get("id"))
        return user

    async def remove_user(self, raw_id: str) -> List[Dict[str, Any]]:
        remaining = self.store.delete(parse_user_id(raw_id))
        if remaining is None:
            self._not_found("delete", raw_id)
        self.logger.info("User removed", raw_id=raw_id, remaining=len(remaining))
        return remaining

    def _not_found(self, operation: str, raw_id: str):
        self.logger.warning("User not found", operation=operation, raw_id=raw_id)
        raise UserNotFoundError(raw_id)
