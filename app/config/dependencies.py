from functools import lru_cache

from fastapi import Depends

from app.users.crud import InMemoryUserStore, UserStore
from app.users.services import UserService


# ----------------------------
# Dependency Injection Functions
# ----------------------------

# Process-wide user store, seeded on first use
@lru_cache
def get_user_store() -> UserStore:
    return InMemoryUserStore()


# User service bound to whichever store is injected
def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    return UserService(store=store)
