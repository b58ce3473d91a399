"""Repository protocol for users."""

from __future__ import annotations

from typing import Protocol, Sequence

from zercoin.db.models import User as UserModel


class UserRepository(Protocol):
    """Abstract repository interface for user persistence."""

    async def get_user(self, user_id: int) -> UserModel | None:
        ...

    async def get_by_username(self, username: str) -> UserModel | None:
        ...

    async def get_by_email(self, email: str) -> UserModel | None:
        ...

    async def list_users(self) -> Sequence[UserModel]:
        ...

    async def create_user(self, *, username: str, email: str | None, status: str) -> UserModel:
        ...
