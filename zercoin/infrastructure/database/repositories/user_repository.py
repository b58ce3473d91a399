"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select

from zercoin.db.models import User
from zercoin.domain.common.repository import AsyncRepository


class SqlUserRepository(AsyncRepository[User]):
    """User repository backed by SQLAlchemy models."""

    async def get_user(self, user_id: int) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        return await self.first(select(User).where(User.username == username))

    async def get_by_email(self, email: str) -> User | None:
        return await self.first(select(User).where(User.email == email))

    async def list_users(self) -> Sequence[User]:
        return await self.all(select(User).order_by(User.id))

    async def create_user(self, *, username: str, email: str | None, status: str) -> User:
        return await self.add(User(username=username, email=email, status=status))
