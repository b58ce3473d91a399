"""Domain services for user provisioning."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.db.models import User as UserModel
from zercoin.infrastructure.database.repositories.user_repository import SqlUserRepository

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .models import User
from .repository import UserRepository


class UserService:
    """Creates and looks up wallet owners."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        return cls(SqlUserRepository(session))

    async def get_user(self, user_id: int) -> User:
        model = await self._repository.get_user(user_id)
        if model is None:
            raise UserNotFoundError(user_id)
        return self._to_domain(model)

    async def list_users(self) -> Sequence[User]:
        return [self._to_domain(model) for model in await self._repository.list_users()]

    async def create_user(
        self,
        username: str,
        *,
        email: str | None = None,
        status: str = "active",
    ) -> User:
        if await self._repository.get_by_username(username) is not None:
            raise UserAlreadyExistsError(f"Username already exists: {username}")
        if email is not None and await self._repository.get_by_email(email) is not None:
            raise UserAlreadyExistsError(f"Email already exists: {email}")

        model = await self._repository.create_user(username=username, email=email, status=status)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            status=model.status,
            email=model.email,
            created_at=model.created_at,
        )
