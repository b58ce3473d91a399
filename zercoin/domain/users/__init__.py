"""User domain services and models."""

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .models import User
from .service import UserService

__all__ = [
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserService",
]
