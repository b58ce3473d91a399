"""User domain specific exceptions."""

from zercoin.domain.common.exceptions import LedgerError


class UserNotFoundError(LedgerError):
    """Raised when the requested user cannot be found."""

    code = "user_not_found"

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class UserAlreadyExistsError(LedgerError):
    """Raised when attempting to create a user with a duplicate username or email."""

    code = "user_already_exists"
