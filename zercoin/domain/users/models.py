"""Domain models for users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    id: int
    username: str
    status: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    def is_active(self) -> bool:
        return self.status == "active"
