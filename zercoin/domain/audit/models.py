"""Audit entry domain model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

WALLET_UPDATE = "wallet_update"
TRANSACTION_INSERT = "transaction_insert"


@dataclass(slots=True, frozen=True)
class AuditEntry:
    id: int
    action: str
    info: str
    created_at: Optional[datetime]

    def fields(self) -> dict[str, str]:
        """Split ``info`` (``key=value,key=value``) into a mapping."""
        parsed: dict[str, str] = {}
        for part in self.info.split(","):
            key, sep, value = part.partition("=")
            if sep:
                parsed[key.strip()] = value.strip()
        return parsed
