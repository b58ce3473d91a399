"""SQLAlchemy ORM models."""
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from zercoin.db.types import LedgerAmount
from zercoin.infrastructure.database.base import Base

# DECIMAL(18, 8): ten integer digits, eight fractional digits.
Amount = LedgerAmount()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True)
    status = Column(String(20), nullable=False, default="active", server_default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    wallets = relationship("Wallet", back_populates="user")


class Wallet(Base):
    __tablename__ = "wallets"
    __table_args__ = (CheckConstraint("balance >= 0", name="ck_wallets_balance_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    address = Column(String(100), unique=True, nullable=False)
    balance = Column(Amount, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="wallets")


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        CheckConstraint(
            "(type = 'transfer' AND from_wallet_id IS NOT NULL AND to_wallet_id IS NOT NULL"
            " AND from_wallet_id <> to_wallet_id)"
            " OR (type = 'deposit' AND from_wallet_id IS NULL AND to_wallet_id IS NOT NULL)"
            " OR (type = 'withdraw' AND from_wallet_id IS NOT NULL AND to_wallet_id IS NULL)",
            name="ck_transactions_wallet_shape",
        ),
        Index("ix_transactions_from_wallet_created", "from_wallet_id", "created_at"),
        Index("ix_transactions_to_wallet_created", "to_wallet_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=True)
    to_wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=True)
    amount = Column(Amount, nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, confirmed, failed
    type = Column(String(20), nullable=False, default="transfer")  # transfer, deposit, withdraw
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    from_wallet = relationship("Wallet", foreign_keys=[from_wallet_id])
    to_wallet = relationship("Wallet", foreign_keys=[to_wallet_id])


class AuditEntry(Base):
    __tablename__ = "audit_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    action = Column(String(100), nullable=False, index=True)
    info = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
