from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .violations import Violation


@dataclass(frozen=True, slots=True)
class RawLine:
    # RawLine preserves input order via line_no.
    line_no: int
    raw_text: str


@dataclass(frozen=True, slots=True)
class Transaction:
    # Transactions have no identity beyond their fields.
    merchant: str
    amount: int
    time: datetime

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Transaction amount must be non-negative")

    def seconds_since(self, other: Transaction) -> int:
        # Signed whole seconds, truncated toward zero.
        return int((self.time - other.time).total_seconds())

    def same_as(self, other: Transaction) -> bool:
        # Timestamp is ignored for duplicate detection.
        return self.merchant == other.merchant and self.amount == other.amount


@dataclass(frozen=True, slots=True)
class AccountState:
    # AccountState is the only observable result of an operation.
    active_card: bool
    available_limit: int
    violations: tuple[str, ...] = ()

    @classmethod
    def of(cls, active_card: bool, available_limit: int, violations: Iterable[Violation] = ()) -> AccountState:
        return cls(
            active_card=active_card,
            available_limit=available_limit,
            violations=tuple(v.value for v in violations),
        )

    @classmethod
    def not_initialized(cls) -> AccountState:
        return cls.of(False, 0, [Violation.ACCOUNT_NOT_INITIALIZED])

    @classmethod
    def inactive(cls, available_limit: int) -> AccountState:
        return cls.of(False, available_limit, [Violation.INACTIVE_CARD])

    @property
    def accepted(self) -> bool:
        return not self.violations


@dataclass(frozen=True, slots=True)
class CreateAccount:
    # Operation message produced by the input parser.
    line_no: int
    available_limit: int
    active_card: bool


@dataclass(frozen=True, slots=True)
class ExecuteTransaction:
    line_no: int
    transaction: Transaction


Operation = CreateAccount | ExecuteTransaction
