from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .messages import AccountState, Transaction
from .rules import Rule, default_rules
from .violations import Violation


@dataclass(eq=False)
class Account:
    """Single account aggregate: limit, card flag and accepted transaction history.

    ``txs`` is append-only and holds accepted transactions in arrival order.
    ``available_limit`` only changes when a transaction is accepted.
    """

    available_limit: int
    active_card: bool
    txs: list[Transaction] = field(default_factory=list)
    rules: Sequence[Rule] = field(default_factory=default_rules, repr=False)

    def __post_init__(self) -> None:
        if self.available_limit < 0:
            raise ValueError("available_limit must be non-negative")

    def __eq__(self, other: object) -> bool:
        # Rules are wiring, not state.
        if not isinstance(other, Account):
            return NotImplemented
        return (
            self.available_limit == other.available_limit
            and self.active_card == other.active_card
            and self.txs == other.txs
        )

    def execute_tx(self, tx: Transaction) -> AccountState | list[Violation]:
        # Every rule runs; any violation leaves the account untouched.
        violations = [v for v in (rule(self, tx) for rule in self.rules) if v is not None]
        if violations:
            return violations

        self.available_limit -= tx.amount
        self.txs.append(tx)
        return self.to_state()

    def last_window(self, size: int) -> tuple[Transaction, Transaction]:
        # Oldest and newest of the last ``size`` accepted transactions.
        if size < 1 or size > len(self.txs):
            raise ValueError(f"window of {size} exceeds history of {len(self.txs)}")
        return self.txs[-size], self.txs[-1]

    def is_inactive(self) -> bool:
        return not self.active_card

    def to_state(self) -> AccountState:
        return AccountState.of(self.active_card, self.available_limit)

    def to_invalid_state(self, violations: Sequence[Violation]) -> AccountState:
        return AccountState.of(self.active_card, self.available_limit, violations)
