from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .messages import Transaction
from .violations import Violation

if TYPE_CHECKING:
    from .account import Account


# The rule set is closed: each variant inspects (account, tx) and yields at most one violation.
@dataclass(frozen=True, slots=True)
class InsufficientLimit:
    name = "insufficient_limit"

    def __call__(self, account: Account, tx: Transaction) -> Violation | None:
        # A limit exactly equal to the amount is still enough.
        if account.available_limit < tx.amount:
            return Violation.INSUFFICIENT_LIMIT
        return None


@dataclass(frozen=True, slots=True)
class HighFrequencySmallInterval:
    name = "high_frequency_small_interval"
    window_size: int = 3
    interval_seconds: int = 120

    def __post_init__(self) -> None:
        if self.window_size < 1:
            raise ValueError("window_size must be positive")

    def __call__(self, account: Account, tx: Transaction) -> Violation | None:
        if len(account.txs) < self.window_size:
            return None

        first, last = account.last_window(self.window_size)
        # Signed comparison: out-of-order timestamps give negative deltas, which pass.
        if tx.seconds_since(last) <= self.interval_seconds and last.seconds_since(first) <= self.interval_seconds:
            return Violation.HIGH_FREQUENCY_SMALL_INTERVAL
        return None


@dataclass(frozen=True, slots=True)
class DuplicatedTx:
    name = "duplicated_tx"

    def __call__(self, account: Account, tx: Transaction) -> Violation | None:
        if any(accepted.same_as(tx) for accepted in account.txs):
            return Violation.DUPLICATED_TX
        return None


Rule = InsufficientLimit | HighFrequencySmallInterval | DuplicatedTx

RULE_NAMES: tuple[str, ...] = (
    InsufficientLimit.name,
    HighFrequencySmallInterval.name,
    DuplicatedTx.name,
)


class UnknownRuleError(KeyError):
    pass


def default_rules() -> tuple[Rule, ...]:
    # Declared order drives the order of reported violations.
    return (InsufficientLimit(), HighFrequencySmallInterval(), DuplicatedTx())


def build_rules(
    evaluation_order: Sequence[str] = RULE_NAMES,
    *,
    window_size: int = 3,
    interval_seconds: int = 120,
) -> tuple[Rule, ...]:
    variants: dict[str, Rule] = {
        InsufficientLimit.name: InsufficientLimit(),
        HighFrequencySmallInterval.name: HighFrequencySmallInterval(
            window_size=window_size,
            interval_seconds=interval_seconds,
        ),
        DuplicatedTx.name: DuplicatedTx(),
    }
    rules: list[Rule] = []
    for name in evaluation_order:
        if name not in variants:
            raise UnknownRuleError(name)
        rules.append(variants[name])
    return tuple(rules)
