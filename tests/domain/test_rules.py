from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from authorizer.domain.account import Account
from authorizer.domain.messages import Transaction
from authorizer.domain.rules import (
    RULE_NAMES,
    DuplicatedTx,
    HighFrequencySmallInterval,
    InsufficientLimit,
    UnknownRuleError,
    build_rules,
    default_rules,
)
from authorizer.domain.violations import Violation

T0 = datetime(2019, 2, 13, 11, 0, 0, tzinfo=UTC)


def _tx(amount: int, merchant: str, seconds: int = 0) -> Transaction:
    return Transaction(merchant=merchant, amount=amount, time=T0 + timedelta(seconds=seconds))


def _account(limit: int = 1000, txs: list[Transaction] | None = None) -> Account:
    return Account(available_limit=limit, active_card=True, txs=list(txs or []))


def test_insufficient_limit_triggers_below_amount() -> None:
    assert InsufficientLimit()(_account(limit=99), _tx(100, "A")) == Violation.INSUFFICIENT_LIMIT


def test_insufficient_limit_allows_exact_amount() -> None:
    assert InsufficientLimit()(_account(limit=100), _tx(100, "A")) is None


def test_duplicated_tx_scans_whole_history() -> None:
    # The match is deep in history and far apart in time; still a duplicate.
    history = [_tx(100, "Nike", 0), _tx(20, "B", 10), _tx(30, "C", 20), _tx(40, "D", 30)]
    rule = DuplicatedTx()
    assert rule(_account(txs=history), _tx(100, "Nike", 86_400)) == Violation.DUPLICATED_TX


def test_duplicated_tx_requires_same_merchant_and_amount() -> None:
    rule = DuplicatedTx()
    account = _account(txs=[_tx(100, "Nike")])
    assert rule(account, _tx(100, "Adidas")) is None
    assert rule(account, _tx(101, "Nike")) is None


def test_high_frequency_needs_full_window() -> None:
    rule = HighFrequencySmallInterval()
    account = _account(txs=[_tx(1, "A", 0), _tx(2, "B", 1)])
    assert rule(account, _tx(3, "C", 2)) is None


def test_high_frequency_uses_last_three_accepted() -> None:
    # Window is (60s, 121s, 122s); the first transaction at 0s is outside it.
    rule = HighFrequencySmallInterval()
    account = _account(txs=[_tx(1, "A", 0), _tx(2, "B", 60), _tx(3, "C", 121)])
    assert rule(account, _tx(4, "D", 122)) is None
    account.txs.append(_tx(4, "D", 122))
    assert rule(account, _tx(5, "E", 123)) == Violation.HIGH_FREQUENCY_SMALL_INTERVAL


def test_high_frequency_boundary_is_inclusive() -> None:
    rule = HighFrequencySmallInterval()
    account = _account(txs=[_tx(1, "A", 0), _tx(2, "B", 60), _tx(3, "C", 120)])
    assert rule(account, _tx(4, "D", 240)) == Violation.HIGH_FREQUENCY_SMALL_INTERVAL
    assert rule(account, _tx(4, "D", 241)) is None


def test_high_frequency_window_span_over_interval_passes() -> None:
    rule = HighFrequencySmallInterval()
    account = _account(txs=[_tx(1, "A", 0), _tx(2, "B", 60), _tx(3, "C", 121)])
    assert rule(account, _tx(4, "D", 122)) is None


def test_high_frequency_negative_delta_counts_as_within_interval() -> None:
    # Candidate timestamp earlier than history: signed delta is negative and passes <= 120.
    rule = HighFrequencySmallInterval()
    account = _account(txs=[_tx(1, "A", 1000), _tx(2, "B", 1010), _tx(3, "C", 1020)])
    assert rule(account, _tx(4, "D", 0)) == Violation.HIGH_FREQUENCY_SMALL_INTERVAL


def test_high_frequency_custom_window() -> None:
    rule = HighFrequencySmallInterval(window_size=2, interval_seconds=10)
    account = _account(txs=[_tx(1, "A", 0), _tx(2, "B", 5)])
    assert rule(account, _tx(3, "C", 15)) == Violation.HIGH_FREQUENCY_SMALL_INTERVAL
    assert rule(account, _tx(3, "C", 16)) is None


def test_high_frequency_rejects_empty_window() -> None:
    with pytest.raises(ValueError):
        HighFrequencySmallInterval(window_size=0)


def test_default_rules_order() -> None:
    assert [type(rule) for rule in default_rules()] == [InsufficientLimit, HighFrequencySmallInterval, DuplicatedTx]
    assert RULE_NAMES == ("insufficient_limit", "high_frequency_small_interval", "duplicated_tx")


def test_build_rules_follows_evaluation_order() -> None:
    rules = build_rules(["duplicated_tx", "insufficient_limit"])
    assert [type(rule) for rule in rules] == [DuplicatedTx, InsufficientLimit]


def test_build_rules_passes_high_frequency_parameters() -> None:
    (rule,) = build_rules(["high_frequency_small_interval"], window_size=5, interval_seconds=30)
    assert rule == HighFrequencySmallInterval(window_size=5, interval_seconds=30)


def test_build_rules_rejects_unknown_rule() -> None:
    with pytest.raises(UnknownRuleError):
        build_rules(["daily_limit"])
