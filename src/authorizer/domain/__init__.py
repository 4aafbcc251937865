from .account import Account
from .messages import (
    AccountState,
    CreateAccount,
    ExecuteTransaction,
    Operation,
    RawLine,
    Transaction,
)
from .rules import (
    RULE_NAMES,
    DuplicatedTx,
    HighFrequencySmallInterval,
    InsufficientLimit,
    Rule,
    UnknownRuleError,
    build_rules,
    default_rules,
)
from .violations import Violation

# Public domain exports keep imports explicit across layers.
__all__ = [
    "Account",
    "AccountState",
    "CreateAccount",
    "DuplicatedTx",
    "ExecuteTransaction",
    "HighFrequencySmallInterval",
    "InsufficientLimit",
    "Operation",
    "RULE_NAMES",
    "RawLine",
    "Rule",
    "Transaction",
    "UnknownRuleError",
    "Violation",
    "build_rules",
    "default_rules",
]
