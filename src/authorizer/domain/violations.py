from __future__ import annotations

from enum import Enum


# Violation labels are part of the output wire format; values must never change.
class Violation(str, Enum):
    ACCOUNT_ALREADY_INITIALIZED = "account-already-initialized"
    ACCOUNT_NOT_INITIALIZED = "account-not-initialized"
    INACTIVE_CARD = "inactive-card"
    INSUFFICIENT_LIMIT = "insufficient-limit"
    HIGH_FREQUENCY_SMALL_INTERVAL = "high-frequency-small-interval"
    DUPLICATED_TX = "duplicated-tx"
