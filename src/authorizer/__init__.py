"""Single-account transaction authorizer."""

from .domain import Account, AccountState, Transaction, Violation
from .usecases.authorizer import Authorizer

__all__ = ["Account", "AccountState", "Authorizer", "Transaction", "Violation"]
