from __future__ import annotations

from authorizer.domain.account import Account
from authorizer.domain.messages import AccountState, CreateAccount, ExecuteTransaction, Operation, Transaction
from authorizer.domain.rules import Rule, default_rules
from authorizer.domain.violations import Violation


class Authorizer:
    """Single-account session.

    The session starts uninitialized and adopts exactly one account; later
    creation attempts are reported as violations and never replace it.
    """

    def __init__(self, rules: tuple[Rule, ...] | None = None) -> None:
        self._rules = default_rules() if rules is None else rules
        self._account: Account | None = None

    @property
    def account(self) -> Account | None:
        return self._account

    def create_account(self, account: Account) -> AccountState:
        if self._account is not None:
            # Echoes the submitted fields, not the held account's current state.
            return account.to_invalid_state([Violation.ACCOUNT_ALREADY_INITIALIZED])

        state = account.to_state()
        self._account = account
        return state

    def register_tx(self, tx: Transaction) -> AccountState:
        if self._account is None:
            return AccountState.not_initialized()

        account = self._account
        if account.is_inactive():
            return AccountState.inactive(account.available_limit)

        result = account.execute_tx(tx)
        if isinstance(result, AccountState):
            return result
        return account.to_invalid_state(result)

    def handle(self, operation: Operation) -> AccountState:
        # Dispatch parsed operation messages onto the two session operations.
        if isinstance(operation, CreateAccount):
            return self.create_account(
                Account(
                    available_limit=operation.available_limit,
                    active_card=operation.active_card,
                    rules=self._rules,
                )
            )
        if isinstance(operation, ExecuteTransaction):
            return self.register_tx(operation.transaction)
        raise TypeError(f"Unsupported operation: {type(operation).__name__}")
