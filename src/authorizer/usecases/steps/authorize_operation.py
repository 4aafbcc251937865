from __future__ import annotations

from dataclasses import dataclass

from authorizer.domain.messages import CreateAccount, Operation
from authorizer.kernel.context import Context
from authorizer.observability.logging import Logger
from authorizer.usecases.authorizer import Authorizer
from authorizer.usecases.messages import OperationResult


@dataclass(frozen=True, slots=True)
class AuthorizeOperation:
    # Applies one operation to the session; exactly one result per operation.
    authorizer: Authorizer
    logger: Logger

    def __call__(self, msg: Operation, ctx: Context | None) -> list[OperationResult]:
        state = self.authorizer.handle(msg)
        fields = ctx.log_fields() if ctx is not None else {}
        kind = "account" if isinstance(msg, CreateAccount) else "transaction"

        self.logger.debug(
            "operation.processed",
            line_no=msg.line_no,
            kind=kind,
            available_limit=state.available_limit,
            violations=list(state.violations),
            **fields,
        )
        if kind == "transaction" and not state.accepted:
            self.logger.info(
                "transaction.rejected",
                line_no=msg.line_no,
                violations=list(state.violations),
                **fields,
            )

        return [OperationResult(line_no=msg.line_no, state=state)]
