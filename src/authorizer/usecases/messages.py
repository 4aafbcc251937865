from __future__ import annotations

from dataclasses import dataclass

from authorizer.domain.messages import AccountState


@dataclass(frozen=True, slots=True)
class OperationResult:
    # OperationResult ties an AccountState to the input line that produced it.
    line_no: int
    state: AccountState


@dataclass(frozen=True, slots=True)
class OutputLine:
    # OutputLine is produced by FormatOutput.
    line_no: int
    json_text: str
