from __future__ import annotations

import json
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from authorizer.domain.messages import CreateAccount, ExecuteTransaction, Operation, RawLine, Transaction


class OperationParseError(ValueError):
    def __init__(self, line_no: int, reason: str) -> None:
        super().__init__(f"line {line_no}: {reason}")
        self.line_no = line_no
        self.reason = reason


class _AccountPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")
    active_card: bool = Field(alias="active-card", strict=True)
    available_limit: int = Field(alias="available-limit", ge=0, strict=True)


class _TransactionPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")
    merchant: str = Field(min_length=1, strict=True)
    amount: int = Field(ge=0, strict=True)
    time: str = Field(strict=True)


class _OperationEnvelope(BaseModel):
    # Exactly one of account/transaction must be present.
    model_config = ConfigDict(extra="forbid")
    account: _AccountPayload | None = None
    transaction: _TransactionPayload | None = None


class ParseOperation:
    """Turn one NDJSON input line into a CreateAccount or ExecuteTransaction.

    Blank lines are dropped. Anything else that does not match the two
    operation shapes raises OperationParseError; the runner's error policy
    decides whether that stops the run.
    """

    def __call__(self, msg: RawLine, ctx: object | None) -> list[Operation]:
        text = msg.raw_text.strip()
        if not text:
            return []
        if not _is_utf8(text):
            raise OperationParseError(msg.line_no, "line is not valid UTF-8")

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise OperationParseError(msg.line_no, f"invalid JSON: {exc.msg}") from exc

        if not isinstance(payload, dict):
            raise OperationParseError(msg.line_no, "operation must be a JSON object")

        try:
            envelope = _OperationEnvelope.model_validate(payload)
        except ValidationError as exc:
            raise OperationParseError(msg.line_no, _first_error(exc)) from exc

        account, transaction = envelope.account, envelope.transaction
        if account is not None and transaction is None:
            return [
                CreateAccount(
                    line_no=msg.line_no,
                    available_limit=account.available_limit,
                    active_card=account.active_card,
                )
            ]
        if transaction is not None and account is None:
            try:
                ts = _parse_timestamp(transaction.time)
            except ValueError as exc:
                raise OperationParseError(msg.line_no, str(exc)) from exc
            tx = Transaction(merchant=transaction.merchant, amount=transaction.amount, time=ts)
            return [ExecuteTransaction(line_no=msg.line_no, transaction=tx)]

        raise OperationParseError(msg.line_no, "expected exactly one of 'account' or 'transaction'")


def _is_utf8(text: str) -> bool:
    # Input adapters decode with surrogateescape, so undecodable bytes survive as lone surrogates.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _parse_timestamp(value: str) -> datetime:
    # ISO-8601 instant normalized to UTC; naive timestamps are taken as UTC.
    text = value.strip()
    try:
        ts = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if ts.tzinfo is None:
            return ts.replace(tzinfo=UTC)
        return ts.astimezone(UTC)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    detail = err.get("msg", "invalid operation")
    return f"{loc}: {detail}" if loc else detail
