from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Context:
    # Per-operation runtime metadata; account state never lives here.
    trace_id: str
    run_id: str
    scenario_id: str
    line_no: int | None = None

    def log_fields(self) -> dict[str, object]:
        # Correlation fields attached to every log record written for this operation.
        return {"run_id": self.run_id, "scenario_id": self.scenario_id, "trace_id": self.trace_id}


@dataclass(frozen=True, slots=True)
class ContextFactory:
    run_id: str
    scenario_id: str

    def new(self, *, line_no: int | None = None) -> Context:
        return Context(
            trace_id=uuid.uuid4().hex,
            run_id=self.run_id,
            scenario_id=self.scenario_id,
            line_no=line_no,
        )
