from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from authorizer.kernel.context import Context, ContextFactory
from authorizer.kernel.scenario import Scenario

ErrorHandler = Callable[[Context, Exception], None]


@dataclass(frozen=True, slots=True)
class Runner:
    """Drive every input through the scenario, one input at a time.

    Each input reaches the end of the scenario before the next one is pulled,
    so operations are applied in arrival order. Whatever the last step returns
    is handed to ``deliver``. A failing input is passed to ``on_error`` when one
    is set; the handler either swallows it (the input yields nothing) or raises.
    """

    scenario: Scenario
    context_factory: ContextFactory
    on_error: ErrorHandler | None = None

    def run(self, inputs: Iterable[object], *, deliver: Callable[[object], None]) -> None:
        for raw in inputs:
            ctx = self.context_factory.new(line_no=getattr(raw, "line_no", None))
            try:
                results = self._through_steps(raw, ctx)
            except Exception as exc:
                if self.on_error is None:
                    raise
                self.on_error(ctx, exc)
                continue
            for result in results:
                deliver(result)

    def _through_steps(self, raw: object, ctx: Context) -> list[object]:
        pending: list[object] = [raw]
        for spec in self.scenario.steps:
            if not pending:
                break
            pending = [out for msg in pending for out in spec.step(msg, ctx)]
        return pending
