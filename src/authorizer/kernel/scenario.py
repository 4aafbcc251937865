from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from authorizer.kernel.context import Context

Step = Callable[[object, Context | None], Iterable[object]]


@dataclass(frozen=True, slots=True)
class StepSpec:
    name: str
    step: Step


@dataclass(frozen=True, slots=True)
class Scenario:
    # Steps run in declaration order for every input.
    scenario_id: str
    steps: Sequence[StepSpec]
