from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from authorizer.kernel.context import Context, ContextFactory
from authorizer.kernel.runner import Runner
from authorizer.kernel.scenario import Scenario
from authorizer.kernel.scenario_builder import ScenarioBuilder
from authorizer.kernel.step_registry import StepRegistry


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # AppRuntime is a small bundle for runner + scenario.
    runner: Runner
    scenario: Scenario


def build_runtime(
    *,
    registry: StepRegistry,
    scenario_id: str,
    steps: list[dict[str, object]],
    wiring: dict[str, object],
    run_id: str = "run",
    on_error: Callable[[Context, Exception], None] | None = None,
) -> AppRuntime:
    # Composition root wires registry, builder and runner.
    scenario = ScenarioBuilder(registry).build(scenario_id=scenario_id, steps=steps, wiring=wiring)
    runner = Runner(
        scenario=scenario,
        context_factory=ContextFactory(run_id, scenario_id),
        on_error=on_error,
    )
    return AppRuntime(runner=runner, scenario=scenario)
