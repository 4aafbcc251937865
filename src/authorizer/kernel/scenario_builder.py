from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from authorizer.kernel.scenario import Scenario, StepSpec
from authorizer.kernel.step_registry import StepRegistry


class InvalidScenarioConfigError(ValueError):
    pass


class StepBuildError(RuntimeError):
    # A registered factory failed while binding its wiring.
    def __init__(self, step_name: str, cause: Exception) -> None:
        super().__init__(f"Failed to build step '{step_name}': {cause}")
        self.step_name = step_name
        self.cause = cause


@dataclass(frozen=True, slots=True)
class ScenarioBuilder:
    registry: StepRegistry

    def build(
        self,
        *,
        scenario_id: str,
        steps: Sequence[dict[str, object]],
        wiring: dict[str, object],
    ) -> Scenario:
        """Bind each declared step to its factory, keeping declaration order.

        Unknown names surface as UnknownStepError from the registry.
        """
        if not steps:
            raise InvalidScenarioConfigError(f"Scenario '{scenario_id}' declares no steps")
        return Scenario(
            scenario_id=scenario_id,
            steps=[self._bind(idx, decl, wiring) for idx, decl in enumerate(steps)],
        )

    def _bind(self, idx: int, decl: dict[str, object], wiring: dict[str, object]) -> StepSpec:
        name = decl.get("name")
        if not isinstance(name, str):
            raise InvalidScenarioConfigError(f"steps[{idx}].name must be a string")
        config = decl.get("config", {})
        if not isinstance(config, dict):
            raise InvalidScenarioConfigError(f"steps[{idx}].config must be a mapping")

        factory = self.registry.get(name)
        try:
            step = factory(config, wiring)
        except Exception as exc:  # noqa: BLE001 - factory errors carry the step name
            raise StepBuildError(name, exc) from exc
        return StepSpec(name=name, step=step)
