from __future__ import annotations

import pytest

from authorizer.kernel.scenario_builder import InvalidScenarioConfigError, ScenarioBuilder, StepBuildError
from authorizer.kernel.step_registry import StepRegistry, UnknownStepError


def _registry() -> StepRegistry:
    registry = StepRegistry()
    registry.register("echo", lambda cfg, wiring: (lambda msg, ctx: [msg]))

    def _broken(cfg, wiring):
        raise RuntimeError("missing dependency")

    registry.register("broken", _broken)
    return registry


def test_builder_preserves_step_order() -> None:
    scenario = ScenarioBuilder(_registry()).build(
        scenario_id="s",
        steps=[{"name": "echo"}, {"name": "echo", "config": {"x": 1}}],
        wiring={},
    )
    assert scenario.scenario_id == "s"
    assert [spec.name for spec in scenario.steps] == ["echo", "echo"]


def test_builder_rejects_empty_steps() -> None:
    with pytest.raises(InvalidScenarioConfigError):
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[], wiring={})


def test_builder_rejects_non_mapping_config() -> None:
    with pytest.raises(InvalidScenarioConfigError):
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[{"name": "echo", "config": []}], wiring={})


def test_builder_unknown_step() -> None:
    with pytest.raises(UnknownStepError):
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[{"name": "nope"}], wiring={})


def test_builder_wraps_factory_errors() -> None:
    with pytest.raises(StepBuildError) as exc:
        ScenarioBuilder(_registry()).build(scenario_id="s", steps=[{"name": "broken"}], wiring={})
    assert exc.value.step_name == "broken"
    assert isinstance(exc.value.cause, RuntimeError)
