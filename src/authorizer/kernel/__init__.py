from .composition_root import AppRuntime, build_runtime
from .context import Context, ContextFactory
from .runner import Runner
from .scenario import Scenario, StepSpec
from .scenario_builder import InvalidScenarioConfigError, ScenarioBuilder, StepBuildError
from .step_registry import StepRegistry, UnknownStepError

# Kernel exports are minimal and runtime-focused.
__all__ = [
    "AppRuntime",
    "Context",
    "ContextFactory",
    "InvalidScenarioConfigError",
    "Runner",
    "Scenario",
    "ScenarioBuilder",
    "StepBuildError",
    "StepRegistry",
    "StepSpec",
    "UnknownStepError",
    "build_runtime",
]
