from __future__ import annotations

from typing import Any

from authorizer.domain.rules import build_rules
from authorizer.kernel.step_registry import StepRegistry
from authorizer.usecases.authorizer import Authorizer
from authorizer.usecases.config_models import AppConfig
from authorizer.usecases.steps import AuthorizeOperation, FormatOutput, ParseOperation, WriteOutput


def build_authorizer(config: AppConfig) -> Authorizer:
    # Rule order and high-frequency parameters come from the rules section.
    rules = build_rules(
        config.rules.evaluation_order,
        window_size=config.rules.high_frequency.window_size,
        interval_seconds=config.rules.high_frequency.interval_seconds,
    )
    return Authorizer(rules=rules)


def build_step_registry(config: AppConfig) -> StepRegistry:
    # Step factories read their collaborators from wiring at build time.
    registry = StepRegistry()

    registry.register("parse_operation", lambda cfg, w: ParseOperation())

    registry.register(
        "authorize_operation",
        lambda cfg, w: AuthorizeOperation(
            authorizer=w["authorizer"] if "authorizer" in w else build_authorizer(config),
            logger=_require(w, "logger"),
        ),
    )

    registry.register("format_output", lambda cfg, w: FormatOutput())

    registry.register(
        "write_output",
        lambda cfg, w: WriteOutput(output_sink=_require(w, "output_sink")),
    )

    return registry


def steps_from_config(config: AppConfig) -> list[dict[str, object]]:
    return [{"name": step.name, "config": step.config} for step in config.pipeline.steps]


def _require(wiring: dict[str, object], key: str) -> Any:
    # Wiring must provide required ports; raise KeyError to fail fast.
    if key not in wiring:
        raise KeyError(f"Missing wiring dependency: {key}")
    return wiring[key]
