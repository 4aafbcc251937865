from __future__ import annotations

import pytest

from authorizer.kernel.step_registry import StepRegistry, UnknownStepError


def test_register_and_get() -> None:
    registry = StepRegistry()
    factory = lambda cfg, wiring: (lambda msg, ctx: [msg])  # noqa: E731
    registry.register("echo", factory)
    assert registry.get("echo") is factory
    assert registry.names() == ["echo"]


def test_later_registration_overrides() -> None:
    registry = StepRegistry()
    first = lambda cfg, wiring: None  # noqa: E731
    second = lambda cfg, wiring: None  # noqa: E731
    registry.register("s", first)
    registry.register("s", second)
    assert registry.get("s") is second


def test_unknown_step_raises() -> None:
    with pytest.raises(UnknownStepError):
        StepRegistry().get("missing")
