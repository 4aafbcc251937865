from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from authorizer.kernel.scenario import Step


class UnknownStepError(KeyError):
    pass


# A factory receives the step's own config and the shared wiring.
StepFactory = Callable[[dict[str, object], dict[str, object]], Step]


@dataclass
class StepRegistry:
    _factories: dict[str, StepFactory] = field(default_factory=dict)

    def register(self, name: str, factory: StepFactory) -> None:
        # Re-registering a name replaces its factory.
        self._factories[name] = factory

    def get(self, name: str) -> StepFactory:
        try:
            return self._factories[name]
        except KeyError:
            raise UnknownStepError(name) from None

    def names(self) -> list[str]:
        return sorted(self._factories)
