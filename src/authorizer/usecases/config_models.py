from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from authorizer.domain.rules import RULE_NAMES, InsufficientLimit

# Config models map YAML sections to typed structures; every section except version has defaults.


class StepDecl(BaseModel):
    # Step declaration mirrors pipeline.steps entries.
    model_config = ConfigDict(extra="forbid")
    name: str
    config: dict[str, object] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _bare_name(cls, data: object) -> object:
        # A plain string entry is shorthand for {name: <string>}.
        if isinstance(data, str):
            return {"name": data}
        return data


def _default_steps() -> list[StepDecl]:
    return [
        StepDecl(name="parse_operation"),
        StepDecl(name="authorize_operation"),
        StepDecl(name="format_output"),
        StepDecl(name="write_output"),
    ]


class PipelineConfig(BaseModel):
    # Pipeline configuration holds the ordered step list.
    model_config = ConfigDict(extra="forbid")
    steps: list[StepDecl] = Field(default_factory=_default_steps)


class ScenarioConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "authorize"


class HighFrequencyConfig(BaseModel):
    # Window and interval for the high-frequency-small-interval rule.
    model_config = ConfigDict(extra="forbid")
    window_size: int = Field(default=3, ge=1)
    interval_seconds: int = Field(default=120, ge=0)


class RulesConfig(BaseModel):
    # Evaluation order also defines the order of reported violations.
    model_config = ConfigDict(extra="forbid")
    evaluation_order: list[str] = Field(default_factory=lambda: list(RULE_NAMES))
    high_frequency: HighFrequencyConfig = Field(default_factory=HighFrequencyConfig)

    @field_validator("evaluation_order")
    @classmethod
    def _known_rules(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in RULE_NAMES]
        if unknown:
            raise ValueError(f"Unknown rules: {unknown}")
        if len(set(value)) != len(value):
            raise ValueError("evaluation_order must not repeat rules")
        # Without it an accepted transaction could push the limit below zero.
        if InsufficientLimit.name not in value:
            raise ValueError("evaluation_order must include insufficient_limit")
        return value


class InputConfig(BaseModel):
    # on_invalid decides whether a malformed line stops the run or is skipped.
    model_config = ConfigDict(extra="forbid")
    file_path: str | None = Field(default=None, validation_alias=AliasChoices("file_path", "file"))
    on_invalid: Literal["fail", "skip"] = "fail"


class OutputConfig(BaseModel):
    # file_path=None means stdout.
    model_config = ConfigDict(extra="forbid")
    file_path: str | None = Field(default=None, validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class LogSinkConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stderr", "jsonl"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LogSinkConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.sink.path is required when kind is 'jsonl'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = True
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    sink: LogSinkConfig = Field(default_factory=LogSinkConfig)


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    scenario: ScenarioConfig = Field(default_factory=ScenarioConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> AppConfig:
        return cls(version=1)
