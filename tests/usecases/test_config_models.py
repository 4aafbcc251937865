from __future__ import annotations

import pytest
from pydantic import ValidationError

from authorizer.usecases.config_models import AppConfig, LogSinkConfig, RulesConfig


def test_default_config_matches_baseline_behaviour() -> None:
    config = AppConfig.default()
    assert [step.name for step in config.pipeline.steps] == [
        "parse_operation",
        "authorize_operation",
        "format_output",
        "write_output",
    ]
    assert config.rules.evaluation_order == ["insufficient_limit", "high_frequency_small_interval", "duplicated_tx"]
    assert config.rules.high_frequency.window_size == 3
    assert config.rules.high_frequency.interval_seconds == 120
    assert config.input.on_invalid == "fail"
    assert config.output.file_path is None
    assert config.logging.sink.kind == "stderr"


def test_rules_reject_unknown_names() -> None:
    with pytest.raises(ValidationError):
        RulesConfig(evaluation_order=["insufficient_limit", "weekly_limit"])


def test_rules_reject_repeated_names() -> None:
    with pytest.raises(ValidationError):
        RulesConfig(evaluation_order=["duplicated_tx", "duplicated_tx"])


def test_jsonl_log_sink_requires_path() -> None:
    with pytest.raises(ValidationError):
        LogSinkConfig(kind="jsonl")


def test_output_accepts_file_alias() -> None:
    config = AppConfig.model_validate({"version": 1, "output": {"file": "out.txt"}})
    assert config.output.file_path == "out.txt"


def test_extra_keys_are_forbidden() -> None:
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"version": 1, "rules": {"max_amount": 10}})


def test_rules_must_keep_insufficient_limit() -> None:
    with pytest.raises(ValidationError):
        RulesConfig(evaluation_order=["duplicated_tx", "high_frequency_small_interval"])


def test_pipeline_accepts_bare_step_names() -> None:
    config = AppConfig.model_validate(
        {"version": 1, "pipeline": {"steps": ["parse_operation", {"name": "authorize_operation"}]}}
    )
    assert [step.name for step in config.pipeline.steps] == ["parse_operation", "authorize_operation"]
    assert config.pipeline.steps[0].config == {}
