from __future__ import annotations

import argparse
import uuid
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from authorizer.adapters import factory
from authorizer.config.loader import ConfigError, load_baseline_config, load_config
from authorizer.domain.messages import RawLine
from authorizer.kernel.composition_root import build_runtime
from authorizer.kernel.context import Context
from authorizer.kernel.scenario_builder import InvalidScenarioConfigError, StepBuildError
from authorizer.kernel.step_registry import UnknownStepError
from authorizer.observability.logging import Logger
from authorizer.ports.output_sink import OutputSink
from authorizer.usecases.config_models import AppConfig
from authorizer.usecases.steps.parse_operation import OperationParseError
from authorizer.usecases.wiring import build_authorizer, build_step_registry, steps_from_config

# The CLI is a thin shell around composition-root wiring; business logic lives in usecases.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authorizer",
        description="Authorize a stream of NDJSON account and transaction operations",
    )
    parser.add_argument("--config", help="Path to YAML config (defaults to the packaged baseline)")
    parser.add_argument("--input", help="Path to input NDJSON file (defaults to stdin)")
    parser.add_argument("--output", help="Path to output NDJSON file (defaults to stdout)")
    parser.add_argument(
        "--on-invalid",
        choices=["fail", "skip"],
        help="Override what happens when an input line cannot be parsed",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI flags take precedence over config values.
    if args.input is not None:
        config.input.file_path = args.input
    if args.output is not None:
        config.output.file_path = args.output
    if args.on_invalid is not None:
        config.input.on_invalid = args.on_invalid


@dataclass
class InvalidInputPolicy:
    # Runner on_error hook: skip logs and continues, fail logs and re-raises.
    logger: Logger
    mode: str
    skipped: list[int] = field(default_factory=list)

    def __call__(self, ctx: Context, exc: Exception) -> None:
        if not isinstance(exc, OperationParseError):
            raise exc
        if self.mode == "skip":
            self.logger.warning("input.invalid", line_no=exc.line_no, reason=exc.reason, **ctx.log_fields())
            self.skipped.append(exc.line_no)
            return
        self.logger.error("input.invalid", line_no=exc.line_no, reason=exc.reason, **ctx.log_fields())
        raise exc


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else load_baseline_config()
    except ConfigError as exc:
        Logger(sink=factory.log_sink(AppConfig.default().logging)).error("config.invalid", reason=str(exc))
        return 1
    apply_overrides(config, args)
    return run_with_config(config)


def run_with_config(config: AppConfig) -> int:
    log_sink = factory.log_sink(config.logging)
    output_sink = factory.output_sink(config.output)
    try:
        return _authorize_stream(config, Logger(sink=log_sink, level=config.logging.level), output_sink)
    finally:
        # Output is committed before the log sink goes away.
        try:
            output_sink.close()
        finally:
            log_sink.close()


def _authorize_stream(config: AppConfig, logger: Logger, output_sink: OutputSink) -> int:
    registry = build_step_registry(config)
    policy = InvalidInputPolicy(logger=logger, mode=config.input.on_invalid)
    try:
        runtime = build_runtime(
            registry=registry,
            scenario_id=config.scenario.name,
            steps=steps_from_config(config),
            wiring={
                "authorizer": build_authorizer(config),
                "logger": logger,
                "output_sink": output_sink,
            },
            run_id=uuid.uuid4().hex,
            on_error=policy,
        )
    except (UnknownStepError, InvalidScenarioConfigError, StepBuildError) as exc:
        logger.error("config.invalid", reason=str(exc), known_steps=registry.names())
        return 1

    seen: list[int] = []
    written: list[object] = []
    try:
        source = factory.input_source(config.input)
        runtime.runner.run(_counted(source.read(), seen), deliver=written.append)
    except OperationParseError:
        return 1
    except OSError as exc:
        logger.error("io.failed", reason=str(exc))
        return 1
    logger.info("run.finished", lines=len(seen), written=len(written), skipped=len(policy.skipped))
    return 0


def _counted(lines: Iterable[RawLine], seen: list[int]) -> Iterator[RawLine]:
    # Records line numbers as the runner pulls them, without buffering the input.
    for line in lines:
        seen.append(line.line_no)
        yield line
