from __future__ import annotations

from pathlib import Path

from authorizer.adapters.input_source import FileInputSource, StreamInputSource
from authorizer.adapters.log_sinks import JsonlLogSink, NullLogSink, StderrLogSink
from authorizer.adapters.output_sink import FileOutputSink, StreamOutputSink
from authorizer.ports.input_source import InputSource
from authorizer.ports.log_sink import LogSink
from authorizer.ports.output_sink import OutputSink
from authorizer.usecases.config_models import InputConfig, LoggingConfig, OutputConfig


def input_source(config: InputConfig) -> InputSource:
    # No file path means stdin.
    if config.file_path is None:
        return StreamInputSource()
    return FileInputSource(Path(config.file_path))


def output_sink(config: OutputConfig) -> OutputSink:
    # No file path means stdout.
    if config.file_path is None:
        return StreamOutputSink()
    return FileOutputSink(Path(config.file_path), atomic_replace=config.atomic_replace)


def log_sink(config: LoggingConfig) -> LogSink:
    if not config.enabled:
        return NullLogSink()
    if config.sink.kind == "stderr":
        return StderrLogSink()
    if config.sink.path is None:
        raise ValueError("jsonl log sink requires a path")
    return JsonlLogSink(Path(config.sink.path))
