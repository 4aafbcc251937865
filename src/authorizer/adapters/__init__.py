from .input_source import FileInputSource, StreamInputSource
from .log_sinks import JsonlLogSink, MemoryLogSink, NullLogSink, StderrLogSink
from .output_sink import FileOutputSink, StreamOutputSink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileInputSource",
    "FileOutputSink",
    "JsonlLogSink",
    "MemoryLogSink",
    "NullLogSink",
    "StderrLogSink",
    "StreamInputSource",
    "StreamOutputSink",
]
