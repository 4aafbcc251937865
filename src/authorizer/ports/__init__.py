from .input_source import InputSource
from .log_sink import LogSink
from .output_sink import OutputSink

# Ports are protocols only; adapters live in authorizer.adapters.
__all__ = ["InputSource", "LogSink", "OutputSink"]
