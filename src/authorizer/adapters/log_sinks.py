from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from authorizer.observability.logging import LogMessage
from authorizer.ports.log_sink import LogSink


class StderrLogSink(LogSink):
    # Compact JSON per record on stderr; stdout is reserved for account states.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str), file=stream)

    def close(self) -> None:
        pass


class JsonlLogSink(LogSink):
    # File-backed structured log sink.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            raise ValueError(f"JsonlLogSink for {self._path} is closed")
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


@dataclass
class MemoryLogSink(LogSink):
    # Collects records in memory; used when logs are inspected programmatically.
    records: list[LogMessage] = field(default_factory=list)

    def emit(self, message: LogMessage) -> None:
        self.records.append(message)

    def close(self) -> None:
        pass


class NullLogSink(LogSink):
    # Used when logging is disabled in config.
    def emit(self, message: LogMessage) -> None:
        pass

    def close(self) -> None:
        pass


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
