from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from authorizer.ports.log_sink import LogSink

LEVELS: dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload for the observability channel.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in LEVELS:
            raise ValueError(f"Unknown log level: {self.level}")


@dataclass(frozen=True, slots=True)
class Logger:
    # Logger filters by minimum level and forwards records to a LogSink.
    sink: LogSink
    level: str = "INFO"

    def log(self, level: str, message: str, **fields: object) -> None:
        if LEVELS[level] < LEVELS[self.level]:
            return
        self.sink.emit(LogMessage(level=level, message=message, fields=fields))

    def debug(self, message: str, **fields: object) -> None:
        self.log("DEBUG", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.log("INFO", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.log("WARNING", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.log("ERROR", message, **fields)
