from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

from authorizer.domain.messages import RawLine
from authorizer.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # File-based InputSource adapter.
    path: Path

    def read(self) -> Iterable[RawLine]:
        # Bytes are decoded per line so one bad line cannot abort the stream.
        with self.path.open("rb") as handle:
            yield from _number_lines(handle)


@dataclass(frozen=True, slots=True)
class StreamInputSource(InputSource):
    # Reads from an already-open stream (stdin by default); the stream is not closed.
    stream: IO = field(default_factory=lambda: sys.stdin)

    def read(self) -> Iterable[RawLine]:
        # Prefer the binary buffer of a real text stream (stdin) for per-line decoding.
        yield from _number_lines(getattr(self.stream, "buffer", self.stream))


def _number_lines(handle: Iterable[str | bytes]) -> Iterable[RawLine]:
    for idx, line in enumerate(handle, start=1):
        text = line.decode("utf-8", errors="surrogateescape") if isinstance(line, bytes) else line
        yield RawLine(line_no=idx, raw_text=text.rstrip("\r\n"))
