from __future__ import annotations

from dataclasses import dataclass

from authorizer.ports.output_sink import OutputSink
from authorizer.usecases.messages import OutputLine


@dataclass(frozen=True, slots=True)
class WriteOutput:
    # The sink owns persistence; the written line is passed on so the runner can count it.
    output_sink: OutputSink

    def __call__(self, msg: OutputLine, ctx: object | None) -> list[OutputLine]:
        self.output_sink.write_line(msg.json_text)
        return [msg]
