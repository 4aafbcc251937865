from __future__ import annotations

import io
from pathlib import Path

from authorizer.adapters.output_sink import FileOutputSink, StreamOutputSink


def test_output_sink_writes_ndjson_lines(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    sink = FileOutputSink(path)
    sink.write_line('{"id":"1"}')
    sink.write_line('{"id":"2"}')
    sink.close()
    assert path.read_text(encoding="utf-8") == '{"id":"1"}\n{"id":"2"}\n'


def test_output_sink_is_lazy(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    FileOutputSink(path).close()
    assert not path.exists()


def test_output_sink_atomic_replace(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    sink = FileOutputSink(path, atomic_replace=True)
    sink.write_line("line")
    assert not path.exists()
    sink.close()
    assert path.read_text(encoding="utf-8") == "line\n"
    assert not (tmp_path / "out.txt.tmp").exists()


def test_output_sink_close_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    sink = FileOutputSink(path)
    sink.write_line("line")
    sink.close()
    sink.close()
    assert path.read_text(encoding="utf-8") == "line\n"


def test_stream_output_sink_does_not_close_stream() -> None:
    stream = io.StringIO()
    sink = StreamOutputSink(stream=stream)
    sink.write_line("a")
    sink.close()
    assert stream.getvalue() == "a\n"
    assert not stream.closed
