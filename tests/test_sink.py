import io
import threading

import pytest

from jscrawler.crawler.sink import OutputSink
from jscrawler.exceptions import OutputOpenError


def test_stdout_only_without_path():
    stream = io.StringIO()
    with OutputSink(stream=stream) as sink:
        sink.emit("a.js")
        sink.emit("a.js")
    assert stream.getvalue() == "a.js\na.js\n"


def test_file_is_created_and_appended(tmp_path):
    out = tmp_path / "out.txt"
    for ref in ("one.js", "two.js"):
        with OutputSink(out, stream=io.StringIO()) as sink:
            sink.emit(ref)
    assert out.read_text(encoding="utf-8") == "one.js\ntwo.js\n"


def test_open_failure_is_fatal(tmp_path):
    with pytest.raises(OutputOpenError):
        OutputSink(tmp_path / "nope" / "out.txt").open()


def test_close_is_idempotent(tmp_path):
    sink = OutputSink(tmp_path / "out.txt", stream=io.StringIO()).open()
    assert not sink.closed
    sink.close()
    sink.close()
    assert sink.closed
    # after close only stdout receives the reference
    sink.emit("late.js")
    assert (tmp_path / "out.txt").read_text(encoding="utf-8") == ""


def test_concurrent_writers_produce_whole_lines(tmp_path):
    out = tmp_path / "out.txt"
    refs = [f"https://cdn.example.com/{'x' * 200}/{i}.js" for i in range(50)]

    with OutputSink(out, stream=io.StringIO()) as sink:
        threads = [
            threading.Thread(target=lambda: [sink.emit(r) for r in refs]) for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 8 * len(refs)
    assert set(lines) == set(refs)
