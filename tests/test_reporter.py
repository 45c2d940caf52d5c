import json
import threading
from dataclasses import dataclass

import pytest

from knapsack_lab.reporter import Reporter


@dataclass
class Sample:
    name: str
    value: int


def _test_data():
    return {"name": "test", "value": 42}


@pytest.fixture
def out_file(tmp_path):
    path = tmp_path / "report.txt"
    path.touch()
    return path


def test_console_reporter_writes_stdout(capsys):
    reporter = Reporter(None, True)
    reporter.report("Test message")
    assert capsys.readouterr().out == "Test message\n"


def test_file_reporter_write(out_file):
    with Reporter(out_file, True) as reporter:
        reporter.report("Test message")
        assert out_file.read_text(encoding="utf-8") == "Test message\n"


def test_json_report(out_file):
    with Reporter(out_file, True) as reporter:
        reporter.report_json(_test_data())
    assert out_file.read_text(encoding="utf-8") == '{"name":"test","value":42}\n'


def test_json_report_dataclass(out_file):
    with Reporter(out_file) as reporter:
        reporter.report_json(Sample("test", 42))
    assert json.loads(out_file.read_text(encoding="utf-8")) == _test_data()


def test_batch_report(out_file):
    data = [_test_data(), {"name": "test2", "value": 43}]
    with Reporter(out_file, True) as reporter:
        reporter.report_batch(data)
    expected = "".join(json.dumps(d, separators=(",", ":")) + "\n" for d in data)
    assert out_file.read_text(encoding="utf-8") == expected


def test_invalid_file_path(tmp_path):
    with pytest.raises(OSError):
        Reporter(tmp_path / "invalid" / "path" / "file.txt", True)


def test_concurrent_writes(out_file):
    thread_count = 10
    with Reporter(out_file, True) as reporter:
        threads = [
            threading.Thread(target=reporter.report, args=(f"Thread {i}",))
            for i in range(thread_count)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    lines = out_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == thread_count
    assert sorted(lines) == sorted(f"Thread {i}" for i in range(thread_count))


def test_large_data(out_file):
    large_string = "a" * 1_000_000
    with Reporter(out_file, True) as reporter:
        reporter.report(large_string)
    assert out_file.read_text(encoding="utf-8") == large_string + "\n"


def test_append_keeps_existing_content(out_file):
    out_file.write_text("old\n", encoding="utf-8")
    with Reporter(out_file, append=True) as reporter:
        reporter.report("new")
    assert out_file.read_text(encoding="utf-8") == "old\nnew\n"


def test_no_append_truncates(out_file):
    out_file.write_text("old\n", encoding="utf-8")
    with Reporter(out_file, append=False) as reporter:
        reporter.report("new")
    assert out_file.read_text(encoding="utf-8") == "new\n"


def test_report_after_close_raises(out_file):
    reporter = Reporter(out_file)
    reporter.close()
    with pytest.raises(ValueError):
        reporter.report("late")


def test_json_report_rejects_unserializable(out_file):
    with Reporter(out_file) as reporter:
        with pytest.raises(TypeError):
            reporter.report_json(object())
    assert out_file.read_text(encoding="utf-8") == ""