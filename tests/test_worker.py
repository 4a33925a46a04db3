import io

from log2.worker import Worker


def test_writes_lines_to_file(tmp_path):
    path = tmp_path / "log.txt"
    path.write_bytes(b"")
    worker = Worker(str(path)).start()
    worker.write("first\n")
    worker.write("second\n")
    worker.flush()
    worker.stop()
    assert path.read_text() == "first\nsecond\n"
    assert worker.error is None


def test_appends_to_existing_file(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("old\n")
    worker = Worker(str(path)).start()
    worker.write("new\n")
    worker.stop()
    assert path.read_text() == "old\nnew\n"


def test_tee_goes_to_stream():
    buffer = io.StringIO()
    worker = Worker(stream=buffer).start()
    worker.tee("hello\n")
    worker.tee("world\n")
    worker.stop()
    assert buffer.getvalue() == "hello\nworld\n"


def test_rotates_when_size_is_reached(tmp_path):
    path = tmp_path / "log.txt"
    path.write_bytes(b"")
    worker = Worker(str(path), size=10, count=3).start()
    for line in ("a" * 11 + "\n", "b" * 11 + "\n", "c" * 11 + "\n"):
        worker.write(line)
    worker.stop()
    assert path.read_text() == ""
    assert (tmp_path / "log.1.txt").read_text() == "c" * 11 + "\n"
    assert (tmp_path / "log.2.txt").read_text() == "b" * 11 + "\n"
    assert not (tmp_path / "log.3.txt").exists()


def test_redirect_switches_file(tmp_path):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_bytes(b"")
    second.write_bytes(b"")
    worker = Worker(str(first)).start()
    worker.write("one\n")
    worker.redirect(str(second))
    worker.write("two\n")
    worker.stop()
    assert first.read_text() == "one\n"
    assert second.read_text() == "two\n"


def test_write_without_file_reports_error():
    buffer = io.StringIO()
    worker = Worker(stream=buffer).start()
    worker.write("lost\n")
    worker.stop()
    assert isinstance(worker.error, RuntimeError)
    assert buffer.getvalue().startswith("error: ")


def test_missing_file_reports_error(tmp_path):
    buffer = io.StringIO()
    worker = Worker(str(tmp_path / "missing.txt"), stream=buffer).start()
    worker.stop()
    assert isinstance(worker.error, FileNotFoundError)
    assert "error: " in buffer.getvalue()


def test_stop_is_idempotent(tmp_path):
    path = tmp_path / "log.txt"
    path.write_bytes(b"")
    worker = Worker(str(path)).start()
    worker.write("x\n")
    worker.stop()
    worker.stop()
    assert path.read_text() == "x\n"