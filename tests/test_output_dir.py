"""
Unit tests for output directory preparation
"""

from crawlrunner.cli.output_dir import prepare_output_dir
from crawlrunner.errors import ErrorKind


def test_missing_directory_is_ready(tmp_path):
    out = tmp_path / "out"
    result = prepare_output_dir(out)
    assert result.is_ok
    assert result.value == out
    assert not out.exists()


def test_empty_directory_is_ready(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    result = prepare_output_dir(str(out))
    assert result.is_ok
    assert out.is_dir()


def test_non_empty_directory_without_override_conflicts(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    (out / "index.html").write_text("<html></html>")

    result = prepare_output_dir(out, override=False)

    assert not result.is_ok
    assert result.error.kind == ErrorKind.OUTPUT_DIRECTORY_CONFLICT
    assert "--override" in result.error.message
    assert (out / "index.html").read_text() == "<html></html>"


def test_non_empty_directory_with_override_is_cleared(tmp_path, capsys):
    out = tmp_path / "out"
    (out / "screenshots").mkdir(parents=True)
    (out / "index.html").write_text("<html></html>")
    (out / "screenshots" / "state1.png").write_bytes(b"\x89PNG")

    result = prepare_output_dir(out, override=True)

    assert result.is_ok
    assert not (out / "index.html").exists()
    assert not (out / "screenshots").exists()
    assert "Overriding output directory..." in capsys.readouterr().out


def test_deletion_failure_is_reported(tmp_path, monkeypatch):
    out = tmp_path / "out"
    out.mkdir()
    (out / "locked.txt").write_text("data")

    def failing_rmtree(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("crawlrunner.cli.output_dir.shutil.rmtree", failing_rmtree)
    result = prepare_output_dir(out, override=True)

    assert not result.is_ok
    assert result.error.kind == ErrorKind.DIRECTORY_DELETION_FAILED
    assert "Permission denied" in result.error.message
    assert (out / "locked.txt").exists()


def test_file_path_conflicts_even_with_override(tmp_path):
    target = tmp_path / "report.txt"
    target.write_text("keep me")

    result = prepare_output_dir(target, override=True)

    assert not result.is_ok
    assert result.error.kind == ErrorKind.OUTPUT_DIRECTORY_CONFLICT
    assert target.read_text() == "keep me"


def test_empty_path_never_touches_working_directory(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    (work / "precious.txt").write_text("keep")
    monkeypatch.chdir(work)

    for override in (False, True):
        result = prepare_output_dir("", override=override)
        assert not result.is_ok
        assert result.error.kind == ErrorKind.OUTPUT_DIRECTORY_CONFLICT
        assert (work / "precious.txt").read_text() == "keep"
