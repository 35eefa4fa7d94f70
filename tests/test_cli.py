"""Tests for the basename-kit CLI."""

import json

import pytest

from basename_kit.__main__ import main
from basename_kit.config import CONFIG_FILENAME


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr()


class TestNameCommand:
    def test_one_per_line(self, workdir, capsys):
        out = _run(capsys, "name", "/usr/local/bin", "file.txt", "a/b/", "a//b").out
        assert out.split("\n") == ["bin", "file.txt", "", "b", ""]

    def test_json_output(self, workdir, capsys):
        out = _run(capsys, "name", "--json", "/", "x/y").out
        assert json.loads(out) == ["", "y"]

    def test_suffix_flag(self, workdir, capsys):
        out = _run(capsys, "name", "-s", ".txt", "docs/file.txt", "docs/.txt").out
        assert out.splitlines() == ["file", ".txt"]

    def test_suffix_from_config(self, workdir, capsys):
        (workdir / CONFIG_FILENAME).write_text(
            json.dumps({"suffix": ".gz", "log_level": "WARNING"}), encoding="utf-8",
        )
        out = _run(capsys, "name", "backup/db.gz").out
        assert out.splitlines() == ["db"]

    def test_flag_overrides_config_suffix(self, workdir, capsys):
        cfg = workdir / "custom.json"
        cfg.write_text(json.dumps({"suffix": ".gz"}), encoding="utf-8")
        out = _run(capsys, "--config", str(cfg), "name", "-s", "", "backup/db.gz").out
        assert out.splitlines() == ["db.gz"]

    def test_missing_operand(self, workdir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["name"])
        assert exc.value.code == 2

    def test_bad_config_exits_1(self, workdir, capsys):
        (workdir / CONFIG_FILENAME).write_text(json.dumps({"profile": "x"}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["name", "a/b"])
        assert exc.value.code == 1
        assert "Invalid profile" in capsys.readouterr().err

    def test_malformed_json_config_exits_1(self, workdir, capsys):
        (workdir / CONFIG_FILENAME).write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["name", "a/b"])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("basename-kit: ")

    def test_type_error_exits_1(self, workdir, capsys, monkeypatch):
        def _reject(paths, *, profile):
            raise TypeError("baremetal profile accepts only str paths, got bytes")

        monkeypatch.setattr("basename_kit.__main__.base_names", _reject)
        with pytest.raises(SystemExit) as exc:
            main(["name", "a/b"])
        assert exc.value.code == 1
        assert "baremetal" in capsys.readouterr().err


class TestInitCommand:
    def test_writes_config(self, workdir, capsys):
        out = _run(capsys, "init", "--path", str(workdir / "proj")).out
        assert (workdir / "proj" / CONFIG_FILENAME).is_file()
        assert CONFIG_FILENAME in out

    def test_ignores_invalid_local_config(self, workdir, capsys):
        (workdir / CONFIG_FILENAME).write_text(json.dumps({"profile": "x"}), encoding="utf-8")
        _run(capsys, "init", "--path", str(workdir / "fresh"))
        written = workdir / "fresh" / CONFIG_FILENAME
        assert written.is_file()
        assert json.loads(written.read_text(encoding="utf-8"))["profile"] == "full"
