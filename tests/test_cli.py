from pathlib import Path

import pytest

from autocorrect import cli


def _write_dictionary(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text(
        "rank word frequency\n"
        "1 the 100\n"
        "2 that 50\n"
        "3 this 50\n"
    )
    return path


def test_main_prints_corrections(tmp_path: Path, capsys) -> None:
    path = _write_dictionary(tmp_path)

    status = cli.main(["Thw", "--dictionary", str(path)])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["Corrections for thw", "the"]


def test_main_honours_limit(tmp_path: Path, capsys) -> None:
    path = _write_dictionary(tmp_path)

    status = cli.main(["thi", "--dictionary", str(path), "--limit", "1"])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["Corrections for thi", "the"]


def test_main_reports_missing_dictionary(tmp_path: Path, capsys) -> None:
    status = cli.main(["thw", "--dictionary", str(tmp_path / "missing.txt")])

    assert status == 1
    assert "error:" in capsys.readouterr().err


def test_main_uses_dictionary_from_environment(tmp_path: Path, monkeypatch, capsys) -> None:
    path = _write_dictionary(tmp_path)
    monkeypatch.setenv("AUTOCORRECT_DICTIONARY_PATH", str(path))

    status = cli.main(["the"])

    assert status == 0
    assert capsys.readouterr().out.splitlines()[-1] == "the"


def test_main_rejects_non_positive_limit(tmp_path: Path, capsys) -> None:
    path = _write_dictionary(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["thw", "--dictionary", str(path), "--limit", "0"])

    assert excinfo.value.code == 2
    assert "--limit must be positive" in capsys.readouterr().err


def test_main_rejects_unknown_log_level(tmp_path: Path, monkeypatch, capsys) -> None:
    path = _write_dictionary(tmp_path)
    monkeypatch.setenv("AUTOCORRECT_LOG_LEVEL", "loud")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["thw", "--dictionary", str(path)])

    assert excinfo.value.code == 2
    assert "unknown log level" in capsys.readouterr().err
