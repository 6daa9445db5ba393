"""End-to-end CLI tests executed directly via :func:`wordbits.cli.main`."""

import json
import logging
from pathlib import Path

import pytest

from wordbits import cli


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> str:
    assert cli.main(argv) == 0
    return capsys.readouterr().out


def test_popcount_and_highest_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["popcount", "0b11100100"], capsys) == "4\n"
    assert _run(["popcount", "0xFFFFFFFF", "--method", "scan"], capsys) == "32\n"
    assert _run(["highest", "1982", "--method", "power"], capsys) == "10\n"


def test_word_results_include_binary(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["set", "9", "1"], capsys) == "11\t1011\n"
    assert _run(["remove", "0b100011", "1"], capsys) == "17\t10001\n"
    assert _run(["rotl", "0b10000011", "2", "--width", "8"], capsys) == "14\t1110\n"
    assert _run(["get", "5", "2"], capsys) == "true\n"


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    payload = json.loads(_run(["swap", "0b100011", "1", "4", "--format", "json"], capsys))
    assert payload["command"] == "swap"
    assert payload["width"] == 32
    assert payload["inputs"] == {"word": 35, "index_a": 1, "index_b": 4, "method": "xor"}
    assert payload["result"] == 0b110001
    assert payload["binary"] == "110001"

    payload = json.loads(_run(["runs", "0b1001110", "2", "--format", "json"], capsys))
    assert payload["result"] == 2
    assert "binary" not in payload


def test_render_and_mask(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["render", "35", "--width", "8", "--pad"], capsys) == "00100011\n"
    assert _run(["render", "0"], capsys) == "0\n"
    assert _run(["mask", "--range", "2", "4"], capsys) == "28\t11100\n"
    assert _run(["mask", "--run", "3"], capsys) == "7\t111\n"
    assert _run(["mask", "--power", "4"], capsys) == "16\t10000\n"


def test_unique_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "values.txt"
    source.write_text("2\n3\n5\n3\n2\n")
    out = tmp_path / "result.json"
    assert cli.main(["unique", "--input", str(source), "--format", "json", "--out", str(out)]) == 0
    payload = json.loads(out.read_text())
    assert payload["result"] == 5
    assert payload["inputs"]["count"] == 5


def test_library_errors_exit_with_usage_status(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["highest", "0"])
    assert excinfo.value.code == 2
    assert "highest set bit" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["set", "1", "32"])
    assert excinfo.value.code == 2
    assert "bit index 32" in capsys.readouterr().err


def test_bad_arguments_rejected_by_parser(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        cli.main(["popcount", "zzz"])
    with pytest.raises(SystemExit):
        cli.main(["popcount", "1", "--width", "0"])
    capsys.readouterr()


def test_verbose_flag_logs_dispatch(
    capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG):
        assert _run(["-v", "clear", "0b1111", "3", "--method", "subtract"], capsys) == "7\t111\n"
    assert "command=clear" in caplog.text
    assert "method=subtract" in caplog.text
