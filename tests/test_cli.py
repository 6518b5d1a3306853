import io
import json

import cli


def test_parse_file(input_file, capsys):
    assert cli.main(["--mode", "parse", "--file", str(input_file), "--validate"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["file_header"]["originator_id"] == "0000000610"
    assert len(data["transactions"]) == 6


def test_parse_stdin(built_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(built_file))
    assert cli.main(["--mode", "parse"]) == 0
    assert json.loads(capsys.readouterr().out)["file_footer"]["record_count"] == 8


def test_parse_empty_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["--mode", "parse"]) == 0
    assert capsys.readouterr().out == ""


def test_parse_broken_file(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("garbage")
    assert cli.main(["--mode", "parse", "--file", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_scan(input_file, capsys):
    assert cli.main(["--mode", "scan", "--file", str(input_file)]) == 0
    assert len(json.loads(capsys.readouterr().out)["transactions"]) == 6


def test_scan_requires_file(base_dirs):
    assert cli.main(["--mode", "scan"]) == 1


def test_build_to_output(base_dirs, tmp_path, eft_file, built_file):
    source = tmp_path / "batch.json"
    source.write_text(eft_file.to_json(), encoding="utf-8")
    target = tmp_path / "out" / "batch.txt"
    assert cli.main(["--mode", "build", "--file", str(source), "--output", str(target), "--validate"]) == 0
    with open(target, encoding="utf-8", newline="") as f:
        assert f.read() == built_file


def test_build_to_stdout(base_dirs, tmp_path, eft_file, built_file, capsys):
    source = tmp_path / "batch.json"
    source.write_text(eft_file.to_json(), encoding="utf-8")
    assert cli.main(["--mode", "build", "--file", str(source)]) == 0
    assert capsys.readouterr().out == built_file


def test_build_invalid_json(base_dirs, tmp_path):
    source = tmp_path / "batch.json"
    source.write_text("{}", encoding="utf-8")
    assert cli.main(["--mode", "build", "--file", str(source), "--validate"]) == 1
