from __future__ import annotations

from scripts.convert_file import main


def test_script_writes_output_file_and_reports_skipped(tmp_path, capsys, sample_log):
    src = tmp_path / "attlog.txt"
    src.write_text(sample_log, encoding="utf-8")
    out = tmp_path / "converted_aub_format.txt"

    code = main([str(src), "-o", str(out), "--mode", "extras"])

    assert code == 0
    assert out.read_text(encoding="utf-8").split("\n")[1] == "72\t2025-11-03 18:18:47\t1\t1\t1\t0"
    err = capsys.readouterr().err
    assert "Line 4: TOO_FEW_FIELDS" in err
    assert "3 lines written" in err


def test_script_prints_to_stdout(tmp_path, capsys):
    src = tmp_path / "attlog.txt"
    src.write_bytes(b"72\t2025-11-03 08:52:08\n")

    assert main([str(src), "--mode", "extras"]) == 0
    assert capsys.readouterr().out == "72\t2025-11-03 08:52:08\t1\t0\t1\t0\n"


def test_script_missing_file_and_bad_mode(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "File not found" in capsys.readouterr().err

    src = tmp_path / "attlog.txt"
    src.write_bytes(b"1\t2")
    assert main([str(src), "--mode", "hourly"]) == 1
    assert "Unknown direction mode" in capsys.readouterr().err


def test_script_reports_unreadable_path_without_traceback(tmp_path, capsys):
    folder = tmp_path / "logs.txt"
    folder.mkdir()

    assert main([str(folder)]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_script_reports_unwritable_output(tmp_path, capsys):
    src = tmp_path / "attlog.txt"
    src.write_bytes(b"72\t2025-11-03 08:52:08\n")

    assert main([str(src), "-o", str(tmp_path / "missing" / "out.txt")]) == 1
    assert "Cannot write" in capsys.readouterr().err
