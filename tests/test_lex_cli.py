import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from tiny import lex_cli  # noqa: E402


PROGRAM = """read x;
if 0 < x then
  write x
end
"""


def test_classic_listing(tmp_path, capsys):
    src = tmp_path / "prog.tny"
    src.write_text(PROGRAM, encoding="utf-8")
    assert lex_cli.main([str(src)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == ""
    assert out[1] == f"COMPILATION: {src}"
    assert out[2] == "   1: read x;"
    assert out[3] == "\t1: reserved word: read"
    assert out[4] == "\t1: ID, name= x"
    assert out[5] == "\t1: ;"
    assert out[-1] == "\t4: EOF"


def test_default_extension(tmp_path, capsys, monkeypatch):
    (tmp_path / "prog.tny").write_text("write 1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert lex_cli.main(["prog"]) == 0
    assert "COMPILATION: prog.tny" in capsys.readouterr().out


def test_source_path():
    assert lex_cli.source_path("sample") == Path("sample.tny")
    assert lex_cli.source_path("sample.txt") == Path("sample.txt")


def test_missing_file(tmp_path, capsys):
    assert lex_cli.main([str(tmp_path / "nope.tny")]) == 1
    assert "not found" in capsys.readouterr().err


def test_quiet_flags(tmp_path, capsys):
    src = tmp_path / "prog.tny"
    src.write_text(PROGRAM, encoding="utf-8")
    assert lex_cli.main([str(src), "--no-echo", "--no-trace"]) == 0
    assert capsys.readouterr().out.strip() == f"COMPILATION: {src}"


def test_token_table(tmp_path, capsys):
    src = tmp_path / "prog.tny"
    src.write_text("x := 5", encoding="utf-8")
    assert lex_cli.main([str(src), "--tokens"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[1:] == [
        "IDENTIFIER\t'x'\t(line 1, col 1)",
        "ASSIGN\t':='\t(line 1, col 3)",
        "NUMBER\t'5'\t(line 1, col 6)",
        "ENDFILE\t''\t(line 1, col 6)",
    ]


def test_errors_only_fail_in_strict_mode(tmp_path, capsys):
    src = tmp_path / "prog.tny"
    src.write_text("x : 1 $", encoding="utf-8")
    assert lex_cli.main([str(src), "--no-echo"]) == 0
    out = capsys.readouterr().out
    assert "\t1: ERROR: :" in out
    assert "\t1: ERROR: $" in out
    assert lex_cli.main([str(src), "--strict"]) == 1
    assert "2 lexical error(s)" in capsys.readouterr().err


def test_bundled_sample_scans_cleanly(capsys):
    sample = ROOT / "samples" / "sample.tny"
    assert lex_cli.main([str(sample), "--strict"]) == 0
    out = capsys.readouterr().out
    assert "\t5: reserved word: read" in out
    assert "ERROR" not in out


def test_source_path_only_extends_dotless_names():
    assert lex_cli.source_path("v1.0/prog") == Path("v1.0/prog")
    assert lex_cli.source_path(".") == Path(".")
    assert lex_cli.source_path("") == Path(".tny")


def test_dotted_directory_keeps_name_as_given(tmp_path, capsys, monkeypatch):
    (tmp_path / "v1.0").mkdir()
    (tmp_path / "v1.0" / "prog").write_text("write 1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert lex_cli.main(["v1.0/prog"]) == 0
    assert f"COMPILATION: {Path('v1.0/prog')}" in capsys.readouterr().out


def test_directory_and_empty_arguments_fail_cleanly(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert lex_cli.main(["."]) == 1
    assert "[tinylex:error] cannot open ." in capsys.readouterr().err
    assert lex_cli.main([""]) == 1
    assert "File .tny not found" in capsys.readouterr().err
