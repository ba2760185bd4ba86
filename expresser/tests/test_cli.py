"""
Tests for the command line interface.
"""
import io
import os
import subprocess
import sys

from expresser.cli import main


def test_file_to_file(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("1>0\n1+2*3\n(1+2)*3\n")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == "1\n7\n9\n"


def test_default_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("2 * 10\n")
    assert main([]) == 0
    assert (tmp_path / "out.txt").read_text() == "20\n"


def test_abort_on_bad_line(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("1\n1 + y\n")
    assert main([str(src), str(dst)]) == 1
    assert not dst.exists()
    err = capsys.readouterr().err
    assert "line 2: TokenizationError" in err


def test_skip_bad_lines(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("1\n(2\n3\n")
    assert main([str(src), str(dst), "--on-error", "skip"]) == 0
    assert dst.read_text() == "1\n3\n"
    assert "line 2: ParseError: Unmatched parenthesis" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "out.txt")]) == 1
    assert "FileNotFoundError" in capsys.readouterr().err


def test_debug_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("EXPRESSER_DEBUG", "1")
    src = tmp_path / "in.txt"
    src.write_text("1+2\n")
    assert main([str(src), str(tmp_path / "out.txt")]) == 0
    err = capsys.readouterr().err
    assert "AST: (1 + 2)" in err
    assert "Value: 3" in err


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1+2\n\nabc\nquit\n"))
    assert main(["--repl"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert ">>> 3" in lines
    assert any("TokenizationError" in line for line in lines)


def test_main_script(tmp_path):
    """Ensure the root script evaluates a file end to end."""
    root = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("1-2-3\n1=1\n")
    subprocess.run(
        [sys.executable, os.path.join(root, 'main.py'), str(src), str(dst)],
        capture_output=True, text=True, check=True,
    )
    assert dst.read_text() == "-4\n1\n"


def test_vertical_whitespace_stays_inside_a_line(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"1\x0c+\x0c2\r\n3\x0b*\x0b4\n")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == "3\n12\n"


def test_deep_nesting_in_file(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("(" * 200 + "7" + ")" * 200 + "\n" + "(" * 200 + "7\n")
    assert main([str(src), str(dst), "--on-error", "skip"]) == 0
    assert dst.read_text() == "7\n"


def test_debug_shows_tokens_of_failing_line(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("1 +\n")
    assert main([str(src), str(tmp_path / "out.txt"), "--debug", "--on-error", "skip"]) == 0
    err = capsys.readouterr().err
    assert "Tokens: [Token(NUMBER, 1, position=0)" in err
    assert "AST:" not in err
    assert "line 1: ParseError: Unexpected end of input" in err
