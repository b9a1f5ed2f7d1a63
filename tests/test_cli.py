import io

import pytest

from exprparse.cli import main


@pytest.mark.parametrize("method", ["ll", "predictive"])
@pytest.mark.parametrize("text", ["1+2*3", "(1+2)*3", "((2+3)*(4-2))/2", "1+(2*(3+(4*(5+6))))"])
def test_good_expressions_are_accepted(method, text, capsys):
    assert main(["--method", method, text]) == 0
    assert "accepted" in capsys.readouterr().out


@pytest.mark.parametrize("method", ["ll", "predictive"])
@pytest.mark.parametrize("text", ["1++2", "1+2)", "(3*)4", "*3+2"])
def test_bad_expressions_are_rejected(method, text, capsys):
    assert main(["-m", method, text]) == 1
    captured = capsys.readouterr()
    assert "accepted" not in captured.out
    assert captured.err


def test_unknown_character_is_reported(capsys):
    assert main(["1+a"]) == 1
    assert "Syntax error" in capsys.readouterr().err


def test_tokens_are_listed_in_order(capsys):
    assert main(["--method", "tokens", "12+(3)"]) == 0
    assert capsys.readouterr().out.splitlines() == ["12", "+", "(", "3", ")"]


def test_reads_line_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(1+2)*3\nignored\n"))
    assert main([]) == 0
    assert "accepted" in capsys.readouterr().out


def test_stdin_tokens_stop_at_newline(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4/2\n7\n"))
    assert main(["-m", "tokens"]) == 0
    assert capsys.readouterr().out.splitlines() == ["4", "/", "2"]


def test_unknown_method_exits():
    with pytest.raises(SystemExit):
        main(["--method", "lr", "1"])