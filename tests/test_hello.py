import io
import sys

from typedinput.hello import greet, main


def test_greet_world_by_default():
    assert greet() == "hello, world"


def test_greet_name():
    assert greet("David") == "hello, David"


def test_greet_keeps_name_verbatim():
    name = "  Ada Lovelace  "
    assert greet(name).endswith(name)
    assert greet(name).startswith("hello, ")


def _run(monkeypatch, capsys, text, argv):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_asks_for_name(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "David\n", [])
    assert code == 0
    assert out == "What's your name? hello, David\n"


def test_main_handles_crlf(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "Carter\r\n", [])
    assert out == "What's your name? hello, Carter\n"


def test_main_world(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "", ["--world"])
    assert out == "hello, world\n"


def test_main_at_end_of_input(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "", [])
    assert out == "What's your name? " + greet("") + "\n"