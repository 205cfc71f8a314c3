import io
import sys

import pytest

from typedinput.agree import AGREED, NOT_AGREED, QUESTION, agreement, main


@pytest.mark.parametrize("answer", ["y", "Y"])
def test_yes_answers_agree_when_ignoring_case(answer):
    assert agreement(answer, True) == "Agreed."


@pytest.mark.parametrize("answer", ["n", "N"])
def test_no_answers_disagree_when_ignoring_case(answer):
    assert agreement(answer, True) == "Not agreed."


def test_case_sensitive_accepts_only_lowercase():
    assert agreement("y", False) == AGREED
    assert agreement("n", False) == NOT_AGREED
    assert agreement("Y", False) is None
    assert agreement("N", False) is None


@pytest.mark.parametrize("answer", ["x", "?", " ", "\x7f"])
def test_other_answers_have_no_verdict(answer):
    assert agreement(answer, True) is None
    assert agreement(answer, False) is None


def _run(monkeypatch, capsys, text, argv):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_prints_agreement(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "Y\n", [])
    assert code == 0
    assert out == QUESTION + AGREED + "\n"


def test_main_reprompts_until_single_character(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "yes\n\nn\n", [])
    assert out == QUESTION * 3 + NOT_AGREED + "\n"


def test_main_case_sensitive_ignores_uppercase(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "N\n", ["--case-sensitive"])
    assert out == QUESTION


def test_main_at_end_of_input_prints_only_prompt(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "", [])
    assert out == QUESTION