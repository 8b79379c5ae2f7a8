from typing import List

import pytest
from packages.harness import HelperShell
from packages.harness.shell import FAREWELL
from packages.tracker import LengthMismatchError


def _scripted(lines: List[str]):
    it = iter(lines)

    def read_line() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


def _run(lines, **kwargs):
    out: List[str] = []
    shell = HelperShell(_scripted(lines), out.append, **kwargs)
    store = shell.run()
    return store, "\n".join(out), out


def test_full_session_with_prompted_length():
    store, text, out = _run([
        "x", "0", "4",          # bad, non-positive, good
        "a", "SODA", "NNYY",    # add guess (normalized to lowercase)
        "b", "sand",            # check
        "c",                    # debug
        "d",                    # exit
    ])
    assert "Not a number! Repeat!" in text
    assert "must be positive" in text
    assert store.fixed_letters == [None, None, "d", "a"]
    assert "Errors:" in text
    assert "letter 's' must be absent" in text
    assert "Necessary letters: * * d a" in text
    assert out[-1] == FAREWELL


def test_end_of_input_before_length():
    store, _, out = _run([])
    assert store is None
    assert out[-1] == FAREWELL


def test_end_of_input_inside_menu_exits_cleanly():
    store, _, out = _run(["a", "soda"], word_length=4)
    assert store.letters == {}
    assert out[-1] == FAREWELL


def test_invalid_menu_choice():
    _, text, _ = _run(["z", "4"], word_length=4)
    assert "Invalid input!" in text


def test_check_before_any_guess():
    _, text, _ = _run(["2", "abcd", "D"], word_length=4)
    assert "No information yet..." in text


def test_wrong_length_guess_is_not_recorded():
    store, text, _ = _run(["A", "abc", "nnn", "d"], word_length=4)
    assert "Not recorded:" in text
    assert store.letters == {}


def test_practice_mode_scores_guesses():
    store, text, _ = _run(["1", "raise", "2", "crane", "1", "crane"], answer="crane")
    assert store.word_length == 5
    assert "Wordle result: mmnny" in text
    assert "No issues!" in text
    assert "Wordle result: yyyyy" in text
    assert "Solved!" in text
    assert store.fixed_letters == list("crane")


def test_practice_mode_rejects_wrong_length_guess():
    store, text, _ = _run(["a", "cranes", "d"], answer="crane")
    assert "Not recorded:" in text
    assert store.letters == {}


def test_practice_answer_must_match_length():
    with pytest.raises(LengthMismatchError):
        HelperShell(_scripted([]), print, word_length=4, answer="crane")
