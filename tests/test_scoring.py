import pytest
from packages.tracker import ConstraintStore, LengthMismatchError, score
from packages.tracker.scoring import score_kinds
from packages.tracker.letters import FeedbackKind

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","nymmm"),
    ("level","level","yyyyy"),
    ("lemon","level","yynnn"),
    ("cools","scoop","mmynm"),
    ("scoop","scoop","yyyyy"),
    ("crane","crane","yyyyy"),
    ("raise","crane","mmnny"),
    ("stare","crane","nnymy"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","nyyymm"),
    ("little","letter","ynyynm"),
    ("planet","palate","ymmnmm"),
    ("kitten","tinket","mymmym"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_normalizes_case_and_whitespace():
    assert score(" CRANE", "crane\n") == "yyyyy"

def test_score_kinds_are_feedback_kinds():
    assert score_kinds("lemon", "level")[:3] == [FeedbackKind.HIT, FeedbackKind.HIT, FeedbackKind.MISS]

def test_score_rejects_length_mismatch():
    with pytest.raises(LengthMismatchError):
        score("abc", "abcd")

def test_scored_feedback_feeds_the_store():
    store = ConstraintStore(5)
    store.update("raise", score("raise", "crane"))
    assert store.check("crane").passed
    assert not store.check("raise").passed
