"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Only used by practice mode, where the hidden answer is known and the shell
scores each added guess itself instead of asking the user for feedback.

Conventions (same alphabet the shell accepts from the user):
  - 'y' : hit     = correct letter in the correct position
  - 'm' : present = correct letter in the wrong position
  - 'n' : miss    = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all hits and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks 'present' only if the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from .errors import LengthMismatchError
from .letters import FeedbackKind, format_feedback


def score_kinds(guess: str, answer: str) -> List[FeedbackKind]:
    """
    Compute feedback for `guess` against `answer` as FeedbackKinds.

    Raises:
      LengthMismatchError if the two words differ in length.
    """
    # Normalize; the puzzle is case-insensitive
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise LengthMismatchError(len(answer), len(guess), what="guess")

    pattern = [FeedbackKind.MISS] * len(guess)

    # Pass 1: hits, and leftover counts from the answer for pass 2.
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = FeedbackKind.HIT
        else:
            remaining[a] += 1

    # Pass 2: 'present' capped by the true multiplicity in the answer.
    for i, g in enumerate(guess):
        if pattern[i] is FeedbackKind.HIT:
            continue
        if remaining[g] > 0:
            pattern[i] = FeedbackKind.PRESENT
            remaining[g] -= 1

    return pattern


def score(guess: str, answer: str) -> str:
    """
    Feedback string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "nymmm"
      score("lemon", "level") -> "yynnn"
    """
    return format_feedback(score_kinds(guess, answer))
