"""
Letter-state model for the constraint tracker.

Two layers of knowledge are kept per letter:
  - LetterInfo : is the letter in the word at all?
      AbsentLetter        -> never occurs anywhere in the solution
      PresentLetter(cells)-> occurs; `cells` holds one CellState per position
  - CellState  : what we know about (letter, position)
      ABSENT    -> letter is not at this position
      POSSIBLE  -> no information yet
      CONFIRMED -> letter is at this position (it may still repeat elsewhere)

Feedback from the puzzle is one FeedbackKind per guessed character. The
values double as the characters typed into the shell:
  'n' : miss    (not in the word / no additional copy)
  'm' : present (in the word, somewhere else)
  'y' : hit     (in the word, right here)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Union


class CellState(str, Enum):
    """Knowledge about a single (letter, position) pair."""

    ABSENT = "absent"
    POSSIBLE = "possible"
    CONFIRMED = "confirmed"


class FeedbackKind(str, Enum):
    """One puzzle signal for one guessed character."""

    MISS = "n"
    PRESENT = "m"
    HIT = "y"


@dataclass(frozen=True)
class AbsentLetter:
    """The letter does not occur in the solution."""


@dataclass
class PresentLetter:
    """The letter occurs; `cells[p]` describes position p."""

    cells: List[CellState] = field(default_factory=list)


# Closed union; code dispatching on it must handle both variants.
LetterInfo = Union[AbsentLetter, PresentLetter]


def parse_feedback(text: str) -> List[FeedbackKind]:
    """
    Convert a typed feedback string to FeedbackKinds.

    Exact characters only: 'y' -> HIT, 'm' -> PRESENT, anything else
    (including 'Y' and 'M') -> MISS. Callers lowercase user input first.

    Example:
      parse_feedback("ymnN") -> [HIT, PRESENT, MISS, MISS]
    """
    out: List[FeedbackKind] = []
    for ch in text.strip():
        if ch == FeedbackKind.HIT.value:
            out.append(FeedbackKind.HIT)
        elif ch == FeedbackKind.PRESENT.value:
            out.append(FeedbackKind.PRESENT)
        else:
            out.append(FeedbackKind.MISS)
    return out


def format_feedback(kinds: Iterable[FeedbackKind]) -> str:
    """Inverse of parse_feedback for canonical input."""
    return "".join(k.value for k in kinds)


def new_cells(word_length: int, position: int, kind: FeedbackKind) -> List[CellState]:
    """
    Fresh positional vector for a letter seen for the first time.

    Everything is POSSIBLE except `position`, which becomes ABSENT for a
    PRESENT signal or CONFIRMED for a HIT.

    Example:
      new_cells(4, 2, FeedbackKind.PRESENT) -> [POSSIBLE, POSSIBLE, ABSENT, POSSIBLE]
    """
    if kind is FeedbackKind.MISS:
        raise ValueError("a missed letter has no positional vector")
    cells = [CellState.POSSIBLE] * word_length
    cells[position] = CellState.CONFIRMED if kind is FeedbackKind.HIT else CellState.ABSENT
    return cells
