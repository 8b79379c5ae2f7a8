"""
Constraint store for a Wordle-style puzzle.

Accumulates feedback from successive guesses and answers one question:
"does this proposed next guess contradict anything we've learned?"

State:
  - word_length   : fixed at construction
  - fixed_letters : best-known solution per position (None = unknown)
  - letters       : char -> LetterInfo (AbsentLetter | PresentLetter(cells))

update() runs in two phases:
  1) Per-character transitions, collecting (letter, position) for every HIT.
  2) Mutual exclusion: each HIT pins fixed_letters[position] and rules that
     position out for every other present letter.
Phase 2 runs only after the whole round is absorbed so that one hit's
exclusion can't clobber another hit from the same round.

This is not a solver and never consults a word list.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import LengthMismatchError
from .letters import (
    AbsentLetter,
    CellState,
    FeedbackKind,
    LetterInfo,
    PresentLetter,
    new_cells,
    parse_feedback,
)
from .render import render_store
from .report import CheckReport, Issue, IssueKind

logger = logging.getLogger(__name__)

# (letter, position) pairs confirmed by a HIT during one update round.
Confirmation = Tuple[str, int]

class ConstraintStore:
    """Everything learned so far about one puzzle instance."""

    def __init__(self, word_length: int):
        if isinstance(word_length, bool) or not isinstance(word_length, int):
            raise ValueError(f"word_length must be an int; got {word_length!r}")
        if word_length <= 0:
            raise ValueError(f"word_length must be positive; got {word_length}")
        self.word_length: int = word_length
        self.fixed_letters: List[Optional[str]] = [None] * word_length
        self.letters: Dict[str, LetterInfo] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_information(self) -> bool:
        return bool(self.letters)

    def absent_letters(self) -> List[str]:
        """Letters known not to occur, sorted."""
        return sorted(c for c, info in self.letters.items() if isinstance(info, AbsentLetter))

    def present_letters(self) -> Dict[str, List[CellState]]:
        """Copy of the positional vectors of every present letter, sorted by letter."""
        return {
            c: list(info.cells)
            for c, info in sorted(self.letters.items())
            if isinstance(info, PresentLetter)
        }

    def render_debug(self) -> str:
        return render_store(self)

    def __str__(self) -> str:
        return self.render_debug()

    def __repr__(self) -> str:
        return (
            f"ConstraintStore(word_length={self.word_length}, "
            f"fixed_letters={self.fixed_letters!r}, letters={len(self.letters)})"
        )

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, guess: str, feedback: Sequence[FeedbackKind] | str) -> None:
        """
        Absorb the puzzle's feedback for one scored guess.

        Args:
          guess    : the word that was played (length == word_length)
          feedback : the typed 'y'/'m'/'n' string, or a sequence whose items
                     are FeedbackKinds or their values ('y', 'm', 'n')

        Raises:
          LengthMismatchError if either input has the wrong length.
          ValueError if a sequence item is not a feedback value.
          Nothing is mutated in either case.
        """
        if isinstance(feedback, str):
            kinds = parse_feedback(feedback)
        else:
            kinds = [FeedbackKind(k) for k in feedback]

        if len(guess) != self.word_length:
            raise LengthMismatchError(self.word_length, len(guess), what="guess")
        if len(kinds) != self.word_length:
            raise LengthMismatchError(self.word_length, len(kinds), what="feedback")

        confirmed = self._absorb(guess, kinds)
        self._apply_exclusions(confirmed)

    def _absorb(self, guess: str, kinds: List[FeedbackKind]) -> List[Confirmation]:
        """Phase 1: per-character transitions. Returns the HITs seen."""
        confirmed: List[Confirmation] = []

        for position, (letter, kind) in enumerate(zip(guess, kinds)):
            info = self.letters.get(letter)

            if info is None:
                if kind is FeedbackKind.MISS:
                    self.letters[letter] = AbsentLetter()
                else:
                    self.letters[letter] = PresentLetter(new_cells(self.word_length, position, kind))
                logger.debug("new letter %r at %d: %s", letter, position, kind.name)

            elif isinstance(info, AbsentLetter):
                if kind is FeedbackKind.MISS:
                    # Already known absent; either a wasted letter or a repeat
                    # that a later occurrence in this guess will resolve.
                    logger.info("useless guess? %r at %d is already known absent", letter, position)
                    continue
                # A repeated letter whose earlier copy was a MISS ("no extra
                # copy") turns out to occur after all.
                cells = [CellState.ABSENT] * self.word_length
                if kind is FeedbackKind.HIT:
                    cells[position] = CellState.CONFIRMED
                self.letters[letter] = PresentLetter(cells)
                logger.info("promoted %r from absent to present via %s at %d",
                            letter, kind.name, position)

            elif isinstance(info, PresentLetter):
                cells = info.cells
                if kind is FeedbackKind.MISS:
                    # No further copies: rule out every position not yet pinned.
                    for i, state in enumerate(cells):
                        if state is CellState.POSSIBLE:
                            cells[i] = CellState.ABSENT
                elif kind is FeedbackKind.PRESENT:
                    cells[position] = CellState.ABSENT
                else:
                    cells[position] = CellState.CONFIRMED
                logger.debug("refined %r at %d: %s", letter, position, kind.name)

            else:
                raise TypeError(f"Unknown letter record for {letter!r}: {info!r}")

            if kind is FeedbackKind.HIT:
                confirmed.append((letter, position))

        return confirmed

    def _apply_exclusions(self, confirmed: Iterable[Confirmation]) -> None:
        """Phase 2: a position holds exactly one letter."""
        for letter, position in confirmed:
            self.fixed_letters[position] = letter
            for other, info in self.letters.items():
                if other == letter or not isinstance(info, PresentLetter):
                    continue
                if info.cells[position] is CellState.CONFIRMED:
                    logger.warning(
                        "contradictory feedback: %r was confirmed at %d, now held by %r",
                        other, position, letter,
                    )
                info.cells[position] = CellState.ABSENT
            logger.debug("fixed %r at %d", letter, position)

    # ------------------------------------------------------------------
    # Check
    # ------------------------------------------------------------------

    def check(self, candidate: str) -> CheckReport:
        """
        Validate a proposed guess against everything recorded so far.

        Early failures (returned alone):
          - NO_INFORMATION  if update() was never called
          - LENGTH_MISMATCH if len(candidate) != word_length

        Otherwise both passes run to completion:
          1) fixed positions, in position order
          2) per-letter feasibility, in candidate order

        Returns:
          CheckReport; `passed` is True iff no issue was found.
        """
        if not self.has_information():
            return CheckReport([Issue(IssueKind.NO_INFORMATION)])

        if len(candidate) != self.word_length:
            return CheckReport([
                Issue(IssueKind.LENGTH_MISMATCH, expected=self.word_length, found=len(candidate))
            ])

        issues: List[Issue] = []

        # Pass 1: known letters must be where we saw them
        for position, (fixed, found) in enumerate(zip(self.fixed_letters, candidate)):
            if fixed is not None and fixed != found:
                issues.append(Issue(IssueKind.FIXED_LETTER, position=position,
                                    expected=fixed, found=found))

        # Pass 2: no absent letters, no ruled-out placements
        for position, letter in enumerate(candidate):
            info = self.letters.get(letter)
            if info is None:
                continue
            if isinstance(info, AbsentLetter):
                issues.append(Issue(IssueKind.ABSENT_LETTER, position=position, letter=letter))
            elif isinstance(info, PresentLetter):
                if info.cells[position] is CellState.ABSENT:
                    issues.append(Issue(IssueKind.RULED_OUT, position=position, letter=letter))
            else:
                raise TypeError(f"Unknown letter record for {letter!r}: {info!r}")

        return CheckReport(issues)
