"""
Interactive helper shell.

- Asks for the word length (unless given up front), re-prompting on bad input.
- Loops over a small menu: add a scored guess, check a proposed guess,
  dump the tracker state, exit.
- Practice mode: when the hidden answer is known, added guesses are scored
  here instead of asking the user for the feedback string.

Line I/O is injected (`read_line`, `write`) so the same loop runs from the
CLI, a notebook, or a test with scripted input. `read_line` signals end of
input by raising EOFError, exactly like the builtin `input`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from packages.tracker import (
    ConstraintStore,
    LengthMismatchError,
    parse_feedback,
    pretty_summary,
)
from packages.tracker.scoring import score

logger = logging.getLogger(__name__)

GREETING = (
    "Welcome to the wordle helper!\n"
    " I won't tell you which word to use, but I can tell you if a guess you are\n"
    " about to make contradicts your previous guesses!\n"
    "-----"
)
MENU = (
    "What do you want to do?\n"
    "a. Add new guess\n"
    "b. Check legality of guess\n"
    "c. Debug\n"
    "d. Exit"
)
FAREWELL = "Very cool!"

ADD_KEYS = {"a", "A", "1"}
CHECK_KEYS = {"b", "B", "2"}
DEBUG_KEYS = {"c", "C", "3"}
EXIT_KEYS = {"d", "D", "4"}

class HelperShell:
    def __init__(
            self,
            read_line: Callable[[], str],
            write: Callable[[str], None],
            *,
            word_length: int | None = None,
            answer: str | None = None,
    ):
        self._read_line = read_line
        self._write = write
        self.answer = answer.strip().lower() if answer else None
        if self.answer is not None:
            # The answer fixes the word length; an explicit one must agree.
            if word_length is None:
                word_length = len(self.answer)
            elif word_length != len(self.answer):
                raise LengthMismatchError(word_length, len(self.answer), what="answer")
        self.word_length = word_length
        self.store: Optional[ConstraintStore] = None

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line().strip()

    def ask_length(self) -> int:
        """Prompt until the user types a positive integer."""
        while True:
            raw = self._ask("Enter the number of letters")
            try:
                n = int(raw)
            except ValueError as e:
                self._write(f"Not a number! Repeat!, {e}")
                continue
            if n <= 0:
                self._write(f"The number of letters must be positive! Repeat! (got {n})")
                continue
            return n

    def run(self) -> Optional[ConstraintStore]:
        """
        Drive one session to completion (exit command or end of input).

        Returns:
          The store, with everything learned during the session (None if
          input ended before a word length was given).
        """
        self._write(GREETING)
        try:
            n = self.word_length if self.word_length is not None else self.ask_length()
            self.store = ConstraintStore(n)

            while True:
                choice = self._ask(MENU)
                if choice in ADD_KEYS:
                    self.add_guess()
                elif choice in CHECK_KEYS:
                    self.check_guess()
                elif choice in DEBUG_KEYS:
                    self._write(self.store.render_debug())
                elif choice in EXIT_KEYS:
                    break
                else:
                    self._write("Invalid input!")
        except EOFError:
            logger.debug("input closed; leaving the shell")

        self._write(FAREWELL)
        return self.store

    def add_guess(self) -> None:
        word = self._ask("Input new word").lower()
        if self.answer is not None:
            feedback = score(word, self.answer) if len(word) == len(self.answer) else ""
        else:
            feedback = self._ask("Enter wordle result").lower()

        try:
            self.store.update(word, parse_feedback(feedback))
        except LengthMismatchError as e:
            self._write(f"Not recorded: {e}")
            return

        if self.answer is not None:
            self._write(f"Wordle result: {feedback}")
            if word == self.answer:
                self._write("Solved!")

    def check_guess(self) -> None:
        word = self._ask("Enter the word you want to guess").lower()
        self._write(pretty_summary(self.store.check(word)))
