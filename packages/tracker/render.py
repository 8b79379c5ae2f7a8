"""Debug rendering of a ConstraintStore (read-only, no side effects)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from .letters import CellState

if TYPE_CHECKING:
    from .store import ConstraintStore


UNKNOWN_SLOT = "*"

SYMBOLS = {
    CellState.ABSENT: "-",
    CellState.POSSIBLE: "?",
    CellState.CONFIRMED: "+",
}


def cells_symbol(cells: Iterable[CellState]) -> str:
    """Compact per-position string, e.g. [ABSENT, POSSIBLE, CONFIRMED] -> '-?+'."""
    return "".join(SYMBOLS[c] for c in cells)


def slot_symbol(letter: Optional[str]) -> str:
    return UNKNOWN_SLOT if letter is None else letter


def render_store(store: ConstraintStore) -> str:
    """
    Example (word length 4, after "soda" scored "nnyy"):

        Necessary letters: * * d a
        Absent letters: o, s
        Positional info (- ruled out, ? unknown, + confirmed):
          a -> ??-+
          d -> ??+-
    """
    fixed = " ".join(slot_symbol(c) for c in store.fixed_letters)
    absent = ", ".join(store.absent_letters()) or "(none)"

    lines = [
        f"Necessary letters: {fixed}",
        f"Absent letters: {absent}",
        "Positional info (- ruled out, ? unknown, + confirmed):",
    ]
    present = store.present_letters()
    if not present:
        lines.append("  (none)")
    for letter, cells in present.items():
        lines.append(f"  {letter} -> {cells_symbol(cells)}")
    return "\n".join(lines)
