"""
Structured result of ConstraintStore.check.

A check never raises. It returns a CheckReport whose `issues` list is empty
when the candidate contradicts nothing we know, and otherwise holds every
problem found (not just the first), so the shell can show them all at once.

Issue kinds:
  NO_INFORMATION  : nothing has been scored yet; checking is meaningless
  LENGTH_MISMATCH : candidate length != word length (no other checks run)
  FIXED_LETTER    : a confirmed position holds a different letter
  ABSENT_LETTER   : the letter is known not to occur at all
  RULED_OUT       : the letter occurs, but not at this position

Typical use:
    rep = store.check("crane")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional


class IssueKind(str, Enum):
    NO_INFORMATION = "no_information"
    LENGTH_MISMATCH = "length_mismatch"
    FIXED_LETTER = "fixed_letter"
    ABSENT_LETTER = "absent_letter"
    RULED_OUT = "ruled_out"


@dataclass(frozen=True)
class Issue:
    """One problem with a candidate. Unused fields stay None."""
    kind: IssueKind
    position: Optional[int] = None
    letter: Optional[str] = None
    expected: Optional[object] = None   # str for FIXED_LETTER, int for LENGTH_MISMATCH
    found: Optional[object] = None

    @property
    def message(self) -> str:
        if self.kind is IssueKind.NO_INFORMATION:
            return "No information yet..."
        if self.kind is IssueKind.LENGTH_MISMATCH:
            return f"Number of letters is not right! (should be {self.expected}, got {self.found})"
        if self.kind is IssueKind.FIXED_LETTER:
            return f"position {self.position}: expected '{self.expected}', found '{self.found}'"
        if self.kind is IssueKind.ABSENT_LETTER:
            return f"position {self.position}: letter '{self.letter}' must be absent"
        if self.kind is IssueKind.RULED_OUT:
            return f"position {self.position}: letter '{self.letter}' ruled out at this position"
        raise ValueError(f"Unknown issue kind: {self.kind}")

    def __str__(self) -> str:
        return self.message


@dataclass
class CheckReport:
    """Outcome of a single check; `passed` iff no issues were found."""
    issues: List[Issue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues

    def kinds(self) -> List[IssueKind]:
        return [i.kind for i in self.issues]

    def as_dict(self) -> Dict:
        """Dataclass -> plain dict (enum values flattened to strings)."""
        d = asdict(self)
        for item in d["issues"]:
            item["kind"] = item["kind"].value
        d["passed"] = self.passed
        return d


def pretty_summary(report: CheckReport) -> str:
    """
    Console rendering of a report.

    Example:
        Errors:
          position 3: expected 'a', found 'd'
          position 0: letter 's' must be absent
    """
    if report.passed:
        return "No issues!"
    lines = ["Errors:"]
    lines += [f"  {issue.message}" for issue in report.issues]
    return "\n".join(lines)
