from .letters import (
    AbsentLetter,
    CellState,
    FeedbackKind,
    LetterInfo,
    PresentLetter,
    format_feedback,
    parse_feedback,
)
from .errors import TrackerError, LengthMismatchError
from .report import CheckReport, Issue, IssueKind, pretty_summary
from .store import ConstraintStore
from .scoring import score

__all__ = [
    "AbsentLetter",
    "CellState",
    "CheckReport",
    "ConstraintStore",
    "FeedbackKind",
    "Issue",
    "IssueKind",
    "LengthMismatchError",
    "LetterInfo",
    "PresentLetter",
    "TrackerError",
    "format_feedback",
    "parse_feedback",
    "pretty_summary",
    "score",
]
