"""Exception hierarchy for the constraint tracker."""


class TrackerError(Exception):
    """Base exception for tracker failures."""


class LengthMismatchError(TrackerError, ValueError):
    """Raised when a guess or feedback string does not match the word length."""

    def __init__(self, expected: int, found: int, what: str = "guess"):
        self.expected = expected
        self.found = found
        self.what = what
        super().__init__(f"{what} has {found} letter(s); expected {expected}")
