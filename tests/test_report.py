import pytest
from packages.tracker import CheckReport, Issue, IssueKind, pretty_summary


@pytest.mark.parametrize("issue,expected", [
    (Issue(IssueKind.NO_INFORMATION), "No information yet..."),
    (Issue(IssueKind.LENGTH_MISMATCH, expected=5, found=3),
     "Number of letters is not right! (should be 5, got 3)"),
    (Issue(IssueKind.FIXED_LETTER, position=3, expected="a", found="d"),
     "position 3: expected 'a', found 'd'"),
    (Issue(IssueKind.ABSENT_LETTER, position=0, letter="s"),
     "position 0: letter 's' must be absent"),
    (Issue(IssueKind.RULED_OUT, position=1, letter="a"),
     "position 1: letter 'a' ruled out at this position"),
])
def test_issue_messages(issue, expected):
    assert issue.message == expected
    assert str(issue) == expected


def test_pretty_summary_lists_issues_in_order():
    rep = CheckReport([
        Issue(IssueKind.FIXED_LETTER, position=3, expected="a", found="d"),
        Issue(IssueKind.ABSENT_LETTER, position=0, letter="s"),
    ])
    assert pretty_summary(rep) == (
        "Errors:\n"
        "  position 3: expected 'a', found 'd'\n"
        "  position 0: letter 's' must be absent"
    )


def test_as_dict_is_plain():
    rep = CheckReport([Issue(IssueKind.RULED_OUT, position=1, letter="a")])
    assert rep.as_dict() == {
        "issues": [{
            "kind": "ruled_out",
            "position": 1,
            "letter": "a",
            "expected": None,
            "found": None,
        }],
        "passed": False,
    }
    assert CheckReport().as_dict() == {"issues": [], "passed": True}
