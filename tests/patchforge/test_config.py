import pytest

from patchforge.apply import LengthGuard
from patchforge.config import DEFAULT_OPTIONS, PatchOptions
from patchforge.errors import SuspiciousResultError


def test_defaults():
    assert DEFAULT_OPTIONS.min_score == 0.85
    assert DEFAULT_OPTIONS.hint_window == 5
    assert DEFAULT_OPTIONS.reindent is True
    assert DEFAULT_OPTIONS.guard is None


def test_with_returns_modified_copy():
    tuned = DEFAULT_OPTIONS.with_(min_score=0.7)
    assert tuned.min_score == 0.7
    assert DEFAULT_OPTIONS.min_score == 0.85


@pytest.mark.parametrize(
    "kwargs",
    [{"min_score": 0}, {"min_score": 1.2}, {"hint_window": -1}, {"snippet_length": 0}],
)
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        PatchOptions(**kwargs)


def test_length_guard_bounds():
    guard = LengthGuard(min_ratio=0.5, max_ratio=2.0)
    guard.check("abcd", "ab")
    guard.check("abcd", "abcdabcd")
    guard.check("", "anything at all")
    with pytest.raises(SuspiciousResultError, match="below"):
        guard.check("abcd", "a")
    with pytest.raises(SuspiciousResultError, match="above"):
        guard.check("abcd", "abcdabcda")


def test_length_guard_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        LengthGuard(min_ratio=2.0, max_ratio=1.0)
