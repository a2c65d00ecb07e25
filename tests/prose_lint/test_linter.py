"""Tests for the linter orchestrating all checks."""

import pytest

from prose_lint.linter import ProseLinter


def test_clean_text_has_no_suggestions():
    """Test that plain prose produces nothing."""
    assert ProseLinter().lint("The cat sat on the mat.") == []


def test_empty_text_has_no_suggestions():
    assert ProseLinter().lint("") == []


def test_eprime_is_off_by_default():
    """Test that E-Prime only runs when enabled."""
    assert ProseLinter().lint("It is here.") == []

    suggestions = ProseLinter(enabled=["eprime"]).lint("It is here.")

    assert [(s.offset, s.check) for s in suggestions] == [(3, "eprime")]


def test_disable_check():
    """Test that a disabled check reports nothing."""
    text = "This is very good."

    assert [s.check for s in ProseLinter().lint(text)] == ["weasel"]
    assert ProseLinter(disabled=["weasel"]).lint(text) == []


def test_results_sorted_by_offset():
    """Test that suggestions from different checks come back in text order."""
    suggestions = ProseLinter().lint("So it was thrown very far.")

    assert [(s.offset, s.check) for s in suggestions] == [
        (0, "so"),
        (6, "passive"),
        (17, "weasel"),
    ]


def test_duplicate_spans_are_merged():
    """Test that two checks flagging the same text produce one suggestion."""
    suggestions = ProseLinter().lint("First and foremost, read.")

    assert len(suggestions) == 1
    assert suggestions[0].offset == 0
    assert suggestions[0].adjustment == 18
    assert suggestions[0].message == (
        '"First and foremost" is wordy or unneeded and is a cliche'
    )
    assert suggestions[0].check == "tooWordy,cliches"


def test_whitelist_is_case_insensitive():
    """Test that whitelisted text is never reported."""
    assert ProseLinter(whitelist=["Very"]).lint("This is very good.") == []


def test_whitelist_only_matches_whole_flagged_text():
    """Test that the whitelist does not hide longer flagged spans."""
    suggestions = ProseLinter(whitelist=["the"]).lint("Read the the book")

    assert [s.check for s in suggestions] == ["illusion"]


def test_unknown_check_raises():
    with pytest.raises(ValueError, match="bogus"):
        ProseLinter(disabled=["bogus"])


def test_linting_is_repeatable():
    """Test that linting the same text twice gives equal results."""
    linter = ProseLinter()
    text = "There are many ways. So it was done in order to win."

    assert linter.lint(text) == linter.lint(text)
