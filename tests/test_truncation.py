import pytest

from call_intelligence.domain import truncate_text


def test_text_within_budget_is_unchanged():
    assert truncate_text("Short call.", 100) == "Short call."


def test_text_exactly_at_budget_is_unchanged():
    assert truncate_text("abcde", 5) == "abcde"


def test_cuts_back_to_last_period_in_window():
    assert truncate_text("Hello. World.", 8) == "Hello."


def test_hard_cut_without_period():
    assert truncate_text("HelloWorld", 5) == "Hello"


def test_period_after_window_is_ignored():
    assert truncate_text("abcdefgh. ij", 5) == "abcde"


def test_uses_last_of_several_periods():
    assert truncate_text("A. B. C. D. E.", 7) == "A. B."


def test_period_near_start_can_shorten_a_lot():
    assert truncate_text(".abcdefghij", 8) == "."


@pytest.mark.parametrize(
    "text, budget",
    [
        ("one. two. three. four.", 10),
        ("no periods at all here", 7),
        ("trailing dot.", 4),
    ],
)
def test_result_is_prefix_within_budget(text, budget):
    result = truncate_text(text, budget)
    assert text.startswith(result)
    assert len(result) <= budget


def test_empty_text():
    assert truncate_text("", 10) == ""


@pytest.mark.parametrize("budget", [0, -1])
def test_rejects_non_positive_budget(budget):
    with pytest.raises(ValueError):
        truncate_text("anything", budget)
