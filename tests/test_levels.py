import pytest

from wanikani_sentences.levels import format_levels, parse_levels


def test_mixed_spec():
    assert parse_levels("4,5-7,9-12,15") == [4, 5, 6, 7, 9, 10, 11, 12, 15]


@pytest.mark.parametrize("text", ["", "abc", " , ,", "x-y"])
def test_nothing_usable(text):
    assert parse_levels(text) == []


def test_bad_token_only_drops_itself():
    assert parse_levels("3,abc,5") == [3, 5]
    assert parse_levels("1-x, 8") == [8]


def test_dedup_and_sort():
    assert parse_levels("10, 3, 2-4, 3") == [2, 3, 4, 10]


def test_whitespace_around_tokens():
    assert parse_levels(" 1 ,  2 - 3 ") == [1, 2, 3]


def test_reversed_range_is_empty():
    assert parse_levels("9-4") == []
    assert parse_levels("9-4,2") == [2]


def test_non_positive_levels_dropped():
    assert parse_levels("0,1") == [1]
    assert parse_levels("-3") == []


def test_idempotent_on_own_output():
    for text in ["4,5-7,9-12,15", "3,abc,5", "60-58,1", ""]:
        once = parse_levels(text)
        assert parse_levels(",".join(str(n) for n in once)) == once


def test_format_levels_collapses_runs():
    assert format_levels([4, 5, 6, 7, 9, 11, 12]) == "4-7,9,11-12"
    assert format_levels([]) == ""
    levels = parse_levels("1-3,8,20-22")
    assert parse_levels(format_levels(levels)) == levels


def test_range_splits_at_first_hyphen():
    assert parse_levels("1-2-3,7") == [7]
    assert parse_levels("-3,4") == [4]
