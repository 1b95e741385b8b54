import pytest

from dsaworkbench.edits import one_away


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("pale", "ple", True),
        ("pales", "pale", True),
        ("pale", "bale", True),
        ("pale", "bake", False),
    ],
)
def test_source_cases(first, second, expected):
    assert one_away(first, second) is expected


@pytest.mark.parametrize(
    "first, second",
    [("pale", "ple"), ("pales", "pale"), ("pale", "bale"), ("pale", "bake"), ("", "a")],
)
def test_symmetric(first, second):
    assert one_away(first, second) == one_away(second, first)


@pytest.mark.parametrize("text", ["", "a", "pale", "abcdef"])
def test_identical_strings(text):
    assert one_away(text, text) is True


def test_length_gap_of_two_is_too_far():
    assert one_away("pale", "pa") is False
    assert one_away("", "ab") is False


def test_empty_and_single_character():
    assert one_away("", "x") is True