import re

import pytest

from algoset.text import (
    compress,
    is_palindrome,
    max_frequency_difference,
    max_manhattan_distance,
    remove_adjacent_duplicates,
    remove_occurrences,
)


def _expand(encoded):
    return "".join(ch * int(count or 1) for ch, count in re.findall(r"(\D)(\d*)", encoded))


def test_remove_adjacent_duplicates_example():
    assert remove_adjacent_duplicates("abbaca") == "ca"


@pytest.mark.parametrize("s", ["", "a", "aa", "abba", "azxxzy", "abcddcbaq", "aaabbb"])
def test_remove_adjacent_duplicates_leaves_no_pairs(s):
    result = remove_adjacent_duplicates(s)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert remove_adjacent_duplicates(result) == result


def test_remove_adjacent_duplicates_fully_cancelling():
    assert remove_adjacent_duplicates("abccba") == ""


@pytest.mark.parametrize(
    "s, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("0P", False),
    ],
)
def test_is_palindrome(s, expected):
    assert is_palindrome(s) is expected


@pytest.mark.parametrize("s", ["abc", "Xy1z", "hello world"])
def test_is_palindrome_mirrored_strings(s):
    assert is_palindrome(s + s[::-1])


def test_remove_occurrences_example():
    assert remove_occurrences("daabcbaabcbc", "abc") == "dab"


@pytest.mark.parametrize(
    "s, part", [("axxxxyyyyb", "xy"), ("", "ab"), ("abab", "ab"), ("hello", "z")]
)
def test_remove_occurrences_leaves_no_part(s, part):
    result = remove_occurrences(s, part)
    assert part not in result
    assert len(result) <= len(s)


def test_remove_occurrences_without_match_is_identity():
    assert remove_occurrences("hello", "z") == "hello"


def test_remove_occurrences_empty_part_raises():
    with pytest.raises(ValueError):
        remove_occurrences("abc", "")


def test_max_frequency_difference_example():
    assert max_frequency_difference("aaaaabbc") == 3


def test_max_frequency_difference_rejects_other_characters():
    with pytest.raises(ValueError):
        max_frequency_difference("aBc")


def test_max_manhattan_distance_example():
    assert max_manhattan_distance("NWSE", 1) == 3


@pytest.mark.parametrize("s", ["NSWWEW", "NNSS", "EWEWEW", "N", "SSWWN"])
def test_max_manhattan_distance_unlimited_changes_reaches_length(s):
    assert max_manhattan_distance(s, len(s)) == len(s)


@pytest.mark.parametrize("s", ["NSWWEW", "NNSS", "EWEWEW", "SSWWN"])
def test_max_manhattan_distance_bounded_and_monotone(s):
    values = [max_manhattan_distance(s, k) for k in range(len(s) + 1)]
    assert all(v <= len(s) for v in values)
    assert values == sorted(values)


def test_max_manhattan_distance_straight_line():
    assert max_manhattan_distance("NNNN", 0) == len("NNNN")


def test_compress_example():
    assert compress("aabbccc") == "a2b2c3"


def test_compress_accepts_list():
    assert compress(["a"]) == "a"


@pytest.mark.parametrize("s", ["", "a", "abc", "aaaaaaaaaaaab", "aabccccccccccccccdd"])
def test_compress_round_trip(s):
    encoded = compress(s)
    assert _expand(encoded) == s
    assert len(encoded) <= len(s)