import pytest

from codekata.strings import Matching, compare_version, decode_string, is_subsequence


@pytest.mark.parametrize(
    "encoded, expected",
    [
        ("", ""),
        ("3[a]2[bc]", "aaabcbc"),
        ("3[a2[c]]", "accaccacc"),
        ("2[abc]3[cd]ef", "abcabccdcdcdef"),
        ("abc3[cd]xyz", "abccdcdcdxyz"),
        (
            "3[z]2[2[y]pq4[2[jk]e1[f]]]ef",
            "zzzyypqjkjkefjkjkefjkjkefjkjkefyypqjkjkefjkjkefjkjkefjkjkefef",
        ),
    ],
)
def test_decode_string(encoded, expected):
    assert decode_string(encoded) == expected


def test_decode_string_multi_digit_count():
    assert decode_string("10[a]") == "a" * 10


@pytest.mark.parametrize(
    "v1, v2, expected",
    [
        ("1.01", "1.001", 0),
        ("1.0", "1.0.0", 0),
        ("0.1", "1.1", -1),
        ("1.0.1", "1", 1),
        ("7.5.2.4", "7.5.3", -1),
    ],
)
def test_compare_version(v1, v2, expected):
    assert compare_version(v1, v2) == expected


def test_compare_version_is_antisymmetric():
    assert compare_version("1", "1.0.1") == -1
    assert compare_version("7.5.3", "7.5.2.4") == 1


SUBSEQUENCE_CASES = [
    ("", "abc", True),
    ("abc", "ahbgdc", True),
    ("axc", "ahbgdc", False),
    ("axc", "", False),
    ("aaaaaa", "bbaaaa", False),
    (
        "twn",
        "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxtxxxxxxxxxxxxxxxxxxxxwxxxxxxxxxxxxxxxxxxxxxxxxxn",
        True,
    ),
]


@pytest.mark.parametrize("s, t, expected", SUBSEQUENCE_CASES)
def test_is_subsequence(s, t, expected):
    assert is_subsequence(s, t) is expected


@pytest.mark.parametrize("s, t, expected", SUBSEQUENCE_CASES)
def test_matching(s, t, expected):
    assert Matching(t).is_match(s) is expected


def test_matching_reused_for_many_queries():
    matching = Matching("ahbgdc")
    assert [matching.is_match(s) for s in ["abc", "hgc", "cb", "ahbgdc"]] == [
        True,
        True,
        False,
        True,
    ]


def test_matching_rejects_non_lowercase():
    with pytest.raises(ValueError):
        Matching("abc").is_match("A")