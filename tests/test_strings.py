import pytest

from cubutils.strings import (
    Bounded,
    strchr,
    strlcat,
    strlcpy,
    strncmp,
    strncpy,
    strndup,
    strnrcmp,
    strnstr,
    strrchr,
)


def test_strchr_finds_first_occurrence():
    s = "parallel"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_accepts_integer_code():
    s = "parallel"
    assert strchr(s, ord("r")) == strchr(s, "r")


def test_strchr_missing_gives_none():
    assert strchr("abc", "z") is None


def test_strchr_nul_gives_end():
    assert strchr("abc", "\0") == len("abc")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    s = "parallel"
    index = strrchr(s, "a")
    assert s[index] == "a"
    assert "a" not in s[index + 1 :]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", 0) == len("abc")


def test_strncmp_equal_prefix():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string_counts_as_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_identical_beyond_length():
    assert strncmp("same", "same", 100) == 0


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


def test_strnrcmp_matching_suffix():
    assert strnrcmp("map.cub", ".cub", len(".cub")) == 0


def test_strnrcmp_mismatched_suffix():
    assert strnrcmp("map.cub", ".cur", len(".cur")) == ord("b") - ord("r")


def test_strnrcmp_longer_second_string():
    assert strnrcmp("ab", "xab", 3) == 1


def test_strnrcmp_zero_length():
    assert strnrcmp("abc", "c", 0) == 1


def test_strnrcmp_limits_to_n():
    assert strnrcmp("xyz.cub", "a.cub", 4) == 0


def test_strnstr_within_length():
    big = "lorem ipsum dolor"
    index = strnstr(big, "ipsum", len(big))
    assert big[index : index + len("ipsum")] == "ipsum"


def test_strnstr_match_must_fit_in_length():
    big = "lorem ipsum"
    assert strnstr(big, "ipsum", len(big) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None


def test_strlcpy_truncates():
    result = strlcpy("hello", 3)
    assert result == Bounded("he", len("hello"))


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == Bounded("", len("hello"))


def test_strlcpy_large_size_keeps_everything():
    assert strlcpy("hello", 100).value == "hello"


def test_strlcat_appends_within_size():
    result = strlcat("ab", "cd", 10)
    assert result.value == "abcd"
    assert result.wanted == len("abcd")


def test_strlcat_truncates():
    result = strlcat("ab", "cdef", 4)
    assert result.value == "abc"
    assert result.wanted == len("abcdef")


def test_strlcat_size_too_small():
    result = strlcat("abcd", "ef", 2)
    assert result.value == "abcd"
    assert result.wanted == 2 + len("ef")


def test_strncpy_pads_with_nul():
    result = strncpy("ab", 5)
    assert len(result) == 5
    assert result.startswith("ab")
    assert set(result[2:]) == {"\0"}


def test_strncpy_truncates():
    assert strncpy("abcdef", 3) == "abc"


def test_strndup_limits_length():
    assert strndup("abcdef", 2) == "ab"
    assert strndup("ab", 10) == "ab"


def test_strndup_negative():
    with pytest.raises(ValueError):
        strndup("ab", -1)