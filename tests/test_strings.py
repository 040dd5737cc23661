import pytest

from libft.strings import (
    arrlen,
    strchr,
    strchr_index,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strndup,
    strnstr,
    strrchr,
    substr,
)


def test_strlen_counts_characters_and_none():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0
    assert strlen(None) == 0


def test_arrlen_counts_items_and_none():
    assert arrlen(["a", "b", "c"]) == 3
    assert arrlen([]) == 0
    assert arrlen(None) == 0


def test_strdup_copies_and_keeps_none():
    assert strdup("hello") == "hello"
    assert strdup("") == ""
    assert strdup(None) is None


def test_strndup_takes_prefix():
    result = strndup("hello", 3)
    assert "hello".startswith(result)
    assert len(result) == 3
    assert strndup("hi", 10) == "hi"
    assert strndup(None, 3) is None


def test_strndup_rejects_negative():
    with pytest.raises(ValueError):
        strndup("hello", -1)


def test_strlcpy_truncates_and_reports_source_length():
    copied, total = strlcpy("hello", 3)
    assert total == len("hello")
    assert len(copied) == 3 - 1
    assert "hello".startswith(copied)


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("hello", 100) == ("hello", 5)
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_appends_within_size():
    result, total = strlcat("ab", "cdef", 10)
    assert result == "ab" + "cdef"
    assert total == len("ab") + len("cdef")


def test_strlcat_truncates_append():
    result, total = strlcat("ab", "cdef", 4)
    assert result.startswith("ab")
    assert len(result) == 4 - 1
    assert total == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dest():
    result, total = strlcat("abc", "de", 2)
    assert result == "abc"
    assert total == len("de") + 2


def test_strlcat_none_dest():
    assert strlcat(None, "abc", 0) == (None, 3)
    with pytest.raises(TypeError):
        strlcat(None, "abc", 5)


def test_strchr_finds_first():
    assert strchr("hello", "l") == "llo"
    assert strchr("hello", ord("h")) == "hello"
    assert strchr("hello", "z") is None


def test_strchr_nul_gives_end():
    assert strchr("hello", "\0") == ""
    assert strchr("hello", 0) == ""


def test_strchr_bad_char():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strchr_index():
    assert strchr_index("hello", "e") == 1
    assert strchr_index("hello", "z") == -1
    assert strchr_index("hello", "\0") == -1


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == "lo"
    result = strrchr("abcabc", "a")
    assert "abcabc".endswith(result)
    assert result.startswith("a")
    assert result.count("a") == 1


def test_strrchr_missing_returns_whole_string():
    assert strrchr("hello", "z") == "hello"
    assert strrchr("hello", "\0") == ""


def test_strnstr_within_length():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack)) == "ipsum"
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None
    assert strnstr(haystack, "dolor", len(haystack)) is None


def test_strnstr_empty_needle_and_negative():
    assert strnstr("abc", "", 0) == "abc"
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_sign_and_limits():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    for a, b in [("apple", "apricot"), ("zeta", "alpha"), ("", "a")]:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_substr_basic_and_bounds():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "hello"[2:]
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 10, 3) == ""
    assert substr(None, 0, 3) is None


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_combinations():
    joined = strjoin("foo", "bar")
    assert joined.startswith("foo")
    assert joined.endswith("bar")
    assert len(joined) == len("foo") + len("bar")
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None