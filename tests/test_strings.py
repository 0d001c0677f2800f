import pytest

from pushswap.textutils.chars import to_upper
from pushswap.textutils.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("hello", "h"), ("hello", "o"), ("aaa", "a")])
def test_strchr_finds_first(s, c):
    idx = strchr(s, c)
    assert s[idx] == c
    assert c not in s[:idx]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_accepts_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_strrchr_finds_last(s, c):
    idx = strrchr(s, c)
    assert s[idx] == c
    assert c not in s[idx + 1 :]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strncmp_equal_and_zero_n():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_stops_at_n():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) < 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


@pytest.mark.parametrize("a,b", [("apple", "apricot"), ("z", "a"), ("same", "same")])
def test_strncmp_antisymmetric(a, b):
    assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncmp_difference_is_code_difference():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_respects_length():
    haystack = "foo bar"
    assert strnstr(haystack, "bar", len(haystack) - 1) is None
    idx = strnstr(haystack, "bar", len(haystack))
    assert haystack[idx : idx + 3] == "bar"


def test_strnstr_not_found():
    assert strnstr("foo", "baz", 3) is None


def test_strlcpy_truncates():
    src = "hello"
    text, total = strlcpy(src, 3)
    assert text == src[:2]
    assert total == len(src)


def test_strlcpy_fits_and_zero():
    src = "hi"
    assert strlcpy(src, 10) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_fits():
    dst, src = "Hello ", "World!"
    text, total = strlcat(dst, src, 20)
    assert text == dst + src
    assert total == len(dst) + len(src)


def test_strlcat_truncates():
    dst, src = "abc", "defgh"
    size = 6
    text, total = strlcat(dst, src, size)
    assert len(text) == size - 1
    assert text.startswith(dst)
    assert total == len(dst) + len(src)


def test_strlcat_full_buffer_unchanged():
    dst, src = "abcdef", "xyz"
    text, total = strlcat(dst, src, 4)
    assert text == dst
    assert total == 4 + len(src)


def test_substr_cases():
    s = "hello world"
    assert substr(s, 6, 5) == s[6:]
    assert substr(s, 0, 100) == s
    assert substr(s, len(s), 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_round_trip():
    a, b = "Hello, ", "World!"
    joined = strjoin(a, b)
    assert joined[: len(a)] == a
    assert joined[len(a) :] == b


def test_strtrim():
    assert strtrim("  xx  ", " ") == "xx"
    assert strtrim("*-*", "*-") == ""
    assert strtrim("abc", "") == "abc"


def test_split_drops_empty_pieces():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_join_invariant():
    text = "1 2  3 -4"
    parts = split(text, " ")
    assert " ".join(parts) == " ".join(text.split())
    assert all(parts)


def test_strmapi_upper():
    s = "Hello, world!"
    assert strmapi(s, lambda i, ch: to_upper(ch)) == s.upper()


def test_strmapi_uses_index():
    s = "abcd"
    assert strmapi(s, lambda i, ch: ch if i % 2 == 0 else "_") == "a_c_"


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: to_upper(ch) if i == 1 else None)
    assert chars == ["a", "B", "c"]


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, ch: None)