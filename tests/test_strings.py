import io

import pytest

from agptools.strings import (
    INT_MAX,
    clcr,
    cls,
    fgetstr,
    has_ending,
    list2str,
    num2str,
    numlist2str,
    padding,
    parse_range,
    shorten,
    singlespaces,
    split,
    str2num,
    str2numlist,
    stricmp,
    stristr,
    strprintf,
    strrpl,
)


def test_strrpl_replaces_all():
    result = strrpl("a-b-c", "-", "+")
    assert "-" not in result
    assert result.count("+") == 2


def test_strrpl_empty_old_raises():
    with pytest.raises(ValueError):
        strrpl("abc", "", "x")


def test_strprintf():
    assert strprintf("Trigger[%d]", 7) == "Trigger[7]"
    assert strprintf("FPS = %.0f", 59.6) == "FPS = 60"


def test_stristr_finds_case_insensitive():
    idx = stristr("Hello World", "WORLD")
    assert idx is not None
    assert "Hello World"[idx:idx + 5].lower() == "world"


def test_stristr_empty_and_missing():
    assert stristr("abc", "") == 0
    assert stristr("abc", "x") is None
    assert stristr("-INF", "-inf") == 0


def test_stricmp():
    assert stricmp("ABC", "abc") == 0
    assert stricmp("a", "b") < 0
    assert stricmp("b", "A") > 0
    assert stricmp("ab", "abc") < 0
    assert stricmp(None, None) == 0


def test_num2str_str2num_round_trip():
    assert str2num(num2str(42), int) == 42
    assert str2num(num2str(2.5)) == 2.5


def test_str2num_prefix_and_failure():
    assert str2num("12abc", int) == 12
    assert str2num("abc", int) == 0
    assert str2num("  -3.5e1") == -35.0


def test_list2str():
    assert list2str(["a", "b"]) == '{"a", "b"}'


def test_fgetstr_strips_terminators():
    stream = io.StringIO("line one\r\nline two\n")
    assert fgetstr(stream, 100) == "line one"
    assert fgetstr(stream, 100) == "line two"
    assert fgetstr(stream, 100) is None


def test_fgetstr_limits_length():
    stream = io.StringIO("abcdef\n")
    assert len(fgetstr(stream, 4)) == 3


def test_singlespaces():
    result = singlespaces("  a   b  ")
    assert "  " not in result
    assert not result.startswith(" ") and not result.endswith(" ")
    kept = singlespaces("  a  ", no_begin_space=False, no_end_space=False)
    assert kept.startswith(" ") and kept.endswith(" ")


def test_clcr_and_cls():
    assert not set("\r\n") & set(clcr("a\r\nb\n"))
    assert not set("\t \r\n") & set(cls(" a\tb \r\nc "))
    assert cls(" a\tb ") == "ab"


def test_split_keeps_empty_tokens():
    tokens = split("a,,b", ",")
    assert tokens == ["a", "", "b"]
    assert ",".join(tokens) == "a,,b"
    with pytest.raises(ValueError):
        split("abc", "")


def test_has_ending():
    assert has_ending("image.png", ".png")
    assert not has_ending("png", "image.png")


def test_shorten():
    short = shorten("abcdefghij", 6)
    assert len(short) == 6
    assert short.endswith("...")
    assert shorten("abc", 6) == "abc"


def test_padding():
    padded = padding("ab", 5, ".")
    assert len(padded) == 5
    assert padded.startswith("ab")
    assert padding("abcdef", 3) == "abcdef"


def test_numlist_round_trip():
    values = [1, 2, 3]
    text = numlist2str(values)
    assert text == "1,2,3"
    assert str2numlist(text, int) == values
    assert str2numlist("1;x", int, ";") == [1, 0]


def test_parse_range():
    a, b, c, d = parse_range("[1,5)\\[2,inf)")
    assert (a, b, c) == (1, 5, 2)
    assert d == INT_MAX


def test_parse_range_invalid():
    with pytest.raises(ValueError):
        parse_range("[1,5)")
    with pytest.raises(ValueError):
        parse_range("[inf,5)\\[2,3)")