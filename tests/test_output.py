import io

import pytest

from fdlines.output import print_words, put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    put_char("q")
    assert capsys.readouterr().out == "q"


def test_put_str_writes_whole_string():
    out = io.StringIO()
    put_str("hello world", out)
    assert out.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_str_defaults_to_stdout(capsys):
    put_str("abc")
    assert capsys.readouterr().out == "abc"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line" + "\n"


def test_put_endl_none_writes_only_newline():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648, 10**20])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    text = out.getvalue()
    assert int(text) == n
    assert text.startswith("-") == (n < 0)
    assert "\n" not in text


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_put_nbr_defaults_to_stdout(capsys):
    put_nbr(-5)
    assert int(capsys.readouterr().out) == -5


def test_print_words_one_per_line():
    words = ["alpha", "beta", "gamma"]
    out = io.StringIO()
    print_words(words, out)
    assert out.getvalue().splitlines() == words
    assert out.getvalue().endswith("\n")


def test_print_words_empty_writes_nothing():
    out = io.StringIO()
    print_words([], out)
    assert out.getvalue() == ""