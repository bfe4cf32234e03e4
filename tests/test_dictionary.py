import pytest

from docspell.dictionary import (
    DictionaryFormatError,
    consists_of_vulgar_fractions_or_emojis,
    is_valid_hunspell_dic,
    is_valid_hunspell_dic_path,
)

GOOD = "2\nwhitespazes\ncatsndogs\n"
BAD_1 = "foo\n12349\nbar\n"
BAD_2 = "2\n12349\nbar\n"
BAD_3 = "foo\nxxx\nbar\n"


def test_good_dictionary_returns_count():
    assert is_valid_hunspell_dic(GOOD.splitlines(keepends=True)) == 2


def test_good_dictionary_from_str():
    assert is_valid_hunspell_dic(GOOD) == 2


@pytest.mark.parametrize("text", [BAD_1, BAD_2, BAD_3])
def test_bad_dictionaries(text):
    with pytest.raises(DictionaryFormatError):
        is_valid_hunspell_dic(text.splitlines(keepends=True))


def test_bad_first_line_message():
    with pytest.raises(DictionaryFormatError, match="First line"):
        is_valid_hunspell_dic(BAD_3)


def test_number_after_first_line_message():
    with pytest.raises(DictionaryFormatError, match=r"Line 1 .*>12349<"):
        is_valid_hunspell_dic(BAD_2)


def test_empty_dictionary():
    assert is_valid_hunspell_dic([]) is None


def test_only_first_lines_inspected():
    lines = ["3"] + ["word"] * 10 + ["42"]
    assert is_valid_hunspell_dic(lines) == 3


def test_number_within_inspected_window():
    lines = ["3"] + ["word"] * 9 + ["42"]
    with pytest.raises(DictionaryFormatError, match="Line 10"):
        is_valid_hunspell_dic(lines)


def test_crlf_line_endings(tmp_path):
    path = tmp_path / "lingo.dic"
    path.write_bytes(b"2\r\nalpha\r\nbeta\r\n")
    assert is_valid_hunspell_dic_path(path) == 2


def test_path_good(tmp_path):
    path = tmp_path / "good.dic"
    path.write_text(GOOD, encoding="utf-8")
    assert is_valid_hunspell_dic_path(path) == 2


def test_path_bad(tmp_path):
    path = tmp_path / "bad.dic"
    path.write_text(BAD_2, encoding="utf-8")
    with pytest.raises(DictionaryFormatError):
        is_valid_hunspell_dic_path(path)


def test_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        is_valid_hunspell_dic_path(tmp_path / "missing.dic")


def test_path_invalid_utf8(tmp_path):
    path = tmp_path / "binary.dic"
    path.write_bytes(b"2\n\xff\xfe\n")
    with pytest.raises(DictionaryFormatError):
        is_valid_hunspell_dic_path(path)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", False),
        ("🐍🤗🦀", True),
        ("🦀acean", False),
        ("⅔⅔⅔↉↉↉", True),
        ("🐍🤗⅒🦀⅔¾", True),
        ("no emoji string", False),
        ("123", True),
        ("a", False),
        ("¼🤗🦀", True),
        ("🤗🦀½", True),
        ("🤗🦀¾", True),
        ("🤗🦀⅐", True),
        ("🤗🦀⅑", True),
        ("🤗🦀⅒", True),
        ("🤗🦀⅓", True),
        ("🤗🦀⅔", True),
        ("🤗🦀⅕", True),
        ("🤗🦀⅖", True),
        ("🤗🦀⅗", True),
        ("🐍⅘", True),
        ("🐍⅙", True),
        ("🐍⅚", True),
        ("🦀🐍⅛", True),
        ("🦀🐍⅜", True),
        ("🦀🐍⅝", True),
        ("🦀🐍⅞", True),
        ("🦀🐍↉", True),
    ],
)
def test_vulgar_fraction_or_emoji(word, expected):
    assert consists_of_vulgar_fractions_or_emojis(word) is expected