import pytest

from docspell.checkertypes import (
    CheckerType,
    UnknownCheckerTypeError,
    parse_checker_types,
)


def test_multiple_checkers_in_given_order():
    assert parse_checker_types("nlprules,hunspell") == [
        CheckerType.NLP_RULES,
        CheckerType.HUNSPELL,
    ]


def test_single_checker_mixed_case():
    assert parse_checker_types("NlpRules") == [CheckerType.NLP_RULES]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hunspell", CheckerType.HUNSPELL),
        ("HUNSPELL", CheckerType.HUNSPELL),
        ("nlprules", CheckerType.NLP_RULES),
        ("Reflow", CheckerType.REFLOW),
    ],
)
def test_from_str_is_case_insensitive(text, expected):
    assert CheckerType.from_str(text) is expected


def test_str_round_trip():
    for member in CheckerType:
        assert CheckerType.from_str(str(member)) is member


def test_unknown_variant_reports_lowercased_name():
    with pytest.raises(UnknownCheckerTypeError) as info:
        CheckerType.from_str("LanguageTool")
    assert info.value.name == "languagetool"
    assert str(info.value) == "Unknown checker type variant: languagetool"


def test_unknown_segment_fails_whole_list():
    with pytest.raises(UnknownCheckerTypeError):
        parse_checker_types("hunspell,bogus")


def test_trailing_comma_is_an_error():
    with pytest.raises(UnknownCheckerTypeError) as info:
        parse_checker_types("hunspell,")
    assert info.value.name == ""


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        CheckerType.from_str("nope")