"""Dictionary file sanity checks and emoji or vulgar fraction detection."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from pathlib import Path

import regex

# ``-`` is a literal member of the first class, so any word with a dash matches.
_VULGAR_FRACTION = regex.compile(
    r"[\u00BC-\u00BE\u2150-\u215E\-\u2189]", regex.IGNORECASE
)
_ONLY_EMOJI = regex.compile(r"^[\p{Emoji}]+$", regex.IGNORECASE)

_UNSIGNED = regex.compile(r"\+?[0-9]+")
_SIGNED = regex.compile(r"[+-]?[0-9]+")

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

# Only the first few lines are inspected; the first two matter most.
_LINES_TO_INSPECT = 10


class DictionaryFormatError(ValueError):
    """Raised when a dictionary does not look like a hunspell ``.dic`` file."""


def consists_of_vulgar_fractions_or_emojis(word: str) -> bool:
    """True if ``word`` contains a vulgar fraction or is made of emojis only."""
    return bool(_VULGAR_FRACTION.search(word) or _ONLY_EMOJI.search(word))


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def _parse_signed(text: str) -> int | None:
    if not _SIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else None


def is_valid_hunspell_dic(lines: Iterable[str] | str) -> int | None:
    """Check lines for the hunspell dictionary format.

    The first line must be the word count, and none of the following lines
    (only a handful are inspected) may be a number. Returns the word count
    from the first line, or ``None`` for empty input.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    numbered = enumerate(_strip_line_ending(line) for line in lines)

    first = next(numbered, None)
    if first is None:
        return None
    _, first_line = first
    count = _parse_unsigned(first_line)
    if count is None:
        raise DictionaryFormatError(
            f"First line of extra dictionary must a number, but is: >{first_line}<"
        )

    for lineno, line in itertools.islice(numbered, _LINES_TO_INSPECT):
        number = _parse_signed(line)
        if number is not None:
            raise DictionaryFormatError(
                f"Line {lineno} of extra dictionary must not be a number, "
                f"but is: >{number}<"
            )
    return count


def is_valid_hunspell_dic_path(path: str | Path) -> int | None:
    """Check the file at ``path`` for the hunspell dictionary format."""
    with Path(path).open(encoding="utf-8", newline="") as reader:
        try:
            return is_valid_hunspell_dic(reader)
        except UnicodeDecodeError as exc:
            raise DictionaryFormatError(
                f"Dictionary {path} is not valid UTF-8: {exc}"
            ) from exc