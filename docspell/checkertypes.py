"""Checker selection as given on the command line."""

from __future__ import annotations

from enum import Enum


class UnknownCheckerTypeError(ValueError):
    """Raised for a checker name that is not known."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown checker type variant: {name}")
        self.name = name


class CheckerType(Enum):
    """The checkers that can be selected."""

    HUNSPELL = "hunspell"
    NLP_RULES = "nlprules"
    REFLOW = "reflow"

    @classmethod
    def from_str(cls, text: str) -> CheckerType:
        """Parse a checker name, ignoring case."""
        lowered = text.lower()
        try:
            return cls(lowered)
        except ValueError:
            raise UnknownCheckerTypeError(lowered) from None

    def __str__(self) -> str:
        return self.value


def parse_checker_types(text: str) -> list[CheckerType]:
    """Parse a comma separated list of checker names."""
    return [CheckerType.from_str(segment) for segment in text.split(",")]