"""Actions, run outcomes and process exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Action(Enum):
    """Mode of operation."""

    CHECK = "check"
    FIX = "fix"
    REFLOW = "reflow"
    LIST_FILES = "list-files"


@dataclass(frozen=True)
class Finish:
    """How a run concluded."""

    class Kind(Enum):
        SUCCESS = "success"
        ABORT = "abort"
        MISTAKES = "mistakes"

    kind: Finish.Kind
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Mistake count cannot be negative: {self.count}")

    @classmethod
    def success(cls) -> Finish:
        return cls(cls.Kind.SUCCESS)

    @classmethod
    def abort(cls) -> Finish:
        return cls(cls.Kind.ABORT)

    @classmethod
    def mistakes(cls, count: int) -> Finish:
        return cls(cls.Kind.MISTAKES, count)

    def found_any(self) -> bool:
        """True if the run found at least one mistake."""
        return self.kind is Finish.Kind.MISTAKES and self.count > 0


@dataclass(frozen=True)
class ExitCode:
    """Process exit code: success, signal termination, or a user chosen code."""

    class Kind(Enum):
        SUCCESS = "success"
        SIGNAL = "signal"
        CUSTOM = "custom"

    kind: ExitCode.Kind
    code: int = 0

    SUCCESS: ClassVar[ExitCode]
    SIGNAL: ClassVar[ExitCode]

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 255:
            raise ValueError(f"Exit code must be within 0..=255, got {self.code}")

    @classmethod
    def custom(cls, code: int) -> ExitCode:
        return cls(cls.Kind.CUSTOM, code)

    def as_int(self) -> int:
        if self.kind is ExitCode.Kind.SUCCESS:
            return 0
        if self.kind is ExitCode.Kind.SIGNAL:
            return 130
        return self.code


ExitCode.SUCCESS = ExitCode(ExitCode.Kind.SUCCESS)
ExitCode.SIGNAL = ExitCode(ExitCode.Kind.SIGNAL)


def exit_code_for(finish: Finish, code_override: int) -> ExitCode:
    """Map a run outcome to the exit code, using ``code_override`` for mistakes."""
    if finish.kind is Finish.Kind.ABORT:
        return ExitCode.SIGNAL
    if finish.found_any():
        return ExitCode.custom(code_override)
    return ExitCode.SUCCESS