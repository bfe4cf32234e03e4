"""Command line arguments and their interpretation."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .checkertypes import CheckerType, parse_checker_types
from .outcome import Action

log = logging.getLogger(__name__)

PROGRAM_NAME = "docspell"

# A leading ``spellcheck`` word, as passed by a wrapping tool, is dropped.
_INVOCATION_WORD = "spellcheck"

TRACE = 5
OFF = logging.CRITICAL + 10
_LEVELS = (OFF, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG, TRACE)
_DEFAULT_LEVEL_INDEX = 1

MAX_JOBS = 128


class ArgumentError(Exception):
    """Raised when the command line cannot be parsed."""


class ShellError(ValueError):
    """Raised for a shell name that completions cannot be generated for."""


class Shell(Enum):
    """Shells that completion scripts exist for."""

    BASH = "bash"
    ELVISH = "elvish"
    FISH = "fish"
    POWERSHELL = "powershell"
    ZSH = "zsh"

    def __str__(self) -> str:
        return self.value


def load_shell_name(shell: str) -> Shell:
    """Parse a shell name, given either directly or as a path such as ``/bin/zsh``."""
    name = shell.split("/")[-1]
    try:
        return Shell(name)
    except ValueError:
        raise ShellError(f"Unknown shell: {name!r}") from None


def derive_job_count(jobs: int | None) -> int:
    """The number of worker threads: at least one, at most 128."""
    if jobs is None:
        count = os.cpu_count() or 1
        log.debug("Using the default thread count of %d", count)
        return count
    if jobs == 0:
        log.warning(
            "Cannot have less than one worker thread (%d). Retaining one worker thread.",
            jobs,
        )
        return 1
    if jobs > MAX_JOBS:
        log.warning("Setting threads beyond 128 (%d) is insane. Capping at 128", jobs)
        return MAX_JOBS
    log.info("Explicitly set threads to %d", jobs)
    return jobs


@dataclass
class Common:
    """Options shared by the checking sub-commands."""

    recursive: bool = False
    checkers: list[CheckerType] | None = None
    skip_readme: bool = False
    dev_comments: bool = False
    jobs: int | None = None
    code: int = 0
    paths: list[Path] = field(default_factory=list)


@dataclass(frozen=True)
class Command:
    """A sub-command with its options."""

    class Kind(Enum):
        CHECK = "check"
        FIX = "fix"
        REFLOW = "reflow"
        CONFIG = "config"
        LIST_FILES = "list-files"
        COMPLETIONS = "completions"

    kind: Command.Kind
    common: Common | None = None
    user: bool = False
    overwrite: bool = False
    stdout: bool = False
    filter: list[CheckerType] | None = None
    recursive: bool = False
    skip_readme: bool = False
    paths: list[Path] = field(default_factory=list)
    shell: Shell | None = None


_SUBCOMMANDS = {kind.value: kind for kind in Command.Kind}
_WITH_COMMON = frozenset({Command.Kind.CHECK, Command.Kind.FIX, Command.Kind.REFLOW})
_VALUE_SHORTS = frozenset("cjm")
_VALUE_LONGS = frozenset({"--cfg", "--checkers", "--jobs", "--code"})


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise ArgumentError(message)


def _u8(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise ValueError(f"{value} is not within 0..=255")
    return value


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"{value} is negative")
    return value


def _add_global(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--cfg", type=Path, default=None, help="Provide a configuration.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More output.")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Less output.")


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--recursive", action="store_true")
    parser.add_argument("--checkers", type=parse_checker_types, default=None)
    parser.add_argument("-s", "--skip-readme", action="store_true")
    parser.add_argument("-d", "--dev-comments", action="store_true")
    parser.add_argument("-j", "--jobs", type=_count, default=None)
    parser.add_argument("-m", "--code", type=_u8, default=0)
    parser.add_argument("paths", nargs="*", type=Path, default=[])


def _top_parser() -> _Parser:
    parser = _Parser(prog=PROGRAM_NAME, allow_abbrev=False)
    _add_global(parser)
    _add_common(parser)
    parser.add_argument("-f", "--fix", action="store_true", help="Alias for `fix` [deprecated].")
    return parser


def _sub_parser(kind: Command.Kind) -> _Parser:
    parser = _Parser(prog=f"{PROGRAM_NAME} {kind.value}", allow_abbrev=False)
    _add_global(parser)
    if kind in _WITH_COMMON:
        _add_common(parser)
    elif kind is Command.Kind.CONFIG:
        parser.add_argument("-u", "--user", action="store_true")
        parser.add_argument("-o", "--overwrite", action="store_true")
        parser.add_argument("-s", "--stdout", action="store_true")
        parser.add_argument(
            "--filter", "--checkers", dest="filter", type=parse_checker_types, default=None
        )
    elif kind is Command.Kind.LIST_FILES:
        parser.add_argument("-r", "--recursive", action="store_true")
        parser.add_argument("-s", "--skip-readme", action="store_true")
        parser.add_argument("paths", nargs="*", type=Path, default=[])
    else:
        parser.add_argument("--shell", type=load_shell_name, default=None)
    return parser


def _normalize_argv(argv: Sequence[str]) -> list[str]:
    """Strip the program name and an optional leading ``spellcheck`` word."""
    if not argv:
        return []
    arg0, *rest = argv
    if Path(arg0).name in ("", ".."):
        # no usable program name: the next argument takes its place
        return rest[1:]
    if rest and rest[0] == _INVOCATION_WORD:
        rest = rest[1:]
    return rest


def _find_subcommand(tokens: Sequence[str]) -> int | None:
    """Index of the sub-command, if the first positional argument names one."""
    skip_next = False
    for idx, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue
        if token == "--":
            return None
        if token.startswith("--"):
            skip_next = "=" not in token and token in _VALUE_LONGS
            continue
        if token.startswith("-") and len(token) > 1:
            for pos, char in enumerate(token[1:], start=1):
                if char in _VALUE_SHORTS:
                    skip_next = pos == len(token) - 1
                    break
            continue
        return idx if token in _SUBCOMMANDS else None
    return None


def _common_from(ns: argparse.Namespace) -> Common:
    return Common(
        recursive=ns.recursive,
        checkers=ns.checkers,
        skip_readme=ns.skip_readme,
        dev_comments=ns.dev_comments,
        jobs=ns.jobs,
        code=ns.code,
        paths=list(ns.paths),
    )


def _command_from(kind: Command.Kind, ns: argparse.Namespace) -> Command:
    if kind in _WITH_COMMON:
        return Command(kind, common=_common_from(ns))
    if kind is Command.Kind.CONFIG:
        return Command(
            kind, user=ns.user, overwrite=ns.overwrite, stdout=ns.stdout, filter=ns.filter
        )
    if kind is Command.Kind.LIST_FILES:
        return Command(
            kind, recursive=ns.recursive, skip_readme=ns.skip_readme, paths=list(ns.paths)
        )
    shell = ns.shell
    if shell is None:
        env_shell = os.environ.get("SHELL")
        if env_shell is None:
            raise ArgumentError("Missing SHELL argument")
        try:
            shell = load_shell_name(env_shell)
        except ShellError as exc:
            raise ArgumentError(str(exc)) from exc
    return Command(kind, shell=shell)


@dataclass
class Args:
    """Parsed command line arguments."""

    cfg: Path | None = None
    verbose: int = 0
    quiet: int = 0
    common: Common = field(default_factory=Common)
    fix: bool = False
    command: Command | None = None

    @classmethod
    def parse(cls, argv: Sequence[str] | None = None) -> Args:
        """Parse a full argument vector, program name included."""
        tokens = _normalize_argv(list(sys.argv if argv is None else argv))
        split = _find_subcommand(tokens)
        top_tokens = tokens if split is None else tokens[:split]
        top = _top_parser().parse_intermixed_args(top_tokens)

        cfg, verbose, quiet = top.cfg, top.verbose, top.quiet
        command = None
        if split is not None:
            kind = _SUBCOMMANDS[tokens[split]]
            sub = _sub_parser(kind).parse_intermixed_args(tokens[split + 1 :])
            if sub.cfg is not None:
                cfg = sub.cfg
            verbose += sub.verbose
            quiet += sub.quiet
            command = _command_from(kind, sub)

        return cls(
            cfg=cfg,
            verbose=verbose,
            quiet=quiet,
            common=_common_from(top),
            fix=top.fix,
            command=command,
        )

    def common_options(self) -> Common | None:
        """The checking options in effect, if the command has any."""
        if self.command is None:
            return self.common
        if self.command.kind in _WITH_COMMON:
            return self.command.common
        return None

    def checkers(self) -> list[CheckerType] | None:
        """The checkers selected on the command line, if any."""
        common = self.common_options()
        if common is None or common.checkers is None:
            return None
        return list(common.checkers)

    def job_count(self) -> int:
        common = self.common_options()
        return derive_job_count(common.jobs if common is not None else None)

    def verbosity(self) -> int:
        """The logging level selected by ``-v`` and ``-q``."""
        index = _DEFAULT_LEVEL_INDEX + self.verbose - self.quiet
        return _LEVELS[max(0, min(index, len(_LEVELS) - 1))]

    def action(self) -> Action:
        """The action the command requests."""
        if self.command is None:
            action = Action.CHECK
        else:
            match self.command.kind:
                case Command.Kind.CHECK:
                    action = Action.CHECK
                case Command.Kind.FIX:
                    action = Action.FIX
                case Command.Kind.REFLOW:
                    action = Action.REFLOW
                case Command.Kind.LIST_FILES:
                    action = Action.LIST_FILES
                case kind:
                    raise ValueError(f"Sub-command `{kind.value}` has no action")
        log.debug("Derived action %s from flags/args/cmds", action)
        return action