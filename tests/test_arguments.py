import logging
from pathlib import Path

import pytest

from docspell.arguments import (
    OFF,
    TRACE,
    ArgumentError,
    Args,
    Command,
    Shell,
    ShellError,
    derive_job_count,
    load_shell_name,
)
from docspell.checkertypes import CheckerType
from docspell.outcome import Action


def split(command: str) -> list[str]:
    return command.split(" ")


SAMPLES = {
    "tool spellcheck": Action.CHECK,
    "tool spellcheck -vvvv": Action.CHECK,
    "docspell": Action.CHECK,
    "docspell -vvvv": Action.CHECK,
    "tool spellcheck check -m 11": Action.CHECK,
    "docspell check -m 9": Action.CHECK,
    "tool spellcheck reflow": Action.REFLOW,
    "docspell reflow": Action.REFLOW,
    "tool spellcheck fix": Action.FIX,
    "docspell fix": Action.FIX,
    "docspell fix -r file.rs": Action.FIX,
    "docspell -q fix Cargo.toml": Action.FIX,
    "tool spellcheck -v fix Cargo.toml": Action.FIX,
}


@pytest.mark.parametrize("command,expected", sorted(SAMPLES.items()))
def test_samples_parse_to_action(command, expected):
    assert Args.parse(split(command)).action() == expected


@pytest.mark.parametrize("command", ["tool spellcheck --fix", "docspell --fix"])
def test_deprecated_fix_flag(command):
    args = Args.parse(split(command))
    assert args.fix is True
    assert args.command is None


def test_code_option():
    args = Args.parse(split("tool spellcheck check -m 11"))
    assert args.common_options().code == 11


def test_deserialize_multiple_checkers():
    args = Args.parse(split("tool spellcheck check --checkers=nlprules,hunspell"))
    assert args.checkers() == [CheckerType.NLP_RULES, CheckerType.HUNSPELL]


def test_no_checkers_selected():
    assert Args.parse(split("docspell check")).checkers() is None


def test_unknown_checker_is_an_error():
    with pytest.raises(ArgumentError):
        Args.parse(split("docspell check --checkers=grammarly"))


def test_unknown_option_is_an_error():
    with pytest.raises(ArgumentError):
        Args.parse(split("docspell check --bogus"))


def test_code_out_of_range_is_an_error():
    with pytest.raises(ArgumentError):
        Args.parse(split("docspell check --code=300"))


def test_paths_and_flags_after_subcommand():
    args = Args.parse(split("docspell fix -r file.rs"))
    common = args.common_options()
    assert common.recursive is True
    assert common.paths == [Path("file.rs")]


def test_paths_at_top_level():
    args = Args.parse(split("docspell -r a.rs b.md"))
    assert args.command is None
    assert args.common_options().paths == [Path("a.rs"), Path("b.md")]


def test_cfg_is_global():
    args = Args.parse(split("docspell check --cfg=my.toml"))
    assert args.cfg == Path("my.toml")


def test_cfg_value_is_not_a_subcommand():
    args = Args.parse(split("docspell -c config check"))
    assert args.cfg == Path("config")
    assert args.command.kind is Command.Kind.CHECK


def test_config_subcommand_options():
    args = Args.parse(split("docspell config --checkers=NlpRules --overwrite -s"))
    command = args.command
    assert command.kind is Command.Kind.CONFIG
    assert command.filter == [CheckerType.NLP_RULES]
    assert command.overwrite is True
    assert command.stdout is True
    assert command.user is False


def test_config_has_no_action_or_common():
    args = Args.parse(split("docspell config --user"))
    assert args.common_options() is None
    with pytest.raises(ValueError):
        args.action()


def test_list_files_has_no_common():
    args = Args.parse(split("docspell list-files -r src"))
    assert args.common_options() is None
    assert args.command.paths == [Path("src")]
    assert args.action() is Action.LIST_FILES


def test_job_count_from_option():
    assert Args.parse(split("docspell check -j 4")).job_count() == 4
    assert Args.parse(split("docspell check -j 0")).job_count() == 1


@pytest.mark.parametrize(
    "command,level",
    [
        ("docspell", logging.ERROR),
        ("docspell -v", logging.WARNING),
        ("docspell -vv", logging.INFO),
        ("docspell -vvv", logging.DEBUG),
        ("docspell -vvvv", TRACE),
        ("docspell -vvvvvv", TRACE),
        ("docspell -q", OFF),
        ("docspell -v check -v", logging.INFO),
    ],
)
def test_verbosity(command, level):
    assert Args.parse(split(command)).verbosity() == level


def test_shell_check_env(monkeypatch):
    assert load_shell_name("/usr/bin/zsh") is Shell.ZSH
    assert load_shell_name("zsh") is Shell.ZSH
    assert load_shell_name("fish") is Shell.FISH

    args = Args.parse(split("tool spellcheck completions --shell zsh"))
    assert args.command.kind is Command.Kind.COMPLETIONS
    assert str(args.command.shell) == "zsh"

    monkeypatch.setenv("SHELL", "/bin/fish")
    args = Args.parse(split("tool spellcheck completions"))
    assert str(args.command.shell) == "fish"


def test_unknown_shell():
    with pytest.raises(ShellError):
        load_shell_name("/bin/tcsh")


def test_completions_without_shell(monkeypatch):
    monkeypatch.delenv("SHELL", raising=False)
    with pytest.raises(ArgumentError):
        Args.parse(split("docspell completions"))


def test_completions_with_unknown_shell_option():
    with pytest.raises(ArgumentError):
        Args.parse(split("docspell completions --shell csh"))


@pytest.mark.parametrize("jobs,expected", [(0, 1), (500, 128), (128, 128), (4, 4)])
def test_derive_job_count(jobs, expected):
    assert derive_job_count(jobs) == expected


def test_derive_job_count_default_is_positive():
    assert derive_job_count(None) >= 1


def test_empty_argv():
    args = Args.parse([])
    assert args.command is None
    assert args.action() is Action.CHECK