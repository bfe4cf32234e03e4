# docspell

docspell is a library of building blocks for spell checking documentation. It covers:

- reading, validating and writing the checker configuration as TOML (`docspell.settings`)
- language and country codes such as `en_US` (`docspell.lang`)
- dictionary search directories (`docspell.searchdirs`)
- quick sanity checks of hunspell `.dic` files, plus emoji and vulgar fraction detection (`docspell.dictionary`)
- the word quirks that stop code-like words from being reported as mistakes (`docspell.quirks`)
- parsing command line arguments (`docspell.arguments`, `docspell.checkertypes`)
- positions, spans and band-aids (`docspell.bandaid`)
- applying corrections to texts and files (`docspell.patch`)
- run outcomes and process exit codes (`docspell.outcome`)

## Installation

Install the package with your usual Python package installer. The `test` extra adds pytest.

## Configuration

A configuration is a TOML document, and every section in it is optional. Some keys and section names have aliases: `[Hunspell]` for `[hunspell]`, `[Reflow]` or `[ReFlow]` for `[reflow]`, `[Nlp]`, `[NLP]`, `[nlp]` or `[NlpRules]` for `[nlprules]`, and `skip-readme` or `dev-comments` for the underscored keys. Unknown top-level keys and unknown keys in `[hunspell]` or `[nlprules]` raise `ConfigError`.

```toml
dev_comments = true
skip-readme = true

[Hunspell]
lang = "en_US"
search_dirs = ["/usr/lib64/hunspell"]
skip_os_lookups = false
use_builtin = true

[Hunspell.quirks]
allow_concatenation = true
allow_dashes = true
transform_regex = ["^'([^\\s])'$", "^[0-9]+x$"]

[Reflow]
max_line_length = 80
```

```python
from docspell.settings import Config

config = Config.parse(text)
print(config.reflow.max_line_length)
print(config.to_toml())
```

- If the text has no `[hunspell]` or `[nlprules]` section, the defaults for that section apply. If it has no `[reflow]` section, `config.reflow` is `None`.
- `Config.load_from(path)` returns `None` when the file does not exist. Otherwise it parses the file and resolves the hunspell search directories and extra dictionaries against the file's directory.
- `Config.load()` reads `config.toml` from the user's configuration directory.
- `Config.default_path()` gives the per-user configuration path.
- `Config.project_config(dir)` returns `dir/.config/spellcheck.toml` and raises `ConfigError` if that file is missing.
- `Config.write_values_to(writer)` and `Config.write_values_to_path(path)` write the TOML form.
- `Config.full()` returns a configuration with hunspell, nlprules and reflow all enabled.
- `Config.is_enabled(checker)` takes a checker name or a `CheckerType` and reports whether that checker is configured.

## Languages

```python
from docspell.lang import Lang5

lang = Lang5.parse("de_AU")
assert str(lang) == "de_AU"
assert lang == "de_AU"
```

`Lang5.EN_US` is the default. A malformed code or an unknown code raises `Lang5Error`.

## Search directories

`SearchDirs(dirs).iter(extend_by_os)` yields the configured directories. When `extend_by_os` is true, it then yields the usual dictionary directories of the operating system, which `os_specific_search_dirs()` returns. `HunspellConfig.iter_search_dirs()` calls it with `extend_by_os` set unless `skip_os_lookups` is on.

## Dictionaries

`is_valid_hunspell_dic_path(path)` and `is_valid_hunspell_dic(lines)` run a quick format check. The first line must be a non-negative number, which is the word count and is returned. None of the next ten lines may be a number. A failed check raises `DictionaryFormatError`.

`consists_of_vulgar_fractions_or_emojis(word)` is true in two cases: the word contains a vulgar fraction character, or it consists only of emoji.

## Quirks

`docspell.quirks.transform(patterns, word, span)` takes a word, the character `range` it occupies, and the `transform_regex` patterns, given as strings or compiled patterns. It returns one of:

- `Whitelisted`: a pattern without capture groups matched, so the word is accepted.
- `Fragments`: the captured parts, applied recursively, each with its own range, to be checked in place of the word.
- `Atomic`: nothing matched, so the word is checked whole.

`replacements_contain_dashless(word, replacements)` and `replacements_contain_dashed(word, replacements)` back the `allow_concatenation` and `allow_dashes` quirks.

## Command line arguments

```python
from docspell.arguments import Args

args = Args.parse(["docspell", "check", "--code=77", "--dev-comments"])
args.action()        # Action.CHECK
args.common_options().code  # 77
```

`Args.parse` expects the program name as the first element. If the next argument is the word `spellcheck`, it is dropped. The sub-commands are `check`, `fix`, `reflow`, `config`, `list-files` and `completions`.

- `--checkers=hunspell,nlprules` is parsed by `parse_checker_types`. An unknown name raises `UnknownCheckerTypeError`.
- `Args.job_count()` clamps `--jobs` to the range 1 to 128, and falls back to the CPU count.
- `Args.verbosity()` maps `-v` and `-q` to a logging level.
- `load_shell_name` accepts `zsh` as well as `/usr/bin/zsh`.
- An argument that cannot be parsed raises `ArgumentError`.

## Applying corrections

A `BandAid` pairs replacement text with an inclusive `Span` of `LineColumn` positions. Lines count from 1 and columns from 0. `Span.on_line(line, start, end)` builds a span from an end-exclusive column range.

`patch_from_bandaid` turns a band-aid whose span starts where it ends into an `Insert`, and any other band-aid into a `Replace`. `apply_patches(patches, source)` returns the patched text. The patches must be in order and must not overlap.

```python
from docspell.bandaid import Span
from docspell.patch import Replace, apply_patches

apply_patches([Replace(Span.on_line(1, 1, 3), "Y")], "T🐠🐠U")  # "TYU"
```

`correct_file(path, bandaids)` writes the corrected content to a temporary file beside the target. It then moves that file over the target.

## Exit codes

`docspell.outcome.exit_code_for(finish, code_override)` maps a `Finish` to an `ExitCode`. `ExitCode.as_int()` returns:

- 0 on success, or when no mistakes were found
- 130 when the run was aborted
- `code_override` when mistakes were found

## What the package does not do

docspell has no command to run and no entry point. `Args` only parses arguments: it does not combine them with the configuration into a request, and it does not generate shell completions. The package ships no dictionary, no tokenizer and no grammar rules, and it does not run a spell check or grammar check over documents. It has no interactive picker for fixes and no reflow of comments.