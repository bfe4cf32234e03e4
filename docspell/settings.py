"""Checker configuration: loading, validation and TOML serialisation."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlsplit

import platformdirs
import regex
import tomli_w

from .lang import Lang5, Lang5Error
from .searchdirs import SearchDirs

log = logging.getLogger(__name__)

_APP_NAME = "docspell"

DEFAULT_TOKENIZATION_SPLITCHARS = "\",;:.!?#(){}[]|/_-‒'`&@§¶…"


class ConfigError(Exception):
    """Raised when a configuration cannot be read, parsed or written."""


def _resolve_keys(
    data: Any, aliases: dict[str, str], context: str, *, deny_unknown: bool
) -> dict[str, Any]:
    """Map aliased keys to their canonical names, rejecting duplicates."""
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a table for {context}, got {type(data).__name__}")
    resolved: dict[str, Any] = {}
    for key, value in data.items():
        canonical = aliases.get(key)
        if canonical is None:
            if deny_unknown:
                raise ConfigError(f"Unknown field `{key}` in {context}")
            continue
        if canonical in resolved:
            raise ConfigError(f"Duplicate field `{canonical}` in {context}")
        resolved[canonical] = value
    return resolved


def _bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"Field `{name}` must be a boolean, got {value!r}")
    return value


def _str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"Field `{name}` must be a string, got {value!r}")
    return value


def _count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"Field `{name}` must be a non-negative integer, got {value!r}")
    return value


def _str_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, list):
        raise ConfigError(f"Field `{name}` must be a list, got {value!r}")
    return [_str(item, name) for item in value]


def _optional_path(value: Any, name: str) -> Path | None:
    return None if value is None else Path(_str(value, name))


def _compile_regex(pattern: str) -> regex.Pattern:
    try:
        return regex.compile(pattern)
    except regex.error as exc:
        raise ConfigError(f"Invalid regular expression {pattern!r}: {exc}") from exc


@dataclass
class Quirks:
    """Additional checks besides plain dictionary lookups."""

    transform_regex: list[regex.Pattern] = field(default_factory=list)
    allow_concatenation: bool = False
    allow_dashes: bool = False
    allow_emojis: bool = True

    _KEYS = {
        "transform_regex": "transform_regex",
        "allow_concatenation": "allow_concatenation",
        "allow_dashes": "allow_dashes",
        "allow_emojis": "allow_emojis",
    }

    @classmethod
    def from_dict(cls, data: Any) -> Quirks:
        values = _resolve_keys(data, cls._KEYS, "quirks", deny_unknown=False)
        patterns = _str_list(values.get("transform_regex", []), "transform_regex")
        return cls(
            transform_regex=[_compile_regex(p) for p in patterns],
            allow_concatenation=_bool(
                values.get("allow_concatenation", False), "allow_concatenation"
            ),
            allow_dashes=_bool(values.get("allow_dashes", False), "allow_dashes"),
            allow_emojis=_bool(values.get("allow_emojis", True), "allow_emojis"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "transform_regex": [p.pattern for p in self.transform_regex],
            "allow_concatenation": self.allow_concatenation,
            "allow_dashes": self.allow_dashes,
            "allow_emojis": self.allow_emojis,
        }


@dataclass
class HunspellConfig:
    """Dictionary checker settings.

    The Python defaults enable the builtin dictionary; a ``[hunspell]`` table
    that omits ``use_builtin`` disables it.
    """

    lang: Lang5 = field(default_factory=lambda: Lang5.EN_US)
    search_dirs: SearchDirs = field(default_factory=SearchDirs)
    skip_os_lookups: bool = False
    use_builtin: bool = True
    tokenization_splitchars: str = DEFAULT_TOKENIZATION_SPLITCHARS
    extra_dictionaries: list[Path] = field(default_factory=list)
    quirks: Quirks = field(default_factory=Quirks)

    _KEYS = {
        name: name
        for name in (
            "lang",
            "search_dirs",
            "skip_os_lookups",
            "use_builtin",
            "tokenization_splitchars",
            "extra_dictionaries",
            "quirks",
        )
    }

    @classmethod
    def from_dict(cls, data: Any) -> HunspellConfig:
        values = _resolve_keys(data, cls._KEYS, "hunspell", deny_unknown=True)
        lang = Lang5.EN_US
        if "lang" in values:
            try:
                lang = Lang5.parse(_str(values["lang"], "lang"))
            except Lang5Error as exc:
                raise ConfigError(str(exc)) from exc
        return cls(
            lang=lang,
            search_dirs=SearchDirs(_str_list(values.get("search_dirs", []), "search_dirs")),
            skip_os_lookups=_bool(values.get("skip_os_lookups", False), "skip_os_lookups"),
            use_builtin=_bool(values.get("use_builtin", False), "use_builtin"),
            tokenization_splitchars=_str(
                values.get("tokenization_splitchars", DEFAULT_TOKENIZATION_SPLITCHARS),
                "tokenization_splitchars",
            ),
            extra_dictionaries=[
                Path(p)
                for p in _str_list(values.get("extra_dictionaries", []), "extra_dictionaries")
            ],
            quirks=Quirks.from_dict(values.get("quirks", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lang": str(self.lang),
            "search_dirs": [str(d) for d in self.search_dirs.dirs],
            "skip_os_lookups": self.skip_os_lookups,
            "use_builtin": self.use_builtin,
            "tokenization_splitchars": self.tokenization_splitchars,
            "extra_dictionaries": [str(p) for p in self.extra_dictionaries],
            "quirks": self.quirks.to_dict(),
        }

    def iter_search_dirs(self):
        """Yield the search directories, with OS ones unless lookups are skipped."""
        return self.search_dirs.iter(not self.skip_os_lookups)

    def sanitize_paths(self, base: str | Path) -> None:
        """Turn search directories and extra dictionaries into absolute paths."""
        base = Path(base)
        sanitized = []
        for search_dir in self.iter_search_dirs():
            abspath = search_dir if search_dir.is_absolute() else base / search_dir
            try:
                resolved = abspath.resolve(strict=True)
            except OSError:
                continue
            log.debug("Sanitized (%s + %s) -> %s", base, search_dir, resolved)
            sanitized.append(resolved)
        self.search_dirs = SearchDirs(sanitized)

        resolved_dics = []
        for extra_dic in self.extra_dictionaries:
            found = self._locate_extra_dictionary(base, extra_dic)
            if found is None:
                raise ConfigError(
                    f"Could not find extra dictionary {extra_dic} in any of the search paths"
                )
            resolved_dics.append(found)
        self.extra_dictionaries = resolved_dics

    def _locate_extra_dictionary(self, base: Path, extra_dic: Path) -> Path | None:
        for search_dir in self.iter_search_dirs():
            if extra_dic.is_absolute():
                return extra_dic
            try:
                candidate_dir = (base / search_dir).resolve(strict=True)
            except OSError:
                continue
            abspath = candidate_dir / extra_dic
            try:
                resolved = abspath.resolve(strict=True)
            except OSError:
                log.debug("Failed to canonicalize %s", abspath)
                continue
            if resolved.is_file():
                return resolved
        return None


@dataclass
class NlpRulesConfig:
    """Grammar rule checker settings."""

    override_rules: Path | None = None
    override_tokenizer: Path | None = None

    _KEYS = {"override_rules": "override_rules", "override_tokenizer": "override_tokenizer"}

    @classmethod
    def from_dict(cls, data: Any) -> NlpRulesConfig:
        values = _resolve_keys(data, cls._KEYS, "nlprules", deny_unknown=True)
        return cls(
            override_rules=_optional_path(values.get("override_rules"), "override_rules"),
            override_tokenizer=_optional_path(
                values.get("override_tokenizer"), "override_tokenizer"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.override_rules is not None:
            out["override_rules"] = str(self.override_rules)
        if self.override_tokenizer is not None:
            out["override_tokenizer"] = str(self.override_tokenizer)
        return out


@dataclass
class LanguageToolConfig:
    """Location of a language tool server."""

    url: str

    def __post_init__(self) -> None:
        parts = urlsplit(self.url)
        if not parts.scheme:
            raise ConfigError(f"Invalid URL, missing scheme: {self.url!r}")

    @classmethod
    def from_dict(cls, data: Any) -> LanguageToolConfig:
        values = _resolve_keys(data, {"url": "url"}, "languagetool", deny_unknown=True)
        if "url" not in values:
            raise ConfigError("Missing field `url` in languagetool")
        return cls(url=_str(values["url"], "url"))

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url}


@dataclass
class ReflowConfig:
    """Parameters for wrapping doc comments.

    A ``[reflow]`` table that omits the line length yields ``0``.
    """

    max_line_length: int = 80

    _KEYS = {"max_line_length": "max_line_length", "max_line_width": "max_line_length"}

    @classmethod
    def from_dict(cls, data: Any) -> ReflowConfig:
        values = _resolve_keys(data, cls._KEYS, "reflow", deny_unknown=False)
        return cls(max_line_length=_count(values.get("max_line_length", 0), "max_line_length"))

    def to_dict(self) -> dict[str, Any]:
        return {"max_line_length": self.max_line_length}


def _checker_key(checker: Any) -> str:
    if isinstance(checker, Enum):
        checker = checker.value if isinstance(checker.value, str) else checker.name
    return str(checker).lower().replace("_", "")


@dataclass
class Config:
    """The full configuration."""

    dev_comments: bool = False
    skip_readme: bool = False
    hunspell: HunspellConfig | None = field(default_factory=HunspellConfig)
    nlprules: NlpRulesConfig | None = field(default_factory=NlpRulesConfig)
    reflow: ReflowConfig | None = field(default_factory=ReflowConfig)

    _KEYS = {
        "dev_comments": "dev_comments",
        "dev-comments": "dev_comments",
        "devcomments": "dev_comments",
        "skip_readme": "skip_readme",
        "skip-readme": "skip_readme",
        "skipreadme": "skip_readme",
        "hunspell": "hunspell",
        "Hunspell": "hunspell",
        "nlprules": "nlprules",
        "Nlp": "nlprules",
        "NLP": "nlprules",
        "nlp": "nlprules",
        "NlpRules": "nlprules",
        "reflow": "reflow",
        "ReFlow": "reflow",
        "Reflow": "reflow",
    }

    @classmethod
    def parse(cls, text: str) -> Config:
        """Parse a configuration from TOML text."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        values = _resolve_keys(data, cls._KEYS, "config", deny_unknown=True)
        return cls(
            dev_comments=_bool(values.get("dev_comments", False), "dev_comments"),
            skip_readme=_bool(values.get("skip_readme", False), "skip_readme"),
            hunspell=HunspellConfig.from_dict(values["hunspell"])
            if "hunspell" in values
            else HunspellConfig(),
            nlprules=NlpRulesConfig.from_dict(values["nlprules"])
            if "nlprules" in values
            else NlpRulesConfig(),
            reflow=ReflowConfig.from_dict(values["reflow"]) if "reflow" in values else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "dev_comments": self.dev_comments,
            "skip_readme": self.skip_readme,
        }
        if self.hunspell is not None:
            out["hunspell"] = self.hunspell.to_dict()
        if self.nlprules is not None:
            out["nlprules"] = self.nlprules.to_dict()
        if self.reflow is not None:
            out["reflow"] = self.reflow.to_dict()
        return out

    def _sanitize_paths(self, base: Path) -> None:
        if self.hunspell is not None:
            self.hunspell.sanitize_paths(base)

    @classmethod
    def load_from(cls, path: str | Path) -> Config | None:
        """Load a config file; ``None`` if it does not exist."""
        try:
            resolved = Path(path).resolve(strict=True)
            contents = resolved.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
        try:
            config = cls.parse(contents)
        except ConfigError as exc:
            raise ConfigError(
                f"Syntax of a given config file({resolved}) is broken: {exc}"
            ) from exc
        config._sanitize_paths(resolved.parent)
        return config

    @classmethod
    def load(cls) -> Config | None:
        """Load the config from the user's config directory, if present."""
        return cls.load_from(platformdirs.user_config_path(_APP_NAME) / "config.toml")

    def to_toml(self) -> str:
        try:
            return tomli_w.dumps(self.to_dict())
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to convert to toml: {exc}") from exc

    def write_values_to(self, writer: TextIO) -> Config:
        """Write the TOML representation to ``writer``."""
        writer.write(self.to_toml())
        return self

    def write_values_to_path(self, path: str | Path) -> Config:
        """Write the TOML representation to ``path``, creating parent directories."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Failed to create config parent dirs {path.parent}") from exc
        try:
            with path.open("w", encoding="utf-8") as writer:
                return self.write_values_to(writer)
        except OSError as exc:
            raise ConfigError(f"Failed to write default config to {path}") from exc

    @classmethod
    def default_path(cls) -> Path:
        """The per-user configuration file path."""
        return platformdirs.user_config_path(_APP_NAME, _APP_NAME) / "config.toml"

    @classmethod
    def project_config(cls, manifest_dir: str | Path) -> Path:
        """Return the project specific config file below ``manifest_dir``."""
        path = Path(manifest_dir) / ".config" / "spellcheck.toml"
        try:
            resolved = path.resolve(strict=True)
        except OSError as exc:
            raise ConfigError(f"Local project dir config {path} does not exist") from exc
        if not resolved.is_file():
            raise ConfigError(
                f"Local project dir config {resolved} does not exist or is not a file."
            )
        return resolved

    def is_enabled(self, checker: Any) -> bool:
        """Whether the given checker (by name or enum member) is configured."""
        key = _checker_key(checker)
        if key == "hunspell":
            return self.hunspell is not None
        if key == "nlprules":
            return self.nlprules is not None
        if key == "reflow":
            return self.reflow is not None
        raise ValueError(f"Unknown checker: {checker!r}")

    @classmethod
    def full(cls) -> Config:
        """A configuration with every checker enabled."""
        return cls()