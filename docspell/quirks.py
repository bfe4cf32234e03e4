"""Word quirks: dash handling and regex driven word splitting."""

from __future__ import annotations

import functools
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

import regex


@dataclass(frozen=True)
class Whitelisted:
    """An allow-listed chunk."""

    span: range
    word: str


@dataclass(frozen=True)
class Fragments:
    """Word fragments that need to be checked individually."""

    fragments: list[tuple[range, str]] = field(default_factory=list)


@dataclass(frozen=True)
class Atomic:
    """A word to be checked as is."""

    span: range
    word: str


Transformed = Union[Whitelisted, Fragments, Atomic]


def replacements_contain_dashless(word: str, replacements: Iterable[str]) -> bool:
    """True iff the replacements contain ``word`` with its dashes removed."""
    dashless = word.replace("-", "")
    if dashless == word:
        return False
    return any(candidate == dashless for candidate in replacements)


def replacements_contain_dashed(word: str, replacements: Iterable[str]) -> bool:
    """True iff the replacements contain ``word`` with additional dashes."""
    if "-" in word:
        return False
    return any(
        candidate[:1] == word[:1] and candidate.replace("-", "") == word
        for candidate in replacements
    )


@functools.lru_cache(maxsize=256)
def _compile(pattern: str):
    return regex.compile(pattern)


def _as_pattern(pattern):
    return _compile(pattern) if isinstance(pattern, str) else pattern


def _transform_inner(patterns: Sequence, word: str, span: range) -> Transformed:
    for pattern in patterns:
        match = pattern.search(word)
        if match is None:
            continue
        if pattern.groups == 0:
            # a match without captures is an implicit allow-listing
            return Whitelisted(span, word)
        fragments = []
        for idx, text in enumerate(match.groups(), start=1):
            if text is None:
                continue
            start = span.start + match.start(idx)
            fragments.append((range(start, start + len(text)), text))
        return Fragments(fragments)
    return Atomic(span, word)


def transform(transform_regex: Iterable, word: str, span: range) -> Transformed:
    """Split ``word`` recursively by the capture groups of the first matching regex.

    ``span`` is the character range the word occupies in its text; the
    returned fragments carry ranges relative to the same text.
    """
    patterns = [_as_pattern(p) for p in transform_regex]
    queue: deque[tuple[range, str]] = deque([(span, word)])
    words: list[tuple[range, str]] = []
    whitelisted = 0
    while queue:
        current_span, current_word = queue.popleft()
        match _transform_inner(patterns, current_word, current_span):
            case Fragments(fragments=fragments):
                queue.extend(fragments)
            case Atomic(span=atomic_span, word=atomic_word):
                words.append((atomic_span, atomic_word))
            case Whitelisted():
                whitelisted += 1

    if whitelisted == 0 and (
        not words or (len(words) == 1 and len(words[0][0]) == len(word))
    ):
        return Atomic(span, word)
    if words:
        return Fragments(words)
    return Whitelisted(span, word)