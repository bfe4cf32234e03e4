"""Stitch replacements and insertions onto a text, by line and column."""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .bandaid import BandAid, LineColumn, Span

log = logging.getLogger(__name__)

_TEMPORARY_PREFIX = ".spellcheck.tmp"


@dataclass(frozen=True)
class Replace:
    """Replace the text covered by ``replace_span`` (inclusive) with ``replacement``."""

    replace_span: Span
    replacement: str


@dataclass(frozen=True)
class Insert:
    """Insert ``content`` right before the character at ``insert_at``."""

    insert_at: LineColumn
    content: str


Patch = Union[Replace, Insert]


def patch_from_bandaid(bandaid: BandAid) -> Patch:
    """A bandaid whose span starts where it ends becomes an insertion."""
    if bandaid.span.start == bandaid.span.end:
        return Insert(bandaid.span.start, bandaid.content)
    return Replace(bandaid.span, bandaid.content)


def _positions(source: str) -> Iterator[LineColumn]:
    line, column = 1, 0
    for char in source:
        yield LineColumn(line, column)
        if char == "\n":
            line += 1
            column = 0
        else:
            column += 1


def _patch_start(patch: Patch) -> LineColumn:
    return patch.replace_span.start if isinstance(patch, Replace) else patch.insert_at


def apply_patches(patches: Iterable[Patch], source: str) -> str:
    """Apply ``patches``, ordered and non overlapping, to ``source``.

    Multiple insertions at one position are fine; overlapping replacements
    are not. No semantics of the text are considered.
    """
    positions = list(_positions(source))
    total = len(positions)
    pending = iter(patches)
    upcoming = next(pending, None)
    out: list[str] = []

    pos = 0
    cursor = 0
    current: Patch | None = None
    while True:
        start = cursor
        if current is not None:
            if isinstance(current, Replace):
                out.append(current.replacement)
                skip_until = current.replace_span.end
                while pos < total:
                    start = pos + 1
                    if positions[pos] >= skip_until:
                        break
                    pos += 1
            else:
                out.append(current.content)
        cursor = start

        if upcoming is not None:
            copy_until = _patch_start(upcoming)
            end = cursor
            while pos < total and positions[pos] < copy_until:
                end = pos + 1
                pos += 1
            end = min(end, len(source))
        else:
            end = len(source)
        cursor = end

        out.append(source[start:end])

        current = upcoming
        if current is None:
            break
        upcoming = next(pending, None)

    return "".join(out)


def correct_file(path: str | Path, bandaids: Iterable[BandAid]) -> None:
    """Apply ``bandaids``, sorted and non overlapping, to the file at ``path``."""
    target = Path(path).resolve(strict=True)
    log.debug("Attempting to open %s as read", target)
    with target.open(encoding="utf-8", newline="") as reader:
        content = reader.read()

    corrected = apply_patches((patch_from_bandaid(b) for b in bandaids), content)

    tmp = target.parent / f"{_TEMPORARY_PREFIX}{uuid.uuid4()}"
    try:
        with tmp.open("w", encoding="utf-8", newline="") as writer:
            writer.write(corrected)
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()