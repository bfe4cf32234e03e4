"""Search directories for dictionary and affix files."""

from __future__ import annotations

import functools
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path


@functools.cache
def _dirs_for_platform(platform: str) -> tuple[Path, ...]:
    if platform == "darwin":
        try:
            home = Path.home()
        except RuntimeError:
            return ()
        return (home / "/Library/Spelling/", Path("/Library/Spelling/"))
    if platform.startswith("linux"):
        return (
            # Fedora
            Path("/usr/share/myspell/"),
            Path("/usr/share/hunspell/"),
            # Arch Linux
            Path("/usr/share/myspell/dicts/"),
        )
    return ()


def os_specific_search_dirs() -> tuple[Path, ...]:
    """Return the dictionary directories the operating system usually provides."""
    return _dirs_for_platform(sys.platform)


class SearchDirs:
    """User provided search directories; OS paths are only added when iterating."""

    def __init__(self, dirs: Iterable[str | Path] = ()) -> None:
        self.dirs: list[Path] = [Path(d) for d in dirs]

    def iter(self, extend_by_os: bool) -> Iterator[Path]:
        """Yield the configured directories, followed by the OS ones if requested."""
        yield from self.dirs
        if extend_by_os:
            yield from os_specific_search_dirs()

    def __len__(self) -> int:
        return len(self.dirs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchDirs):
            return self.dirs == other.dirs
        return NotImplemented

    def __repr__(self) -> str:
        return f"SearchDirs({[str(d) for d in self.dirs]!r})"