import sys
from pathlib import Path
from unittest.mock import patch

from docspell.searchdirs import SearchDirs, os_specific_search_dirs


def test_iter_without_os():
    dirs = SearchDirs(["/search/1", "/search/2"])
    assert list(dirs.iter(False)) == [Path("/search/1"), Path("/search/2")]


def test_len_counts_only_configured():
    dirs = SearchDirs(["/search/1", "/search/2"])
    assert len(dirs) == 2
    assert len(SearchDirs()) == 0


def test_iter_with_os_appends_os_dirs():
    dirs = SearchDirs(["/search/1", "/search/2"])
    result = list(dirs.iter(True))
    assert result[:2] == [Path("/search/1"), Path("/search/2")]
    assert tuple(result[2:]) == os_specific_search_dirs()


def test_linux_dirs():
    dirs = SearchDirs(["/search/1", "/search/2"])
    with patch.object(sys, "platform", "linux"):
        assert os_specific_search_dirs() == (
            Path("/usr/share/myspell/"),
            Path("/usr/share/hunspell/"),
            Path("/usr/share/myspell/dicts/"),
        )
        assert len(list(dirs.iter(True))) == 5


def test_windows_has_no_os_dirs():
    dirs = SearchDirs(["/search/1", "/search/2"])
    with patch.object(sys, "platform", "win32"):
        assert os_specific_search_dirs() == ()
        assert len(list(dirs.iter(True))) == 2


def test_macos_dirs():
    with patch.object(sys, "platform", "darwin"):
        found = os_specific_search_dirs()
    assert found[-1] == Path("/Library/Spelling/")
    assert len(found) >= 1


def test_equality():
    assert SearchDirs(["/a"]) == SearchDirs([Path("/a")])
    assert not (SearchDirs(["/a"]) == SearchDirs(["/b"]))