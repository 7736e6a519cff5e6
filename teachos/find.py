"""Find files with a given name below a directory."""

from __future__ import annotations

import os
import stat
import sys
from typing import Iterator

DIRSIZ = 14
_PATH_BUF = 512


def name_matches(path: str, pattern: str) -> bool:
    """Whether the last component of path is exactly pattern."""
    return path.rsplit("/", 1)[-1] == pattern


def find(path: str, pattern: str) -> Iterator[str]:
    """Yield every non-directory below path whose name equals pattern.

    Directories with a matching name are searched but not reported, and
    path itself is never reported.
    """
    yield from _find(path, pattern, False)


def _find(path: str, pattern: str, matched: bool) -> Iterator[str]:
    try:
        st = os.stat(path)
    except OSError:
        sys.stderr.write(f"find: cannot open {path} \n")
        return
    if not stat.S_ISDIR(st.st_mode):
        if matched:
            yield path
        return
    if len(path) + 1 + DIRSIZ + 1 > _PATH_BUF:
        sys.stdout.write("find: path too long\n")
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        sys.stderr.write(f"find: cannot open {path} \n")
        return
    for name in names:
        child = f"{path}/{name}"
        if not os.path.exists(child):
            sys.stderr.write(f"find: cannot stat {child}\n")
            continue
        yield from _find(child, pattern, name_matches(child, pattern))


def main(argv: list[str] | None = None) -> int:
    """Command entry point: find directory name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        return 1
    for hit in find(args[0], args[1]):
        sys.stdout.write(f"{hit}\n")
    return 0