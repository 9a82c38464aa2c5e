"""Search a directory tree for entries whose names match a basic regular expression."""

from __future__ import annotations

import getopt
import os
import re
import stat
import string
import sys
from typing import Iterator, Optional, Pattern, Union

_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_CLASSES = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": " \\t\\n\\r\\f\\v",
    "blank": " \\t",
    "xdigit": "0-9A-Fa-f",
    "punct": "".join("\\" + c for c in string.punctuation),
}

_GROUPING = "(){}+?|"
_PERL_ESCAPES = "wWsSbB"

PatternLike = Union[str, Pattern[str], None]


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _bracket(pattern: str, start: int) -> tuple[int, str]:
    """Translate the bracket expression at *start*; return (end index, text)."""
    parts = ["["]
    i = start + 1
    if i < len(pattern) and pattern[i] == "^":
        parts.append("^")
        i += 1
    first = True
    while i < len(pattern):
        char = pattern[i]
        if char == "]" and not first:
            parts.append("]")
            return i + 1, "".join(parts)
        if pattern.startswith("[:", i):
            close = pattern.find(":]", i + 2)
            if close != -1:
                name = pattern[i + 2:close]
                if name not in _CLASSES:
                    raise re.error(f"invalid character class {name!r}")
                parts.append(_CLASSES[name])
                i = close + 2
                first = False
                continue
        parts.append("\\" + char if char in "\\[]^&~|" else char)
        i += 1
        first = False
    raise re.error("unmatched [ in pattern")


def _bre_to_python(pattern: str) -> str:
    """Rewrite a POSIX basic regular expression in Python's syntax."""
    out: list[str] = []
    i = 0
    expect_atom = True
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            if i + 1 >= len(pattern):
                raise re.error("trailing backslash in pattern")
            nxt = pattern[i + 1]
            i += 2
            if nxt in _GROUPING:
                out.append(nxt)
                expect_atom = nxt in "(|"
            elif nxt.isdigit() or nxt in _PERL_ESCAPES:
                out.append("\\" + nxt)
                expect_atom = False
            elif nxt in "<>":
                out.append("\\b")
                expect_atom = False
            else:
                out.append(re.escape(nxt))
                expect_atom = False
            continue
        if char == "[":
            i, text = _bracket(pattern, i)
            out.append(text)
            expect_atom = False
            continue
        if char in _GROUPING:
            out.append("\\" + char)
        elif char == "*":
            out.append("\\*" if expect_atom else "*")
        elif char == "^":
            if expect_atom:
                out.append("^")
                i += 1
                continue
            out.append("\\^")
        elif char == "$":
            at_end = i == len(pattern) - 1 or pattern.startswith("\\)", i + 1)
            out.append("$" if at_end else "\\$")
        else:
            out.append(re.escape(char))
        expect_atom = False
        i += 1
    return "".join(out)


def _compile(pattern: PatternLike) -> Optional[Pattern[str]]:
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(_bre_to_python(pattern))


def _walk(path: str, depth: int, max_depth: Optional[int],
          regex: Optional[Pattern[str]]) -> Iterator[str]:
    if max_depth is not None and depth > max_depth:
        return
    try:
        entries = os.scandir(path)
    except PermissionError:
        print(f"myfind: \u2018{path}\u2018: Permission denied", file=sys.stderr)
        return
    prefix = path if path.endswith("/") else path + "/"
    with entries:
        for entry in entries:
            if entry.name.startswith("."):
                continue
            child = prefix + entry.name
            if regex is None or regex.search(entry.name):
                yield child
            if entry.is_dir(follow_symlinks=False):
                yield from _walk(child, depth + 1, max_depth, regex)


def walk(path: str, max_depth: Optional[int] = None,
         pattern: PatternLike = None) -> Iterator[str]:
    """Yield the non-hidden entries below *path*, depth first.

    Entries deeper than *max_depth* levels are not visited; only names that
    match *pattern* are yielded, but every directory is descended into.
    """
    return _walk(path, 1, max_depth, _compile(pattern))


def _find(path: str, is_dir: bool, max_depth: Optional[int],
          regex: Optional[Pattern[str]]) -> Iterator[str]:
    if regex is None or regex.search(path):
        yield path
    if is_dir:
        yield from _walk(path, 1, max_depth, regex)


def find(path: str, max_depth: Optional[int] = None,
         pattern: PatternLike = None) -> Iterator[str]:
    """Yield *path* itself (if it matches) followed by the entries below it.

    Raises ValueError for a negative depth, re.error for a bad pattern and
    OSError when *path* cannot be examined.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("Max depth must be positive.")
    regex = _compile(pattern)
    info = os.stat(path)
    return _find(path, stat.S_ISDIR(info.st_mode), max_depth, regex)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, rest = getopt.gnu_getopt(args, "d:n:")
    except getopt.GetoptError as exc:
        print(f"myfind: {exc.msg}", file=sys.stderr)
        return 1

    max_depth: Optional[int] = None
    pattern: Optional[str] = None
    for option, value in opts:
        if option == "-d":
            max_depth = _atoi(value)
            if max_depth < 0:
                print("Max depth must be positive.", file=sys.stderr)
                return 1
        else:
            pattern = value

    if not opts and len(rest) > 2:
        print("Usage: myfind -d [max depth] -n [pattern] [filepath]", file=sys.stderr)
        return 1

    pathname = rest[0] if len(rest) == 1 else "."
    try:
        results = find(pathname, max_depth, pattern)
    except re.error as exc:
        print(f"regcomp: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"stat: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        for entry in results:
            print(entry)
    except OSError as exc:
        print(f"opendir: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())