"""A minimal shell that runs one program per input line."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Iterable, Optional

ERROR_MESSAGE = "An error has occurred\n"
DEFAULT_SEARCH_DIRS = ("/bin", "/usr/bin")
PROMPT = "wish> "


def print_error(stream: Optional[IO[str]] = None) -> None:
    """Write the shell's single error message."""
    stream = sys.stderr if stream is None else stream
    stream.write(ERROR_MESSAGE)
    stream.flush()


def find_executable(name: str, search_dirs: Iterable[str] = DEFAULT_SEARCH_DIRS) -> Optional[str]:
    """Return the first executable file called *name* in *search_dirs*, or None."""
    for directory in search_dirs:
        candidate = os.path.join(directory, "") + name
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def _fileno(stream: IO[str]) -> Optional[int]:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


class Shell:
    """Runs commands found in a fixed list of directories."""

    def __init__(self, search_dirs=DEFAULT_SEARCH_DIRS, out=None, err=None):
        self.search_dirs = tuple(search_dirs)
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err

    def execute(self, line: str) -> Optional[int]:
        """Run the program named by *line*; return its exit status, or None on error."""
        command = line[:-1] if line.endswith("\n") else line
        path = find_executable(command, self.search_dirs)
        if path is None:
            print_error(self.err)
            return None
        self.out.flush()
        self.err.flush()
        out_fd = _fileno(self.out)
        err_fd = _fileno(self.err)
        try:
            result = subprocess.run(
                [command],
                executable=path,
                stdout=subprocess.PIPE if out_fd is None else out_fd,
                stderr=subprocess.PIPE if err_fd is None else err_fd,
            )
        except OSError:
            print_error(self.err)
            return None
        if result.stdout:
            self.out.write(result.stdout.decode(errors="replace"))
        if result.stderr:
            self.err.write(result.stderr.decode(errors="replace"))
        return result.returncode

    def run(self, stream: IO[str], interactive: bool = True) -> None:
        """Execute each line of *stream* until end of input."""
        while True:
            if interactive:
                self.out.write(PROMPT)
                self.out.flush()
            line = stream.readline()
            if not line:
                return
            self.execute(line)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print_error()
        return 1
    shell = Shell()
    if args:
        try:
            batch = open(args[0], encoding="utf-8", errors="replace")
        except OSError:
            print_error()
            return 1
        with batch:
            shell.run(batch, interactive=False)
    else:
        shell.run(sys.stdin, interactive=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())