"""The shell's built-in commands: echo, pwd and cd."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO


def echo(args: Sequence[str], out: Optional[TextIO] = None) -> None:
    """Print args after the command name, separated by spaces.

    args[0] is the command name. A first argument of exactly "-n"
    suppresses the trailing newline.
    """
    out = sys.stdout if out is None else out
    words = list(args[1:])
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    out.write(" ".join(words))
    if newline:
        out.write("\n")


def pwd(out: Optional[TextIO] = None) -> int:
    """Print the current working directory; return 0, or 1 if it cannot be read."""
    out = sys.stdout if out is None else out
    try:
        cwd = os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"pwd: {exc.strerror}\n")
        return 1
    out.write(f"{cwd}\n")
    return 0


def cd(path: str) -> int:
    """Change the working directory to path; return 0, or 1 on failure."""
    try:
        os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"getcwd: {exc.strerror}\n")
        return 1
    try:
        os.chdir(path)
    except OSError as exc:
        sys.stderr.write(f"cd: {path}: {exc.strerror}\n")
        return 1
    return 0