"""The interactive shell: read a line, split it into words, run a built-in."""

from __future__ import annotations

import signal
import sys
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, TextIO

from minishell.builtins import echo, pwd
from minishell.strtools import split_words

try:
    import readline as _readline
except ImportError:  # platforms without GNU readline
    _readline = None

PROMPT = "./minishell: "


class Shell:
    """Runs command lines against the built-in commands.

    Only echo and pwd are recognised; any other command is ignored.
    Every non-empty line is recorded in the history.
    """

    def __init__(self, out: Optional[TextIO] = None, prompt: str = PROMPT) -> None:
        self.out = out
        self.prompt = prompt
        self.history: List[str] = []
        self._builtins: Dict[str, Callable[[Sequence[str]], int]] = {
            "echo": self._echo,
            "pwd": self._pwd,
        }

    @property
    def _stream(self) -> TextIO:
        return sys.stdout if self.out is None else self.out

    def _echo(self, words: Sequence[str]) -> int:
        echo(words, self._stream)
        return 0

    def _pwd(self, words: Sequence[str]) -> int:
        return pwd(self._stream)

    def execute(self, line: str) -> Optional[int]:
        """Run one command line.

        Returns the built-in's status, or None when the line was empty,
        held only spaces, or named a command that is not a built-in.
        """
        if line == "":
            return None
        self.history.append(line)
        words = split_words(line, " ")
        if not words:
            return None
        command = self._builtins.get(words[0])
        if command is None:
            return None
        return command(words)

    def run(self, lines: Iterable[str]) -> int:
        """Execute every line in turn; return 0 once the input is exhausted."""
        for line in lines:
            self.execute(line.rstrip("\n"))
        return 0


def _prompted_lines(prompt: str, out: TextIO) -> Iterator[str]:
    """Yield lines typed at the prompt until end of input.

    An interrupt abandons the current line and starts a fresh prompt.
    """
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        except KeyboardInterrupt:
            out.write("\n")
            out.flush()
            continue
        if line and _readline is not None:
            _readline.add_history(line)
        yield line


def main(argv: Optional[List[str]] = None) -> int:
    """Start the interactive shell on standard input; return 0 at end of input."""
    shell = Shell()
    has_sigquit = hasattr(signal, "SIGQUIT")
    previous = signal.signal(signal.SIGQUIT, signal.SIG_IGN) if has_sigquit else None
    try:
        return shell.run(_prompted_lines(shell.prompt, sys.stdout))
    finally:
        if has_sigquit:
            signal.signal(signal.SIGQUIT, previous)


if __name__ == "__main__":
    sys.exit(main())