"""A small interactive shell with echo and pwd builtins, and its string, byte and list helpers."""

__version__ = "0.1.0"