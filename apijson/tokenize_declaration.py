"""Splitting of declaration text into the tokens used for literal values."""

import re

TOKEN_RE = re.compile(
    r"""
    "(?:\\.|[^"\\])*"          # double-quoted string
    | '(?:\\.|[^'\\])*'        # single-quoted string
    | `[^`]*`                  # template literal
    | \d+(?:\.\d+)?            # number
    | [A-Za-z_$][\w$]*         # identifier or keyword
    | \S                       # punctuation
    """,
    re.VERBOSE,
)


def tokenize_declaration(text: str) -> tuple[str, ...]:
    """Return the tokens of a declaration, dropping a trailing ``;`` or ``,``."""
    tokens = TOKEN_RE.findall(text)
    while tokens and tokens[-1] in {";", ","}:
        tokens.pop()
    return tuple(tokens)
