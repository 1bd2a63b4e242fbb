"""Declaration handles used to extract literal text from an item's source."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

WHITESPACE_RE = re.compile(r"\s+")

OPENERS = "([{<"
CLOSERS = ")]}>"
QUOTES = "\"'`"

# A "{" right after one of these opens an object type, not a body.
TYPE_POSITION = frozenset(":|&,=(<[?")


class DeclarationKind(Enum):
    """Syntax kind of the declaration behind an item."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ENUM_MEMBER = "enum_member"
    FUNCTION = "function"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PROPERTY = "property"
    GET_ACCESSOR = "get_accessor"
    SET_ACCESSOR = "set_accessor"
    VARIABLE = "variable"
    NAMESPACE = "namespace"
    PARAMETER = "parameter"


def _is_arrow(text: str, i: int) -> bool:
    return text[i] == ">" and text[i - 1 : i] == "="


def _scan(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield ``(index, char, depth)`` for every character outside string literals.

    Brackets, parentheses, braces and angle brackets all count towards the
    depth. Openers are reported at the depth outside them, closers at the
    depth they return to. The ``>`` of ``=>`` is not a closer.
    """
    depth = 0
    quote = ""
    escaped = False
    for i, ch in enumerate(text):
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = ""
            continue
        if ch in QUOTES:
            quote = ch
            continue
        if ch in OPENERS:
            yield i, ch, depth
            depth += 1
        elif ch in CLOSERS and not _is_arrow(text, i):
            depth = max(depth - 1, 0)
            yield i, ch, depth
        else:
            yield i, ch, depth


def body_start(text: str) -> int:
    """Return the index of the ``{`` opening the declaration body, or -1."""
    last = ""
    for i, ch, depth in _scan(text):
        if depth or ch.isspace():
            continue
        if ch == "{" and last not in TYPE_POSITION:
            return i
        last = "=" if _is_arrow(text, i) else ch
    return -1


def initializer_start(text: str) -> int:
    """Return the index of the assignment ``=`` of a declaration, or -1.

    Only an ``=`` outside any brackets counts, and never one that is part of
    ``=>``, ``==``, ``!=``, ``<=`` or ``>=``.
    """
    for i, ch, depth in _scan(text):
        if depth or ch != "=":
            continue
        if text[i - 1 : i] in ("=", "!", "<", ">"):
            continue
        if text[i + 1 : i + 2] in ("=", ">"):
            continue
        return i
    return -1


@dataclass(frozen=True)
class Declaration:
    """Text and tokens of a single declaration, as captured by the analyzer."""

    kind: DeclarationKind
    text: str = ""
    tokens: tuple[str, ...] = ()

    def trailing_token(self) -> str:
        """Return the last token, or an empty string for single-token declarations."""
        if len(self.tokens) > 1:
            return self.tokens[-1]
        return ""

    def declaration_line(self) -> str:
        """Return the declaration header without its body, on a single line."""
        end = body_start(self.text)
        head = self.text if end < 0 else self.text[:end]
        line = WHITESPACE_RE.sub(" ", head).strip()
        return line.removesuffix(";").rstrip()

    def initializer_text(self) -> str:
        """Return the text after the assignment ``=``, or an empty string."""
        start = initializer_start(self.text)
        if start < 0:
            return ""
        value = self.text[start + 1 :]
        return WHITESPACE_RE.sub(" ", value).strip().removesuffix(";").rstrip()
