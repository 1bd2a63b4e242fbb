"""Data models for the documentation attached to each item."""

from dataclasses import dataclass, field
from typing import Any

from apijson.release_tag import ReleaseTag

# A rich-text element such as {"kind": "textDocElement", "value": "..."}.
DocElement = dict[str, Any]


@dataclass(frozen=True)
class ParamDoc:
    """Documentation written for one parameter of a function or method."""

    name: str
    description: list[DocElement] = field(default_factory=list)


@dataclass(frozen=True)
class Documentation:
    """Structured doc-comment content of an item."""

    summary: list[DocElement] = field(default_factory=list)
    remarks: list[DocElement] = field(default_factory=list)
    deprecated_message: list[DocElement] = field(default_factory=list)
    release_tag: ReleaseTag = ReleaseTag.NONE
    parameters: dict[str, ParamDoc] = field(default_factory=dict)
    returns_message: list[DocElement] = field(default_factory=list)

    @property
    def is_beta(self) -> bool:
        """Whether the item itself is tagged beta."""
        return self.release_tag is ReleaseTag.BETA
