"""Mapping from item kinds to the kind strings written into API JSON documents.

The strings here must stay in sync with the ``kind`` constants declared in
``api-json.schema.json``.
"""

from collections.abc import Mapping
from types import MappingProxyType

from apijson.item_kind import ItemKind

KIND_NAMES: Mapping[ItemKind, str] = MappingProxyType(
    {
        ItemKind.CLASS: "class",
        ItemKind.CONSTRUCTOR: "constructor",
        ItemKind.ENUM: "enum",
        ItemKind.ENUM_VALUE: "enum value",
        ItemKind.FUNCTION: "function",
        ItemKind.INTERFACE: "interface",
        ItemKind.METHOD: "method",
        ItemKind.MODULE_VARIABLE: "module variable",
        ItemKind.NAMESPACE: "namespace",
        ItemKind.PACKAGE: "package",
        ItemKind.PARAMETER: "parameter",
        ItemKind.PROPERTY: "property",
    }
)

_KINDS_BY_NAME: Mapping[str, ItemKind] = MappingProxyType(
    {name: kind for kind, name in KIND_NAMES.items()}
)


def convert_kind_to_json(kind: ItemKind) -> str:
    """Return the document kind string for an item kind."""
    try:
        return KIND_NAMES[kind]
    except KeyError:
        msg = f"Unsupported item kind: {kind!r}"
        raise ValueError(msg) from None


def convert_json_to_kind(name: str) -> ItemKind:
    """Return the item kind written as ``name`` in a document or model file."""
    try:
        return _KINDS_BY_NAME[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(_KINDS_BY_NAME))
        msg = f"Unknown item kind {name!r} (expected one of: {known})"
        raise ValueError(msg) from None
