"""Logic for loading a documented item model from a YAML or JSON file.

The file describes an already-analyzed package: its exports, their members and
their documentation. Keys use the same camelCase spelling as the generated
document (``releaseTag``, ``typeParameters``, ``returnType`` ...).
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from apijson.access_modifier import AccessModifier
from apijson.as_rich_text import as_rich_text
from apijson.declaration import Declaration, DeclarationKind
from apijson.documentation import DocElement, Documentation, ParamDoc
from apijson.errors import ModelLoadError
from apijson.item_kind import ItemKind
from apijson.items import (
    CONSTRUCTOR_NAME,
    EnumItem,
    EnumValueItem,
    FunctionItem,
    Item,
    MethodItem,
    ModuleVariableItem,
    NamespaceItem,
    PackageItem,
    Parameter,
    PropertyItem,
    StructuredTypeItem,
)
from apijson.kind_names import convert_json_to_kind
from apijson.release_tag import ReleaseTag
from apijson.tokenize_declaration import tokenize_declaration

DEFAULT_DECLARATION_KINDS: dict[ItemKind, DeclarationKind] = {
    ItemKind.NAMESPACE: DeclarationKind.NAMESPACE,
    ItemKind.CLASS: DeclarationKind.CLASS,
    ItemKind.INTERFACE: DeclarationKind.INTERFACE,
    ItemKind.ENUM: DeclarationKind.ENUM,
    ItemKind.ENUM_VALUE: DeclarationKind.ENUM_MEMBER,
    ItemKind.FUNCTION: DeclarationKind.FUNCTION,
    ItemKind.METHOD: DeclarationKind.METHOD,
    ItemKind.CONSTRUCTOR: DeclarationKind.CONSTRUCTOR,
    ItemKind.PROPERTY: DeclarationKind.PROPERTY,
    ItemKind.MODULE_VARIABLE: DeclarationKind.VARIABLE,
    ItemKind.PARAMETER: DeclarationKind.PARAMETER,
}


def load_item_model(path: Path) -> PackageItem:
    """Load and build the package described by a YAML (or JSON) model file."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Could not read item model {path}: {exc}"
        raise ModelLoadError(msg) from exc

    if not isinstance(raw, dict):
        msg = f"Item model {path} must contain a mapping at the top level"
        raise ModelLoadError(msg)
    return build_package(raw)


def build_package(raw: dict[str, Any]) -> PackageItem:
    """Build the package item from a parsed model mapping."""
    return PackageItem(
        name=_require_str(raw, "name", ""),
        documentation=_documentation(raw, ""),
        members=_members(raw, "exports", ""),
    )


def _build_item(raw: object, where: str) -> Item:
    if not isinstance(raw, dict):
        msg = f"{where}: expected a mapping, got {type(raw).__name__}"
        raise ModelLoadError(msg)

    kind_name = _require_str(raw, "kind", where)
    try:
        kind = convert_json_to_kind(kind_name)
    except ValueError as exc:
        msg = f"{where}/kind: {exc}"
        raise ModelLoadError(msg) from exc

    builder = _BUILDERS.get(kind)
    if builder is None:
        msg = f"{where}/kind: a {kind_name!r} cannot appear as a member"
        raise ModelLoadError(msg)
    return builder(raw, kind, where)


def _members(raw: dict[str, Any], key: str, where: str) -> tuple[Item, ...]:
    values = raw.get(key) or []
    if not isinstance(values, list):
        msg = f"{where}/{key}: expected a list"
        raise ModelLoadError(msg)
    return tuple(_build_item(v, f"{where}/{key}/{i}") for i, v in enumerate(values))


# -----------------------------
# Item builders
# -----------------------------


def _namespace(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    return NamespaceItem(
        **_common(raw, kind, where),
        members=_members(raw, "exports", where),
    )


def _structured_type(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    type_parameters = raw.get("typeParameters") or []
    if not isinstance(type_parameters, list):
        msg = f"{where}/typeParameters: expected a list"
        raise ModelLoadError(msg)
    return StructuredTypeItem(
        **_common(raw, kind, where),
        kind=kind,
        extends=_optional_str(raw, "extends", where),
        implements=_optional_str(raw, "implements", where),
        type_parameters=tuple(str(t) for t in type_parameters),
        members=_members(raw, "members", where),
    )


def _enum(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    return EnumItem(**_common(raw, kind, where), members=_members(raw, "values", where))


def _enum_value(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    return EnumValueItem(**_common(raw, kind, where))


def _function(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    return FunctionItem(
        **_common(raw, kind, where),
        params=_params(raw, where),
        return_type=_optional_str(raw, "returnType", where),
    )


def _method(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    common = _common(raw, kind, where)
    if kind is ItemKind.CONSTRUCTOR:
        common["name"] = CONSTRUCTOR_NAME
    return MethodItem(
        **common,
        params=_params(raw, where),
        return_type=_optional_str(raw, "returnType", where),
        access_modifier=_access_modifier(raw, where),
        is_optional=bool(raw.get("isOptional", False)),
        is_static=bool(raw.get("isStatic", False)),
    )


def _property(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    return PropertyItem(
        **_common(raw, kind, where),
        type=_optional_str(raw, "type", where),
        is_optional=bool(raw.get("isOptional", False)),
        is_read_only=bool(raw.get("isReadOnly", False)),
        is_static=bool(raw.get("isStatic", False)),
    )


def _module_variable(raw: dict[str, Any], kind: ItemKind, where: str) -> Item:
    common = _common(raw, kind, where)
    value = _optional_str(raw, "value", where)
    declaration = common["declaration"]
    if "value" not in raw and declaration is not None:
        value = declaration.initializer_text()
    return ModuleVariableItem(
        **common,
        type=_optional_str(raw, "type", where),
        value=value,
    )


_BUILDERS: dict[ItemKind, Callable[[dict[str, Any], ItemKind, str], Item]] = {
    ItemKind.NAMESPACE: _namespace,
    ItemKind.CLASS: _structured_type,
    ItemKind.INTERFACE: _structured_type,
    ItemKind.ENUM: _enum,
    ItemKind.ENUM_VALUE: _enum_value,
    ItemKind.FUNCTION: _function,
    ItemKind.METHOD: _method,
    ItemKind.CONSTRUCTOR: _method,
    ItemKind.PROPERTY: _property,
    ItemKind.MODULE_VARIABLE: _module_variable,
}


# -----------------------------
# Shared fields
# -----------------------------


def _common(raw: dict[str, Any], kind: ItemKind, where: str) -> dict[str, Any]:
    """Return the keyword arguments shared by every item."""
    if kind is ItemKind.CONSTRUCTOR and "name" not in raw:
        name = CONSTRUCTOR_NAME
    else:
        name = _require_str(raw, "name", where)
    return {
        "name": name,
        "documentation": _documentation(raw, where),
        "supported_name": bool(raw.get("supportedName", True)),
        "declaration": _declaration(raw, kind, where),
    }


def _documentation(raw: dict[str, Any], where: str) -> Documentation:
    params = raw.get("parameters") or []
    param_docs: dict[str, ParamDoc] = {}
    if isinstance(params, list):
        for i, p in enumerate(params):
            if isinstance(p, dict) and "description" in p:
                name = _require_str(p, "name", f"{where}/parameters/{i}")
                param_docs[name] = ParamDoc(
                    name=name,
                    description=_rich_text(p, "description", f"{where}/parameters/{i}"),
                )

    return Documentation(
        summary=_rich_text(raw, "summary", where),
        remarks=_rich_text(raw, "remarks", where),
        deprecated_message=_rich_text(raw, "deprecatedMessage", where),
        release_tag=_release_tag(raw, where),
        parameters=param_docs,
        returns_message=_rich_text(raw, "returns", where),
    )


def _params(raw: dict[str, Any], where: str) -> tuple[Parameter, ...]:
    params = raw.get("parameters") or []
    if not isinstance(params, list):
        msg = f"{where}/parameters: expected a list"
        raise ModelLoadError(msg)

    result = []
    for i, p in enumerate(params):
        at = f"{where}/parameters/{i}"
        if not isinstance(p, dict):
            msg = f"{at}: expected a mapping"
            raise ModelLoadError(msg)
        result.append(
            Parameter(
                name=_require_str(p, "name", at),
                supported_name=bool(p.get("supportedName", True)),
                type=_optional_str(p, "type", at),
                is_optional=bool(p.get("isOptional", False)),
                is_spread=bool(p.get("isSpread", False)),
            )
        )
    return tuple(result)


def _declaration(raw: dict[str, Any], kind: ItemKind, where: str) -> Declaration | None:
    value = raw.get("declaration")
    if value is None:
        return None
    if isinstance(value, str):
        return Declaration(
            kind=DEFAULT_DECLARATION_KINDS[kind],
            text=value,
            tokens=tokenize_declaration(value),
        )
    if not isinstance(value, dict):
        msg = f"{where}/declaration: expected a string or a mapping"
        raise ModelLoadError(msg)

    text = _optional_str(value, "text", f"{where}/declaration")
    kind_name = value.get("kind")
    try:
        decl_kind = (
            DeclarationKind(str(kind_name).lower())
            if kind_name
            else DEFAULT_DECLARATION_KINDS[kind]
        )
    except ValueError as exc:
        msg = f"{where}/declaration/kind: unknown declaration kind {kind_name!r}"
        raise ModelLoadError(msg) from exc

    tokens = value.get("tokens")
    if tokens is None:
        token_tuple = tokenize_declaration(text)
    elif isinstance(tokens, list):
        token_tuple = tuple(str(t) for t in tokens)
    else:
        msg = f"{where}/declaration/tokens: expected a list"
        raise ModelLoadError(msg)
    return Declaration(kind=decl_kind, text=text, tokens=token_tuple)


def _release_tag(raw: dict[str, Any], where: str) -> ReleaseTag:
    value = raw.get("releaseTag")
    if value is None:
        return ReleaseTag.NONE
    try:
        return ReleaseTag(str(value).strip().lower())
    except ValueError as exc:
        msg = f"{where}/releaseTag: unknown release tag {value!r}"
        raise ModelLoadError(msg) from exc


def _access_modifier(raw: dict[str, Any], where: str) -> AccessModifier | None:
    value = raw.get("accessModifier")
    if not value:
        return None
    try:
        return AccessModifier(str(value).strip().lower())
    except ValueError as exc:
        msg = f"{where}/accessModifier: unknown access modifier {value!r}"
        raise ModelLoadError(msg) from exc


def _rich_text(raw: dict[str, Any], key: str, where: str) -> list[DocElement]:
    try:
        return as_rich_text(raw.get(key))
    except ValueError as exc:
        msg = f"{where}/{key}: {exc}"
        raise ModelLoadError(msg) from exc


def _require_str(raw: dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value:
        msg = f"{where}/{key}: expected a non-empty string"
        raise ModelLoadError(msg)
    return value


def _optional_str(raw: dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        msg = f"{where}/{key}: expected a string"
        raise ModelLoadError(msg)
    return str(value)
