"""Canonical serialization of a documented package into an API JSON document.

For a library such as "example-package" this produces the content of
"example-package.api.json": the released API surface of the package, with
members listed in the order the item model enumerates them. Keys within every
node are inserted in a fixed order so that documents diff cleanly between
versions.
"""

import logging
from typing import Any

from apijson.documentation import Documentation
from apijson.item_kind import ItemKind
from apijson.item_visitor import ItemVisitor, JsonObject
from apijson.items import (
    ContainerItem,
    EnumItem,
    EnumValueItem,
    FunctionItem,
    Item,
    MethodItem,
    ModuleVariableItem,
    NamespaceItem,
    PackageItem,
    PropertyItem,
    StructuredTypeItem,
)
from apijson.kind_names import convert_kind_to_json
from apijson.member_order import MemberOrder

logger = logging.getLogger(__name__)

MEMBERS_KEY = "members"
VALUES_KEY = "values"
EXPORTS_KEY = "exports"


class ApiJsonSerializer:
    """Builds the API JSON document, one handler per item kind."""

    def __init__(self, member_order: MemberOrder = MemberOrder.ALPHABETICAL) -> None:
        """Initialize with the order in which containers enumerate members."""
        self.member_order = member_order
        self._visitor = ItemVisitor(
            {
                ItemKind.PACKAGE: self._visit_package,
                ItemKind.NAMESPACE: self._visit_namespace,
                ItemKind.CLASS: self._visit_structured_type,
                ItemKind.INTERFACE: self._visit_structured_type,
                ItemKind.ENUM: self._visit_enum,
                ItemKind.ENUM_VALUE: self._visit_enum_value,
                ItemKind.FUNCTION: self._visit_function,
                ItemKind.METHOD: self._visit_method,
                ItemKind.PROPERTY: self._visit_property,
                ItemKind.MODULE_VARIABLE: self._visit_module_variable,
            },
            fallback=self._visit_member,
        )

    def serialize(self, package: PackageItem) -> JsonObject:
        """Return the document for ``package`` as a fresh dictionary."""
        document: JsonObject = {}
        self.visit(package, document)
        return document

    def visit(self, item: Item, target: JsonObject) -> None:
        """Write ``item`` (and its released members) into ``target``."""
        self._visitor.visit(item, target)

    def _visit_members(self, container: ContainerItem, target: JsonObject) -> None:
        for member in container.get_sorted_member_items(self.member_order):
            self.visit(member, target)

    # -----------------------------
    # Containers
    # -----------------------------

    def _visit_package(self, package: PackageItem, target: JsonObject) -> None:
        target["kind"] = convert_kind_to_json(package.kind)
        target["summary"] = list(package.documentation.summary)
        target["remarks"] = list(package.documentation.remarks)

        exports: JsonObject = {}
        target[EXPORTS_KEY] = exports
        self._visit_members(package, exports)

    def _visit_namespace(self, namespace: NamespaceItem, target: JsonObject) -> None:
        if not namespace.supported_name:
            return

        exports: JsonObject = {}
        self._visit_members(namespace, exports)

        target[namespace.name] = {
            "kind": convert_kind_to_json(namespace.kind),
            **_doc_fields(namespace.documentation),
            "isBeta": namespace.documentation.is_beta,
            EXPORTS_KEY: exports,
        }

    def _visit_structured_type(
        self, structured_type: StructuredTypeItem, target: JsonObject
    ) -> None:
        if not structured_type.supported_name:
            return

        members: JsonObject = {}
        target[structured_type.name] = {
            "kind": convert_kind_to_json(structured_type.kind),
            "extends": structured_type.extends or "",
            "implements": structured_type.implements or "",
            "typeParameters": list(structured_type.type_parameters),
            **_doc_fields(structured_type.documentation),
            "isBeta": structured_type.documentation.is_beta,
            MEMBERS_KEY: members,
        }
        self._visit_members(structured_type, members)

    def _visit_enum(self, enum: EnumItem, target: JsonObject) -> None:
        if not enum.supported_name:
            return

        values: JsonObject = {}
        target[enum.name] = {
            "kind": convert_kind_to_json(enum.kind),
            VALUES_KEY: values,
            **_doc_fields(enum.documentation),
            "isBeta": enum.documentation.is_beta,
        }
        self._visit_members(enum, values)

    # -----------------------------
    # Leaves
    # -----------------------------

    def _visit_enum_value(self, enum_value: EnumValueItem, target: JsonObject) -> None:
        if not enum_value.supported_name:
            return

        target[enum_value.name] = {
            "kind": convert_kind_to_json(enum_value.kind),
            "value": enum_value.value,
            **_doc_fields(enum_value.documentation),
            "isBeta": enum_value.documentation.is_beta,
        }

    def _visit_function(self, function: FunctionItem, target: JsonObject) -> None:
        if not function.supported_name:
            return

        target[function.name] = {
            "kind": convert_kind_to_json(function.kind),
            "returnValue": _return_value(function),
            "parameters": _parameters(function),
            **_doc_fields(function.documentation),
            "isBeta": function.documentation.is_beta,
        }

    def _visit_method(self, method: MethodItem, target: JsonObject) -> None:
        if not method.supported_name:
            return

        doc = method.documentation
        parameters = _parameters(method)

        if method.is_constructor:
            node: JsonObject = {
                "kind": convert_kind_to_json(ItemKind.CONSTRUCTOR),
                "signature": method.signature,
                "parameters": parameters,
                **_doc_fields(doc),
            }
        else:
            modifier = method.access_modifier
            node = {
                "kind": convert_kind_to_json(method.kind),
                "signature": method.signature,
                "accessModifier": modifier.name.lower() if modifier else "",
                "isOptional": method.is_optional,
                "isStatic": method.is_static,
                "returnValue": _return_value(method),
                "parameters": parameters,
                **_doc_fields(doc),
                "isBeta": doc.is_beta,
            }

        target[method.name] = node

    def _visit_property(self, prop: PropertyItem, target: JsonObject) -> None:
        if not prop.supported_name:
            return

        # The getter, when there is one, represents the property.
        if prop.is_set_accessor:
            return

        target[prop.name] = {
            "kind": convert_kind_to_json(prop.kind),
            "isOptional": prop.is_optional,
            "isReadOnly": prop.is_read_only,
            "isStatic": prop.is_static,
            "type": prop.type,
            **_doc_fields(prop.documentation),
            "isBeta": prop.documentation.is_beta,
        }

    def _visit_module_variable(
        self, variable: ModuleVariableItem, target: JsonObject
    ) -> None:
        if not variable.supported_name:
            return

        target[variable.name] = {
            "kind": convert_kind_to_json(variable.kind),
            "type": variable.type,
            "value": variable.value or "",
            **_doc_fields(variable.documentation),
            "isBeta": variable.documentation.is_beta,
        }

    def _visit_member(self, item: Any, target: JsonObject) -> None:
        """Write a placeholder for kinds that have no dedicated handler."""
        if not item.supported_name:
            return

        declaration = item.declaration
        label = declaration.kind.value if declaration else convert_kind_to_json(item.kind)
        logger.warning("No serializer for %s %r", label, item.name)
        target[item.name] = f"member-{label}"


def _doc_fields(doc: Documentation) -> JsonObject:
    """Return the deprecation, summary and remarks fields of a node."""
    return {
        "deprecatedMessage": list(doc.deprecated_message),
        "summary": list(doc.summary),
        "remarks": list(doc.remarks),
    }


def _return_value(item: FunctionItem | MethodItem) -> JsonObject:
    return {
        "type": item.return_type,
        "description": list(item.documentation.returns_message),
    }


def _parameters(item: FunctionItem | MethodItem) -> JsonObject:
    """Combine each declared parameter with its documentation entry.

    Entries are keyed by declared name in signature order. A parameter without
    documentation still gets an entry with an empty description.
    """
    documented = item.documentation.parameters
    node: JsonObject = {}
    for param in item.params:
        if not param.supported_name:
            continue
        param_doc = documented.get(param.name)
        node[param.name] = {
            "name": param.name,
            "description": list(param_doc.description) if param_doc else [],
            "isOptional": param.is_optional,
            "isSpread": param.is_spread,
            "type": param.type,
        }

    declared = {param.name for param in item.params}
    for name in documented:
        if name not in declared:
            logger.debug("Documented parameter %r is not declared by %r", name, item.name)
    return node
