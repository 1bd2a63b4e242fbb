"""Data models for the documented items of an analyzed API surface.

Items form a read-only tree built once by the upstream analyzer. Every item
carries a ``kind`` discriminator and a shared ``Documentation`` record; the
generator dispatches on ``kind`` and never mutates the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from apijson.access_modifier import AccessModifier
from apijson.declaration import Declaration, DeclarationKind
from apijson.documentation import Documentation
from apijson.item_kind import ItemKind
from apijson.member_order import MemberOrder

# Methods with this name are emitted as constructors.
CONSTRUCTOR_NAME = "__constructor"

STRUCTURED_TYPE_KINDS = frozenset({ItemKind.CLASS, ItemKind.INTERFACE})


@dataclass(frozen=True, kw_only=True)
class ItemBase:
    """Fields shared by every documented item."""

    name: str
    documentation: Documentation = field(default_factory=Documentation)
    supported_name: bool = True
    declaration: Declaration | None = None


@dataclass(frozen=True, kw_only=True)
class ContainerItem(ItemBase):
    """An item that owns an ordered collection of member items."""

    members: tuple[Item, ...] = ()

    def get_sorted_member_items(
        self, order: MemberOrder = MemberOrder.ALPHABETICAL
    ) -> list[Item]:
        """Return the members in the stable order chosen by ``order``."""
        return order.arrange(self.members)


@dataclass(frozen=True, kw_only=True)
class PackageItem(ContainerItem):
    """Root of the tree: the package whose exports are documented."""

    kind: ItemKind = field(default=ItemKind.PACKAGE, init=False)


@dataclass(frozen=True, kw_only=True)
class NamespaceItem(ContainerItem):
    kind: ItemKind = field(default=ItemKind.NAMESPACE, init=False)


@dataclass(frozen=True, kw_only=True)
class StructuredTypeItem(ContainerItem):
    """A class or an interface."""

    kind: ItemKind = ItemKind.CLASS
    extends: str = ""
    implements: str = ""
    type_parameters: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Reject kinds other than class and interface."""
        if self.kind not in STRUCTURED_TYPE_KINDS:
            msg = f"Structured type {self.name!r} cannot have kind {self.kind.name}"
            raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class EnumItem(ContainerItem):
    kind: ItemKind = field(default=ItemKind.ENUM, init=False)


@dataclass(frozen=True, kw_only=True)
class EnumValueItem(ItemBase):
    kind: ItemKind = field(default=ItemKind.ENUM_VALUE, init=False)

    @property
    def value(self) -> str:
        """Literal value text taken from the declaration's trailing token."""
        if self.declaration is None:
            return ""
        return self.declaration.trailing_token()


@dataclass(frozen=True, kw_only=True)
class Parameter(ItemBase):
    """A parameter declared in a function or method signature."""

    kind: ItemKind = field(default=ItemKind.PARAMETER, init=False)
    type: str = ""
    is_optional: bool = False
    is_spread: bool = False


@dataclass(frozen=True, kw_only=True)
class FunctionItem(ItemBase):
    kind: ItemKind = field(default=ItemKind.FUNCTION, init=False)
    params: tuple[Parameter, ...] = ()
    return_type: str = ""


@dataclass(frozen=True, kw_only=True)
class MethodItem(ItemBase):
    """A member function of a class or interface, constructors included."""

    kind: ItemKind = field(default=ItemKind.METHOD, init=False)
    params: tuple[Parameter, ...] = ()
    return_type: str = ""
    access_modifier: AccessModifier | None = None
    is_optional: bool = False
    is_static: bool = False

    @property
    def is_constructor(self) -> bool:
        return self.name == CONSTRUCTOR_NAME

    @property
    def signature(self) -> str:
        """Single-line declaration text, or an empty string without a declaration."""
        if self.declaration is None:
            return ""
        return self.declaration.declaration_line()


@dataclass(frozen=True, kw_only=True)
class PropertyItem(ItemBase):
    kind: ItemKind = field(default=ItemKind.PROPERTY, init=False)
    type: str = ""
    is_optional: bool = False
    is_read_only: bool = False
    is_static: bool = False

    @property
    def is_set_accessor(self) -> bool:
        """Whether the property is declared by a ``set`` accessor."""
        return (
            self.declaration is not None
            and self.declaration.kind is DeclarationKind.SET_ACCESSOR
        )


@dataclass(frozen=True, kw_only=True)
class ModuleVariableItem(ItemBase):
    kind: ItemKind = field(default=ItemKind.MODULE_VARIABLE, init=False)
    type: str = ""
    value: str = ""


Item = (
    PackageItem
    | NamespaceItem
    | StructuredTypeItem
    | EnumItem
    | EnumValueItem
    | FunctionItem
    | MethodItem
    | PropertyItem
    | ModuleVariableItem
    | Parameter
)
