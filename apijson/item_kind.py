"""Kind discriminator for documented items."""

from enum import Enum, auto


class ItemKind(Enum):
    """Internal kind tag of a documented item."""

    PACKAGE = auto()
    NAMESPACE = auto()
    CLASS = auto()
    INTERFACE = auto()
    ENUM = auto()
    ENUM_VALUE = auto()
    FUNCTION = auto()
    METHOD = auto()
    CONSTRUCTOR = auto()
    PROPERTY = auto()
    MODULE_VARIABLE = auto()
    PARAMETER = auto()
