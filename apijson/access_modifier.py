"""Access modifiers that can be declared on a class member."""

from enum import Enum


class AccessModifier(Enum):
    """Whether a member is public, private, or protected."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
