"""Release tags describing the maturity tier of a documented item."""

from enum import Enum


class ReleaseTag(Enum):
    """Visibility tier assigned to an item by its doc comment."""

    NONE = "none"
    PUBLIC = "public"
    BETA = "beta"
    ALPHA = "alpha"
    INTERNAL = "internal"
