"""Ordering policies for the members of container items."""

from collections.abc import Sequence
from enum import Enum
from typing import Protocol, TypeVar


class _Named(Protocol):
    @property
    def name(self) -> str: ...


NamedT = TypeVar("NamedT", bound=_Named)


class MemberOrder(Enum):
    """Stable order in which a container enumerates its members.

    ``ALPHABETICAL`` sorts by case-folded name (ties broken by the exact name),
    which is what published API files have always used. ``DECLARATION`` keeps
    the order in which the analyzer added the members.
    """

    ALPHABETICAL = "alphabetical"
    DECLARATION = "declaration"

    def arrange(self, members: Sequence[NamedT]) -> list[NamedT]:
        """Return the members in this order, leaving the input untouched."""
        if self is MemberOrder.DECLARATION:
            return list(members)
        return sorted(members, key=lambda m: (m.name.casefold(), m.name))
