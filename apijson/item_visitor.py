"""Generic recursive traversal over the documented item tree."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from apijson.is_released import is_released
from apijson.item_kind import ItemKind
from apijson.items import Item

logger = logging.getLogger(__name__)

JsonObject = dict[str, Any]
Handler = Callable[[Any, JsonObject], None]


class ItemVisitor:
    """Dispatches items to per-kind handlers behind a single visibility gate.

    Handlers write into the ``target`` container they are given and call back
    into ``visit`` for nested members, so an item that fails the gate takes
    its whole subtree with it.
    """

    def __init__(self, handlers: Mapping[ItemKind, Handler], fallback: Handler) -> None:
        """Initialize with a kind -> handler table and a handler for other kinds."""
        self._handlers = dict(handlers)
        self._fallback = fallback

    def visit(self, item: Item, target: JsonObject) -> None:
        """Process ``item`` into ``target`` unless its release tag hides it."""
        tag = item.documentation.release_tag
        if not is_released(tag):
            logger.debug("Skipping %s (@%s)", item.name, tag.value)
            return

        handler = self._handlers.get(item.kind, self._fallback)
        handler(item, target)
