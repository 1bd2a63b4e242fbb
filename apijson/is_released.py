"""Predicate for checking if a release tag belongs to the released surface."""

from apijson.release_tag import ReleaseTag

RELEASED_TAGS = frozenset({ReleaseTag.NONE, ReleaseTag.PUBLIC, ReleaseTag.BETA})


def is_released(tag: ReleaseTag) -> bool:
    """Check if items carrying the tag are written to the document."""
    return tag in RELEASED_TAGS
