"""Logic for converting model-file values to rich-text sequences."""

from apijson.documentation import DocElement

TEXT_ELEMENT_KIND = "textDocElement"


def as_rich_text(v: object) -> list[DocElement]:
    """Convert a value to a list of doc elements, handling strings, lists and None."""
    if v is None:
        return []
    if isinstance(v, str):
        text = v.strip()
        return [{"kind": TEXT_ELEMENT_KIND, "value": text}] if text else []
    if isinstance(v, dict):
        if not isinstance(v.get("kind"), str):
            msg = f"Doc element is missing a string 'kind': {v!r}"
            raise ValueError(msg)
        return [dict(v)]
    if isinstance(v, list):
        return [element for x in v for element in as_rich_text(x)]
    return as_rich_text(str(v))
