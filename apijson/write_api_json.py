"""Logic for writing and validating the API JSON document of a package."""

import json
import logging
from pathlib import Path
from typing import Any

from apijson.api_json_schema import validate_api_json
from apijson.api_json_serializer import ApiJsonSerializer
from apijson.errors import ApiJsonSchemaError
from apijson.items import PackageItem
from apijson.member_order import MemberOrder

logger = logging.getLogger(__name__)


def save_api_json(
    document: dict[str, Any],
    output_path: Path,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> None:
    """Write ``document`` to disk as JSON, keeping its key order."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(document, indent=indent, ensure_ascii=ensure_ascii)
    output_path.write_text(text + "\n", encoding="utf-8")


def save_and_validate(
    document: dict[str, Any],
    output_path: Path,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> None:
    """Persist ``document`` and then check it against the API JSON schema.

    The file is written first so that a non-conforming document can still be
    inspected on disk.
    """
    save_api_json(document, output_path, indent=indent, ensure_ascii=ensure_ascii)
    try:
        validate_api_json(document, output_path.name)
    except ApiJsonSchemaError as exc:
        logger.error(
            "%s does not conform to the expected schema (left at %s):\n%s",
            exc.file_name,
            output_path,
            exc.details,
        )
        raise


def write_api_json(
    output_path: Path,
    package: PackageItem,
    *,
    member_order: MemberOrder = MemberOrder.ALPHABETICAL,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> dict[str, Any]:
    """Serialize ``package``, write it to ``output_path`` and validate it.

    Returns the document. Raises ``ApiJsonSchemaError`` if it does not match
    the schema; the file is left on disk in that case.
    """
    document = ApiJsonSerializer(member_order).serialize(package)
    save_and_validate(document, output_path, indent=indent, ensure_ascii=ensure_ascii)
    logger.info("Wrote %d exports of %s", len(document.get("exports", {})), package.name)
    return document
