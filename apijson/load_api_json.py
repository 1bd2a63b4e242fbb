"""Logic for reading back a previously written API JSON document."""

import json
import logging
from pathlib import Path
from typing import Any

from apijson.api_json_schema import validate_api_json
from apijson.errors import ApiJsonError, ApiJsonSchemaError

logger = logging.getLogger(__name__)


def load_api_json(path: Path) -> dict[str, Any]:
    """Load an API JSON document and check it against the schema."""
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Could not read API JSON file {path}: {exc}"
        raise ApiJsonError(msg) from exc

    try:
        validate_api_json(document, path.name)
    except ApiJsonSchemaError as exc:
        logger.error(
            "%s does not conform to the expected schema:\n%s", exc.file_name, exc.details
        )
        raise
    return document
