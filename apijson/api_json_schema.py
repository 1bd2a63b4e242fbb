"""Loading of the bundled API JSON schema and validation of documents against it."""

import functools
import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from apijson.errors import ApiJsonSchemaError, SchemaErrorInfo

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "api-json.schema.json"


@functools.cache
def load_api_json_schema() -> Draft7Validator:
    """Return a validator for the bundled schema.

    The schema is read on first use and kept for the rest of the process.
    """
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    Draft7Validator.check_schema(schema)
    logger.debug("Loaded API JSON schema from %s", SCHEMA_PATH)
    return Draft7Validator(schema)


def json_pointer(error: ValidationError) -> str:
    """Return the JSON pointer of the document location an error refers to."""
    parts = (str(p).replace("~", "~0").replace("/", "~1") for p in error.absolute_path)
    return "".join(f"/{p}" for p in parts)


def collect_schema_errors(document: Any) -> list[SchemaErrorInfo]:
    """Return every schema violation in ``document``, ordered by location."""
    validator = load_api_json_schema()
    errors = [
        SchemaErrorInfo(path=json_pointer(e), message=e.message)
        for e in validator.iter_errors(document)
    ]
    return sorted(errors, key=lambda e: (e.path, e.message))


def validate_api_json(document: Any, file_name: str) -> None:
    """Raise ``ApiJsonSchemaError`` if ``document`` does not match the schema."""
    errors = collect_schema_errors(document)
    if errors:
        raise ApiJsonSchemaError(file_name, errors)
