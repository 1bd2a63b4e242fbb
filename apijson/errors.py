"""Exceptions raised while loading models and producing API JSON documents."""

from collections.abc import Sequence
from dataclasses import dataclass


class ApiJsonError(Exception):
    """Base class for all errors reported by the generator."""


class ModelLoadError(ApiJsonError):
    """A documented item model file could not be read."""


class ConfigError(ApiJsonError):
    """A configuration value is invalid."""


@dataclass(frozen=True)
class SchemaErrorInfo:
    """One schema violation: where it occurred and why."""

    path: str  # JSON pointer into the document, "" for the root
    message: str

    def __str__(self) -> str:
        """Render as ``<path>: <message>``."""
        return f"{self.path or '/'}: {self.message}"


class ApiJsonSchemaError(ApiJsonError):
    """A document does not conform to the API JSON schema."""

    def __init__(self, file_name: str, errors: Sequence[SchemaErrorInfo]) -> None:
        """Record the offending file and every violation found in it."""
        self.file_name = file_name
        self.errors = list(errors)
        super().__init__(
            f"{file_name} does not conform to the expected schema:\n{self.details}"
        )

    @property
    def details(self) -> str:
        """Violations, one per line."""
        return "\n".join(str(e) for e in self.errors)
