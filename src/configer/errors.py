from typing import Any


class ConfigError(Exception):
    """Base class for configuration encoding failures."""


class FormatError(ConfigError, ValueError):
    """The bytes are not valid for the format, or the value cannot be encoded."""


class SchemaError(ConfigError, ValueError):
    """Well-formed input that does not fit the shape of the bound value.

    Attributes:
        errors: Validation error details reported by pydantic, one dict per
            offending location.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors: list[dict[str, Any]] = errors or []
