"""
Encoding strategies for configuration values.

Three stateless strategies are provided as module-level constants:

* :data:`JSON`, via the standard library ``json`` module
* :data:`YAML`, via PyYAML
* :data:`TOML`, via ``tomllib`` and ``tomli_w``

Each one opens a decoder on a readable stream or an encoder on a writable
stream; see :class:`Encoding`.
"""

__all__ = [
    "BaseEncoding",
    "Decoder",
    "Encoder",
    "Encoding",
    "JSON",
    "TOML",
    "YAML",
    "get_encoding",
]

import logging

from ._json import JsonEncoding
from ._toml import TomlEncoding
from ._yaml import YamlEncoding
from .base import BaseEncoding, Decoder, Encoder, Encoding

logger = logging.getLogger(__name__)

JSON = JsonEncoding()
YAML = YamlEncoding()
TOML = TomlEncoding()


def get_encoding(name: str) -> BaseEncoding:
    """Returns the built-in encoding registered under *name*.

    Supported names (case-insensitive):
        * "json"
        * "yaml" or "yml"
        * "toml"

    Args:
        name: Name of the format.

    Returns:
        BaseEncoding: One of :data:`JSON`, :data:`YAML` or :data:`TOML`.

    Raises:
        ValueError: If the format name is not supported.
    """
    match name.strip().lower():
        case "json":
            encoding: BaseEncoding = JSON
        case "yaml" | "yml":
            encoding = YAML
        case "toml":
            encoding = TOML
        case _:
            raise ValueError(f"Unsupported encoding: {name!r}")

    logger.debug("Selected %s encoding for %r", encoding.name, name)
    return encoding
