"""
Read and write configuration objects as JSON, YAML or TOML.
"""

__all__ = [
    "Configer",
    "BaseEncoding",
    "Decoder",
    "Encoder",
    "Encoding",
    "JSON",
    "TOML",
    "YAML",
    "get_encoding",
    "ConfigError",
    "FormatError",
    "SchemaError",
    "Duration",
    "OmitEmpty",
    "format_duration",
    "parse_duration",
    "user_config_file",
]

from .configer import Configer
from .encoding import (
    JSON,
    TOML,
    YAML,
    BaseEncoding,
    Decoder,
    Encoder,
    Encoding,
    get_encoding,
)
from .errors import ConfigError, FormatError, SchemaError
from .fields import Duration, OmitEmpty, format_duration, parse_duration
from .paths import user_config_file
from .version import __version__ as __version__

__title__ = "configer"
__description__ = "A uniform read/write facade over JSON, YAML and TOML configs."
__license__ = "Apache-2.0"
