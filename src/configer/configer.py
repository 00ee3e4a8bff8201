"""
Generic configuration reader and writer.
"""

from __future__ import annotations

__all__ = ["Configer"]

import logging
import os
from typing import IO, Generic, TypeVar

from configer.binding import check_bindable
from configer.encoding import Encoding

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Configer(Generic[T]):
    """Binds a configuration object to an encoding.

    :meth:`read` and :meth:`read_from_file` decode a document with the bound
    encoding and store the values into :attr:`config` in place. :meth:`write`
    and :meth:`write_to_file` reverse the process.

    Example::

        @dataclass
        class AppConfig:
            name: str = ""
            port: int = 0

        cfg = AppConfig()
        Configer(cfg, TOML).read_from_file("app.toml")

    Errors raised by the encoding or the file system propagate unchanged.

    Args:
        config: The object to populate and serialize. Must be a non-frozen
            dataclass, a pydantic model, a dict or a list.
        encoding: One of :data:`~configer.JSON`, :data:`~configer.YAML` or
            :data:`~configer.TOML`, or any other :class:`Encoding`.

    Raises:
        ValueError: If *config* is ``None``.
        TypeError: If *config* cannot be updated in place.
    """

    def __init__(self, config: T, encoding: Encoding) -> None:
        check_bindable(config)
        self.config: T = config
        self._encoding = encoding

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    def read(self, src: IO[bytes] | IO[str]) -> None:
        """Decodes the configuration from *src* into :attr:`config`."""
        self._encoding.new_decoder(src).decode(self.config)

    def write(self, dst: IO[bytes] | IO[str]) -> None:
        """Encodes :attr:`config` and writes it to *dst*."""
        self._encoding.new_encoder(dst).encode(self.config)

    def read_from_file(self, path: str | os.PathLike[str]) -> None:
        """Reads and decodes the configuration stored at *path*.

        Args:
            path: File to read.

        Raises:
            OSError: If the file cannot be opened or read. Nothing is decoded
                when opening fails.
            FormatError: If the content is not valid for the encoding.
            SchemaError: If the content does not fit :attr:`config`.
        """
        logger.debug("Reading %s configuration from: %s", self._name, path)
        with open(path, "rb") as f:
            self.read(f)

    def write_to_file(self, path: str | os.PathLike[str]) -> None:
        """Encodes the configuration and writes it to *path*.

        The file is created or truncated. If encoding fails part way, whatever
        was already written stays in the file.

        Args:
            path: Destination file.

        Raises:
            OSError: If the file cannot be created or written.
            FormatError: If :attr:`config` cannot be represented.
        """
        logger.debug("Writing %s configuration to: %s", self._name, path)
        with open(path, "wb") as f:
            self.write(f)

    @property
    def _name(self) -> str:
        return getattr(self._encoding, "name", type(self._encoding).__name__)

    def __repr__(self) -> str:
        return f"Configer({type(self.config).__name__}, {self._name})"
