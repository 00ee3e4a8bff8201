from __future__ import annotations

import abc
import codecs
import io
from typing import IO, Any, Protocol


class Decoder(Protocol):
    """Per-stream handle performing one decode pass."""

    def decode(self, target: Any) -> None:
        """Parses the whole stream and populates *target* in place.

        Args:
            target: The configuration value to populate.

        Raises:
            FormatError: The bytes are not valid for the format.
            SchemaError: The parsed data does not fit the shape of *target*.
            OSError: Reading from the stream failed.
        """
        ...


class Encoder(Protocol):
    """Per-stream handle performing one encode pass."""

    def encode(self, source: Any) -> None:
        """Serializes the current state of *source* and writes it to the stream.

        Args:
            source: The configuration value to serialize.

        Raises:
            FormatError: *source* holds something the format cannot represent.
            OSError: Writing to the stream failed.
        """
        ...


class Encoding(Protocol):
    """A serialization format able to open decoders and encoders on streams."""

    name: str

    def new_decoder(self, stream: IO[bytes] | IO[str]) -> Decoder: ...

    def new_encoder(self, stream: IO[bytes] | IO[str]) -> Encoder: ...


class BaseEncoding(abc.ABC):
    """Common base for the built-in encodings.

    Instances carry no state besides their name and can be shared freely.
    """

    name: str = ""

    @abc.abstractmethod
    def new_decoder(self, stream: IO[bytes] | IO[str]) -> Decoder:
        """Returns a decoder reading from *stream*."""
        ...

    @abc.abstractmethod
    def new_encoder(self, stream: IO[bytes] | IO[str]) -> Encoder:
        """Returns an encoder writing to *stream*."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


def read_all(stream: IO[bytes] | IO[str]) -> bytes:
    """Read the rest of *stream* as bytes; text streams are UTF-8 encoded."""
    data = stream.read()
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def _is_text_stream(stream: IO[bytes] | IO[str]) -> bool:
    if isinstance(
        stream, (io.TextIOBase, codecs.StreamWriter, codecs.StreamReaderWriter)
    ):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def write_all(stream: IO[bytes] | IO[str], data: bytes) -> None:
    """Write UTF-8 *data* to *stream*, decoding it first for text streams."""
    if _is_text_stream(stream):
        stream.write(data.decode("utf-8"))  # type: ignore[arg-type]
    else:
        stream.write(data)  # type: ignore[arg-type]
