from __future__ import annotations

import tomllib
from typing import IO, Any

import tomli_w

from configer.binding import bind, unbind
from configer.errors import FormatError

from .base import BaseEncoding, read_all, write_all


def _strip_none(data: Any) -> Any:
    """Drop ``None`` table values; TOML has no null."""
    if isinstance(data, dict):
        return {k: _strip_none(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        if any(v is None for v in data):
            raise FormatError("Cannot encode TOML: null inside an array")
        return [_strip_none(v) for v in data]
    return data


class TomlDecoder:
    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream

    def decode(self, target: Any) -> None:
        raw = read_all(self._stream)
        try:
            data = tomllib.loads(raw.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise FormatError(f"Invalid TOML: {e}") from e
        bind(target, data)


class TomlEncoder:
    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream

    def encode(self, source: Any) -> None:
        data = unbind(source, mode="python")
        if not isinstance(data, dict):
            raise FormatError(
                f"Cannot encode TOML: root must be a table, got {type(data).__name__}"
            )
        try:
            text = tomli_w.dumps(_strip_none(data))
        except (TypeError, ValueError) as e:
            raise FormatError(f"Cannot encode TOML: {e}") from e
        write_all(self._stream, text.encode("utf-8"))


class TomlEncoding(BaseEncoding):
    """TOML read with ``tomllib`` and written with ``tomli_w``."""

    name = "toml"

    def new_decoder(self, stream: IO[bytes] | IO[str]) -> TomlDecoder:
        return TomlDecoder(stream)

    def new_encoder(self, stream: IO[bytes] | IO[str]) -> TomlEncoder:
        return TomlEncoder(stream)
