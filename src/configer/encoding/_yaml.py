from __future__ import annotations

from typing import IO, Any

import yaml

from configer.binding import bind, unbind
from configer.errors import FormatError

from .base import BaseEncoding, read_all, write_all


class YamlDecoder:
    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream

    def decode(self, target: Any) -> None:
        raw = read_all(self._stream)
        try:
            # Only the first document is parsed.
            docs = yaml.safe_load_all(raw)
            data = next(docs, None)
            docs.close()
        except yaml.YAMLError as e:
            raise FormatError(f"Invalid YAML: {e}") from e
        if data is None and not raw.strip():
            raise FormatError("Invalid YAML: empty document")
        bind(target, data)


class YamlEncoder:
    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream

    def encode(self, source: Any) -> None:
        data = unbind(source, mode="python")
        try:
            text = yaml.safe_dump(
                data,
                allow_unicode=True,
                sort_keys=False,
                default_flow_style=False,
            )
        except yaml.YAMLError as e:
            raise FormatError(f"Cannot encode YAML: {e}") from e
        write_all(self._stream, text.encode("utf-8"))


class YamlEncoding(BaseEncoding):
    """YAML through PyYAML's safe loader and dumper.

    Timestamps such as ``2000-01-01T00:00:00Z`` decode to ``datetime``
    values and ``datetime`` fields encode as YAML timestamps.
    """

    name = "yaml"

    def new_decoder(self, stream: IO[bytes] | IO[str]) -> YamlDecoder:
        return YamlDecoder(stream)

    def new_encoder(self, stream: IO[bytes] | IO[str]) -> YamlEncoder:
        return YamlEncoder(stream)
