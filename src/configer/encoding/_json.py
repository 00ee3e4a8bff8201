from __future__ import annotations

import json
from typing import IO, Any

from configer.binding import bind, unbind
from configer.errors import FormatError

from .base import BaseEncoding, read_all, write_all


class JsonDecoder:
    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream

    def decode(self, target: Any) -> None:
        raw = read_all(self._stream)
        if not raw.strip():
            raise FormatError("Invalid JSON: empty document")
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FormatError(f"Invalid JSON: {e}") from e
        bind(target, data)


class JsonEncoder:
    def __init__(self, stream: IO[bytes] | IO[str]) -> None:
        self._stream = stream

    def encode(self, source: Any) -> None:
        data = unbind(source, mode="json")
        try:
            text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise FormatError(f"Cannot encode JSON: {e}") from e
        write_all(self._stream, (text + "\n").encode("utf-8"))


class JsonEncoding(BaseEncoding):
    """JSON through the standard library ``json`` module.

    Output is compact, one value per line, with record fields in declaration
    order and map keys sorted.
    """

    name = "json"

    def new_decoder(self, stream: IO[bytes] | IO[str]) -> JsonDecoder:
        return JsonDecoder(stream)

    def new_encoder(self, stream: IO[bytes] | IO[str]) -> JsonEncoder:
        return JsonEncoder(stream)
