import io
from dataclasses import dataclass, field
from enum import Enum

import pytest

from configer.encoding import JSON
from configer.errors import FormatError


class Level(Enum):
    DEBUG = "debug"
    INFO = "info"


@dataclass
class Logging:
    level: Level = Level.INFO
    handlers: dict[str, int] = field(default_factory=dict)
    tags: tuple[str, ...] = ()


def test_decode_ignores_unknown_keys():
    cfg = Logging()
    JSON.new_decoder(io.BytesIO(b'{"level": "debug", "extra": true}')).decode(cfg)

    assert cfg.level is Level.DEBUG


def test_decode_empty_document():
    with pytest.raises(FormatError, match="empty document"):
        JSON.new_decoder(io.BytesIO(b"  \n")).decode(Logging())


def test_decode_invalid_utf8():
    with pytest.raises(FormatError):
        JSON.new_decoder(io.BytesIO(b'{"level": "\xff"}')).decode(Logging())


def test_encode_compact_sorted_maps():
    cfg = Logging(handlers={"stderr": 2, "file": 1}, tags=("a", "b"))
    buf = io.BytesIO()
    JSON.new_encoder(buf).encode(cfg)

    assert buf.getvalue() == (
        b'{"level":"info","handlers":{"file":1,"stderr":2},"tags":["a","b"]}\n'
    )


def test_encode_non_ascii_kept():
    buf = io.BytesIO()
    JSON.new_encoder(buf).encode({"name": "café"})

    assert buf.getvalue().decode("utf-8") == '{"name":"café"}\n'


def test_encode_unserializable_value():
    with pytest.raises(FormatError):
        JSON.new_encoder(io.BytesIO()).encode({"obj": object()})
