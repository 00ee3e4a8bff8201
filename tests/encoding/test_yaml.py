import io
from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from configer.encoding import YAML
from configer.errors import FormatError


@dataclass
class Habit:
    name: str = ""
    rating: int = 0


@dataclass
class Profile:
    name: str = ""
    age: int = 0
    habits: list[Habit] = field(default_factory=list)
    birth: datetime | None = None


def test_decode_first_document_only():
    cfg: dict = {}
    YAML.new_decoder(io.StringIO("a: 1\n---\n- not a mapping\n")).decode(cfg)

    assert cfg == {"a": 1}


def test_decode_timestamp():
    cfg = Profile()
    YAML.new_decoder(io.StringIO("birth: 2000-01-01T00:00:00Z\n")).decode(cfg)

    assert cfg.birth == datetime(2000, 1, 1, tzinfo=timezone.utc)


def test_decode_empty_stream():
    with pytest.raises(FormatError, match="empty document"):
        YAML.new_decoder(io.BytesIO(b"")).decode(Profile())


def test_encode_block_style_in_field_order():
    cfg = Profile(name="test", age=18, habits=[Habit("football", 5)])
    buf = io.StringIO()
    YAML.new_encoder(buf).encode(cfg)

    assert buf.getvalue() == (
        "name: test\n"
        "age: 18\n"
        "habits:\n"
        "- name: football\n"
        "  rating: 5\n"
        "birth: null\n"
    )


def test_encode_timestamp_round_trip():
    cfg = Profile(birth=datetime(2000, 1, 1, tzinfo=timezone.utc))
    buf = io.BytesIO()
    YAML.new_encoder(buf).encode(cfg)

    assert b"birth: 2000-01-01 00:00:00+00:00" in buf.getvalue()

    buf.seek(0)
    out = Profile()
    YAML.new_decoder(buf).decode(out)
    assert out == cfg
