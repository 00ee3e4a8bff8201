"""
Moving values between caller-defined shapes and plain data.

Decoders parse bytes into plain ``dict``/``list``/scalar data and hand it to
:func:`bind`; encoders call :func:`unbind` and serialize what it returns.
Both sides go through a pydantic ``TypeAdapter`` built for the type of the
bound value, so stdlib dataclasses, pydantic dataclasses and models, and
plain ``dict``/``list`` values are all supported.
"""

from __future__ import annotations

__all__ = ["bind", "check_bindable", "unbind"]

import dataclasses
import enum
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Annotated, Any, Literal, get_args, get_origin, get_type_hints

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import FormatError, SchemaError
from .fields import OmitEmpty, is_empty

_NATIVE_LEAVES = (str, int, float, bool, type(None), datetime, date, time)


def _is_record(value: Any) -> bool:
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def check_bindable(value: Any) -> None:
    """Ensure *value* can be populated in place by :func:`bind`.

    Raises:
        ValueError: If *value* is ``None``.
        TypeError: If *value* is immutable or of an unsupported kind.
    """
    if value is None:
        raise ValueError("config must not be None")

    if isinstance(value, BaseModel):
        if value.model_config.get("frozen"):
            raise TypeError(f"{type(value).__name__} is frozen")
        return
    if _is_record(value):
        if type(value).__dataclass_params__.frozen:  # type: ignore[attr-defined]
            raise TypeError(f"{type(value).__name__} is a frozen dataclass")
        return
    if isinstance(value, (dict, list)):
        return

    raise TypeError(
        "config must be a dataclass, a pydantic model, a dict or a list, "
        f"got {type(value).__name__}"
    )


def _assign(target: Any, value: Any) -> None:
    """Copy the contents of *value* into *target*."""
    if isinstance(target, BaseModel):
        fields_set = set(target.model_fields_set)
        for name in type(target).model_fields:
            setattr(target, name, getattr(value, name))
        object.__setattr__(target, "__pydantic_fields_set__", fields_set)
    elif _is_record(target):
        for f in dataclasses.fields(target):
            setattr(target, f.name, getattr(value, f.name))
    elif isinstance(target, dict):
        target.clear()
        target.update(value)
    else:
        target[:] = value


def _overlay(base: Any, doc: Any) -> Any:
    """Lay *doc* over *base*, descending wherever both sides are mappings."""
    if not (isinstance(base, Mapping) and isinstance(doc, Mapping)):
        return doc
    merged = dict(base)
    for key, item in doc.items():
        merged[key] = _overlay(merged[key], item) if key in merged else item
    return merged


def bind(target: Any, data: Any) -> None:
    """Populate *target* in place from decoded plain *data*.

    When both are mappings the document is laid over the current value at
    every depth: keys present in *data* replace the matching fields, nested
    records and maps named in *data* are merged the same way, and everything
    else keeps its current value. Sequences are replaced whole.

    Args:
        target: The bound configuration value.
        data: Plain data produced by a format parser.

    Raises:
        SchemaError: If *data* does not fit the shape of *target*.
    """
    tp = type(target)
    adapter: TypeAdapter[Any] = TypeAdapter(tp)
    doc = data

    if isinstance(data, Mapping):
        if _is_record(target):
            current = adapter.dump_python(target, by_alias=True, round_trip=True)
            data = _overlay(current, data)
        elif isinstance(target, dict):
            data = _overlay(target, data)

    try:
        value = adapter.validate_python(data)
    except ValidationError as e:
        raise SchemaError(
            f"cannot populate {tp.__name__}: {e}", e.errors(include_url=False)
        ) from e

    _assign(target, value)

    if isinstance(target, BaseModel) and isinstance(doc, Mapping):
        # only the fields named by the document become "set"
        fields = _record_fields(tp)
        fields_set = set(target.model_fields_set)
        fields_set.update(fields[k][0] for k in doc if k in fields)
        object.__setattr__(target, "__pydantic_fields_set__", fields_set)


def _annotated_extras(annotation: Any) -> tuple[Any, ...]:
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[1:]
    return ()


def _field_key(name: str, info: FieldInfo | None) -> str:
    if info is None:
        return name
    return info.serialization_alias or info.alias or name


def _record_fields(cls: type) -> dict[str, tuple[str, bool]]:
    """Map each serialized key of *cls* to ``(attribute name, omit_empty)``."""
    out: dict[str, tuple[str, bool]] = {}

    if issubclass(cls, BaseModel):
        for name, info in cls.model_fields.items():
            omit = any(m is OmitEmpty for m in info.metadata)
            out[_field_key(name, info)] = (name, omit)
        return out

    hints = get_type_hints(cls, include_extras=True)
    for f in dataclasses.fields(cls):
        extras = _annotated_extras(hints.get(f.name))
        info: FieldInfo | None = None
        for m in extras:
            if isinstance(m, FieldInfo):
                info = m
        if isinstance(f.default, FieldInfo):
            info = f.default
        omit = any(m is OmitEmpty for m in extras)
        out[_field_key(f.name, info)] = (f.name, omit)
    return out


def _leaf(data: Any) -> Any:
    if type(data) in _NATIVE_LEAVES:
        return data
    if isinstance(data, enum.Enum):
        return _leaf(data.value)
    if isinstance(data, _NATIVE_LEAVES):
        return data
    try:
        return to_jsonable_python(data)
    except PydanticSerializationError as e:
        raise FormatError(f"cannot serialize {type(data).__name__}: {e}") from e


def _prune(value: Any, data: Any) -> Any:
    """Walk *value* and its dump together, applying field annotations.

    Drops empty :data:`OmitEmpty` fields of records, sorts map keys and turns
    tuples and sets into lists.
    """
    if _is_record(value) and isinstance(data, dict):
        fields = _record_fields(type(value))
        out: dict[Any, Any] = {}
        for key, item in data.items():
            entry = fields.get(key)
            if entry is None:
                out[key] = _prune(None, item)
                continue
            name, omit = entry
            attr = getattr(value, name)
            if omit and is_empty(attr):
                continue
            out[key] = _prune(attr, item)
        return out

    if isinstance(data, dict):
        values = list(value.values()) if isinstance(value, Mapping) else []
        if len(values) != len(data):
            values = [None] * len(data)
        pairs = [(k, _prune(v, d)) for (k, d), v in zip(data.items(), values)]
        return dict(sorted(pairs, key=lambda kv: str(kv[0])))

    if isinstance(data, (list, tuple, set, frozenset)):
        items = list(data)
        values = list(value) if isinstance(value, (list, tuple)) else []
        if len(values) != len(items):
            values = [None] * len(items)
        return [_prune(v, d) for v, d in zip(values, items)]

    return _leaf(data)


def unbind(value: Any, *, mode: Literal["json", "python"] = "json") -> Any:
    """Dump *value* to plain data ready for a format serializer.

    Args:
        value: The bound configuration value.
        mode: ``"json"`` produces JSON-compatible data only; ``"python"``
            keeps ``datetime``, ``date`` and ``time`` objects for formats
            with native timestamps.

    Returns:
        Plain data using serialized field names.

    Raises:
        FormatError: If part of *value* cannot be serialized.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(type(value))
    try:
        data = adapter.dump_python(value, mode=mode, by_alias=True)
    except PydanticSerializationError as e:
        raise FormatError(f"cannot serialize {type(value).__name__}: {e}") from e
    return _prune(value, data)
