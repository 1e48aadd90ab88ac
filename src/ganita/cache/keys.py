from __future__ import annotations

import dataclasses
import json
import typing as t

_STRUCTURED = (dict, list, tuple, set, frozenset)
_JSON_SCALARS = (int, float, bool)


def _json_default(obj: t.Any) -> t.Any:
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return str(obj)


def is_structured(key: t.Any) -> bool:
    if isinstance(key, _STRUCTURED):
        return True
    return dataclasses.is_dataclass(key) and not isinstance(key, type)


def _field_name(key: t.Any) -> str:
    # same text json would emit for the keys it accepts, str() for the rest
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, _JSON_SCALARS):
        return json.dumps(key)
    return str(key)


def _normalize(value: t.Any, sort_keys: bool) -> t.Any:
    if isinstance(value, (set, frozenset)) or (dataclasses.is_dataclass(value) and not isinstance(value, type)):
        value = _json_default(value)
    if isinstance(value, dict):
        items = [(_field_name(k), _normalize(v, sort_keys)) for k, v in value.items()]
        if sort_keys:
            items.sort(key=lambda item: item[0])
        return dict(items)
    if isinstance(value, (list, tuple)):
        return [_normalize(v, sort_keys) for v in value]
    return value


def derive_key(key: t.Any, *, sort_keys: bool = False) -> str:
    """Turn an arbitrary key into the string used for storage.

    Structured values are serialized as compact JSON, everything else goes
    through ``str``. Dict fields keep their insertion order unless
    ``sort_keys`` is set, so ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}``
    derive different keys by default. Dict keys JSON cannot hold (tuples,
    objects) are written as their ``str()``.
    """
    if is_structured(key):
        return json.dumps(
            _normalize(key, sort_keys),
            default=_json_default,
            separators=(",", ":"),
            ensure_ascii=False,
        )
    return str(key)
