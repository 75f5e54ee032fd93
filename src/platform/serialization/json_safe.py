"""
JSON-safe conversion of database result values

``to_json_safe`` walks a result tree (mappings, sequences, attrs entities,
scalars) and rewrites the scalars JSON cannot carry faithfully:

    Decimal            -> float
    BigInt (64-bit id) -> str, base 10
    datetime           -> str, ISO-8601 in UTC ('2025-07-15T18:00:00.000Z')
    date               -> str, midnight UTC of that date
    anything else      -> unchanged

Containers keep their shape: mappings become dicts, lists and tuples become
lists. Already JSON-safe input comes back equal, so the function is
idempotent. Input is tree-shaped (query results), cycles are not handled.
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from functools import singledispatch
from typing import Any

import attrs

from src.platform.types.big_int_types import BigInt
from src.platform.types.utc_datetime import ensure_utc


@singledispatch
def to_json_safe(value: Any) -> Any:
    if attrs.has(type(value)):
        return to_json_safe(attrs.asdict(value, recurse=False))
    return value


@to_json_safe.register
def _(value: Decimal) -> float:
    return float(value)


@to_json_safe.register
def _(value: BigInt) -> str:
    return str(int(value))


@to_json_safe.register
def _(value: datetime) -> str:
    return iso_utc(value)


@to_json_safe.register
def _(value: date) -> str:
    return iso_utc(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))


@to_json_safe.register
def _(value: Mapping) -> dict[Any, Any]:
    return {key: to_json_safe(item) for key, item in value.items()}


@to_json_safe.register(list)
@to_json_safe.register(tuple)
def _(value: list | tuple) -> list[Any]:
    return [to_json_safe(item) for item in value]


def iso_utc(value: datetime) -> str:
    utc = ensure_utc(value)
    return utc.replace(tzinfo=None).isoformat(timespec='milliseconds') + 'Z'
