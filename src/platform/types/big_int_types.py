"""
64-bit identifier type

Database surrogate keys are BIGINT. JSON consumers (browsers) cannot hold
integers past 2**53 exactly, so these ids travel as strings on the wire
while staying plain ints inside Python.

- ``BigInt``: ``int`` subtype marking a value as a 64-bit identifier.
  ``to_json_safe`` renders it as a decimal string; plain ints stay numbers.
- ``BigIntId``: SQLAlchemy column type. Binds any int-like value and loads
  ``BigInt``. SQLite is given plain ``INTEGER`` so primary keys stay rowid
  aliases (auto-increment) in tests.
- ``BigIntStr``: pydantic annotation accepting ``"42"`` or ``42`` in request
  bodies and serializing back to ``"42"``.
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator
from sqlalchemy import BigInteger, Integer
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine


class BigInt(int):
    def __repr__(self) -> str:
        return f'BigInt({int(self)})'

    def __str__(self) -> str:
        return int.__repr__(self)


class BigIntId(TypeDecorator):
    impl = BigInteger
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == 'sqlite':
            return dialect.type_descriptor(Integer())
        return dialect.type_descriptor(BigInteger())

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        return None if value is None else int(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> BigInt | None:
        return None if value is None else BigInt(value)


def _to_big_int(value: Any) -> BigInt:
    if isinstance(value, bool):
        raise ValueError(f'Invalid id: {value}')
    if isinstance(value, int):
        return BigInt(value)
    try:
        return BigInt(int(str(value).strip()))
    except ValueError as e:
        raise ValueError(f'Invalid id: {value}') from e


BigIntStr = Annotated[
    int,
    PlainValidator(_to_big_int, json_schema_input_type=str | int),
    PlainSerializer(lambda v: str(int(v)), return_type=str),
]
