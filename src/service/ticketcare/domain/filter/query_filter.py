"""
Filter descriptions for list queries

A ``ListQuery`` says which rows of one entity to return, in which order and
which slice, without naming any persistence technology. Predicates form a
small closed union:

    Contains(field, value)            case-insensitive substring match
    Equals(field, value)              equality / foreign-key id match
    Join(relation, predicate, q)      follow a relation; q is HAS (to-one),
                                      SOME or EVERY (to-many)
    AnyOf(predicates) / AllOf(...)    disjunction / conjunction

Fields and relations are attribute names of the target entity. ``OrderBy``
fields may be dotted paths through to-one relations ('event_date.date').

The persistence adapter (``filter_translator``) is the only code that turns
these into SQL.
"""

from enum import StrEnum
from typing import Any, Optional, Tuple, Union

import attrs


class Quantifier(StrEnum):
    HAS = 'has'
    SOME = 'some'
    EVERY = 'every'


@attrs.frozen
class Contains:
    field: str
    value: str


@attrs.frozen
class Equals:
    field: str
    value: Any


@attrs.frozen
class Join:
    relation: str
    predicate: 'Predicate'
    quantifier: Quantifier = Quantifier.HAS


@attrs.frozen
class AnyOf:
    predicates: Tuple['Predicate', ...] = attrs.field(converter=tuple)


@attrs.frozen
class AllOf:
    predicates: Tuple['Predicate', ...] = attrs.field(converter=tuple, default=())


Predicate = Union[Contains, Equals, Join, AnyOf, AllOf]

MATCH_ALL = AllOf(())


@attrs.frozen
class OrderBy:
    field: str
    descending: bool = False


@attrs.frozen
class Page:
    offset: int
    limit: int


@attrs.frozen
class ListQuery:
    where: Predicate = MATCH_ALL
    order_by: Tuple[OrderBy, ...] = attrs.field(converter=tuple, default=())
    page: Optional[Page] = None


def all_of(*predicates: Optional[Predicate]) -> Predicate:
    """Conjunction of the given predicates, skipping absent ones."""
    present = tuple(p for p in predicates if p is not None and p != MATCH_ALL)
    if not present:
        return MATCH_ALL
    if len(present) == 1:
        return present[0]
    return AllOf(present)
