"""
ListQuery -> SQLAlchemy

Translates the persistence-neutral filter description into clauses against
a declarative model:

    Contains  -> column.icontains(value, autoescape=True)
    Equals    -> column == value
    Join HAS  -> relationship.has(...)
    Join SOME -> relationship.any(...)
    Join EVERY-> ~relationship.any(~...)   (true when there are no rows)
    AnyOf     -> or_(...)
    AllOf     -> and_(...), true() when empty
"""

from functools import singledispatch
from typing import Any, Optional, Tuple, Type

from sqlalchemy import ColumnElement, Select, and_, false, func, not_, or_, select, true
from sqlalchemy.orm import InstrumentedAttribute, RelationshipProperty, aliased

from src.service.ticketcare.domain.filter.query_filter import (
    AllOf,
    AnyOf,
    Contains,
    Equals,
    Join,
    ListQuery,
    OrderBy,
    Predicate,
    Quantifier,
)


def to_clause(predicate: Predicate, model: Type[Any]) -> ColumnElement[bool]:
    return _translate(predicate, model)


@singledispatch
def _translate(predicate: Any, model: Type[Any]) -> ColumnElement[bool]:
    raise TypeError(f'Unsupported predicate: {predicate!r}')


@_translate.register
def _(predicate: Contains, model: Type[Any]) -> ColumnElement[bool]:
    return _column(model, predicate.field).icontains(predicate.value, autoescape=True)


@_translate.register
def _(predicate: Equals, model: Type[Any]) -> ColumnElement[bool]:
    return _column(model, predicate.field) == predicate.value


@_translate.register
def _(predicate: Join, model: Type[Any]) -> ColumnElement[bool]:
    relation = _column(model, predicate.relation)
    target = _related_model(relation)
    inner = _translate(predicate.predicate, target)
    if predicate.quantifier is Quantifier.HAS:
        return relation.has(inner)
    if predicate.quantifier is Quantifier.SOME:
        return relation.any(inner)
    return not_(relation.any(not_(inner)))


@_translate.register
def _(predicate: AnyOf, model: Type[Any]) -> ColumnElement[bool]:
    if not predicate.predicates:
        return false()
    return or_(*(_translate(p, model) for p in predicate.predicates))


@_translate.register
def _(predicate: AllOf, model: Type[Any]) -> ColumnElement[bool]:
    if not predicate.predicates:
        return true()
    return and_(*(_translate(p, model) for p in predicate.predicates))


def apply_where(stmt: Select[Any], query: ListQuery, model: Type[Any]) -> Select[Any]:
    return stmt.where(to_clause(query.where, model))


def apply_order_and_page(stmt: Select[Any], query: ListQuery, model: Type[Any]) -> Select[Any]:
    for order in query.order_by:
        stmt, column = _order_column(stmt, model, order)
        stmt = stmt.order_by(column.desc() if order.descending else column.asc())
    if query.page is not None:
        stmt = stmt.offset(query.page.offset).limit(query.page.limit)
    return stmt


def build_select(model: Type[Any], query: ListQuery) -> Select[Any]:
    """SELECT model WHERE ... ORDER BY ... OFFSET/LIMIT ..."""
    stmt = apply_where(select(model), query, model)
    return apply_order_and_page(stmt, query, model)


def build_count(model: Type[Any], query: ListQuery) -> Select[Tuple[int]]:
    """SELECT count(*) over the same WHERE, ignoring order and page."""
    return select(func.count()).select_from(model).where(to_clause(query.where, model))


def _column(model: Type[Any], name: str) -> InstrumentedAttribute[Any]:
    attribute = getattr(model, name, None)
    if attribute is None:
        raise AttributeError(f"{getattr(model, '__name__', model)} has no attribute {name!r}")
    return attribute


def _related_model(relation: InstrumentedAttribute[Any]) -> Type[Any]:
    prop = relation.property
    if not isinstance(prop, RelationshipProperty):
        raise TypeError(f'{relation} is not a relationship')
    return prop.mapper.class_


def _order_column(
    stmt: Select[Any], model: Type[Any], order: OrderBy
) -> Tuple[Select[Any], InstrumentedAttribute[Any]]:
    *relations, field = order.field.split('.')
    current: Type[Any] = model
    alias: Optional[Any] = None
    for name in relations:
        relation = _column(alias if alias is not None else current, name)
        current = _related_model(relation)
        alias = aliased(current)
        stmt = stmt.join(relation.of_type(alias))
    return stmt, _column(alias if alias is not None else current, field)
