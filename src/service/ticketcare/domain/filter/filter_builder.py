"""
Per-entity list query builders

Each ``build_*_query`` is a pure function of raw request parameters and
returns a ``ListQuery``. Shared rules:

- An empty free-text query adds no predicate, so it matches every row.
- An absent id parameter adds no predicate.
- Numeric ids go through ``parse_int_leniently``: a value that does not
  parse is treated as absent, the request is not rejected.
"""

import re
from typing import Optional

from src.service.ticketcare.domain.enum.event_status import EventStatus
from src.service.ticketcare.domain.filter.query_filter import (
    AnyOf,
    Contains,
    Equals,
    Join,
    ListQuery,
    OrderBy,
    Page,
    Predicate,
    Quantifier,
    all_of,
)


DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def parse_int_leniently(raw: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of ``raw`` the way browsers' parseInt does.

    '42' -> 42, ' 42abc' -> 42, 'abc' -> None, '' -> None, None -> None.

    A parse failure means "no constraint", never an error. Callers rely on
    this to keep malformed ids from rejecting an otherwise valid listing.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def build_page(*, page: Optional[str], limit: Optional[str]) -> Page:
    page_number = parse_int_leniently(page)
    page_size = parse_int_leniently(limit)
    if page_number is None or page_number < 1:
        page_number = DEFAULT_PAGE
    if page_size is None or page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    return Page(offset=(page_number - 1) * page_size, limit=page_size)


def text_match(query: Optional[str], *fields: str) -> Optional[Predicate]:
    """Any of ``fields`` contains ``query``; None for an empty query."""
    if not query:
        return None
    matches = [Contains(field, query) for field in fields]
    return matches[0] if len(matches) == 1 else AnyOf(matches)


def _organizer_event(organizer_id: Optional[str]) -> Optional[Predicate]:
    if not organizer_id:
        return None
    return Join('event', Equals('organizer_id', organizer_id), Quantifier.HAS)


def build_event_query(*, query: Optional[str] = None) -> ListQuery:
    return ListQuery(
        where=all_of(Equals('status', EventStatus.PUBLISHED), text_match(query, 'title')),
        order_by=(OrderBy('start_time'),),
    )


def build_venue_query(*, query: Optional[str] = None) -> ListQuery:
    return ListQuery(where=all_of(text_match(query, 'name')))


def build_ticket_type_query(
    *, query: Optional[str] = None, event_id: Optional[str] = None
) -> ListQuery:
    parsed_event_id = parse_int_leniently(event_id)
    return ListQuery(
        where=all_of(
            text_match(query, 'name'),
            Equals('event_id', parsed_event_id) if parsed_event_id is not None else None,
        )
    )


def build_time_slot_query(*, event_id: Optional[str] = None) -> ListQuery:
    parsed_event_id = parse_int_leniently(event_id)
    where = (
        Join('event_date', Equals('event_id', parsed_event_id), Quantifier.HAS)
        if parsed_event_id is not None
        else None
    )
    return ListQuery(
        where=all_of(where),
        order_by=(OrderBy('event_date.date'), OrderBy('start_time')),
    )


def build_order_query(
    *,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    organizer_id: Optional[str] = None,
) -> ListQuery:
    search_predicate: Optional[Predicate] = None
    if search:
        customer_match = Join(
            'customer',
            AnyOf(
                [
                    Contains('first_name', search),
                    Contains('last_name', search),
                    Contains('email', search),
                ]
            ),
            Quantifier.HAS,
        )
        numeric_id = parse_int_leniently(search)
        search_predicate = (
            AnyOf([Equals('id', numeric_id), customer_match])
            if numeric_id is not None
            else customer_match
        )

    organizer = _organizer_event(organizer_id)
    return ListQuery(
        where=all_of(
            search_predicate,
            Join('tickets', organizer, Quantifier.EVERY) if organizer else None,
        ),
        order_by=(OrderBy('ordered_at', descending=True),),
        page=build_page(page=page, limit=limit),
    )


def _attendee_query(
    *, query: Optional[str], event: Optional[str], organizer_id: Optional[str]
) -> ListQuery:
    parsed_event_id = parse_int_leniently(event)
    ticket_match = all_of(
        Equals('event_id', parsed_event_id) if parsed_event_id is not None else None,
        _organizer_event(organizer_id),
    )
    # Only people who hold at least one ticket are listed, filters or not
    holds_ticket = Join('orders', Join('tickets', ticket_match, Quantifier.SOME), Quantifier.SOME)
    return ListQuery(
        where=all_of(
            text_match(query, 'first_name', 'last_name', 'email', 'phone'),
            holds_ticket,
        )
    )


def build_customer_query(
    *,
    query: Optional[str] = None,
    event: Optional[str] = None,
    organizer_id: Optional[str] = None,
) -> ListQuery:
    return _attendee_query(query=query, event=event, organizer_id=organizer_id)


def build_user_query(
    *,
    query: Optional[str] = None,
    event: Optional[str] = None,
    organizer_id: Optional[str] = None,
) -> ListQuery:
    return _attendee_query(query=query, event=event, organizer_id=organizer_id)


def build_attendee_order_scope(*, organizer_id: Optional[str] = None) -> Predicate:
    """Orders that count toward a person's orderCount for one organizer (all when absent)."""
    organizer = _organizer_event(organizer_id)
    return all_of(Join('tickets', organizer, Quantifier.SOME) if organizer else None)
