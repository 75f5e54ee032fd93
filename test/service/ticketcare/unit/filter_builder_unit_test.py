"""
Unit tests for the list query builders

Test Focus:
1. parse_int_leniently follows parseInt: leading digits, failure means absent
2. Empty query / absent ids add no predicate (match all)
3. Each builder's where / order / page description
"""

import pytest

from src.service.ticketcare.domain.enum.event_status import EventStatus
from src.service.ticketcare.domain.filter.filter_builder import (
    build_attendee_order_scope,
    build_customer_query,
    build_event_query,
    build_order_query,
    build_page,
    build_ticket_type_query,
    build_time_slot_query,
    build_user_query,
    build_venue_query,
    parse_int_leniently,
    text_match,
)
from src.service.ticketcare.domain.filter.query_filter import (
    MATCH_ALL,
    AllOf,
    AnyOf,
    Contains,
    Equals,
    Join,
    OrderBy,
    Page,
    Quantifier,
    all_of,
)


@pytest.mark.unit
class TestParseIntLeniently:
    @pytest.mark.parametrize(
        'raw,expected',
        [
            ('42', 42),
            ('  42abc', 42),
            ('-3', -3),
            ('+8', 8),
            ('007', 7),
            ('abc', None),
            ('', None),
            (None, None),
            ('4.9', 4),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_int_leniently(raw) == expected


@pytest.mark.unit
class TestBuildPage:
    def test_defaults(self):
        assert build_page(page=None, limit=None) == Page(offset=0, limit=10)

    def test_second_page(self):
        assert build_page(page='2', limit='10') == Page(offset=10, limit=10)

    @pytest.mark.parametrize('page,limit', [('0', '0'), ('-1', '-5'), ('abc', 'xyz')])
    def test_non_positive_or_garbage_falls_back(self, page, limit):
        assert build_page(page=page, limit=limit) == Page(offset=0, limit=10)


@pytest.mark.unit
class TestAllOf:
    def test_skips_absent_predicates(self):
        assert all_of(None, None) == MATCH_ALL

    def test_single_predicate_is_unwrapped(self):
        predicate = Equals('id', 1)
        assert all_of(None, predicate) == predicate

    def test_match_all_is_dropped(self):
        predicate = Equals('id', 1)
        assert all_of(MATCH_ALL, predicate) == predicate

    def test_many_become_conjunction(self):
        a, b = Equals('id', 1), Contains('name', 'x')
        assert all_of(a, b) == AllOf((a, b))


@pytest.mark.unit
class TestTextMatch:
    def test_empty_query_is_none(self):
        assert text_match('', 'title') is None
        assert text_match(None, 'title') is None

    def test_one_field(self):
        assert text_match('rock', 'title') == Contains('title', 'rock')

    def test_many_fields(self):
        assert text_match('ann', 'first_name', 'email') == AnyOf(
            (Contains('first_name', 'ann'), Contains('email', 'ann'))
        )


@pytest.mark.unit
class TestCatalogBuilders:
    def test_event_query_published_and_ordered(self):
        query = build_event_query(query='fest')

        assert query.where == AllOf(
            (Equals('status', EventStatus.PUBLISHED), Contains('title', 'fest'))
        )
        assert query.order_by == (OrderBy('start_time'),)
        assert query.page is None

    def test_event_query_without_text_still_filters_status(self):
        assert build_event_query().where == Equals('status', EventStatus.PUBLISHED)

    def test_venue_query_empty_matches_all(self):
        assert build_venue_query(query='').where == MATCH_ALL

    def test_ticket_type_query_with_event(self):
        query = build_ticket_type_query(query='vip', event_id='12')

        assert query.where == AllOf((Contains('name', 'vip'), Equals('event_id', 12)))

    def test_ticket_type_query_ignores_unparsable_event(self):
        assert build_ticket_type_query(event_id='not-a-number').where == MATCH_ALL

    def test_time_slot_query(self):
        query = build_time_slot_query(event_id='5')

        assert query.where == Join('event_date', Equals('event_id', 5), Quantifier.HAS)
        assert query.order_by == (OrderBy('event_date.date'), OrderBy('start_time'))

    def test_time_slot_query_without_event(self):
        assert build_time_slot_query().where == MATCH_ALL


@pytest.mark.unit
class TestOrderBuilder:
    def test_defaults_newest_first_first_page(self):
        query = build_order_query()

        assert query.where == MATCH_ALL
        assert query.order_by == (OrderBy('ordered_at', descending=True),)
        assert query.page == Page(offset=0, limit=10)

    def test_text_search_matches_customer_fields(self):
        query = build_order_query(search='ann')

        assert query.where == Join(
            'customer',
            AnyOf(
                (
                    Contains('first_name', 'ann'),
                    Contains('last_name', 'ann'),
                    Contains('email', 'ann'),
                )
            ),
            Quantifier.HAS,
        )

    def test_numeric_search_also_matches_order_id(self):
        query = build_order_query(search='17')

        assert isinstance(query.where, AnyOf)
        assert query.where.predicates[0] == Equals('id', 17)
        assert isinstance(query.where.predicates[1], Join)

    def test_organizer_scope_requires_every_ticket(self):
        query = build_order_query(organizer_id='org_1', page='3', limit='5')

        assert query.where == Join(
            'tickets',
            Join('event', Equals('organizer_id', 'org_1'), Quantifier.HAS),
            Quantifier.EVERY,
        )
        assert query.page == Page(offset=10, limit=5)


@pytest.mark.unit
class TestAttendeeBuilders:
    def test_customers_always_require_a_ticket(self):
        query = build_customer_query()

        assert query.where == Join(
            'orders', Join('tickets', MATCH_ALL, Quantifier.SOME), Quantifier.SOME
        )

    def test_customers_filtered_by_event_and_organizer(self):
        query = build_customer_query(query='ann', event='3', organizer_id='org_1')

        text, holds_ticket = query.where.predicates
        assert isinstance(text, AnyOf)
        assert len(text.predicates) == 4
        assert holds_ticket == Join(
            'orders',
            Join(
                'tickets',
                AllOf(
                    (
                        Equals('event_id', 3),
                        Join('event', Equals('organizer_id', 'org_1'), Quantifier.HAS),
                    )
                ),
                Quantifier.SOME,
            ),
            Quantifier.SOME,
        )

    def test_users_share_the_customer_rules(self):
        assert build_user_query(query='bo', event='1') == build_customer_query(
            query='bo', event='1'
        )

    def test_order_scope_all_orders_without_organizer(self):
        assert build_attendee_order_scope() == MATCH_ALL

    def test_order_scope_for_organizer(self):
        assert build_attendee_order_scope(organizer_id='org_2') == Join(
            'tickets',
            Join('event', Equals('organizer_id', 'org_2'), Quantifier.HAS),
            Quantifier.SOME,
        )
