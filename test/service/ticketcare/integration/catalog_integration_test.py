"""
Catalog lookups over HTTP

Test Focus:
1. Only published events are listed, earliest first
2. Case-insensitive contains search; '%' and '_' are literal
3. Unparseable ids are ignored instead of rejected
4. Ids travel as strings, dates as ISO-8601 UTC
"""

from datetime import date, timedelta

from fastapi.testclient import TestClient

from src.service.ticketcare.domain.enum.event_status import EventStatus
from test.route_constant import EVENT_TIME_SLOTS, EVENTS, TICKET_TYPES, VENUES
from test.shared.utils import (
    EVENT_START,
    create_event,
    create_event_date,
    create_organizer,
    create_ticket_type,
    create_time_slot,
    create_venue,
)


class TestListEvents:
    def test_published_events_earliest_first(self, client: TestClient, db_session):
        # Given
        create_organizer(db_session)
        later = create_event(
            db_session,
            organizer_id='org_1',
            title='Autumn Jazz',
            start_time=EVENT_START + timedelta(days=60),
        )
        sooner = create_event(db_session, organizer_id='org_1', title='Summer Fest')
        create_event(
            db_session, organizer_id='org_1', title='Secret Rehearsal', status=EventStatus.DRAFT
        )
        db_session.commit()

        # When
        response = client.get(EVENTS)

        # Then
        assert response.status_code == 200
        assert response.json() == {
            'data': [
                {'id': str(sooner.id), 'title': 'Summer Fest'},
                {'id': str(later.id), 'title': 'Autumn Jazz'},
            ]
        }

    def test_search_is_case_insensitive(self, client: TestClient, db_session):
        create_organizer(db_session)
        create_event(db_session, organizer_id='org_1', title='Summer Fest')
        create_event(db_session, organizer_id='org_1', title='Winter Gala')
        db_session.commit()

        response = client.get(EVENTS, params={'query': 'sUmMeR'})

        assert [e['title'] for e in response.json()['data']] == ['Summer Fest']

    def test_empty_search_matches_everything(self, client: TestClient, db_session):
        create_organizer(db_session)
        create_event(db_session, organizer_id='org_1', title='Summer Fest')
        db_session.commit()

        response = client.get(EVENTS, params={'query': ''})

        assert len(response.json()['data']) == 1

    def test_no_events(self, client: TestClient):
        response = client.get(EVENTS)

        assert response.status_code == 200
        assert response.json() == {'data': []}


class TestListVenues:
    def test_wildcards_are_literal(self, client: TestClient, db_session):
        create_venue(db_session, name='100% Arena', slug='hundred-arena')
        create_venue(db_session, name='Blue Hall')
        db_session.commit()

        response = client.get(VENUES, params={'query': '%'})

        assert [v['name'] for v in response.json()['data']] == ['100% Arena']


class TestListTicketTypes:
    def test_filtered_by_event(self, client: TestClient, db_session):
        create_organizer(db_session)
        summer = create_event(db_session, organizer_id='org_1', title='Summer Fest')
        winter = create_event(db_session, organizer_id='org_1', title='Winter Gala')
        vip = create_ticket_type(db_session, event_id=summer.id, name='VIP')
        create_ticket_type(db_session, event_id=winter.id, name='VIP Lounge')
        db_session.commit()

        response = client.get(TICKET_TYPES, params={'eventId': str(summer.id)})

        assert response.json() == {'data': [{'id': str(vip.id), 'name': 'VIP'}]}

    def test_unparseable_event_id_is_ignored(self, client: TestClient, db_session):
        create_organizer(db_session)
        summer = create_event(db_session, organizer_id='org_1', title='Summer Fest')
        create_ticket_type(db_session, event_id=summer.id, name='VIP')
        create_ticket_type(db_session, event_id=summer.id, name='General Admission')
        db_session.commit()

        response = client.get(TICKET_TYPES, params={'eventId': 'abc'})

        assert response.status_code == 200
        assert len(response.json()['data']) == 2


class TestListTimeSlots:
    def test_slots_with_date_and_event(self, client: TestClient, db_session):
        # Given: two days, the second day's slot created first
        create_organizer(db_session)
        event = create_event(db_session, organizer_id='org_1', title='Summer Fest')
        day_two = create_event_date(db_session, event_id=event.id, day=date(2025, 7, 16))
        day_one = create_event_date(db_session, event_id=event.id, day=date(2025, 7, 15))
        create_time_slot(
            db_session, event_date_id=day_two.id, start_time=EVENT_START + timedelta(days=1)
        )
        first = create_time_slot(db_session, event_date_id=day_one.id, start_time=EVENT_START)
        db_session.commit()

        # When
        response = client.get(EVENT_TIME_SLOTS, params={'eventId': f'{event.id}xyz'})

        # Then
        data = response.json()['data']
        assert len(data) == 2
        assert data[0] == {
            'id': str(first.id),
            'startTime': '2025-07-15T18:00:00.000Z',
            'endTime': '2025-07-15T20:00:00.000Z',
            'doorsOpen': '2025-07-15T18:00:00.000Z',
            'eventDate': {
                'id': str(day_one.id),
                'date': '2025-07-15T00:00:00.000Z',
                'event': {'id': str(event.id), 'title': 'Summer Fest'},
            },
        }
        assert data[1]['eventDate']['date'] == '2025-07-16T00:00:00.000Z'
