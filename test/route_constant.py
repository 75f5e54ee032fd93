EVENTS = '/api/events'
EVENT_TIME_SLOTS = '/api/events/time-slots'
VENUES = '/api/venues'
TICKET_TYPES = '/api/ticket-types'
ORDERS = '/api/orders'
CUSTOMERS = '/api/customers'
USERS = '/api/users'
UPLOAD = '/api/upload'

ORGANIZER_TICKET_TYPES = '/api/organizer/events/{event_id}/ticket-types'
ORGANIZER_TICKET_TYPE = '/api/organizer/events/{event_id}/ticket-types/{ticket_type_id}'
ORGANIZER_INVENTORY_LIST = '/api/organizer/ticket-types/{ticket_type_id}/inventory'
ORGANIZER_INVENTORY = '/api/organizer/inventory/{inventory_id}'
ORGANIZER_TIME_SLOTS = '/api/organizer/event-dates/{event_date_id}/time-slots'
ORGANIZER_TIME_SLOT = '/api/organizer/time-slots/{time_slot_id}'

ALLOWED_ORIGIN = 'http://localhost:3000'
FOREIGN_ORIGIN = 'https://not-a-ticketcare-site.example'
