import threading

from flask import current_app, has_app_context

from hostel_booking.models import Booking, Room
from hostel_booking.utils.identifiers import normalize_id

ALL_TYPES = 'all'


def _log_debug(message):
    if has_app_context():
        current_app.logger.debug(message)


class ResourceCache:
    """
    Full-refresh in-memory copy of one collection.

    Reloads are sequence numbered: each reload takes a ticket before its fetch,
    and a response is only applied if no reload with a newer ticket has been
    applied in the meantime. A failed fetch leaves the previous content in place.
    """
    collection = None
    record_class = None

    def __init__(self, client):
        self.client = client
        self.items = []
        self._lock = threading.Lock()
        self._issued = 0
        self._applied = 0

    def begin_reload(self):
        with self._lock:
            self._issued += 1
            return self._issued

    def apply(self, ticket, records):
        """Install a reload result. Returns False when the result is stale."""
        items = [self.record_class.from_dict(r) for r in records]
        with self._lock:
            if ticket < self._applied:
                _log_debug(f"Discarding stale {self.collection} reload #{ticket} (have #{self._applied})")
                return False
            self._applied = ticket
            self.items = items
            return True

    def reload(self):
        ticket = self.begin_reload()
        records = self.client.fetch_all(self.collection)
        self.apply(ticket, records)
        return self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(list(self.items))


class RoomCache(ResourceCache):
    collection = 'rooms'
    record_class = Room

    def lookup_room(self, room_id):
        room_id = normalize_id(room_id)
        if room_id is None:
            return None
        for room in self.items:
            if room.id == room_id:
                return room
        return None

    def room_types(self):
        """Distinct room types in first-seen order."""
        types = []
        for room in self.items:
            if room.room_type and room.room_type not in types:
                types.append(room.room_type)
        return types

    def options(self):
        return [(room.id, room.label) for room in self.items]


class BookingStore(ResourceCache):
    collection = 'bookings'
    record_class = Booking

    def find(self, booking_id):
        booking_id = normalize_id(booking_id)
        for booking in self.items:
            if booking.id == booking_id:
                return booking
        return None


class AppState:
    """Everything the page shows: both caches plus the current filter."""

    def __init__(self, client):
        self.client = client
        self.rooms = RoomCache(client)
        self.bookings = BookingStore(client)
        self.type_filter = ALL_TYPES
        self.query = ''
        self.loaded = False

    def set_filters(self, type_filter=None, query=None):
        if type_filter is not None:
            self.type_filter = type_filter or ALL_TYPES
        if query is not None:
            self.query = query

    def reset_filters(self):
        self.type_filter = ALL_TYPES
        self.query = ''
