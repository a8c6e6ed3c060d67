from flask import current_app

from hostel_booking.services.booking_form import BookingFormController
from hostel_booking.services.notification_service import Notifier
from hostel_booking.services.resource_client import ResourceClient
from hostel_booking.services.store import AppState
from hostel_booking.services.table_renderer import TableRenderer


class Console:
    """Per-app bundle of the page components, wired around one AppState."""

    def __init__(self, client, notify_seconds=2.0):
        self.client = client
        self.notifier = Notifier(duration=notify_seconds)
        self.state = AppState(client)
        self.form = BookingFormController(self.state, self.notifier)
        self.table = TableRenderer(self.state, self.form, self.notifier)

    def load(self):
        """Startup pipeline: rooms first (bookings resolve against them), then bookings."""
        self.state.rooms.reload()
        if not len(self.state.rooms):
            self.notifier.notify("Rooms list is empty")
        self.state.bookings.reload()
        self.state.loaded = True


class HostelExtension:

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app, session=None):
        client = ResourceClient(
            app.config['API_BASE_URL'],
            session=session,
            timeout=app.config.get('RESOURCE_TIMEOUT')
        )
        app.extensions['hostel_booking'] = Console(client, app.config.get('NOTIFY_SECONDS', 2.0))

    @property
    def console(self):
        return current_app.extensions['hostel_booking']


hostel = HostelExtension()
