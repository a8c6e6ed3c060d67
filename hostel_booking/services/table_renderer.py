from hostel_booking.models.booking import format_date
from hostel_booking.utils.html import escape_html

PLACEHOLDER = '-'
DELETE_PROMPT = 'Delete this booking?'
ROW_ACTIONS = ('edit', 'delete')


class TableRow:

    def __init__(self, position, booking, room):
        self.position = position
        self.booking = booking
        self.room = room
        self.booking_id = booking.id
        self.student_name = escape_html(booking.student_name)
        self.roll_no = escape_html(booking.roll_no)
        self.room_number = escape_html(room.room_number) if room else PLACEHOLDER
        self.room_type = escape_html(room.room_type) if room else PLACEHOLDER
        self.check_in = escape_html(format_date(booking.check_in))
        self.check_out = escape_html(format_date(booking.check_out))

    def action_key(self, action):
        return f"{action}:{self.booking_id}"

    def to_dict(self):
        """Raw field values; escaping is left to whoever renders them."""
        booking, room = self.booking, self.room
        return {
            'position': self.position,
            'id': self.booking_id,
            'studentName': booking.student_name,
            'rollNo': booking.roll_no,
            'roomNumber': room.room_number if room else PLACEHOLDER,
            'roomType': room.room_type if room else PLACEHOLDER,
            'checkIn': format_date(booking.check_in),
            'checkOut': format_date(booking.check_out),
            'actions': [self.action_key(a) for a in ROW_ACTIONS]
        }


class TableView:

    def __init__(self, rows):
        self.rows = rows

    @property
    def empty(self):
        return not self.rows


class TableRenderer:
    """Projects bookings into rows and dispatches the row actions of the whole table."""

    def __init__(self, state, form, notifier):
        self.state = state
        self.form = form
        self.notifier = notifier

    def render(self, bookings):
        rows = []
        for idx, booking in enumerate(bookings):
            room = self.state.rooms.lookup_room(booking.room_id)
            rows.append(TableRow(idx + 1, booking, room))
        return TableView(rows)

    @staticmethod
    def parse_action_key(key):
        """Split ``"<action>:<booking id>"`` as posted by a row button."""
        action, sep, booking_id = (key or '').partition(':')
        if not sep or not booking_id:
            raise ValueError(f"Malformed row action: {key!r}")
        return action, booking_id

    def handle_action(self, action, booking_id, confirm):
        """
        Single entry point for every row control.

        ``confirm`` is called for destructive actions and must return True to proceed.
        Returns True when the action changed something.
        """
        if action == 'edit':
            return self.form.open_edit(booking_id)
        if action == 'delete':
            if not confirm(DELETE_PROMPT):
                return False
            self.state.client.remove('bookings', booking_id)
            self.state.bookings.reload()
            self.notifier.notify("Booking deleted")
            return True
        raise ValueError(f"Unknown row action: {action}")
