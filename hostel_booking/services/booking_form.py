from flask import current_app, has_app_context

from hostel_booking.exceptions import NetworkError, ValidationError
from hostel_booking.models import Booking
from hostel_booking.models.booking import format_date, parse_date
from hostel_booking.utils.identifiers import normalize_id

CLOSED = 'closed'
OPEN_ADD = 'open-add'
OPEN_EDIT = 'open-edit'

FIELDS = ('studentName', 'rollNo', 'roomId', 'checkIn', 'checkOut')


def _empty_fields():
    return {name: '' for name in FIELDS}


class BookingFormController:
    """
    Add/edit modal. The form is only closed after a successful save;
    a rejected submission keeps whatever the user typed.
    """

    def __init__(self, state, notifier):
        self.state = state
        self.notifier = notifier
        self.mode = CLOSED
        self.booking_id = None
        self.fields = _empty_fields()

    @property
    def is_open(self):
        return self.mode != CLOSED

    @property
    def title(self):
        return "Edit Booking" if self.mode == OPEN_EDIT else "Add Booking"

    def open_add(self):
        # Rooms may have changed since the page loaded
        try:
            self.state.rooms.reload()
        except NetworkError as e:
            if has_app_context():
                current_app.logger.error(f"Room reload failed: {e}")
            self.notifier.notify("Backend not reachable (rooms not loaded)")
            self.close()
            return False

        if not len(self.state.rooms):
            self.notifier.notify("Rooms list is empty")

        self.booking_id = None
        self.fields = _empty_fields()
        self.mode = OPEN_ADD
        return True

    def open_edit(self, booking_id):
        booking = self.state.bookings.find(booking_id)
        if not booking:
            return False

        self.booking_id = booking.id
        self.fields = {
            'studentName': booking.student_name,
            'rollNo': booking.roll_no,
            'roomId': booking.room_id or '',
            'checkIn': format_date(booking.check_in),
            'checkOut': format_date(booking.check_out)
        }
        self.mode = OPEN_EDIT
        return True

    def close(self):
        self.mode = CLOSED
        self.booking_id = None
        self.fields = _empty_fields()

    def validate(self):
        """Return a Booking built from the current fields or raise ValidationError."""
        student_name = self.fields['studentName'].strip()
        roll_no = self.fields['rollNo'].strip()
        room_id = self.fields['roomId']

        if not student_name or not roll_no:
            raise ValidationError("Please enter student name and roll number")
        if not room_id:
            raise ValidationError("Please select a room")

        check_in = parse_date(self.fields['checkIn'])
        check_out = parse_date(self.fields['checkOut'])
        if check_in is None or check_out is None:
            raise ValidationError("Please select check-in and check-out dates")
        if check_out <= check_in:
            raise ValidationError("Error: Check-out must be after Check-in")

        return Booking(
            id=self.booking_id,
            student_name=student_name,
            roll_no=roll_no,
            room_id=room_id,
            check_in=check_in,
            check_out=check_out
        )

    def submit(self, form_data, booking_id=None):
        """
        Validate and save. Returns False when validation rejected the input.
        NetworkError from the store is not handled here.
        """
        for name in FIELDS:
            if name in form_data:
                self.fields[name] = str(form_data.get(name) or '').strip()
        if booking_id is not None:
            self.booking_id = normalize_id(booking_id)
            self.mode = OPEN_EDIT if self.booking_id else OPEN_ADD
        elif self.mode == CLOSED:
            self.mode = OPEN_ADD

        try:
            booking = self.validate()
        except ValidationError as e:
            self.notifier.notify(str(e))
            return False

        if not booking.id:
            self.state.client.create('bookings', booking.to_dict(include_id=False))
            self.notifier.notify("Booking added")
        else:
            self.state.client.replace('bookings', booking.id, booking.to_dict())
            self.notifier.notify("Booking updated")

        if has_app_context():
            current_app.logger.info(f"Saved booking for {booking.roll_no} in room {booking.room_id}")

        self.close()
        self.state.bookings.reload()
        return True
