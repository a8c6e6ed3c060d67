from datetime import date

from hostel_booking.utils.identifiers import normalize_id, wire_id


def parse_date(value):
    """Parse ``YYYY-MM-DD``; return None for anything else."""
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def format_date(value):
    if isinstance(value, date):
        return value.isoformat()
    return '' if value is None else str(value)


class Booking:

    def __init__(self, id, student_name, roll_no, room_id, check_in, check_out):
        self.id = normalize_id(id)
        self.student_name = student_name
        self.roll_no = roll_no
        self.room_id = normalize_id(room_id)
        # Dates the backend sent in another format are kept raw for display
        self.check_in = parse_date(check_in) or check_in
        self.check_out = parse_date(check_out) or check_out

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get('id'),
            student_name=str(data.get('studentName') or ''),
            roll_no=str(data.get('rollNo') or ''),
            room_id=data.get('roomId'),
            check_in=data.get('checkIn'),
            check_out=data.get('checkOut')
        )

    def to_dict(self, include_id=True):
        data = {
            'studentName': self.student_name,
            'rollNo': self.roll_no,
            'roomId': wire_id(self.room_id),
            'checkIn': format_date(self.check_in),
            'checkOut': format_date(self.check_out)
        }
        if include_id and self.id is not None:
            data['id'] = wire_id(self.id)
        return data

    def __repr__(self):
        return f"<Booking {self.id} {self.roll_no} room={self.room_id}>"
