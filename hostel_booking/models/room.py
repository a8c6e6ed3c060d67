from hostel_booking.utils.identifiers import normalize_id


class Room:
    """Read-only copy of a room owned by the backend."""

    def __init__(self, id, room_number, room_type):
        self.id = normalize_id(id)
        self.room_number = room_number
        self.room_type = room_type

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get('id'),
            room_number=str(data.get('roomNumber') or ''),
            room_type=str(data.get('type') or '')
        )

    @property
    def label(self):
        return f"{self.room_number} ({self.room_type})"

    def to_dict(self):
        return {
            'id': self.id,
            'roomNumber': self.room_number,
            'type': self.room_type
        }

    def __repr__(self):
        return f"<Room {self.id} {self.label}>"
