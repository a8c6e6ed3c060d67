from hostel_booking.services.store import ALL_TYPES


def filter_bookings(bookings, rooms, type_filter=ALL_TYPES, query=''):
    """
    Return the bookings matching both the room-type filter and the text query,
    in their original order.

    The type filter is either ``"all"`` or an exact, case-sensitive room type;
    a booking whose room cannot be resolved never matches a specific type.
    The query is trimmed and matched case-insensitively as a substring of the
    student name or the roll number.
    """
    q = (query or '').strip().lower()
    type_filter = type_filter or ALL_TYPES

    filtered = []
    for booking in bookings:
        if type_filter == ALL_TYPES:
            match_type = True
        else:
            room = rooms.lookup_room(booking.room_id)
            match_type = room is not None and room.room_type == type_filter

        match_search = (
            not q
            or q in (booking.student_name or '').lower()
            or q in (booking.roll_no or '').lower()
        )

        if match_type and match_search:
            filtered.append(booking)
    return filtered
