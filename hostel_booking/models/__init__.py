from hostel_booking.models.room import Room
from hostel_booking.models.booking import Booking

__all__ = ['Room', 'Booking']
