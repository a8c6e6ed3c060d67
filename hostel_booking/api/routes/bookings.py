from flask import Blueprint, current_app, jsonify, request

from hostel_booking.extensions import hostel
from hostel_booking.services.booking_form import FIELDS, BookingFormController
from hostel_booking.services.notification_service import Notifier
from hostel_booking.services.filter_service import filter_bookings
from hostel_booking.services.store import ALL_TYPES

bookings_bp = Blueprint('bookings', __name__)


def _rendered_rows(type_filter=ALL_TYPES, query=''):
    console = hostel.console
    state = console.state
    filtered = filter_bookings(state.bookings, state.rooms, type_filter, query)
    return [row.to_dict() for row in console.table.render(filtered).rows]


def _ensure_loaded():
    console = hostel.console
    if not console.state.loaded:
        console.load()


def _save(booking_id=''):
    console = hostel.console
    body = request.get_json(silent=True) or {}
    data = {name: body.get(name) for name in FIELDS}
    _ensure_loaded()

    # Own controller and toast per request; the page modal is left alone
    notifier = Notifier(duration=current_app.config.get('NOTIFY_SECONDS', 2.0))
    form = BookingFormController(console.state, notifier)
    if not form.submit(data, booking_id=booking_id):
        return jsonify({'error': notifier.current(), 'form': form.fields}), 400
    return None


@bookings_bp.route('/', methods=['GET'])
def get_bookings():
    _ensure_loaded()
    type_filter = request.args.get('type', ALL_TYPES)
    query = request.args.get('q', '')
    return jsonify(_rendered_rows(type_filter, query))


@bookings_bp.route('/', methods=['POST'])
def create_booking():
    error = _save()
    if error:
        return error
    current_app.logger.info("Booking created through API")
    return jsonify({'message': 'Booking added', 'bookings': _rendered_rows()}), 201


@bookings_bp.route('/<booking_id>', methods=['PUT'])
def update_booking(booking_id):
    _ensure_loaded()
    if not hostel.console.state.bookings.find(booking_id):
        return jsonify({'error': 'Booking not found'}), 404
    error = _save(booking_id)
    if error:
        return error
    return jsonify({'message': 'Booking updated', 'bookings': _rendered_rows()}), 200


@bookings_bp.route('/<booking_id>', methods=['DELETE'])
def delete_booking(booking_id):
    _ensure_loaded()
    # API callers confirm by issuing the DELETE
    hostel.console.table.handle_action('delete', booking_id, confirm=lambda prompt: True)
    return jsonify({'message': 'Booking deleted', 'bookings': _rendered_rows()}), 200
