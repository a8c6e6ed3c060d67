from flask import Blueprint, current_app, redirect, render_template, request, url_for

from hostel_booking.exceptions import NetworkError
from hostel_booking.extensions import hostel
from hostel_booking.services.filter_service import filter_bookings
from hostel_booking.services.store import ALL_TYPES

main_bp = Blueprint('main', __name__)


def _back_to_page():
    return redirect(url_for('main.index'))


@main_bp.route('/', methods=['GET'])
def index():
    console = hostel.console
    state = console.state

    if not state.loaded:
        try:
            console.load()
        except NetworkError as e:
            current_app.logger.error(f"Initial load failed: {e}")
            console.notifier.notify("Backend not reachable (data not loaded)")

    filtered = filter_bookings(state.bookings, state.rooms, state.type_filter, state.query)
    return render_template(
        'index.html',
        table=console.table.render(filtered),
        room_types=state.rooms.room_types(),
        room_options=state.rooms.options(),
        type_filter=state.type_filter,
        query=state.query,
        all_types=ALL_TYPES,
        form=console.form,
        toast=console.notifier.current()
    )


@main_bp.route('/filters', methods=['POST'])
def apply_filters():
    hostel.console.state.set_filters(
        type_filter=request.form.get('filterType'),
        query=request.form.get('searchInput')
    )
    return _back_to_page()


@main_bp.route('/filters/reset', methods=['POST'])
def reset_filters():
    hostel.console.state.reset_filters()
    return _back_to_page()


@main_bp.route('/bookings/new', methods=['POST'])
def open_add():
    hostel.console.form.open_add()
    return _back_to_page()


@main_bp.route('/bookings/form', methods=['POST'])
def submit_form():
    form = hostel.console.form
    form.submit(request.form, booking_id=request.form.get('bookingId', ''))
    return _back_to_page()


@main_bp.route('/bookings/form/close', methods=['POST'])
def close_form():
    hostel.console.form.close()
    return _back_to_page()


@main_bp.route('/bookings/actions', methods=['POST'])
def row_action():
    """Delegated handler for every row button in the bookings table."""
    table = hostel.console.table
    try:
        action, booking_id = table.parse_action_key(request.form.get('action'))
    except ValueError as e:
        return {'error': str(e)}, 400

    confirmed = request.form.get('confirmed') == '1'
    try:
        table.handle_action(action, booking_id, confirm=lambda prompt: confirmed)
    except ValueError as e:
        return {'error': str(e)}, 400
    return _back_to_page()
