import pytest

from hostel_booking.exceptions import NetworkError
from hostel_booking.services.booking_form import CLOSED, OPEN_ADD, OPEN_EDIT


def valid_payload(**overrides):
    data = {
        'studentName': 'Kiran Rao',
        'rollNo': 'CS-077',
        'roomId': '2',
        'checkIn': '2026-04-01',
        'checkOut': '2026-04-05'
    }
    data.update(overrides)
    return data


def test_open_add_reloads_rooms_and_clears_form(console, backend):
    console.form.open_edit(5)
    backend.collections['rooms'].append({"id": 3, "roomNumber": "R3", "type": "triple"})

    assert console.form.open_add()
    assert console.form.mode == OPEN_ADD
    assert console.form.booking_id is None
    assert console.form.title == "Add Booking"
    assert all(v == '' for v in console.form.fields.values())
    assert console.state.rooms.lookup_room(3) is not None


def test_open_add_stays_closed_when_rooms_cannot_load(console, backend):
    backend.down = True
    assert not console.form.open_add()
    assert console.form.mode == CLOSED
    assert console.notifier.current() == "Backend not reachable (rooms not loaded)"
    # Previous room cache untouched
    assert len(console.state.rooms) == 2


def test_open_add_warns_about_empty_room_list(console, backend):
    backend.collections['rooms'] = []
    assert console.form.open_add()
    assert console.notifier.current() == "Rooms list is empty"


def test_open_edit_populates_fields(console):
    assert console.form.open_edit('7')
    assert console.form.mode == OPEN_EDIT
    assert console.form.booking_id == '7'
    assert console.form.title == "Edit Booking"
    assert console.form.fields == {
        'studentName': 'Meera Nair',
        'rollNo': 'ME-107',
        'roomId': '2',
        'checkIn': '2026-03-01',
        'checkOut': '2026-03-15'
    }


def test_open_edit_unknown_id_is_noop(console):
    assert not console.form.open_edit(404)
    assert console.form.mode == CLOSED


def test_create_round_trip(console, backend):
    console.form.open_add()
    assert console.form.submit(valid_payload())

    assert console.form.mode == CLOSED
    assert console.notifier.current() == "Booking added"
    sent = backend.calls[-2]
    assert sent[0] == 'POST'
    assert sent[2] == {
        'studentName': 'Kiran Rao',
        'rollNo': 'CS-077',
        'roomId': 2,
        'checkIn': '2026-04-01',
        'checkOut': '2026-04-05'
    }

    created = console.state.bookings.find(101)
    assert created.student_name == 'Kiran Rao'
    assert created.roll_no == 'CS-077'
    assert created.room_id == '2'
    assert created.check_in.isoformat() == '2026-04-01'
    assert created.check_out.isoformat() == '2026-04-05'


def test_update_sends_full_record_with_id(console, backend):
    console.form.open_edit(7)
    assert console.form.submit(valid_payload(studentName='Meera N.'), booking_id='7')

    method, url, body, _ = backend.calls[-2]
    assert (method, url.rsplit('/', 1)[-1]) == ('PUT', '7')
    assert body['id'] == 7
    assert set(body) == {'id', 'studentName', 'rollNo', 'roomId', 'checkIn', 'checkOut'}
    assert console.notifier.current() == "Booking updated"
    assert console.state.bookings.find(7).student_name == 'Meera N.'


@pytest.mark.parametrize('check_in,check_out', [
    ('2026-04-05', '2026-04-05'),
    ('2026-04-05', '2026-04-01'),
])
def test_checkout_not_after_checkin_is_rejected(console, backend, check_in, check_out):
    console.form.open_add()
    before = list(backend.records('bookings'))

    assert not console.form.submit(valid_payload(checkIn=check_in, checkOut=check_out))
    assert console.notifier.current() == "Error: Check-out must be after Check-in"
    assert console.form.mode == OPEN_ADD
    assert console.form.fields['checkOut'] == check_out
    assert backend.records('bookings') == before


def test_missing_room_is_rejected(console, backend):
    console.form.open_add()
    before = list(backend.records('bookings'))

    assert not console.form.submit(valid_payload(roomId=''))
    assert console.notifier.current() == "Please select a room"
    assert console.form.is_open
    assert backend.records('bookings') == before


def test_missing_name_is_rejected(console):
    console.form.open_add()
    assert not console.form.submit(valid_payload(studentName='   '))
    assert console.notifier.current() == "Please enter student name and roll number"


def test_missing_dates_are_rejected(console):
    console.form.open_add()
    assert not console.form.submit(valid_payload(checkIn=''))
    assert console.notifier.current() == "Please select check-in and check-out dates"


def test_invalid_edit_leaves_booking_unchanged_and_form_open(console, backend):
    console.form.open_edit(7)
    original = dict(backend.records('bookings')[2])

    assert not console.form.submit(valid_payload(checkIn='2026-03-20', checkOut='2026-03-10'), booking_id='7')
    assert console.form.mode == OPEN_EDIT
    assert console.form.booking_id == '7'
    assert backend.records('bookings')[2] == original
    assert console.state.bookings.find(7).check_in.isoformat() == '2026-03-01'


def test_backend_failure_on_save_propagates_and_keeps_form_open(console, backend):
    console.form.open_add()
    backend.failures[('POST', 'bookings')] = 500

    with pytest.raises(NetworkError):
        console.form.submit(valid_payload())
    assert console.form.mode == OPEN_ADD
    assert console.form.fields['studentName'] == 'Kiran Rao'


def test_zero_padded_room_id_is_sent_unchanged(console, backend):
    backend.collections['rooms'].append({"id": "0123", "roomNumber": "Z1", "type": "suite"})
    console.form.open_add()

    assert console.form.submit(valid_payload(roomId='0123'))
    _, _, body, _ = backend.calls[-2]
    assert body['roomId'] == '0123'

    created = console.state.bookings.find(101)
    room = console.state.rooms.lookup_room(created.room_id)
    assert room.room_number == 'Z1'


def test_failed_add_trigger_closes_open_edit_form(console, backend):
    console.form.open_edit(7)
    backend.down = True

    assert not console.form.open_add()
    assert console.form.mode == CLOSED
    assert console.form.booking_id is None
