import copy
import json

import pytest
import requests

from hostel_booking import create_app
from hostel_booking.config import TestingConfig
from hostel_booking.extensions import hostel

BASE_URL = TestingConfig.API_BASE_URL


def make_response(status, body, url=''):
    response = requests.Response()
    response.status_code = status
    response.url = url
    response._content = json.dumps(body).encode('utf-8')
    return response


class FakeBackend:
    """In-memory resource store answering the calls a requests.Session would make."""

    def __init__(self, rooms=None, bookings=None):
        self.collections = {
            'rooms': copy.deepcopy(rooms or []),
            'bookings': copy.deepcopy(bookings or [])
        }
        self.next_id = 100
        self.down = False
        self.failures = {}  # (method, collection) -> status
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json, timeout))
        if self.down:
            raise requests.ConnectionError("connection refused")

        parts = url[len(BASE_URL):].strip('/').split('/')
        collection = parts[0]
        record_id = parts[1] if len(parts) > 1 else None

        status = self.failures.get((method, collection))
        if status:
            return make_response(status, {}, url)

        items = self.collections.setdefault(collection, [])
        if method == 'GET':
            return make_response(200, copy.deepcopy(items), url)
        if method == 'POST':
            self.next_id += 1
            record = dict(json, id=self.next_id)
            items.append(record)
            return make_response(201, record, url)

        idx = next((i for i, r in enumerate(items) if str(r['id']) == record_id), None)
        if idx is None:
            return make_response(404, {}, url)
        if method == 'PUT':
            items[idx] = dict(json, id=items[idx]['id'])
            return make_response(200, items[idx], url)
        if method == 'DELETE':
            del items[idx]
            return make_response(200, {}, url)
        return make_response(405, {}, url)

    def records(self, collection):
        return self.collections[collection]


ROOMS = [
    {"id": 1, "roomNumber": "R1", "type": "single"},
    {"id": 2, "roomNumber": "R2", "type": "double"}
]

BOOKINGS = [
    {"id": 5, "studentName": "Asha Verma", "rollNo": "CS-001", "roomId": 1,
     "checkIn": "2026-01-05", "checkOut": "2026-01-10"},
    {"id": 6, "studentName": "Ravi Kumar", "rollNo": "EE-042", "roomId": "1",
     "checkIn": "2026-02-01", "checkOut": "2026-02-03"},
    {"id": 7, "studentName": "Meera Nair", "rollNo": "ME-107", "roomId": 2,
     "checkIn": "2026-03-01", "checkOut": "2026-03-15"}
]


@pytest.fixture
def backend():
    return FakeBackend(rooms=ROOMS, bookings=BOOKINGS)


@pytest.fixture
def app(backend):
    app = create_app(TestingConfig, session=backend)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def console(app):
    console = hostel.console
    console.load()
    return console
