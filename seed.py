from hostel_booking import create_app
from hostel_booking.extensions import hostel

app = create_app()

rooms_data = [
    {"roomNumber": "A-101", "type": "single"},
    {"roomNumber": "A-102", "type": "single"},
    {"roomNumber": "B-201", "type": "double"},
    {"roomNumber": "C-301", "type": "triple"}
]

with app.app_context():
    client = hostel.console.client
    existing = {r.get('roomNumber') for r in client.fetch_all('rooms')}

    for r_data in rooms_data:
        if r_data['roomNumber'] not in existing:
            room = client.create('rooms', r_data)
            print(f"Room {room.get('roomNumber')} created.")

    print("Rooms seeded successfully.")
