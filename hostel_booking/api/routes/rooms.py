from flask import Blueprint, jsonify

from hostel_booking.extensions import hostel

rooms_bp = Blueprint('rooms', __name__)


@rooms_bp.route('/', methods=['GET'])
def get_rooms():
    rooms = hostel.console.state.rooms
    rooms.reload()
    return jsonify([r.to_dict() for r in rooms])
