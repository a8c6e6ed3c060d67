from flask import Flask, jsonify, redirect, request, url_for

from hostel_booking.config import DevelopmentConfig
from hostel_booking.exceptions import NetworkError
from hostel_booking.extensions import hostel


def create_app(config_class=DevelopmentConfig, session=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    hostel.init_app(app, session=session)

    # Register Blueprints
    from hostel_booking.api.routes.bookings import bookings_bp
    from hostel_booking.api.routes.rooms import rooms_bp
    from hostel_booking.api.routes.main import main_bp

    app.register_blueprint(bookings_bp, url_prefix='/api/bookings')
    app.register_blueprint(rooms_bp, url_prefix='/api/rooms')
    app.register_blueprint(main_bp)

    @app.errorhandler(NetworkError)
    def handle_network_error(e):
        # No recovery: whatever state the action reached is left as is
        app.logger.error(f"Backend request failed: {e}")
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Backend request failed', 'details': str(e)}), 502
        hostel.console.notifier.notify("Backend request failed")
        return redirect(url_for('main.index'))

    @app.route('/health')
    def health():
        return {"status": "ok", "app": "HostelBooking"}

    return app
