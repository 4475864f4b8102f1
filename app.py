"""
KERRDISK - relativistic thin accretion disk models.
Flask application factory.

Serves the REST API for disk computations via registered DiskService
instances.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

__version__ = "0.1.0"

from flask import Flask, jsonify

from kerrdisk.services import DiskRegistry
from kerrdisk.services.polyroots import PolyRootsService
from kerrdisk.services.thin_disk import ThinDiskService


def create_registry():
    """Build and populate the service registry."""
    registry = DiskRegistry()
    registry.register(ThinDiskService())
    registry.register(PolyRootsService())
    return registry


def create_app():
    """Application factory for the KERRDISK Flask app."""
    app = Flask(__name__)

    registry = create_registry()

    # Create and register API blueprint (shared + service-owned routes)
    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry)
    app.register_blueprint(api)

    @app.route("/")
    def root():
        return jsonify({
            "name": "kerrdisk",
            "version": __version__,
            "services": registry.list_all(),
        })

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
