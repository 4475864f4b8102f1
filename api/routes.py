"""
Flask API routes shared by all KERRDISK services.

Endpoints:
  GET  /api/services   - metadata of every registered service
  GET  /api/constants  - physical constants used by the disk model

Live services mount their own namespaced endpoints on the same
blueprint (e.g. /api/thin-disk/profile, /api/polyroots/quartic).
"""

from flask import Blueprint, jsonify

from kerrdisk import constants


def create_api_blueprint(registry):
    """
    Build the /api blueprint and mount every live service's routes.

    Parameters
    ----------
    registry : DiskRegistry
        Populated service registry.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for all registered services."""
        return jsonify(registry.list_all())

    @api.route("/constants", methods=["GET"])
    def get_constants():
        """Return the physical constants used by the disk model."""
        return jsonify({
            "G": constants.G,
            "M_SUN": constants.M_SUN,
            "C_LIGHT": constants.C_LIGHT,
            "GRAV_RADIUS": constants.GRAV_RADIUS,
            "L_EDD": constants.L_EDD,
            "MDOT_EDD": constants.MDOT_EDD,
            "FLUX_SCALE": constants.FLUX_SCALE,
        })

    for service in registry.live():
        service.register_routes(api)

    return api
