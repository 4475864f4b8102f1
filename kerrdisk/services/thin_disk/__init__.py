"""
Thin Disk Service: Novikov-Thorne radial structure over HTTP.

POST /api/thin-disk/profile     - flux, sigma, ell, vr, h, dhdr on a radial grid
POST /api/thin-disk/luminosity  - disk luminosity and accretion rate

Request JSON (both endpoints):
{
    "mass": 10.0,          // M_sun
    "spin": 0.0,           // dimensionless, |a| < 1
    "alpha": 0.1,          // viscosity parameter
    "mdot": 0.1,           // Eddington units; or
    "luminosity": 0.1,     // L_Edd units (accretion rate is solved for)
    "r_max": 2000,         // profile only, GM/c^2
    "num_points": 100      // profile only, clamped to [10, 500]
}

Status: live
"""

import logging
import math

import numpy as np
from flask import jsonify, request

from kerrdisk.core import standard_pipeline
from kerrdisk.disk_nt import LUMI_R_MAX, LUMINOSITY_MODE, NovikovThorneDisk
from kerrdisk.services import DiskService

log = logging.getLogger(__name__)

DEFAULTS = {
    "mass": 10.0,
    "spin": 0.0,
    "alpha": 0.1,
    "mdot": 0.1,
    "r_max": 2000.0,
    "num_points": 100,
}


def _number(data, key):
    value = data.get(key, DEFAULTS.get(key))
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError("{} must be a number".format(key))
    if not math.isfinite(value):
        raise ValueError("{} must be finite".format(key))
    return value


class ThinDiskService(DiskService):

    id = "thin_disk"
    name = "Novikov-Thorne Disk"
    description = "Radial structure and luminosity of a relativistic thin disk"
    category = "disk"
    status = "live"

    def validate(self, config):
        """
        Normalize a request payload.

        Exactly one of 'mdot' and 'luminosity' may be given; 'mdot'
        defaults to 0.1 when neither is. Range checks on the disk
        parameters happen when the disk is built.
        """
        if not isinstance(config, dict):
            raise ValueError("Request body must be a JSON object")
        if "mdot" in config and "luminosity" in config:
            raise ValueError("Give either mdot or luminosity, not both")

        out = {
            "mass": _number(config, "mass"),
            "spin": _number(config, "spin"),
            "alpha": _number(config, "alpha"),
            "r_max": min(_number(config, "r_max"), LUMI_R_MAX),
            "num_points": max(10, min(int(_number(config, "num_points")), 500)),
        }
        if "luminosity" in config:
            out["luminosity"] = _number(config, "luminosity")
        else:
            out["mdot"] = _number(config, "mdot")
        return out

    def build_disk(self, config):
        """Construct the disk described by a validated config."""
        if "luminosity" in config:
            return NovikovThorneDisk(config["mass"], config["spin"],
                                     config["luminosity"], config["alpha"],
                                     LUMINOSITY_MODE)
        return NovikovThorneDisk(config["mass"], config["spin"],
                                 config["mdot"], config["alpha"])

    def luminosity(self, config):
        """Luminosity summary of the configured disk."""
        disk = self.build_disk(config)
        return {
            "luminosity": disk.lumi(),
            "mdot": disk.mdot,
            "r_min": disk.r_min(),
        }

    def compute(self, config, verbose=False):
        """
        Radial profile on a geometric grid from r_ms to r_max.

        Returns
        -------
        dict
            radii plus one series per quantity, and the resolved disk
            configuration under 'config'. With verbose=True the stage
            traces are included under 'stages'.
        """
        disk = self.build_disk(config)
        r_min = disk.r_min()
        if config["r_max"] <= r_min:
            raise ValueError(
                "r_max must exceed the disk inner edge {:.4f}".format(r_min))

        radii = np.geomspace(r_min, config["r_max"], config["num_points"])
        results = standard_pipeline().run(disk, radii)

        out = {"radii": [float(r) for r in radii]}
        for name, result in results.items():
            out[name] = result.series
        summary = disk.to_dict()
        summary["luminosity"] = disk.lumi()
        out["config"] = summary
        if verbose:
            out["stages"] = [result.to_dict() for result in results.values()]
        return out

    def register_routes(self, bp):
        """Mount the thin disk endpoints."""
        service = self

        @bp.route("/thin-disk/profile", methods=["POST"])
        def thin_disk_profile():
            data = request.get_json(silent=True)
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                config = service.validate(data)
                result = service.compute(config,
                                         verbose=bool(data.get("verbose")))
            except ValueError as exc:
                log.debug("thin-disk profile rejected: %s", exc)
                return jsonify({"error": str(exc)}), 400
            return jsonify(result)

        @bp.route("/thin-disk/luminosity", methods=["POST"])
        def thin_disk_luminosity():
            data = request.get_json(silent=True)
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                config = service.validate(data)
                result = service.luminosity(config)
            except ValueError as exc:
                log.debug("thin-disk luminosity rejected: %s", exc)
                return jsonify({"error": str(exc)}), 400
            return jsonify(result)
