"""
Polynomial Roots Service: closed-form solvers over HTTP.

POST /api/polyroots/quadratic  - {"coefficients": [p, q]}
POST /api/polyroots/cubic      - {"coefficients": [p, q, r]}
POST /api/polyroots/quartic    - {"coefficients": [a3, a2, a1, a0]}

The polynomial is monic; coefficients run from the next-to-leading term
down to the constant. Response: {"nr": <real roots>, "roots": [[re, im], ...]}
with roots in canonical order (real ascending, then conjugate pairs).

Status: live
"""

import math

from flask import jsonify, request

from kerrdisk.polyroots import cubic, quadratic, quartic, sort_roots
from kerrdisk.services import DiskService

SOLVERS = {
    "quadratic": (2, quadratic),
    "cubic": (3, cubic),
    "quartic": (4, quartic),
}


class PolyRootsService(DiskService):

    id = "polyroots"
    name = "Polynomial Roots"
    description = "Quadratic, cubic and quartic roots over the complex numbers"
    category = "numerics"
    status = "live"

    def validate(self, config):
        """Check degree and coefficient list; return {degree, coefficients}."""
        if not isinstance(config, dict):
            raise ValueError("Request body must be a JSON object")
        degree = config.get("degree")
        if degree not in SOLVERS:
            raise ValueError("degree must be one of {}".format(sorted(SOLVERS)))
        coeffs = config.get("coefficients")
        n_coeffs = SOLVERS[degree][0]
        if not isinstance(coeffs, list) or len(coeffs) != n_coeffs:
            raise ValueError(
                "{} needs {} coefficients".format(degree, n_coeffs))
        try:
            coeffs = [float(c) for c in coeffs]
        except (TypeError, ValueError):
            raise ValueError("coefficients must be numbers")
        if not all(math.isfinite(c) for c in coeffs):
            raise ValueError("coefficients must be finite")
        return {"degree": degree, "coefficients": coeffs}

    def compute(self, config):
        solver = SOLVERS[config["degree"]][1]
        result = solver(*config["coefficients"])
        if config["degree"] == "quartic":
            roots, nr = result
        else:
            roots, nr = sort_roots(result)
        return {
            "nr": nr,
            "roots": [[z.real, z.imag] for z in roots],
        }

    def register_routes(self, bp):
        """Mount one endpoint per solver."""
        service = self

        def solve(degree):
            data = request.get_json(silent=True)
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            if isinstance(data, dict):
                data = dict(data, degree=degree)
            try:
                config = service.validate(data)
            except ValueError as exc:
                return jsonify({"error": str(exc)}), 400
            return jsonify(service.compute(config))

        for degree in SOLVERS:
            bp.add_url_rule(
                "/polyroots/{}".format(degree),
                endpoint="polyroots_{}".format(degree),
                view_func=lambda degree=degree: solve(degree),
                methods=["POST"],
            )
