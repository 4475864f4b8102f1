"""
API endpoint tests for the service registry, the thin disk service and
the polynomial roots service.
"""

import math

import pytest

from kerrdisk.services import DiskRegistry, DiskService
from kerrdisk.services.thin_disk import ThinDiskService


class TestRegistry:

    def test_services_listing(self, client):
        resp = client.get("/api/services")
        assert resp.status_code == 200
        ids = [s["id"] for s in resp.get_json()]
        assert ids == ["thin_disk", "polyroots"]

    def test_duplicate_registration(self):
        registry = DiskRegistry()
        registry.register(ThinDiskService())
        with pytest.raises(ValueError):
            registry.register(ThinDiskService())

    def test_lookup(self):
        registry = DiskRegistry()
        service = ThinDiskService()
        registry.register(service)
        assert registry.get("thin_disk") is service
        assert registry.get("missing") is None
        assert registry.live() == [service]

    def test_coming_soon_not_live(self):
        class Pending(DiskService):
            id = "pending"

            def validate(self, config):
                raise NotImplementedError

            def compute(self, config):
                raise NotImplementedError

        registry = DiskRegistry()
        registry.register(Pending())
        assert registry.live() == []
        assert registry.list_all()[0]["status"] == "coming_soon"

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.get_json()["name"] == "kerrdisk"

    def test_constants(self, client):
        data = client.get("/api/constants").get_json()
        assert data["FLUX_SCALE"] == 9.1721376255e28
        assert set(data) >= {"G", "M_SUN", "GRAV_RADIUS", "L_EDD", "MDOT_EDD"}


class TestThinDiskProfile:

    def test_default_profile(self, client):
        resp = client.post("/api/thin-disk/profile", json={})
        assert resp.status_code == 200
        data = resp.get_json()
        n = len(data["radii"])
        assert n == 100
        for key in ("flux", "sigma", "ell", "vr", "h", "dhdr"):
            assert len(data[key]) == n
            for i, val in enumerate(data[key]):
                assert math.isfinite(val), "{}[{}] = {}".format(key, i, val)
        assert data["radii"][0] == pytest.approx(6.001)
        assert data["radii"][-1] == pytest.approx(2000.0)
        assert data["config"]["r_min"] == pytest.approx(6.001)
        assert data["config"]["mdot"] == 0.1

    def test_num_points_clamped(self, client):
        resp = client.post("/api/thin-disk/profile",
                           json={"num_points": 5000, "r_max": 100})
        assert len(resp.get_json()["radii"]) == 500

    def test_verbose_includes_stages(self, client):
        resp = client.post("/api/thin-disk/profile",
                           json={"num_points": 10, "verbose": True})
        stages = resp.get_json()["stages"]
        assert [s["name"] for s in stages] == ["flux", "sigma", "ell", "vr", "h", "dhdr"]

    def test_luminosity_input(self, client):
        resp = client.post("/api/thin-disk/profile",
                           json={"luminosity": 0.1, "num_points": 10})
        assert resp.status_code == 200
        assert resp.get_json()["config"]["luminosity"] == pytest.approx(0.1, abs=1e-4)

    @pytest.mark.parametrize("payload", [
        {"spin": 1.0},
        {"mass": -1},
        {"alpha": 2.0},
        {"mdot": "fast"},
        {"mdot": 0.1, "luminosity": 0.1},
        {"r_max": 3.0},
        {"luminosity": 1e4},
    ])
    def test_invalid_input(self, client, payload):
        resp = client.post("/api/thin-disk/profile", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_non_json_body(self, client):
        resp = client.post("/api/thin-disk/profile", data="not json",
                           content_type="text/plain")
        assert resp.status_code == 400

    def test_non_object_body(self, client):
        resp = client.post("/api/thin-disk/profile", json=[1, 2])
        assert resp.status_code == 400


class TestThinDiskLuminosity:

    def test_forward(self, client):
        resp = client.post("/api/thin-disk/luminosity",
                           json={"mass": 10, "spin": 0.0, "mdot": 0.1})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["mdot"] == 0.1
        assert data["r_min"] == pytest.approx(6.001)
        assert 0.05 < data["luminosity"] < 0.15

    def test_inverse(self, client):
        resp = client.post("/api/thin-disk/luminosity",
                           json={"mass": 10, "spin": 0.0, "luminosity": 0.1})
        data = resp.get_json()
        assert data["luminosity"] == pytest.approx(0.1, abs=1e-4)


class TestPolyRoots:

    def test_quartic(self, client):
        resp = client.post("/api/polyroots/quartic",
                           json={"coefficients": [0, -10, 0, 9]})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["nr"] == 4
        assert [re for re, _ in data["roots"]] == pytest.approx([-3, -1, 1, 3])

    def test_cubic_with_pair(self, client):
        resp = client.post("/api/polyroots/cubic",
                           json={"coefficients": [-1, 1, -1]})
        data = resp.get_json()
        assert data["nr"] == 1
        assert data["roots"][0][0] == pytest.approx(1.0)
        assert data["roots"][1][1] == pytest.approx(1.0)
        assert data["roots"][2][1] == pytest.approx(-1.0)

    def test_quadratic(self, client):
        resp = client.post("/api/polyroots/quadratic",
                           json={"coefficients": [-3, 2]})
        data = resp.get_json()
        assert data["nr"] == 2
        assert [re for re, _ in data["roots"]] == pytest.approx([1.0, 2.0])

    @pytest.mark.parametrize("payload", [
        {"coefficients": [1, 2]},
        {"coefficients": "1 2 3 4"},
        {"coefficients": [1, 2, "x", 4]},
        {},
    ])
    def test_invalid(self, client, payload):
        resp = client.post("/api/polyroots/quartic", json=payload)
        assert resp.status_code == 400
