"""
Tests for physical constants module.

Validates the SI base values, the derived one-solar-mass scales, and
that the tabulated flux scale agrees with the SI constants.
"""

import math

from kerrdisk.constants import (
    C_LIGHT,
    FLUX_SCALE,
    G,
    GRAV_RADIUS,
    L_EDD,
    M_SUN,
    MDOT_EDD,
    R_MS_OFFSET,
    SPIN_LIMIT,
    flux_scale,
    verify_flux_scale,
)


class TestPhysicalConstants:
    """Verify fundamental constants are at expected values."""

    def test_gravitational_constant(self):
        assert abs(G - 6.67430e-11) / 6.67430e-11 < 1e-6

    def test_solar_mass(self):
        assert abs(M_SUN - 1.98892e30) / 1.98892e30 < 1e-4

    def test_speed_of_light(self):
        assert C_LIGHT == 2.99792458e8


class TestDerivedScales:
    """One-solar-mass scales in cgs."""

    def test_gravitational_radius(self):
        """GM_sun/c^2 is about 1.477 km."""
        assert abs(GRAV_RADIUS - 1.4770e5) / 1.4770e5 < 1e-3

    def test_eddington_luminosity(self):
        """L_Edd for 1 M_sun is about 1.26e38 erg/s."""
        assert 1.24e38 < L_EDD < 1.28e38

    def test_eddington_rate_above_l_over_c2(self):
        """Mdot_Edd includes a radiative efficiency below 10%."""
        l_over_c2 = L_EDD / (C_LIGHT * 100.0) ** 2
        assert MDOT_EDD > 10.0 * l_over_c2

    def test_offsets(self):
        assert R_MS_OFFSET == 1e-3
        assert 0.999 < SPIN_LIMIT < 1.0


class TestFluxScale:

    def test_tabulated_value(self):
        assert FLUX_SCALE == 9.1721376255e28

    def test_recomputed_value(self):
        assert math.isclose(flux_scale(), FLUX_SCALE, rel_tol=2e-3)

    def test_verify_flux_scale_function(self):
        ok, val = verify_flux_scale()
        assert ok is True
        assert val == flux_scale()
