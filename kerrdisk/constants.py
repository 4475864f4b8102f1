"""
Physical constants for relativistic thin disk calculations.

SI base values match CODATA 2022 / IAU 2015 nominal values. Disk
quantities are reported in cgs, so the derived scales below (the
gravitational radius, the Eddington luminosity and accretion rate) are
given in cgs for a black hole of one solar mass. They scale linearly
with M / M_sun.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

import math

# Gravitational constant (CODATA 2022)
G = 6.67430e-11  # m^3 kg^-1 s^-2

# Solar mass (IAU 2015 nominal)
M_SUN = 1.98892e30  # kg

# Speed of light (CODATA 2018 exact)
C_LIGHT = 2.99792458e8  # m/s

# Proton mass (CODATA 2022)
M_P = 1.67262192595e-27  # kg

# Thomson cross section (CODATA 2022)
SIGMA_T = 6.6524587051e-29  # m^2

# SI <-> cgs conversions
M_TO_CM = 1.0e2
M2_TO_CM2 = 1.0e4
KG_TO_G = 1.0e3
G_TO_KG = 1.0e-3
J_TO_ERG = 1.0e7

# Gravitational radius GM_sun/c^2 of a one solar mass black hole
GRAV_RADIUS = G * M_SUN / (C_LIGHT * C_LIGHT) * M_TO_CM  # cm

# Eddington luminosity for 1 M_sun: 4 pi G M_sun m_p c / sigma_T
L_EDD = 4.0 * math.pi * G * M_SUN * M_P * C_LIGHT / SIGMA_T * J_TO_ERG  # erg/s

# Eddington accretion rate for 1 M_sun
MDOT_EDD = 2.225475942e18  # g/s

# Local flux of a disk with mdot = M/M_sun = 1 in units of the
# dimensionless Page-Thorne flux:
#   Mdot_Edd * c^6 / (G^2 * M_sun^2)   [erg cm^-2 s^-1]
FLUX_SCALE = 9.1721376255e28

# Inner disk edge sits this far (in GM/c^2) outside the marginally
# stable orbit so that the flux denominators stay finite.
R_MS_OFFSET = 1.0e-3

# Spin magnitudes at or above this limit are rejected (the cubic roots
# x1, x2, x3 degenerate at |a| = 1).
SPIN_LIMIT = 1.0 - 1.0e-6


def flux_scale():
    """Recompute FLUX_SCALE from the SI constants and MDOT_EDD."""
    c6 = C_LIGHT ** 6
    value = (MDOT_EDD * G_TO_KG) / (G * G) * c6 / (M_SUN * M_SUN)
    return value * J_TO_ERG / M2_TO_CM2


def verify_flux_scale():
    """Verify the tabulated FLUX_SCALE agrees with the SI constants."""
    value = flux_scale()
    ratio = FLUX_SCALE / value
    return abs(ratio - 1.0) < 2e-3, value
