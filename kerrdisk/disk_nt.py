"""
Relativistic thin accretion disk (Novikov & Thorne 1973, Page & Thorne 1974).

Radial structure of a geometrically thin, optically thick disk around a
Kerr black hole of mass M (solar masses) and spin a. The disk inner edge
sits at the marginally stable orbit r_ms, where the torque vanishes.

A NovikovThorneDisk holds one disk configuration. All radial quantities
are pure functions of r given that configuration:

    flux(r)    local flux from one face           [erg cm^-2 s^-1]
    sigma(r)   column density                     [g cm^-2]
    ell(r)     specific angular momentum          [GM/c]
    vr, h, dhdr  identically zero for a thin disk
    lumi()     luminosity of both faces           [L_Edd(M)]

Radii are in gravitational radii GM/c^2. Accretion rate mdot is in units
of the Eddington rate Mdot_Edd(M).

Page-Thorne flux (PT74 eq. 15n), with x = sqrt(r), x0 = sqrt(r_ms) and
x1, x2, x3 the roots of x^3 - 3x + 2a = 0:

    F(r) = 3/(2 x^2 (x^3 - 3x + 2a)) / (4 pi r) * [ x - x0 - 3/2 a ln(x/x0)
           - sum_i 3 (xi - a)^2 / (xi (xi - xj)(xi - xk)) ln|(x - xi)/(x0 - xi)| ]

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import copy
import logging
import math

from kerrdisk.constants import (
    FLUX_SCALE,
    GRAV_RADIUS,
    L_EDD,
    MDOT_EDD,
    R_MS_OFFSET,
    SPIN_LIMIT,
)
from kerrdisk.integration import integrate_simpson
from kerrdisk.rootfinding import bisect

log = logging.getLogger(__name__)

# Option bits
LUMINOSITY_MODE = 1

# Luminosity integral runs from r_ms out to this radius
LUMI_R_MAX = 1.0e5
LUMI_EPS = 1.0e-5

# Search bracket and tolerance for the accretion rate in luminosity mode
MDOT_MIN = 0.0
MDOT_MAX = 100.0
MDOT_TOL = 1.0e-6


def isco_radius(a):
    """
    Radius of the marginally stable (innermost stable circular) orbit.

    Bardeen, Press & Teukolsky (1972) closed form, prograde for a >= 0
    and retrograde for a < 0:

        Z1 = 1 + (1-a^2)^(1/3) [(1+a)^(1/3) + (1-a)^(1/3)]
        Z2 = sqrt(3a^2 + Z1^2)
        r  = 3 + Z2 - sgn(a) sqrt((3-Z1)(3+Z1+2Z2))

    Parameters
    ----------
    a : float
        Dimensionless spin, -1 <= a <= 1.

    Returns
    -------
    float
        ISCO radius in GM/c^2 (6 for a=0, 1 for a=1, 9 for a=-1).
    """
    if not -1.0 <= a <= 1.0:
        raise ValueError("spin must lie in [-1, 1], got {}".format(a))
    sgn = 1.0 if a >= 0.0 else -1.0
    third = 1.0 / 3.0
    z1 = 1.0 + (1.0 - a * a) ** third * ((1.0 + a) ** third + (1.0 - a) ** third)
    z2 = math.sqrt(3.0 * a * a + z1 * z1)
    return 3.0 + z2 - sgn * math.sqrt((3.0 - z1) * (3.0 + z1 + 2.0 * z2))


def cubic_roots(a):
    """
    Roots of x^3 - 3x + 2a = 0 in trigonometric form.

    Returns
    -------
    tuple of float
        (x1, x2, x3) with x1 > x2 > x3 for |a| < 1.
    """
    t = math.acos(a) / 3.0
    x1 = 2.0 * math.cos(t - math.pi / 3.0)
    x2 = 2.0 * math.cos(t + math.pi / 3.0)
    x3 = -2.0 * math.cos(t)
    return x1, x2, x3


class NovikovThorneDisk:
    """
    A configured Novikov-Thorne disk.

    Construction is the setup step: it validates the parameters, places
    the inner edge at r_ms = r_isco(a) + 1e-3 and fixes the accretion
    rate. With LUMINOSITY_MODE set in options the third argument is a
    luminosity in Eddington units and the matching accretion rate is
    found by bisection.

    Parameters
    ----------
    mass : float
        Black hole mass in solar masses, > 0.
    spin : float
        Dimensionless spin, |a| < 1 - 1e-6.
    mdot_or_lum : float
        Accretion rate [Mdot_Edd] or, in luminosity mode, luminosity [L_Edd].
    alpha : float, optional
        Shakura-Sunyaev viscosity parameter in (0, 1] (default 0.1).
    options : int, optional
        Bitmask of option flags (default 0).

    Raises
    ------
    ValueError
        If a parameter is out of range or, in luminosity mode, no
        accretion rate in [0, 100] reproduces the luminosity.
    """

    def __init__(self, mass, spin, mdot_or_lum, alpha=0.1, options=0):
        mass = float(mass)
        spin = float(spin)
        mdot_or_lum = float(mdot_or_lum)
        alpha = float(alpha)

        if not (math.isfinite(mass) and mass > 0.0):
            raise ValueError("mass must be positive, got {}".format(mass))
        if not abs(spin) < SPIN_LIMIT:
            raise ValueError(
                "spin must satisfy |a| < {}, got {}".format(SPIN_LIMIT, spin))
        if not 0.0 < alpha <= 1.0:
            raise ValueError("alpha must lie in (0, 1], got {}".format(alpha))
        if not (math.isfinite(mdot_or_lum) and mdot_or_lum >= 0.0):
            raise ValueError(
                "mdot_or_lum must be non-negative, got {}".format(mdot_or_lum))

        self.mass = mass
        self.spin = spin
        self.alpha = alpha
        self.options = int(options)
        self.r_ms = isco_radius(spin) + R_MS_OFFSET
        self._roots = cubic_roots(spin)

        if self.luminosity_mode:
            self.mdot = 0.0
            mdot = find_mdot_for_luminosity(self, mdot_or_lum)
            if mdot is None:
                raise ValueError(
                    "no accretion rate in [{}, {}] gives L = {} L_Edd".format(
                        MDOT_MIN, MDOT_MAX, mdot_or_lum))
            self.mdot = mdot
            log.debug("mdot for L=%.5f: mdot=%.5f (%.6e 10^18 g/s)",
                      mdot_or_lum, mdot, mdot * mass * MDOT_EDD / 1e18)
        else:
            self.mdot = mdot_or_lum
        log.debug("disk set up: M=%.4f a=%.4f r_ms=%.4f alpha=%.4f mdot=%.5f",
                  self.mass, self.spin, self.r_ms, self.alpha, self.mdot)

    @property
    def luminosity_mode(self):
        """True when the disk was set up from a luminosity."""
        return bool(self.options & LUMINOSITY_MODE)

    def r_min(self):
        """Disk inner edge r_ms in GM/c^2 (ISCO + 1e-3)."""
        return self.r_ms

    def done(self):
        """Release resources held by the model. A thin disk holds none."""

    def _pt_bracket(self, x):
        # Bracketed term of PT74 eq. 15n
        a = self.spin
        x0 = math.sqrt(self.r_ms)
        x1, x2, x3 = self._roots
        f0 = x - x0 - 1.5 * a * math.log(x / x0)
        total = f0
        for xi, xj, xk in ((x1, x2, x3), (x2, x3, x1), (x3, x1, x2)):
            coeff = 3.0 * (xi - a) * (xi - a) / (xi * (xi - xj) * (xi - xk))
            total -= coeff * math.log(abs((x - xi) / (x0 - xi)))
        return total

    def flux(self, r):
        """
        Local flux from one face of the disk.

        This is the flux seen by an observer comoving with the fluid.
        In the Newtonian limit it reduces to 3 G M Mdot / (8 pi r^3).

        Parameters
        ----------
        r : float
            Radius in GM/c^2.

        Returns
        -------
        float
            Flux in erg cm^-2 s^-1; 0 for r <= r_ms.
        """
        if r <= self.r_ms:
            return 0.0
        a = self.spin
        x = math.sqrt(r)
        f = 1.0 / (4.0 * math.pi * r) \
            * 1.5 / (x * x * (x * x * x - 3.0 * x + 2.0 * a)) \
            * self._pt_bracket(x)
        # F scales as mdot / m with m = M/M_sun
        return FLUX_SCALE * f * self.mdot / self.mass

    def sigma(self, r):
        """
        Column density (midplane to surface) for the inner two zones.

        Inside r_im radiation pressure dominates (zone A), outside it gas
        pressure does (zone B). Relativistic correction factors follow
        Novikov & Thorne (1973).

        Parameters
        ----------
        r : float
            Radius in GM/c^2.

        Returns
        -------
        float
            Column density in g cm^-2; 0 for r <= r_ms.
        """
        if r <= self.r_ms:
            return 0.0
        a = self.spin
        m = self.mass
        alpha = self.alpha
        x = math.sqrt(r)
        x3 = x * x * x
        aa = a * a
        rr = r * r

        big_a = 1.0 + aa / rr + 2.0 * aa / (rr * r)
        big_b = 1.0 + a / x3
        big_c = 1.0 - 3.0 / (x * x) + 2.0 * a / x3
        big_d = 1.0 - 2.0 / r + aa / rr
        big_e = 1.0 + 4.0 * aa / rr - 4.0 * aa / (rr * r) + 3.0 * aa * aa / (rr * rr)
        big_l = big_b / math.sqrt(big_c) / x * self._pt_bracket(x)

        mdot17 = self.mdot * m * MDOT_EDD / 1e17
        r_im = 40.0 * (alpha ** (2.0 / 21.0) / (m / 3.0) ** (2.0 / 3.0)
                       * mdot17 ** (16.0 / 20.0)) \
            * big_a ** (20.0 / 21.0) * big_b ** (-36.0 / 21.0) \
            * big_d ** (-8.0 / 21.0) * big_e ** (-10.0 / 21.0) \
            * big_l ** (16.0 / 21.0)

        if r < r_im:
            return 20.0 * (m / 3.0) / mdot17 / alpha * r * x \
                / (big_a * big_a) * big_b ** 3 * math.sqrt(big_c) * big_e / big_l
        return 5e4 * (m / 3.0) ** (-2.0 / 5.0) * mdot17 ** (3.0 / 5.0) \
            * alpha ** (-4.0 / 5.0) * r ** (-3.0 / 5.0) * big_b ** (-4.0 / 5.0) \
            * math.sqrt(big_c) * big_d ** (-4.0 / 5.0) * big_l ** (3.0 / 5.0)

    def ell(self, r):
        """Specific angular momentum of circular orbits, evaluated at max(r, r_ms)."""
        a = self.spin
        r = max(self.r_ms, r)
        x = math.sqrt(r)
        return (r * r - 2.0 * a * x + a * a) / (x * r - 2.0 * x + a)

    def vr(self, r):
        """Radial velocity [c]. Zero in the thin disk limit."""
        return 0.0

    def h(self, r):
        """Surface height above the midplane [GM/c^2]. Zero for a razor thin disk."""
        return 0.0

    def dhdr(self, r):
        """Surface slope dH/dr. Zero for a razor thin disk."""
        return 0.0

    def _luminosity_integrand(self, log_r):
        # dL/dlog(r) for both faces; one r from dA = 2 pi r dr, one from dr = r dlog(r)
        a = self.spin
        r = math.exp(log_r)
        gtt = -1.0 + 2.0 / r
        gtf = -2.0 * a / r
        gff = r * r + a * a + 2.0 * a * a / r
        omega = 1.0 / (a + r ** 1.5)
        u_t = math.sqrt(-1.0 / (gtt + 2.0 * omega * gtf + omega * omega * gff)) \
            * (gtt + omega * gtf)
        return 2.0 * math.pi * r * 2.0 * (-u_t) * self.flux(r) * r

    def lumi(self):
        """
        Total luminosity of both disk faces into 4 pi.

        Integrates the local flux transformed to the coordinate frame,

            L = 2 * 2 pi int F(r) (-U_t) r dr,

        on a logarithmic radius grid from r_ms to 1e5 GM/c^2. Other
        relativistic effects (light bending, returning radiation) are
        ignored.

        Returns
        -------
        float
            Luminosity in units of L_Edd(M).
        """
        lum = integrate_simpson(self._luminosity_integrand,
                                math.log(self.r_ms), math.log(LUMI_R_MAX),
                                LUMI_EPS)
        # area element from (GM/c^2)^2 to cm^2
        lum *= (self.mass * GRAV_RADIUS) ** 2
        return lum / (L_EDD * self.mass)

    def to_dict(self):
        """Serialize the disk configuration."""
        return {
            "mass": self.mass,
            "spin": self.spin,
            "mdot": self.mdot,
            "alpha": self.alpha,
            "options": self.options,
            "r_min": self.r_ms,
        }


def find_mdot_for_luminosity(disk, lum):
    """
    Accretion rate at which the disk radiates a given luminosity.

    Bisects the residual lum - L(mdot) over mdot in [0, 100] to a
    tolerance of 1e-6 (1e-6 * lum for lum < 1). The search runs on a
    copy of the disk; the caller's disk is never modified.

    Parameters
    ----------
    disk : NovikovThorneDisk
        Disk supplying M, a and r_ms.
    lum : float
        Target luminosity in units of L_Edd(M).

    Returns
    -------
    float or None
        The accretion rate in Eddington units, or None if the bracket
        does not contain the target or bisection did not converge.
    """
    if lum == 0.0:
        return 0.0

    trial = copy.copy(disk)

    def residual(mdot):
        trial.mdot = mdot
        return lum - trial.lumi()

    # below L = 1 the tolerance shrinks with the target to keep it relative
    tol = MDOT_TOL * min(1.0, lum)
    mdot, ok = bisect(MDOT_MIN, MDOT_MAX, tol, residual)
    if not ok:
        log.warning("cannot find mdot for L=%g L_Edd in [%g, %g]",
                    lum, MDOT_MIN, MDOT_MAX)
        return None
    return mdot
