"""
Closed-form roots of quadratic, cubic and quartic polynomials.

All solvers take the coefficients of a monic polynomial with real
coefficients and return its roots as Python complex numbers:

    quadratic(p, q)          z^2 + p z + q = 0
    cubic(p, q, r)           z^3 + p z^2 + q z + r = 0
    quartic(a3, a2, a1, a0)  z^4 + a3 z^3 + a2 z^2 + a1 z + a0 = 0

Root layout (canonical order):
    1. real roots first, ascending;
    2. complex roots after, grouped in conjugate pairs ordered by real
       part, each pair with the +imag member first.

A root counts as real when its imaginary part is exactly zero. The
solvers construct real roots with an exact zero imaginary part, so the
count of real roots is not subject to a tolerance.

The quartic goes through the resolvent cubic (Ferrari). Every quartic
root is polished with Newton steps on the original polynomial; a step is
kept only when it lowers the residual.

NaN coefficients propagate to NaN roots.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import cmath
import math

SQRT3 = math.sqrt(3.0)

# Newton polishing steps applied to each quartic root and to the
# resolvent root.
POLISH_STEPS = 3


def _cbrt(x):
    """Real cube root that keeps the sign of x."""
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _horner(coeffs, z):
    """Evaluate a polynomial and its derivative at z.

    coeffs are ordered from the leading coefficient down.
    """
    f = coeffs[0]
    df = 0.0
    for c in coeffs[1:]:
        df = df * z + f
        f = f * z + c
    return f, df


def _polish(coeffs, z):
    """Newton-polish z as a root of coeffs, keeping only improving steps."""
    best = z
    best_res = abs(_horner(coeffs, z)[0])
    for _ in range(POLISH_STEPS):
        if best_res == 0.0:
            break
        f, df = _horner(coeffs, best)
        if df == 0:
            break
        cand = best - f / df
        res = abs(_horner(coeffs, cand)[0])
        if not res < best_res:
            break
        best, best_res = cand, res
    return best


def _quadratic_complex(p, q):
    d = cmath.sqrt(0.25 * p * p - q)
    half = 0.5 * p
    # Take d along half so that half + d does not cancel
    if (half.conjugate() * d).real < 0.0:
        d = -d
    t = -(half + d)
    if t == 0:
        return complex(0.0, 0.0), complex(0.0, 0.0)
    return t, q / t


def quadratic(p, q):
    """
    Solve z^2 + p*z + q = 0.

    For real coefficients the discriminant D = p^2/4 - q selects the
    branch. With D >= 0 both roots are real; the larger-magnitude root
    is formed as -(p/2 + sign(p) sqrt(D)) and the other one from the
    product of roots q, which avoids cancellation. With D < 0 the roots
    are the conjugate pair -p/2 +- i sqrt(-D).

    Complex p or q are accepted and solved with the same cancellation-free
    construction over complex numbers.

    Parameters
    ----------
    p, q : float or complex
        Coefficients of the monic quadratic.

    Returns
    -------
    tuple of complex
        (z1, z2). Real roots ascending; a conjugate pair +imag first.
    """
    if isinstance(p, complex) or isinstance(q, complex):
        return _quadratic_complex(complex(p), complex(q))

    disc = 0.25 * p * p - q
    if disc >= 0.0:
        t = -(0.5 * p + math.copysign(math.sqrt(disc), p))
        if t == 0.0:
            return complex(0.0, 0.0), complex(0.0, 0.0)
        z1, z2 = t, q / t
        if z1 > z2:
            z1, z2 = z2, z1
        return complex(z1, 0.0), complex(z2, 0.0)

    re = -0.5 * p
    im = math.sqrt(-disc)
    return complex(re, im), complex(re, -im)


def cubic(p, q, r):
    """
    Solve z^3 + p*z^2 + q*z + r = 0.

    The substitution z = y - p/3 gives the depressed cubic
    y^3 + P y + Q = 0 with P = q - p^2/3 and Q = 2p^3/27 - pq/3 + r.
    When 4P^3 + 27Q^2 < 0 there are three distinct real roots and the
    trigonometric form is used. Otherwise Cardano's formula gives one
    real root and a conjugate pair (or a repeated real root when the
    discriminant vanishes).

    Returns
    -------
    tuple of complex
        (z1, z2, z3) in canonical order.
    """
    shift = p / 3.0
    big_p = q - p * shift
    big_q = 2.0 * p * p * p / 27.0 - p * q / 3.0 + r
    disc = 4.0 * big_p * big_p * big_p + 27.0 * big_q * big_q

    if disc < 0.0:
        # three real roots; disc < 0 implies big_p < 0
        m = 2.0 * math.sqrt(-big_p / 3.0)
        c = 3.0 * big_q / (big_p * m)
        c = max(-1.0, min(1.0, c))
        theta = math.acos(c) / 3.0
        ys = [m * math.cos(theta - 2.0 * math.pi * k / 3.0) for k in range(3)]
        roots = [complex(y - shift, 0.0) for y in ys]
        return tuple(sort_roots(roots)[0])

    # disc/108 = Q^2/4 + P^3/27; max() also lets NaN through
    d = math.sqrt(max(disc, 0.0) / 108.0)
    t = -0.5 * big_q - math.copysign(d, big_q)
    a = _cbrt(t)
    b = -big_p / (3.0 * a) if a != 0.0 else 0.0

    y1 = a + b
    re = -0.5 * y1 - shift
    im = 0.5 * SQRT3 * (a - b)
    roots = [complex(y1 - shift, 0.0)]
    if im == 0.0:
        roots += [complex(re, 0.0), complex(re, 0.0)]
    else:
        roots += [complex(re, abs(im)), complex(re, -abs(im))]
    return tuple(sort_roots(roots)[0])


def _biquadratic_pairs(p, r):
    """Root pairs of y^4 + p y^2 + r = 0, each pair closed under conjugation."""
    w1, w2 = quadratic(p, r)
    if w1.imag != 0.0:
        s = cmath.sqrt(w1)
        return [(s, s.conjugate()), (-s, -s.conjugate())]
    pairs = []
    for w in (w1.real, w2.real):
        if w >= 0.0:
            s = math.sqrt(w)
            pairs.append((complex(-s, 0.0), complex(s, 0.0)))
        else:
            s = math.sqrt(-w)
            pairs.append((complex(0.0, s), complex(0.0, -s)))
    return pairs


def _resolvent_root(p, q, r):
    """Largest real root of m^3 + p m^2 + (p^2/4 - r) m - q^2/8 = 0."""
    coeffs = (1.0, p, 0.25 * p * p - r, -0.125 * q * q)
    m = max(z.real for z in cubic(*coeffs[1:]) if z.imag == 0.0)
    return _polish(coeffs, m)


def quartic(a3, a2, a1, a0):
    """
    Solve z^4 + a3*z^3 + a2*z^2 + a1*z + a0 = 0.

    The shift z = y - a3/4 removes the cubic term, leaving
    y^4 + p y^2 + q y + r = 0. For q == 0 this is a quadratic in y^2.
    Otherwise the largest real root m of the resolvent cubic
    m^3 + p m^2 + (p^2/4 - r) m - q^2/8 = 0 splits the quartic into

        y^2 - s y + (p/2 + m + q/(2s)) = 0
        y^2 + s y + (p/2 + m - q/(2s)) = 0,     s = sqrt(2m).

    Parameters
    ----------
    a3, a2, a1, a0 : float
        Coefficients of the monic quartic.

    Returns
    -------
    tuple of (tuple of complex, int)
        ((z1, z2, z3, z4), nr). The first nr roots are real, ascending;
        the rest are conjugate pairs with +imag first.
    """
    shift = 0.25 * a3
    aa = a3 * a3
    p = a2 - 0.375 * aa
    q = a1 - 0.5 * a2 * a3 + 0.125 * aa * a3
    r = a0 - 0.25 * a1 * a3 + 0.0625 * a2 * aa - 3.0 * aa * aa / 256.0

    pairs = None
    if q != 0.0:
        m = _resolvent_root(p, q, r)
        if m > 0.0:
            s = math.sqrt(2.0 * m)
            h = q / (2.0 * s)
            pairs = [quadratic(-s, 0.5 * p + m + h),
                     quadratic(s, 0.5 * p + m - h)]
    if pairs is None:
        pairs = _biquadratic_pairs(p, r)

    coeffs = (1.0, a3, a2, a1, a0)
    roots = []
    for y1, y2 in pairs:
        z1 = complex(y1.real - shift, y1.imag)
        z2 = complex(y2.real - shift, y2.imag)
        if z1.imag == 0.0 and z2.imag == 0.0:
            roots.append(complex(_polish(coeffs, z1.real), 0.0))
            roots.append(complex(_polish(coeffs, z2.real), 0.0))
        else:
            # polish one member, keep the pair exactly conjugate
            z = _polish(coeffs, z1 if z1.imag > 0.0 else z2)
            roots.append(z)
            roots.append(z.conjugate())

    ordered, nr = sort_roots(roots)
    return tuple(ordered), nr


def _split(roots):
    real = [complex(z.real, 0.0) for z in roots if z.imag == 0.0]
    cplx = [z for z in roots if z.imag != 0.0]
    return real, cplx


def _order_complex(cplx):
    # conjugates share (re, |im|) and sit together, +imag first
    return sorted(cplx, key=lambda z: (z.real, abs(z.imag), -z.imag))


def sort_roots(roots):
    """
    Put roots into canonical order.

    Parameters
    ----------
    roots : iterable of complex
        Roots of a polynomial with real coefficients.

    Returns
    -------
    tuple of (list of complex, int)
        (ordered roots, number of real roots nr).
    """
    real, cplx = _split(roots)
    real.sort(key=lambda z: z.real)
    return real + _order_complex(cplx), len(real)


def sort_roots_re(r1, r2, r3, r4):
    """Sort four real numbers in ascending order."""
    return tuple(sorted((r1, r2, r3, r4)))


def sort_mix(roots):
    """
    Order real roots by magnitude.

    Real roots come first by ascending |x|; at equal magnitude the
    negative root precedes the positive one. Complex roots follow in
    canonical order.

    Returns
    -------
    tuple of (list of complex, int)
        (ordered roots, number of real roots nr).
    """
    real, cplx = _split(roots)
    real.sort(key=lambda z: (abs(z.real), z.real))
    return real + _order_complex(cplx), len(real)


def sort_mix2(roots):
    """
    Order real roots by sign, then magnitude.

    Negative real roots come first, then non-negative ones; within each
    group roots are ordered by ascending |x|. Equal roots keep their
    input order. Complex roots follow in canonical order.

    Returns
    -------
    tuple of (list of complex, int)
        (ordered roots, number of real roots nr).
    """
    real, cplx = _split(roots)
    real.sort(key=lambda z: (z.real >= 0.0, abs(z.real)))
    return real + _order_complex(cplx), len(real)
