"""
Adaptive Simpson quadrature.

integrate_simpson(f, a, b, eps) approximates the integral of f over
[a, b] to a relative tolerance eps. The interval is split recursively;
a panel [l, r] with midpoint m is accepted when

    |S(l, m) + S(m, r) - S(l, r)| < 15 * tol * (r - l)

where tol is the absolute tolerance per unit length derived from eps
and a coarse estimate of the integral, and the accepted value carries
the Richardson correction (difference / 15). Panels are always split
min_depth times so that symmetric or oscillating integrands cannot
converge falsely on the first comparison.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

# Panels of the composite Simpson rule used for the coarse scale estimate
COARSE_PANELS = 32


def simpson(fa, fm, fb, width):
    """Simpson's rule on one panel from endpoint and midpoint values."""
    return width * (fa + 4.0 * fm + fb) / 6.0


def composite_simpson(f, a, b, n=COARSE_PANELS):
    """Composite Simpson rule with n panels (2n + 1 evaluations)."""
    h = (b - a) / n
    total = 0.0
    fl = f(a)
    for i in range(n):
        l = a + i * h
        fm = f(l + 0.5 * h)
        fr = f(l + h)
        total += simpson(fl, fm, fr, h)
        fl = fr
    return total


def _adaptive(f, l, r, fl, fm, fr, whole, tol, depth, min_depth, max_depth):
    m = 0.5 * (l + r)
    lm = 0.5 * (l + m)
    rm = 0.5 * (m + r)
    flm = f(lm)
    frm = f(rm)
    left = simpson(fl, flm, fm, m - l)
    right = simpson(fm, frm, fr, r - m)
    delta = left + right - whole

    if depth >= max_depth:
        return left + right + delta / 15.0
    if depth >= min_depth and abs(delta) < 15.0 * tol * (r - l):
        return left + right + delta / 15.0

    return (_adaptive(f, l, m, fl, flm, fm, left, tol,
                      depth + 1, min_depth, max_depth)
            + _adaptive(f, m, r, fm, frm, fr, right, tol,
                        depth + 1, min_depth, max_depth))


def integrate_simpson(f, a, b, eps, eps_abs=1e-300, min_depth=4,
                      max_depth=40):
    """
    Integrate f over [a, b] with adaptive Simpson refinement.

    The target is |I - true| <= eps * (|true| + eps_abs). The scale
    |true| is estimated by a composite Simpson pass over |f| before
    refinement; for integrands of one sign this is |true| itself, and
    integrals that cancel to zero still get a finite tolerance.

    Parameters
    ----------
    f : callable
        Scalar integrand f(x) -> float.
    a, b : float
        Integration limits. b < a integrates in reverse (negated result).
    eps : float
        Relative tolerance.
    eps_abs : float, optional
        Absolute floor added to the scale, so integrals that vanish do
        not demand unbounded refinement.
    min_depth : int, optional
        Number of forced subdivisions before convergence is tested.
    max_depth : int, optional
        Recursion limit; panels at this depth are accepted as they are.

    Returns
    -------
    float
        Approximation of the integral.
    """
    if a == b:
        return 0.0
    if b < a:
        return -integrate_simpson(f, b, a, eps, eps_abs, min_depth, max_depth)

    scale = composite_simpson(lambda x: abs(f(x)), a, b) + eps_abs
    tol = eps * scale / (b - a)
    if not math.isfinite(tol):
        # NaN or Inf in the integrand taints the result
        return scale

    fa = f(a)
    fm = f(0.5 * (a + b))
    fb = f(b)
    whole = simpson(fa, fm, fb, b - a)
    return _adaptive(f, a, b, fa, fm, fb, whole, tol, 0, min_depth, max_depth)
