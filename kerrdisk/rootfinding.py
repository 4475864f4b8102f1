"""
Bracketed root finding by bisection.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

MAX_ITER = 100


def bisect(x_lo, x_hi, tol, f, max_iter=MAX_ITER):
    """
    Find a root of f inside [x_lo, x_hi] by bisection.

    The bracket must straddle a sign change, f(x_lo) * f(x_hi) < 0. The
    search keeps the end where f < 0 and halves the step until it drops
    below tol or a midpoint hits f == 0 exactly.

    Parameters
    ----------
    x_lo, x_hi : float
        Bracket ends (either order).
    tol : float
        Absolute tolerance on the root location.
    f : callable
        Continuous scalar function f(x) -> float.
    max_iter : int, optional
        Maximum number of halvings.

    Returns
    -------
    tuple of (float, bool)
        (root, ok). ok is False when the sign condition fails at entry
        (root is then NaN) or when max_iter is exhausted (root is the
        last estimate).
    """
    f_lo = f(x_lo)
    f_hi = f(x_hi)
    if not f_lo * f_hi < 0.0:
        return float("nan"), False

    # orient the search so that f(root) < 0 and root + dx brackets the sign change
    if f_lo < 0.0:
        root, dx = x_lo, x_hi - x_lo
    else:
        root, dx = x_hi, x_lo - x_hi

    for _ in range(max_iter):
        dx *= 0.5
        x_mid = root + dx
        f_mid = f(x_mid)
        if f_mid <= 0.0:
            root = x_mid
        if abs(dx) < tol or f_mid == 0.0:
            return root, True
    return root, False
