"""
Plain-text dump of the disk radial structure.

Format: a '#'-prefixed header with the disk configuration, then one row
per radius with seven whitespace-separated columns in scientific
notation:

    r   flux   sigma   ell   vr   H   dH/dr

Rows start at r_ms and advance geometrically (r *= 1.05) while
r < 2000 GM/c^2.
"""

import logging
import sys

from kerrdisk.core import geometric_radii, standard_pipeline

log = logging.getLogger(__name__)

DUMP_R_MAX = 2000.0
DUMP_STEP = 1.05

RULE = "#-------------------------------------------\n"


def profile_rows(disk, r_max=DUMP_R_MAX, step=DUMP_STEP):
    """
    Tabulate the disk structure.

    Returns
    -------
    list of tuple
        (r, flux, sigma, ell, vr, h, dhdr) per radius.
    """
    radii = geometric_radii(disk.r_min(), r_max, step)
    results = standard_pipeline().run(disk, radii)
    columns = [[float(r) for r in radii]]
    columns += [result.series for result in results.values()]
    return list(zip(*columns))


def write_table(disk, stream, r_max=DUMP_R_MAX, step=DUMP_STEP):
    """Write the header and table rows to an open text stream."""
    stream.write("# (kerrdisk) dump\n")
    stream.write(RULE)
    stream.write("# M        = %.4f\n" % disk.mass)
    stream.write("# a        = %.4f\n" % disk.spin)
    stream.write("# rmin     = %.4f\n" % disk.r_min())
    stream.write("# rmax     = %.4f\n" % r_max)
    stream.write("# alpha    = %.4f\n" % disk.alpha)
    stream.write("# options  = %d\n" % disk.options)
    stream.write("# L        = %e\n" % disk.lumi())
    stream.write("# mdot     = %e\n" % disk.mdot)
    stream.write(RULE)
    stream.write("# r   flux   sigma   ell   vr   H   dH/dr\n")
    stream.write(RULE)
    for row in profile_rows(disk, r_max, step):
        stream.write("  ".join("%e" % value for value in row) + "\n")
    stream.flush()


def dump(disk, path=None):
    """
    Print the disk structure as a function of radius.

    Parameters
    ----------
    disk : NovikovThorneDisk
        The configured disk.
    path : str or path-like, optional
        File to write (overwritten). Standard output when None.

    Returns
    -------
    bool
        True when the table was written, False when the output could
        not be opened (the reason is logged).
    """
    if path is None:
        write_table(disk, sys.stdout)
        return True
    try:
        stream = open(path, "w", encoding="ascii")
    except OSError as exc:
        log.error("dump: cannot open output (%s): %s", path, exc)
        return False
    with stream:
        write_table(disk, stream)
    return True
