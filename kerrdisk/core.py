"""
KERRDISK Core Pipeline: traced radial profile computation.

A profile is a set of disk quantities sampled on a radial grid. Each
quantity is produced by a ProfileStage that records the equation used,
the disk configuration it ran against, and the output series.

Classes:
    ProfileStage   - One disk quantity evaluated over the radial grid
    StageResult    - Record of one stage's execution
    PipelineRunner - Runs ordered stages over a shared grid

Functions:
    geometric_radii - Radial grid from r_ms with a constant step ratio
    standard_pipeline - The seven quantities of the disk dump table

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from collections import OrderedDict

import numpy as np


class StageResult:
    """
    Record of one pipeline stage's execution.

    Parameters
    ----------
    name : str
        Stage identifier (e.g. 'flux', 'sigma').
    equation_label : str
        Human-readable equation string for display and traceability.
    units : str
        Units of the series values.
    series : list of float
        Output values at each radius.
    """

    def __init__(self, name, equation_label, units, series):
        self.name = name
        self.equation_label = equation_label
        self.units = units
        self.series = series

    def to_dict(self):
        """Serialize the stage trace for verbose output."""
        return {
            "name": self.name,
            "equation": self.equation_label,
            "units": self.units,
            "series": self.series,
        }


class ProfileStage:
    """
    One disk quantity evaluated over a radial grid.

    The equation callable must have the signature:
        (disk: NovikovThorneDisk, r: float) -> float

    Parameters
    ----------
    name : str
        Stage identifier. Used as the key in the runner's results.
    equation : callable
        The computation function. See signature above.
    equation_label : str
        Human-readable equation string.
    units : str, optional
        Units of the output.
    """

    def __init__(self, name, equation, equation_label, units=""):
        self.name = name
        self.equation = equation
        self.equation_label = equation_label
        self.units = units

    def process(self, disk, radii):
        """Evaluate the equation at each radius and record the result."""
        series = [float(self.equation(disk, r)) for r in radii]
        return StageResult(
            name=self.name,
            equation_label=self.equation_label,
            units=self.units,
            series=series,
        )


class PipelineRunner:
    """
    Runs ordered ProfileStages over one radial grid.

    The runner collects all StageResults into an OrderedDict keyed by
    stage name, in insertion order.
    """

    def __init__(self):
        self._stages = []

    def add_stage(self, stage):
        """Add a stage; returns self for chaining."""
        self._stages.append(stage)
        return self

    @property
    def names(self):
        return [stage.name for stage in self._stages]

    def run(self, disk, radii):
        """
        Execute all stages over the given radii.

        Parameters
        ----------
        disk : NovikovThorneDisk
            The configured disk.
        radii : sequence of float
            Radii in GM/c^2.

        Returns
        -------
        OrderedDict
            Mapping of stage name to StageResult, in execution order.
        """
        results = OrderedDict()
        for stage in self._stages:
            results[stage.name] = stage.process(disk, radii)
        return results


def geometric_radii(r_start, r_stop, step=1.05):
    """
    Radii r_start, r_start*step, ... strictly below r_stop.

    Each radius is the previous one times step, matching an iterated
    r *= step loop.
    """
    if step <= 1.0:
        raise ValueError("step must exceed 1, got {}".format(step))
    if r_start >= r_stop:
        return np.empty(0)
    radii = [r_start]
    while radii[-1] * step < r_stop:
        radii.append(radii[-1] * step)
    return np.array(radii)


def standard_pipeline():
    """Pipeline producing flux, sigma, ell, vr, h and dhdr."""
    runner = PipelineRunner()
    runner.add_stage(ProfileStage(
        "flux", lambda d, r: d.flux(r),
        "F = 3/(2 x^2 (x^3-3x+2a)) / (4 pi r) * [PT74 15n]",
        "erg cm^-2 s^-1"))
    runner.add_stage(ProfileStage(
        "sigma", lambda d, r: d.sigma(r),
        "Sigma = int_0^H rho dz (NT73 zones A/B)", "g cm^-2"))
    runner.add_stage(ProfileStage(
        "ell", lambda d, r: d.ell(r),
        "l = (r^2 - 2a sqrt(r) + a^2) / (r^1.5 - 2 sqrt(r) + a)", "GM/c"))
    runner.add_stage(ProfileStage(
        "vr", lambda d, r: d.vr(r), "v_r = 0", "c"))
    runner.add_stage(ProfileStage(
        "h", lambda d, r: d.h(r), "H = 0", "GM/c^2"))
    runner.add_stage(ProfileStage(
        "dhdr", lambda d, r: d.dhdr(r), "dH/dr = 0", ""))
    return runner
