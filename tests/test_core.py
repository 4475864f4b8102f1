"""
Tests for the traced radial profile pipeline.
"""

import pytest

from kerrdisk.core import (
    PipelineRunner,
    ProfileStage,
    StageResult,
    geometric_radii,
    standard_pipeline,
)


class TestGeometricRadii:

    def test_first_and_step(self):
        radii = geometric_radii(2.0, 10.0, 2.0)
        assert list(radii) == [2.0, 4.0, 8.0]

    def test_stop_is_exclusive(self):
        radii = geometric_radii(1.0, 8.0, 2.0)
        assert list(radii) == [1.0, 2.0, 4.0]

    def test_empty_when_start_beyond_stop(self):
        assert len(geometric_radii(5.0, 5.0)) == 0

    def test_step_must_grow(self):
        with pytest.raises(ValueError):
            geometric_radii(1.0, 10.0, 1.0)


class TestPipeline:

    def test_stage_records_series(self, schwarzschild_disk):
        stage = ProfileStage("ell", lambda d, r: d.ell(r), "l(r)", "GM/c")
        result = stage.process(schwarzschild_disk, [8.0, 10.0])
        assert isinstance(result, StageResult)
        assert result.series == [schwarzschild_disk.ell(8.0),
                                 schwarzschild_disk.ell(10.0)]
        assert result.to_dict() == {
            "name": "ell",
            "equation": "l(r)",
            "units": "GM/c",
            "series": result.series,
        }

    def test_runner_preserves_order(self, kerr_disk):
        runner = PipelineRunner()
        runner.add_stage(ProfileStage("b", lambda d, r: 2.0 * r, "2r")) \
              .add_stage(ProfileStage("a", lambda d, r: r, "r"))
        results = runner.run(kerr_disk, [1.0, 3.0])
        assert list(results) == ["b", "a"]
        assert results["b"].series == [2.0, 6.0]

    def test_standard_pipeline_quantities(self, kerr_disk):
        runner = standard_pipeline()
        assert runner.names == ["flux", "sigma", "ell", "vr", "h", "dhdr"]
        results = runner.run(kerr_disk, [10.0])
        assert results["flux"].series == [kerr_disk.flux(10.0)]
        assert results["sigma"].series == [kerr_disk.sigma(10.0)]
        assert results["vr"].series == [0.0]
