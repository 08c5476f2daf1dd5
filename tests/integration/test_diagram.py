"""
Integration tests for the beam diagram pipeline.

Tests the complete workflow from configuration to output files.
"""

import json

import numpy as np
import pytest

from radar_beam import BeamDiagram, DiagramConfig, DiagramResult, sample_beam
from radar_beam.config import ConfigurationError
from radar_beam.geometry import earth_radius


class TestBeamDiagramBasic:
    """Basic diagram functionality tests."""

    def test_default_run(self):
        """Default configuration gives 25 beams of 101 points."""
        result = BeamDiagram(DiagramConfig()).run()
        assert isinstance(result, DiagramResult)
        assert len(result.paths) == 25
        assert all(len(p) == 101 for p in result.paths)
        assert result.elevations_deg[0] == 0.0
        assert result.elevations_deg[-1] == 40.0

    def test_from_dict(self):
        """Dictionaries are accepted as configuration."""
        diagram = BeamDiagram({
            "site": {"latitude_deg": 50.0, "altitude_m": 300.0},
            "scan": {"tiers": [[0, 10], [30, 0]]},
            "range": {"max_range_km": 100.0, "n_sections": 10},
        })
        result = diagram.run()
        assert result.elevations_deg.tolist() == pytest.approx([0.0, 1.0, 2.0, 3.0])
        assert result.metadata["n_beams"] == 4
        assert result.metadata["earth_radius_m"] == earth_radius(50.0)

    def test_from_yaml_file(self, tmp_path):
        """YAML paths are accepted as configuration."""
        path = tmp_path / "diagram.yaml"
        path.write_text("scan:\n  tiers: '0:5,10:0'\nrange:\n  n_sections: 4\n")
        result = BeamDiagram(str(path)).run()
        assert len(result.paths) == 3
        assert all(len(p) == 5 for p in result.paths)

    def test_invalid_config_type(self):
        """Unsupported configuration types are rejected."""
        with pytest.raises(TypeError):
            BeamDiagram(3.14)

    def test_invalid_config_refuses_to_run(self):
        """A configuration with errors cannot be run."""
        diagram = BeamDiagram({"range": {"n_sections": 0}})
        assert diagram.validation_errors
        with pytest.raises(ConfigurationError):
            diagram.run()

    def test_configuration_error_is_value_error(self):
        """ConfigurationError can be caught as ValueError."""
        assert issubclass(ConfigurationError, ValueError)


class TestBeamDiagramPhysics:
    """The diagram reproduces the single-beam calculation."""

    @pytest.fixture(scope="class")
    def result(self):
        """Standard diagram at a mountain site."""
        config = DiagramConfig()
        config.site.latitude_deg = 46.5
        config.site.altitude_m = 1600.0
        config.range.max_range_km = 250.0
        config.range.n_sections = 50
        return BeamDiagram(config).run()

    def test_pairs_in_schedule_order(self, result):
        """pairs() yields angles in schedule order with their paths."""
        angles = [angle for angle, _ in result.pairs()]
        assert angles == result.elevations_deg.tolist()

    def test_paths_match_sample_beam(self, result):
        """Each path equals a directly sampled beam."""
        for angle, path in result.pairs():
            direct = sample_beam(250_000.0, 50, angle, 46.5, 1600.0)
            assert path.points == direct.points

    def test_all_beams_start_at_site(self, result):
        """Every beam starts at the site altitude with zero distance."""
        for _, path in result.pairs():
            assert path.points[0].distance_m == 0.0
            assert np.isclose(path.points[0].altitude_m, 1600.0, atol=1e-6)

    def test_higher_elevation_is_higher_at_same_distance(self, result):
        """At 50 km ground distance, higher beams are higher."""
        altitudes = result.altitudes_at_distance(50_000.0)
        assert np.all(np.diff(altitudes) > 0)

    def test_repeatable(self, result):
        """Running the same configuration twice gives identical paths."""
        again = BeamDiagram(result.config).run()
        assert [p.points for p in again.paths] == [p.points for p in result.paths]

    def test_to_dict(self, result):
        """Serialized result contains one entry per beam."""
        data = result.to_dict()
        assert len(data["beams"]) == 25
        assert len(data["beams"][0]["altitude_m"]) == 51
        assert data["metadata"]["site_altitude_m"] == 1600.0


class TestQuickPaths:
    """Tests for config-free beam sampling."""

    def test_quick_paths(self):
        """One path per angle in the given order."""
        paths = BeamDiagram.quick_paths([2.0, 0.5], max_range_km=10.0, n_sections=5)
        assert [p.elevation_deg for p in paths] == [2.0, 0.5]
        assert all(len(p) == 6 for p in paths)
        assert paths[0].ranges_m[-1] == 10_000.0

    def test_quick_paths_empty(self):
        """No angles, no paths."""
        assert BeamDiagram.quick_paths([]) == []


class TestDiagramOutput:
    """Tests for saving results."""

    @pytest.fixture
    def small(self):
        """Small diagram for output tests."""
        diagram = BeamDiagram({
            "scan": {"tiers": [[0, 5], [20, 0]]},
            "range": {"max_range_km": 100.0, "n_sections": 10},
        })
        return diagram, diagram.run()

    def test_save_json(self, small, tmp_path):
        """JSON output contains metadata, configuration and beams."""
        diagram, result = small
        path = diagram.save_result(result, str(tmp_path / "out" / "beams.json"), format="json")
        data = json.loads(open(path).read())
        assert data["metadata"]["software"] == "radar-beam"
        assert data["metadata"]["n_beams"] == 5
        assert data["configuration"]["range"]["n_sections"] == 10
        assert len(data["beams"]) == 5
        assert data["elevations_deg"] == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])

    def test_save_csv(self, small, tmp_path):
        """CSV output has one row per beam sample."""
        diagram, result = small
        path = diagram.save_result(result, str(tmp_path / "beams.csv"), format="csv")
        with open(path) as f:
            header = f.readline().strip()
        assert header == "elevation_deg,range_m,altitude_m,distance_m"

        data = np.loadtxt(path, delimiter=",", skiprows=1)
        assert data.shape == (5 * 11, 4)
        assert data[0, 1] == 0.0
        assert np.isclose(data[-1, 1], 100_000.0)
        assert np.isclose(data[-1, 0], 2.0)

    def test_save_unknown_format(self, small, tmp_path):
        """Unknown formats are rejected."""
        diagram, result = small
        with pytest.raises(ValueError):
            diagram.save_result(result, str(tmp_path / "beams.xyz"), format="xyz")

    @pytest.mark.parametrize("fmt", ["png", "svg"])
    def test_save_plot(self, small, tmp_path, fmt):
        """Plots are written as images."""
        diagram, result = small
        path = diagram.save_result(result, str(tmp_path / f"beams.{fmt}"), format=fmt)
        assert (tmp_path / f"beams.{fmt}").exists()
        assert path.endswith(fmt)
        assert (tmp_path / f"beams.{fmt}").stat().st_size > 0
