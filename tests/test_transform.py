"""Test module for GPX to GeoJSON transformation"""

import json

import pytest

from conftest import make_gpx
from gpx_walk.config import TransformConfig
from gpx_walk.core import Point
from gpx_walk.exceptions import ConfigurationError, GPXDecodeError, TransformError
from gpx_walk.pipelines.transform import GeoJSONTransformer, build_feature_collection
from gpx_walk.utils.ingestion import ErrorStrategy


class TestBuildFeatureCollection:
    """Test GeoJSON construction"""

    def test_coordinates_are_lon_lat(self):
        """Test that positions are [longitude, latitude]"""
        collection = build_feature_collection([Point(latitude=51.92, longitude=4.47)])

        assert collection["features"][0]["geometry"]["coordinates"] == [[4.47, 51.92]]

    def test_structure(self):
        """Test one LineString Feature in a FeatureCollection"""
        points = [Point(51.92, 4.47), Point(51.93, 4.48)]

        collection = json.loads(json.dumps(build_feature_collection(points)))

        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 1
        feature = collection["features"][0]
        assert feature["type"] == "Feature"
        assert feature["geometry"]["type"] == "LineString"
        assert feature["geometry"]["coordinates"] == [[4.47, 51.92], [4.48, 51.93]]

    def test_full_precision(self):
        """Test that coordinates are not rounded"""
        point = Point(latitude=51.924373269285844, longitude=4.469002690910358)

        collection = build_feature_collection([point])

        assert collection["features"][0]["geometry"]["coordinates"] == [
            [4.469002690910358, 51.924373269285844]
        ]


class TestGeoJSONTransformer:
    """Test the transform pipeline"""

    def test_transform_folder(self, gpx_folder, tmp_path):
        """Test that only files with points produce output"""
        output_dir = tmp_path / "out"

        summary = GeoJSONTransformer(gpx_folder, output_dir).run()

        assert summary.succeeded
        assert summary.processed_files == 2
        assert summary.total_points == 5
        assert summary.written_files == ["a_walk.geojson", "b_walk.geojson"]
        assert sorted(p.name for p in output_dir.glob("*.geojson")) == [
            "a_walk.geojson", "b_walk.geojson",
        ]

        manifest = json.loads((output_dir / "manifest.json").read_text())
        assert manifest == ["a_walk.geojson", "b_walk.geojson"]
        assert summary.manifest_path == (output_dir / "manifest.json").resolve()

    def test_output_content(self, tmp_path):
        """Test GeoJSON written to disk keeps point order and lon/lat"""
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "walk.gpx").write_text(make_gpx([(51.92, 4.47), (51.93, 4.48)]))

        GeoJSONTransformer(input_dir, tmp_path / "out").run()

        text = (tmp_path / "out" / "walk.geojson").read_text()
        data = json.loads(text)
        assert data["features"][0]["geometry"]["coordinates"] == [[4.47, 51.92], [4.48, 51.93]]
        assert '\n  "' in text  # indented output

    def test_corrupt_file_signals_failure(self, corrupt_folder, tmp_path):
        """Test that a corrupt file fails the run but valid output is kept"""
        output_dir = tmp_path / "out"

        summary = GeoJSONTransformer(corrupt_folder, output_dir).run()

        assert not summary.succeeded
        assert [f.path.name for f in summary.failures] == ["broken.gpx"]
        assert summary.processed_files == 1
        assert summary.total_points == 2
        assert (output_dir / "good.geojson").exists()
        assert not (output_dir / "broken.geojson").exists()
        assert json.loads((output_dir / "manifest.json").read_text()) == ["good.geojson"]

    def test_fail_fast_strategy(self, corrupt_folder, tmp_path):
        """Test that the transformer honours FAIL_FAST"""
        transformer = GeoJSONTransformer(
            corrupt_folder, tmp_path / "out", strategy=ErrorStrategy.FAIL_FAST
        )

        with pytest.raises(TransformError) as exc_info:
            transformer.run()

        assert isinstance(exc_info.value.__cause__, GPXDecodeError)

    def test_no_points_no_manifest(self, tmp_path):
        """Test that a folder without points writes nothing"""
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "empty.gpx").write_text(make_gpx([]))

        summary = GeoJSONTransformer(input_dir, tmp_path / "out").run()

        assert summary.succeeded
        assert summary.processed_files == 0
        assert summary.written_files == []
        assert summary.manifest_path is None
        assert list((tmp_path / "out").iterdir()) == []

    def test_manifest_failure_is_warning(self, gpx_folder, tmp_path):
        """Test that a manifest that cannot be written does not fail the run"""
        output_dir = tmp_path / "out"
        output_dir.mkdir()
        (output_dir / "manifest.json").mkdir()  # a directory cannot be opened for writing

        summary = GeoJSONTransformer(gpx_folder, output_dir).run()

        assert summary.succeeded
        assert summary.manifest_path is None
        assert (output_dir / "a_walk.geojson").exists()

    def test_custom_manifest_name(self, gpx_folder, tmp_path):
        """Test a configured manifest file name"""
        config = TransformConfig(manifest_filename="index.json")

        summary = GeoJSONTransformer(gpx_folder, tmp_path, config).run()

        assert summary.manifest_path == (tmp_path / "index.json").resolve()

    def test_missing_input_directory(self, tmp_path):
        """Test that a missing input directory is fatal"""
        with pytest.raises(TransformError):
            GeoJSONTransformer(tmp_path / "missing", tmp_path / "out").run()

    def test_invalid_config(self, gpx_folder, tmp_path):
        """Test that an empty manifest name is rejected"""
        with pytest.raises(ConfigurationError):
            GeoJSONTransformer(gpx_folder, tmp_path, TransformConfig(manifest_filename=""))

    def test_output_name_collision(self, tmp_path):
        """Test that walk.gpx and walk.GPX do not overwrite each other"""
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "walk.GPX").write_text(make_gpx([(51.92, 4.47)]))
        (input_dir / "walk.gpx").write_text(make_gpx([(40.71, -74.0), (40.72, -74.01)]))
        output_dir = tmp_path / "out"

        summary = GeoJSONTransformer(input_dir, output_dir).run()

        assert not summary.succeeded
        assert [f.path.name for f in summary.failures] == ["walk.gpx"]
        assert summary.written_files == ["walk.geojson"]
        assert json.loads((output_dir / "manifest.json").read_text()) == ["walk.geojson"]

        data = json.loads((output_dir / "walk.geojson").read_text())
        assert data["features"][0]["geometry"]["coordinates"] == [[4.47, 51.92]]

    def test_output_name_collision_fail_fast(self, tmp_path):
        """Test that a colliding output name aborts a FAIL_FAST run"""
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "walk.GPX").write_text(make_gpx([(51.92, 4.47)]))
        (input_dir / "walk.gpx").write_text(make_gpx([(51.93, 4.48)]))

        transformer = GeoJSONTransformer(
            input_dir, tmp_path / "out", strategy=ErrorStrategy.FAIL_FAST
        )

        with pytest.raises(TransformError, match="already written"):
            transformer.run()
