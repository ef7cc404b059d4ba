# gpx_walk/pipelines/transform.py

"""
GPX to GeoJSON transformation.

Every GPX file in the input directory becomes ``<stem>.geojson`` holding a
FeatureCollection with a single LineString Feature. Files are handled
independently: a failure is recorded and the next file is processed. Two
files that map to the same output name (``walk.gpx`` and ``walk.GPX``) do
not overwrite each other; the later one is recorded as a failure. A
manifest listing the written files is produced at the end.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

import geojson

from ..config import TransformConfig
from ..core import Point
from ..exceptions import GPXWalkError, TransformError
from ..utils.config_validator import ConfigValidator
from ..utils.gpx_parser import read_gpx_file
from ..utils.ingestion import ErrorStrategy, FileFailure, handle_failure, list_gpx_files
from ..utils.io import write_json

# Decimal places kept by geojson when it rounds coordinates; large enough to be lossless
COORDINATE_PRECISION = 17


@dataclass
class TransformSummary:
    """Aggregate outcome of a transform run"""

    processed_files: int = 0
    total_points: int = 0
    written_files: List[str] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)
    manifest_path: Optional[Path] = None

    @property
    def succeeded(self) -> bool:
        return not self.failures


def build_feature_collection(points: Sequence[Point]) -> geojson.FeatureCollection:
    """
    Wrap points in a FeatureCollection with one LineString Feature

    Coordinates are GeoJSON positions, i.e. [longitude, latitude].
    """
    geometry = geojson.LineString(
        [point.coordinates() for point in points],
        precision=COORDINATE_PRECISION,
    )
    return geojson.FeatureCollection([geojson.Feature(geometry=geometry)])


def output_filename_for(path: Path) -> str:
    return f"{path.stem}.geojson"


class GeoJSONTransformer:
    """Transform each GPX file of a directory into its own GeoJSON file"""

    def __init__(self,
                 input_dir: Union[str, Path],
                 output_dir: Union[str, Path],
                 config: Optional[TransformConfig] = None,
                 strategy: ErrorStrategy = ErrorStrategy.BEST_EFFORT):
        """
        Initialize transformer

        Args:
            input_dir: Directory containing GPX files
            output_dir: Directory receiving GeoJSON files and the manifest
            config: Transform configuration
            strategy: Per-file error strategy (best effort by default)
        """
        self.input_dir = Path(input_dir).resolve()
        self.output_dir = Path(output_dir).resolve()
        self.config = config or TransformConfig()
        self.strategy = strategy
        self.logger = logging.getLogger(f"{__name__}.GeoJSONTransformer")

        ConfigValidator.ensure_valid(ConfigValidator.validate_transform_config(self.config))

    def run(self) -> TransformSummary:
        """
        Transform every GPX file and write the manifest

        Returns:
            TransformSummary; ``succeeded`` is False if any file failed

        Raises:
            TransformError: If the output directory cannot be created or the
                input directory cannot be listed
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TransformError(f"Cannot create output directory {self.output_dir}: {e}") from e

        try:
            files = list_gpx_files(self.input_dir)
        except GPXWalkError as e:
            raise TransformError(f"Cannot read input directory {self.input_dir}: {e}") from e

        self.logger.info(f"Transforming {len(files)} GPX file(s) from {self.input_dir}")

        summary = TransformSummary()
        for path in files:
            output_filename = output_filename_for(path)
            try:
                if output_filename in summary.written_files:
                    # e.g. walk.gpx and walk.GPX; the first file listed keeps the name
                    raise TransformError(
                        f"output file {output_filename} was already written by another GPX file"
                    )
                points = self.transform_file(path, output_filename)
            except GPXWalkError as e:
                handle_failure(self.strategy, path, e, summary.failures)
                continue

            if points > 0:
                summary.processed_files += 1
                summary.total_points += points
                summary.written_files.append(output_filename)

        if summary.written_files:
            summary.manifest_path = self.write_manifest(summary.written_files)

        return summary

    def transform_file(self, input_path: Path, output_filename: str) -> int:
        """
        Transform a single GPX file

        Args:
            input_path: GPX file to read
            output_filename: Name of the GeoJSON file in the output directory

        Returns:
            Number of points written, 0 if the file had no points (nothing is written)
        """
        try:
            gpx = read_gpx_file(input_path)
        except GPXWalkError as e:
            raise TransformError(f"failed to read/parse GPX: {e}") from e

        points = gpx.points()
        if not points:
            self.logger.info(f"Skipping {input_path.name}: no track points")
            return 0

        collection = build_feature_collection(points)
        try:
            text = geojson.dumps(collection, indent=self.config.indent)
        except (TypeError, ValueError) as e:
            raise TransformError(f"failed to serialize GeoJSON: {e}") from e

        output_path = self.output_dir / output_filename
        try:
            output_path.write_text(text)
        except OSError as e:
            raise TransformError(f"failed to write output file {output_path}: {e}") from e

        self.logger.debug(f"Wrote {len(points)} points to {output_path}")
        return len(points)

    def write_manifest(self, filenames: List[str]) -> Optional[Path]:
        """
        Write the manifest of generated files

        Failures are logged as warnings and yield None.
        """
        manifest_path = self.output_dir / self.config.manifest_filename
        try:
            write_json(filenames, manifest_path, indent=self.config.indent)
        except (OSError, TypeError, ValueError) as e:
            self.logger.warning(f"Failed to write manifest file {manifest_path}: {e}")
            return None

        self.logger.info(f"Generated manifest file: {manifest_path}")
        return manifest_path
