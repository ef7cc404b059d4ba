# gpx_walk/pipelines/extract.py

"""Point extraction across a folder of GPX files"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from ..core import GPX, Point
from ..utils.ingestion import ErrorStrategy, read_gpx_folder


@dataclass
class ExtractionResult:
    """Flattened points of every GPX file in a folder"""

    file_count: int = 0
    points: List[Point] = field(default_factory=list)


def extract_points(documents: Iterable[GPX]) -> List[Point]:
    """
    Flatten points across documents

    Args:
        documents: GPX documents in ingestion order

    Returns:
        All points, ordered by document then by position in the document
    """
    return [point for gpx in documents for point in gpx.points()]


class PointExtractor:
    """Read a folder fail-fast and flatten all of its track points"""

    def __init__(self, folder: Union[str, Path]):
        self.folder = Path(folder)
        self.logger = logging.getLogger(f"{__name__}.PointExtractor")

    def run(self) -> ExtractionResult:
        contents = read_gpx_folder(self.folder, ErrorStrategy.FAIL_FAST)
        points = extract_points(contents.gpx_documents)

        for point in points:
            self.logger.debug(f"coords lat={point.latitude} lng={point.longitude}")

        self.logger.info(
            f"Extracted {len(points)} points from {len(contents.documents)} GPX file(s)"
        )
        return ExtractionResult(file_count=len(contents.documents), points=points)
