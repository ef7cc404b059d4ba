# gpx_walk/utils/gpx_parser.py

"""
GPX decoding.

Raw bytes are handed to gpxpy and the resulting document is mapped onto the
immutable model in ``gpx_walk.core``. Only creator, version, track name/type
and point latitude/longitude survive; elevation, time and extensions are
dropped.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, Union

import gpxpy
import gpxpy.gpx

from ..core import GPX, Point, Segment, Track
from ..exceptions import GPXDecodeError, GPXReadError

logger = logging.getLogger(__name__)


def decode_gpx(data: Union[bytes, str]) -> GPX:
    """
    Decode a GPX document

    Args:
        data: Raw GPX content, UTF-8 bytes or text

    Returns:
        Parsed GPX document

    Raises:
        GPXDecodeError: If the content is empty or not valid GPX
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise GPXDecodeError(f"GPX content is not valid UTF-8: {e}") from e

    if not data.strip():
        raise GPXDecodeError("GPX content is empty")

    try:
        parsed = gpxpy.parse(data)
    except (gpxpy.gpx.GPXException, ValueError) as e:
        raise GPXDecodeError(f"Invalid GPX document: {e}") from e

    root_name = _root_name(data)
    if root_name != "gpx":
        raise GPXDecodeError(f"Expected a <gpx> root element, found <{root_name}>")

    return _to_model(parsed)


def read_gpx(stream: BinaryIO) -> GPX:
    """
    Read a stream completely and decode it; the stream is always closed

    Args:
        stream: Readable binary stream

    Returns:
        Parsed GPX document
    """
    with stream:
        data = stream.read()
    return decode_gpx(data)


def read_gpx_file(file_path: Union[str, Path]) -> GPX:
    """
    Read and decode a GPX file

    Args:
        file_path: Path to the GPX file

    Returns:
        Parsed GPX document

    Raises:
        GPXReadError: If the file cannot be opened or read
        GPXDecodeError: If the file content is not valid GPX
    """
    try:
        stream = open(file_path, "rb")
    except OSError as e:
        raise GPXReadError(f"Cannot open {file_path}: {e}") from e

    try:
        gpx = read_gpx(stream)
    except OSError as e:
        raise GPXReadError(f"Cannot read {file_path}: {e}") from e

    logger.debug(f"Decoded {file_path}: {len(gpx.tracks)} track(s), {gpx.point_count} point(s)")
    return gpx


def _root_name(data: str) -> str:
    """Local name of the document root element, ignoring namespace"""
    parser = ET.XMLPullParser(events=("start",))
    try:
        parser.feed(data)
        for _, element in parser.read_events():
            return element.tag.rsplit("}", 1)[-1]
    except ET.ParseError as e:
        raise GPXDecodeError(f"Invalid GPX document: {e}") from e
    return ""


def _to_model(parsed: gpxpy.gpx.GPX) -> GPX:
    tracks = tuple(
        Track(
            name=track.name or "",
            type=track.type or "",
            segments=tuple(
                Segment(
                    points=tuple(
                        Point(latitude=float(p.latitude), longitude=float(p.longitude))
                        for p in segment.points
                    )
                )
                for segment in track.segments
            ),
        )
        for track in parsed.tracks
    )

    return GPX(
        creator=parsed.creator or "",
        version=parsed.version or "",
        tracks=tracks,
    )
