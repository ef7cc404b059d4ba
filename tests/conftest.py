"""
Pytest configuration file
"""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


VALID_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx creator="TestCreator" version="1.1"
     xmlns="http://www.topografix.com/GPX/1/1"
     xmlns:ns3="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">
  <trk>
    <name>Rotterdam Walking</name>
    <type>walking</type>
    <trkseg>
      <trkpt lat="51.9237274490296840667724609375" lon="4.4737290032207965850830078125">
        <ele>23</ele>
        <time>2024-04-08T19:23:26.000Z</time>
        <extensions>
          <ns3:TrackPointExtension>
            <ns3:hr>119</ns3:hr>
          </ns3:TrackPointExtension>
        </extensions>
      </trkpt>
      <trkpt lat="51.924373269285844" lon="4.469002690910358"/>
    </trkseg>
    <trkseg>
      <trkpt lat="51.92308253810835" lon="4.469793977934499"/>
    </trkseg>
  </trk>
</gpx>
"""

TRUNCATED_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx creator="TestCreator" version="1.1">"""

EMPTY_TRACK_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx creator="TestCreator" version="1.1"></gpx>
"""


def make_gpx(points, creator="TestCreator", name="walk"):
    """Build a minimal GPX document with one track and one segment"""
    trkpts = "\n".join(
        f'      <trkpt lat="{lat!r}" lon="{lon!r}"></trkpt>' for lat, lon in points
    )
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<gpx creator="{creator}" version="1.1">\n'
        f"  <trk>\n    <name>{name}</name>\n    <trkseg>\n{trkpts}\n    </trkseg>\n  </trk>\n"
        f"</gpx>\n"
    )


@pytest.fixture
def valid_gpx_text():
    """Provide a GPX document with two segments and an ignored extension"""
    return VALID_GPX


@pytest.fixture
def gpx_folder(tmp_path):
    """Provide a folder with two walks, an empty document and a non-GPX file"""
    folder = tmp_path / "data"
    folder.mkdir()

    (folder / "a_walk.gpx").write_text(
        make_gpx([(51.92, 4.47), (51.9201, 4.4702), (51.9202, 4.4704)])
    )
    (folder / "b_walk.GPX").write_text(make_gpx([(51.93, 4.48), (51.9301, 4.4801)]))
    (folder / "c_empty.gpx").write_text(EMPTY_TRACK_GPX)
    (folder / "notes.txt").write_text("not a gpx file")

    return folder


@pytest.fixture
def corrupt_folder(tmp_path):
    """Provide a folder with one valid and one corrupt GPX file"""
    folder = tmp_path / "mixed"
    folder.mkdir()

    (folder / "broken.gpx").write_text(TRUNCATED_GPX)
    (folder / "good.gpx").write_text(make_gpx([(51.92, 4.47), (51.921, 4.471)]))

    return folder
