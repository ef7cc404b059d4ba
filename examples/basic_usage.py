"""Basic GPX Walk example"""

from gpx_walk import (
    GeoJSONTransformer,
    PathVisualizer,
    PointExtractor,
    RenderConfig,
)


def main():
    """Extract, transform and render the GPX files in ./data"""

    # Flatten every point of every file
    extraction = PointExtractor('data').run()
    print(f"Read {len(extraction.points)} points from {extraction.file_count} files")

    # One GeoJSON file per GPX file plus manifest.json
    summary = GeoJSONTransformer('data', 'output/geojson').run()
    print(f"Wrote {len(summary.written_files)} GeoJSON files")
    for failure in summary.failures:
        print(f"Failed: {failure}")

    # Render all tracks in one image
    config = RenderConfig(
        zoom=15,
        gap_threshold_px=30.0,
        output_filename='walks.png'
    )
    result = PathVisualizer('data', config, output_dir='output').run()
    print(f"Rendered {result.stroke_count} strokes into {result.output_path}")


if __name__ == "__main__":
    main()
