# gpx_walk/main.py

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from gpx_walk import __version__
from gpx_walk.config import RenderConfig, TransformConfig
from gpx_walk.exceptions import GPXWalkError
from gpx_walk.pipelines import GeoJSONTransformer, PathVisualizer, PointExtractor
from gpx_walk.utils import load_config_from_file, save_points_to_csv, setup_logging

logger = logging.getLogger(__name__)


@dataclass
class Command:
    """A CLI sub-command"""

    name: str
    help: str
    configure: Callable[[argparse.ArgumentParser], None]
    run: Callable[[argparse.Namespace], int]


def _load_file_config(args: argparse.Namespace) -> Dict[str, Any]:
    if not getattr(args, "config", None):
        return {}
    return load_config_from_file(args.config)


# === EXTRACT ===

def _configure_extract(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("folder", type=str, help="Folder containing .gpx files")
    parser.add_argument("--csv", type=str, help="Write the extracted points to a CSV file")


def _run_extract(args: argparse.Namespace) -> int:
    result = PointExtractor(args.folder).run()

    print(f"GPX files: {result.file_count}")
    print(f"Points: {len(result.points)}")

    if args.csv:
        save_points_to_csv(result.points, args.csv)
        print(f"Points written to {args.csv}")

    return 0


# === TRANSFORM ===

def _configure_transform(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d", "--dir", type=str, default=".",
        help="The directory where the GPX files are located (default: .)",
    )
    parser.add_argument(
        "-O", "--outdir", type=str, default=".",
        help="The directory to save the output GeoJSON files (default: .)",
    )
    parser.add_argument("--config", type=str, help="YAML or JSON configuration file")


def _run_transform(args: argparse.Namespace) -> int:
    config = TransformConfig.from_dict(_load_file_config(args).get("transform"))
    transformer = GeoJSONTransformer(args.dir, args.outdir, config)

    print(
        f"Transforming GPX files from {transformer.input_dir} "
        f"to GeoJSON in {transformer.output_dir}..."
    )
    summary = transformer.run()

    if summary.manifest_path:
        print(f"Generated manifest file: {summary.manifest_path}")

    print("--------------------")
    print(
        f"Summary: Processed {summary.processed_files} GPX file(s), "
        f"total {summary.total_points} points."
    )

    if not summary.succeeded:
        print("Warning: Some files could not be processed successfully (see errors above).")
        return 1

    if summary.processed_files == 0:
        print("No valid GPX files with track points found to process.")

    print("Transformation complete.")
    return 0


# === VISUALISE ===

def _configure_visualise(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d", "--dir", type=str, default="./data",
        help="The directory where the GPX files are located (default: ./data)",
    )
    parser.add_argument(
        "-z", "--zoom", type=int,
        help="Zoom level of the projection (default: 16)",
    )
    parser.add_argument("-o", "--output", type=str, help="Output image file (default: output.png)")
    parser.add_argument(
        "--gap-threshold", type=float,
        help="Pixel distance above which consecutive points are not connected (default: 20)",
    )
    parser.add_argument("--line-width", type=int, help="Stroke width in pixels (default: 5)")
    parser.add_argument("--config", type=str, help="YAML or JSON configuration file")


def _run_visualise(args: argparse.Namespace) -> int:
    config = RenderConfig.from_dict(_load_file_config(args).get("render"))

    # Command line overrides
    if args.zoom is not None:
        config.zoom = args.zoom
    if args.output:
        config.output_filename = args.output
    if args.gap_threshold is not None:
        config.gap_threshold_px = args.gap_threshold
    if args.line_width is not None:
        config.line_width = args.line_width

    result = PathVisualizer(args.dir, config).run()

    print(f"Points: {result.point_count}, strokes: {result.stroke_count}")
    if result.output_path:
        print(f"Image ({result.width}x{result.height}) written to {result.output_path}")
    elif result.point_count:
        print(
            f"Warning: {result.point_count} points fit in a {result.width}x{result.height} "
            f"canvas at zoom {config.zoom}, no image written."
        )
    else:
        print("Nothing to draw, no image written.")

    return 0


def build_command_table() -> Dict[str, Command]:
    """Create the table of available sub-commands"""
    commands = [
        Command(
            name="extract",
            help="Extracts coordinates from all .gpx files in a folder",
            configure=_configure_extract,
            run=_run_extract,
        ),
        Command(
            name="transform",
            help="Transform each GPX file in a directory into a separate GeoJSON file",
            configure=_configure_transform,
            run=_run_transform,
        ),
        Command(
            name="visualise",
            help="Visualise coordinates parsed from gpx files",
            configure=_configure_visualise,
            run=_run_visualise,
        ),
    ]
    return {command.name: command for command in commands}


def build_parser(commands: Dict[str, Command]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpx-walk",
        description=f"GPX Walk v{__version__}: interact with geopositional data from GPX files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Count points in a folder of GPX files
    gpx-walk extract ./data

    # One GeoJSON file per GPX file plus a manifest
    gpx-walk transform --dir ./data --outdir ./app/data

    # Render every track into output.png
    gpx-walk visualise --dir ./data --zoom 15
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--log-file", type=str, help="Path to log file")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True
    for command in commands.values():
        subparser = subparsers.add_parser(command.name, help=command.help)
        command.configure(subparser)

    return parser


def dispatch(argv: Optional[List[str]], commands: Dict[str, Command]) -> int:
    """
    Parse arguments and run the selected command

    Args:
        argv: Command line arguments without the program name
        commands: Command table

    Returns:
        Process exit code
    """
    parser = build_parser(commands)
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(log_file=args.log_file, level=log_level)

    command = commands[args.command]
    logger.debug(f"Running {command.name} with {vars(args)}")

    try:
        return command.run(args)
    except KeyboardInterrupt:
        logger.info("❌ Interrupted by user (Ctrl+C)")
        return 1
    except (GPXWalkError, OSError, ValueError) as e:
        logger.error(f"❌ {command.name} failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"❌ Unexpected error during {command.name}: {e}")
        import traceback

        logger.debug(traceback.format_exc())
        return 1


def main() -> int:
    return dispatch(sys.argv[1:], build_command_table())


if __name__ == "__main__":
    sys.exit(main())
