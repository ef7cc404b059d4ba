"""Utility functions for GPX Walk"""

from .gpx_parser import decode_gpx, read_gpx, read_gpx_file
from .ingestion import ErrorStrategy, FileFailure, FolderContents, list_gpx_files, read_gpx_folder
from .io import load_config_from_file, save_points_to_csv, setup_logging, write_json
from .visualization import render_strokes, save_png

__all__ = [
    "decode_gpx",
    "read_gpx",
    "read_gpx_file",
    "ErrorStrategy",
    "FileFailure",
    "FolderContents",
    "list_gpx_files",
    "read_gpx_folder",
    "setup_logging",
    "load_config_from_file",
    "save_points_to_csv",
    "write_json",
    "render_strokes",
    "save_png",
]
