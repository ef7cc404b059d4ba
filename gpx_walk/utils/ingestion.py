# gpx_walk/utils/ingestion.py

"""Folder ingestion of GPX files"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Tuple, Union

from ..core import GPX
from ..exceptions import GPXWalkError, IngestionError
from .gpx_parser import read_gpx_file

logger = logging.getLogger(__name__)

GPX_EXTENSION = ".gpx"


class ErrorStrategy(Enum):
    """How per-file failures are treated while walking a folder"""

    FAIL_FAST = "fail_fast"  # First failure aborts the whole operation
    BEST_EFFORT = "best_effort"  # Failures are recorded and the walk continues


@dataclass
class FileFailure:
    """A file that could not be processed"""

    path: Path
    error: Exception

    def __str__(self) -> str:
        return f"{self.path.name}: {self.error}"


@dataclass
class FolderContents:
    """GPX documents read from a folder, in listing order"""

    documents: List[Tuple[Path, GPX]] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)

    @property
    def gpx_documents(self) -> List[GPX]:
        return [gpx for _, gpx in self.documents]


def is_gpx_file(path: Path) -> bool:
    """Check whether a path names a GPX file, ignoring extension case"""
    return path.suffix.lower() == GPX_EXTENSION


def list_gpx_files(folder: Union[str, Path]) -> List[Path]:
    """
    List GPX files directly inside a folder

    Args:
        folder: Directory to scan (not recursive)

    Returns:
        GPX file paths sorted by file name

    Raises:
        IngestionError: If the directory cannot be listed
    """
    folder = Path(folder)
    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise IngestionError(f"Cannot read directory {folder}: {e}") from e

    return [entry for entry in entries if is_gpx_file(entry) and not entry.is_dir()]


def handle_failure(strategy: ErrorStrategy, path: Path, error: Exception,
                   failures: List[FileFailure]) -> None:
    """
    Apply an error strategy to a per-file failure

    Under FAIL_FAST the error is re-raised; under BEST_EFFORT it is logged
    and appended to ``failures``.
    """
    if strategy is ErrorStrategy.FAIL_FAST:
        raise error

    logger.error(f"Error processing {path.name}: {error}")
    failures.append(FileFailure(path=path, error=error))


def read_gpx_folder(folder: Union[str, Path],
                    strategy: ErrorStrategy = ErrorStrategy.FAIL_FAST) -> FolderContents:
    """
    Read and decode every GPX file in a folder

    Args:
        folder: Directory containing GPX files
        strategy: Per-file error handling strategy

    Returns:
        FolderContents with documents in listing order
    """
    contents = FolderContents()

    for path in list_gpx_files(folder):
        try:
            gpx = read_gpx_file(path)
        except GPXWalkError as e:
            handle_failure(strategy, path, e, contents.failures)
            continue

        contents.documents.append((path, gpx))

    logger.info(
        f"Read {len(contents.documents)} GPX file(s) from {folder}"
        + (f", {len(contents.failures)} failed" if contents.failures else "")
    )
    return contents
