# gpx_walk/utils/io.py

"""I/O utilities for logging, configuration and output files"""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..core import Point
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging(log_file: Optional[str] = None,
                  level: int = logging.INFO) -> None:
    """
    Setup logging configuration

    Args:
        log_file: Optional log file path
        level: Logging level
    """
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


def load_config_from_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    path = Path(config_path)

    try:
        if path.suffix in ('.yaml', '.yml'):
            with open(path, 'r') as f:
                config = yaml.safe_load(f)
        elif path.suffix == '.json':
            with open(path, 'r') as f:
                config = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot parse configuration file {config_path}: {e}") from e

    if config is not None and not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping, got {type(config).__name__}"
        )

    logger.info(f"Loaded configuration from {config_path}")
    return config or {}


def write_json(data: Any, output_path: Path, indent: int = 2) -> None:
    """
    Serialize data as indented JSON and write it to a file

    Args:
        data: JSON-serializable data
        output_path: Path for output file
        indent: Indentation width
    """
    text = json.dumps(data, indent=indent)
    with open(output_path, 'w') as f:
        f.write(text)


def save_points_to_csv(points: List[Point], output_path: Union[str, Path]) -> None:
    """
    Save flattened track points to CSV file

    Args:
        points: Points in extraction order
        output_path: Path for output file
    """
    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['latitude', 'longitude'])

        for point in points:
            writer.writerow([repr(point.latitude), repr(point.longitude)])

    logger.info(f"Saved {len(points)} points to {output_path}")
