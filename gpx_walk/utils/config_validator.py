"""Configuration validation utilities"""

from typing import List

from ..config import RenderConfig, TransformConfig
from ..exceptions import ConfigurationError


class ConfigValidator:
    """Validate configuration parameters"""

    @staticmethod
    def validate_render_config(config: RenderConfig) -> List[str]:
        """
        Validate render configuration

        Args:
            config: RenderConfig instance

        Returns:
            List of validation errors
        """
        errors = []

        if isinstance(config.zoom, bool) or not isinstance(config.zoom, int):
            errors.append(f"zoom must be an integer, got {config.zoom!r}")
        elif config.zoom < 0:
            errors.append(f"zoom must be non-negative, got {config.zoom}")

        if isinstance(config.gap_threshold_px, bool) or not isinstance(config.gap_threshold_px, (int, float)):
            errors.append(
                f"gap_threshold_px must be a number, got {config.gap_threshold_px!r}"
            )
        elif config.gap_threshold_px <= 0:
            errors.append(
                f"gap_threshold_px must be positive, got {config.gap_threshold_px}"
            )

        if isinstance(config.line_width, bool) or not isinstance(config.line_width, int):
            errors.append(f"line_width must be an integer, got {config.line_width!r}")
        elif config.line_width <= 0:
            errors.append(f"line_width must be positive, got {config.line_width}")

        if not isinstance(config.output_filename, str) or not config.output_filename:
            errors.append(f"output_filename must be a non-empty string, got {config.output_filename!r}")

        return errors

    @staticmethod
    def validate_transform_config(config: TransformConfig) -> List[str]:
        """
        Validate transform configuration

        Args:
            config: TransformConfig instance

        Returns:
            List of validation errors
        """
        errors = []

        if not isinstance(config.manifest_filename, str) or not config.manifest_filename:
            errors.append(
                f"manifest_filename must be a non-empty string, got {config.manifest_filename!r}"
            )

        if isinstance(config.indent, bool) or not isinstance(config.indent, int):
            errors.append(f"indent must be an integer, got {config.indent!r}")
        elif config.indent < 0:
            errors.append(f"indent must be non-negative, got {config.indent}")

        return errors

    @staticmethod
    def ensure_valid(errors: List[str]) -> None:
        """Raise ConfigurationError when any validation error was found"""
        if errors:
            raise ConfigurationError("; ".join(errors))
