"""Configuration persistence manager for the color extractor.

This module handles loading and saving of extraction settings to/from JSON files.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, ExtractionConfig, OutputFormat


class ConfigManager:
    """Handles loading and saving of extraction configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file
                (defaults to ~/.color_extractor_config.json)
        """
        self.config_path = config_path

    def load(self) -> ExtractionConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            ExtractionConfig with loaded or default values
        """
        config = ExtractionConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    config.max_dimension = _optional_positive_int(
                        data.get("max_dimension", config.max_dimension)
                    )
                    config.display_limit = _optional_positive_int(
                        data.get("display_limit", config.display_limit)
                    )
                    output_format = data.get("output_format", config.output_format)
                    if output_format in {fmt.value for fmt in OutputFormat}:
                        config.output_format = output_format
                    config.verbose = bool(data.get("verbose", config.verbose))
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            return ExtractionConfig()

        return config

    def save(self, config: ExtractionConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: ExtractionConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)


def _optional_positive_int(value) -> Optional[int]:
    """Coerce a stored limit to a positive int, or None when unset/invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None
