"""Data models and constants for the dominant color extractor."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Configuration file path
CONFIG_FILE = Path.home() / ".color_extractor_config.json"


class OutputFormat(Enum):
    """Result formats supported by the command-line entry point."""

    TEXT = "text"
    JSON = "json"
    SVG = "svg"


@dataclass(frozen=True)
class Sample:
    """One pixel's straight RGB color and its alpha-derived weight.

    AIDEV-NOTE: RGB is never blended toward a background. Transparency is
    carried by the weight alone (alpha / 255).
    """

    rgb: "tuple[int, int, int]"  # 0-255 per channel
    weight: float  # 0.0-1.0


@dataclass(frozen=True)
class ColorEntry:
    """A finalized cluster representative with its accumulated weight."""

    rgb: "tuple[int, int, int]"
    weight: float


@dataclass
class ExtractionConfig:
    """Caller-side settings for loading images and presenting results.

    AIDEV-NOTE: The clustering similarity threshold is intentionally absent.
    It is a fixed constant of the clustering module.
    """

    max_dimension: "int | None" = None  # Longest side in px, None = no downscale
    display_limit: "int | None" = None  # Max entries shown, None = all
    output_format: str = OutputFormat.TEXT.value
    verbose: bool = False  # Print pipeline progress


@dataclass
class ExtractionResult:
    """Result of the extraction pipeline for one image file."""

    # Ranked palette, descending by weight
    colors: "list[ColorEntry]" = field(default_factory=list)

    # Original image dimensions (pixels)
    original_width: int = 0
    original_height: int = 0

    # Dimensions actually sampled (after optional downscale)
    sampled_width: int = 0
    sampled_height: int = 0

    @property
    def pixel_count(self) -> int:
        return self.sampled_width * self.sampled_height

    @property
    def total_weight(self) -> float:
        return sum(entry.weight for entry in self.colors)
