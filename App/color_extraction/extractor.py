"""Extraction entry points and the file-level pipeline orchestrator.

AIDEV-NOTE: extract_colors() is the pure core (sampler + clusterer). The
ColorExtractor class wraps it with Pillow decoding, optional downscaling and
progress output; none of that leaks into the core.
"""

from pathlib import Path

from PIL import Image

from models import ColorEntry, ExtractionConfig, ExtractionResult

from .clustering import cluster_samples
from .sampler import ImagePixelSource, PixelSource, sample_pixels
from .utils import downscale_image


def extract_colors(source: PixelSource) -> "list[ColorEntry]":
    """Extract the dominant colors of a pixel grid.

    Args:
        source: Width x height grid of straight-alpha RGBA pixels

    Returns:
        Ranked list of ColorEntry, descending by weight. Empty for a
        zero-area grid.
    """
    return cluster_samples(sample_pixels(source))


def extract_colors_from_image(image: Image.Image) -> "list[ColorEntry]":
    """Extract the dominant colors of an already-decoded Pillow image."""
    return extract_colors(ImagePixelSource(image))


class ColorExtractor:
    """Loads image files and extracts their dominant colors."""

    def __init__(self, config: ExtractionConfig | None = None):
        self.config = config or ExtractionConfig()

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            PIL Image in RGBA mode

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        try:
            image = Image.open(file_path)
            # AIDEV-NOTE: Always convert to RGBA for consistent sampling
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            else:
                image.load()
            return image
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

    def downscale(self, image: Image.Image) -> Image.Image:
        """Shrink image to the configured max_dimension, if any."""
        return downscale_image(image, self.config.max_dimension)

    def extract(self, image: Image.Image) -> "list[ColorEntry]":
        """Downscale (if configured) and extract colors from a loaded image."""
        return extract_colors_from_image(self.downscale(image))

    def process(self, file_path: str | Path) -> ExtractionResult:
        """Execute the complete extraction pipeline for one file.

        Args:
            file_path: Path to input image

        Returns:
            ExtractionResult with the ranked palette and image metadata

        Raises:
            ValueError: If the image cannot be decoded
        """
        self._log("Loading image...")
        image = self.load_image(file_path)
        orig_width, orig_height = image.size
        self._log(f"Loaded image with size: {orig_width}x{orig_height} pixels.")

        sampled = self.downscale(image)
        if sampled.size != image.size:
            self._log(
                f"Downscaled image to {sampled.size[0]}x{sampled.size[1]} "
                f"pixels for extraction."
            )

        self._log("Clustering colors...")
        colors = extract_colors_from_image(sampled)
        self._log(f"Found {len(colors)} color clusters.")

        return ExtractionResult(
            colors=colors,
            original_width=orig_width,
            original_height=orig_height,
            sampled_width=sampled.size[0],
            sampled_height=sampled.size[1],
        )
