"""Dominant color extraction.

AIDEV-NOTE: This package is organized into modular components:
- sampler: Pixel sources and RGBA -> weighted sample conversion
- clustering: Greedy online merging of samples into ranked buckets
- extractor: Core entry point plus the file-level ColorExtractor
- formatting: Text, JSON and SVG presentation of results
- utils: Image downscaling helpers
"""

from .clustering import SIMILARITY_THRESHOLD, cluster_samples
from .extractor import ColorExtractor, extract_colors, extract_colors_from_image
from .formatting import entries_to_json, entries_to_svg, format_entries, rgb_to_hex
from .sampler import ImagePixelSource, PixelGrid, PixelSource, sample_pixels

__all__ = [
    "SIMILARITY_THRESHOLD",
    "ColorExtractor",
    "ImagePixelSource",
    "PixelGrid",
    "PixelSource",
    "cluster_samples",
    "entries_to_json",
    "entries_to_svg",
    "extract_colors",
    "extract_colors_from_image",
    "format_entries",
    "rgb_to_hex",
    "sample_pixels",
]
