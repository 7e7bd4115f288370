"""Utility functions for preparing images before extraction.

AIDEV-NOTE: Downscaling happens in the caller layer only. The clustering core
always sees exactly the pixels it is given.
"""

from PIL import Image


def fit_within(
    width: int, height: int, max_dimension: "int | None"
) -> "tuple[int, int, float]":
    """Compute target size so the longest side is at most max_dimension.

    Args:
        width: Original width in pixels
        height: Original height in pixels
        max_dimension: Longest allowed side, None or non-positive for no limit

    Returns:
        Tuple of (new_width, new_height, scale_factor). The scale factor
        is never greater than 1 (no upscaling).
    """
    if max_dimension is None or max_dimension <= 0 or width == 0 or height == 0:
        return width, height, 1.0

    longest = max(width, height)
    if longest <= max_dimension:
        return width, height, 1.0

    scale = max_dimension / longest
    new_width = max(1, int(round(width * scale)))
    new_height = max(1, int(round(height * scale)))
    return new_width, new_height, scale


def downscale_image(image: Image.Image, max_dimension: "int | None") -> Image.Image:
    """Shrink image to fit max_dimension while maintaining aspect ratio.

    Args:
        image: Input PIL image
        max_dimension: Longest allowed side, None to return image unchanged

    Returns:
        The original image if no resize is needed, otherwise a resized copy
    """
    width, height = image.size
    new_width, new_height, scale = fit_within(width, height, max_dimension)
    if scale == 1.0:
        return image
    return image.resize((new_width, new_height), Image.Resampling.LANCZOS)
