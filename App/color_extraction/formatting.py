"""Presentation helpers for extracted palettes: text, JSON and SVG swatches."""

import json

import svg

from models import ColorEntry


def rgb_to_hex(rgb: "tuple[int, int, int]") -> str:
    """Format an RGB triple as #rrggbb."""
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def _limited(entries: "list[ColorEntry]", limit: "int | None") -> "list[ColorEntry]":
    if limit is None:
        return list(entries)
    return list(entries[: max(0, limit)])


def format_entries(entries: "list[ColorEntry]", limit: "int | None" = None) -> "list[str]":
    """Render entries as aligned human-readable lines.

    Example line: ``#fa0000  rgb(250, 0, 0)  4.000``
    """
    lines = []
    for entry in _limited(entries, limit):
        r, g, b = entry.rgb
        rgb_text = f"rgb({r}, {g}, {b})"
        lines.append(f"{rgb_to_hex(entry.rgb)}  {rgb_text:<20} {entry.weight:.3f}")
    return lines


def entries_to_payload(
    entries: "list[ColorEntry]", limit: "int | None" = None
) -> "list[dict[str, object]]":
    return [
        {
            "hex": rgb_to_hex(entry.rgb),
            "r": entry.rgb[0],
            "g": entry.rgb[1],
            "b": entry.rgb[2],
            "weight": entry.weight,
        }
        for entry in _limited(entries, limit)
    ]


def entries_to_json(entries: "list[ColorEntry]", limit: "int | None" = None) -> str:
    return json.dumps(entries_to_payload(entries, limit), indent=2)


def entries_to_svg(
    entries: "list[ColorEntry]",
    limit: "int | None" = None,
    strip_width: int = 400,
    strip_height: int = 60,
) -> str:
    """Render a palette as an SVG strip of swatches.

    Args:
        entries: Ranked palette
        limit: Maximum number of swatches
        strip_width: Total strip width in px
        strip_height: Strip height in px

    Returns:
        SVG content as string. Each swatch's width is proportional to its
        share of the shown weight; zero-weight palettes get equal widths.

    AIDEV-NOTE: Swatch x positions are accumulated as floats so the strip
    always spans exactly strip_width.
    """
    shown = _limited(entries, limit)
    if not shown:
        # Return empty SVG if no colors
        return svg.SVG(
            viewBox=svg.ViewBoxSpec(0, 0, strip_width, strip_height), elements=[]
        ).as_str()

    total = sum(entry.weight for entry in shown)
    elements: list[svg.Element] = []
    x = 0.0
    for entry in shown:
        share = entry.weight / total if total > 0 else 1.0 / len(shown)
        width = strip_width * share
        r, g, b = entry.rgb
        elements.append(
            svg.Rect(
                x=round(x, 3),
                y=0,
                width=round(width, 3),
                height=strip_height,
                fill=f"rgb({r},{g},{b})",
            )
        )
        x += width

    return svg.SVG(
        width=strip_width,
        height=strip_height,
        viewBox=svg.ViewBoxSpec(0, 0, strip_width, strip_height),
        elements=elements,
    ).as_str()
