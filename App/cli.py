"""Command-line entry point: print the dominant colors of an image file."""

import argparse
import sys
from pathlib import Path

from color_extraction import ColorExtractor, entries_to_json, entries_to_svg, format_entries
from config_manager import ConfigManager
from models import ColorEntry, ExtractionConfig, OutputFormat


def positive_int(value: str) -> int:
    """argparse type for limits that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-extract",
        description="Print the dominant colors of an image, heaviest first",
    )
    parser.add_argument("image", help="Path to image file (PNG, JPG, etc.)")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (default from config, else text)",
    )
    parser.add_argument("--limit", type=positive_int, help="Show at most N colors")
    parser.add_argument(
        "--max-dimension",
        dest="max_dimension",
        type=positive_int,
        help="Downscale so the longest side is at most this many pixels",
    )
    parser.add_argument("--output", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--verbose", action="store_true", default=None, help="Print progress"
    )
    return parser


def _merge_config(args: argparse.Namespace, config: ExtractionConfig) -> ExtractionConfig:
    """Command-line flags override the persisted configuration."""
    return ExtractionConfig(
        max_dimension=args.max_dimension if args.max_dimension is not None else config.max_dimension,
        display_limit=args.limit if args.limit is not None else config.display_limit,
        output_format=args.output_format or config.output_format,
        verbose=args.verbose if args.verbose is not None else config.verbose,
    )


def render(colors: "list[ColorEntry]", config: ExtractionConfig) -> str:
    """Render extracted colors in the configured output format."""
    output_format = OutputFormat(config.output_format)
    if output_format == OutputFormat.JSON:
        return entries_to_json(colors, config.display_limit)
    if output_format == OutputFormat.SVG:
        return entries_to_svg(colors, config.display_limit)
    return "\n".join(format_entries(colors, config.display_limit))


def main(argv: "list[str] | None" = None, config_manager: ConfigManager | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = _merge_config(args, (config_manager or ConfigManager()).load())

    extractor = ColorExtractor(config)
    try:
        result = extractor.process(args.image)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = render(result.colors, config)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        if config.verbose:
            print(f"Saved {args.output}")
    elif text:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
