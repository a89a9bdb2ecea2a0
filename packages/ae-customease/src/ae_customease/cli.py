# SPDX-License-Identifier: MIT
"""Command-line interface for the CustomEase exporter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ae_customease.config import ConverterConfig, OutputMode
from ae_customease.converter import convert_composition
from ae_customease.parser.dump_loader import DumpFormatError, load_keyframe_dump

CUSTOMEASE_DOCS_URL = "https://greensock.com/docs/#/HTML5/GSAP/Easing/CustomEase/"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert keyframe temporal ease into GSAP CustomEase curves"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Keyframe dump exported from the animation host (.json or .msgpack)",
    )
    parser.add_argument(
        "--array",
        action="store_true",
        help="Output normalized bezier values per segment for the first "
        "property, e.g. [0.42,0.00,0.58,1.00],[0.68,-0.55,0.27,1.55]",
    )
    parser.add_argument(
        "--no-clamp",
        action="store_true",
        help="Do not clamp infinite normalized values to +/-10",
    )
    parser.add_argument(
        "--property",
        action="append",
        dest="properties",
        metavar="NAME",
        help="Only convert the named property (repeatable, default: all)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log the ease type of every keyframe pair",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Convert a keyframe dump and print one CustomEase string per property."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        composition = load_keyframe_dump(args.input)
    except DumpFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.properties:
        missing = [
            name for name in args.properties if composition.get_property(name) is None
        ]
        if missing:
            print(f"Error: Unknown property: {', '.join(missing)}", file=sys.stderr)
            return 1
        composition.properties = [
            composition.get_property(name) for name in args.properties
        ]

    if not composition.properties:
        print(
            "Please select at least one property (Scale, Opacity, etc)",
            file=sys.stderr,
        )
        return 1

    config = ConverterConfig(
        clamp_infinite_values=not args.no_clamp,
        output_mode=(
            OutputMode.NORMALIZED_ARRAY if args.array else OutputMode.SVG_PATH
        ),
        diagnostics_enabled=args.debug,
    )

    for result in convert_composition(composition, config):
        for diagnostic in result.diagnostics:
            print(f"Warning: {diagnostic}", file=sys.stderr)

        if result.skipped:
            continue

        print(f"{result.property_name}:")
        print(result.text)
        if config.output_mode is OutputMode.SVG_PATH:
            print()
            print("Paste directly into a GSAP CustomEase, like:")
            print(f"CustomEase.create('myCustomEase', '{result.text}');")
            print(f"More info: {CUSTOMEASE_DOCS_URL}")
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
