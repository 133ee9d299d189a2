"""
SVG round-trip tool: parse documents into the model and write them back out.

Usage:
  python -m svgmodel input.svg                  # prints to terminal
  python -m svgmodel input.svg -o out.svg       # saves round-tripped SVG
  python -m svgmodel folder/                    # batch: writes folder/X<name>.svg
  python -m svgmodel folder/ -o output_folder/  # batch into another folder
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from svgmodel.config import settings
from svgmodel.svg.io import read_svg, svg_to_string, write_svg

# Prefix of batch outputs; inputs carrying it are skipped on later runs
OUTPUT_PREFIX = "X"


def process_file(input_path: str, output_path: str | None = None) -> bool:
    """Round-trip a single SVG file. Returns False if it could not be parsed."""
    doc = read_svg(input_path)
    if doc is None:
        print(f"  ERROR: no <svg> document in {input_path}")
        return False

    print(f"  {doc.width}x{doc.height} | {len(doc.elements)} top-level elements")

    if output_path:
        write_svg(doc, output_path)
        print(f"  → Saved: {output_path}")
    else:
        print(svg_to_string(doc))
    return True


def process_folder(input_dir: str, output_dir: str | None = None) -> tuple[int, int]:
    """Round-trip every ``*.svg`` in ``input_dir``. Returns (succeeded, total)."""
    svg_files = [
        f for f in os.listdir(input_dir)
        if f.lower().endswith(".svg") and not f.startswith(OUTPUT_PREFIX)
    ]
    out_dir = output_dir or input_dir
    os.makedirs(out_dir, exist_ok=True)

    print(f"Processing {len(svg_files)} files...\n")
    success = 0
    for fname in sorted(svg_files):
        print(f"[{fname}]")
        out_path = os.path.join(out_dir, OUTPUT_PREFIX + fname)
        if process_file(os.path.join(input_dir, fname), out_path):
            success += 1
        print()
    return success, len(svg_files)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.svgmodel_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    parser = argparse.ArgumentParser(description="SVG round-trip through svgmodel")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    args = parser.parse_args(argv)

    if os.path.isdir(args.input):
        success, total = process_folder(args.input, args.output)
        if not total:
            print("No .svg files found in folder.")
            sys.exit(1)
        print(f"Done: {success}/{total} processed → {args.output or args.input}")
        if success != total:
            sys.exit(1)
    else:
        if not os.path.exists(args.input):
            print(f"File not found: {args.input}")
            sys.exit(1)

        print(f"[{os.path.basename(args.input)}]")
        if not process_file(args.input, args.output):
            sys.exit(1)


if __name__ == "__main__":
    main()
