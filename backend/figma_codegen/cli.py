"""Generate React/Vite files from a local Figma JSON export.

Usage:
    # First frame of the file:
    python -m figma_codegen.cli --input data/figma_file.json

    # Specific node, custom output directory:
    python -m figma_codegen.cli --input data/figma_file.json \
        --node-id 16650:538 --output-dir output/app

The input is a GET /v1/files/:key response (or its document node) saved
to disk, e.g. from the get_file MCP tool.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Dict

from .codegen import NoFrameFoundError, generate_files

DEFAULT_OUTPUT_DIR = "output/figma_app"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Figma JSON → React/Vite files")
    parser.add_argument(
        "--input", required=True,
        help="Path to a Figma file JSON export",
    )
    parser.add_argument(
        "--node-id", default=None,
        help="Node id to generate from (URL form 1-23 is accepted)",
    )
    parser.add_argument(
        "--output-dir", default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for generated files (default: {DEFAULT_OUTPUT_DIR})",
    )
    return parser.parse_args(argv)


def write_files(files: Dict[str, str], output_dir: str) -> Dict[str, str]:
    """Write generated files under ``output_dir``; returns name → absolute path.

    Raises:
        ValueError: a file name resolves outside ``output_dir``
    """
    base = os.path.abspath(output_dir)
    written: Dict[str, str] = {}
    for name, content in files.items():
        path = os.path.abspath(os.path.join(base, name))
        if os.path.commonpath([base, path]) != base:
            raise ValueError(f"Refusing to write outside output dir: {name}")
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        written[name] = path
    return written


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")

    with open(args.input, encoding="utf-8") as f:
        file_json = json.load(f)

    node_id = args.node_id.replace("-", ":") if args.node_id else None
    try:
        files = generate_files(file_json, node_id)
    except NoFrameFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    written = write_files(files, args.output_dir)
    for name, path in written.items():
        print(f"  {name} → {path}")
    print(f"{len(written)} files written to {os.path.abspath(args.output_dir)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
