"""
Command line interface for palletflow.

Subcommands cover each step of the pipeline: fetching a pallet listing
and printing its extracted manifest, parsing a listing page saved to
disk, adding up the footprint of several pallets, and serving the HTTP
API used by the web front end.  The CLI stays thin and delegates to the
`collect`, `normalize`, `rank` and `api` packages.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List

from .api.server import run
from .collect.fetcher import fetch_pallet, validate_pallet_id
from .collect.runner import collect
from .config import Settings, load_settings
from .errors import PalletflowError
from .normalize.html_to_table import extract_table
from .normalize.schema import ExtractionResult
from .normalize.write_csv import write_rows_csv
from .rank.area import square_feet

logger = logging.getLogger("palletflow.cli")


def _emit(result: ExtractionResult, args: argparse.Namespace) -> None:
    if args.csv:
        write_rows_csv(result, args.csv)
        logger.info("Wrote %d rows to %s", len(result.rows), args.csv)
    payload = result.to_dict()
    payload["ftSq"] = square_feet(result.rows)
    text = json.dumps(payload, indent=2)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info("Extraction saved to %s", args.out)
    else:
        print(text)


def cmd_fetch(args: argparse.Namespace, settings: Settings) -> int:
    """Fetch one pallet and print its manifest as JSON."""
    pallet_id = validate_pallet_id(args.pallet_id)
    _emit(fetch_pallet(pallet_id, settings), args)
    return 0


def cmd_parse(args: argparse.Namespace, settings: Settings) -> int:
    """Extract the manifest from a listing page saved on disk."""
    with open(args.file, "r", encoding="utf-8") as f:
        html = f.read()
    _emit(extract_table(html), args)
    return 0


def cmd_area(args: argparse.Namespace, settings: Settings) -> int:
    """Print the footprint of each pallet and the total."""
    outcomes = collect(args.pallet_ids, settings)
    total = 0
    for i, outcome in enumerate(outcomes):
        if outcome.ok:
            print(f"{i+1:02d}. Pallet {outcome.pallet_id} – {outcome.square_feet} ft²")
            total += outcome.square_feet
        else:
            print(f"{i+1:02d}. Pallet {outcome.pallet_id} – {outcome.message}")
    print(f"Total square feet: {total} ft²")
    return 0 if all(o.ok for o in outcomes) else 1


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    """Run the HTTP API."""
    run(settings)
    return 0


def _add_output_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--out", help="Write the JSON result to this path instead of stdout")
    cmd.add_argument("--csv", help="Also write the extracted rows to this CSV path")


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="palletflow", description="Pallet manifest extractor")
    parser.add_argument("--config", help="Optional YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_cmd = subparsers.add_parser("fetch", help="Fetch a pallet listing and extract it")
    fetch_cmd.add_argument("pallet_id", help="Auction id of the pallet")
    _add_output_args(fetch_cmd)
    fetch_cmd.set_defaults(func=cmd_fetch)

    parse_cmd = subparsers.add_parser("parse", help="Extract a listing page saved to disk")
    parse_cmd.add_argument("--file", required=True, help="Path to the saved HTML page")
    _add_output_args(parse_cmd)
    parse_cmd.set_defaults(func=cmd_parse)

    area_cmd = subparsers.add_parser("area", help="Total footprint of several pallets")
    area_cmd.add_argument("pallet_ids", nargs="+", help="Auction ids of the pallets")
    area_cmd.set_defaults(func=cmd_area)

    serve_cmd = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_cmd.add_argument("--host", help="Bind address (overrides HOST)")
    serve_cmd.add_argument("--port", type=int, help="Port (overrides PORT)")
    serve_cmd.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    try:
        settings = load_settings(args.config)
        if args.command == "serve":
            overrides = {k: v for k, v in (("host", args.host), ("port", args.port)) if v}
            settings = replace(settings, **overrides)
        return args.func(args, settings)
    except PalletflowError as exc:
        logger.error("%s", exc.message)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
