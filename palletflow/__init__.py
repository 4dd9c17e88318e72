"""
Palletflow package for the pallet footprint planner.

This package fetches auction listings for shipping pallets, extracts
the manifest table embedded in each listing and normalizes it into
machine-usable rows.  Each submodule implements one step of the flow:

1. **collect** – Fetch the pallet view of a listing with a bounded
   timeout and browser-like headers.  Failures are raised as
   `FetchError` so the caller can report them.
2. **normalize** – Locate the `table.data` manifest, slugify the header
   labels into column keys and convert every cell to whole inches.
   The result is an `ExtractionResult` of `labels`, `keys` and `rows`.
3. **rank** – Reduce rows to the rounded-up footprint figure
   (`ceil(sum(h * w * l * count) / 1728)`) per pallet and in total.
4. **api** – Flask application exposing `POST /api/pallet` to the web
   front end.
5. **cli** – Command line entry point wiring the above together.

Every extraction is a pure function of the fetched page; nothing is
cached or shared between requests.
"""

from importlib import metadata  # noqa: F401 (expose package version)

from .normalize import ExtractionResult, extract_table, slugify, to_inches  # noqa: F401
