"""
CSV writer for extracted pallet rows.

Writes the rows of an `ExtractionResult` to a CSV file using the
slugified keys as the header, in column order.  Cells that could not be
read as a number are written empty.  An existing file is overwritten.
"""

from __future__ import annotations

import csv

from .schema import ExtractionResult


def write_rows_csv(result: ExtractionResult, path: str) -> None:
    """Write extracted rows to a CSV file.

    Args:
        result: Extraction result whose `keys` become the header.
        path: Destination path for the CSV.
    """
    # dict.fromkeys drops repeated keys but keeps column order
    fieldnames = list(dict.fromkeys(result.keys))
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames, restval="")
        writer.writeheader()
        for row in result.rows:
            writer.writerow({k: ("" if v is None else v) for k, v in row.items()})
