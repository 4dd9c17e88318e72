"""
Normalization subsystem for palletflow.

This package turns a raw pallet listing page into an
`ExtractionResult`: it locates the manifest table, slugifies the header
labels into column keys and converts every item cell to whole inches.
Results can be written to CSV for offline use.

The result format is defined by the `ExtractionResult` dataclass in
`schema.py`.
"""

from .schema import ExtractionResult  # noqa: F401
from .slug import slugify  # noqa: F401
from .dimensions import to_inches  # noqa: F401
from .html_to_table import extract_table, locate_table  # noqa: F401
from .write_csv import write_rows_csv  # noqa: F401
