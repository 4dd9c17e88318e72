"""
HTML to pallet table extractor.

A pallet listing page carries its manifest in a `<table class="data">`
whose first `<tr class="header">` holds the column labels; every other
row is one line item.  This module locates that table with BeautifulSoup
and builds an `ExtractionResult`: labels, slugified keys and one
mapping per item row with every cell converted to inches.

Cells are joined to keys by position (the i-th cell goes to the i-th
key).  The key to position map is kept on the result so a stricter,
label-aware join can be layered on later.  Pages without the table give
an empty result instead of an error.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from bs4 import BeautifulSoup, Tag

from .dimensions import to_inches
from .schema import DataRow, ExtractionResult
from .slug import slugify

logger = logging.getLogger(__name__)

TABLE_SELECTOR = "table.data"
HEADER_SELECTOR = "tr.header"
BODY_ROW_SELECTOR = "tr:not(.header)"


def locate_table(html: str) -> Tuple[List[Tag], List[Tag]]:
    """Find the data table and split it into header cells and body rows.

    Args:
        html: Raw HTML of the listing page.

    Returns:
        A tuple `(header_cells, body_rows)` in document order.  Both are
        empty when the page has no data table; `header_cells` is empty
        when the table has no header row.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one(TABLE_SELECTOR)
    if table is None:
        return [], []
    header = table.select_one(HEADER_SELECTOR)
    header_cells = header.find_all("td") if header is not None else []
    body_rows = table.select(BODY_ROW_SELECTOR)
    return header_cells, body_rows


def assemble_row(cells: List[Tag], keys: List[str]) -> DataRow:
    """Map each cell to the key at the same position.

    Cells past the last key are dropped and repeated keys keep the
    later cell.
    """
    row: DataRow = {}
    for key, cell in zip(keys, cells):
        row[key] = to_inches(cell.get_text())
    return row


def extract_table(html: str) -> ExtractionResult:
    """Extract the pallet manifest from a listing page.

    Args:
        html: Raw HTML of the listing page.

    Returns:
        An `ExtractionResult`.  Its sequences are empty when the page
        holds no data table.
    """
    header_cells, body_rows = locate_table(html)
    result = ExtractionResult()
    for i, cell in enumerate(header_cells):
        label = cell.get_text()
        key = slugify(label)
        result.labels.append(label)
        result.keys.append(key)
        result.key_index[key] = i
    if not result.keys:
        logger.warning("No data table header found in document")
    for tr in body_rows:
        result.rows.append(assemble_row(tr.find_all("td"), result.keys))
    logger.debug("Extracted %d columns and %d rows", len(result.keys), len(result.rows))
    return result
