"""Tests for locating the manifest table and assembling rows."""

from __future__ import annotations

import csv
from pathlib import Path

from palletflow.normalize.html_to_table import extract_table, locate_table
from palletflow.normalize.write_csv import write_rows_csv

from conftest import listing_html


def test_extract_well_formed_table(sample_html: str) -> None:
    result = extract_table(sample_html)
    assert result.labels == ["Height", "Width", "Length", "Pallet"]
    assert result.keys == ["height", "width", "length", "pallet"]
    assert result.rows == [{"height": 60, "width": 48, "length": 120, "pallet": 2}]
    assert result.key_index == {"height": 0, "width": 1, "length": 2, "pallet": 3}


def test_missing_table_yields_empty_result() -> None:
    result = extract_table("<html><body><p>Listing not found</p></body></html>")
    assert result.to_dict() == {"labels": [], "keys": [], "rows": []}
    assert result.is_empty()


def test_locate_table_without_header_row() -> None:
    html = '<table class="data"><tr><td>5</td></tr></table>'
    header_cells, body_rows = locate_table(html)
    assert header_cells == []
    assert len(body_rows) == 1


def test_labels_keep_raw_text() -> None:
    html = listing_html([" Height (in) "], [["40"]])
    result = extract_table(html)
    assert result.labels == [" Height (in) "]
    assert result.keys == ["height-in"]


def test_short_rows_give_partial_mappings() -> None:
    html = listing_html(["Height", "Width", "Length"], [["5'", "4'"], []])
    result = extract_table(html)
    assert result.rows == [{"height": 60, "width": 48}, {}]


def test_extra_cells_are_dropped() -> None:
    html = listing_html(["Height"], [["5'", "4'", "10'"]])
    assert extract_table(html).rows == [{"height": 60}]


def test_duplicate_keys_keep_later_cell() -> None:
    html = listing_html(["Size", "Size"], [["5'", "6'"]])
    result = extract_table(html)
    assert result.keys == ["size", "size"]
    assert result.rows == [{"size": 72}]
    assert result.key_index == {"size": 1}


def test_cells_join_by_position_not_label() -> None:
    html = listing_html(["Width", "Height"], [["4'", "5'"]])
    row = extract_table(html).rows[0]
    assert list(row.items()) == [("width", 48), ("height", 60)]


def test_unreadable_cell_becomes_none() -> None:
    html = listing_html(["Height", "Weight"], [["5'", "n/a"]])
    assert extract_table(html).rows == [{"height": 60, "weight": None}]


def test_write_rows_csv(tmp_path: Path) -> None:
    html = listing_html(["Height", "Width", "Note"], [["5'", "4'", "-"], ["2'"]])
    path = tmp_path / "rows.csv"
    write_rows_csv(extract_table(html), str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows == [["height", "width", "note"], ["60", "48", ""], ["24", "", ""]]


def test_oversized_cell_does_not_abort_extraction() -> None:
    html = listing_html(["Height", "Width"], [["9" * 5000, "4'"]])
    assert extract_table(html).rows == [{"height": None, "width": 48}]
