"""
Aggregation subsystem for palletflow.

The `rank` package reduces extracted pallet rows to the footprint
figure used for load planning:

* `area` – per-row volume, per-pallet square feet and the total
  across pallets.
"""

from .area import AreaKeys, row_cubic_inches, square_feet, total_square_feet  # noqa: F401
