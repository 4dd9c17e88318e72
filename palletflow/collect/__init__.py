"""
Collection subsystem for palletflow.

The `collect` package talks to the auction site.  `fetcher` retrieves
one pallet listing with a bounded timeout and browser-like headers and
feeds it to the normalizer; `runner` looks up a list of pallets and
records a per-pallet outcome, so one failing id does not hide the
others.
"""

from .fetcher import (  # noqa: F401
    build_pallet_url,
    fetch_pallet,
    fetch_pallet_html,
    validate_pallet_id,
)
from .runner import PalletOutcome, collect  # noqa: F401
