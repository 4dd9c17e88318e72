"""
Pallet collection runner.

This module exposes a `collect` function that fetches several pallets
in turn, the way a planner adds auction ids one after another.  Ids are
validated and de-duplicated first; each fetch failure is recorded on its
own `PalletOutcome` and does not stop the remaining pallets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

import requests

from ..config import Settings
from ..errors import PalletflowError
from ..normalize.schema import ExtractionResult
from ..rank.area import square_feet
from .fetcher import fetch_pallet, validate_pallet_id

logger = logging.getLogger(__name__)


@dataclass
class PalletOutcome:
    """Result of looking up one pallet."""

    pallet_id: str
    result: Optional[ExtractionResult] = None
    square_feet: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.result is not None

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "palletId": self.pallet_id,
            "ftSq": self.square_feet,
            "message": self.message,
        }
        if self.result is not None:
            data.update(self.result.to_dict())
        return data


def collect(pallet_ids: Iterable[str], settings: Optional[Settings] = None) -> List[PalletOutcome]:
    """Fetch and aggregate each pallet in `pallet_ids`.

    Args:
        pallet_ids: Raw ids as typed by the user.  Invalid ids produce an
            outcome carrying the validation message; repeated ids are
            looked up once.
        settings: Settings forwarded to the fetcher.

    Returns:
        One `PalletOutcome` per distinct id, in input order.
    """
    settings = settings or Settings()
    outcomes: List[PalletOutcome] = []
    seen = set()
    stats = {
        "start_time": datetime.now(timezone.utc).isoformat(),
        "fetched": 0,
        "errors": 0,
    }
    with requests.Session() as session:
        for raw_id in pallet_ids:
            try:
                pallet_id = validate_pallet_id(raw_id)
            except PalletflowError as exc:
                logger.warning("Skipping %r: %s", raw_id, exc.message)
                outcomes.append(PalletOutcome(pallet_id=str(raw_id), message=exc.message))
                stats["errors"] += 1
                continue
            if pallet_id in seen:
                logger.warning("Pallet ID %s already in use; skipping", pallet_id)
                continue
            seen.add(pallet_id)
            try:
                result = fetch_pallet(pallet_id, settings, session)
            except PalletflowError as exc:
                logger.error("Error fetching pallet %s: %s", pallet_id, exc.message)
                outcomes.append(PalletOutcome(pallet_id=pallet_id, message=exc.message))
                stats["errors"] += 1
                continue
            outcomes.append(
                PalletOutcome(pallet_id=pallet_id, result=result, square_feet=square_feet(result.rows))
            )
            stats["fetched"] += 1
    stats["end_time"] = datetime.now(timezone.utc).isoformat()
    logger.info("Collection finished: %s", stats)
    return outcomes
