"""Exceptions raised by palletflow."""

from __future__ import annotations

from typing import Optional


class PalletflowError(Exception):
    """Base class for errors reported back to the caller."""

    def __init__(self, message: str, *, pallet_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.pallet_id = pallet_id


class FetchError(PalletflowError):
    """The listing page could not be retrieved (timeout, network, HTTP status)."""


class InvalidPalletId(PalletflowError):
    """The pallet id is empty or below the lowest id the auction site issues."""


class ConfigError(PalletflowError):
    """A settings file or environment variable holds an unusable value."""
