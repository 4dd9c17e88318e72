"""Flask API exposing pallet extraction to the web front end."""

from .server import create_app, run  # noqa: F401
