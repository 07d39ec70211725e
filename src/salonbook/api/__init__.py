"""HTTP API for salonbook."""

from salonbook.api.app import create_app

__all__ = ["create_app"]
