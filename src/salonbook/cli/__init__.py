"""Command-line interface for salonbook."""
