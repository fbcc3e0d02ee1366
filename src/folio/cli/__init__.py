"""Command line interface for folio."""
