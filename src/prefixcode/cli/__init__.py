"""Command-line interface for prefixcode."""
