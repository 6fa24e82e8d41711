"""Command line interface for Happy Families."""
