"""Command line interface for basegraph."""
