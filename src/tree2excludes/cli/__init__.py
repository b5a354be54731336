"""Command-line interface for tree2excludes."""
