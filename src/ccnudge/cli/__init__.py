"""Command line interface for ccnudge."""
