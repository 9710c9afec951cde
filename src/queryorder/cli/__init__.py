"""Command line interface for queryorder."""
