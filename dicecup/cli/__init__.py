"""Command-line interface for dicecup."""
