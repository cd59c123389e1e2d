"""Command line interface for poker-sim."""
