"""Command-line entry points for guildsim."""
