"""Command-line interface for Latin Drill."""
