"""Command-line interface for pocketbook."""
