"""Command-line interface for gh-demo."""
