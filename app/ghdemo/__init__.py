"""gh-demo - Hydrate GitHub repositories with demo content."""

__version__ = "0.1.0"
