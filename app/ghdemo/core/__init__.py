"""Hydration, cleanup and preservation logic."""
