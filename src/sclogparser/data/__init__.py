"""Bundled lookup data."""
