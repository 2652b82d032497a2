"""Subprocess execution gateway."""
