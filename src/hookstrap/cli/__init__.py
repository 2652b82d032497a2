"""Command-line interface for hookstrap."""
