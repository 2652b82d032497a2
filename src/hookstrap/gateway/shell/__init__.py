"""Shell detection operations."""
