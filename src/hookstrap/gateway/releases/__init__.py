"""Release metadata and artifact download gateway."""
