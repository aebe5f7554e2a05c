"""Domain layer: shell vocabulary, the profile catalog, and the error taxonomy."""
