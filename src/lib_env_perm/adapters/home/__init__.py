"""Home directory guard adapter."""
